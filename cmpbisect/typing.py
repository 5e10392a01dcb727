from __future__ import generator_stop

from typing import Any, Callable, TypeVar

from typing_extensions import Protocol  # typing.Protocol is availalble in Python 3.8+

T = TypeVar("T")

Comparator = Callable[[T, T], int]


class Orderable(Protocol):
    def __lt__(self, other: Any) -> bool:
        ...

    def __gt__(self, other: Any) -> bool:
        ...
