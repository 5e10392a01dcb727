from functools import wraps
from itertools import zip_longest
from typing import Any, Callable, Iterable, Optional, Sequence, TypeVar
from unittest import TestCase

from .typing import Comparator

T = TypeVar("T")


class MyTestCase(TestCase):
    def assertIterEqual(self, first: Iterable, second: Iterable, msg: Optional[str] = None) -> None:
        suffix = f" : {msg}" if msg else ""
        for i, (a, b) in enumerate(zip_longest(first, second)):
            self.assertEqual(a, b, msg=f"in iteration index {i}{suffix}")

    def assertAllEqual(self, args: Iterable, msg: Optional[str] = None) -> None:
        it = iter(args)
        first = next(it)
        for second in it:
            self.assertEqual(first, second, msg)

    def assertSorted(self, seq: Sequence[T], compare: Comparator[T], msg: Optional[str] = None) -> None:
        for i in range(1, len(seq)):
            if compare(seq[i - 1], seq[i]) > 0:
                self.fail(msg or f"{seq!r} is not sorted at index {i}")


def random_arguments(n: int, *funcs: Callable[[], Any]) -> Callable[[Callable], Callable]:
    def decorator(func):
        @wraps(func)
        def inner(self):
            for i in range(n):
                with self.subTest(str(i)):
                    if func(self, *(f() for f in funcs)) is not None:
                        raise AssertionError

        return inner

    return decorator


# also called: parameterize
def parametrize(*args_list: tuple) -> Callable[[Callable], Callable]:
    def decorator(func):
        @wraps(func)
        def inner(self):
            for args in args_list:
                with self.subTest(str(args)[:1000]):
                    if func(self, *args) is not None:
                        raise AssertionError

        return inner

    return decorator
