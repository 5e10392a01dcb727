from __future__ import generator_stop

import logging
from typing import MutableSequence, Optional, TypeVar

from .search import bisect_left, bisect_right
from .typing import Comparator

T = TypeVar("T")

logger = logging.getLogger(__name__)


def insort_right(
    a: MutableSequence[T], x: T, lo: int = 0, hi: Optional[int] = None, *, compare: Comparator[T]
) -> None:

    """Insert item `x` in `a` in place, and keep it sorted assuming `a[lo:hi]` is sorted by `compare`.
    If `x` is already in `a`, insert it to the right of the rightmost `x`.
    `a` is not modified if the bounds are invalid.
    """

    i = bisect_right(a, x, lo, hi, compare=compare)
    logger.debug("Inserting %r at index %d", x, i)
    a.insert(i, x)


def insort_left(
    a: MutableSequence[T], x: T, lo: int = 0, hi: Optional[int] = None, *, compare: Comparator[T]
) -> None:

    """Insert item `x` in `a` in place, and keep it sorted assuming `a[lo:hi]` is sorted by `compare`.
    If `x` is already in `a`, insert it to the left of the leftmost `x`.
    `a` is not modified if the bounds are invalid.
    """

    i = bisect_left(a, x, lo, hi, compare=compare)
    logger.debug("Inserting %r at index %d", x, i)
    a.insert(i, x)


insort = insort_right
