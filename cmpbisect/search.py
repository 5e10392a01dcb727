from __future__ import generator_stop

from enum import Enum
from typing import Callable, Optional, Sequence, TypeVar

from .exceptions import InvalidArgument, NotFound
from .typing import Comparator

T = TypeVar("T")


class BisectRetVal(Enum):
    Lower = -1
    Equal = 0
    Higher = 1


def make_binary_search_sequence(
    seq: Sequence[T], target: T, compare: Comparator[T], right: bool = False
) -> Callable[[int], BisectRetVal]:

    """Creates the search function for `bisect_left_generic` and `bisect_right_generic`.
    The left one calls `compare(seq[x], target)`, the right one `compare(target, seq[x])`.
    """

    def left_func(x: int) -> BisectRetVal:
        result = compare(seq[x], target)
        if result < 0:
            return BisectRetVal.Higher
        elif result > 0:
            return BisectRetVal.Lower
        else:
            return BisectRetVal.Equal

    def right_func(x: int) -> BisectRetVal:
        result = compare(target, seq[x])
        if result < 0:
            return BisectRetVal.Lower
        elif result > 0:
            return BisectRetVal.Higher
        else:
            return BisectRetVal.Equal

    if right:
        return right_func
    return left_func


def bisect_left_generic(lo: int, hi: int, func: Callable[[int], BisectRetVal]) -> int:
    """Generic left bisection (binary search). Finds a specific `lo<=x<=hi` where
    `func(x) == BisectRetVal.Equal` or where the return value changes from BisectRetVal.Higher
    to `BisectRetVal.Lower`.
    """

    while lo < hi:
        mid = (lo + hi) // 2
        result = func(mid)
        if result == BisectRetVal.Higher:
            lo = mid + 1
        else:
            hi = mid
    return lo


def bisect_right_generic(lo: int, hi: int, func: Callable[[int], BisectRetVal]) -> int:
    """Generic right bisection (binary search). Finds a specific `lo<=x<=hi` where
    `func(x) == BisectRetVal.Equal` or where the return value changes from BisectRetVal.Higher
    to `BisectRetVal.Lower`.
    """

    while lo < hi:
        mid = (lo + hi) // 2
        result = func(mid)
        if result == BisectRetVal.Lower:
            hi = mid
        else:
            lo = mid + 1
    return lo


def _check_bounds(seq: Sequence, lo: int, hi: Optional[int]) -> int:

    """Validates the search range and returns the resolved upper bound."""

    if lo < 0:
        raise InvalidArgument(f"lo must be non-negative, not {lo}")

    length = len(seq)
    if hi is None:
        return length
    if hi > length:
        raise InvalidArgument(f"hi cannot exceed the sequence length {length}, not {hi}")
    return hi


def bisect_right(a: Sequence[T], x: T, lo: int = 0, hi: Optional[int] = None, *, compare: Comparator[T]) -> int:

    """Return the index where to insert item `x` in `a`, assuming `a[lo:hi]` is sorted by `compare`.
    The return value i is such that all e in a[lo:i] have e <= x, and all e in a[i:hi] have e > x.
    So if `x` already appears in the list, `a.insert(i, x)` will insert just after the rightmost `x`.
    `hi=None` searches to the end of `a`.

    Raises `InvalidArgument` if `lo` is negative or `hi` is larger than `len(a)`.
    A negative `hi` or a `lo` past the end is not an error, the range is empty and `lo` is returned.
    There is no `-1` sentinel for `hi`, use `None`.
    """

    hi = _check_bounds(a, lo, hi)
    return bisect_right_generic(lo, hi, make_binary_search_sequence(a, x, compare, right=True))


def bisect_left(a: Sequence[T], x: T, lo: int = 0, hi: Optional[int] = None, *, compare: Comparator[T]) -> int:

    """Return the index where to insert item `x` in `a`, assuming `a[lo:hi]` is sorted by `compare`.
    The return value i is such that all e in a[lo:i] have e < x, and all e in a[i:hi] have e >= x.
    So if `x` already appears in the list, `a.insert(i, x)` will insert just before the leftmost `x`.
    `hi=None` searches to the end of `a`.

    Raises `InvalidArgument` if `lo` is negative or `hi` is larger than `len(a)`.
    A negative `hi` or a `lo` past the end is not an error, the range is empty and `lo` is returned.
    There is no `-1` sentinel for `hi`, use `None`.
    """

    hi = _check_bounds(a, lo, hi)
    return bisect_left_generic(lo, hi, make_binary_search_sequence(a, x, compare))


bisect = bisect_right


def index(a: Sequence[T], x: T, lo: int = 0, hi: Optional[int] = None, *, compare: Comparator[T]) -> int:

    """Index of the leftmost item equal to `x`."""

    i = bisect_left(a, x, lo, hi, compare=compare)
    if i < _check_bounds(a, lo, hi) and compare(a[i], x) == 0:
        return i
    raise NotFound(x)


def find_lt(a: Sequence[T], x: T, lo: int = 0, hi: Optional[int] = None, *, compare: Comparator[T]) -> T:

    """Rightmost item less than `x`."""

    i = bisect_left(a, x, lo, hi, compare=compare)
    if i > lo:
        return a[i - 1]
    raise NotFound(x)


def find_le(a: Sequence[T], x: T, lo: int = 0, hi: Optional[int] = None, *, compare: Comparator[T]) -> T:

    """Rightmost item less than or equal to `x`."""

    i = bisect_right(a, x, lo, hi, compare=compare)
    if i > lo:
        return a[i - 1]
    raise NotFound(x)


def find_gt(a: Sequence[T], x: T, lo: int = 0, hi: Optional[int] = None, *, compare: Comparator[T]) -> T:

    """Leftmost item greater than `x`."""

    i = bisect_right(a, x, lo, hi, compare=compare)
    if i < _check_bounds(a, lo, hi):
        return a[i]
    raise NotFound(x)


def find_ge(a: Sequence[T], x: T, lo: int = 0, hi: Optional[int] = None, *, compare: Comparator[T]) -> T:

    """Leftmost item greater than or equal to `x`."""

    i = bisect_left(a, x, lo, hi, compare=compare)
    if i < _check_bounds(a, lo, hi):
        return a[i]
    raise NotFound(x)


def search_sorted(seq: Sequence[T], newitem: T, compare: Comparator[T]) -> int:

    """Linear version of `bisect_right` over the whole sequence."""

    for i, item in enumerate(seq):
        if compare(newitem, item) < 0:
            return i

    return len(seq)
