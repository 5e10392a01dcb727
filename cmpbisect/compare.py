from __future__ import generator_stop

from typing import Callable, TypeVar, Union

from .typing import Comparator, Orderable

T = TypeVar("T")
U = TypeVar("U")


def compare(a: Orderable, b: Orderable) -> int:

    """Three-way comparison of `a` and `b` (aka cmp).
    Returns -1 if `a < b`, 1 if `a > b` and 0 otherwise.
    Values which are neither smaller nor larger, like NaN, compare as equal.
    """

    return (a > b) - (a < b)


def compare_str(a: str, b: str) -> int:
    """Lexicographic order of code points."""

    return compare(a, b)


def compare_int(a: int, b: int) -> int:
    return compare(a, b)


def compare_uint(a: int, b: int) -> int:
    # python has no unsigned type, the ordering is the same
    return compare(a, b)


def compare_float32(a: float, b: float) -> int:
    return compare(a, b)


def compare_float64(a: float, b: float) -> int:
    return compare(a, b)


def compare_bool(a: bool, b: bool) -> int:

    """`False` is smaller than `True`."""

    if a == b:
        return 0
    if a:
        return 1
    return -1


def _byte_value(x: Union[int, bytes]) -> int:
    if isinstance(x, bytes):
        (x,) = x  # single byte only
    return x


def compare_byte(a: Union[int, bytes], b: Union[int, bytes]) -> int:

    """Compares single bytes. Either as `int` like they are returned by indexing `bytes`,
    or as `bytes` objects of length 1.
    """

    return compare(_byte_value(a), _byte_value(b))


def compare_char(a: str, b: str) -> int:
    """Compares single characters by code point."""

    return compare(ord(a), ord(b))


def reverse_comparator(compare: Comparator[T]) -> Comparator[T]:

    """Inverts the order of `compare`. Use it to search sequences sorted in descending order.
    eg. bisect_right([3, 2, 1], 2, compare=reverse_comparator(compare_int)) -> 2
    """

    def reversed_compare(a: T, b: T) -> int:
        return compare(b, a)

    return reversed_compare


def key_comparator(key: Callable[[T], U], compare: Comparator[U] = compare) -> Comparator[T]:

    """Creates a comparator which compares `key(a)` with `key(b)` using `compare`.
    The key is applied to both sides, so the searched value must be of the same type
    as the elements of the sequence.
    eg. key_comparator(itemgetter(1), compare_int)
    """

    def keyed_compare(a: T, b: T) -> int:
        return compare(key(a), key(b))

    return keyed_compare
