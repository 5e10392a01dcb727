from .compare import (
    compare,
    compare_bool,
    compare_byte,
    compare_char,
    compare_float32,
    compare_float64,
    compare_int,
    compare_str,
    compare_uint,
    key_comparator,
    reverse_comparator,
)
from .exceptions import InvalidArgument, NotFound
from .insort import insort, insort_left, insort_right
from .search import bisect, bisect_left, bisect_right, find_ge, find_gt, find_le, find_lt, index

__version__ = "0.1.0"

__all__ = [
    "bisect",
    "bisect_left",
    "bisect_right",
    "insort",
    "insort_left",
    "insort_right",
    "index",
    "find_lt",
    "find_le",
    "find_gt",
    "find_ge",
    "compare",
    "compare_str",
    "compare_int",
    "compare_uint",
    "compare_float32",
    "compare_float64",
    "compare_bool",
    "compare_byte",
    "compare_char",
    "reverse_comparator",
    "key_comparator",
    "InvalidArgument",
    "NotFound",
]
