from __future__ import generator_stop


class InvalidArgument(ValueError):
    """Raised when a search or insertion is called with bounds outside the sequence,
    ie. a negative `lo` or a `hi` larger than the length of the sequence.
    This is a programming error on the side of the caller and is never recovered from.
    """


class NotFound(LookupError):
    """Raised when a search doesn't turn up any results.
    Similar to KeyError or IndexError.
    """
