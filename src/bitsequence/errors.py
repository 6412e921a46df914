# errors.py
"""Error kinds raised by bit sequences and their converters."""


class BitSequenceError(Exception):
    """Base class for every failure signalled by this package."""


class InvalidFormat(BitSequenceError, ValueError):
    """Raised when a value is not bit text or cannot be parsed from its external format."""


class InvalidArgument(BitSequenceError, ValueError):
    """Raised when a numeric argument breaks a semantic precondition (lengths, widths, start >= end)."""


class IndexOutOfRange(BitSequenceError, IndexError):
    """Raised when a position falls outside the sequence."""
