# validation.py
"""
Argument checks shared by both bit sequence variants.

Every function is pure: it either hands back the validated value or raises
exactly one of :class:`InvalidFormat`, :class:`InvalidArgument` or
:class:`IndexOutOfRange`.  Callers run these before touching storage, so a
failed call never leaves a sequence half modified.
"""
from __future__ import annotations

import re
from typing import Tuple

import numpy as np

from ..errors import IndexOutOfRange, InvalidArgument, InvalidFormat

_BIT_TEXT = re.compile(r"[01]*")


def validate_symbols(candidate) -> str:
    """Return ``candidate`` if it is a string of ``0``/``1`` characters (possibly empty)."""
    if not isinstance(candidate, str):
        raise InvalidFormat(f"bit text must be a string, got {type(candidate).__name__}")
    if _BIT_TEXT.fullmatch(candidate) is None:
        raise InvalidFormat("bit text must contain only 0 and 1")
    return candidate


def validate_index(index: int, length: int) -> int:
    if not isinstance(index, (int, np.integer)):
        raise InvalidArgument(f"index must be an integer, got {type(index).__name__}")
    if index < 0 or index >= length:
        raise IndexOutOfRange(f"index {index} out of bounds [0,{length})")
    return int(index)


def validate_range(start: int, end: int, length: int) -> Tuple[int, int]:
    """Check the half-open interval ``[start, end)`` against ``length``."""
    if start >= end:
        raise InvalidArgument(f"start must be less than end (start={start}, end={end})")
    if start < 0 or start >= length:
        raise IndexOutOfRange(f"start position {start} out of bounds [0,{length})")
    if end > length:
        raise IndexOutOfRange(f"end position {end} exceeds length {length}")
    return start, end


def validate_positive_length(n: int) -> int:
    if n < 1:
        raise InvalidArgument(f"length must be at least 1, got {n}")
    return n


def validate_same_length(a: int, b: int) -> int:
    if a != b:
        raise InvalidArgument(f"bit sequences must have the same length ({a} vs {b})")
    return a


def validate_length(n: int) -> int:
    """Factory lengths may be zero but never negative."""
    if n < 0:
        raise InvalidArgument(f"length must not be negative, got {n}")
    return n


def validate_bit_value(value) -> int:
    if value not in (0, 1):
        raise InvalidArgument(f"bit value must be 0 or 1, got {value!r}")
    return int(value)


def validate_bit_array(array) -> np.ndarray:
    """Return ``array`` as a 1-D ``uint8`` copy if it only holds 0 and 1."""
    arr = np.asarray(array)
    if arr.ndim != 1:
        raise InvalidFormat(f"bit array must be one-dimensional, got shape {arr.shape}")
    if arr.size and (arr.dtype.kind not in "biuf" or not np.isin(arr, (0, 1)).all()):
        raise InvalidFormat("bit array must contain only 0 and 1")
    return arr.astype(np.uint8, copy=True)
