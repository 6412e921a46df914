# extraction.py
"""
Array level helpers behind both bit sequence variants.

Storage is one ``uint8`` per bit, index 0 first.  Everything here works on
plain numpy arrays and returns fresh copies, so results never alias the
array they were taken from.
"""
from __future__ import annotations

from typing import Iterable, Tuple, Union

import numpy as np

from ..errors import IndexOutOfRange, InvalidArgument, InvalidFormat
from .validation import (
    validate_bit_value,
    validate_positive_length,
    validate_range,
    validate_symbols,
)

BIT_DTYPE = np.uint8
_ZERO = ord("0")


# ---------------------------------------------------------------------------
# text <-> array
# ---------------------------------------------------------------------------
def parse_symbols(text) -> np.ndarray:
    """Validate ``text`` and return it as a fresh bit array."""
    validate_symbols(text)
    raw = np.frombuffer(text.encode("ascii"), dtype=BIT_DTYPE)
    return raw - BIT_DTYPE(_ZERO)


def render(bits: np.ndarray) -> str:
    return (bits + BIT_DTYPE(_ZERO)).tobytes().decode("ascii")


def filled(length: int, value: int) -> np.ndarray:
    return np.full(length, value, dtype=BIT_DTYPE)


def bits_from_values(values: Iterable) -> np.ndarray:
    """Build a bit array from an iterable of 0/1 values."""
    return np.fromiter(
        (validate_bit_value(v) for v in values), dtype=BIT_DTYPE
    )


def as_bit_array(other) -> np.ndarray:
    """
    Coerce an operand to a bit array.

    Accepts either bit sequence variant (its storage is returned as is, so
    callers must not write to the result) or raw bit text.
    """
    if isinstance(other, str):
        return parse_symbols(other)
    bits = getattr(other, "_bits", None)
    if isinstance(bits, np.ndarray):
        return bits
    to_string = getattr(other, "to_string", None)
    if callable(to_string):
        return parse_symbols(to_string())
    raise InvalidFormat(
        f"operand must be a bit sequence or bit text, got {type(other).__name__}"
    )


# ---------------------------------------------------------------------------
# extraction
# ---------------------------------------------------------------------------
def extract_span(bits: np.ndarray, position: int, length: int) -> np.ndarray:
    """Bits ``[position, position + length)``."""
    validate_positive_length(length)
    size = bits.shape[0]
    if position < 0 or position >= size:
        raise IndexOutOfRange(f"position {position} out of bounds [0,{size})")
    if position + length > size:
        raise IndexOutOfRange(
            f"extraction of {length} bits at {position} exceeds length {size}"
        )
    return bits[position:position + length].copy()


def slice_span(bits: np.ndarray, start: int, end: int) -> np.ndarray:
    validate_range(start, end, bits.shape[0])
    return bits[start:end].copy()


def first_span(bits: np.ndarray, n: int) -> np.ndarray:
    validate_positive_length(n)
    if n > bits.shape[0]:
        raise IndexOutOfRange(f"length {n} exceeds bit sequence length {bits.shape[0]}")
    return bits[:n].copy()


def last_span(bits: np.ndarray, n: int) -> np.ndarray:
    validate_positive_length(n)
    size = bits.shape[0]
    if n > size:
        raise IndexOutOfRange(f"length {n} exceeds bit sequence length {size}")
    return bits[size - n:].copy()


def codeword_span(bits: np.ndarray, index: int, word_length: int) -> np.ndarray:
    """
    Chunk ``index`` when ``bits`` is read as ``word_length``-bit words.

    The final chunk is returned short when fewer than ``word_length`` bits
    remain; padding is left to the caller.
    """
    if word_length < 1:
        raise InvalidArgument(f"word length must be at least 1, got {word_length}")
    size = bits.shape[0]
    position = index * word_length
    if position < 0 or position >= size:
        raise IndexOutOfRange(f"codeword index {index} out of bounds for length {size}")
    return bits[position:min(position + word_length, size)].copy()


def resolve_key(key, length: int) -> Union[int, Tuple[int, int]]:
    """
    Translate a ``__getitem__`` key.

    Integers pass through; slices become ``(start, end)`` with ``None``
    defaulting to the sequence bounds.  Steps are not supported.
    """
    if isinstance(key, slice):
        if key.step is not None:
            raise InvalidArgument("bit sequence slices do not support a step")
        start = 0 if key.start is None else key.start
        end = length if key.stop is None else key.stop
        return start, end
    if isinstance(key, (int, np.integer)):
        return int(key)
    raise InvalidArgument(f"indices must be integers or slices, got {type(key).__name__}")
