# bitstring_immutable.py
from __future__ import annotations

from typing import Iterable, Iterator, List, Union

import numpy as np

from .errors import InvalidFormat
from .helpers.extraction import (
    as_bit_array,
    bits_from_values,
    codeword_span,
    extract_span,
    filled,
    first_span,
    last_span,
    parse_symbols,
    render,
    resolve_key,
    slice_span,
)
from .helpers.validation import (
    validate_bit_array,
    validate_bit_value,
    validate_index,
    validate_length,
    validate_same_length,
)
from .protocol import BitSequence

Operand = Union[BitSequence, str]


class BitStringImmutable(BitSequence):
    """
    A bit sequence value that never changes.

    Operations that would modify the bits return a new
    ``BitStringImmutable`` and leave the receiver usable as before.  The
    storage array is flagged read-only, instances hash by content and
    compare equal to any bit sequence with the same bits.
    """

    def __init__(self, bits: str = ""):
        array = parse_symbols(bits)
        array.flags.writeable = False
        self._bits = array

    @classmethod
    def _wrap(cls, array: np.ndarray) -> "BitStringImmutable":
        obj = cls.__new__(cls)
        array.flags.writeable = False
        obj._bits = array
        return obj

    # -- factories ---------------------------------------------------------
    @classmethod
    def from_string(cls, binary: str) -> "BitStringImmutable":
        return cls(binary)

    @classmethod
    def from_bits(cls, values: Iterable) -> "BitStringImmutable":
        return cls._wrap(bits_from_values(values))

    @classmethod
    def from_numpy(cls, array) -> "BitStringImmutable":
        return cls._wrap(validate_bit_array(array))

    @classmethod
    def empty(cls) -> "BitStringImmutable":
        return cls._wrap(filled(0, 0))

    @classmethod
    def zeros(cls, length: int) -> "BitStringImmutable":
        return cls._wrap(filled(validate_length(length), 0))

    @classmethod
    def ones(cls, length: int) -> "BitStringImmutable":
        return cls._wrap(filled(validate_length(length), 1))

    # -- queries -------------------------------------------------------------
    def get(self, index: int) -> int:
        validate_index(index, self._bits.shape[0])
        return int(self._bits[index])

    def length(self) -> int:
        return int(self._bits.shape[0])

    def bit_count(self) -> int:
        return int(self._bits.shape[0])

    def pop_count(self) -> int:
        return int(np.count_nonzero(self._bits))

    def equals(self, other: Operand) -> bool:
        try:
            theirs = as_bit_array(other)
        except InvalidFormat:
            return False
        return bool(np.array_equal(self._bits, theirs))

    def to_string(self) -> str:
        return render(self._bits)

    def to_list(self) -> List[int]:
        return self._bits.tolist()

    def to_numpy(self) -> np.ndarray:
        out = self._bits.copy()
        out.flags.writeable = False
        return out

    # -- single bits -----------------------------------------------------------
    def set(self, index: int, value: int) -> "BitStringImmutable":
        """Copy with bit ``index`` set to ``value``."""
        validate_index(index, self._bits.shape[0])
        bit = validate_bit_value(value)
        out = self._bits.copy()
        out[index] = bit
        return self._wrap(out)

    def flip(self, index: int) -> "BitStringImmutable":
        validate_index(index, self._bits.shape[0])
        out = self._bits.copy()
        out[index] ^= 1
        return self._wrap(out)

    # -- boolean ---------------------------------------------------------------
    def _operand(self, other: Operand) -> np.ndarray:
        theirs = as_bit_array(other)
        validate_same_length(self._bits.shape[0], theirs.shape[0])
        return theirs

    def and_(self, other: Operand) -> "BitStringImmutable":
        return self._wrap(np.bitwise_and(self._bits, self._operand(other)))

    def or_(self, other: Operand) -> "BitStringImmutable":
        return self._wrap(np.bitwise_or(self._bits, self._operand(other)))

    def xor(self, other: Operand) -> "BitStringImmutable":
        return self._wrap(np.bitwise_xor(self._bits, self._operand(other)))

    def not_(self) -> "BitStringImmutable":
        return self._wrap(np.bitwise_xor(self._bits, np.uint8(1)))

    # -- shifts and rotations -----------------------------------------------------
    def shift_left(self, positions: int, circular: bool = False) -> "BitStringImmutable":
        size = self._bits.shape[0]
        positions = positions % size if size else 0
        if circular:
            return self.rotate_left(positions)
        return self._wrap(np.concatenate((self._bits[positions:], filled(positions, 0))))

    def shift_right(self, positions: int, circular: bool = False) -> "BitStringImmutable":
        size = self._bits.shape[0]
        positions = positions % size if size else 0
        if circular:
            return self.rotate_right(positions)
        return self._wrap(np.concatenate((filled(positions, 0), self._bits[:size - positions])))

    def rotate_left(self, positions: int) -> "BitStringImmutable":
        """``positions`` (mod length) leading bits move to the end."""
        size = self._bits.shape[0]
        return self._wrap(np.roll(self._bits, -(positions % size) if size else 0))

    def rotate_right(self, positions: int) -> "BitStringImmutable":
        size = self._bits.shape[0]
        return self._wrap(np.roll(self._bits, positions % size if size else 0))

    # -- structure -------------------------------------------------------------------
    def prepend(self, other: Operand) -> "BitStringImmutable":
        return self._wrap(np.concatenate((as_bit_array(other), self._bits)))

    def append(self, other: Operand) -> "BitStringImmutable":
        return self._wrap(np.concatenate((self._bits, as_bit_array(other))))

    def pad(self, target_length: int, prepend: bool = True) -> "BitStringImmutable":
        """
        Zero-filled copy of exactly ``target_length`` bits.

        Targets that are negative or not longer than the current length
        give an equal copy.
        """
        size = self._bits.shape[0]
        if target_length < 0 or target_length <= size:
            return self._wrap(self._bits.copy())
        fill = filled(target_length - size, 0)
        parts = (fill, self._bits) if prepend else (self._bits, fill)
        return self._wrap(np.concatenate(parts))

    # -- extraction --------------------------------------------------------------------
    def extract(self, position: int, length: int) -> "BitStringImmutable":
        return self._wrap(extract_span(self._bits, position, length))

    def slice(self, start: int, end: int) -> "BitStringImmutable":
        return self._wrap(slice_span(self._bits, start, end))

    def first(self, length: int) -> "BitStringImmutable":
        return self._wrap(first_span(self._bits, length))

    def last(self, length: int) -> "BitStringImmutable":
        return self._wrap(last_span(self._bits, length))

    def codeword(self, index: int, word_length: int) -> "BitStringImmutable":
        return self._wrap(codeword_span(self._bits, index, word_length))

    # -- copies ------------------------------------------------------------------------
    def copy(self) -> "BitStringImmutable":
        return self._wrap(self._bits.copy())

    def to_mutable(self):
        from .bitstring import BitString
        return BitString._wrap(self._bits.copy())

    def to_immutable(self) -> "BitStringImmutable":
        return self

    # -- python protocol -------------------------------------------------------------
    def __len__(self) -> int:
        return int(self._bits.shape[0])

    def __iter__(self) -> Iterator[int]:
        return iter(self._bits.tolist())

    def __getitem__(self, key):
        resolved = resolve_key(key, self._bits.shape[0])
        if isinstance(resolved, tuple):
            return self.slice(*resolved)
        return self.get(resolved)

    def __eq__(self, other):
        if isinstance(other, BitSequence):
            return self.equals(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self._bits.shape[0], self._bits.tobytes()))

    def __str__(self) -> str:
        return render(self._bits)

    def __repr__(self) -> str:
        return f"BitStringImmutable({render(self._bits)!r})"

    def __and__(self, other):
        return self.and_(other)

    def __or__(self, other):
        return self.or_(other)

    def __xor__(self, other):
        return self.xor(other)

    def __invert__(self):
        return self.not_()

    def __lshift__(self, positions: int):
        return self.shift_left(positions)

    def __rshift__(self, positions: int):
        return self.shift_right(positions)

    def __add__(self, other):
        return self.append(other)
