# bitstring.py
"""
BitString: a bit sequence that changes in place.

Every operation that "changes" the value writes into this object's own
storage and hands back ``self`` so calls can be chained::

    bits = BitString.from_string("10110101")
    bits.shift_left(2).flip(0).append("11")

Anyone holding a reference sees every change.  Extraction (``extract``,
``slice``, ``first``, ``last``, ``codeword``) is the exception: it copies
the requested bits into a new, independent ``BitString``.
"""
from __future__ import annotations

from typing import Iterable, Iterator, List, Union

import numpy as np

from .errors import InvalidArgument, InvalidFormat
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


class BitString(BitSequence):
    def __init__(self, bits: str = ""):
        self._bits = parse_symbols(bits)

    # ==============================================================
    # factories
    # ==============================================================
    @classmethod
    def _wrap(cls, array: np.ndarray) -> "BitString":
        # ``array`` must be owned by the new instance
        obj = cls.__new__(cls)
        obj._bits = array
        return obj

    @classmethod
    def from_string(cls, binary: str) -> "BitString":
        """Parse bit text such as ``"10110101"``; raises InvalidFormat on other characters."""
        return cls(binary)

    @classmethod
    def from_bits(cls, values: Iterable) -> "BitString":
        """Build from an iterable of 0/1 values."""
        return cls._wrap(bits_from_values(values))

    @classmethod
    def from_numpy(cls, array) -> "BitString":
        """Copy a 1-D array of 0/1 values."""
        return cls._wrap(validate_bit_array(array))

    @classmethod
    def empty(cls) -> "BitString":
        return cls._wrap(filled(0, 0))

    @classmethod
    def zeros(cls, length: int) -> "BitString":
        return cls._wrap(filled(validate_length(length), 0))

    @classmethod
    def ones(cls, length: int) -> "BitString":
        return cls._wrap(filled(validate_length(length), 1))

    # ==============================================================
    # queries
    # ==============================================================
    def get(self, index: int) -> int:
        validate_index(index, self._bits.shape[0])
        return int(self._bits[index])

    def length(self) -> int:
        return int(self._bits.shape[0])

    def bit_count(self) -> int:
        """Alias for :meth:`length`."""
        return int(self._bits.shape[0])

    def pop_count(self) -> int:
        return int(np.count_nonzero(self._bits))

    def equals(self, other: Operand) -> bool:
        """Content equality against either variant or raw bit text."""
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
        """Read-only copy of the bits as ``uint8``."""
        out = self._bits.copy()
        out.flags.writeable = False
        return out

    # ==============================================================
    # single bits
    # ==============================================================
    def set(self, index: int, value: int) -> "BitString":
        validate_index(index, self._bits.shape[0])
        self._bits[index] = validate_bit_value(value)
        return self

    def flip(self, index: int) -> "BitString":
        validate_index(index, self._bits.shape[0])
        self._bits[index] ^= 1
        return self

    # ==============================================================
    # boolean
    # ==============================================================
    def _operand(self, other: Operand) -> np.ndarray:
        theirs = as_bit_array(other)
        validate_same_length(self._bits.shape[0], theirs.shape[0])
        return theirs

    def and_(self, other: Operand) -> "BitString":
        np.bitwise_and(self._bits, self._operand(other), out=self._bits)
        return self

    def or_(self, other: Operand) -> "BitString":
        np.bitwise_or(self._bits, self._operand(other), out=self._bits)
        return self

    def xor(self, other: Operand) -> "BitString":
        np.bitwise_xor(self._bits, self._operand(other), out=self._bits)
        return self

    def not_(self) -> "BitString":
        np.bitwise_xor(self._bits, 1, out=self._bits)
        return self

    # ==============================================================
    # shifts and rotations
    # ==============================================================
    def shift_left(self, positions: int, circular: bool = False) -> "BitString":
        """Drop the first ``positions`` bits and zero-fill at the end (mod length)."""
        size = self._bits.shape[0]
        if size == 0:
            return self
        positions %= size
        if circular:
            return self.rotate_left(positions)
        if positions:
            self._bits[:size - positions] = self._bits[positions:]
            self._bits[size - positions:] = 0
        return self

    def shift_right(self, positions: int, circular: bool = False) -> "BitString":
        """Drop the last ``positions`` bits and zero-fill at the start (mod length)."""
        size = self._bits.shape[0]
        if size == 0:
            return self
        positions %= size
        if circular:
            return self.rotate_right(positions)
        if positions:
            self._bits[positions:] = self._bits[:size - positions]
            self._bits[:positions] = 0
        return self

    def rotate_left(self, positions: int) -> "BitString":
        size = self._bits.shape[0]
        if size and positions % size:
            self._bits[:] = np.roll(self._bits, -(positions % size))
        return self

    def rotate_right(self, positions: int) -> "BitString":
        size = self._bits.shape[0]
        if size and positions % size:
            self._bits[:] = np.roll(self._bits, positions % size)
        return self

    # ==============================================================
    # structure
    # ==============================================================
    def prepend(self, other: Operand) -> "BitString":
        self._bits = np.concatenate((as_bit_array(other), self._bits))
        return self

    def append(self, other: Operand) -> "BitString":
        self._bits = np.concatenate((self._bits, as_bit_array(other)))
        return self

    def pad(self, target_length: int, prepend: bool = True) -> "BitString":
        """
        Zero-fill up to ``target_length`` bits, at the front by default.

        A negative target or one not longer than the current length leaves
        the sequence as it is.
        """
        size = self._bits.shape[0]
        if target_length < 0 or target_length <= size:
            return self
        fill = filled(target_length - size, 0)
        if prepend:
            self._bits = np.concatenate((fill, self._bits))
        else:
            self._bits = np.concatenate((self._bits, fill))
        return self

    # ==============================================================
    # extraction (always a new BitString)
    # ==============================================================
    def extract(self, position: int, length: int) -> "BitString":
        return self._wrap(extract_span(self._bits, position, length))

    def slice(self, start: int, end: int) -> "BitString":
        return self._wrap(slice_span(self._bits, start, end))

    def first(self, length: int) -> "BitString":
        return self._wrap(first_span(self._bits, length))

    def last(self, length: int) -> "BitString":
        return self._wrap(last_span(self._bits, length))

    def codeword(self, index: int, word_length: int) -> "BitString":
        return self._wrap(codeword_span(self._bits, index, word_length))

    # ==============================================================
    # copies
    # ==============================================================
    def copy(self) -> "BitString":
        return self._wrap(self._bits.copy())

    def to_mutable(self) -> "BitString":
        """Independent copy; the receiver keeps its own storage."""
        return self.copy()

    def to_immutable(self):
        from .bitstring_immutable import BitStringImmutable
        return BitStringImmutable._wrap(self._bits.copy())

    # ==============================================================
    # python protocol
    # ==============================================================
    def __len__(self) -> int:
        return int(self._bits.shape[0])

    def __iter__(self) -> Iterator[int]:
        return iter(self._bits.tolist())

    def __getitem__(self, key):
        resolved = resolve_key(key, self._bits.shape[0])
        if isinstance(resolved, tuple):
            return self.slice(*resolved)
        return self.get(resolved)

    def __setitem__(self, key, value):
        if isinstance(key, slice):
            raise InvalidArgument("slice assignment is not supported; use set() per bit")
        self.set(resolve_key(key, self._bits.shape[0]), value)

    def __eq__(self, other):
        if isinstance(other, BitSequence):
            return self.equals(other)
        return NotImplemented

    __hash__ = None  # mutable

    def __str__(self) -> str:
        return render(self._bits)

    def __repr__(self) -> str:
        return f"BitString({render(self._bits)!r})"

    # new values
    def __and__(self, other):
        return self.copy().and_(other)

    def __or__(self, other):
        return self.copy().or_(other)

    def __xor__(self, other):
        return self.copy().xor(other)

    def __invert__(self):
        return self.copy().not_()

    def __lshift__(self, positions: int):
        return self.copy().shift_left(positions)

    def __rshift__(self, positions: int):
        return self.copy().shift_right(positions)

    def __add__(self, other):
        return self.copy().append(other)

    # in place
    def __iand__(self, other):
        return self.and_(other)

    def __ior__(self, other):
        return self.or_(other)

    def __ixor__(self, other):
        return self.xor(other)

    def __ilshift__(self, positions: int):
        return self.shift_left(positions)

    def __irshift__(self, positions: int):
        return self.shift_right(positions)

    def __iadd__(self, other):
        return self.append(other)
