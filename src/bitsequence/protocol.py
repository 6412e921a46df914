# protocol.py
from __future__ import annotations

from typing import Iterator, List, Protocol, Union, runtime_checkable

import numpy as np


@runtime_checkable
class BitSequence(Protocol):
    """
    Capability set shared by :class:`BitString` and :class:`BitStringImmutable`.

    A bit sequence is an ordered, fixed-length run of 0/1 values indexed
    from 0 (the first character of its text form).  The two variants differ
    only in ownership:

    * the mutating variant changes its own storage and returns ``self``;
    * the non-mutating variant returns a new value and leaves the receiver
      untouched.

    Extraction (``extract``, ``slice``, ``first``, ``last``, ``codeword``)
    always produces a fresh value of the receiver's variant.
    """

    # --- query ---------------------------------------------------------------
    def get(self, index: int) -> int: ...

    def length(self) -> int: ...

    def bit_count(self) -> int: ...

    def pop_count(self) -> int: ...

    def equals(self, other: Union["BitSequence", str]) -> bool: ...

    def to_string(self) -> str: ...

    def to_list(self) -> List[int]: ...

    def to_numpy(self) -> np.ndarray: ...

    # --- single bits -----------------------------------------------------------
    def set(self, index: int, value: int) -> "BitSequence": ...

    def flip(self, index: int) -> "BitSequence": ...

    # --- boolean -----------------------------------------------------------------
    def and_(self, other: Union["BitSequence", str]) -> "BitSequence": ...

    def or_(self, other: Union["BitSequence", str]) -> "BitSequence": ...

    def xor(self, other: Union["BitSequence", str]) -> "BitSequence": ...

    def not_(self) -> "BitSequence": ...

    # --- motion ------------------------------------------------------------------
    def shift_left(self, positions: int, circular: bool = False) -> "BitSequence": ...

    def shift_right(self, positions: int, circular: bool = False) -> "BitSequence": ...

    def rotate_left(self, positions: int) -> "BitSequence": ...

    def rotate_right(self, positions: int) -> "BitSequence": ...

    # --- structure -----------------------------------------------------------------
    def prepend(self, other: Union["BitSequence", str]) -> "BitSequence": ...

    def append(self, other: Union["BitSequence", str]) -> "BitSequence": ...

    def pad(self, target_length: int, prepend: bool = True) -> "BitSequence": ...

    # --- extraction ----------------------------------------------------------------
    def extract(self, position: int, length: int) -> "BitSequence": ...

    def slice(self, start: int, end: int) -> "BitSequence": ...

    def first(self, length: int) -> "BitSequence": ...

    def last(self, length: int) -> "BitSequence": ...

    def codeword(self, index: int, word_length: int) -> "BitSequence": ...

    # --- python protocol -------------------------------------------------------------
    def __len__(self) -> int: ...

    def __iter__(self) -> Iterator[int]: ...

    def __str__(self) -> str: ...
