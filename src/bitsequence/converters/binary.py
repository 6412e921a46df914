# binary.py
from __future__ import annotations

import numpy as np

from ..helpers.extraction import parse_symbols
from ..protocol import BitSequence
from .base import ArrayConverter


class BinaryConverter(ArrayConverter):
    """Binary text such as ``"10110101"``; the identity format."""

    def _to_bits(self, value) -> np.ndarray:
        return parse_symbols(value)

    def from_bit_sequence(self, bits: BitSequence) -> str:
        return bits.to_string()
