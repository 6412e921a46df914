# bits.py
from __future__ import annotations

from typing import List

import numpy as np

from ..errors import InvalidFormat
from ..helpers.validation import validate_bit_array
from ..protocol import BitSequence
from .base import ArrayConverter


def _scalar_bit(value) -> int:
    # numbers are truncated toward zero; text must spell an integer
    if not isinstance(value, (bool, int, float, str, np.integer, np.floating)):
        raise InvalidFormat(f"bit values must be scalars, got {type(value).__name__}")
    try:
        bit = int(value)
    except (ValueError, OverflowError):
        raise InvalidFormat(f"invalid bit value {value!r}") from None
    if bit not in (0, 1):
        raise InvalidFormat(f"bit values must be 0 or 1, got {value!r}")
    return bit


class BitsConverter(ArrayConverter):
    """Lists of bit values such as ``[1, 0, 0, 1]``."""

    def _to_bits(self, value) -> np.ndarray:
        if not isinstance(value, (list, tuple)):
            raise InvalidFormat(f"bits must be a list, got {type(value).__name__}")
        return validate_bit_array(np.array([_scalar_bit(v) for v in value], dtype=np.uint8))

    def from_bit_sequence(self, bits: BitSequence) -> List[int]:
        return bits.to_list()
