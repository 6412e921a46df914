# hexadecimal.py
from __future__ import annotations

import re

import numpy as np

from ..config import get_logger, load_defaults
from ..errors import InvalidFormat
from ..protocol import BitSequence
from .base import ArrayConverter

logger = get_logger(__name__)

HEX = "0123456789ABCDEF"
_HEX_TEXT = re.compile(r"[0-9A-Fa-f]+")
_NIBBLE_WEIGHTS = np.array([8, 4, 2, 1], dtype=np.uint8)


class HexConverter(ArrayConverter):
    """
    Hexadecimal text, one digit per 4 bits.

    Parsing accepts an optional ``0x``/``0X`` prefix and either digit case.
    Rendering groups bits into nibbles from the right, zero-padding the
    leftmost nibble, and emits uppercase digits with an optional ``0x``.
    """

    def __init__(self, prefix: bool | None = None):
        self.prefix = load_defaults().hex_prefix if prefix is None else bool(prefix)

    def with_prefix(self, prefix: bool = True) -> "HexConverter":
        self.prefix = bool(prefix)
        return self

    def _to_bits(self, value) -> np.ndarray:
        if not isinstance(value, str):
            raise InvalidFormat(f"hex value must be a string, got {type(value).__name__}")
        digits = value[2:] if value[:2] in ("0x", "0X") else value
        if _HEX_TEXT.fullmatch(digits) is None:
            raise InvalidFormat(f"invalid hexadecimal string {value!r}")
        nibbles = np.array([int(ch, 16) for ch in digits], dtype=np.uint8)
        # low 4 bits of each byte, most significant first
        bits = np.unpackbits(nibbles[:, None], axis=1)[:, 4:]
        logger.debug(f"[HexConverter] parsed {len(digits)} digits")
        return bits.reshape(-1)

    def from_bit_sequence(self, bits: BitSequence) -> str:
        raw = bits.to_numpy()
        padding = (4 - raw.shape[0] % 4) % 4
        padded = np.concatenate((np.zeros(padding, dtype=np.uint8), raw))
        values = padded.reshape(-1, 4) @ _NIBBLE_WEIGHTS
        text = "".join(HEX[v] for v in values.tolist())
        return ("0x" if self.prefix else "") + text

    def __repr__(self) -> str:
        return f"<HexConverter prefix={self.prefix}>"
