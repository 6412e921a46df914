# decimal.py
from __future__ import annotations

import re
from typing import Optional

import numpy as np

from ..config import get_logger
from ..errors import InvalidArgument, InvalidFormat
from ..helpers.extraction import parse_symbols
from ..protocol import BitSequence
from .base import ArrayConverter

logger = get_logger(__name__)

_DECIMAL_TEXT = re.compile(r"-?[0-9]+")


class DecimalConverter(ArrayConverter):
    """
    Unsigned integers.

    ``width`` fixes the number of output bits (zero-padded on the left);
    ``None`` uses the minimal width, with ``0`` rendered as a single bit.
    """

    def __init__(self, width: Optional[int] = None):
        self.width = self._check_width(width)

    @staticmethod
    def _check_width(width: Optional[int]) -> Optional[int]:
        if width is not None and width < 0:
            raise InvalidArgument(f"width must not be negative, got {width}")
        return width

    def with_width(self, width: Optional[int]) -> "DecimalConverter":
        self.width = self._check_width(width)
        return self

    def _to_bits(self, value) -> np.ndarray:
        if isinstance(value, bool):
            raise InvalidFormat("decimal value must be an integer, got bool")
        if isinstance(value, str):
            text = value.strip()
            if _DECIMAL_TEXT.fullmatch(text) is None:
                raise InvalidFormat(f"invalid decimal string {value!r}")
            try:
                value = int(text)
            except ValueError:
                raise InvalidFormat(f"decimal string too long ({len(text)} characters)") from None
        elif isinstance(value, np.integer):
            value = int(value)
        elif not isinstance(value, int):
            raise InvalidFormat(f"decimal value must be an integer, got {type(value).__name__}")
        if value < 0:
            raise InvalidArgument(f"decimal number must be non-negative, got {value}")

        binary = format(value, "b")
        if self.width is not None:
            if len(binary) > self.width:
                raise InvalidArgument(
                    f"width {self.width} is too small for {value} ({len(binary)} bits needed)"
                )
            binary = binary.zfill(self.width)
        logger.debug(f"[DecimalConverter] {value} -> {len(binary)} bits")
        return parse_symbols(binary)

    def from_bit_sequence(self, bits: BitSequence) -> int:
        """Unsigned magnitude of the bits; an empty sequence is 0."""
        text = bits.to_string()
        return int(text, 2) if text else 0

    def __repr__(self) -> str:
        return f"<DecimalConverter width={self.width}>"
