# codeword.py
from __future__ import annotations

from typing import List, Optional

import numpy as np

from ..config import get_logger, load_defaults
from ..errors import InvalidArgument, InvalidFormat
from ..helpers.extraction import parse_symbols
from ..protocol import BitSequence
from .base import ArrayConverter

logger = get_logger(__name__)


class CodewordConverter(ArrayConverter):
    """
    Lists of fixed-width codewords (bit text chunks).

    Parsing concatenates the chunks in order.  Rendering cuts the sequence
    into ``word_length``-bit words with :meth:`BitSequence.codeword`; a short
    final word is zero-padded on the right when ``pad`` is on.
    """

    def __init__(self, word_length: Optional[int] = None, pad: Optional[bool] = None):
        defaults = load_defaults()
        self.word_length = defaults.word_length if word_length is None else word_length
        self.pad = defaults.pad_codewords if pad is None else bool(pad)

    def with_word_length(self, word_length: int) -> "CodewordConverter":
        self.word_length = word_length
        return self

    def with_padding(self, pad: bool) -> "CodewordConverter":
        self.pad = bool(pad)
        return self

    def _to_bits(self, value) -> np.ndarray:
        if not isinstance(value, (list, tuple)):
            raise InvalidFormat(f"codewords must be a list of bit strings, got {type(value).__name__}")
        parts = [parse_symbols(chunk) for chunk in value]
        logger.debug(f"[CodewordConverter] joining {len(parts)} codewords")
        if not parts:
            return np.zeros(0, dtype=np.uint8)
        return np.concatenate(parts)

    def from_bit_sequence(self, bits: BitSequence) -> List[str]:
        if self.word_length < 1:
            raise InvalidArgument(f"word length must be at least 1, got {self.word_length}")
        count = -(-bits.length() // self.word_length)
        words = []
        for index in range(count):
            word = bits.codeword(index, self.word_length)
            if self.pad and word.length() < self.word_length:
                word = word.pad(self.word_length, prepend=False)
            words.append(word.to_string())
        logger.debug(f"[CodewordConverter] split {bits.length()} bits into {count} words")
        return words

    def __repr__(self) -> str:
        return f"<CodewordConverter word_length={self.word_length} pad={self.pad}>"
