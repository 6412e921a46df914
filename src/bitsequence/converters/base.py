# base.py
from __future__ import annotations

from abc import abstractmethod
from typing import Any, Protocol, runtime_checkable

import numpy as np

from ..bitstring import BitString
from ..bitstring_immutable import BitStringImmutable
from ..config import get_logger
from ..protocol import BitSequence

logger = get_logger(__name__)


@runtime_checkable
class Converter(Protocol):
    """Moves bit sequences to and from one external representation."""

    def to_mutable(self, value: Any) -> BitString: ...

    def to_immutable(self, value: Any) -> BitStringImmutable: ...

    def from_bit_sequence(self, bits: BitSequence) -> Any: ...


class ArrayConverter(Converter):
    """
    Shared plumbing for converters that parse into a bit array.

    Subclasses implement ``_to_bits(value)`` (validate and decode the external
    value) and ``from_bit_sequence``; both construction paths go through the
    variants' ``from_numpy`` factory.
    """

    @abstractmethod
    def _to_bits(self, value: Any) -> np.ndarray:
        raise NotImplementedError

    @abstractmethod
    def from_bit_sequence(self, bits: BitSequence) -> Any:
        raise NotImplementedError

    def to_mutable(self, value: Any) -> BitString:
        bits = self._to_bits(value)
        logger.debug(f"[{type(self).__name__}.to_mutable] {bits.shape[0]} bits")
        return BitString.from_numpy(bits)

    def to_immutable(self, value: Any) -> BitStringImmutable:
        bits = self._to_bits(value)
        logger.debug(f"[{type(self).__name__}.to_immutable] {bits.shape[0]} bits")
        return BitStringImmutable.from_numpy(bits)

    def __repr__(self) -> str:
        return f"<{type(self).__name__}>"
