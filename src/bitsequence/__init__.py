"""
bitsequence - fixed-length bit sequences in two flavours.

``BitString`` changes in place and returns itself for chaining;
``BitStringImmutable`` returns a new value from every operation.  Both
implement the ``BitSequence`` protocol, and the converters in
``bitsequence.converters`` move them to and from binary text, hex text,
unsigned integers, codeword chunks and lists of bits.
"""

__version__ = "0.1.0"

from .errors import BitSequenceError, IndexOutOfRange, InvalidArgument, InvalidFormat
from .protocol import BitSequence
from .bitstring import BitString
from .bitstring_immutable import BitStringImmutable
from .config import Defaults, configure_logging, get_logger, load_defaults
from .converters import (
    BinaryConverter,
    BitsConverter,
    CodewordConverter,
    Converter,
    DecimalConverter,
    HexConverter,
)

__all__ = [
    "BitSequenceError",
    "IndexOutOfRange",
    "InvalidArgument",
    "InvalidFormat",
    "BitSequence",
    "BitString",
    "BitStringImmutable",
    "Defaults",
    "configure_logging",
    "get_logger",
    "load_defaults",
    "BinaryConverter",
    "BitsConverter",
    "CodewordConverter",
    "Converter",
    "DecimalConverter",
    "HexConverter",
]
