from .base import ArrayConverter, Converter
from .binary import BinaryConverter
from .bits import BitsConverter
from .codeword import CodewordConverter
from .decimal import DecimalConverter
from .hexadecimal import HexConverter

__all__ = [
    "ArrayConverter",
    "Converter",
    "BinaryConverter",
    "BitsConverter",
    "CodewordConverter",
    "DecimalConverter",
    "HexConverter",
]
