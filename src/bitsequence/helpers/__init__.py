from .validation import (
    validate_bit_array,
    validate_bit_value,
    validate_index,
    validate_length,
    validate_positive_length,
    validate_range,
    validate_same_length,
    validate_symbols,
)
from .extraction import (
    BIT_DTYPE,
    as_bit_array,
    codeword_span,
    extract_span,
    first_span,
    last_span,
    parse_symbols,
    render,
    slice_span,
)

__all__ = [
    "validate_bit_array",
    "validate_bit_value",
    "validate_index",
    "validate_length",
    "validate_positive_length",
    "validate_range",
    "validate_same_length",
    "validate_symbols",
    "BIT_DTYPE",
    "as_bit_array",
    "codeword_span",
    "extract_span",
    "first_span",
    "last_span",
    "parse_symbols",
    "render",
    "slice_span",
]
