"""
baseconv — конверсия строк неотрицательных целых между binary, octal,
decimal и hexadecimal.

Re-exports the public conversion surface for convenient imports.
"""

from baseconv.core.domain import (
    ConversionRequest,
    ConversionResult,
    LetterCase,
    Radix,
)
from baseconv.core.errors import (
    BaseConversionError,
    EmptyInput,
    InvalidCharacter,
    InvalidMultiple,
    Overflow,
)
from baseconv.core.math import (
    MAX_U64,
    binary_to_decimal,
    binary_to_hexadecimal,
    binary_to_octal,
    convert,
    convert_payload,
    convert_request,
    decimal_to_binary,
    decimal_to_hexadecimal,
    decimal_to_octal,
    hexadecimal_to_binary,
    hexadecimal_to_decimal,
    hexadecimal_to_octal,
    normalize,
    octal_to_binary,
    octal_to_decimal,
    octal_to_hexadecimal,
    trim_leading_zeros,
    zero_padding,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Types
    "Radix",
    "LetterCase",
    "ConversionRequest",
    "ConversionResult",
    # Errors
    "BaseConversionError",
    "EmptyInput",
    "InvalidCharacter",
    "Overflow",
    "InvalidMultiple",
    # Utilities
    "MAX_U64",
    "normalize",
    "trim_leading_zeros",
    "zero_padding",
    # Conversions
    "binary_to_octal",
    "binary_to_decimal",
    "binary_to_hexadecimal",
    "octal_to_binary",
    "octal_to_decimal",
    "octal_to_hexadecimal",
    "decimal_to_binary",
    "decimal_to_octal",
    "decimal_to_hexadecimal",
    "hexadecimal_to_binary",
    "hexadecimal_to_octal",
    "hexadecimal_to_decimal",
    "convert",
    "convert_payload",
    "convert_request",
]
