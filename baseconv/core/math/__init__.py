"""
Core math modules для baseconv

Валидация, нормализация, 64-битное накопление и конверсии между системами.
"""

# Validation
from baseconv.core.math.validation import (
    is_valid_string,
    validate_digit,
    validate_non_empty,
    validate_string,
)

# Normalization
from baseconv.core.math.normalization import (
    normalize,
    split_groups,
    trim_leading_zeros,
    zero_padding,
)

# UInt64
from baseconv.core.math.uint64 import (
    MAX_U64,
    checked_multiply_add,
    format_uint64,
    parse_uint64,
)

# Conversions
from baseconv.core.math.conversions import (
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
    octal_to_binary,
    octal_to_decimal,
    octal_to_hexadecimal,
)

__all__ = [
    # Validation
    "is_valid_string",
    "validate_digit",
    "validate_non_empty",
    "validate_string",
    # Normalization
    "normalize",
    "split_groups",
    "trim_leading_zeros",
    "zero_padding",
    # UInt64
    "MAX_U64",
    "checked_multiply_add",
    "format_uint64",
    "parse_uint64",
    # Conversions
    "binary_to_decimal",
    "binary_to_hexadecimal",
    "binary_to_octal",
    "octal_to_binary",
    "octal_to_decimal",
    "octal_to_hexadecimal",
    "decimal_to_binary",
    "decimal_to_hexadecimal",
    "decimal_to_octal",
    "hexadecimal_to_binary",
    "hexadecimal_to_decimal",
    "hexadecimal_to_octal",
    "convert",
    "convert_payload",
    "convert_request",
]
