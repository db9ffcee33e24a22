"""
Domain models and value objects.

Contains radices, letter case, digit tables and conversion request/result models.
"""

from baseconv.core.domain.conversion import (
    CONTRACT_SCHEMA_VERSION,
    ConversionRequest,
    ConversionResult,
)
from baseconv.core.domain.radix import (
    BINARY_BASE,
    DECIMAL_BASE,
    DEFAULT_LETTER_CASE,
    HEXADECIMAL_BASE,
    OCTAL_BASE,
    LetterCase,
    Radix,
)
from baseconv.core.domain.tables import (
    BINARY_TO_HEXADECIMAL,
    BINARY_TO_OCTAL,
    HEXADECIMAL_GROUP_WIDTH,
    HEXADECIMAL_TO_BINARY,
    HEXADECIMAL_TO_VALUE,
    OCTAL_GROUP_WIDTH,
    OCTAL_TO_BINARY,
    digit_char,
    digit_value,
)

__all__ = [
    # Radix module
    "BINARY_BASE",
    "OCTAL_BASE",
    "DECIMAL_BASE",
    "HEXADECIMAL_BASE",
    "DEFAULT_LETTER_CASE",
    "Radix",
    "LetterCase",
    # Tables module
    "OCTAL_GROUP_WIDTH",
    "HEXADECIMAL_GROUP_WIDTH",
    "BINARY_TO_OCTAL",
    "OCTAL_TO_BINARY",
    "BINARY_TO_HEXADECIMAL",
    "HEXADECIMAL_TO_BINARY",
    "HEXADECIMAL_TO_VALUE",
    "digit_value",
    "digit_char",
    # Conversion models
    "CONTRACT_SCHEMA_VERSION",
    "ConversionRequest",
    "ConversionResult",
]
