"""
Contract Validation Module

JSON Schema контракты запросов и результатов конверсии.
"""

from .validators import (
    CONTRACTS,
    REQUEST_SCHEMA,
    RESULT_SCHEMA,
    ConversionContracts,
    load_schema,
    validate_conversion_request,
    validate_conversion_result,
)

__all__ = [
    "CONTRACTS",
    "REQUEST_SCHEMA",
    "RESULT_SCHEMA",
    "ConversionContracts",
    "load_schema",
    "validate_conversion_request",
    "validate_conversion_result",
]
