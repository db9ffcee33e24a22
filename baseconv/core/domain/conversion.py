"""
Conversion — Модели запроса и результата конверсии

Immutable Pydantic модели для передачи конверсий через границы
(JSON payloads). Полная совместимость с JSON Schema
(core/contracts/schema/conversion_request.json, conversion_result.json).
"""

from typing import Final

from pydantic import BaseModel, Field

from baseconv.core.domain.radix import DEFAULT_LETTER_CASE, LetterCase, Radix

# Версия схемы контрактов для tracking совместимости
CONTRACT_SCHEMA_VERSION: Final[str] = "1"


# =============================================================================
# MODELS
# =============================================================================


class ConversionRequest(BaseModel):
    """
    Запрос конверсии строки между системами счисления.

    Immutable модель (frozen=True). Валидирует только форму запроса:
    допустимость цифр проверяет сам движок при выполнении.
    """

    schema_version: str = Field(
        CONTRACT_SCHEMA_VERSION,
        pattern="^1$",
        description="Версия схемы для tracking совместимости",
    )
    value: str = Field(..., min_length=1, description="Исходная строка цифр")
    source: Radix = Field(..., description="Система счисления value")
    target: Radix = Field(..., description="Целевая система счисления")
    letter_case: LetterCase = Field(
        DEFAULT_LETTER_CASE, description="Регистр букв A-F в hexadecimal выводе"
    )

    model_config = {"frozen": True}


class ConversionResult(BaseModel):
    """Результат конверсии: исходный запрос + итоговая строка."""

    schema_version: str = Field(
        CONTRACT_SCHEMA_VERSION,
        pattern="^1$",
        description="Версия схемы для tracking совместимости",
    )
    value: str = Field(..., min_length=1, description="Исходная строка цифр")
    source: Radix = Field(..., description="Система счисления value")
    target: Radix = Field(..., description="Целевая система счисления")
    letter_case: LetterCase = Field(
        DEFAULT_LETTER_CASE, description="Регистр букв A-F в hexadecimal выводе"
    )
    result: str = Field(
        ...,
        min_length=1,
        pattern="^[0-9A-Fa-f]+$",
        description="Строка цифр в целевой системе без ведущих нулей",
    )

    model_config = {"frozen": True}
