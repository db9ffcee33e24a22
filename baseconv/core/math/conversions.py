"""
Conversions — Попарные конверсии между binary, octal, decimal, hexadecimal

Двенадцать направленных конверсий + диспетчер convert().

Конверсии без decimal работают только со строками через binary:
- binary → octal/hex: выравнивание нулями до кратности 3/4, разбиение
  на группы, замена каждой группы цифрой по таблице
- octal/hex → binary: замена каждой цифры группой фиксированной ширины
- octal ↔ hex: композиция через binary

Конверсии с decimal используют 64-битный аккумулятор (см. uint64).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Любая ошибка валидации прерывает конверсию (нет частичных результатов)
2. Результат никогда не содержит ведущих нулей; ноль → "0"
3. Функции без побочных эффектов и безопасны для многопоточного вызова
"""

import logging
from typing import Any, Callable, Dict, Final, Mapping

from baseconv.core.contracts import validate_conversion_request, validate_conversion_result
from baseconv.core.domain.conversion import ConversionRequest, ConversionResult
from baseconv.core.domain.radix import DEFAULT_LETTER_CASE, LetterCase, Radix
from baseconv.core.domain.tables import (
    BINARY_TO_HEXADECIMAL,
    BINARY_TO_OCTAL,
    HEXADECIMAL_GROUP_WIDTH,
    HEXADECIMAL_TO_BINARY,
    OCTAL_GROUP_WIDTH,
    OCTAL_TO_BINARY,
)
from baseconv.core.math.normalization import (
    normalize,
    split_groups,
    trim_leading_zeros,
    zero_padding,
)
from baseconv.core.math.uint64 import format_uint64, parse_uint64
from baseconv.core.math.validation import validate_string

logger = logging.getLogger(__name__)


# =============================================================================
# ВСПОМОГАТЕЛЬНЫЕ ФУНКЦИИ
# =============================================================================


def _group_binary(value: str, width: int, table: Mapping[str, str]) -> str:
    padded = zero_padding(trim_leading_zeros(value), width)
    digits = "".join(table[group] for group in split_groups(padded, width))
    return trim_leading_zeros(digits)


def _expand_digits(value: str, table: Mapping[str, str]) -> str:
    bits = "".join(table[char] for char in trim_leading_zeros(value))
    return trim_leading_zeros(bits)


# =============================================================================
# BINARY →
# =============================================================================


def binary_to_octal(value: str) -> str:
    """
    Двоичная строка → восьмеричная.

    Examples:
        >>> binary_to_octal("11111111")
        '377'
    """
    validate_string(value, Radix.BINARY)
    return _group_binary(value, OCTAL_GROUP_WIDTH, BINARY_TO_OCTAL)


def binary_to_decimal(value: str) -> str:
    """
    Двоичная строка → десятичная.

    Raises:
        Overflow: Если значение превышает 2^64 - 1 (более 64 значащих бит)
    """
    return str(parse_uint64(value, Radix.BINARY))


def binary_to_hexadecimal(
    value: str, letter_case: LetterCase = DEFAULT_LETTER_CASE
) -> str:
    """
    Двоичная строка → шестнадцатеричная.

    Examples:
        >>> binary_to_hexadecimal("11010110")
        'D6'
        >>> binary_to_hexadecimal("11010110", LetterCase.LOWER)
        'd6'
    """
    validate_string(value, Radix.BINARY)
    digits = _group_binary(value, HEXADECIMAL_GROUP_WIDTH, BINARY_TO_HEXADECIMAL)
    return LetterCase(letter_case).apply(digits)


# =============================================================================
# OCTAL →
# =============================================================================


def octal_to_binary(value: str) -> str:
    """Восьмеричная строка → двоичная (каждая цифра → 3 бита)."""
    validate_string(value, Radix.OCTAL)
    return _expand_digits(value, OCTAL_TO_BINARY)


def octal_to_decimal(value: str) -> str:
    """
    Восьмеричная строка → десятичная.

    Examples:
        >>> octal_to_decimal("17")
        '15'
    """
    return str(parse_uint64(value, Radix.OCTAL))


def octal_to_hexadecimal(
    value: str, letter_case: LetterCase = DEFAULT_LETTER_CASE
) -> str:
    """Восьмеричная строка → шестнадцатеричная (через binary)."""
    return binary_to_hexadecimal(octal_to_binary(value), letter_case)


# =============================================================================
# DECIMAL →
# =============================================================================


def decimal_to_binary(value: str) -> str:
    """
    Десятичная строка → двоичная.

    Raises:
        InvalidCharacter: Если встречен не-десятичный символ
        Overflow: Если значение превышает 2^64 - 1
    """
    return format_uint64(parse_uint64(value, Radix.DECIMAL), Radix.BINARY)


def decimal_to_octal(value: str) -> str:
    """Десятичная строка → восьмеричная."""
    return format_uint64(parse_uint64(value, Radix.DECIMAL), Radix.OCTAL)


def decimal_to_hexadecimal(
    value: str, letter_case: LetterCase = DEFAULT_LETTER_CASE
) -> str:
    """
    Десятичная строка → шестнадцатеричная.

    Examples:
        >>> decimal_to_hexadecimal("255")
        'FF'
        >>> decimal_to_hexadecimal("255", LetterCase.LOWER)
        'ff'
    """
    return format_uint64(
        parse_uint64(value, Radix.DECIMAL), Radix.HEXADECIMAL, letter_case
    )


# =============================================================================
# HEXADECIMAL →
# =============================================================================


def hexadecimal_to_binary(value: str) -> str:
    """Шестнадцатеричная строка (любой регистр) → двоичная (цифра → 4 бита)."""
    validate_string(value, Radix.HEXADECIMAL)
    return _expand_digits(value, HEXADECIMAL_TO_BINARY)


def hexadecimal_to_octal(value: str) -> str:
    """
    Шестнадцатеричная строка → восьмеричная (через binary).

    Examples:
        >>> hexadecimal_to_octal("FF")
        '377'
    """
    return binary_to_octal(hexadecimal_to_binary(value))


def hexadecimal_to_decimal(value: str) -> str:
    """Шестнадцатеричная строка (любой регистр) → десятичная."""
    return str(parse_uint64(value, Radix.HEXADECIMAL))


# =============================================================================
# ДИСПЕТЧЕР
# =============================================================================

_CONVERSIONS: Final[Mapping[tuple[Radix, Radix], Callable[..., str]]] = {
    (Radix.BINARY, Radix.OCTAL): binary_to_octal,
    (Radix.BINARY, Radix.DECIMAL): binary_to_decimal,
    (Radix.BINARY, Radix.HEXADECIMAL): binary_to_hexadecimal,
    (Radix.OCTAL, Radix.BINARY): octal_to_binary,
    (Radix.OCTAL, Radix.DECIMAL): octal_to_decimal,
    (Radix.OCTAL, Radix.HEXADECIMAL): octal_to_hexadecimal,
    (Radix.DECIMAL, Radix.BINARY): decimal_to_binary,
    (Radix.DECIMAL, Radix.OCTAL): decimal_to_octal,
    (Radix.DECIMAL, Radix.HEXADECIMAL): decimal_to_hexadecimal,
    (Radix.HEXADECIMAL, Radix.BINARY): hexadecimal_to_binary,
    (Radix.HEXADECIMAL, Radix.OCTAL): hexadecimal_to_octal,
    (Radix.HEXADECIMAL, Radix.DECIMAL): hexadecimal_to_decimal,
}


def convert(
    value: str,
    source: Radix,
    target: Radix,
    *,
    letter_case: LetterCase = DEFAULT_LETTER_CASE,
) -> str:
    """
    Конверсия строки между любыми двумя поддерживаемыми системами.

    При source == target возвращается каноническая запись value
    (валидация + удаление ведущих нулей). Для decimal значение
    дополнительно проверяется на диапазон 64 бит.

    Args:
        value: Исходная строка цифр
        source: Система счисления value (Radix или его значение, "binary")
        target: Целевая система счисления
        letter_case: Регистр букв A-F, если target — hexadecimal

    Returns:
        Строка цифр в целевой системе

    Raises:
        ValueError: Если source/target/letter_case неизвестны
        EmptyInput, InvalidCharacter, Overflow: см. конкретные конверсии
    """
    source = Radix(source)
    target = Radix(target)
    letter_case = LetterCase(letter_case)

    logger.debug("Converting %s -> %s", source.value, target.value)

    if source is target is Radix.DECIMAL:
        return str(parse_uint64(value, Radix.DECIMAL))
    if source is target:
        return normalize(value, source, letter_case)

    conversion = _CONVERSIONS[(source, target)]
    if target is Radix.HEXADECIMAL:
        return conversion(value, letter_case)
    return conversion(value)


def convert_request(request: ConversionRequest) -> ConversionResult:
    """
    Выполнение ConversionRequest.

    Returns:
        ConversionResult с исходными полями запроса и результатом
    """
    result = convert(
        request.value,
        request.source,
        request.target,
        letter_case=request.letter_case,
    )

    return ConversionResult(
        schema_version=request.schema_version,
        value=request.value,
        source=request.source,
        target=request.target,
        letter_case=request.letter_case,
        result=result,
    )


def convert_payload(payload: Dict[str, Any]) -> Dict[str, Any]:
    """
    Конверсия JSON payload через контракты.

    Payload проверяется по conversion_request.json, конвертируется через
    ConversionRequest, результат проверяется по conversion_result.json.

    Args:
        payload: dict в форме conversion_request

    Returns:
        dict в форме conversion_result

    Raises:
        jsonschema.ValidationError: Если payload или результат нарушают схему
        EmptyInput, InvalidCharacter, Overflow: ошибки самой конверсии
    """
    validate_conversion_request(payload)

    result = convert_request(ConversionRequest.model_validate(payload))
    dumped = result.model_dump(mode="json")

    validate_conversion_result(dumped)
    return dumped
