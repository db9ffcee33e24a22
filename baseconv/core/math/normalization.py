"""
Normalization — Нормализация строк цифр

- trim_leading_zeros: удаление незначащих нулей ("000" → "0")
- zero_padding: дополнение нулями слева до кратной длины
- split_groups: разбиение на группы фиксированной ширины
- normalize: каноническая запись числа в заданной системе

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. trim_leading_zeros идемпотентна
2. Запись нуля всегда "0", никогда ""
3. zero_padding линейна по количеству добавленных нулей
"""

from baseconv.core.domain.radix import DEFAULT_LETTER_CASE, LetterCase, Radix
from baseconv.core.errors import InvalidMultiple
from baseconv.core.math.validation import validate_non_empty, validate_string


def trim_leading_zeros(value: str) -> str:
    """
    Удаление ведущих нулей.

    Args:
        value: Строка цифр

    Returns:
        Суффикс value с первого символа, отличного от '0';
        "0" если строка состоит только из нулей

    Raises:
        EmptyInput: Если строка пустая

    Examples:
        >>> trim_leading_zeros("000101")
        '101'
        >>> trim_leading_zeros("0000")
        '0'
    """
    validate_non_empty(value)

    return value.lstrip("0") or "0"


def zero_padding(value: str, multiple: int) -> str:
    """
    Дополнение нулями слева до длины, кратной multiple.

    Добавляется ровно (multiple - len(value) % multiple) % multiple нулей.

    Args:
        value: Исходная строка
        multiple: Требуемая кратность длины (>= 1)

    Returns:
        Строка длины, кратной multiple

    Raises:
        EmptyInput: Если строка пустая
        InvalidMultiple: Если multiple < 1

    Examples:
        >>> zero_padding("101", 4)
        '0101'
        >>> zero_padding("1100", 4)
        '1100'
    """
    validate_non_empty(value)

    if multiple < 1:
        raise InvalidMultiple(multiple)

    padding = (multiple - len(value) % multiple) % multiple
    return "0" * padding + value


def split_groups(value: str, width: int) -> list[str]:
    """
    Разбиение строки на последовательные группы ширины width.

    Старшая группа первая. Длина value должна быть кратна width
    (см. zero_padding).

    Raises:
        ValueError: Если длина не кратна width
    """
    if width < 1 or len(value) % width != 0:
        raise ValueError(
            f"length {len(value)} is not a multiple of group width {width}"
        )

    return [value[i : i + width] for i in range(0, len(value), width)]


def normalize(
    value: str,
    radix: Radix,
    letter_case: LetterCase = DEFAULT_LETTER_CASE,
) -> str:
    """
    Каноническая запись числа: валидация + удаление ведущих нулей.

    Для hexadecimal буквы приводятся к letter_case.

    Raises:
        EmptyInput: Если строка пустая
        InvalidCharacter: Первый невалидный символ
    """
    validate_string(value, radix)

    trimmed = trim_leading_zeros(value)
    if Radix(radix) is Radix.HEXADECIMAL:
        return LetterCase(letter_case).apply(trimmed)
    return trimmed
