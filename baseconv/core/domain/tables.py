"""
Digit Tables — Статические таблицы соответствия цифр

Неизменяемые (MappingProxyType) таблицы:
- 3-битная группа ↔ восьмеричная цифра (8 записей)
- 4-битная группа ↔ шестнадцатеричная цифра (16 записей)
- шестнадцатеричный символ → значение 0-15 (оба регистра)

Таблицы не меняются в runtime и безопасны для конкурентного чтения.
"""

from types import MappingProxyType
from typing import Final, Mapping

from baseconv.core.domain.radix import DEFAULT_LETTER_CASE, LetterCase

# =============================================================================
# ШИРИНА ГРУПП
# =============================================================================

OCTAL_GROUP_WIDTH: Final[int] = 3
HEXADECIMAL_GROUP_WIDTH: Final[int] = 4


# =============================================================================
# BINARY ↔ OCTAL
# =============================================================================

BINARY_TO_OCTAL: Final[Mapping[str, str]] = MappingProxyType(
    {
        "000": "0",
        "001": "1",
        "010": "2",
        "011": "3",
        "100": "4",
        "101": "5",
        "110": "6",
        "111": "7",
    }
)

OCTAL_TO_BINARY: Final[Mapping[str, str]] = MappingProxyType(
    {digit: group for group, digit in BINARY_TO_OCTAL.items()}
)


# =============================================================================
# BINARY ↔ HEXADECIMAL
# =============================================================================

BINARY_TO_HEXADECIMAL: Final[Mapping[str, str]] = MappingProxyType(
    {
        "0000": "0",
        "0001": "1",
        "0010": "2",
        "0011": "3",
        "0100": "4",
        "0101": "5",
        "0110": "6",
        "0111": "7",
        "1000": "8",
        "1001": "9",
        "1010": "A",
        "1011": "B",
        "1100": "C",
        "1101": "D",
        "1110": "E",
        "1111": "F",
    }
)

# Обратное направление принимает оба регистра
HEXADECIMAL_TO_BINARY: Final[Mapping[str, str]] = MappingProxyType(
    {
        **{digit: group for group, digit in BINARY_TO_HEXADECIMAL.items()},
        **{
            digit.lower(): group
            for group, digit in BINARY_TO_HEXADECIMAL.items()
            if digit.isalpha()
        },
    }
)


# =============================================================================
# HEXADECIMAL ↔ VALUE
# =============================================================================

HEXADECIMAL_DIGITS_UPPER: Final[str] = "0123456789ABCDEF"
HEXADECIMAL_DIGITS_LOWER: Final[str] = "0123456789abcdef"

HEXADECIMAL_TO_VALUE: Final[Mapping[str, int]] = MappingProxyType(
    {
        **{digit: value for value, digit in enumerate(HEXADECIMAL_DIGITS_UPPER)},
        **{digit: value for value, digit in enumerate(HEXADECIMAL_DIGITS_LOWER)},
    }
)


def digit_value(char: str) -> int:
    """
    Значение цифры (0-15) для символа любой поддерживаемой системы.

    Символ должен быть предварительно проверен validate_digit для
    конкретной системы: таблица сама по себе не знает про основание.

    Raises:
        KeyError: Если символ не является шестнадцатеричной цифрой
    """
    return HEXADECIMAL_TO_VALUE[char]


def digit_char(value: int, letter_case: LetterCase = DEFAULT_LETTER_CASE) -> str:
    """
    Символ цифры для значения 0-15 (прямая индексация).

    Args:
        value: Значение цифры
        letter_case: Регистр букв A-F

    Returns:
        Один символ '0'-'9', 'A'-'F' или 'a'-'f'

    Raises:
        ValueError: Если value вне диапазона [0, 15]
    """
    if not 0 <= value < len(HEXADECIMAL_DIGITS_UPPER):
        raise ValueError(f"digit value must be in [0, 15], got {value}")

    if LetterCase(letter_case) is LetterCase.LOWER:
        return HEXADECIMAL_DIGITS_LOWER[value]
    return HEXADECIMAL_DIGITS_UPPER[value]
