"""Radix — Системы счисления и регистр шестнадцатеричных цифр

Поддерживаются четыре системы: binary (2), octal (8), decimal (10),
hexadecimal (16). Шестнадцатеричный вход регистронезависим, регистр
выхода выбирается через LetterCase (по умолчанию UPPER).
"""

from enum import Enum
from typing import Final


# =============================================================================
# ОСНОВАНИЯ
# =============================================================================

BINARY_BASE: Final[int] = 2
OCTAL_BASE: Final[int] = 8
DECIMAL_BASE: Final[int] = 10
HEXADECIMAL_BASE: Final[int] = 16

# Допустимые символы для каждой системы (hex — оба регистра)
_ALPHABETS: Final[dict[int, frozenset[str]]] = {
    BINARY_BASE: frozenset("01"),
    OCTAL_BASE: frozenset("01234567"),
    DECIMAL_BASE: frozenset("0123456789"),
    HEXADECIMAL_BASE: frozenset("0123456789ABCDEFabcdef"),
}

# Максимальное число значащих цифр для 2^64 - 1
_MAX_DIGITS: Final[dict[int, int]] = {
    BINARY_BASE: 64,
    OCTAL_BASE: 22,
    DECIMAL_BASE: 20,
    HEXADECIMAL_BASE: 16,
}


# =============================================================================
# ENUMS
# =============================================================================


class Radix(str, Enum):
    """Система счисления."""

    BINARY = "binary"
    OCTAL = "octal"
    DECIMAL = "decimal"
    HEXADECIMAL = "hexadecimal"

    @property
    def base(self) -> int:
        """Числовое основание (2, 8, 10, 16)."""
        return _BASES[self]

    @property
    def alphabet(self) -> frozenset[str]:
        """Множество допустимых символов."""
        return _ALPHABETS[self.base]

    @property
    def max_digits(self) -> int:
        """Количество значащих цифр в записи 2^64 - 1."""
        return _MAX_DIGITS[self.base]

    @classmethod
    def from_base(cls, base: int) -> "Radix":
        """
        Поиск системы счисления по числовому основанию.

        Args:
            base: Основание (2, 8, 10 или 16)

        Returns:
            Соответствующий Radix

        Raises:
            ValueError: Если основание не поддерживается
        """
        for radix, radix_base in _BASES.items():
            if radix_base == base:
                return radix
        raise ValueError(f"Unsupported base: {base}")


class LetterCase(str, Enum):
    """Регистр букв A-F при выводе шестнадцатеричных цифр."""

    UPPER = "upper"
    LOWER = "lower"

    def apply(self, text: str) -> str:
        """Приводит буквы в text к выбранному регистру."""
        if self is LetterCase.LOWER:
            return text.lower()
        return text.upper()


_BASES: Final[dict[Radix, int]] = {
    Radix.BINARY: BINARY_BASE,
    Radix.OCTAL: OCTAL_BASE,
    Radix.DECIMAL: DECIMAL_BASE,
    Radix.HEXADECIMAL: HEXADECIMAL_BASE,
}

DEFAULT_LETTER_CASE: Final[LetterCase] = LetterCase.UPPER
