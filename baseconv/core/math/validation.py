"""
Validation — Проверка входных строк

Слой валидации движка конверсии:
- Непустота входа (EmptyInput)
- Допустимость каждой цифры для системы счисления (InvalidCharacter)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Проверка непустоты выполняется на каждой публичной точке входа
2. Сообщается первый (самый левый) невалидный символ
3. Шестнадцатеричные буквы A-F/a-f эквивалентны
"""

from baseconv.core.domain.radix import Radix
from baseconv.core.errors import EmptyInput, InvalidCharacter


def validate_non_empty(value: str, name: str = "value") -> None:
    """
    Валидация, что строка непустая.

    Args:
        value: Проверяемая строка
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        TypeError: Если value не str
        EmptyInput: Если len(value) == 0
    """
    if not isinstance(value, str):
        raise TypeError(f"{name} must be str, got {type(value).__name__}")

    if not value:
        raise EmptyInput(name)


def validate_digit(char: str, radix: Radix, position: int | None = None) -> None:
    """
    Валидация одного символа для системы счисления.

    Args:
        char: Проверяемый символ
        radix: Система счисления
        position: Индекс символа во входной строке (для сообщения)

    Raises:
        InvalidCharacter: Если символ не входит в алфавит radix
    """
    if char not in Radix(radix).alphabet:
        raise InvalidCharacter(char, Radix(radix), position)


def validate_string(value: str, radix: Radix) -> None:
    """
    Валидация всех символов строки слева направо.

    Args:
        value: Проверяемая строка (непустая)
        radix: Система счисления

    Raises:
        EmptyInput: Если строка пустая
        InvalidCharacter: Первый невалидный символ
    """
    validate_non_empty(value)

    radix = Radix(radix)
    for position, char in enumerate(value):
        validate_digit(char, radix, position)


def is_valid_string(value: str, radix: Radix) -> bool:
    """
    Проверка строки без exception.

    Returns:
        True если строка непустая и все символы допустимы для radix
    """
    if not isinstance(value, str) or not value:
        return False
    alphabet = Radix(radix).alphabet
    return all(char in alphabet for char in value)
