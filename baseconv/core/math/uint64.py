"""
UInt64 — Беззнаковый 64-битный аккумулятор с проверкой переполнения

Python int не ограничен, поэтому диапазон [0, 2^64 - 1] обеспечивается
явной проверкой перед каждым шагом result = result * base + digit:

    overflow  ⇔  result > (MAX_U64 - digit) // base

Проверка точная: при равенстве результат шага равен ровно MAX_U64 или
меньше. Переполнение — ошибка (Overflow), не усечение.
"""

from typing import Final

from baseconv.core.domain.radix import DEFAULT_LETTER_CASE, LetterCase, Radix
from baseconv.core.domain.tables import digit_char, digit_value
from baseconv.core.errors import Overflow
from baseconv.core.math.normalization import trim_leading_zeros
from baseconv.core.math.validation import validate_string

MAX_U64: Final[int] = 2**64 - 1


def checked_multiply_add(accumulator: int, base: int, digit: int) -> int:
    """
    Один шаг позиционного накопления с проверкой переполнения.

    Args:
        accumulator: Текущее значение (0 <= accumulator <= MAX_U64)
        base: Основание системы счисления
        digit: Значение очередной цифры (0 <= digit < base)

    Returns:
        accumulator * base + digit

    Raises:
        Overflow: Если результат превышает MAX_U64
    """
    if accumulator > (MAX_U64 - digit) // base:
        raise Overflow(MAX_U64)

    return accumulator * base + digit


def parse_uint64(value: str, radix: Radix) -> int:
    """
    Разбор строки цифр в 64-битное беззнаковое значение.

    Сначала проверяется вся строка, затем накапливается значение без
    ведущих нулей (их количество не ограничено).

    Args:
        value: Строка цифр
        radix: Система счисления value

    Returns:
        Значение в диапазоне [0, MAX_U64]

    Raises:
        EmptyInput: Если строка пустая
        InvalidCharacter: Первый невалидный символ
        Overflow: Если значение превышает MAX_U64

    Examples:
        >>> parse_uint64("17", Radix.OCTAL)
        15
        >>> parse_uint64("ff", Radix.HEXADECIMAL)
        255
    """
    validate_string(value, radix)

    base = Radix(radix).base
    result = 0
    for char in trim_leading_zeros(value):
        result = checked_multiply_add(result, base, digit_value(char))

    return result


def format_uint64(
    value: int,
    radix: Radix,
    letter_case: LetterCase = DEFAULT_LETTER_CASE,
) -> str:
    """
    Запись значения в системе счисления повторным делением.

    Цикл выполняется минимум один раз, поэтому ноль даёт "0".

    Args:
        value: Значение в диапазоне [0, MAX_U64]
        radix: Целевая система счисления
        letter_case: Регистр букв для hexadecimal

    Returns:
        Строка цифр без ведущих нулей

    Raises:
        ValueError: Если value вне диапазона [0, MAX_U64]
    """
    if not 0 <= value <= MAX_U64:
        raise ValueError(f"value must be in [0, {MAX_U64}], got {value}")

    base = Radix(radix).base
    digits: list[str] = []
    while True:
        value, remainder = divmod(value, base)
        digits.append(digit_char(remainder, letter_case))
        if value == 0:
            break

    return "".join(reversed(digits))
