"""
Errors — Таксономия ошибок конверсии

Все ошибки движка немедленные и локальные: нет retry, нет частичных
результатов. Каждая ошибка наследуется от BaseConversionError и от
соответствующего built-in исключения (ValueError / OverflowError), чтобы
вызывающий код мог ловить их любым из двух способов.

Иерархия:
    BaseConversionError
    ├── EmptyInput          (ValueError)
    ├── InvalidCharacter    (ValueError)
    ├── Overflow            (OverflowError)
    └── InvalidMultiple     (ValueError)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from baseconv.core.domain.radix import Radix


class BaseConversionError(Exception):
    """Базовое исключение для всех ошибок конверсии."""


class EmptyInput(BaseConversionError, ValueError):
    """Входная строка имеет нулевую длину."""

    def __init__(self, name: str = "value"):
        self.name = name
        super().__init__(f"{name} must be a non-empty string")


class InvalidCharacter(BaseConversionError, ValueError):
    """
    Символ не является допустимой цифрой для системы счисления.

    Сообщается первый (самый левый) невалидный символ.

    Attributes:
        character: Невалидный символ
        radix: Система счисления, для которой выполнялась проверка
        position: Индекс символа во входной строке (0-based) или None
    """

    def __init__(
        self,
        character: str,
        radix: Radix,
        position: int | None = None,
    ):
        self.character = character
        self.radix = radix
        self.position = position

        where = f" at position {position}" if position is not None else ""
        super().__init__(
            f"Invalid character {character!r}{where} for {radix.value} string"
        )


class Overflow(BaseConversionError, OverflowError):
    """Значение превышает диапазон 64-битного беззнакового целого."""

    def __init__(self, limit: int):
        self.limit = limit
        super().__init__(f"Value exceeds unsigned 64-bit limit {limit}")


class InvalidMultiple(BaseConversionError, ValueError):
    """zero_padding вызван с кратностью < 1."""

    def __init__(self, multiple: int):
        self.multiple = multiple
        super().__init__(f"multiple must be positive, got {multiple}")
