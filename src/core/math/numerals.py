"""
Numerals — разбор и форматирование чисел в системах счисления 2..36

Цифры: '0'-'9' → 0..9, 'A'-'Z' / 'a'-'z' → 10..35 (регистр не важен).
Необязательный знак '+' / '-' в начале, разделитель '_' пропускается.

Накопление позиционное: result = result * base + digit слева направо,
итог умножается на знак.
"""

from typing import Final

from src.core.errors import InvalidDigit, UnsupportedBase

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

MIN_BASE: Final[int] = 2
MAX_BASE: Final[int] = 36

# Разделитель разрядов по умолчанию ("1_000")
DIGIT_SEPARATOR: Final[str] = "_"

_DIGITS: Final[str] = "0123456789abcdefghijklmnopqrstuvwxyz"


# =============================================================================
# ПАРСИНГ
# =============================================================================


def validate_base(base: int) -> int:
    """
    Проверка основания.

    Raises:
        UnsupportedBase: Если base < 2 или base > 36
    """
    if base < MIN_BASE or base > MAX_BASE:
        raise UnsupportedBase(base)
    return base


def digit_value(char: str) -> int:
    """
    Значение одной цифры без учёта основания.

    Returns:
        0..35 для '0'-'9', 'A'-'Z', 'a'-'z'; -1 для любого другого символа
    """
    if "0" <= char <= "9":
        return ord(char) - ord("0")
    if "A" <= char <= "Z":
        return ord(char) - ord("A") + 10
    if "a" <= char <= "z":
        return ord(char) - ord("a") + 10
    return -1


def parse_in_base(
    text: str,
    base: int,
    separator: str = DIGIT_SEPARATOR,
    allow_empty: bool = False,
) -> int:
    """
    Разбор строки-числа в заданном основании в int.

    Args:
        text: Строка цифр, опционально со знаком и разделителями
        base: Основание системы счисления (2..36)
        separator: Пропускаемый символ-разделитель (default: '_')
        allow_empty: Пустая строка цифр (после знака) даёт 0 вместо ошибки

    Returns:
        Знаковое целое произвольной точности

    Raises:
        UnsupportedBase: Если base вне [2, 36]
        InvalidDigit: Если символ не является цифрой основания base,
            либо строка цифр пуста и allow_empty=False

    Examples:
        >>> parse_in_base("FF", 16)
        255
        >>> parse_in_base("-101", 2)
        -5
        >>> parse_in_base("1_000", 10)
        1000
    """
    validate_base(base)

    sign = 1
    digits = text
    if digits[:1] == "+":
        digits = digits[1:]
    elif digits[:1] == "-":
        sign = -1
        digits = digits[1:]

    value = 0
    seen_digit = False
    for char in digits:
        if char == separator:
            continue
        d = digit_value(char)
        if d < 0 or d >= base:
            raise InvalidDigit(char, base)
        value = value * base + d
        seen_digit = True

    if not seen_digit and not allow_empty:
        raise InvalidDigit("", base)

    return sign * value


# =============================================================================
# ФОРМАТИРОВАНИЕ
# =============================================================================


def format_in_base(value: int, base: int) -> str:
    """
    Обратная к parse_in_base операция: int → строка цифр в основании base.

    Цифры выше 9 выводятся строчными буквами, отрицательные значения
    получают ведущий '-'.

    Examples:
        >>> format_in_base(255, 16)
        'ff'
        >>> format_in_base(-5, 2)
        '-101'
    """
    validate_base(base)

    if value == 0:
        return "0"

    magnitude = abs(value)
    chars = []
    while magnitude:
        magnitude, d = divmod(magnitude, base)
        chars.append(_DIGITS[d])

    if value < 0:
        chars.append("-")
    return "".join(reversed(chars))
