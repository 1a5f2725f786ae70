"""
Reconstruction Errors — типизированная таксономия ошибок

Каждая core-операция либо возвращает результат, либо выбрасывает ровно одно
исключение из этого модуля. Повторов нет: это логические ошибки и ошибки
входных данных, а не транзиентные сбои.

Форматирование сообщений для человека и выбор exit-кода — ответственность
CLI (src/cli.py), а не core.
"""

from typing import Optional


def _decimal(value: int) -> str:
    """Десятичная запись int без лимита int_max_str_digits."""
    from src.core.math.numerals import format_in_base

    return format_in_base(value, 10)


def _describe(value: object) -> str:
    if isinstance(value, int) and not isinstance(value, bool):
        return _decimal(value)
    return repr(value)


class ReconstructionError(Exception):
    """Базовый класс всех ошибок реконструкции свободного члена."""


# =============================================================================
# АРИФМЕТИКА И ПАРСИНГ
# =============================================================================


class DivisionByZero(ReconstructionError, ZeroDivisionError):
    """Rational создаётся с нулевым знаменателем."""

    def __init__(self, numerator: int):
        self.numerator = numerator
        super().__init__(f"Zero denominator for numerator {_decimal(numerator)}")


class UnsupportedBase(ReconstructionError):
    """Основание системы счисления вне диапазона [2, 36]."""

    def __init__(self, base: int):
        self.base = base
        super().__init__(f"Unsupported base {_decimal(base)}")


class InvalidDigit(ReconstructionError):
    """Символ не является допустимой цифрой для заданного основания."""

    def __init__(self, char: str, base: int):
        self.char = char
        self.base = base
        if char:
            message = f"Invalid digit '{char}' for base {base}"
        else:
            message = f"Empty numeral for base {base}"
        super().__init__(message)


# =============================================================================
# ТОЧКИ И ИНТЕРПОЛЯЦИЯ
# =============================================================================


class MalformedRecord(ReconstructionError):
    """Запись точки без base/value (или с невалидными полями)."""

    def __init__(self, prop: str, reason: str = "must have base and value"):
        self.prop = prop
        self.reason = reason
        super().__init__(f"Entry '{prop}' {reason}")


class NoPoints(ReconstructionError):
    """Во входном документе нет ни одной пригодной точки."""

    def __init__(self):
        super().__init__("No points found in input")


class InsufficientPoints(ReconstructionError):
    """Точек меньше, чем порог k."""

    def __init__(self, have: int, need: int):
        self.have = have
        self.need = need
        super().__init__(f"Not enough points: have {have}, need k={_decimal(need)}")


class DuplicateX(ReconstructionError):
    """Две выбранные точки имеют одинаковый x: x_i - x_j = 0."""

    def __init__(self, x: int):
        self.x = x
        super().__init__(f"Duplicate x values encountered: x={_decimal(x)}")


class NonIntegerResult(ReconstructionError):
    """
    Интерполированный свободный член не является целым числом.

    Сигнализирует о повреждённых входных данных или о дефекте логики;
    не восстанавливается.
    """

    def __init__(self, numerator: int, denominator: int):
        self.numerator = numerator
        self.denominator = denominator
        super().__init__(f"Non-integer result: {_decimal(numerator)}/{_decimal(denominator)}")


# =============================================================================
# ДОКУМЕНТ (CLI failure surface)
# =============================================================================


class InputNotFound(ReconstructionError):
    """Файл входного документа не существует."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Input file not found: {path}")


class InputUnreadable(ReconstructionError):
    """Файл существует, но не читается."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Error reading file {path}: {reason}")


class InvalidJSON(ReconstructionError):
    """Синтаксически некорректный JSON."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Invalid JSON: {reason}")


class InvalidDocument(ReconstructionError):
    """Документ нарушает JSON Schema контракт sample_set."""

    def __init__(self, reason: str, path: Optional[str] = None):
        self.reason = reason
        self.path = path
        where = f" at '{path}'" if path else ""
        super().__init__(f"Input document violates contract{where}: {reason}")


class MissingThreshold(ReconstructionError):
    """В документе нет keys.k."""

    def __init__(self):
        super().__init__("Input must contain keys.k (minimum points required)")


class InvalidThreshold(ReconstructionError):
    """keys.k не является положительным целым (или keys.n не целое)."""

    def __init__(self, value: object, field: str = "k"):
        self.value = value
        self.field = field
        if field == "k":
            message = f"keys.k must be a positive integer, got {_describe(value)}"
        else:
            message = f"keys.{field} must be an integer, got {_describe(value)}"
        super().__init__(message)
