"""
Core math modules

Точная арифметика без плавающей точки: рациональные числа над int
произвольной точности и системы счисления 2..36.
"""

# Rational arithmetic
from src.core.math.rational import (
    Rational,
    gcd,
)

# Numerals
from src.core.math.numerals import (
    DIGIT_SEPARATOR,
    MAX_BASE,
    MIN_BASE,
    digit_value,
    format_in_base,
    parse_in_base,
    validate_base,
)

__all__ = [
    # Rational
    "Rational",
    "gcd",
    # Numerals — Constants
    "DIGIT_SEPARATOR",
    "MAX_BASE",
    "MIN_BASE",
    # Numerals — Functions
    "digit_value",
    "format_in_base",
    "parse_in_base",
    "validate_base",
]
