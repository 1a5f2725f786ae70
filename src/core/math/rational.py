"""
Rational — точная рациональная арифметика над int произвольной точности

Значение num/den хранится всегда в нормализованном виде.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. den > 0 всегда (знак переносится в числитель)
2. gcd(|num|, den) == 1 (дробь полностью сокращена)
3. Нулевой знаменатель никогда не существует (DivisionByZero)
4. Ноль канонически представлен как 0/1
5. Значения immutable: каждая операция создаёт новый экземпляр

Никакой плавающей точки: входы могут быть сколь угодно большими целыми,
а результат должен совпадать бит в бит.
"""

from dataclasses import dataclass

from src.core.errors import DivisionByZero


# =============================================================================
# GCD
# =============================================================================


def gcd(a: int, b: int) -> int:
    """
    Наибольший общий делитель по абсолютным значениям (алгоритм Евклида).

    gcd(a, 0) = |a|, gcd(0, 0) = 0.
    """
    a, b = abs(a), abs(b)
    while b:
        a, b = b, a % b
    return a


# =============================================================================
# RATIONAL
# =============================================================================


@dataclass(frozen=True)
class Rational:
    """
    Точная дробь numerator/denominator.

    Создавать через make() или from_int(): прямой конструктор не
    нормализует и используется только внутри модуля.
    """

    numerator: int
    denominator: int = 1

    @classmethod
    def make(cls, numerator: int, denominator: int = 1) -> "Rational":
        """
        Фабрика с нормализацией знака и сокращением.

        Args:
            numerator: Числитель (любого знака)
            denominator: Знаменатель (ненулевой)

        Returns:
            Сокращённая дробь с положительным знаменателем

        Raises:
            DivisionByZero: Если denominator == 0

        Examples:
            >>> Rational.make(6, -4)
            Rational(numerator=-3, denominator=2)
            >>> Rational.make(0, -17)
            Rational(numerator=0, denominator=1)
        """
        if denominator == 0:
            raise DivisionByZero(numerator)

        if numerator == 0:
            return cls(0, 1)

        if denominator < 0:
            numerator, denominator = -numerator, -denominator

        g = gcd(numerator, denominator)
        return cls(numerator // g, denominator // g)

    @classmethod
    def from_int(cls, value: int) -> "Rational":
        """Поднятие целого в Rational: value/1."""
        return cls(value, 1)

    @classmethod
    def zero(cls) -> "Rational":
        return cls(0, 1)

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def multiply(self, other: "Rational") -> "Rational":
        """
        Произведение с перекрёстным сокращением.

        До умножения выносятся gcd(|a.num|, b.den) и gcd(|b.num|, a.den),
        чтобы промежуточные числа оставались меньше. Функционально
        эквивалентно наивному умножению с последующим сокращением.
        """
        n1, d1 = self.numerator, self.denominator
        n2, d2 = other.numerator, other.denominator

        g1 = gcd(n1, d2)
        if g1 > 1:
            n1, d2 = n1 // g1, d2 // g1

        g2 = gcd(n2, d1)
        if g2 > 1:
            n2, d1 = n2 // g2, d1 // g2

        return Rational.make(n1 * n2, d1 * d2)

    def add(self, other: "Rational") -> "Rational":
        """Сумма через перекрёстное умножение и финальное сокращение."""
        numerator = self.numerator * other.denominator + other.numerator * self.denominator
        denominator = self.denominator * other.denominator
        return Rational.make(numerator, denominator)

    # -------------------------------------------------------------------------
    # Проверки
    # -------------------------------------------------------------------------

    @property
    def is_integer(self) -> bool:
        """True если знаменатель равен 1 (дробь всегда сокращена)."""
        return self.denominator == 1
