"""
Тесты для Rational — точная рациональная арифметика

Проверяемые инварианты:
1. denominator > 0 после make/multiply/add
2. gcd(|numerator|, denominator) == 1
3. Нулевой знаменатель → DivisionByZero
4. Ноль канонически 0/1
5. Immutability
"""

import dataclasses

import pytest

from src.core.errors import DivisionByZero, ReconstructionError
from src.core.math import Rational, gcd


def assert_normalized(r: Rational):
    assert r.denominator > 0
    assert gcd(r.numerator, r.denominator) == 1


# =============================================================================
# ТЕСТЫ: GCD
# =============================================================================


class TestGcd:
    """Тесты gcd по абсолютным значениям."""

    def test_basic(self):
        assert gcd(12, 18) == 6
        assert gcd(17, 5) == 1

    def test_signs_ignored(self):
        assert gcd(-12, 18) == 6
        assert gcd(12, -18) == 6
        assert gcd(-12, -18) == 6

    def test_zero_cases(self):
        assert gcd(7, 0) == 7
        assert gcd(0, 7) == 7
        assert gcd(-7, 0) == 7
        assert gcd(0, 0) == 0

    def test_big_integers(self):
        a = 2**521 - 1
        assert gcd(a * 3, a * 5) == a


# =============================================================================
# ТЕСТЫ: make
# =============================================================================


class TestMake:
    """Тесты фабрики make: нормализация знака и сокращение."""

    def test_reduces(self):
        r = Rational.make(6, 4)
        assert (r.numerator, r.denominator) == (3, 2)

    def test_negative_denominator_moves_sign(self):
        r = Rational.make(6, -4)
        assert (r.numerator, r.denominator) == (-3, 2)

        r = Rational.make(-6, -4)
        assert (r.numerator, r.denominator) == (3, 2)

    def test_zero_canonical(self):
        assert Rational.make(0, 5) == Rational(0, 1)
        assert Rational.make(0, -123456789) == Rational(0, 1)

    def test_zero_denominator(self):
        with pytest.raises(DivisionByZero):
            Rational.make(1, 0)

        with pytest.raises(DivisionByZero):
            Rational.make(0, 0)

    def test_division_by_zero_is_typed(self):
        """DivisionByZero — часть таксономии и ZeroDivisionError."""
        with pytest.raises(ReconstructionError):
            Rational.make(3, 0)
        with pytest.raises(ZeroDivisionError):
            Rational.make(3, 0)

    def test_default_denominator(self):
        assert Rational.make(5) == Rational(5, 1)

    def test_from_int(self):
        r = Rational.from_int(-42)
        assert (r.numerator, r.denominator) == (-42, 1)
        assert r.is_integer

    @pytest.mark.parametrize(
        "num,den",
        [(1, 1), (-1, 3), (10, -15), (2**200, 6**50), (-(3**90), -(9**40)), (7, 49)],
    )
    def test_invariants(self, num, den):
        assert_normalized(Rational.make(num, den))


# =============================================================================
# ТЕСТЫ: multiply / add
# =============================================================================


class TestArithmetic:
    """Тесты multiply/add."""

    def test_multiply(self):
        a = Rational.make(2, 3)
        b = Rational.make(9, 4)
        assert a.multiply(b) == Rational.make(3, 2)

    def test_multiply_cross_reduction_matches_naive(self):
        a = Rational.make(-(2**64) * 3, 5**10)
        b = Rational.make(5**7 * 11, 2**60)
        naive = Rational.make(a.numerator * b.numerator, a.denominator * b.denominator)
        assert a.multiply(b) == naive
        assert_normalized(a.multiply(b))

    def test_multiply_by_zero(self):
        assert Rational.make(5, 7).multiply(Rational.zero()) == Rational(0, 1)

    def test_add(self):
        assert Rational.make(1, 2).add(Rational.make(1, 3)) == Rational.make(5, 6)
        assert Rational.make(1, 2).add(Rational.make(-1, 2)) == Rational(0, 1)

    def test_add_to_integer(self):
        r = Rational.make(1, 3).add(Rational.make(2, 3))
        assert r.is_integer
        assert r.numerator == 1

    def test_invariants_after_chain(self):
        r = Rational.zero()
        for i in range(1, 20):
            r = r.add(Rational.make((-1) ** i * i, i + 1)).multiply(Rational.make(i + 2, 2 * i - 41))
            assert_normalized(r)


class TestImmutability:
    """Rational immutable: изменение поля запрещено."""

    def test_frozen(self):
        r = Rational.make(1, 2)
        with pytest.raises(dataclasses.FrozenInstanceError):
            r.numerator = 5

    def test_operations_return_new_instances(self):
        a = Rational.make(1, 2)
        b = a.add(Rational.make(1, 2))
        assert a == Rational.make(1, 2)
        assert b is not a

    def test_no_operator_overloads(self):
        """Арифметика только через make/multiply/add: операторов и is_zero нет."""
        a = Rational.make(1, 2)
        with pytest.raises(TypeError):
            a + a
        with pytest.raises(TypeError):
            a * a
        with pytest.raises(TypeError):
            -a
        assert not hasattr(Rational, "is_zero")
