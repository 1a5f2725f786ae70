"""
Interpolation — свободный член полинома по интерполяции Лагранжа в x = 0

Формула:
    c = P(0) = Σ_i  y_i · Π_{j≠i} ( -x_j / (x_i - x_j) )

Вся арифметика точная (Rational над int). Накопление выполнено как
левая свёртка: внешняя по точкам, внутренняя по остальным точкам;
каждый шаг создаёт новый immutable Rational. Порядок умножений
совпадает с прямым двойным циклом, поэтому перекрёстное сокращение
даёт те же промежуточные значения.

Сложность O(k²) умножений; модульная арифметика и FFT-подобные
оптимизации вне scope.
"""

import logging
from functools import reduce
from typing import Sequence

from src.core.domain import Point
from src.core.errors import DuplicateX, NonIntegerResult, NoPoints
from src.core.math import Rational

logger = logging.getLogger(__name__)


def basis_factor_at_zero(xi: int, xj: int) -> Rational:
    """
    Множитель базисного полинома Лагранжа в нуле: -x_j / (x_i - x_j).

    Raises:
        DuplicateX: Если x_i == x_j
    """
    denominator = xi - xj
    if denominator == 0:
        raise DuplicateX(xi)
    return Rational.make(-xj, denominator)


def lagrange_term_at_zero(points: Sequence[Point], i: int) -> Rational:
    """
    Слагаемое i: y_i · Π_{j≠i} (-x_j / (x_i - x_j)).

    Начальное значение — y_i, поднятое в Rational; далее последовательное
    умножение на множители для j = 0..k-1, j ≠ i.
    """
    xi = points[i].x
    return reduce(
        lambda term, pj: term.multiply(basis_factor_at_zero(xi, pj.x)),
        (pj for j, pj in enumerate(points) if j != i),
        Rational.from_int(points[i].y),
    )


def constant_term_at_zero(points: Sequence[Point]) -> int:
    """
    Свободный член интерполяционного полинома степени len(points) - 1.

    Args:
        points: Ровно k точек с попарно различными x

    Returns:
        P(0) как целое произвольной точности

    Raises:
        NoPoints: Если последовательность пуста
        DuplicateX: Если две точки имеют одинаковый x
        NonIntegerResult: Если сумма не является целым числом
            (повреждённые данные или дефект логики)

    Examples:
        >>> constant_term_at_zero([Point(x=1, y=3), Point(x=2, y=5)])
        1
    """
    if not points:
        raise NoPoints()

    result = reduce(
        lambda acc, i: acc.add(lagrange_term_at_zero(points, i)),
        range(len(points)),
        Rational.zero(),
    )

    if not result.is_integer:
        raise NonIntegerResult(result.numerator, result.denominator)

    logger.debug("Interpolated constant term over %d points", len(points))
    return result.numerator
