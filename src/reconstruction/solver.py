"""
Constant Term Solver — оркестрация реконструкции свободного члена

Порядок:
1. Проверка JSON Schema контракта (опционально)
2. Порог ThresholdSpec из keys {n, k}
3. Построение точек (Point Set Builder)
4. Выбор первых k точек по возрастанию x
5. Интерполяция Лагранжа в x = 0

Процесс синхронный, без общего изменяемого состояния: либо результат,
либо ровно одна типизированная ошибка.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple

from pydantic import ValidationError

from src.core.contracts import validate_sample_set
from src.core.domain import Point, ThresholdSpec
from src.core.errors import InvalidDocument, InvalidThreshold, MissingThreshold
from src.core.math import DIGIT_SEPARATOR, format_in_base
from src.reconstruction.interpolation import constant_term_at_zero
from src.reconstruction.points import KEYS_PROPERTY, build_points, select_points

logger = logging.getLogger(__name__)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class SolverConfig:
    """Конфигурация солвера."""

    # Разделитель разрядов в value ("1_000")
    digit_separator: str = DIGIT_SEPARATOR

    # Пустая строка цифр даёт 0 вместо InvalidDigit
    allow_empty_numeral: bool = False

    # Проверять документ против sample_set.json
    validate_contract: bool = True


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class SolveResult:
    """Результат реконструкции."""

    constant_term: int
    threshold: ThresholdSpec

    # Точки, использованные для интерполяции (по возрастанию x)
    points_used: Tuple[Point, ...]
    points_available: int


# =============================================================================
# THRESHOLD
# =============================================================================


def parse_threshold(document: Mapping[str, Any]) -> ThresholdSpec:
    """
    Извлечение порога из keys.

    Raises:
        MissingThreshold: Нет keys или keys.k
        InvalidThreshold: k не положительное целое (или n не целое)
    """
    keys = document.get(KEYS_PROPERTY)
    if not isinstance(keys, Mapping) or keys.get("k") is None:
        raise MissingThreshold()

    try:
        return ThresholdSpec.model_validate(dict(keys))
    except ValidationError as e:
        field = str(e.errors()[0]["loc"][0])
        raise InvalidThreshold(keys.get(field), field) from e


# =============================================================================
# SOLVER
# =============================================================================


class ConstantTermSolver:
    """
    Реконструкция свободного члена полинома степени k-1 по k и более
    точкам, значения которых записаны в основаниях 2..36.
    """

    def __init__(self, config: Optional[SolverConfig] = None):
        """
        Args:
            config: Конфигурация солвера (default: SolverConfig())
        """
        self.config = config or SolverConfig()

    def solve(self, document: Any) -> SolveResult:
        """
        Полный проход: документ → свободный член.

        Raises:
            InvalidDocument, MissingThreshold, InvalidThreshold,
            MalformedRecord, UnsupportedBase, InvalidDigit, NoPoints,
            InsufficientPoints, DuplicateX, NonIntegerResult
        """
        if self.config.validate_contract:
            validate_sample_set(document)
        elif not isinstance(document, Mapping):
            raise InvalidDocument(f"expected an object, got {type(document).__name__}")

        threshold = parse_threshold(document)
        points = build_points(
            document,
            separator=self.config.digit_separator,
            allow_empty_numeral=self.config.allow_empty_numeral,
        )

        if threshold.n is not None and threshold.n != len(points):
            logger.warning(
                "keys.n=%s does not match %d usable points",
                format_in_base(threshold.n, 10),
                len(points),
            )

        chosen = select_points(points, threshold.k)
        constant = constant_term_at_zero(chosen)

        return SolveResult(
            constant_term=constant,
            threshold=threshold,
            points_used=tuple(chosen),
            points_available=len(points),
        )


def solve_constant_term(document: Any, config: Optional[SolverConfig] = None) -> int:
    """Convenience: свободный член документа как int."""
    return ConstantTermSolver(config).solve(document).constant_term


# =============================================================================
# DOCUMENT BUILDER
# =============================================================================


def build_document(
    points: Iterable[Tuple[int, int]],
    k: int,
    base: int = 10,
    n: Optional[int] = None,
) -> Dict[str, Any]:
    """
    Сборка входного документа из точек (x, y) с value в основании base.

    Обратная операция к Point Set Builder; используется для подготовки
    тестовых наборов.

    Examples:
        >>> build_document([(1, 3), (2, 5)], k=2, base=16)
        {'keys': {'n': 2, 'k': 2}, '1': {'base': '16', 'value': '3'}, '2': {'base': '16', 'value': '5'}}
    """
    points = list(points)
    document: Dict[str, Any] = {
        KEYS_PROPERTY: {"n": len(points) if n is None else n, "k": k}
    }
    for x, y in points:
        document[format_in_base(x, 10)] = {"base": str(base), "value": format_in_base(y, base)}
    return document
