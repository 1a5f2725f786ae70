"""
Point Set Builder — извлечение точек (x, y) из входного документа

Порядок:
1. Пропуск зарезервированного свойства 'keys'
2. Отбор свойств, имя которых — неотрицательное целое ("1", "02", ...)
3. Проверка наличия base и value (MalformedRecord)
4. Декодирование y парсером чисел в основании base
5. NoPoints если не найдено ни одной точки

Политика выбора: стабильная сортировка по x и первые k точек.
"""

import logging
import re
from typing import Any, Iterable, List, Mapping

from pydantic import ValidationError

from src.core.domain import Point, PolynomialSample
from src.core.errors import InsufficientPoints, MalformedRecord, NoPoints
from src.core.math import DIGIT_SEPARATOR, parse_in_base

logger = logging.getLogger(__name__)

# Зарезервированное свойство с порогом {n, k}
KEYS_PROPERTY = "keys"

_POINT_PROPERTY_RE = re.compile(r"[0-9]+")


def is_point_property(name: str) -> bool:
    """True если имя свойства состоит только из ASCII-цифр."""
    return name != KEYS_PROPERTY and _POINT_PROPERTY_RE.fullmatch(name) is not None


def parse_sample(prop: str, entry: Any) -> PolynomialSample:
    """
    Валидация записи точки.

    Raises:
        MalformedRecord: Если нет base/value или поля некорректного типа
    """
    if not isinstance(entry, Mapping) or "base" not in entry or "value" not in entry:
        raise MalformedRecord(prop)

    try:
        return PolynomialSample.model_validate(dict(entry))
    except ValidationError as e:
        fields = ", ".join(str(err["loc"][0]) for err in e.errors() if err["loc"])
        raise MalformedRecord(prop, f"has invalid fields: {fields}") from e


def build_points(
    document: Mapping[str, Any],
    separator: str = DIGIT_SEPARATOR,
    allow_empty_numeral: bool = False,
) -> List[Point]:
    """
    Построение всех точек документа в порядке свойств.

    Args:
        document: Входной документ (свойство -> запись)
        separator: Разделитель разрядов для парсера
        allow_empty_numeral: Пустое value даёт 0 вместо InvalidDigit

    Returns:
        Список точек (x = десятичное имя свойства, y = декодированное value)

    Raises:
        MalformedRecord: Запись без base/value
        UnsupportedBase: base вне [2, 36]
        InvalidDigit: Недопустимая цифра в value
        NoPoints: Ни одной точки
    """
    points = []
    for prop, entry in document.items():
        if prop == KEYS_PROPERTY:
            continue
        if not is_point_property(prop):
            logger.warning("Skipping non-numeric property '%s'", prop)
            continue

        sample = parse_sample(prop, entry)
        y = parse_in_base(
            sample.value,
            sample.base,
            separator=separator,
            allow_empty=allow_empty_numeral,
        )
        points.append(Point(x=parse_in_base(prop, 10), y=y))

    if not points:
        raise NoPoints()

    logger.debug("Collected %d candidate points", len(points))
    return points


def select_points(points: Iterable[Point], k: int) -> List[Point]:
    """
    Детерминированный выбор k точек: сортировка по x по возрастанию.

    Сортировка стабильна: точки с равным x сохраняют исходный порядок
    (дальше интерполятор выбросит DuplicateX).

    Raises:
        InsufficientPoints: Если точек меньше k
    """
    ordered = sorted(points, key=lambda p: p.x)
    if len(ordered) < k:
        raise InsufficientPoints(have=len(ordered), need=k)

    chosen = ordered[:k]
    logger.debug("Selected %d of %d points", len(chosen), len(ordered))
    return chosen
