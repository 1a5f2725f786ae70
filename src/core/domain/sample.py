"""
Sample Models — входные записи документа

Immutable Pydantic модели:
- ThresholdSpec: блок keys {n, k}
- PolynomialSample: запись точки {base, value}
- Point: декодированная точка (x, y)

Диапазон base намеренно НЕ ограничен моделью: проверка [2, 36]
выполняется парсером чисел (UnsupportedBase).
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from src.core.math.numerals import format_in_base


# =============================================================================
# THRESHOLD SPEC
# =============================================================================


class ThresholdSpec(BaseModel):
    """
    Порог схемы: k точек определяют полином степени k-1.

    n — только информационное поле, с фактическим числом точек
    не сверяется.
    """

    k: int = Field(..., ge=1, description="Число точек для интерполяции")
    n: Optional[int] = Field(None, description="Заявленное общее число точек")

    model_config = {"frozen": True}

    @field_validator("k", "n", mode="before")
    @classmethod
    def reject_bool(cls, v):
        """true/false не являются числом точек."""
        if isinstance(v, bool):
            raise ValueError("must be an integer, not a boolean")
        return v


# =============================================================================
# POLYNOMIAL SAMPLE
# =============================================================================


class PolynomialSample(BaseModel):
    """
    Запись точки: значение полинома, записанное в основании base.

    base принимается как число или строка ("16"), value — как строка
    (числа приводятся к десятичной строке).
    """

    base: int = Field(..., description="Основание системы счисления")
    value: str = Field(..., description="Цифры значения в основании base")

    model_config = {"frozen": True}

    @field_validator("value", mode="before")
    @classmethod
    def coerce_value(cls, v):
        """Числовое value приводится к строке (bool отвергается)."""
        if isinstance(v, int) and not isinstance(v, bool):
            return format_in_base(v, 10)
        return v


# =============================================================================
# POINT
# =============================================================================


class Point(BaseModel):
    """Точка (x, y) полинома. Равные x недопустимы среди выбранных точек."""

    x: int = Field(..., description="Абсцисса (ключ записи)")
    y: int = Field(..., description="Декодированное значение")

    model_config = {"frozen": True}
