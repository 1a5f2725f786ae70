"""
Domain models and value objects.

Contains the input records and decoded points: ThresholdSpec,
PolynomialSample, Point.
"""

from src.core.domain.sample import (
    Point,
    PolynomialSample,
    ThresholdSpec,
)

__all__ = [
    "Point",
    "PolynomialSample",
    "ThresholdSpec",
]
