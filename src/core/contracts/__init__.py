"""
Contract Validation Module

Модуль для валидации JSON контракта входного документа.
"""

from .validators import SampleSetValidator, load_schema, validate_sample_set

__all__ = [
    "SampleSetValidator",
    "load_schema",
    "validate_sample_set",
]
