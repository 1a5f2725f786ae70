"""
Sample Set Contract — проверка входного документа по JSON Schema

Схема: src/core/contracts/schema/sample_set.json (Draft 2020-12).

Контракт проверяет только форму документа: keys — объект, записи точек —
объекты (или null) с полями base/value допустимых типов. Семантика
(наличие base/value, диапазон основания, k >= 1) остаётся за
типизированными ошибками core.

Из всех нарушений в InvalidDocument попадает наиболее релевантное
(jsonschema.exceptions.best_match), остальные только подсчитываются.
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List

import jsonschema
from jsonschema import Draft202012Validator
from jsonschema.exceptions import best_match

from src.core.errors import InvalidDocument

SCHEMA_DIR = Path(__file__).parent / "schema"
SAMPLE_SET_SCHEMA = "sample_set"


# =============================================================================
# SCHEMA
# =============================================================================


@lru_cache(maxsize=None)
def load_schema(name: str, schema_dir: Path = SCHEMA_DIR) -> Dict[str, Any]:
    """
    Чтение схемы <name>.json из schema_dir с meta-validation.

    Raises:
        FileNotFoundError: Нет файла <name>.json
        ValueError: Схема не проходит Draft 2020-12 meta-schema
    """
    path = schema_dir / f"{name}.json"
    if not path.exists():
        raise FileNotFoundError(f"Schema not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        schema = json.load(f)

    try:
        Draft202012Validator.check_schema(schema)
    except jsonschema.SchemaError as e:
        raise ValueError(f"Invalid JSON Schema in {name}.json: {e}") from e

    return schema


# =============================================================================
# VALIDATOR
# =============================================================================


class SampleSetValidator:
    """Проверка документа {keys, "<x>": {base, value}, ...} против схемы."""

    def __init__(self, schema_name: str = SAMPLE_SET_SCHEMA):
        self.schema_name = schema_name
        self.validator = Draft202012Validator(load_schema(schema_name))

    def validate(self, document: Any) -> None:
        """
        Raises:
            InvalidDocument: Документ нарушает схему; path указывает на
                место нарушения ("1/base"), исходная ValidationError
                доступна как __cause__
        """
        errors: List[jsonschema.ValidationError] = list(self.validator.iter_errors(document))
        if not errors:
            return

        error = best_match(errors)
        reason = error.message
        if len(errors) > 1:
            reason = f"{reason} (and {len(errors) - 1} more)"

        location = "/".join(str(part) for part in error.absolute_path)
        raise InvalidDocument(reason, location or None) from error


def validate_sample_set(document: Any) -> None:
    """
    Raises:
        InvalidDocument: Если документ не соответствует схеме
    """
    SampleSetValidator().validate(document)
