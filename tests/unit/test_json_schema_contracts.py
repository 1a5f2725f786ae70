"""
Tests for JSON Schema Contract Validators

Тестирование JSON Schema валидатора входного документа:
- Валидность самой схемы
- Валидация правильных документов
- Детекция нарушений типов
- Семантика, оставленная типизированным ошибкам core
"""

import pytest
from jsonschema import Draft202012Validator, ValidationError

from src.core.contracts import SampleSetValidator, load_schema, validate_sample_set
from src.core.errors import InvalidDocument


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def valid_sample_set():
    """Валидный документ для тестирования."""
    return {
        "keys": {"n": 4, "k": 3},
        "1": {"base": "10", "value": "4"},
        "2": {"base": "2", "value": "111"},
        "3": {"base": 10, "value": "12"},
        "6": {"base": "4", "value": "213"},
    }


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestLoadSchema:
    def test_schema_is_valid(self):
        Draft202012Validator.check_schema(load_schema("sample_set"))

    def test_schema_cached(self):
        assert load_schema("sample_set") is load_schema("sample_set")

    def test_missing_schema(self):
        with pytest.raises(FileNotFoundError):
            load_schema("does_not_exist")

    def test_missing_directory(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="Schema not found"):
            load_schema("sample_set", tmp_path / "nowhere")

    def test_invalid_schema(self, tmp_path):
        (tmp_path / "broken.json").write_text('{"type": 12}', encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON Schema"):
            load_schema("broken", tmp_path)


# =============================================================================
# SAMPLE SET
# =============================================================================


class TestSampleSetValidator:
    def test_valid(self, valid_sample_set):
        validate_sample_set(valid_sample_set)
        SampleSetValidator().validate(valid_sample_set)

    def test_string_threshold_allowed(self, valid_sample_set):
        valid_sample_set["keys"] = {"n": "4", "k": "3"}
        validate_sample_set(valid_sample_set)

    def test_extra_properties_allowed(self, valid_sample_set):
        valid_sample_set["comment"] = "ignored"
        validate_sample_set(valid_sample_set)

    def test_missing_base_left_to_core(self, valid_sample_set):
        """Отсутствие base/value — MalformedRecord, не нарушение контракта."""
        valid_sample_set["7"] = {"value": "1"}
        validate_sample_set(valid_sample_set)

    def test_root_must_be_object(self):
        with pytest.raises(InvalidDocument):
            validate_sample_set([1, 2])

    def test_keys_must_be_object(self, valid_sample_set):
        valid_sample_set["keys"] = 3
        with pytest.raises(InvalidDocument, match="at 'keys'"):
            validate_sample_set(valid_sample_set)

    def test_k_wrong_type(self, valid_sample_set):
        valid_sample_set["keys"]["k"] = [3]
        with pytest.raises(InvalidDocument, match="at 'keys/k'") as exc:
            validate_sample_set(valid_sample_set)
        assert isinstance(exc.value.__cause__, ValidationError)
        assert exc.value.path == "keys/k"

    def test_k_bool_rejected(self, valid_sample_set):
        valid_sample_set["keys"]["k"] = True
        with pytest.raises(InvalidDocument):
            validate_sample_set(valid_sample_set)

    def test_value_wrong_type(self, valid_sample_set):
        valid_sample_set["2"]["value"] = 1.5
        with pytest.raises(InvalidDocument, match="at '2/value'"):
            validate_sample_set(valid_sample_set)

    def test_null_entry_left_to_core(self, valid_sample_set):
        """null вместо записи — MalformedRecord в core, не нарушение контракта."""
        valid_sample_set["7"] = None
        validate_sample_set(valid_sample_set)

    @pytest.mark.parametrize("entry", ["ff", 255, 1.5, True, ["16", "ff"]])
    def test_non_object_entry_rejected(self, valid_sample_set, entry):
        """Запись точки — только объект {base, value} или null."""
        valid_sample_set["1"] = entry
        with pytest.raises(InvalidDocument, match="at '1'") as exc:
            validate_sample_set(valid_sample_set)
        assert exc.value.path == "1"

    def test_several_violations_reported_as_best_match(self, valid_sample_set):
        valid_sample_set["1"]["base"] = None
        valid_sample_set["2"]["value"] = []
        with pytest.raises(InvalidDocument, match=r"\(and 1 more\)") as exc:
            validate_sample_set(valid_sample_set)
        assert exc.value.path in ("1/base", "2/value")
        assert isinstance(exc.value.__cause__, ValidationError)

    def test_single_violation_has_no_count(self, valid_sample_set):
        valid_sample_set["keys"]["n"] = None
        with pytest.raises(InvalidDocument) as exc:
            validate_sample_set(valid_sample_set)
        assert "more)" not in str(exc.value)
