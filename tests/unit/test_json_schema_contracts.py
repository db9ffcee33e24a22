"""
Tests for JSON Schema Contract Validators и Pydantic моделей конверсии

Комплексное тестирование:
- Валидность самих схем
- Валидация правильных данных
- Детекция нарушений required полей, типов и enum
- Интеграция с Pydantic моделями (model_dump → schema)
- Immutability (frozen=True)
"""

import pytest
from jsonschema import ValidationError
from pydantic import ValidationError as PydanticValidationError

from baseconv.core.contracts import (
    CONTRACTS,
    ConversionContracts,
    load_schema,
    validate_conversion_request,
    validate_conversion_result,
)
from baseconv.core.domain import (
    CONTRACT_SCHEMA_VERSION,
    ConversionRequest,
    ConversionResult,
    LetterCase,
    Radix,
)
from baseconv.core.errors import InvalidCharacter, Overflow
from baseconv.core.math import convert_payload, convert_request


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_request():
    """Валидный conversion_request для тестирования."""
    return {
        "schema_version": "1",
        "value": "11010110",
        "source": "binary",
        "target": "hexadecimal",
        "letter_case": "upper",
    }


@pytest.fixture
def valid_result():
    """Валидный conversion_result для тестирования."""
    return {
        "schema_version": "1",
        "value": "11010110",
        "source": "binary",
        "target": "hexadecimal",
        "letter_case": "upper",
        "result": "D6",
    }


# =============================================================================
# SCHEMA LOADING
# =============================================================================


class TestSchemaLoading:
    """Тесты загрузки схем"""

    def test_load_schemas(self) -> None:
        assert load_schema("conversion_request")["title"] == "ConversionRequest"
        assert load_schema("conversion_result")["title"] == "ConversionResult"

    def test_missing_schema(self) -> None:
        with pytest.raises(FileNotFoundError):
            load_schema("does_not_exist")

    def test_missing_directory(self, tmp_path) -> None:
        with pytest.raises(RuntimeError, match="Schema directory not found"):
            ConversionContracts(tmp_path / "nowhere")

    def test_invalid_schema(self, tmp_path) -> None:
        (tmp_path / "broken.json").write_text('{"type": 12}', encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON Schema"):
            load_schema("broken", tmp_path)


# =============================================================================
# REQUEST CONTRACT
# =============================================================================


class TestConversionRequestContract:
    """Тесты conversion_request контракта"""

    def test_valid(self, valid_request) -> None:
        validate_conversion_request(valid_request)
        CONTRACTS.check_request(valid_request)

    def test_letter_case_optional(self, valid_request) -> None:
        del valid_request["letter_case"]
        validate_conversion_request(valid_request)

    def test_missing_required(self, valid_request) -> None:
        del valid_request["target"]
        with pytest.raises(ValidationError):
            validate_conversion_request(valid_request)

    def test_unknown_radix(self, valid_request) -> None:
        valid_request["source"] = "ternary"
        with pytest.raises(ValidationError):
            validate_conversion_request(valid_request)

    def test_empty_value(self, valid_request) -> None:
        valid_request["value"] = ""
        with pytest.raises(ValidationError):
            validate_conversion_request(valid_request)

    def test_wrong_schema_version(self, valid_request) -> None:
        valid_request["schema_version"] = "2"
        with pytest.raises(ValidationError):
            validate_conversion_request(valid_request)

    def test_additional_properties(self, valid_request) -> None:
        valid_request["extra"] = True
        with pytest.raises(ValidationError):
            CONTRACTS.check_request(valid_request)

    def test_iter_errors(self, valid_request) -> None:
        valid_request["value"] = ""
        valid_request["target"] = "base64"
        errors = list(CONTRACTS.request_errors(valid_request))
        assert len(errors) == 2


# =============================================================================
# RESULT CONTRACT
# =============================================================================


class TestConversionResultContract:
    """Тесты conversion_result контракта"""

    def test_valid(self, valid_result) -> None:
        validate_conversion_result(valid_result)
        CONTRACTS.check_result(valid_result)

    def test_non_digit_result(self, valid_result) -> None:
        valid_result["result"] = "-D6"
        with pytest.raises(ValidationError):
            validate_conversion_result(valid_result)

    def test_letter_case_required(self, valid_result) -> None:
        del valid_result["letter_case"]
        with pytest.raises(ValidationError):
            validate_conversion_result(valid_result)


# =============================================================================
# PYDANTIC MODELS
# =============================================================================


class TestConversionModels:
    """Тесты Pydantic моделей и их совместимости со схемами"""

    def test_request_defaults(self) -> None:
        request = ConversionRequest(value="17", source=Radix.OCTAL, target=Radix.DECIMAL)
        assert request.schema_version == CONTRACT_SCHEMA_VERSION
        assert request.letter_case is LetterCase.UPPER

    def test_request_from_json_payload(self, valid_request) -> None:
        request = ConversionRequest.model_validate(valid_request)
        assert request.source is Radix.BINARY
        assert request.target is Radix.HEXADECIMAL

    def test_request_dump_matches_schema(self) -> None:
        request = ConversionRequest(
            value="ff", source=Radix.HEXADECIMAL, target=Radix.OCTAL
        )
        validate_conversion_request(request.model_dump(mode="json"))

    def test_result_dump_matches_schema(self, valid_request) -> None:
        result = convert_request(ConversionRequest.model_validate(valid_request))
        payload = result.model_dump(mode="json")

        validate_conversion_result(payload)
        assert payload["result"] == "D6"

    def test_request_rejects_empty_value(self) -> None:
        with pytest.raises(PydanticValidationError):
            ConversionRequest(value="", source=Radix.BINARY, target=Radix.OCTAL)

    def test_request_rejects_unknown_radix(self) -> None:
        with pytest.raises(PydanticValidationError):
            ConversionRequest(value="1", source="ternary", target=Radix.OCTAL)

    def test_models_frozen(self) -> None:
        request = ConversionRequest(value="1", source=Radix.BINARY, target=Radix.OCTAL)
        with pytest.raises(PydanticValidationError):
            request.value = "0"  # type: ignore[misc]

        result = ConversionResult(
            value="1",
            source=Radix.BINARY,
            target=Radix.OCTAL,
            letter_case=LetterCase.UPPER,
            result="1",
        )
        with pytest.raises(PydanticValidationError):
            result.result = "2"  # type: ignore[misc]


# =============================================================================
# CONVERT PAYLOAD
# =============================================================================


class TestConvertPayload:
    """Тесты конверсии JSON payload через контракты"""

    def test_valid_payload(self, valid_request, valid_result) -> None:
        assert convert_payload(valid_request) == valid_result

    def test_default_letter_case_filled(self, valid_request) -> None:
        del valid_request["letter_case"]
        payload = convert_payload(valid_request)

        assert payload["letter_case"] == "upper"
        validate_conversion_result(payload)

    def test_lowercase_payload(self, valid_request) -> None:
        valid_request["letter_case"] = "lower"
        assert convert_payload(valid_request)["result"] == "d6"

    def test_additional_property_rejected_before_conversion(self, valid_request) -> None:
        """Лишнее поле отвергается схемой (pydantic его бы проигнорировал)"""
        valid_request["radix_hint"] = 2
        with pytest.raises(ValidationError):
            convert_payload(valid_request)

    def test_unknown_radix_rejected(self, valid_request) -> None:
        valid_request["target"] = "base64"
        with pytest.raises(ValidationError):
            convert_payload(valid_request)

    def test_conversion_errors_propagate(self, valid_request) -> None:
        valid_request["value"] = "1012"
        with pytest.raises(InvalidCharacter):
            convert_payload(valid_request)

        valid_request.update(value="18446744073709551616", source="decimal")
        with pytest.raises(Overflow):
            convert_payload(valid_request)
