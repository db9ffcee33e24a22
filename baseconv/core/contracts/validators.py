"""
Conversion Contracts — JSON Schema граница движка конверсии

Payload запроса проверяется по conversion_request.json до построения
ConversionRequest, payload результата — по conversion_result.json после
конверсии. Pydantic модели проверяют типы, схемы дополнительно
фиксируют форму JSON (additionalProperties, schema_version, алфавит
результата) для внешних потребителей.

Схемы (core/contracts/schema/):
- conversion_request.json
- conversion_result.json
"""

import json
from pathlib import Path
from typing import Any, Dict, Final, Iterator

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

SCHEMA_DIR: Final[Path] = Path(__file__).parent / "schema"

REQUEST_SCHEMA: Final[str] = "conversion_request"
RESULT_SCHEMA: Final[str] = "conversion_result"


def load_schema(schema_name: str, schema_dir: Path = SCHEMA_DIR) -> Dict[str, Any]:
    """
    Загрузка и meta-validation одной JSON Schema.

    Args:
        schema_name: Имя схемы без расширения
        schema_dir: Каталог со схемами

    Returns:
        Схема как dict

    Raises:
        FileNotFoundError: Если файл схемы не найден
        ValueError: Если схема не проходит meta-validation
    """
    schema_path = schema_dir / f"{schema_name}.json"
    if not schema_path.exists():
        raise FileNotFoundError(f"Schema not found: {schema_path}")

    with open(schema_path, "r", encoding="utf-8") as f:
        schema = json.load(f)

    try:
        Draft202012Validator.check_schema(schema)
    except jsonschema.SchemaError as e:
        raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

    return schema


class ConversionContracts:
    """
    Пара валидаторов запрос/результат для одной версии контракта.

    Обе схемы загружаются один раз при создании; экземпляр неизменяем
    после __init__ и безопасен для конкурентного использования.
    """

    def __init__(self, schema_dir: Path = SCHEMA_DIR):
        if not schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {schema_dir}")

        self._request = Draft202012Validator(load_schema(REQUEST_SCHEMA, schema_dir))
        self._result = Draft202012Validator(load_schema(RESULT_SCHEMA, schema_dir))

    def check_request(self, payload: Dict[str, Any]) -> None:
        """
        Проверка payload запроса.

        Raises:
            ValidationError: Первое нарушение схемы conversion_request
        """
        self._request.validate(payload)

    def check_result(self, payload: Dict[str, Any]) -> None:
        """
        Проверка payload результата.

        Raises:
            ValidationError: Первое нарушение схемы conversion_result
        """
        self._result.validate(payload)

    def request_errors(self, payload: Dict[str, Any]) -> Iterator[ValidationError]:
        """Все нарушения схемы запроса (для диагностики клиента)."""
        return self._request.iter_errors(payload)


# Глобальный экземпляр, используемый convert_payload
CONTRACTS: Final[ConversionContracts] = ConversionContracts()


def validate_conversion_request(payload: Dict[str, Any]) -> None:
    """Проверка payload запроса по conversion_request.json."""
    CONTRACTS.check_request(payload)


def validate_conversion_result(payload: Dict[str, Any]) -> None:
    """Проверка payload результата по conversion_result.json."""
    CONTRACTS.check_result(payload)
