"""
JSON Schema Contract Validators

Модуль для валидации JSON данных согласно формальным JSON Schema контрактам.
Использует библиотеку jsonschema для проверки соответствия данных схемам.

Схемы (поставляются внутри пакета, contracts/schema/):
- operation_request.json
- operation_result.json

Межполевые ограничения (длина двоичных полей == bits, decimal == str(value))
JSON Schema не выражает; они проверяются валидаторами после схемы.
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterator

import jsonschema
from jsonschema import Draft202012Validator, ValidationError
from jsonschema.exceptions import best_match


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы ищутся в каталоге schema/ рядом с этим модулем.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'operation_request')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если схема не проходит meta-валидацию
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Валидируем саму схему (meta-validation)
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    Ограничения, которые JSON Schema не выражает (связи между полями),
    подклассы добавляют через _cross_field_errors; validate / is_valid /
    iter_errors учитывают оба источника ошибок.
    """

    def __init__(self, schema_name: str):
        """
        Args:
            schema_name: Имя схемы для валидации
        """
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы и межполевых ограничений.

        Raises:
            ValidationError: Наиболее релевантная из найденных ошибок
        """
        error = best_match(self.iter_errors(data))
        if error is not None:
            raise error

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Проверка валидности данных без exception."""
        return next(self.iter_errors(data), None) is None

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        """Итератор по всем ошибкам валидации (ValidationError)."""
        yield from self.validator.iter_errors(data)
        yield from self._cross_field_errors(data)

    def _cross_field_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        return iter(())


def _width_errors(data: Dict[str, Any], fields: tuple[str, ...]) -> Iterator[ValidationError]:
    """
    Ошибки несовпадения длины двоичных полей с bits.

    Если bits или само поле имеют неверный тип, ошибку уже выдала схема.
    """
    if not isinstance(data, dict):
        return
    bits = data.get("bits")
    if isinstance(bits, bool) or not isinstance(bits, int):
        return

    for name in fields:
        value = data.get(name)
        if isinstance(value, str) and len(value) != bits:
            yield ValidationError(
                f"{name} has {len(value)} bits, expected {bits}",
                validator="bitWidth",
                validator_value=bits,
                instance=value,
                path=[name],
            )


class OperationRequestValidator(ContractValidator):
    """
    Валидатор для operation_request контракта.

    Помимо схемы: len(a) == len(b) == bits, как в OperationRequest.
    """

    def __init__(self):
        super().__init__("operation_request")

    def _cross_field_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        return _width_errors(data, ("a", "b"))


class OperationResultValidator(ContractValidator):
    """
    Валидатор для operation_result контракта.

    Помимо схемы: len(binary) == bits и decimal == str(value),
    как в OperationResult.
    """

    def __init__(self):
        super().__init__("operation_result")

    def _cross_field_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        yield from _width_errors(data, ("binary",))

        if not isinstance(data, dict):
            return
        value = data.get("value")
        decimal = data.get("decimal")
        if (
            isinstance(value, int)
            and not isinstance(value, bool)
            and isinstance(decimal, str)
            and decimal != str(value)
        ):
            yield ValidationError(
                f"decimal {decimal!r} does not match value {value}",
                validator="decimalValue",
                validator_value=value,
                instance=decimal,
                path=["decimal"],
            )


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_operation_request(data: Dict[str, Any]) -> None:
    """
    Валидация operation_request данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    OperationRequestValidator().validate(data)


def validate_operation_result(data: Dict[str, Any]) -> None:
    """
    Валидация operation_result данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    OperationResultValidator().validate(data)
