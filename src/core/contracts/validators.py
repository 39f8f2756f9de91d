"""
JSON Schema Contract Validators

Модуль для валидации JSON данных согласно формальным JSON Schema контрактам.
Использует библиотеку jsonschema для проверки соответствия данных схемам.

Схемы:
- alphabet.json      (упорядоченный алфавит custom base)
- encoded_value.json (снимок EncodedValueSnapshot, alphabet через $ref)

Схемы ссылаются друг на друга по $id, поэтому валидаторы строятся
с общим referencing.Registry всех схем каталога.

JSON Schema не умеет проверить, что encoded состоит из символов alphabet:
эта проверка остаётся за EncodedValueSnapshot.
"""

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator
from referencing import Registry, Resource
from referencing.exceptions import Unresolvable
from referencing.jsonschema import DRAFT202012


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы поставляются вместе с пакетом в contracts/schema/.
    Каждая схема регистрируется под своим $id (или именем файла),
    чтобы $ref вида "alphabet.json" разрешался без сети.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        self._schemas: Dict[str, Dict[str, Any]] = {}
        self._registry: Registry | None = None

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'alphabet')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            json.JSONDecodeError: Если файл не является валидным JSON
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema

    def registry(self) -> Registry:
        """
        Registry всех схем каталога для разрешения $ref между контрактами.

        Строится один раз. Схема без $id регистрируется под именем файла.
        """
        if self._registry is None:
            resources = []
            for path in sorted(self._schema_dir.glob("*.json")):
                schema = self.load_schema(path.stem)
                uri = schema.get("$id", path.name)
                resources.append(
                    (uri, Resource.from_contents(schema, default_specification=DRAFT202012))
                )
            self._registry = Registry().with_resources(resources)
        return self._registry

    def validator_for(self, schema_name: str) -> Draft202012Validator:
        """
        Валидатор схемы, у которого разрешаются все внешние $ref.

        Raises:
            ValueError: Если схема ссылается на отсутствующий контракт
        """
        schema = self.load_schema(schema_name)
        registry = self.registry()
        resolver = registry.resolver(base_uri=schema.get("$id", f"{schema_name}.json"))

        for ref in _external_refs(schema):
            try:
                resolver.lookup(ref)
            except Unresolvable as e:
                raise ValueError(f"Unresolvable $ref {ref!r} in {schema_name}.json") from e

        return Draft202012Validator(schema, registry=registry)


def _external_refs(node: Any) -> list[str]:
    # $ref на другой документ (не локальный "#/...")
    if isinstance(node, dict):
        refs = []
        ref = node.get("$ref")
        if isinstance(ref, str) and not ref.startswith("#"):
            refs.append(ref)
        for value in node.values():
            refs.extend(_external_refs(value))
        return refs
    if isinstance(node, list):
        return [ref for item in node for ref in _external_refs(item)]
    return []


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str, loader: SchemaLoader | None = None):
        loader = loader or _SCHEMA_LOADER
        self.schema_name = schema_name
        self.schema = loader.load_schema(schema_name)
        self.validator = loader.validator_for(schema_name)

    def validate(self, data: Any) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Any) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Any):
        return self.validator.iter_errors(data)


class AlphabetValidator(ContractValidator):
    """Валидатор для alphabet контракта."""

    def __init__(self, loader: SchemaLoader | None = None):
        super().__init__("alphabet", loader)


class EncodedValueValidator(ContractValidator):
    """Валидатор для encoded_value контракта."""

    def __init__(self, loader: SchemaLoader | None = None):
        super().__init__("encoded_value", loader)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_alphabet(data: Any) -> None:
    """
    Валидация алфавита (JSON array).

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    AlphabetValidator().validate(data)


def validate_encoded_value(data: Dict[str, Any]) -> None:
    """
    Валидация encoded_value данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    EncodedValueValidator().validate(data)
