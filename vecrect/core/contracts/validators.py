"""
JSON Schema Contract Validators

Валидация wire-документов векторов и прямоугольников согласно формальным
JSON Schema контрактам (draft 2020-12) через библиотеку jsonschema.

Контракты адресуются по имени файла без расширения (package data,
contracts/schema/):
- vector2, vector3, vector4 — {"x": ..., "y": ...[, "z"][, "w"]}
- rect2, rect3 — {"point0": {...}, "point1": {...}}

Поля — JSON numbers; лишние ключи запрещены. Порядок углов прямоугольника
(point1 >= point0) контрактом не проверяется.

Модуль не зависит от доменного слоя: сопоставление класс → имя контракта
живёт в vecrect.core.domain.serialization.
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List, Optional

import jsonschema
from jsonschema import Draft202012Validator

SCHEMA_DIR = Path(__file__).parent / "schema"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов с meta-validation и кэшем.

    По умолчанию читает схемы пакета; другой каталог передаётся явно.
    """

    def __init__(self, schema_dir: Optional[Path] = None):
        self._schema_dir = schema_dir if schema_dir is not None else SCHEMA_DIR
        if not self._schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        self._schemas: Dict[str, Dict[str, Any]] = {}

    def available(self) -> List[str]:
        """Имена контрактов каталога, по алфавиту."""
        return sorted(path.stem for path in self._schema_dir.glob("*.json"))

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'rect2')

        Returns:
            Загруженная схема как dict (повторный вызов возвращает тот же объект)

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema
        """
        cached = self._schemas.get(schema_name)
        if cached is not None:
            return cached

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.is_file():
            raise FileNotFoundError(
                f"Schema not found: {schema_path} (available: {', '.join(self.available())})"
            )

        schema = json.loads(schema_path.read_text(encoding="utf-8"))
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e.message}") from e

        self._schemas[schema_name] = schema
        return schema


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATOR
# =============================================================================


class ContractValidator:
    """
    Валидатор одного контракта, выбранного по имени.

    Examples:
        >>> ContractValidator("vector2").is_valid({"x": 1, "y": 2.5})
        True
        >>> ContractValidator("vector2").describe_errors({"x": 1})
        ["<root>: 'y' is a required property"]
    """

    def __init__(self, schema_name: str, loader: Optional[SchemaLoader] = None):
        self.schema_name = schema_name
        self.schema = (loader or _SCHEMA_LOADER).load_schema(schema_name)
        self._validator = Draft202012Validator(self.schema)

    def validate(self, data: Any) -> None:
        """
        Проверка документа; первая найденная ошибка выбрасывается.

        Raises:
            jsonschema.ValidationError: Если документ нарушает контракт
        """
        self._validator.validate(data)

    def is_valid(self, data: Any) -> bool:
        return self._validator.is_valid(data)

    def describe_errors(self, data: Any) -> List[str]:
        """
        Все нарушения в виде "путь: сообщение", упорядоченные по пути.

        Путь — JSON Pointer без ведущего "/" (например, "point0/x"),
        для корня документа — "<root>". Пустой список: документ валиден.
        """
        errors = sorted(self._validator.iter_errors(data), key=lambda e: list(map(str, e.path)))
        return [f"{'/'.join(map(str, e.path)) or '<root>'}: {e.message}" for e in errors]

    def __repr__(self) -> str:
        return f"ContractValidator({self.schema_name!r})"


@lru_cache(maxsize=None)
def get_validator(schema_name: str) -> ContractValidator:
    """Валидатор контракта схем пакета, один экземпляр на имя."""
    return ContractValidator(schema_name)


def validate_contract(schema_name: str, data: Any) -> None:
    """
    Валидация документа против контракта schema_name.

    Raises:
        FileNotFoundError: Неизвестное имя контракта
        jsonschema.ValidationError: Документ нарушает контракт
    """
    get_validator(schema_name).validate(data)
