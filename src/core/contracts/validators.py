"""
JSON Schema Contract Validators

Модуль для валидации конфигурационных документов кодека согласно формальным
JSON Schema контрактам. Использует библиотеку jsonschema.

Схемы (src/core/contracts/schema/):
- price_range.json
- fixed_point_config.json
- price_codec_config.json

Контракты проверяют форму документа (типы, обязательные поля, границы).
Инварианты между полями (min < max, scale < width - 1) проверяют модели
PriceRange / FixedPointConfig.
"""

import json
from pathlib import Path
from typing import Any, Dict, List

import jsonschema
import structlog
from jsonschema import Draft202012Validator, ValidationError
from jsonschema.exceptions import best_match

log = structlog.get_logger(__name__)


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы лежат в каталоге schema/ рядом с этим модулем.
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
            schema_name: Имя схемы без расширения (например, 'price_range')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Meta-validation самой схемы
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Собирает все нарушения документа за один проход, логирует их
    и поднимает наиболее релевантное (jsonschema best_match).
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Наиболее релевантное из найденных нарушений
        """
        errors = self.collect_errors(data)
        if not errors:
            return

        log.warning(
            "contract_violation",
            schema=self.schema_name,
            error_count=len(errors),
            errors=[f"{'/'.join(map(str, e.absolute_path)) or '<root>'}: {e.message}" for e in errors],
        )
        raise best_match(errors)

    def collect_errors(self, data: Dict[str, Any]) -> List[ValidationError]:
        """Все нарушения документа, отсортированные по пути в документе."""
        return sorted(
            self.validator.iter_errors(data), key=lambda e: list(map(str, e.absolute_path))
        )


class PriceRangeValidator(ContractValidator):
    """Валидатор для price_range контракта."""

    def __init__(self):
        super().__init__("price_range")


class FixedPointConfigValidator(ContractValidator):
    """Валидатор для fixed_point_config контракта."""

    def __init__(self):
        super().__init__("fixed_point_config")


class PriceCodecConfigValidator(ContractValidator):
    """Валидатор для price_codec_config контракта (диапазон + контейнер)."""

    def __init__(self):
        super().__init__("price_codec_config")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_price_range(data: Dict[str, Any]) -> None:
    """
    Валидация price_range документа.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    PriceRangeValidator().validate(data)


def validate_fixed_point_config(data: Dict[str, Any]) -> None:
    """
    Валидация fixed_point_config документа.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    FixedPointConfigValidator().validate(data)


def validate_price_codec_config(data: Dict[str, Any]) -> None:
    """
    Валидация price_codec_config документа.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    PriceCodecConfigValidator().validate(data)
