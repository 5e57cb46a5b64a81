"""
JSON Schema Contract Validators

Модуль для валидации JSON данных согласно формальным JSON Schema контрактам.
Использует библиотеку jsonschema для проверки соответствия данных схемам.

Схемы (src/core/contracts/schema/):
- user.json, address.json, company.json
- billing.json, payment_method.json
- order.json, invoice_entry.json
- catalog_product.json, user_review.json

Предикаты is_<contract>() — fail-soft проверка формы: возвращают bool и
никогда не выбрасывают исключений. Pydantic модели проверяются через
их JSON представление (by_alias).
"""

import json
from collections.abc import Mapping
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator, ValidationError
from pydantic import BaseModel


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
            schema_name: Имя схемы без расширения (например, 'user')

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

        # Валидируем саму схему (meta-validation)
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

    Инкапсулирует логику валидации данных против JSON Schema.
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
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        """
        Итератор по всем ошибкам валидации.

        Yields:
            ValidationError объекты для каждой найденной ошибки
        """
        return self.validator.iter_errors(data)


class UserValidator(ContractValidator):
    def __init__(self):
        super().__init__("user")


class AddressValidator(ContractValidator):
    def __init__(self):
        super().__init__("address")


class CompanyValidator(ContractValidator):
    def __init__(self):
        super().__init__("company")


class BillingValidator(ContractValidator):
    def __init__(self):
        super().__init__("billing")


class PaymentMethodValidator(ContractValidator):
    def __init__(self):
        super().__init__("payment_method")


class OrderValidator(ContractValidator):
    def __init__(self):
        super().__init__("order")


class InvoiceEntryValidator(ContractValidator):
    """Валидатор записи журнала счетов: {lineItem, priority?}."""

    def __init__(self):
        super().__init__("invoice_entry")


class CatalogProductValidator(ContractValidator):
    def __init__(self):
        super().__init__("catalog_product")


class UserReviewValidator(ContractValidator):
    def __init__(self):
        super().__init__("user_review")


# =============================================================================
# SHAPE PREDICATES
# =============================================================================


@lru_cache(maxsize=None)
def _cached_validator(schema_name: str) -> ContractValidator:
    return ContractValidator(schema_name)


def _conforms(schema_name: str, obj: Any) -> bool:
    """
    Fail-soft проверка объекта против контракта.

    Args:
        schema_name: Имя схемы
        obj: Mapping или pydantic модель

    Returns:
        True если объект соответствует схеме
    """
    if isinstance(obj, BaseModel):
        obj = obj.model_dump(by_alias=True, mode="json")
    if not isinstance(obj, Mapping):
        return False
    return _cached_validator(schema_name).is_valid(dict(obj))


def is_user(obj: Any) -> bool:
    return _conforms("user", obj)


def is_address(obj: Any) -> bool:
    return _conforms("address", obj)


def is_company(obj: Any) -> bool:
    return _conforms("company", obj)


def is_billing(obj: Any) -> bool:
    return _conforms("billing", obj)


def is_payment_method(obj: Any) -> bool:
    return _conforms("payment_method", obj)


def is_order(obj: Any) -> bool:
    return _conforms("order", obj)


def is_invoice_entry(obj: Any) -> bool:
    return _conforms("invoice_entry", obj)


def is_product(obj: Any) -> bool:
    return _conforms("catalog_product", obj)


def is_user_review(obj: Any) -> bool:
    return _conforms("user_review", obj)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_user(data: Dict[str, Any]) -> None:
    """
    Валидация user данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    UserValidator().validate(data)


def validate_order(data: Dict[str, Any]) -> None:
    """
    Валидация order данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    OrderValidator().validate(data)


def validate_catalog_product(data: Dict[str, Any]) -> None:
    """
    Валидация catalog_product данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    CatalogProductValidator().validate(data)
