"""
Company — Модель компании бизнес-пользователя

Соответствует схеме company.json.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from src.core.contracts import is_address, is_company

from .address import Address


class Company(BaseModel):
    """Компания пользователя (immutable)."""

    name: Optional[str] = Field(None, description="Название компании")
    department: Optional[str] = Field(None, description="Подразделение")
    phone: Optional[str] = Field(None, description="Телефон компании")
    address: Optional[Address] = Field(None, description="Адрес компании")

    model_config = {"frozen": True, "populate_by_name": True, "alias_generator": to_camel}

    @classmethod
    def from_json(cls, props: Any) -> "Company":
        """Fail-soft конструктор: пустая Company если props не соответствует контракту."""
        if isinstance(props, Company):
            return props
        if not is_company(props):
            return cls()

        address = props.get("address")
        return cls(
            name=props["name"],
            department=props.get("department") or None,
            phone=props.get("phone") or None,
            address=Address.from_json(address) if is_address(address) else None,
        )
