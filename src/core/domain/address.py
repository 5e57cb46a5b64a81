"""
Address — Модель почтового адреса

Immutable Pydantic модель. Используется в User, Company и PaymentMethod.
Соответствует схеме address.json (JSON ключи в camelCase).
"""

from typing import Any, Optional

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from src.core.contracts import is_address


class Address(BaseModel):
    """
    Модель почтового адреса.

    Все поля опциональны: Address.from_json() для невалидного входа
    возвращает пустой адрес.
    """

    line1: Optional[str] = Field(None, description="Основная строка адреса")
    line2: Optional[str] = Field(None, description="Дополнительная строка адреса")
    city: Optional[str] = Field(None, description="Город")
    state: Optional[str] = Field(None, description="Регион / штат")
    county: Optional[str] = Field(None, description="Округ")
    zipcode: Optional[str] = Field(None, description="Почтовый индекс")
    country: Optional[str] = Field(None, description="Страна")

    model_config = {"frozen": True, "populate_by_name": True, "alias_generator": to_camel}

    @classmethod
    def from_json(cls, props: Any) -> "Address":
        """
        Fail-soft конструктор из JSON.

        Args:
            props: JSON dict (address контракт) или Address

        Returns:
            Address; пустой Address если props не соответствует контракту
        """
        if isinstance(props, Address):
            return props
        if not is_address(props):
            return cls()

        return cls(
            line1=props["line1"],
            line2=props.get("line2") or None,
            city=props["city"],
            state=props["state"],
            county=props.get("county") or None,
            zipcode=props["zipcode"],
            country=props["country"],
        )

    def format(self) -> str:
        """
        Полный форматированный адрес.

        Returns:
            Например, 'One Apple Park Way, Cupertino, CA 95014 US'
        """
        street = " ".join(part for part in (self.line1, self.line2) if part)
        region = ", ".join(part for part in (self.state, self.county) if part)
        head = ", ".join(part for part in (street, self.city, region) if part)
        tail = " ".join(part for part in (self.zipcode, self.country) if part)
        return f"{head} {tail}".strip()
