"""
User — Модель учётной записи пользователя

Mutable Pydantic модель (validate_assignment=True). Соответствует схеме user.json.

User владеет InvoiceLedger: журнал создаётся пустым при конструировании,
заполняется из сохранённого списка счетов через тот же путь вставки,
что и add_invoice(), и уничтожается вместе с User.
"""

import logging
from enum import IntEnum
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, PrivateAttr
from pydantic.alias_generators import to_camel

from src.core.contracts import is_address, is_billing, is_company, is_user

from .address import Address
from .billing import Billing
from .company import Company
from .invoice_ledger import InvoiceLedger, OrderLike

logger = logging.getLogger(__name__)


# =============================================================================
# ENUMS
# =============================================================================


class UserType(IntEnum):
    """Тип учётной записи"""

    GUEST = 0
    STANDARD = 1
    BUSINESS = 2


# =============================================================================
# USER MODEL
# =============================================================================


class User(BaseModel):
    """
    Модель пользователя.

    Идентификация, контакты, адрес/компания/биллинг и журнал счетов.
    Журнал (invoices) не является pydantic полем и сериализуется
    отдельно в to_json().
    """

    id: str = Field("*", min_length=1, description="Уникальный идентификатор пользователя")
    type: UserType = Field(UserType.STANDARD, description="Тип учётной записи")

    # Контакты
    first_name: Optional[str] = Field(None, description="Имя")
    last_name: Optional[str] = Field(None, description="Фамилия")
    suffix: Optional[str] = Field(None, description="Суффикс (Sr, Jr)")
    email: Optional[str] = Field(None, description="Email")
    phone: Optional[str] = Field(None, description="Телефон")

    # Вложенные разделы
    address: Optional[Address] = Field(None, description="Адрес пользователя")
    company: Optional[Company] = Field(None, description="Компания пользователя")
    billing: Optional[Billing] = Field(None, description="Платёжный профиль")

    has_edits: bool = Field(False, description="Модель содержит несохранённые изменения")

    _invoices: InvoiceLedger = PrivateAttr(default_factory=InvoiceLedger)

    model_config = {
        "populate_by_name": True,
        "alias_generator": to_camel,
        "validate_assignment": True,
    }

    @classmethod
    def from_json(cls, props: Any = None) -> "User":
        """
        Fail-soft конструктор из JSON.

        - props не соответствует user контракту → User по умолчанию
        - type копируется только если это известный UserType
        - suffix/phone только если строки
        - address/company/billing только если проходят свои контракты
        - invoices восстанавливаются через InvoiceLedger.hydrate()

        Args:
            props: JSON dict пользователя или User (копируется)

        Returns:
            Новый User
        """
        if isinstance(props, User):
            props = props.to_json()
        if not is_user(props):
            if props is not None:
                logger.warning("User payload rejected by contract; using defaults")
            return cls()

        fields: Dict[str, Any] = {
            "id": props["id"],
            "first_name": props["firstName"],
            "last_name": props["lastName"],
            "email": props["email"],
        }

        user_type = props.get("type")
        if (
            isinstance(user_type, int)
            and not isinstance(user_type, bool)
            and user_type in {member.value for member in UserType}
        ):
            fields["type"] = UserType(user_type)

        for key in ("suffix", "phone"):
            if isinstance(props.get(key), str):
                fields[key] = props[key]

        if is_address(props.get("address")):
            fields["address"] = Address.from_json(props["address"])
        if is_company(props.get("company")):
            fields["company"] = Company.from_json(props["company"])
        if is_billing(props.get("billing")):
            fields["billing"] = Billing.from_json(props["billing"])

        user = cls(**fields)
        user._invoices.hydrate(props.get("invoices"))
        return user

    @property
    def invoices(self) -> InvoiceLedger:
        """Журнал счетов пользователя."""
        return self._invoices

    def add_invoice(self, invoice: OrderLike, priority: Optional[float] = None) -> bool:
        """
        Добавление счёта в историю.

        Args:
            invoice: Order или JSON payload заказа
            priority: Приоритет (None = уровень по умолчанию)

        Returns:
            True если счёт принят журналом
        """
        return self._invoices.enqueue(invoice, priority)

    def clear_invoices(self) -> None:
        self._invoices.clear()

    @property
    def full_name(self) -> str:
        """Полное имя, например 'John Smith Sr'; отсутствующие части пустые."""
        return f"{self.first_name or ''} {self.last_name or ''} {self.suffix or ''}"

    def to_json(self) -> Dict[str, Any]:
        """
        JSON представление (camelCase), включая журнал счетов.

        Returns:
            dict, пригодный для User.from_json()
        """
        data = self.model_dump(by_alias=True, mode="json")
        data["invoices"] = self._invoices.to_json()
        return data
