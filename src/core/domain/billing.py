"""
Billing — Платёжный профиль пользователя

Модели:
- PaymentMethod: карта или платёжный процессор (payment_method.json)
- Billing: список платёжных методов (billing.json)

Номер карты и CVV скрыты из repr().
"""

from typing import Any, List, Optional

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from src.core.contracts import is_address, is_billing, is_payment_method

from .address import Address


def _is_complete_method(props: Any) -> bool:
    """payment_method контракт и полный billingAddress (address контракт)."""
    return is_payment_method(props) and is_address(props["billingAddress"])


# =============================================================================
# PAYMENT METHOD
# =============================================================================


class PaymentMethod(BaseModel):
    """
    Платёжный метод.

    Обязательные поля контракта: name, billingAddress.
    billingAddress, не прошедший address контракт, делает метод невалидным.
    """

    name: Optional[str] = Field(None, description="Отображаемое имя метода")
    card_number: Optional[str] = Field(None, repr=False, description="Номер карты")
    card_type: Optional[str] = Field(None, description="Тип карты (credit/debit)")
    card_network: Optional[str] = Field(None, description="Платёжная сеть (VISA, ...)")
    security_code: Optional[str] = Field(None, repr=False, description="CVV/CVC")
    is_payment_processor: bool = Field(False, description="Внешний процессор (PayPal, ...)")
    is_default: bool = Field(False, description="Метод по умолчанию")
    billing_address: Optional[Address] = Field(None, description="Адрес плательщика")

    model_config = {"frozen": True, "populate_by_name": True, "alias_generator": to_camel}

    @classmethod
    def from_json(cls, props: Any) -> "PaymentMethod":
        """Fail-soft конструктор: пустой PaymentMethod для невалидного входа."""
        if isinstance(props, PaymentMethod):
            return props
        if not _is_complete_method(props):
            return cls()

        return cls(
            name=props["name"],
            card_number=props.get("cardNumber") or None,
            card_type=props.get("cardType") or None,
            card_network=props.get("cardNetwork") or None,
            security_code=props.get("securityCode") or None,
            is_payment_processor=props.get("isPaymentProcessor") is True,
            is_default=props.get("isDefault") is True,
            billing_address=Address.from_json(props["billingAddress"]),
        )

    def masked_card_number(self) -> Optional[str]:
        """
        Номер карты с открытыми последними 4 цифрами.

        Returns:
            Например, '************4242'; None если номера нет
        """
        if not self.card_number:
            return None
        digits = "".join(ch for ch in self.card_number if ch.isdigit())
        if len(digits) <= 4:
            return digits
        return "*" * (len(digits) - 4) + digits[-4:]


# =============================================================================
# BILLING
# =============================================================================


class Billing(BaseModel):
    """Платёжный профиль пользователя (immutable)."""

    payment_methods: List[PaymentMethod] = Field(
        default_factory=list, description="Платёжные методы"
    )

    model_config = {"frozen": True, "populate_by_name": True, "alias_generator": to_camel}

    @classmethod
    def from_json(cls, props: Any) -> "Billing":
        """
        Fail-soft конструктор.

        Методы, не соответствующие payment_method контракту или с неполным
        billingAddress, отбрасываются.
        """
        if isinstance(props, Billing):
            return props
        if not is_billing(props):
            return cls()

        methods = [
            PaymentMethod.from_json(method)
            for method in props["paymentMethods"]
            if _is_complete_method(method)
        ]
        return cls(payment_methods=methods)

    def default_payment_method(self) -> Optional[PaymentMethod]:
        """
        Метод по умолчанию.

        Returns:
            Первый метод с is_default, иначе первый метод, иначе None
        """
        for method in self.payment_methods:
            if method.is_default:
                return method
        return self.payment_methods[0] if self.payment_methods else None
