"""
Order — Модель заказа (счёта) в истории пользователя

Immutable Pydantic модель; соответствует схеме order.json.
Экземпляры Order хранятся в InvoiceLedger и могут разделяться без копирования.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, Field, ValidationError
from pydantic.alias_generators import to_camel

from src.core.contracts import is_order


# =============================================================================
# NESTED MODELS
# =============================================================================


class OrderItem(BaseModel):
    """Позиция заказа."""

    sku: str = Field(..., min_length=1, description="SKU товара")
    name: Optional[str] = Field(None, description="Название товара")
    quantity: int = Field(..., ge=1, description="Количество")
    unit_price: float = Field(..., ge=0, description="Цена за единицу")

    model_config = {"frozen": True, "populate_by_name": True, "alias_generator": to_camel}

    def subtotal(self) -> float:
        return self.quantity * self.unit_price


# =============================================================================
# ORDER MODEL
# =============================================================================


class Order(BaseModel):
    """
    Модель заказа.

    Обязательное поле только id; остальное — опциональные детали покупки.
    """

    id: str = Field(..., min_length=1, description="Идентификатор заказа")
    status: Optional[str] = Field(None, description="Статус заказа")
    items: List[OrderItem] = Field(default_factory=list, description="Позиции заказа")
    currency: Optional[str] = Field(None, pattern="^[A-Z]{3}$", description="ISO 4217 код")
    created_at: Optional[str] = Field(None, description="Время создания (ISO 8601)")

    model_config = {"frozen": True, "populate_by_name": True, "alias_generator": to_camel}

    @classmethod
    def from_json(cls, props: Any) -> Optional["Order"]:
        """
        Fail-soft конструктор из JSON.

        Returns:
            Order, либо None если props не соответствует order контракту
        """
        if isinstance(props, Order):
            return props
        if not is_order(props):
            return None
        try:
            return cls.model_validate(props)
        except ValidationError:
            return None

    def total(self) -> float:
        """Сумма заказа по всем позициям."""
        return sum(item.subtotal() for item in self.items)

    def to_json(self) -> dict:
        return self.model_dump(by_alias=True, mode="json", exclude_none=True)
