"""
Catalog — Модели каталога товаров

Модели:
- UserReview: отзыв пользователя (user_review.json)
- CatalogItem: базовый элемент каталога
- CatalogProduct: заказываемый товар (catalog_product.json)

Рейтинг и отзывы заполняются только если они включены у товара.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from src.core.contracts import is_product, is_user_review


# =============================================================================
# USER REVIEW
# =============================================================================


class UserReview(BaseModel):
    """Отзыв пользователя о товаре."""

    id: Optional[str] = Field(None, description="Идентификатор отзыва")
    rating: Optional[float] = Field(None, ge=0, le=5, description="Оценка 0..5")
    author: Optional[str] = Field(None, description="Автор")
    title: Optional[str] = Field(None, description="Заголовок")
    comment: Optional[str] = Field(None, description="Текст отзыва")
    created_at: Optional[str] = Field(None, description="Время создания (ISO 8601)")

    model_config = {"frozen": True, "populate_by_name": True, "alias_generator": to_camel}

    @classmethod
    def from_json(cls, props: Any) -> Optional["UserReview"]:
        """None если props не соответствует user_review контракту."""
        if isinstance(props, UserReview):
            return props
        if not is_user_review(props):
            return None
        return cls.model_validate(props)


# =============================================================================
# CATALOG ITEM
# =============================================================================


class CatalogItem(BaseModel):
    """Базовый элемент каталога."""

    id: Optional[str] = Field(None, description="Идентификатор элемента")
    name: Optional[str] = Field(None, description="Название")
    description: Optional[str] = Field(None, description="Описание")
    price: Optional[float] = Field(None, ge=0, description="Цена")
    currency: Optional[str] = Field(None, description="ISO 4217 код")
    image_url: Optional[str] = Field(None, alias="imageURL", description="URL изображения")

    model_config = {"frozen": True, "populate_by_name": True, "alias_generator": to_camel}

    @staticmethod
    def _item_fields(props: Dict[str, Any]) -> Dict[str, Any]:
        return {
            "id": props.get("id"),
            "name": props.get("name"),
            "description": props.get("description") or None,
            "price": props.get("price"),
            "currency": props.get("currency") or None,
            "image_url": props.get("imageURL") or None,
        }


# =============================================================================
# CATALOG PRODUCT
# =============================================================================


class CatalogProduct(CatalogItem):
    """
    Заказываемый товар каталога.

    Immutable модель. Для невалидного входа from_json() возвращает
    пустой товар (все поля по умолчанию).
    """

    sku: Optional[str] = Field(None, description="SKU")
    quantity: Optional[int] = Field(None, ge=0, description="Количество в упаковке")
    stock: Optional[int] = Field(None, ge=0, description="Остаток на складе")
    features: Optional[str] = Field(None, description="Ключевые особенности")
    specifications: Optional[Dict[str, Any]] = Field(None, description="Тех. характеристики")

    # Рейтинг
    enable_ratings: bool = Field(False, description="Рейтинг включён")
    rating: Optional[float] = Field(None, ge=0, le=5, description="Агрегированный рейтинг")

    # Отзывы
    enable_reviews: bool = Field(False, description="Отзывы включены")
    reviews: List[UserReview] = Field(default_factory=list, description="История отзывов")
    user_review: Optional[UserReview] = Field(None, description="Отзыв текущего пользователя")

    documents_url: Optional[str] = Field(
        None, alias="documentsURL", description="Ссылка на документацию и поддержку"
    )

    @classmethod
    def from_json(cls, props: Any) -> "CatalogProduct":
        """
        Fail-soft конструктор из JSON.

        - quantity/stock/features/specifications копируются только если truthy
        - rating только при enableRatings == True
        - reviews/userReview только при enableReviews == True;
          записи, не прошедшие user_review контракт, отбрасываются
        """
        if isinstance(props, CatalogProduct):
            return props
        if not is_product(props):
            return cls()

        fields = cls._item_fields(props)
        fields["sku"] = props["sku"]

        for key in ("quantity", "stock", "features", "specifications"):
            if props.get(key):
                fields[key] = props[key]

        if props.get("enableRatings") is True:
            fields["enable_ratings"] = True
            rating = props.get("rating")
            if isinstance(rating, (int, float)) and not isinstance(rating, bool):
                fields["rating"] = rating

        if props.get("enableReviews") is True:
            fields["enable_reviews"] = True
            user_review = UserReview.from_json(props.get("userReview"))
            if user_review is not None:
                fields["user_review"] = user_review
            reviews = [UserReview.from_json(review) for review in props.get("reviews") or []]
            fields["reviews"] = [review for review in reviews if review is not None]

        if props.get("documentsURL"):
            fields["documents_url"] = props["documentsURL"]

        return cls(**fields)

    def in_stock(self) -> bool:
        return self.stock is not None and self.stock > 0
