from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ProductImage(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: int | None = None
    url: str


class ProductReview(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: int | None = None
    rating: int = Field(ge=1, le=5)
    content: str | None = None
    user_id: int | None = Field(default=None, alias="userId")
    created_at: datetime | None = Field(default=None, alias="createdAt")


class Product(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: int
    name: str
    description: str | None = None
    price: Decimal = Field(ge=0)
    offer_percentage: Decimal = Field(default=Decimal("0"), ge=0, le=100, alias="offerPercentage")
    images: list[ProductImage] = Field(default_factory=list)
    category: str | None = None
    average_rating: float | None = Field(default=None, alias="averageRating")
    rating_count: int | None = Field(default=None, alias="ratingCount")
    reviews: list[ProductReview] | None = None

    @field_validator("category", mode="before")
    @classmethod
    def _category_name(cls, value: Any) -> Any:
        # Some endpoints embed the category record, others send only its name.
        if isinstance(value, dict):
            return value.get("name")
        return value

    @property
    def discounted_price(self) -> Decimal:
        return self.price - (self.price / 100) * self.offer_percentage

    @property
    def primary_image_url(self) -> str | None:
        return self.images[0].url if self.images else None


class CategoryAggregate(BaseModel):
    """Category with the product count the API transports as a string."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: int | None = None
    name: str
    product_count: str = Field(default="0", alias="productCount")

    @field_validator("product_count", mode="before")
    @classmethod
    def _stringify(cls, value: Any) -> Any:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    @property
    def parsed_product_count(self) -> int | None:
        try:
            return int(self.product_count.strip())
        except ValueError:
            return None


class WishlistResponse(BaseModel):
    model_config = ConfigDict(extra="allow")

    products: list[Product] = Field(default_factory=list)


class WishlistIdsResponse(BaseModel):
    model_config = ConfigDict(extra="allow")

    wishlist: list[int] = Field(default_factory=list)
