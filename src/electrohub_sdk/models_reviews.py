from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from .models_catalog import Product


class Review(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: int
    content: str = ""
    rating: int = Field(ge=1, le=5)
    user_id: int | None = Field(default=None, alias="userId")
    product_id: int | None = Field(default=None, alias="productId")
    product: Product | None = None
    created_at: datetime | None = Field(default=None, alias="createdAt")
    updated_at: datetime | None = Field(default=None, alias="updatedAt")


class MutationResponse(BaseModel):
    model_config = ConfigDict(extra="allow")

    message: str | None = None
