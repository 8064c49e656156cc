from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from .models_catalog import Product


class OrderStatus(str, Enum):
    ORDER_CONFIRMED = "OrderConfirmed"
    SHIPPED = "Shipped"
    DELIVERED = "Delivered"
    CANCELLED = "Cancelled"
    RETURNED = "Returned"


class OrderUser(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: int | None = None
    name: str | None = None


class OrderItem(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: int
    order_id: int = Field(alias="orderId")
    quantity: int = Field(gt=0)
    status: OrderStatus
    product: Product | None = None
    created_at: datetime | None = Field(default=None, alias="createdAt")


class Order(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: int
    created_at: datetime = Field(alias="createdAt")
    user: OrderUser | None = None
    order_items: list[OrderItem] = Field(default_factory=list, alias="orderItems")


class SellerOrdersResponse(BaseModel):
    model_config = ConfigDict(extra="allow")

    orders: list[Order] = Field(default_factory=list)
