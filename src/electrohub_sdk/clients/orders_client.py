from __future__ import annotations

from dataclasses import dataclass

from ..models_orders import Order
from .base import BaseClient


@dataclass
class OrdersClient(BaseClient):
    def list_orders(self) -> list[Order]:
        rows = self._request_list("GET", "/api/user/orders")
        return [Order.model_validate(row) for row in rows]
