from __future__ import annotations

from dataclasses import dataclass

from ..models_orders import Order, SellerOrdersResponse
from ..models_stats import SalesStatistics
from .base import BaseClient


@dataclass
class SellerClient(BaseClient):
    def list_orders(self) -> list[Order]:
        payload = self._request_object("GET", "/api/seller/orders")
        return SellerOrdersResponse.model_validate(payload).orders

    def sales_statistics(self) -> SalesStatistics:
        payload = self._request_object("GET", "/api/seller/salesstatistics")
        return SalesStatistics.model_validate(payload)
