from __future__ import annotations

from dataclasses import dataclass

from ..models_catalog import Product
from .base import BaseClient


@dataclass
class ProductsClient(BaseClient):
    def get_product(self, product_id: int | str) -> Product:
        payload = self._request_object("GET", f"/api/user/products/{product_id}")
        return Product.model_validate(payload)
