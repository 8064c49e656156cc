from __future__ import annotations

from dataclasses import dataclass

from ..models_reviews import MutationResponse
from .base import BaseClient


@dataclass
class CartClient(BaseClient):
    def add(self, product_id: int, quantity: int = 1) -> MutationResponse:
        if quantity < 1:
            raise ValueError("quantity must be at least 1")
        payload = self._request_object(
            "POST",
            f"/api/user/cart/add/{product_id}",
            json_body={"quantity": str(quantity)},
        )
        return MutationResponse.model_validate(payload)
