from __future__ import annotations

from dataclasses import dataclass

from ..models_catalog import Product, WishlistIdsResponse, WishlistResponse
from ..models_reviews import MutationResponse
from .base import BaseClient


@dataclass
class WishlistClient(BaseClient):
    def list_products(self) -> list[Product]:
        payload = self._request_object("GET", "/api/user/wishlist")
        return WishlistResponse.model_validate(payload).products

    def product_ids(self) -> set[int]:
        payload = self._request_object("GET", "/api/user/wishlist/wishlistproducts")
        return set(WishlistIdsResponse.model_validate(payload).wishlist)

    def toggle(self, product_id: int) -> MutationResponse:
        """Add or remove the product; the server flips its membership."""
        payload = self._request_object("POST", f"/api/user/wishlist/{product_id}")
        return MutationResponse.model_validate(payload)
