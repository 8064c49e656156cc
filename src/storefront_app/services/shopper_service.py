from __future__ import annotations

import logging

from electrohub_sdk import ApiSession
from electrohub_sdk.models_catalog import Product
from electrohub_sdk.models_orders import Order
from electrohub_sdk.models_reviews import MutationResponse, Review

from .errors import normalize_error

logger = logging.getLogger(__name__)


class ShopperService:
    """Signed-in shopper reads and mutations: orders, reviews, wishlist, cart."""

    def __init__(self, session: ApiSession) -> None:
        self.session = session

    def is_authenticated(self) -> bool:
        return self.session.is_authenticated

    def list_orders(self) -> list[Order]:
        try:
            return self.session.orders_client().list_orders()
        except Exception as exc:
            raise normalize_error(exc) from exc

    def list_reviews(self) -> list[Review]:
        try:
            return self.session.reviews_client().list_reviews()
        except Exception as exc:
            raise normalize_error(exc) from exc

    def delete_review(self, review_id: int) -> MutationResponse:
        logger.info("review_delete_attempt", extra={"review_id": review_id})
        try:
            return self.session.reviews_client().delete_review(review_id)
        except Exception as exc:
            logger.warning("review_delete_failed", extra={"review_id": review_id})
            raise normalize_error(exc) from exc

    def list_wishlist(self) -> list[Product]:
        try:
            return self.session.wishlist_client().list_products()
        except Exception as exc:
            raise normalize_error(exc) from exc

    def wishlist_product_ids(self) -> set[int]:
        try:
            return self.session.wishlist_client().product_ids()
        except Exception as exc:
            raise normalize_error(exc) from exc

    def toggle_wishlist(self, product_id: int) -> MutationResponse:
        logger.info("wishlist_toggle_attempt", extra={"product_id": product_id})
        try:
            return self.session.wishlist_client().toggle(product_id)
        except Exception as exc:
            logger.warning("wishlist_toggle_failed", extra={"product_id": product_id})
            raise normalize_error(exc) from exc

    def add_to_cart(self, product_id: int, quantity: int = 1) -> MutationResponse:
        logger.info("cart_add_attempt", extra={"product_id": product_id, "quantity": quantity})
        try:
            return self.session.cart_client().add(product_id, quantity=quantity)
        except Exception as exc:
            raise normalize_error(exc) from exc
