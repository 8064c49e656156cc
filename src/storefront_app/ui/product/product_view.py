from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from electrohub_sdk.formatting import format_price
from electrohub_sdk.load_state import LoadCoordinator
from electrohub_sdk.models_catalog import Product
from electrohub_sdk.stats import MAX_STARS, average_rating, filled_stars

from storefront_app.services.catalog_service import CatalogService
from storefront_app.services.errors import StorefrontServiceError
from storefront_app.services.shopper_service import ShopperService
from storefront_app.ui.shared.screen import ScreenBase
from storefront_app.ui.shared.view_state import resolve_section_state

PRODUCT_SOURCE = "product"
WISHLIST_SOURCE = "wishlist_ids"


@dataclass
class ProductView(ScreenBase):
    """Product page: the product keyed by id and the wishlist keyed by sign-in state."""

    catalog: CatalogService
    shopper: ShopperService
    product_id: int | str | None = None
    product_loads: LoadCoordinator = field(init=False)
    wishlist_loads: LoadCoordinator = field(init=False)

    module = "product_page"

    def __post_init__(self) -> None:
        self.product_loads = self._coordinator(PRODUCT_SOURCE)
        # A signed-out shopper or a failed lookup both mean "nothing wishlisted".
        self.wishlist_loads = LoadCoordinator((WISHLIST_SOURCE,))

    def mount(self) -> None:
        self.product_loads.sync_dependency(self.product_id)
        if self.product_id is None:
            self.notifications.error("Product ID is missing")
        elif self.product_loads.needs_fetch(PRODUCT_SOURCE):
            self._load(self.product_loads, PRODUCT_SOURCE, lambda: self.catalog.get_product(self.product_id))

        authenticated = self.shopper.is_authenticated()
        self.wishlist_loads.sync_dependency(authenticated)
        if authenticated and self.wishlist_loads.needs_fetch(WISHLIST_SOURCE):
            self.wishlist_loads.run(WISHLIST_SOURCE, self.shopper.wishlist_product_ids)

    def navigate(self, product_id: int | str) -> None:
        self.product_id = product_id
        self.mount()

    def unmount(self) -> None:
        self.product_loads.reset()
        self.wishlist_loads.reset()

    @property
    def product(self) -> Product | None:
        if not self.product_loads.is_loaded(PRODUCT_SOURCE):
            return None
        return self.product_loads.records(PRODUCT_SOURCE)

    @property
    def wishlist(self) -> set[int]:
        return self.wishlist_loads.records(WISHLIST_SOURCE, default=set())

    def is_wishlisted(self, product_id: int) -> bool:
        return product_id in self.wishlist

    def toggle_wishlist(self, product_id: int) -> bool:
        try:
            self.shopper.toggle_wishlist(product_id)
        except StorefrontServiceError as exc:
            self.notifications.error(exc.message)
            self._emit_mutation("wishlist.toggle", success=False, trace_id=exc.trace_id, product_id=product_id)
            return False
        self.wishlist_loads.replace_records(WISHLIST_SOURCE, self.wishlist ^ {product_id})
        self._emit_mutation("wishlist.toggle", success=True, product_id=product_id)
        return True

    def render(self) -> dict[str, Any]:
        product = self.product
        view_state = resolve_section_state(self.product_loads.status(PRODUCT_SOURCE), has_data=product is not None)
        payload: dict[str, Any] = {
            "view_state": view_state.render(),
            "notifications": self.notifications.render(),
        }
        if product is None:
            return payload
        rating = average_rating(product.reviews)
        stars = filled_stars(rating)
        payload["product"] = {
            "id": product.id,
            "title": product.name,
            "description": product.description or "",
            "images": [image.url for image in product.images],
            "price": format_price(product.price),
            "discounted_price": format_price(product.discounted_price),
            "offer_percentage": product.offer_percentage,
            "category": product.category,
            "average_rating": rating,
            "review_count": len(product.reviews or []),
            "stars": [index < stars for index in range(MAX_STARS)],
            "wishlisted": self.is_wishlisted(product.id),
        }
        return payload
