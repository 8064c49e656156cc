from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from electrohub_sdk.derivation import (
    PLACEHOLDER_IMAGE_URL,
    PRODUCT_PROJECTION,
    DerivedPage,
    ListingFilters,
    derive_page,
)
from electrohub_sdk.formatting import format_price
from electrohub_sdk.load_state import LoadCoordinator
from electrohub_sdk.models_catalog import Product

from storefront_app.services.errors import StorefrontServiceError
from storefront_app.services.shopper_service import ShopperService
from storefront_app.ui.shared.notification_center import BOTTOM_CENTER
from storefront_app.ui.shared.pagination import clamp_page, goto_page, next_page, page_numbers, prev_page
from storefront_app.ui.shared.screen import ScreenBase
from storefront_app.ui.shared.view_state import resolve_section_state

WISHLIST_SOURCE = "wishlist"
WISHLIST_ERROR = "Error updating wishlist"


def wishlist_card(product: Product) -> dict[str, Any]:
    return {
        "id": product.id,
        "name": product.name,
        "image_url": product.primary_image_url or PLACEHOLDER_IMAGE_URL,
        "price": format_price(product.price),
        "discounted_price": format_price(product.discounted_price),
        "offer_percentage": product.offer_percentage,
        "detail_path": f"/product/{product.id}",
    }


@dataclass
class WishlistView(ScreenBase):
    service: ShopperService
    page_size: int = 10
    filters: ListingFilters = field(init=False)
    loads: LoadCoordinator = field(init=False)

    module = "user_wishlist"

    def __post_init__(self) -> None:
        self.filters = ListingFilters(page_size=self.page_size)
        self.loads = self._coordinator(WISHLIST_SOURCE)

    def mount(self) -> None:
        if self.loads.needs_fetch(WISHLIST_SOURCE):
            if self._load(self.loads, WISHLIST_SOURCE, self.service.list_wishlist):
                self.filters = ListingFilters(page_size=self.page_size)

    def unmount(self) -> None:
        self.loads.reset()
        self.filters = ListingFilters(page_size=self.page_size)

    @property
    def products(self) -> list[Product]:
        return self.loads.records(WISHLIST_SOURCE)

    def set_search(self, term: str) -> None:
        self.filters.search = term
        self.filters.page = 1

    def goto_page(self, page: int) -> None:
        goto_page(self.filters, page, self.product_page().total_pages)

    def next_page(self) -> None:
        next_page(self.filters, self.product_page().total_pages)

    def prev_page(self) -> None:
        prev_page(self.filters)

    def product_page(self) -> DerivedPage[Product]:
        return derive_page(self.products, self.filters, PRODUCT_PROJECTION)

    def _clamp_page(self) -> None:
        self.filters.page = clamp_page(self.filters.page, self.product_page().total_pages)

    def delete(self, product_id: int) -> bool:
        """Drop the product locally first, then tell the server.

        The removal is optimistic and never rolled back: if the request fails
        the product stays hidden and only an error toast is shown.
        """
        remaining = [product for product in self.products if product.id != product_id]
        self.loads.replace_records(WISHLIST_SOURCE, remaining)
        self._clamp_page()
        try:
            response = self.service.toggle_wishlist(product_id)
        except StorefrontServiceError as exc:
            self.notifications.error(exc.message or WISHLIST_ERROR)
            self._emit_mutation("wishlist.delete", success=False, trace_id=exc.trace_id, product_id=product_id)
            return False
        self.notifications.success(response.message or "Wishlist updated", position=BOTTOM_CENTER)
        self._emit_mutation("wishlist.delete", success=True, product_id=product_id)
        return True

    def add_to_cart(self, product_id: int) -> bool:
        try:
            response = self.service.add_to_cart(product_id, quantity=1)
        except StorefrontServiceError as exc:
            self.notifications.error(exc.message)
            self._emit_mutation("cart.add", success=False, trace_id=exc.trace_id, product_id=product_id)
            return False
        self.notifications.success(response.message or "Added to cart")
        self._emit_mutation("cart.add", success=True, product_id=product_id)
        return True

    def render(self) -> dict[str, Any]:
        page = self.product_page()
        return {
            "view_state": resolve_section_state(
                self.loads.status(WISHLIST_SOURCE),
                has_data=bool(page.items),
                empty_message="Your wishlist is empty",
            ).render(),
            "items": [wishlist_card(product) for product in page.items],
            "filtered_count": page.filtered_count,
            "pagination": {
                "page": page.page,
                "page_size": page.page_size,
                "total_pages": page.total_pages,
                "pages": page_numbers(page.total_pages) if page.total_pages > 1 else [],
            },
            "notifications": self.notifications.render(),
        }
