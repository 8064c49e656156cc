from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from electrohub_sdk.derivation import (
    DELETED_PRODUCT_LABEL,
    PLACEHOLDER_IMAGE_URL,
    REVIEW_PROJECTION,
    DerivedPage,
    ListingFilters,
    derive_page,
)
from electrohub_sdk.formatting import format_date
from electrohub_sdk.load_state import LoadCoordinator
from electrohub_sdk.models_reviews import Review
from electrohub_sdk.stats import MAX_STARS

from storefront_app.services.errors import StorefrontServiceError
from storefront_app.services.shopper_service import ShopperService
from storefront_app.ui.shared.pagination import clamp_page, goto_page, next_page, page_numbers, prev_page
from storefront_app.ui.shared.screen import ScreenBase
from storefront_app.ui.shared.view_state import resolve_section_state

REVIEWS_SOURCE = "reviews"


def review_card(review: Review) -> dict[str, Any]:
    product = review.product
    return {
        "id": review.id,
        "product_name": product.name if product else DELETED_PRODUCT_LABEL,
        "image_url": (product.primary_image_url if product else None) or PLACEHOLDER_IMAGE_URL,
        "rating": review.rating,
        "rating_label": f"{review.rating}.0/{MAX_STARS}",
        "stars": [index < review.rating for index in range(MAX_STARS)],
        "content": review.content,
        "date": format_date(review.created_at),
    }


@dataclass
class ReviewsView(ScreenBase):
    service: ShopperService
    page_size: int = 10
    filters: ListingFilters = field(init=False)
    loads: LoadCoordinator = field(init=False)

    module = "user_reviews"

    def __post_init__(self) -> None:
        self.filters = ListingFilters(page_size=self.page_size)
        self.loads = self._coordinator(REVIEWS_SOURCE)

    def mount(self) -> None:
        if self.loads.needs_fetch(REVIEWS_SOURCE):
            if self._load(self.loads, REVIEWS_SOURCE, self.service.list_reviews):
                self.filters = ListingFilters(page_size=self.page_size)

    def unmount(self) -> None:
        self.loads.reset()
        self.filters = ListingFilters(page_size=self.page_size)

    @property
    def reviews(self) -> list[Review]:
        return self.loads.records(REVIEWS_SOURCE)

    def set_search(self, term: str) -> None:
        self.filters.search = term
        self.filters.page = 1

    def goto_page(self, page: int) -> None:
        goto_page(self.filters, page, self.review_page().total_pages)

    def next_page(self) -> None:
        next_page(self.filters, self.review_page().total_pages)

    def prev_page(self) -> None:
        prev_page(self.filters)

    def review_page(self) -> DerivedPage[Review]:
        return derive_page(self.reviews, self.filters, REVIEW_PROJECTION)

    def _clamp_page(self) -> None:
        self.filters.page = clamp_page(self.filters.page, self.review_page().total_pages)

    def delete(self, review_id: int) -> bool:
        """Remove the review once the server confirms; the list is untouched on failure."""
        try:
            self.service.delete_review(review_id)
        except StorefrontServiceError as exc:
            self.notifications.error(exc.message)
            self._emit_mutation("review.delete", success=False, trace_id=exc.trace_id, review_id=review_id)
            return False
        remaining = [review for review in self.reviews if review.id != review_id]
        self.loads.replace_records(REVIEWS_SOURCE, remaining)
        self._clamp_page()
        self.notifications.success("Review deleted successfully")
        self._emit_mutation("review.delete", success=True, review_id=review_id)
        return True

    def render(self) -> dict[str, Any]:
        page = self.review_page()
        return {
            "title": f"My Reviews ({len(self.reviews)})",
            "view_state": resolve_section_state(
                self.loads.status(REVIEWS_SOURCE),
                has_data=bool(page.items),
                empty_message="No reviews yet",
            ).render(),
            "items": [review_card(review) for review in page.items],
            "filtered_count": page.filtered_count,
            "pagination": {
                "page": page.page,
                "page_size": page.page_size,
                "total_pages": page.total_pages,
                "pages": page_numbers(page.total_pages) if page.total_pages > 1 else [],
            },
            "notifications": self.notifications.render(),
        }
