"""Filter, search, sort and paginate fetched records for list screens.

Every list screen (seller order table, user orders, reviews, wishlist) derives
what it renders from the raw records it fetched plus its ephemeral
``ListingFilters``. The steps always run in the same order because each one
narrows the input of the next:

1. status filter
2. case-insensitive search on the row's display name
3. stable time ordering (only when an order-time selector is set)
4. pagination

Order screens first expand ``Order -> OrderItem`` with ``flatten_orders`` so
each row keeps a reference to its parent order. Nothing here mutates its
inputs, so deriving twice from the same records and filters gives the same
page.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Generic, TypeVar

from .models_catalog import Product
from .models_orders import Order, OrderItem
from .models_reviews import Review

T = TypeVar("T")

DELETED_PRODUCT_LABEL = "Product Deleted"
ALL_STATUSES = "All"
UNKNOWN_CUSTOMER = "Unknown"
UNKNOWN_CUSTOMER_INITIALS = "UN"
PLACEHOLDER_IMAGE_URL = "/assets/shopping-boy.gif"
DEFAULT_PAGE_SIZE = 5


class OrderTime(str, Enum):
    NEWEST = "Newest"
    OLDEST = "Oldest"


@dataclass(frozen=True)
class FlatOrderItem:
    """One order item tagged with the order it came from."""

    item: OrderItem
    order: Order

    @property
    def id(self) -> int:
        return self.item.id

    @property
    def order_id(self) -> int:
        return self.order.id

    @property
    def status(self) -> str:
        return self.item.status.value

    @property
    def product(self) -> Product | None:
        return self.item.product

    @property
    def created_at(self) -> datetime:
        return self.item.created_at or self.order.created_at

    @property
    def product_name(self) -> str:
        return self.item.product.name if self.item.product else DELETED_PRODUCT_LABEL

    @property
    def image_url(self) -> str:
        if self.item.product is None:
            return PLACEHOLDER_IMAGE_URL
        return self.item.product.primary_image_url or PLACEHOLDER_IMAGE_URL

    @property
    def unit_price(self) -> Decimal | None:
        if self.item.product is None:
            return None
        return self.item.product.discounted_price

    @property
    def line_total(self) -> Decimal | None:
        unit = self.unit_price
        return None if unit is None else unit * self.item.quantity

    @property
    def customer_name(self) -> str:
        user = self.order.user
        name = (user.name or "").strip() if user else ""
        return name or UNKNOWN_CUSTOMER

    @property
    def customer_initials(self) -> str:
        user = self.order.user
        parts = (user.name or "").split() if user else []
        if not parts:
            return UNKNOWN_CUSTOMER_INITIALS
        return "".join(part[0] for part in parts).upper()


@dataclass(frozen=True)
class RowProjection(Generic[T]):
    """Screen-specific accessors the shared pipeline needs."""

    name_of: Callable[[T], str]
    status_of: Callable[[T], str] | None = None
    created_at_of: Callable[[T], datetime | None] | None = None


def _product_name(product: Product | None) -> str:
    return product.name if product else DELETED_PRODUCT_LABEL


ORDER_ITEM_PROJECTION: RowProjection[FlatOrderItem] = RowProjection(
    name_of=lambda row: row.product_name,
    status_of=lambda row: row.status,
    created_at_of=lambda row: row.created_at,
)

REVIEW_PROJECTION: RowProjection[Review] = RowProjection(
    name_of=lambda review: _product_name(review.product),
    created_at_of=lambda review: review.created_at,
)

PRODUCT_PROJECTION: RowProjection[Product] = RowProjection(name_of=lambda product: product.name)


@dataclass
class ListingFilters:
    search: str = ""
    statuses: frozenset[str] = field(default_factory=frozenset)
    order_time: OrderTime | None = None
    page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE

    def __post_init__(self) -> None:
        if self.page_size < 1:
            raise ValueError(f"page_size must be >= 1, got {self.page_size}")
        self.statuses = frozenset(self.statuses)

    def status_filter_active(self) -> bool:
        return bool(self.statuses) and ALL_STATUSES not in self.statuses


@dataclass(frozen=True)
class DerivedPage(Generic[T]):
    items: list[T]
    filtered_count: int
    total_pages: int
    page: int
    page_size: int


def flatten_orders(orders: Iterable[Order]) -> list[FlatOrderItem]:
    return [FlatOrderItem(item=item, order=order) for order in orders for item in order.order_items]


def filter_by_status(rows: Sequence[T], statuses: Iterable[str], status_of: Callable[[T], str]) -> list[T]:
    accepted = frozenset(statuses)
    if not accepted or ALL_STATUSES in accepted:
        return list(rows)
    return [row for row in rows if status_of(row) in accepted]


def search_rows(rows: Sequence[T], term: str, name_of: Callable[[T], str]) -> list[T]:
    needle = term.lower()
    if not needle:
        return list(rows)
    return [row for row in rows if needle in name_of(row).lower()]


def sort_by_time(
    rows: Sequence[T],
    order_time: OrderTime | None,
    created_at_of: Callable[[T], datetime | None],
) -> list[T]:
    if order_time is None:
        return list(rows)
    dated = [(created_at_of(row), row) for row in rows]
    # Rows without a timestamp keep their relative order at the end.
    known = [(stamp, row) for stamp, row in dated if stamp is not None]
    unknown = [row for stamp, row in dated if stamp is None]
    known.sort(key=lambda pair: pair[0].timestamp(), reverse=order_time is OrderTime.NEWEST)
    return [row for _, row in known] + unknown


def total_pages(filtered_count: int, page_size: int) -> int:
    if page_size < 1:
        raise ValueError(f"page_size must be >= 1, got {page_size}")
    return math.ceil(filtered_count / page_size)


def paginate(rows: Sequence[T], page: int, page_size: int) -> list[T]:
    if page_size < 1:
        raise ValueError(f"page_size must be >= 1, got {page_size}")
    start = (page - 1) * page_size
    if start < 0:
        return []
    return list(rows[start : start + page_size])


def filter_rows(rows: Sequence[T], filters: ListingFilters, projection: RowProjection[T]) -> list[T]:
    result = list(rows)
    if projection.status_of is not None:
        result = filter_by_status(result, filters.statuses, projection.status_of)
    result = search_rows(result, filters.search, projection.name_of)
    if projection.created_at_of is not None:
        result = sort_by_time(result, filters.order_time, projection.created_at_of)
    return result


def derive_page(rows: Sequence[T], filters: ListingFilters, projection: RowProjection[T]) -> DerivedPage[T]:
    filtered = filter_rows(rows, filters, projection)
    return DerivedPage(
        items=paginate(filtered, filters.page, filters.page_size),
        filtered_count=len(filtered),
        total_pages=total_pages(len(filtered), filters.page_size),
        page=filters.page,
        page_size=filters.page_size,
    )
