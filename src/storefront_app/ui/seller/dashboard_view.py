from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from electrohub_sdk.config import PAGE_SIZE_CHOICES
from electrohub_sdk.derivation import (
    ALL_STATUSES,
    ORDER_ITEM_PROJECTION,
    DerivedPage,
    FlatOrderItem,
    ListingFilters,
    derive_page,
    flatten_orders,
    total_pages,
)
from electrohub_sdk.formatting import format_date, format_price
from electrohub_sdk.load_state import LoadCoordinator
from electrohub_sdk.models_orders import Order, OrderStatus
from electrohub_sdk.models_stats import SalesStatistics
from electrohub_sdk.stats import highest_product_category, order_stats, sales_chart

from storefront_app.services.seller_service import SellerService
from storefront_app.ui.shared.pagination import clamp_page, goto_page, next_page, page_numbers, prev_page
from storefront_app.ui.shared.screen import ScreenBase
from storefront_app.ui.shared.view_state import resolve_section_state

ORDERS_SOURCE = "orders"
SALES_SOURCE = "sales_statistics"
STATUS_TABS: tuple[str, ...] = (ALL_STATUSES, *(status.value for status in OrderStatus))


def tab_label(tab: str) -> str:
    return "Confirmed" if tab == OrderStatus.ORDER_CONFIRMED.value else tab


def order_row(row: FlatOrderItem) -> dict[str, Any]:
    return {
        "id": row.id,
        "order_id": row.order_id,
        "product_name": row.product_name,
        "product_deleted": row.product is None,
        "image_url": row.image_url,
        "customer_name": row.customer_name,
        "customer_initials": row.customer_initials,
        "date": format_date(row.created_at),
        "total": format_price(row.line_total),
        "status": row.status,
        "detail_path": f"/seller/dashboard/orders/{row.id}",
    }


@dataclass
class SellerDashboardView(ScreenBase):
    service: SellerService
    page_size: int = PAGE_SIZE_CHOICES[0]
    selected_tab: str = ALL_STATUSES
    filters: ListingFilters = field(init=False)
    loads: LoadCoordinator = field(init=False)

    module = "seller_dashboard"

    def __post_init__(self) -> None:
        self.filters = ListingFilters(page_size=self.page_size)
        self.loads = self._coordinator(ORDERS_SOURCE, SALES_SOURCE)

    def mount(self) -> None:
        """Start each source that has not been fetched during this mount."""
        if self.loads.needs_fetch(ORDERS_SOURCE):
            if self._load(self.loads, ORDERS_SOURCE, self.service.list_orders):
                self.reset_filters()
        if self.loads.needs_fetch(SALES_SOURCE):
            self._load(self.loads, SALES_SOURCE, self.service.sales_statistics)

    def unmount(self) -> None:
        self.loads.reset()
        self.reset_filters()

    def reset_filters(self) -> None:
        self.selected_tab = ALL_STATUSES
        self.filters = ListingFilters(page_size=self.page_size)

    @property
    def orders(self) -> list[Order]:
        return self.loads.records(ORDERS_SOURCE)

    @property
    def sales_statistics(self) -> SalesStatistics:
        return self.loads.records(SALES_SOURCE, default=SalesStatistics())

    def select_tab(self, tab: str) -> None:
        if tab not in STATUS_TABS:
            raise ValueError(f"Unknown order tab: {tab}")
        self.selected_tab = tab
        self.filters.statuses = frozenset() if tab == ALL_STATUSES else frozenset({tab})
        self._clamp_page()

    def set_search(self, term: str) -> None:
        self.filters.search = term
        self._clamp_page()

    def set_page_size(self, size: int) -> None:
        if size not in PAGE_SIZE_CHOICES:
            raise ValueError(f"Page size must be one of {list(PAGE_SIZE_CHOICES)}")
        self.page_size = size
        self.filters.page_size = size
        self._clamp_page()

    def goto_page(self, page: int) -> None:
        goto_page(self.filters, page, self.order_page().total_pages)

    def next_page(self) -> None:
        next_page(self.filters, self.order_page().total_pages)

    def prev_page(self) -> None:
        prev_page(self.filters)

    def order_page(self) -> DerivedPage[FlatOrderItem]:
        return derive_page(flatten_orders(self.orders), self.filters, ORDER_ITEM_PROJECTION)

    def _clamp_page(self) -> None:
        page = self.order_page()
        self.filters.page = clamp_page(self.filters.page, total_pages(page.filtered_count, self.filters.page_size))

    def render(self) -> dict[str, Any]:
        orders_status = self.loads.status(ORDERS_SOURCE)
        sales_status = self.loads.status(SALES_SOURCE)
        orders = self.orders
        statistics = self.sales_statistics
        page = self.order_page()
        highest = highest_product_category(statistics.categories)
        return {
            "stats": {
                "view_state": resolve_section_state(orders_status, has_data=True).render(),
                "cards": [{"label": card.label, "value": card.value} for card in order_stats(orders)],
            },
            "sales_chart": {
                "view_state": resolve_section_state(sales_status, has_data=bool(statistics.weekly_sales)).render(),
                "points": [{"date": point.date, "amount": point.amount} for point in sales_chart(statistics.weekly_sales)],
            },
            "categories": {
                "view_state": resolve_section_state(sales_status, has_data=bool(statistics.categories)).render(),
                "items": [
                    {"name": category.name, "product_count": category.parsed_product_count}
                    for category in statistics.categories
                ],
                "highest": highest.name if highest else None,
            },
            "orders": {
                "view_state": resolve_section_state(
                    orders_status,
                    has_data=bool(page.items),
                    empty_message="Orders not available",
                ).render(),
                "search_enabled": self.loads.is_loaded(ORDERS_SOURCE),
                "tabs": [{"value": tab, "label": tab_label(tab), "active": tab == self.selected_tab} for tab in STATUS_TABS],
                "rows": [order_row(row) for row in page.items],
                "filtered_count": page.filtered_count,
            },
            "pagination": {
                "page": page.page,
                "page_size": page.page_size,
                "page_size_choices": list(PAGE_SIZE_CHOICES),
                "total_pages": page.total_pages,
                "pages": page_numbers(page.total_pages) if page.total_pages > 1 else [],
            },
            "notifications": self.notifications.render(),
        }
