from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any

from electrohub_sdk.derivation import (
    ORDER_ITEM_PROJECTION,
    DerivedPage,
    FlatOrderItem,
    ListingFilters,
    OrderTime,
    derive_page,
    flatten_orders,
)
from electrohub_sdk.formatting import format_date, format_price
from electrohub_sdk.load_state import LoadCoordinator
from electrohub_sdk.models_orders import Order, OrderStatus

from storefront_app.services.shopper_service import ShopperService
from storefront_app.ui.shared.debounce import SearchDebouncer
from storefront_app.ui.shared.pagination import clamp_page, goto_page, next_page, prev_page
from storefront_app.ui.shared.screen import ScreenBase
from storefront_app.ui.shared.view_state import resolve_section_state, signed_out_state

ORDERS_SOURCE = "orders"
SIGN_IN_PATH = "/user/auth/signin"
REFUND_NOTICE = "Product removed. Refund will be processed in 2 working days."

_STATUS_MESSAGES = {
    OrderStatus.ORDER_CONFIRMED: "Your Order has been Confirmed",
    OrderStatus.SHIPPED: "Your Order has been Shipped",
    OrderStatus.DELIVERED: "Your Order has been Delivered",
    OrderStatus.CANCELLED: "Your Order has been Cancelled",
    OrderStatus.RETURNED: "Your Order has been Returned",
}


def order_message(status: OrderStatus, product_missing: bool) -> str:
    if product_missing and status in {OrderStatus.ORDER_CONFIRMED, OrderStatus.SHIPPED}:
        return REFUND_NOTICE
    return _STATUS_MESSAGES.get(status, "")


def status_label(status: OrderStatus) -> str:
    return "Order Confirmed" if status is OrderStatus.ORDER_CONFIRMED else status.value


def order_card(row: FlatOrderItem) -> dict[str, Any]:
    product = row.product
    return {
        "id": row.id,
        "order_id": row.order_id,
        "product_name": product.name[:50] if product else row.product_name,
        "product_deleted": product is None,
        "image_url": row.image_url,
        "unit_price": format_price(row.unit_price) if product else None,
        "quantity": row.item.quantity,
        "total": format_price(row.line_total) if product else None,
        "status": row.status,
        "status_line": f"{status_label(row.item.status)} on {format_date(row.created_at)}",
        "message": order_message(row.item.status, product is None),
        "detail_path": f"/user/orders/{row.id}" if product else None,
    }


@dataclass
class OrdersView(ScreenBase):
    """Signed-in shopper's order items with debounced search and status/time filters."""

    service: ShopperService
    page_size: int = 10
    debouncer: SearchDebouncer = field(default_factory=SearchDebouncer)
    filters: ListingFilters = field(init=False)
    loads: LoadCoordinator = field(init=False)

    module = "user_orders"

    def __post_init__(self) -> None:
        self.filters = ListingFilters(page_size=self.page_size)
        self.loads = self._coordinator(ORDERS_SOURCE)

    def mount(self) -> None:
        authenticated = self.service.is_authenticated()
        if self.loads.sync_dependency(authenticated):
            self.reset_filters()
        if authenticated and self.loads.needs_fetch(ORDERS_SOURCE):
            if self._load(self.loads, ORDERS_SOURCE, self.service.list_orders):
                self.reset_filters()

    def unmount(self) -> None:
        self.loads.reset()
        self.reset_filters()

    def reset_filters(self) -> None:
        self.filters = ListingFilters(page_size=self.page_size)
        self.debouncer.reset()

    @property
    def orders(self) -> list[Order]:
        return self.loads.records(ORDERS_SOURCE)

    def type_search(self, term: str) -> None:
        self.debouncer.update(term)
        self.filters.page = 1

    def toggle_status(self, status: OrderStatus | str) -> None:
        value = OrderStatus(status).value
        statuses = set(self.filters.statuses)
        statuses.symmetric_difference_update({value})
        self.filters.statuses = frozenset(statuses)
        self._clamp_page()

    def clear_statuses(self) -> None:
        self.filters.statuses = frozenset()

    def set_order_time(self, order_time: OrderTime | str | None) -> None:
        self.filters.order_time = OrderTime(order_time) if order_time else None

    def goto_page(self, page: int) -> None:
        goto_page(self.filters, page, self.order_page().total_pages)

    def next_page(self) -> None:
        next_page(self.filters, self.order_page().total_pages)

    def prev_page(self) -> None:
        prev_page(self.filters)

    def effective_filters(self) -> ListingFilters:
        return replace(self.filters, search=self.debouncer.poll())

    def order_page(self) -> DerivedPage[FlatOrderItem]:
        return derive_page(flatten_orders(self.orders), self.effective_filters(), ORDER_ITEM_PROJECTION)

    def _clamp_page(self) -> None:
        self.filters.page = clamp_page(self.filters.page, self.order_page().total_pages)

    def render(self) -> dict[str, Any]:
        if not self.service.is_authenticated():
            return {"redirect": SIGN_IN_PATH, "view_state": signed_out_state().render()}
        page = self.order_page()
        return {
            "title": f"My Orders ({page.filtered_count})",
            "view_state": resolve_section_state(
                self.loads.status(ORDERS_SOURCE),
                has_data=bool(page.items),
                empty_message="No orders found",
            ).render(),
            "filters": {
                "search": self.debouncer.pending,
                "statuses": sorted(self.filters.statuses),
                "order_time": self.filters.order_time.value if self.filters.order_time else None,
            },
            "items": [order_card(row) for row in page.items],
            "pagination": {"page": page.page, "page_size": page.page_size, "total_pages": page.total_pages},
            "notifications": self.notifications.render(),
        }
