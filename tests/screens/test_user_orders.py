from __future__ import annotations

from electrohub_sdk.models_orders import OrderStatus

from storefront_app.ui.shared.debounce import SearchDebouncer
from storefront_app.ui.user.orders_view import REFUND_NOTICE, OrdersView, order_message

from fakes import FakeShopperService, service_error
from payloads import item_payload, make_order, product_payload


class FakeClock:
    def __init__(self) -> None:
        self.value = 100.0

    def __call__(self) -> float:
        return self.value

    def advance(self, seconds: float) -> None:
        self.value += seconds


def _orders():
    return [
        make_order(
            1,
            [
                item_payload(11, 1, "Delivered", product=product_payload(1, "Phone X", price=1000, offer=10)),
                item_payload(12, 1, "Shipped", product=None),
            ],
            created_at="2024-03-01T10:00:00Z",
        ),
        make_order(
            2,
            [item_payload(21, 2, "OrderConfirmed", quantity=2, product=product_payload(2, "USB Charger", price=50, offer=0))],
            created_at="2024-03-05T10:00:00Z",
        ),
    ]


def _view(clock: FakeClock | None = None, **kwargs) -> tuple[OrdersView, FakeShopperService]:
    service = FakeShopperService(orders=_orders(), **kwargs)
    debouncer = SearchDebouncer(now=clock) if clock else SearchDebouncer()
    return OrdersView(service=service, debouncer=debouncer), service


def test_signed_out_shopper_is_redirected_without_fetching() -> None:
    view, service = _view(authenticated=False)
    view.mount()
    payload = view.render()

    assert payload["redirect"] == "/user/auth/signin"
    assert payload["view_state"]["status"] == "signed_out"
    assert service.calls["orders"] == 0


def test_mount_renders_order_cards() -> None:
    view, _ = _view()
    view.mount()
    payload = view.render()

    assert payload["title"] == "My Orders (3)"
    cards = {card["id"]: card for card in payload["items"]}
    assert cards[11]["total"] == "₹900.00"
    assert cards[11]["message"] == "Your Order has been Delivered"
    assert cards[11]["status_line"] == "Delivered on 01 Mar 2024"
    assert cards[11]["detail_path"] == "/user/orders/11"
    assert cards[12]["product_name"] == "Product Deleted"
    assert cards[12]["message"] == REFUND_NOTICE
    assert cards[12]["detail_path"] is None
    assert cards[21]["total"] == "₹100.00"
    assert cards[21]["status_line"].startswith("Order Confirmed on")


def test_order_message_for_deleted_products() -> None:
    assert order_message(OrderStatus.SHIPPED, product_missing=True) == REFUND_NOTICE
    assert order_message(OrderStatus.ORDER_CONFIRMED, product_missing=True) == REFUND_NOTICE
    assert order_message(OrderStatus.DELIVERED, product_missing=True) == "Your Order has been Delivered"
    assert order_message(OrderStatus.SHIPPED, product_missing=False) == "Your Order has been Shipped"


def test_auth_change_discards_records_and_refetches() -> None:
    view, service = _view()
    view.mount()
    assert len(view.orders) == 2

    service.authenticated = False
    view.mount()
    assert view.orders == []
    assert "redirect" in view.render()

    service.authenticated = True
    view.mount()
    assert service.calls["orders"] == 2
    assert len(view.orders) == 2


def test_search_waits_for_typing_pause() -> None:
    clock = FakeClock()
    view, _ = _view(clock)
    view.mount()

    view.type_search("charger")
    clock.advance(0.299)
    assert len(view.order_page().items) == 3
    assert view.render()["filters"]["search"] == "charger"

    clock.advance(0.01)
    assert [row.id for row in view.order_page().items] == [21]


def test_status_and_time_filters() -> None:
    view, _ = _view()
    view.mount()

    view.toggle_status("Shipped")
    view.toggle_status(OrderStatus.DELIVERED)
    assert sorted(row.id for row in view.order_page().items) == [11, 12]

    view.toggle_status("Shipped")
    assert [row.id for row in view.order_page().items] == [11]

    view.clear_statuses()
    view.set_order_time("Newest")
    assert [row.id for row in view.order_page().items] == [21, 11, 12]
    view.set_order_time("Oldest")
    assert [row.id for row in view.order_page().items] == [11, 12, 21]
    assert view.render()["filters"]["order_time"] == "Oldest"


def test_failed_load_shows_toast_and_placeholder() -> None:
    view, service = _view(fail_reads=service_error("Orders unavailable"))
    view.mount()
    payload = view.render()

    assert payload["view_state"]["status"] == "failed"
    assert payload["view_state"]["placeholder"] is True
    assert payload["notifications"]["messages"][0]["message"] == "Orders unavailable"

    view.mount()
    assert service.calls["orders"] == 1


def test_unmount_clears_search_and_filters() -> None:
    view, _ = _view()
    view.mount()
    view.type_search("phone")
    view.toggle_status("Shipped")
    view.unmount()

    assert view.debouncer.pending == ""
    assert view.filters.statuses == frozenset()


def test_orders_page_through_more_than_ten_items() -> None:
    orders = [make_order(1, [item_payload(index, 1, product=product_payload(index)) for index in range(1, 13)])]
    view = OrdersView(service=FakeShopperService(orders=orders))
    view.mount()

    view.next_page()
    assert [row.id for row in view.order_page().items] == [11, 12]
    view.next_page()
    assert view.filters.page == 2
    view.prev_page()
    assert len(view.order_page().items) == 10
