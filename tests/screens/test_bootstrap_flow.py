from __future__ import annotations

import requests
import responses

from electrohub_sdk.config import ClientConfig

from storefront_app.app.bootstrap import StorefrontBootstrap

from payloads import item_payload, order_payload, product_payload

BASE_URL = "https://api.example.com"


def _bootstrap() -> StorefrontBootstrap:
    return StorefrontBootstrap(config=ClientConfig(env_name="test", api_base_url=BASE_URL, default_page_size=10))


@responses.activate
def test_seller_dashboard_over_http() -> None:
    responses.add(
        responses.GET,
        f"{BASE_URL}/api/seller/orders",
        json={"orders": [order_payload(1, [item_payload(11, 1, "Delivered", product=product_payload())])]},
        status=200,
    )
    responses.add(
        responses.GET,
        f"{BASE_URL}/api/seller/salesstatistics",
        json={"message": "Statistics offline"},
        status=500,
    )
    app = _bootstrap()
    app.sign_in("seller-token")

    dashboard = app.seller_dashboard()
    dashboard.mount()
    payload = dashboard.render()

    assert dashboard.page_size == 10
    assert payload["orders"]["rows"][0]["total"] == "₹900.00"
    assert payload["sales_chart"]["view_state"]["status"] == "failed"
    assert payload["notifications"]["messages"][0]["message"] == "Statistics offline"
    assert all(call.request.headers["Authorization"] == "Bearer seller-token" for call in responses.calls)


@responses.activate
def test_orders_follow_sign_in_state() -> None:
    responses.add(
        responses.GET,
        f"{BASE_URL}/api/user/orders",
        json=[order_payload(1, [item_payload(11, 1, product=product_payload())])],
        status=200,
    )
    app = _bootstrap()
    orders = app.orders()

    orders.mount()
    assert orders.render()["redirect"] == "/user/auth/signin"
    assert len(responses.calls) == 0

    app.sign_in("shopper-token")
    orders.mount()
    assert orders.render()["title"] == "My Orders (1)"

    app.sign_out()
    orders.mount()
    assert orders.orders == []


@responses.activate
def test_network_failure_is_reported_as_network_error() -> None:
    responses.add(
        responses.GET,
        f"{BASE_URL}/api/user/wishlist",
        body=requests.ConnectionError("offline"),
    )
    app = _bootstrap()
    app.sign_in("shopper-token")
    wishlist = app.wishlist()

    wishlist.mount()
    payload = wishlist.render()

    assert payload["view_state"]["status"] == "failed"
    assert payload["notifications"]["messages"][0]["message"] == "Network Error"


@responses.activate
def test_product_page_with_wishlist() -> None:
    responses.add(responses.GET, f"{BASE_URL}/api/user/products/5", json=product_payload(5, "Tablet"), status=200)
    responses.add(
        responses.GET,
        f"{BASE_URL}/api/user/wishlist/wishlistproducts",
        json={"wishlist": [5]},
        status=200,
    )
    responses.add(responses.POST, f"{BASE_URL}/api/user/wishlist/5", json={"message": "Removed"}, status=200)
    app = _bootstrap()
    app.sign_in("shopper-token")
    page = app.product(5)

    page.mount()
    assert page.render()["product"]["wishlisted"] is True
    assert page.toggle_wishlist(5) is True
    assert page.render()["product"]["wishlisted"] is False
