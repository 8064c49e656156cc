from __future__ import annotations

from dataclasses import replace
from decimal import Decimal

import pytest

from electrohub_sdk.derivation import (
    DELETED_PRODUCT_LABEL,
    ORDER_ITEM_PROJECTION,
    PLACEHOLDER_IMAGE_URL,
    PRODUCT_PROJECTION,
    REVIEW_PROJECTION,
    ListingFilters,
    OrderTime,
    derive_page,
    filter_by_status,
    flatten_orders,
    paginate,
    search_rows,
    sort_by_time,
    total_pages,
)

from payloads import item_payload, make_order, make_product, make_review, product_payload


def _rows_for_single_order():
    order = make_order(
        1,
        [
            item_payload(11, 1, "Delivered", product=product_payload(1, "Phone X")),
            item_payload(12, 1, "Cancelled", product=product_payload(2, "Charger")),
        ],
    )
    return flatten_orders([order])


def test_flatten_keeps_parent_order_reference() -> None:
    rows = _rows_for_single_order()

    assert [row.id for row in rows] == [11, 12]
    assert all(row.order_id == 1 for row in rows)
    assert rows[0].customer_name == "Asha Rao"
    assert rows[0].customer_initials == "AR"


def test_status_filter_keeps_matching_items_only() -> None:
    page = derive_page(_rows_for_single_order(), ListingFilters(statuses={"Delivered"}), ORDER_ITEM_PROJECTION)

    assert [row.id for row in page.items] == [11]
    assert page.items[0].status == "Delivered"
    assert page.filtered_count == 1
    assert page.total_pages == 1


@pytest.mark.parametrize("statuses", [set(), {"All"}, {"All", "Shipped"}])
def test_empty_or_all_status_filter_keeps_everything_in_order(statuses: set[str]) -> None:
    rows = _rows_for_single_order()

    kept = filter_by_status(rows, statuses, ORDER_ITEM_PROJECTION.status_of)

    assert kept == rows


def test_pagination_of_twelve_rows() -> None:
    order = make_order(1, [item_payload(index, 1, product=product_payload(index)) for index in range(1, 13)])
    rows = flatten_orders([order])

    page = derive_page(rows, ListingFilters(page=3, page_size=5), ORDER_ITEM_PROJECTION)

    assert page.total_pages == 3
    assert [row.id for row in page.items] == [11, 12]


def test_derivation_is_repeatable_and_leaves_inputs_alone() -> None:
    rows = _rows_for_single_order()
    snapshot = list(rows)
    filters = ListingFilters(search="phone", order_time=OrderTime.NEWEST)

    first = derive_page(rows, filters, ORDER_ITEM_PROJECTION)
    second = derive_page(rows, filters, ORDER_ITEM_PROJECTION)

    assert first == second
    assert rows == snapshot


def test_search_is_case_insensitive_substring() -> None:
    rows = _rows_for_single_order()

    assert [row.id for row in search_rows(rows, "CHARG", ORDER_ITEM_PROJECTION.name_of)] == [12]
    assert search_rows(rows, "", ORDER_ITEM_PROJECTION.name_of) == rows
    assert search_rows(rows, "tablet", ORDER_ITEM_PROJECTION.name_of) == []


def test_missing_product_uses_deleted_label_for_search_and_display() -> None:
    order = make_order(2, [item_payload(21, 2, "Shipped", product=None)])
    rows = flatten_orders([order])

    page = derive_page(rows, ListingFilters(search="deleted"), ORDER_ITEM_PROJECTION)

    assert [row.id for row in page.items] == [21]
    row = page.items[0]
    assert row.product_name == DELETED_PRODUCT_LABEL
    assert row.image_url == PLACEHOLDER_IMAGE_URL
    assert row.unit_price is None
    assert row.line_total is None


def test_missing_customer_falls_back() -> None:
    order = make_order(3, [item_payload(31, 3)], customer=None)

    row = flatten_orders([order])[0]

    assert row.customer_name == "Unknown"
    assert row.customer_initials == "UN"


@pytest.mark.parametrize("name", ["", "   ", "\t"])
def test_blank_customer_name_falls_back(name: str) -> None:
    order = make_order(3, [item_payload(31, 3)])
    order.user.name = name

    row = flatten_orders([order])[0]

    assert row.customer_name == "Unknown"
    assert row.customer_initials == "UN"


def test_customer_name_is_trimmed() -> None:
    row = flatten_orders([make_order(3, [item_payload(31, 3)], customer="  Meera Iyer ")])[0]

    assert row.customer_name == "Meera Iyer"
    assert row.customer_initials == "MI"


def test_line_total_applies_offer_then_quantity() -> None:
    order = make_order(4, [item_payload(41, 4, quantity=3, product=product_payload(price=200, offer=25))])

    row = flatten_orders([order])[0]

    assert row.unit_price == Decimal("150")
    assert row.line_total == Decimal("450")


def test_sort_by_time_is_stable_in_both_directions() -> None:
    first = make_order(1, [item_payload(1, 1)], created_at="2024-03-01T00:00:00Z")
    tie_a = make_order(2, [item_payload(2, 2)], created_at="2024-03-05T00:00:00Z")
    tie_b = make_order(3, [item_payload(3, 3)], created_at="2024-03-05T00:00:00Z")
    rows = flatten_orders([first, tie_a, tie_b])
    created_at_of = ORDER_ITEM_PROJECTION.created_at_of

    newest = sort_by_time(rows, OrderTime.NEWEST, created_at_of)
    oldest = sort_by_time(rows, OrderTime.OLDEST, created_at_of)

    assert [row.id for row in newest] == [2, 3, 1]
    assert [row.id for row in oldest] == [1, 2, 3]
    assert sort_by_time(rows, None, created_at_of) == rows


def test_item_timestamp_overrides_order_timestamp() -> None:
    order = make_order(
        1,
        [
            item_payload(1, 1, created_at="2024-01-01T00:00:00Z"),
            item_payload(2, 1),
        ],
        created_at="2024-02-01T00:00:00Z",
    )

    newest = sort_by_time(flatten_orders([order]), OrderTime.NEWEST, ORDER_ITEM_PROJECTION.created_at_of)

    assert [row.id for row in newest] == [2, 1]


def test_page_outside_range_yields_empty_slice() -> None:
    rows = list(range(7))

    assert paginate(rows, 0, 5) == []
    assert paginate(rows, -2, 5) == []
    assert paginate(rows, 4, 5) == []
    assert paginate(rows, 2, 5) == [5, 6]


def test_page_size_must_be_positive() -> None:
    with pytest.raises(ValueError):
        ListingFilters(page_size=0)
    with pytest.raises(ValueError):
        total_pages(3, 0)
    with pytest.raises(ValueError):
        paginate([1], 1, 0)


def test_total_pages_for_empty_result_is_zero() -> None:
    assert total_pages(0, 5) == 0
    assert total_pages(5, 5) == 1
    assert total_pages(6, 5) == 2


def test_review_projection_searches_product_names() -> None:
    reviews = [
        make_review(1, product=product_payload(1, "Laptop Pro")),
        make_review(2, product=None),
    ]

    assert [r.id for r in derive_page(reviews, ListingFilters(search="laptop"), REVIEW_PROJECTION).items] == [1]
    assert [r.id for r in derive_page(reviews, ListingFilters(search="deleted"), REVIEW_PROJECTION).items] == [2]


def test_product_projection_ignores_status_filter() -> None:
    products = [make_product(1, "Phone X"), make_product(2, "Earbuds")]
    filters = ListingFilters(statuses={"Delivered"})

    page = derive_page(products, replace(filters, search="ear"), PRODUCT_PROJECTION)

    assert [product.id for product in page.items] == [2]
