"""Summary numbers derived from the full fetched record set.

These reducers never look at search, status or page state: the stat cards and
charts describe the whole data source while the table beside them is browsed.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from decimal import Decimal

from .formatting import format_chart_date
from .models_catalog import CategoryAggregate, ProductReview
from .models_orders import Order, OrderStatus
from .models_stats import SalesPoint

MAX_STARS = 5


@dataclass(frozen=True)
class StatCard:
    label: str
    value: int


@dataclass(frozen=True)
class SalesChartPoint:
    date: str
    amount: Decimal


def count_items(orders: Iterable[Order]) -> int:
    return sum(len(order.order_items) for order in orders)


def count_items_with_status(orders: Iterable[Order], status: OrderStatus | str) -> int:
    wanted = OrderStatus(status)
    return sum(1 for order in orders for item in order.order_items if item.status is wanted)


def order_stats(orders: Sequence[Order]) -> list[StatCard]:
    return [
        StatCard(label="Total Orders", value=len(orders)),
        StatCard(label="Order Items Overtime", value=count_items(orders)),
        StatCard(label="Returns", value=count_items_with_status(orders, OrderStatus.RETURNED)),
        StatCard(label="Fulfilled Orders Overtime", value=count_items_with_status(orders, OrderStatus.DELIVERED)),
    ]


def highest_product_category(categories: Sequence[CategoryAggregate]) -> CategoryAggregate | None:
    """Category with the largest numeric ``productCount``.

    Counts arrive as strings, so ``"9"`` must lose to ``"10"``. On a tie the
    first category in API order wins. Counts that do not parse never win over a
    parsed one; if none parse, the first category is returned.
    """
    if not categories:
        return None
    best = categories[0]
    best_count = best.parsed_product_count
    for category in categories[1:]:
        count = category.parsed_product_count
        if count is None:
            continue
        if best_count is None or count > best_count:
            best, best_count = category, count
    return best


def sales_chart(points: Iterable[SalesPoint]) -> list[SalesChartPoint]:
    # Points are already bucketed by the API; only the labels are reshaped.
    return [SalesChartPoint(date=format_chart_date(point.date), amount=point.sales) for point in points]


def average_rating(reviews: Sequence[ProductReview] | None) -> float:
    if not reviews:
        return 0.0
    return sum(review.rating for review in reviews) / len(reviews)


def filled_stars(rating: float) -> int:
    # Half-up, so a 3.5 average shows four stars.
    return max(0, min(MAX_STARS, math.floor(rating + 0.5)))
