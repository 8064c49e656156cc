from __future__ import annotations

from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal

DISPLAY_DATE_FORMAT = "%d %b %Y"
CHART_DATE_WIDTH = 6
CURRENCY_SYMBOL = "₹"


def format_date(value: datetime | None) -> str:
    if value is None:
        return ""
    return value.strftime(DISPLAY_DATE_FORMAT)


def format_chart_date(value: datetime) -> str:
    """Day and month only, e.g. ``07 Mar``."""
    return format_date(value)[:CHART_DATE_WIDTH]


def format_price(amount: Decimal | float | int | None, *, fallback: str = "N/A") -> str:
    if amount is None:
        return fallback
    quantized = Decimal(str(amount)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    return f"{CURRENCY_SYMBOL}{quantized:,.2f}"
