from __future__ import annotations

import logging

from electrohub_sdk import ApiSession
from electrohub_sdk.models_orders import Order
from electrohub_sdk.models_stats import SalesStatistics

from .errors import normalize_error

logger = logging.getLogger(__name__)


class SellerService:
    def __init__(self, session: ApiSession) -> None:
        self.session = session

    def list_orders(self) -> list[Order]:
        try:
            orders = self.session.seller_client().list_orders()
        except Exception as exc:
            logger.warning("seller_orders_failed", extra={"error": str(exc)})
            raise normalize_error(exc) from exc
        logger.info("seller_orders_loaded", extra={"count": len(orders)})
        return orders

    def sales_statistics(self) -> SalesStatistics:
        try:
            return self.session.seller_client().sales_statistics()
        except Exception as exc:
            logger.warning("seller_sales_statistics_failed", extra={"error": str(exc)})
            raise normalize_error(exc) from exc
