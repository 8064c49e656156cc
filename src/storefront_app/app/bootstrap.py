from __future__ import annotations

import logging

from electrohub_sdk import ApiSession, ClientConfig, load_config

from storefront_app.services.catalog_service import CatalogService
from storefront_app.services.seller_service import SellerService
from storefront_app.services.shopper_service import ShopperService
from storefront_app.shared.telemetry.logger import TelemetryLogger
from storefront_app.ui.product.product_view import ProductView
from storefront_app.ui.seller.dashboard_view import SellerDashboardView
from storefront_app.ui.shared.notification_center import NotificationCenter
from storefront_app.ui.user.orders_view import OrdersView
from storefront_app.ui.user.reviews_view import ReviewsView
from storefront_app.ui.user.wishlist_view import WishlistView

logger = logging.getLogger(__name__)


class StorefrontBootstrap:
    """Builds screens over one API session; each screen owns its records and filters."""

    def __init__(self, config: ClientConfig | None = None, session: ApiSession | None = None) -> None:
        self.config = config or load_config()
        self.session = session or ApiSession(self.config)
        self.seller_service = SellerService(self.session)
        self.shopper_service = ShopperService(self.session)
        self.catalog_service = CatalogService(self.session)
        self.telemetry = TelemetryLogger.from_env(app_name="storefront")
        self.notifications = NotificationCenter()

    def sign_in(self, token: str) -> None:
        logger.info("session_established")
        self.session.establish(token)

    def sign_out(self) -> None:
        logger.info("session_cleared")
        self.session.clear()

    def seller_dashboard(self) -> SellerDashboardView:
        return SellerDashboardView(
            service=self.seller_service,
            page_size=self.config.default_page_size,
            telemetry=self.telemetry,
            notifications=self.notifications,
        )

    def orders(self) -> OrdersView:
        return OrdersView(service=self.shopper_service, telemetry=self.telemetry, notifications=self.notifications)

    def reviews(self) -> ReviewsView:
        return ReviewsView(service=self.shopper_service, telemetry=self.telemetry, notifications=self.notifications)

    def wishlist(self) -> WishlistView:
        return WishlistView(service=self.shopper_service, telemetry=self.telemetry, notifications=self.notifications)

    def product(self, product_id: int | str) -> ProductView:
        return ProductView(
            catalog=self.catalog_service,
            shopper=self.shopper_service,
            product_id=product_id,
            telemetry=self.telemetry,
            notifications=self.notifications,
        )
