from __future__ import annotations

from dataclasses import dataclass

from .clients.cart_client import CartClient
from .clients.orders_client import OrdersClient
from .clients.products_client import ProductsClient
from .clients.reviews_client import ReviewsClient
from .clients.seller_client import SellerClient
from .clients.wishlist_client import WishlistClient
from .config import ClientConfig
from .http_client import HttpClient
from .tracing import TraceContext


@dataclass
class ApiSession:
    config: ClientConfig
    trace: TraceContext | None = None
    token: str | None = None

    def __post_init__(self) -> None:
        self.trace = self.trace or TraceContext()
        self._http_client: HttpClient | None = None

    @property
    def is_authenticated(self) -> bool:
        return bool(self.token)

    def _http(self) -> HttpClient:
        if self._http_client is None:
            self._http_client = HttpClient(config=self.config, trace=self.trace)
        return self._http_client

    def seller_client(self) -> SellerClient:
        return SellerClient(http=self._http(), access_token=self.token)

    def orders_client(self) -> OrdersClient:
        return OrdersClient(http=self._http(), access_token=self.token)

    def reviews_client(self) -> ReviewsClient:
        return ReviewsClient(http=self._http(), access_token=self.token)

    def wishlist_client(self) -> WishlistClient:
        return WishlistClient(http=self._http(), access_token=self.token)

    def cart_client(self) -> CartClient:
        return CartClient(http=self._http(), access_token=self.token)

    def products_client(self) -> ProductsClient:
        return ProductsClient(http=self._http(), access_token=self.token)

    def establish(self, token: str) -> None:
        self.token = token

    def clear(self) -> None:
        self.token = None
