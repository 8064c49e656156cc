from .config import ClientConfig, ConfigError, load_config
from .derivation import (
    ALL_STATUSES,
    DELETED_PRODUCT_LABEL,
    DerivedPage,
    FlatOrderItem,
    ListingFilters,
    OrderTime,
    RowProjection,
    derive_page,
    flatten_orders,
)
from .exceptions import ApiError, ForbiddenError, NotFoundError, TransportError, ValidationError
from .http_client import HttpClient
from .load_state import LoadCoordinator, LoadStatus, LoadTicket, SourceState
from .models_catalog import CategoryAggregate, Product, ProductImage
from .models_orders import Order, OrderItem, OrderStatus, OrderUser
from .models_reviews import MutationResponse, Review
from .models_stats import SalesPoint, SalesStatistics
from .session import ApiSession
from .stats import StatCard, SalesChartPoint, highest_product_category, order_stats, sales_chart
from .tracing import TraceContext
from .ui_errors import UserFacingError, to_user_facing_error

__all__ = [
    "ALL_STATUSES",
    "ApiError",
    "ApiSession",
    "CategoryAggregate",
    "ClientConfig",
    "ConfigError",
    "DELETED_PRODUCT_LABEL",
    "DerivedPage",
    "FlatOrderItem",
    "ForbiddenError",
    "HttpClient",
    "ListingFilters",
    "LoadCoordinator",
    "LoadStatus",
    "LoadTicket",
    "MutationResponse",
    "NotFoundError",
    "Order",
    "OrderItem",
    "OrderStatus",
    "OrderTime",
    "OrderUser",
    "Product",
    "ProductImage",
    "Review",
    "RowProjection",
    "SalesChartPoint",
    "SalesPoint",
    "SalesStatistics",
    "SourceState",
    "StatCard",
    "TraceContext",
    "TransportError",
    "UserFacingError",
    "ValidationError",
    "derive_page",
    "flatten_orders",
    "highest_product_category",
    "load_config",
    "order_stats",
    "sales_chart",
    "to_user_facing_error",
]
