from .cart_client import CartClient
from .orders_client import OrdersClient
from .products_client import ProductsClient
from .reviews_client import ReviewsClient
from .seller_client import SellerClient
from .wishlist_client import WishlistClient

__all__ = [
    "CartClient",
    "OrdersClient",
    "ProductsClient",
    "ReviewsClient",
    "SellerClient",
    "WishlistClient",
]
