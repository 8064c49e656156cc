from __future__ import annotations

from electrohub_sdk import ApiSession
from electrohub_sdk.models_catalog import Product

from .errors import normalize_error


class CatalogService:
    def __init__(self, session: ApiSession) -> None:
        self.session = session

    def get_product(self, product_id: int | str) -> Product:
        try:
            return self.session.products_client().get_product(product_id)
        except Exception as exc:
            raise normalize_error(exc) from exc
