from __future__ import annotations

from dataclasses import dataclass

from ..models_reviews import MutationResponse, Review
from .base import BaseClient


@dataclass
class ReviewsClient(BaseClient):
    def list_reviews(self) -> list[Review]:
        rows = self._request_list("GET", "/api/user/products/review/reviews")
        return [Review.model_validate(row) for row in rows]

    def delete_review(self, review_id: int) -> MutationResponse:
        payload = self._request_object("DELETE", f"/api/user/products/review/{review_id}")
        return MutationResponse.model_validate(payload)
