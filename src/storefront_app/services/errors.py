from __future__ import annotations

from dataclasses import dataclass

from electrohub_sdk import to_user_facing_error
from electrohub_sdk.exceptions import ApiError
from pydantic import ValidationError as PayloadValidationError


@dataclass(frozen=True)
class StorefrontServiceError(RuntimeError):
    message: str
    details: str | None = None
    trace_id: str | None = None
    status_code: int | None = None

    def __str__(self) -> str:
        return self.message


def normalize_error(exc: Exception) -> StorefrontServiceError:
    if isinstance(exc, StorefrontServiceError):
        return exc
    if isinstance(exc, ApiError):
        user_facing = to_user_facing_error(exc)
        return StorefrontServiceError(
            message=user_facing.message,
            details=user_facing.technical_details,
            trace_id=user_facing.trace_id,
            status_code=exc.status_code,
        )
    if isinstance(exc, PayloadValidationError):
        return StorefrontServiceError(message="Unexpected response from the store API", details=str(exc))
    return StorefrontServiceError(message=str(exc) or "Unexpected storefront error")
