from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..http_client import HttpClient, JsonPayload


@dataclass
class BaseClient:
    http: HttpClient
    access_token: str | None = None

    def _auth_headers(self) -> dict[str, str]:
        headers: dict[str, str] = {}
        if self.access_token:
            headers["Authorization"] = f"Bearer {self.access_token}"
        return headers

    def _request(self, method: str, path: str, **kwargs: Any) -> JsonPayload:
        headers = kwargs.pop("headers", {})
        merged = {**self._auth_headers(), **headers}
        return self.http.request(method, path, headers=merged, **kwargs)

    def _request_object(self, method: str, path: str, **kwargs: Any) -> dict[str, Any]:
        payload = self._request(method, path, **kwargs)
        if payload is None:
            return {}
        if not isinstance(payload, dict):
            raise ValueError(f"Expected {method} {path} response to be a JSON object")
        return payload

    def _request_list(self, method: str, path: str, **kwargs: Any) -> list[Any]:
        payload = self._request(method, path, **kwargs)
        if payload is None:
            return []
        if not isinstance(payload, list):
            raise ValueError(f"Expected {method} {path} response to be a JSON array")
        return payload
