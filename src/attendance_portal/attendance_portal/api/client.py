from __future__ import annotations

import logging
from typing import Any, Optional

import requests

from ..core.constants import (
    DEFAULT_API_TIMEOUT_SECONDS,
    ERROR_BODY_LOG_LIMIT,
    MSG_BACKEND_UNREACHABLE,
)
from ..core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    BackendUnavailableError,
    NotFoundError,
    SessionExpiredError,
    ValidationError,
)

logger = logging.getLogger(__name__)


class ApiClient:
    """Thin JSON client for the attendance backend.

    Every call except login carries the bearer credential. Non-2xx responses
    and transport failures are translated into the portal's exception types.
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = DEFAULT_API_TIMEOUT_SECONDS,
        http: Optional[requests.Session] = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._http = http or requests.Session()
        self._http.headers.update({"Accept": "application/json"})

    @property
    def base_url(self) -> str:
        return self._base_url

    def url_for(self, path: str) -> str:
        return f"{self._base_url}/{path.lstrip('/')}"

    def get(self, path: str, *, token: Optional[str], params: Optional[dict] = None) -> Any:
        return self._request("GET", path, token=token, params=params)

    def post(self, path: str, payload: Optional[dict] = None, *, token: Optional[str]) -> Any:
        return self._request("POST", path, token=token, json=payload)

    def put(self, path: str, payload: dict, *, token: Optional[str]) -> Any:
        return self._request("PUT", path, token=token, json=payload)

    def delete(self, path: str, *, token: Optional[str]) -> Any:
        return self._request("DELETE", path, token=token)

    def _headers(self, token: Optional[str]) -> dict:
        h = {}
        if token:
            h["Authorization"] = f"Bearer {token}"
        return h

    def _request(
        self,
        method: str,
        path: str,
        *,
        token: Optional[str],
        params: Optional[dict] = None,
        json: Optional[dict] = None,
    ) -> Any:
        url = self.url_for(path)
        try:
            r = self._http.request(
                method,
                url,
                headers=self._headers(token),
                params=params,
                json=json,
                timeout=self._timeout,
            )
        except requests.RequestException as e:
            logger.error("Backend %s %s unreachable: %s", method, url, e)
            raise BackendUnavailableError(MSG_BACKEND_UNREACHABLE) from e

        if r.status_code >= 400:
            self._raise_for_status(method, url, r, authenticated=bool(token))

        if not r.content:
            return None
        try:
            return r.json()
        except ValueError as e:
            logger.error("Backend %s %s returned non-JSON body: %s", method, url, r.text[:ERROR_BODY_LOG_LIMIT])
            raise BackendUnavailableError("The attendance server sent an unreadable response") from e

    def _raise_for_status(self, method: str, url: str, r: requests.Response, *, authenticated: bool) -> None:
        status = r.status_code
        message = _error_message(r)
        logger.error("Backend %s %s failed: %s %s", method, url, status, r.text[:ERROR_BODY_LOG_LIMIT])

        if status == 401:
            if authenticated:
                raise SessionExpiredError(message or "Session expired")
            raise AuthenticationError(message or "Invalid email or password")
        if status == 403:
            raise AuthorizationError(message or "You do not have permission for this action")
        if status == 404:
            raise NotFoundError(message or "The requested record was not found")
        if status == 409:
            raise ValidationError(message or "This record already exists (duplicate submission)")
        if status in (400, 422):
            raise ValidationError(message or "The server rejected the submitted data")
        if status >= 500:
            raise BackendUnavailableError(message or MSG_BACKEND_UNREACHABLE)
        raise ValidationError(message or f"Request failed with status {status}")


def _error_message(r: requests.Response) -> Optional[str]:
    """Backend errors carry a JSON body like {"message": "..."}."""
    try:
        body = r.json()
    except ValueError:
        return None
    if isinstance(body, dict):
        msg = body.get("message") or body.get("error")
        if isinstance(msg, str) and msg.strip():
            return msg.strip()
    return None


def unwrap_list(payload: Any, key: Optional[str] = None) -> list:
    """Backend list endpoints answer either a bare array or {"data": [...]}."""
    if payload is None:
        return []
    if isinstance(payload, list):
        return payload
    if isinstance(payload, dict):
        for k in filter(None, (key, "data", "items")):
            v = payload.get(k)
            if isinstance(v, list):
                return v
    return []
