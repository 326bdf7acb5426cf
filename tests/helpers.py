from __future__ import annotations

import json
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
import requests

from src.attendance_portal.attendance_portal.auth.model import SessionClaims, SessionContext
from src.attendance_portal.attendance_portal.core.enums import Role


def make_token(*, exp=None, secret: str = "backend-signing-secret-0123456789abcdef", **claims) -> str:
    """Mint a JWT the way the backend does (HS256); the portal never sees the secret."""
    payload = dict(claims)
    if exp is not None:
        payload["exp"] = int(exp.timestamp()) if isinstance(exp, datetime) else exp
    return jwt.encode(payload, secret, algorithm="HS256")


def make_ctx(role: Role = Role.FACULTY, *, subject: str = "7", token: str = "tok") -> SessionContext:
    claims = SessionClaims(
        subject=subject,
        full_name="Prof. Rao" if role == Role.FACULTY else "Admin",
        role=role,
        expires_at=datetime.now(timezone.utc) + timedelta(hours=1),
    )
    return SessionContext(token=token, claims=claims)


def make_response(status: int, body=None) -> requests.Response:
    r = requests.Response()
    r.status_code = status
    r._content = b"" if body is None else json.dumps(body).encode("utf-8")
    r.encoding = "utf-8"
    r.headers["Content-Type"] = "application/json"
    return r


class FakeHttp:
    """Stands in for requests.Session; routes are keyed by (method, path below the base URL)."""

    def __init__(self, base_url: str, routes: Optional[dict] = None):
        self.base_url = base_url.rstrip("/")
        self.routes = dict(routes or {})
        self.headers: dict = {}
        self.calls: list[dict] = []

    def request(self, method, url, headers=None, params=None, json=None, timeout=None):
        path = url[len(self.base_url):]
        self.calls.append({"method": method, "path": path, "headers": headers or {}, "params": params, "json": json})

        handler = self.routes.get((method, path))
        if handler is None:
            return make_response(404, {"message": f"No route {method} {path}"})
        if isinstance(handler, Exception):
            raise handler
        if callable(handler):
            return handler(params=params, json=json, headers=headers or {})
        status, body = handler
        return make_response(status, body)

    def calls_to(self, method: str, path: str) -> list[dict]:
        return [c for c in self.calls if c["method"] == method and c["path"] == path]
