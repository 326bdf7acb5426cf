from __future__ import annotations

import logging

from ..api.client import ApiClient
from ..common.validators import require_non_empty
from ..core.exceptions import AuthenticationError, DomainError
from .guard import SessionGuard
from .model import SessionContext

logger = logging.getLogger(__name__)


class AuthService:
    """Use case: exchange credentials for a session and end it.

    Password checking is entirely the backend's job.
    """

    def __init__(self, client: ApiClient):
        self._client = client

    def login(self, guard: SessionGuard, *, email: str, password: str) -> SessionContext:
        email = require_non_empty(email, "Email")
        password = require_non_empty(password, "Password")

        data = self._client.post("/auth/login", {"email": email, "password": password}, token=None)
        token = data.get("token") if isinstance(data, dict) else None
        if not token:
            raise AuthenticationError("Login response did not include a session")

        ctx = guard.login(token)
        logger.info("Signed in %s (%s)", ctx.claims.subject, ctx.claims.role_label)
        return ctx

    def me(self, ctx: SessionContext) -> dict:
        data = self._client.get("/auth/me", token=ctx.token)
        if isinstance(data, dict) and isinstance(data.get("user"), dict):
            return data["user"]
        return data or {}

    def logout(self, guard: SessionGuard, ctx: SessionContext, *, notify_backend: bool = False) -> SessionContext:
        """Always clears the local credential; backend invalidation is best effort."""
        if notify_backend and ctx.is_authenticated:
            try:
                self._client.post("/auth/logout", token=ctx.token)
            except DomainError as e:
                logger.warning("Backend logout failed, session cleared locally: %s", e)
        return guard.logout()
