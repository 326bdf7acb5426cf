from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Optional

from ..common.datetime_utils import now_utc
from ..core.constants import DEFAULT_ENDPOINT, LOGIN_ENDPOINT, PUBLIC_ENDPOINTS
from ..core.exceptions import AuthenticationError
from .model import ANONYMOUS, SessionContext
from .store import TokenStore
from .token import decode_token, is_expired

logger = logging.getLogger(__name__)


class SessionGuard:
    """Decides whether the stored credential makes the session authenticated.

    Every check compares the decoded expiry with the wall clock at check time.
    A credential that fails the check is removed from storage.
    """

    def __init__(self, store: TokenStore, *, clock: Callable[[], datetime] = now_utc):
        self._store = store
        self._clock = clock

    def load(self) -> SessionContext:
        token = self._store.get()
        if not token:
            return ANONYMOUS

        ctx = self._validate(token)
        if ctx is None:
            self._store.delete()
            return ANONYMOUS
        return ctx

    def login(self, token: str) -> SessionContext:
        ctx = self._validate(token)
        if ctx is None:
            self._store.delete()
            raise AuthenticationError("The server issued an invalid or expired session")

        self._store.set(token)
        return ctx

    def logout(self) -> SessionContext:
        self._store.delete()
        return ANONYMOUS

    def _validate(self, token: str) -> Optional[SessionContext]:
        claims = decode_token(token)
        if claims is None:
            logger.info("Stored session credential is malformed")
            return None
        if is_expired(claims, now=self._clock()):
            logger.info("Stored session credential expired at %s", claims.expires_at.isoformat())
            return None
        return SessionContext(token=token, claims=claims)


def resolve_route(ctx: SessionContext, endpoint: Optional[str]) -> Optional[str]:
    """Return the endpoint to redirect to, or None when the navigation may proceed.

    Pure function of the session snapshot and the requested endpoint.
    """
    if not ctx.is_authenticated:
        if endpoint in PUBLIC_ENDPOINTS:
            return None
        return LOGIN_ENDPOINT

    if endpoint == LOGIN_ENDPOINT:
        return DEFAULT_ENDPOINT
    return None
