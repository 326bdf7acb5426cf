from __future__ import annotations

from typing import Optional, Protocol

from flask import session

from ..core.constants import TOKEN_STORAGE_KEY


class TokenStore(Protocol):
    """Client-side persistent storage for the single session credential."""

    def get(self) -> Optional[str]:
        raise NotImplementedError

    def set(self, token: str) -> None:
        raise NotImplementedError

    def delete(self) -> None:
        raise NotImplementedError


class FlaskSessionTokenStore:
    """Keeps the credential in the signed Flask session cookie under a fixed key."""

    def __init__(self, key: str = TOKEN_STORAGE_KEY):
        self._key = key

    def get(self) -> Optional[str]:
        value = session.get(self._key)
        return value if isinstance(value, str) and value else None

    def set(self, token: str) -> None:
        session.permanent = True
        session[self._key] = token

    def delete(self) -> None:
        session.pop(self._key, None)


class InMemoryTokenStore:
    def __init__(self, token: Optional[str] = None):
        self.token = token

    def get(self) -> Optional[str]:
        return self.token

    def set(self, token: str) -> None:
        self.token = token

    def delete(self) -> None:
        self.token = None
