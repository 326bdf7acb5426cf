from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Optional

import jwt

from .model import SessionClaims

logger = logging.getLogger(__name__)


def decode_token(token: Optional[str]) -> Optional[SessionClaims]:
    """Decode the claims of a backend-issued JWT.

    The signature is not checked here; the backend remains the judge of
    validity. Returns None for anything that cannot be decoded or lacks a
    usable ``exp`` claim. Never raises.
    """
    if not token or not isinstance(token, str):
        return None

    try:
        payload = jwt.decode(token, options={"verify_signature": False})
    except (jwt.InvalidTokenError, TypeError, ValueError) as e:
        logger.info("Discarding undecodable session credential: %s", type(e).__name__)
        return None

    if not isinstance(payload, dict):
        return None

    exp = payload.get("exp")
    if isinstance(exp, bool) or not isinstance(exp, (int, float)):
        return None
    try:
        expires_at = datetime.fromtimestamp(exp, tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        return None

    return SessionClaims.from_payload(payload, expires_at=expires_at)


def is_expired(claims: SessionClaims, *, now: datetime) -> bool:
    """A credential is only valid while its expiry is strictly in the future."""
    return not claims.expires_at > now
