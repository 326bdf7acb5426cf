from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Mapping, Optional

from ..core.enums import Role


@dataclass(frozen=True)
class SessionClaims:
    """Identity decoded from the backend-issued credential."""

    subject: Optional[str]
    full_name: str
    role: Optional[Role]
    expires_at: datetime
    email: Optional[str] = None

    @property
    def role_label(self) -> str:
        return self.role.value if self.role else "unknown"

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any], *, expires_at: datetime) -> "SessionClaims":
        subject = payload.get("sub", payload.get("id"))
        try:
            role = Role(str(payload.get("role", "")).lower())
        except ValueError:
            role = None
        return cls(
            subject=None if subject is None else str(subject),
            full_name=str(payload.get("full_name") or payload.get("name") or ""),
            role=role,
            expires_at=expires_at,
            email=payload.get("email"),
        )


@dataclass(frozen=True)
class SessionContext:
    """Immutable snapshot of the session for one request.

    Views receive it explicitly; it is rebuilt from storage on every navigation.
    """

    token: Optional[str] = None
    claims: Optional[SessionClaims] = None

    @property
    def is_authenticated(self) -> bool:
        return self.token is not None and self.claims is not None

    @property
    def is_admin(self) -> bool:
        return self.is_authenticated and self.claims.role == Role.ADMIN

    @property
    def full_name(self) -> str:
        return self.claims.full_name if self.claims else ""

    @property
    def role(self) -> Optional[Role]:
        return self.claims.role if self.claims else None


ANONYMOUS = SessionContext()
