"""
Admin capability: a token held by callers allowed to mutate club data.

There is no ambient "is admin" flag; mutating service calls take the token
as an argument and refuse to run without it.
"""
from __future__ import annotations

import hmac
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional


class AdminRequired(PermissionError):
    """Raised when a mutating operation is called without an admin session."""


@dataclass(frozen=True)
class AdminSession:
    unlocked_at: str = field(default_factory=lambda: datetime.now(timezone.utc).isoformat())


def unlock(pin: Optional[str], secret: Optional[str]) -> Optional[AdminSession]:
    """Compare the entered PIN with the shared secret; blank secret never unlocks."""
    code = (pin or "").strip()
    expected = (secret or "").strip()
    if not code or not expected:
        return None
    if not hmac.compare_digest(code.encode("utf-8"), expected.encode("utf-8")):
        return None
    return AdminSession()


def require_admin(session: Optional[AdminSession]) -> AdminSession:
    if not isinstance(session, AdminSession):
        raise AdminRequired("Admin mode is locked. Enter the admin PIN to edit.")
    return session
