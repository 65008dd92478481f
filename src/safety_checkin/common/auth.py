from __future__ import annotations

from flask import session

from ..core.enums import Role
from ..core.exceptions import AuthenticationError, AuthorizationError


def current_user_id() -> str:
    """Session identity is set by the external auth layer; only read here."""

    user_id = session.get("user_id")
    if user_id is None:
        raise AuthenticationError("Unauthorized")
    return str(user_id)


def require_role(*roles: Role) -> str:
    user_id = current_user_id()
    allowed = {r.value for r in roles}
    if allowed and session.get("role") not in allowed:
        raise AuthorizationError("Forbidden: insufficient role")
    return user_id
