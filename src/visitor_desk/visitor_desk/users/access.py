from __future__ import annotations

from functools import wraps
from typing import Optional

from flask import jsonify, session

from ..core.enums import Role
from .service import SessionUser

SESSION_KEY = "user"


def current_session_user() -> Optional[SessionUser]:
    return SessionUser.from_session(session.get(SESSION_KEY))


def login_required(view):
    """Pass the signed-in user to the view as `current_user`, or answer 401."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        user = current_session_user()
        if user is None:
            return jsonify({"message": "Unauthorized"}), 401
        return view(*args, current_user=user, **kwargs)

    return wrapper


def roles_required(*roles: Role):
    """Like login_required, plus a role gate (403). Admin passes every gate."""

    allowed = {Role.ADMIN, *roles}

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            user = current_session_user()
            if user is None:
                return jsonify({"message": "Unauthorized"}), 401
            if user.role not in allowed:
                return jsonify({"message": "Forbidden: Insufficient permissions"}), 403
            return view(*args, current_user=user, **kwargs)

        return wrapper

    return decorator
