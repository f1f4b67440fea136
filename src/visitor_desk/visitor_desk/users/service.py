from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Mapping, Optional, Sequence

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.datetime_utils import now_utc
from ..common.validators import require_min_length, require_non_empty
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, AuthorizationError, ValidationError
from .model import User
from .repository import UserRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionUser:
    """Authentication context: what we keep in the Flask session after login."""

    user_id: int
    username: str
    full_name: str
    role: Role

    def to_session(self) -> dict:
        return {
            "user_id": self.user_id,
            "username": self.username,
            "full_name": self.full_name,
            "role": self.role.value,
        }

    @classmethod
    def from_session(cls, data: Mapping) -> Optional["SessionUser"]:
        if not data or "user_id" not in data:
            return None
        try:
            return cls(
                user_id=int(data["user_id"]),
                username=str(data["username"]),
                full_name=str(data["full_name"]),
                role=Role(data["role"]),
            )
        except (KeyError, ValueError):
            return None

    def to_json(self) -> dict:
        return {
            "id": self.user_id,
            "username": self.username,
            "fullName": self.full_name,
            "role": self.role.value,
        }


class AuthService:
    """Use case: authenticate user (login)."""

    def __init__(self, users: UserRepository):
        self._users = users

    def authenticate(self, username: str, password: str, *, now: datetime | None = None) -> SessionUser:
        user = self._users.get_by_username(username)
        if not user:
            raise AuthenticationError("Invalid credentials")

        try:
            ok = check_password_hash(user.password_hash, password)
        except ValueError:
            # unknown hash method, e.g. a placeholder value
            ok = False

        if not ok:
            logger.warning("failed login for %s", username)
            raise AuthenticationError("Invalid credentials")

        self._users.update_last_login(user.user_id, when=now or now_utc())
        logger.info("user %s signed in as %s", user.username, user.role.value)

        return SessionUser(
            user_id=user.user_id,
            username=user.username,
            full_name=user.full_name,
            role=user.role,
        )


class UserService:
    """Use case: manage staff accounts."""

    def __init__(self, users: UserRepository):
        self._users = users

    def create_account(
        self,
        *,
        username: str,
        password: str,
        full_name: str,
        role: Role,
        email: Optional[str] = None,
        allow_admin: bool = False,
        now: datetime | None = None,
    ) -> User:
        username = require_non_empty(username, "username")
        full_name = require_non_empty(full_name, "fullName")
        require_min_length(password, "password", 6)

        if role == Role.ADMIN and not allow_admin:
            raise AuthorizationError("Admin accounts cannot be self-registered")

        if self._users.get_by_username(username):
            raise ValidationError("Username already exists", [{"field": "username", "message": "already exists"}])

        user = self._users.create_user(
            username=username,
            password_hash=generate_password_hash(password),
            full_name=full_name,
            role=role,
            email=email or None,
            created_at=now or now_utc(),
        )
        logger.info("created %s account %s", role.value, username)
        return user

    def ensure_admin(self, *, username: str, password: str, full_name: str) -> User:
        """Bootstrap account so a fresh process can be signed into."""
        existing = self._users.get_by_username(username)
        if existing:
            return existing
        return self.create_account(
            username=username,
            password=password,
            full_name=full_name,
            role=Role.ADMIN,
            allow_admin=True,
        )

    def get(self, user_id: int) -> Optional[User]:
        return self._users.get_by_id(user_id)

    def list_users(self) -> Sequence[User]:
        return self._users.list_all()
