from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import to_iso
from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Domain entity: staff account.

    Note: plain data object, the password hash never leaves the service layer.
    """

    user_id: int
    username: str
    password_hash: str
    full_name: str
    role: Role
    created_at: datetime
    email: Optional[str] = None
    last_login: Optional[datetime] = None

    def to_json(self) -> dict:
        return {
            "id": self.user_id,
            "username": self.username,
            "fullName": self.full_name,
            "role": self.role.value,
            "email": self.email,
            "lastLogin": to_iso(self.last_login),
            "createdAt": to_iso(self.created_at),
        }
