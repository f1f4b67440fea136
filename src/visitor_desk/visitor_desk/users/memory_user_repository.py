from __future__ import annotations

from dataclasses import replace
from datetime import datetime
from typing import Optional, Sequence

from ..core.enums import Role
from ..storage.table import Table
from .model import User
from .repository import UserRepository


class InMemoryUserRepository(UserRepository):
    def __init__(self, table: Table[User]):
        self._table = table

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self._table.get(user_id)

    def get_by_username(self, username: str) -> Optional[User]:
        return self._table.find(lambda u: u.username == username)

    def create_user(
        self,
        *,
        username: str,
        password_hash: str,
        full_name: str,
        role: Role,
        email: Optional[str],
        created_at: datetime,
    ) -> User:
        return self._table.insert(
            lambda user_id: User(
                user_id=user_id,
                username=username,
                password_hash=password_hash,
                full_name=full_name,
                role=role,
                email=email,
                created_at=created_at,
            )
        )

    def update_last_login(self, user_id: int, *, when: datetime) -> Optional[User]:
        user = self._table.get(user_id)
        if not user:
            return None
        return self._table.replace(user_id, replace(user, last_login=when))

    def list_all(self) -> Sequence[User]:
        return self._table.all()
