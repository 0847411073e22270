"""
rbac_gate.db.repositories.users

Repository for `User` role mappings.

Responsibilities:
- Single-row role lookup by subject name.
- Upsert mappings (operator tooling and tests).
"""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from rbac_gate.db.models import User


class UserRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_role(self, name: str) -> str | None:
        stmt = select(User.role_name).where(User.name == name)
        return (await self._session.execute(stmt)).scalar_one_or_none()

    async def upsert(self, *, name: str, role_name: str) -> User:
        user = await self._session.get(User, name)
        if user is None:
            user = User(name=name, role_name=role_name)
            self._session.add(user)
        else:
            user.role_name = role_name
        await self._session.flush()
        return user
