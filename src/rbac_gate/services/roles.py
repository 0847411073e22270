"""
rbac_gate.services.roles

Role store backed by the Policy Store `users` table.
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from rbac_gate.db.repositories.users import UserRepo


class SqlRoleStore:
    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def lookup_role(self, username: str) -> str | None:
        # One short-lived session per lookup; store errors propagate to the gate.
        async with self._session_factory() as session:
            return await UserRepo(session).get_role(username)
