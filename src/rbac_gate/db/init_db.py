"""
rbac_gate.db.init_db

DB initialization helpers (dev/test convenience).

Responsibilities:
- Create the `users` and `casbin_rule` tables for local development and tests.
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncEngine

from rbac_gate.db import models  # noqa: F401  # register tables on Base.metadata
from rbac_gate.db.base import Base


async def init_db(engine: AsyncEngine) -> None:
    """
    Create tables if they don't exist. Production stores are provisioned externally.
    """

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
