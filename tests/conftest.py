"""
tests.conftest

Shared fixtures: a throwaway sqlite Policy Store and helpers to seed it.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Iterable
from pathlib import Path

import pytest

from rbac_gate.db.init_db import init_db
from rbac_gate.db.repositories.policy_rules import PolicyRuleRepo
from rbac_gate.db.repositories.users import UserRepo
from rbac_gate.db.session import create_engine, create_sessionmaker
from rbac_gate.settings import Settings

SeedFn = Callable[..., Awaitable[None]]


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(env="test", database_url=f"sqlite+aiosqlite:///{tmp_path / 'gate.db'}")


@pytest.fixture
def seed_store(settings: Settings) -> SeedFn:
    async def _seed(
        *,
        users: dict[str, str] | None = None,
        rules: Iterable[tuple[str, ...]] = (),
    ) -> None:
        engine = create_engine(settings)
        try:
            await init_db(engine)
            async with create_sessionmaker(engine)() as session:
                for name, role in (users or {}).items():
                    await UserRepo(session).upsert(name=name, role_name=role)
                for ptype, *values in rules:
                    await PolicyRuleRepo(session).add(ptype, *values)
                await session.commit()
        finally:
            await engine.dispose()

    return _seed
