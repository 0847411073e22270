"""
rbac_gate.db.repositories.policy_rules

Repository for `CasbinRule` rows.

Responsibilities:
- Read the full rule set to hydrate the policy engine.
- Append rules (operator tooling and tests).
"""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from rbac_gate.db.models import RULE_VALUE_COLUMNS, CasbinRule


class PolicyRuleRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def list_all(self) -> list[CasbinRule]:
        # Stable order keeps policy loading deterministic across restarts.
        stmt = select(CasbinRule).order_by(CasbinRule.id)
        return list((await self._session.execute(stmt)).scalars().all())

    async def add(self, ptype: str, *values: str) -> CasbinRule:
        if len(values) > len(RULE_VALUE_COLUMNS):
            raise ValueError(f"casbin rules hold at most {len(RULE_VALUE_COLUMNS)} values")
        rule = CasbinRule(ptype=ptype, **dict(zip(RULE_VALUE_COLUMNS, values)))
        self._session.add(rule)
        await self._session.flush()
        return rule
