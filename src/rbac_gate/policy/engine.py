"""
rbac_gate.policy.engine

Policy-evaluation engine backed by casbin.

Responsibilities:
- Build a `casbin.Enforcer` from the bundled model (or a model file).
- Hydrate the enforcer from `casbin_rule` rows once at startup.
- Answer (role, resource, action) queries, wrapping engine failures.
"""

from __future__ import annotations

import casbin
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from rbac_gate.db.repositories.policy_rules import PolicyRuleRepo
from rbac_gate.observability.logging import get_logger
from rbac_gate.policy.adapter import RuleRowsAdapter
from rbac_gate.policy.models import DEFAULT_RBAC_MODEL

log = get_logger(__name__)


class PolicyEvaluationError(Exception):
    pass


class CasbinPolicyEngine:
    def __init__(self, *, model_path: str | None = None, model_text: str | None = None) -> None:
        if model_path:
            model = casbin.Enforcer.new_model(path=model_path)
        else:
            model = casbin.Enforcer.new_model(text=model_text or DEFAULT_RBAC_MODEL)
        self._adapter = RuleRowsAdapter()
        self._enforcer = casbin.Enforcer(model, self._adapter)

    @property
    def enforcer(self) -> casbin.Enforcer:
        return self._enforcer

    def load_lines(self, lines: list[str]) -> int:
        self._adapter.set_lines(lines)
        self._enforcer.load_policy()
        return len(lines)

    async def load_policy(self, session_factory: async_sessionmaker[AsyncSession]) -> int:
        async with session_factory() as session:
            rules = await PolicyRuleRepo(session).list_all()
        count = self.load_lines([rule.as_line() for rule in rules])
        log.info("policy_loaded", rules=count)
        return count

    def evaluate(self, role: str, resource: str, action: str) -> bool:
        try:
            return bool(self._enforcer.enforce(role, resource, action))
        except Exception as e:
            raise PolicyEvaluationError(str(e)) from e
