"""
rbac_gate.gate.service

The authorization gate.

Responsibilities:
- Decode the acting subject from the request body.
- Resolve its role through the role store, falling back to the default role.
- Ask the policy evaluator for a decision and raise on anything but "allowed".

Per request the gate moves through
`Received -> BodyParsed -> RoleResolved -> Evaluated -> {Forwarded | Rejected}`;
`authorize` returning is the `Forwarded` edge, any raised `GateError` is `Rejected`.
"""

from __future__ import annotations

import asyncio

from pydantic import ValidationError

from rbac_gate.gate.errors import EvaluationError, Forbidden, InvalidRequest, RoleLookupFailure
from rbac_gate.gate.models import AuthorizationQuery, Decision, Subject
from rbac_gate.gate.ports import PolicyEvaluator, RoleStore
from rbac_gate.observability.logging import get_logger

log = get_logger(__name__)

DEFAULT_ROLE = "user"


class AuthorizationGate:
    """
    Stateless between requests; safe to share across concurrent requests as long as
    the injected collaborators are.

    Role lookup fails open: an unknown subject, a store error or a lookup timeout
    all resolve to `default_role`, and only a warning is logged. Whether that role
    is allowed anywhere is up to the policy.
    """

    def __init__(
        self,
        *,
        role_store: RoleStore,
        evaluator: PolicyEvaluator,
        default_role: str = DEFAULT_ROLE,
        role_lookup_timeout_s: float | None = 2.0,
    ) -> None:
        self._role_store = role_store
        self._evaluator = evaluator
        self._default_role = default_role
        self._role_lookup_timeout_s = role_lookup_timeout_s

    def parse_subject(self, body: bytes) -> Subject:
        try:
            return Subject.model_validate_json(body)
        except ValidationError as e:
            raise InvalidRequest() from e

    async def lookup_role(self, username: str) -> str:
        """
        Strict lookup: raise `RoleLookupFailure` instead of falling back.
        """
        try:
            role = await asyncio.wait_for(
                self._role_store.lookup_role(username),
                timeout=self._role_lookup_timeout_s,
            )
        except TimeoutError as e:
            raise RoleLookupFailure("role lookup timed out") from e
        except Exception as e:
            raise RoleLookupFailure(f"role store error: {e}") from e
        if not role:
            raise RoleLookupFailure("subject not found")
        return role

    async def resolve_role(self, username: str) -> str:
        try:
            return await self.lookup_role(username)
        except RoleLookupFailure as e:
            log.warning(
                "role_lookup_failed",
                username=username,
                reason=e.detail,
                role=self._default_role,
            )
            return self._default_role

    def evaluate(self, query: AuthorizationQuery) -> Decision:
        try:
            allowed = self._evaluator.evaluate(query.role, query.resource, query.action)
        except Exception as e:
            log.error("authorization_error", role=query.role, error=str(e))
            raise EvaluationError() from e
        return Decision(query=query, allowed=bool(allowed))

    async def authorize(self, *, body: bytes, resource: str, action: str) -> Decision:
        subject = self.parse_subject(body)
        role = await self.resolve_role(subject.username)
        decision = self.evaluate(AuthorizationQuery(role=role, resource=resource, action=action))
        if not decision.allowed:
            log.info("authorization_denied", username=subject.username, role=role)
            raise Forbidden()
        log.info("authorization_decided", username=subject.username, role=role, allowed=True)
        return decision
