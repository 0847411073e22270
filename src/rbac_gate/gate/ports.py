"""
rbac_gate.gate.ports

Collaborator protocols consumed by the gate.
"""

from __future__ import annotations

from typing import Protocol


class RoleStore(Protocol):
    async def lookup_role(self, username: str) -> str | None:
        """Return the subject's role, or None when the subject has no row."""
        ...


class PolicyEvaluator(Protocol):
    def evaluate(self, role: str, resource: str, action: str) -> bool:
        """Return the decision; raise on evaluation failure."""
        ...
