"""
rbac_gate.policy.adapter

Casbin adapter over pre-fetched Policy Store rows.

casbin calls adapters synchronously, while the Policy Store is async SQLAlchemy.
Rows are therefore read by the engine through `PolicyRuleRepo` first and handed
to this adapter, which replays them into the casbin model on `load_policy`.
"""

from __future__ import annotations

from collections.abc import Iterable

from casbin import persist


class RuleRowsAdapter(persist.Adapter):
    """
    Read-only adapter: policy mutations are never written back to the store.
    """

    def __init__(self, lines: Iterable[str] = ()) -> None:
        self._lines: list[str] = list(lines)

    def set_lines(self, lines: Iterable[str]) -> None:
        self._lines = list(lines)

    def load_policy(self, model) -> None:
        for line in self._lines:
            persist.load_policy_line(line, model)

    def save_policy(self, model) -> bool:
        return False

    def add_policy(self, sec, ptype, rule) -> bool:
        return False

    def remove_policy(self, sec, ptype, rule) -> bool:
        return False

    def remove_filtered_policy(self, sec, ptype, field_index, *field_values) -> bool:
        return False
