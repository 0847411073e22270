"""
rbac_gate.db.models

Policy Store schema.

Responsibilities:
- `User`: subject -> role mapping consulted by the gate on every request.
- `CasbinRule`: one policy (`p`) or grouping (`g`) line, in the column layout
  shared by casbin's SQL adapters.
"""

from __future__ import annotations

from sqlalchemy import Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from rbac_gate.db.base import Base

RULE_VALUE_COLUMNS = ("v0", "v1", "v2", "v3", "v4", "v5")


class User(Base):
    __tablename__ = "users"

    name: Mapped[str] = mapped_column(String(256), primary_key=True)
    role_name: Mapped[str] = mapped_column(String(256), nullable=False)


class CasbinRule(Base):
    __tablename__ = "casbin_rule"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    ptype: Mapped[str] = mapped_column(String(255), nullable=False)
    v0: Mapped[str | None] = mapped_column(String(255), nullable=True)
    v1: Mapped[str | None] = mapped_column(String(255), nullable=True)
    v2: Mapped[str | None] = mapped_column(String(255), nullable=True)
    v3: Mapped[str | None] = mapped_column(String(255), nullable=True)
    v4: Mapped[str | None] = mapped_column(String(255), nullable=True)
    v5: Mapped[str | None] = mapped_column(String(255), nullable=True)

    __table_args__ = (Index("ix_casbin_rule_ptype", "ptype"),)

    def values(self) -> list[str]:
        # Trailing empty columns are not part of the rule.
        vals = [getattr(self, col) or "" for col in RULE_VALUE_COLUMNS]
        while vals and vals[-1] == "":
            vals.pop()
        return vals

    def as_line(self) -> str:
        return ", ".join([self.ptype, *self.values()])

    def __repr__(self) -> str:
        return f"<CasbinRule {self.id}: {self.as_line()!r}>"


# --- Module Notes -----------------------------------------------------------
# Table and column names match what casbin's SQL adapters create, so an existing
# casbin database can be pointed at directly.
