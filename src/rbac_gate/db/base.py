"""
rbac_gate.db.base

SQLAlchemy declarative base.

Responsibilities:
- Provide a shared DeclarativeBase for the Policy Store models.
- Pin constraint naming so DDL is stable across backends.
"""

from __future__ import annotations

from sqlalchemy import MetaData
from sqlalchemy.orm import DeclarativeBase

_NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(DeclarativeBase):
    metadata = MetaData(naming_convention=_NAMING_CONVENTION)
