"""
rbac_gate.db

Policy Store package (SQLAlchemy async).

Responsibilities:
- Provide ORM models for user/role mappings and casbin rules.
- Provide engine/session setup and repositories.
"""

# Package marker.
