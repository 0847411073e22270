"""
rbac_gate.db.repositories

Repository package.

Responsibilities:
- Group data-access repositories for the Policy Store.
"""

# Package marker; repositories are imported directly from submodules.
