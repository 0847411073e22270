"""
rbac_gate.services

Service-layer package.

Responsibilities:
- Adapt the Policy Store repositories to the collaborator protocols the gate needs.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Services should be pure Python and easily testable with fake clients/sessions.
