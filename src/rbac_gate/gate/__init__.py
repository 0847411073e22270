"""
rbac_gate.gate

Authorization gate package.

Responsibilities:
- Domain types for a single authorization pass (subject, query, decision).
- Error taxonomy mapped to HTTP statuses at the API boundary.
- The `AuthorizationGate` service and its collaborator protocols.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Nothing here imports FastAPI; the API layer adapts the gate into a route dependency.
