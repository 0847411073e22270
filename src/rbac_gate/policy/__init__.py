"""
rbac_gate.policy

Policy-evaluation engine package (casbin).

Responsibilities:
- Default RBAC model definition.
- Adapter hydrating casbin from Policy Store rows.
- Engine wrapper exposing `evaluate` / `load_policy` to the gate.
"""

# Package marker.
