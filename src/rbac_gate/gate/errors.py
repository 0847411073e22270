"""
rbac_gate.gate.errors

Error taxonomy for the authorization gate.

Per-request errors carry the HTTP status they map to; `RoleLookupFailure` never
reaches a client (the gate recovers it into the default role) and
`StartupFailure` aborts the process before it serves.
"""

from __future__ import annotations


class GateError(Exception):
    status_code: int | None = None
    detail: str = "Authorization gate error"

    def __init__(self, detail: str | None = None) -> None:
        super().__init__(detail or self.detail)
        if detail is not None:
            self.detail = detail


class InvalidRequest(GateError):
    status_code = 400
    detail = "Invalid JSON"


class RoleLookupFailure(GateError):
    detail = "Role lookup failed"


class EvaluationError(GateError):
    status_code = 500
    detail = "Error checking authorization"


class Forbidden(GateError):
    status_code = 403
    detail = "Forbidden"


class StartupFailure(GateError):
    detail = "Gate failed to start"
