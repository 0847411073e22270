"""
rbac_gate.api

API package for the RBAC gate service.

Responsibilities:
- FastAPI app factory and router modules.
- Adapting the authorization gate into a route dependency.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# The API layer should remain thin: routing + gate wiring + delegation to handlers.
