"""
rbac_gate.api.routers

Router modules: protected content and health probes.
"""

# Package marker.
