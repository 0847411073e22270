"""
rbac_gate.policy.models

Casbin model definitions.
"""

from __future__ import annotations

# RBAC with role inheritance through `g` rules.
# Resources match with keyMatch2 (`/content`, `/docs/*`, `/items/:id`);
# actions match as regular expressions (`POST`, `(GET)|(POST)`, `.*`).
DEFAULT_RBAC_MODEL = """
[request_definition]
r = sub, obj, act

[policy_definition]
p = sub, obj, act

[role_definition]
g = _, _

[policy_effect]
e = some(where (p.eft == allow))

[matchers]
m = g(r.sub, p.sub) && keyMatch2(r.obj, p.obj) && regexMatch(r.act, p.act)
"""
