"""
rbac_gate.gate.models

Gate domain models.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator


class Subject(BaseModel):
    """
    Acting identity decoded from the request body.
    """

    model_config = ConfigDict(extra="ignore")

    username: str = ""

    @model_validator(mode="before")
    @classmethod
    def _fold_username_key(cls, data: Any) -> Any:
        # Keys match case-insensitively ("Username", "USERNAME"); an exact key wins.
        if not isinstance(data, dict) or "username" in data:
            return data
        for key, value in data.items():
            if isinstance(key, str) and key.casefold() == "username":
                return {**data, "username": value}
        return data


@dataclass(frozen=True, slots=True)
class AuthorizationQuery:
    role: str
    resource: str
    action: str


@dataclass(frozen=True, slots=True)
class Decision:
    query: AuthorizationQuery
    allowed: bool
