"""
rbac_gate.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide strongly-typed, env-driven settings for all layers.
- Build the Policy Store URL from discrete connection fields.
- Hide secrets from repr/logging (e.g., DB password).
- Offer a cached settings instance for dependency injection.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL


class Settings(BaseSettings):
    """
    Env-driven configuration (prefix `RBAC_GATE_`).

    Database connection fields replace the credentials the gate used to carry
    as constants; `database_url` overrides all of them when set.
    """

    model_config = SettingsConfigDict(env_prefix="RBAC_GATE_", case_sensitive=False)

    # Environment controls toggle behavior like auto-init DB tables.
    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "rbac-gate"
    log_level: str = "INFO"

    api_host: str = "0.0.0.0"
    api_port: int = 9999

    # Policy Store
    db_host: str = "localhost"
    db_port: int = 5432
    db_user: str = "postgres"
    db_password: str = Field(default="", repr=False)
    db_name: str = "casbin"
    database_url: str | None = Field(default=None, repr=False)

    # Policy engine
    policy_model_path: str | None = None

    # Gate
    default_role: str = "user"
    role_lookup_timeout_s: float = Field(default=2.0, gt=0)

    static_dir: str | None = None

    def sqlalchemy_url(self) -> str | URL:
        if self.database_url:
            return self.database_url
        return URL.create(
            "postgresql+asyncpg",
            username=self.db_user,
            password=self.db_password or None,
            host=self.db_host,
            port=self.db_port,
            database=self.db_name,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # Cache avoids re-parsing env vars for each request dependency.
    return Settings()


# --- Module Notes -----------------------------------------------------------
# Only connection basics are configurable for the store; pool tuning and TLS options
# belong to the deployment's database URL override.
