"""
rbac_gate.api.app

FastAPI app factory for the RBAC gate service.

Responsibilities:
- Build the FastAPI application and register routers/middleware/static files.
- Initialize shared infrastructure once at startup: Policy Store engine, casbin
  enforcer hydrated from the store, and the authorization gate.
- Provide a single composition root where collaborators are injected.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
from sqlalchemy.ext.asyncio import AsyncEngine

from rbac_gate import __version__
from rbac_gate.api.routers.content import router as content_router
from rbac_gate.api.routers.health import router as health_router
from rbac_gate.db.init_db import init_db
from rbac_gate.db.session import create_engine, create_sessionmaker, ping
from rbac_gate.gate.errors import StartupFailure
from rbac_gate.gate.ports import PolicyEvaluator, RoleStore
from rbac_gate.gate.service import AuthorizationGate
from rbac_gate.observability.logging import configure_logging, get_logger
from rbac_gate.observability.middleware import RequestContextMiddleware
from rbac_gate.policy.engine import CasbinPolicyEngine
from rbac_gate.services.roles import SqlRoleStore
from rbac_gate.settings import Settings

log = get_logger(__name__)

STATIC_DIR = Path(__file__).resolve().parent / "static"


def create_app(
    *,
    settings: Settings,
    role_store: RoleStore | None = None,
    evaluator: PolicyEvaluator | None = None,
) -> FastAPI:
    """
    `role_store` / `evaluator` replace the SQL role store and the casbin engine when
    given; the Policy Store is still connected (readiness probes use it).
    """

    configure_logging(
        service_name=settings.service_name,
        level=settings.log_level,
        json_logs=settings.env != "dev",
    )

    async def _startup(app: FastAPI, engine: AsyncEngine) -> None:
        log.info("startup", env=settings.env)
        try:
            await ping(engine)
        except Exception as e:
            raise StartupFailure(f"Policy Store unreachable: {e}") from e
        log.info("db_connected")

        if settings.env in ("dev", "test"):
            await init_db(engine)
        app.state.sessionmaker = create_sessionmaker(engine)

        policy = evaluator
        app.state.policy_rules = 0
        if policy is None:
            try:
                casbin_engine = CasbinPolicyEngine(model_path=settings.policy_model_path)
                app.state.policy_rules = await casbin_engine.load_policy(app.state.sessionmaker)
            except Exception as e:
                raise StartupFailure(f"Policy engine initialization failed: {e}") from e
            policy = casbin_engine
        app.state.policy_engine = policy

        app.state.gate = AuthorizationGate(
            role_store=role_store or SqlRoleStore(app.state.sessionmaker),
            evaluator=policy,
            default_role=settings.default_role,
            role_lookup_timeout_s=settings.role_lookup_timeout_s,
        )

    @asynccontextmanager
    async def _lifespan(app: FastAPI) -> AsyncIterator[None]:
        engine = create_engine(settings)
        app.state.engine = engine
        try:
            await _startup(app, engine)
            yield
        finally:
            # Dispose the engine to close pools/FDs, also after a failed startup.
            await engine.dispose()
            log.info("shutdown")

    app = FastAPI(
        title="RBAC Gate",
        version=__version__,
        docs_url="/docs",
        openapi_url="/openapi.json",
        lifespan=_lifespan,
    )

    app.add_middleware(RequestContextMiddleware)
    app.include_router(health_router, tags=["health"])
    app.include_router(content_router)
    app.mount(
        "/static",
        StaticFiles(directory=settings.static_dir or STATIC_DIR),
        name="static",
    )

    return app


# --- Module Notes -----------------------------------------------------------
# Startup failures propagate out of the lifespan before it yields, so the server
# never begins serving with a half-initialized gate.
