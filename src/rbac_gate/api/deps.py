"""
rbac_gate.api.deps

FastAPI dependency wiring for the API layer.

Responsibilities:
- Provide dependency functions for DB sessions and the gate.
- Run the authorization gate ahead of protected handlers and translate gate
  errors into HTTP responses.
"""

from __future__ import annotations

from collections.abc import AsyncIterator

from fastapi import Depends, HTTPException, Request
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from starlette.status import HTTP_500_INTERNAL_SERVER_ERROR

from rbac_gate.gate.errors import GateError
from rbac_gate.gate.models import Decision
from rbac_gate.gate.service import AuthorizationGate


def sessionmaker_from_app(request: Request) -> async_sessionmaker[AsyncSession]:
    # The sessionmaker is created on app startup in `rbac_gate.api.app.create_app`.
    return request.app.state.sessionmaker  # type: ignore[attr-defined]


async def db_session(
    session_factory: async_sessionmaker[AsyncSession] = Depends(sessionmaker_from_app),
) -> AsyncIterator[AsyncSession]:
    async with session_factory() as session:
        yield session


def gate_from_app(request: Request) -> AuthorizationGate:
    return request.app.state.gate  # type: ignore[attr-defined]


async def require_authorization(
    request: Request,
    gate: AuthorizationGate = Depends(gate_from_app),
) -> Decision:
    # Starlette caches the body on the request, so the handler can still read it.
    body = await request.body()
    try:
        return await gate.authorize(
            body=body,
            resource=request.url.path,
            action=request.method,
        )
    except GateError as e:
        status = e.status_code or HTTP_500_INTERNAL_SERVER_ERROR
        raise HTTPException(status_code=status, detail=e.detail) from e
