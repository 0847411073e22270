"""
rbac_gate.api.routers.content

Protected content endpoint.

Every route on this router runs the authorization gate first; handlers only
execute for allowed requests.
"""

from __future__ import annotations

from pathlib import Path

from fastapi import APIRouter, Depends
from fastapi.responses import FileResponse

from rbac_gate.api.deps import require_authorization
from rbac_gate.observability.logging import get_logger

log = get_logger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

router = APIRouter(dependencies=[Depends(require_authorization)], tags=["content"])


@router.post("/content", response_class=FileResponse)
async def content() -> FileResponse:
    log.info("content_served")
    return FileResponse(TEMPLATES_DIR / "content.html", media_type="text/html")
