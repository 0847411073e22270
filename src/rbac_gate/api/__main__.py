"""
rbac_gate.api.__main__

Entrypoint for running the FastAPI application via `python -m rbac_gate.api`.
"""

from __future__ import annotations

import uvicorn

from rbac_gate.api.app import create_app
from rbac_gate.settings import get_settings


def main() -> None:
    settings = get_settings()
    app = create_app(settings=settings)

    # A StartupFailure raised while the lifespan starts makes uvicorn exit non-zero.
    uvicorn.run(
        app,
        host=settings.api_host,
        port=settings.api_port,
        log_config=None,  # structlog
    )


if __name__ == "__main__":
    main()
