import logging
import sys
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI

from frontline.api.deps import get_configuration, get_settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    settings = get_settings()

    # Load the command configuration on startup (fail-fast)
    try:
        get_configuration(settings)
        logger.info(f"Commands loaded from {settings.config_path}")
    except Exception as e:
        logger.critical(f"Commands load failed: {e}")
        sys.exit(1)

    yield


app = FastAPI(
    title="Frontline",
    version="0.1.0",
    lifespan=lifespan,
)


@app.get("/health")
def health_check() -> dict[str, Any]:
    """Health check endpoint."""
    return {"status": "ok", "service": "frontline"}


# --- Routers ---
# Registered last: the catch-all request route must not shadow /health
from frontline.api.routes import dispatch  # noqa: E402

app.include_router(dispatch.router, tags=["Dispatch"])
