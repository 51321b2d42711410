"""
EC2 Demo Dashboard

Backend for a small dashboard that lists mock EC2 instances and simulates
starting/stopping instances and a monitoring script on them. All state is
held in memory for the lifetime of the process.
"""

import logging
import os

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

# Load environment variables
load_dotenv()

from dashboard import __version__
from dashboard.errors import DashboardError
from dashboard.routers import instances_router, scripts_router
from dashboard.store import InstanceStore, ScriptStatusStore

logger = logging.getLogger(__name__)


def _get_log_level() -> str:
    """Get the log level name from environment, falling back to INFO."""
    level = os.getenv("LOG_LEVEL", "INFO").upper()
    if not isinstance(logging.getLevelName(level), int):
        return "INFO"
    return level


async def dashboard_error_handler(request: Request, exc: DashboardError) -> JSONResponse:
    """Render dashboard errors as {"error": message}."""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    else:
        logger.warning(
            f"{request.method} {request.url.path} rejected ({exc.status_code}): {exc.message}"
        )
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


def create_app() -> FastAPI:
    """
    Build the dashboard application.

    Each call creates its own instance and script stores, seeded with the
    demo data, and attaches them to ``app.state``.
    """
    app = FastAPI(
        title="EC2 Demo Dashboard API",
        version=__version__,
        description="""
Lists mock EC2 instances and simulates starting/stopping instances
and a remote monitoring script on them (demo mode, no AWS calls).
        """,
    )

    app.state.instance_store = InstanceStore.seeded()
    app.state.script_store = ScriptStatusStore()

    app.add_exception_handler(DashboardError, dashboard_error_handler)

    # Include routers
    app.include_router(instances_router)
    app.include_router(scripts_router)

    @app.get("/health", tags=["Health"])
    async def health_check() -> dict:
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8000"))
    debug = os.getenv("DEBUG", "true").lower() == "true"

    logging.basicConfig(
        level=_get_log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    uvicorn.run("dashboard.main:app", host=host, port=port, reload=debug)
