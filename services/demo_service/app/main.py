"""demo-service application factory / entrypoint.

This service holds one configured message and returns it on `GET /`.

Operational notes:
- Configuration is loaded once at startup (see `settings.py`); changing it
  requires a restart.
- Liveness/readiness probes are served under `/actuator/health/*` for the
  Kubernetes deployment in `services/demo_service/k8s/`.
"""

from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from pydantic import ValidationError

from demo_common.health import ProbeState, health_router
from demo_common.logging import add_request_logging, configure_logging
from demo_common.server import run
from demo_common.settings import ConfigError

from .routes import build_router
from .settings import DemoServiceSettings

SERVICE_NAME = "demo-service"

logger = logging.getLogger("demo_service")


def create_app(settings: DemoServiceSettings | None = None) -> FastAPI:
    """Build the FastAPI app for the message service.

    Args:
        settings: Pre-built settings. Loaded from env/config file when omitted.

    Returns:
        FastAPI: Configured application.
    """
    if settings is None:
        settings = DemoServiceSettings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if not settings.message:
            logger.warning("demo.message is not configured; GET / will return an empty body")
        logger.info("%s ready on port %s", SERVICE_NAME, settings.port)
        app.state.probes.mark_ready()
        try:
            yield
        finally:
            app.state.probes.mark_stopping()
            logger.info("%s shutting down", SERVICE_NAME)

    app = FastAPI(title="Demo Service", version="0.0.1", lifespan=lifespan)
    app.state.settings = settings
    app.state.probes = ProbeState()

    add_request_logging(app, logger)
    app.include_router(health_router(SERVICE_NAME))
    app.include_router(build_router(settings))
    return app


def main() -> int:
    """Console entrypoint (`demo-service`)."""
    try:
        settings = DemoServiceSettings()
    except (ConfigError, ValidationError) as exc:
        configure_logging()
        logger.error("Invalid configuration: %s", exc)
        return 1

    configure_logging(settings.log_level, settings.log_format)
    run(create_app(settings), settings)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
