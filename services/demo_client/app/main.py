"""demo-client application factory / entrypoint.

This service calls demo-service on every `GET /` and relays its message,
prefixed with "The service says: ".

Operational notes:
- The demo-service URL is configured via `DEMO_SERVICE_URL` or the mounted
  `application.yml`; it is fixed for the life of the process.
- The outbound HTTP client is created when the app starts and closed when it
  stops; readiness is only reported while it is open.
"""

from contextlib import asynccontextmanager
import logging

import httpx
from fastapi import FastAPI
from pydantic import ValidationError

from demo_common.health import ProbeState, health_router
from demo_common.logging import add_request_logging, configure_logging
from demo_common.server import run
from demo_common.settings import ConfigError

from .client import DemoServiceClient
from .routes import router
from .settings import DemoClientSettings

SERVICE_NAME = "demo-client"

logger = logging.getLogger("demo_client")


def create_app(
    settings: DemoClientSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> FastAPI:
    """Build the FastAPI app for the relay service.

    Args:
        settings: Pre-built settings. Loaded from env/config file when omitted.
        transport: Optional httpx transport for the outbound client (tests use
            `httpx.MockTransport` or `httpx.ASGITransport`).

    Returns:
        FastAPI: Configured application.
    """
    if settings is None:
        settings = DemoClientSettings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app.state.demo_client = DemoServiceClient(
            settings.service_url,
            timeout=settings.request_timeout,
            transport=transport,
        )
        logger.info(
            "%s ready on port %s, relaying %s (timeout %ss)",
            SERVICE_NAME,
            settings.port,
            settings.service_url,
            settings.request_timeout,
        )
        app.state.probes.mark_ready()
        try:
            yield
        finally:
            app.state.probes.mark_stopping()
            await app.state.demo_client.aclose()
            logger.info("%s shutting down", SERVICE_NAME)

    app = FastAPI(title="Demo Client", version="0.0.1", lifespan=lifespan)
    app.state.settings = settings
    app.state.probes = ProbeState()

    add_request_logging(app, logger)
    app.include_router(health_router(SERVICE_NAME))
    app.include_router(router)
    return app


def main() -> int:
    """Console entrypoint (`demo-client`)."""
    try:
        settings = DemoClientSettings()
    except (ConfigError, ValidationError) as exc:
        configure_logging()
        logger.error("Invalid configuration: %s", exc)
        return 1

    configure_logging(settings.log_level, settings.log_format)
    run(create_app(settings), settings)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
