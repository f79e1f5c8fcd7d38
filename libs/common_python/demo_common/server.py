"""Process entrypoint helpers."""

import uvicorn

from .settings import ServerSettings


def run(app, settings: ServerSettings) -> None:
    """Serve `app` with uvicorn until SIGTERM/SIGINT.

    Logging is configured by the caller (`configure_logging`), so uvicorn's
    own log config and access log are disabled; requests are logged by the
    request-logging middleware instead.
    """
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        log_config=None,
        access_log=False,
        timeout_graceful_shutdown=settings.shutdown_grace_period,
    )
