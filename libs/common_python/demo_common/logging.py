"""Shared logging utilities.

Both services standardize on the standard library `logging` module so that:
- all services emit consistent fields (timestamp, level, logger, message),
- log levels and formats are configured once at process start,
- uvicorn's own loggers end up on the same handler as application logs.

Two output formats are supported:
- `text`: human friendly, for local development.
- `json`: one JSON object per line, for cluster log collection.
"""

import json
import logging
import sys
import time

HANDLER_NAME = "demo_common"
TEXT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

# Paths polled by the kubelet every few seconds; logged at DEBUG to keep INFO readable.
PROBE_PATHS = (
    "/health",
    "/actuator/health",
    "/actuator/health/liveness",
    "/actuator/health/readiness",
)

# color_message: uvicorn passes an ANSI-coloured copy of the message through `extra`.
_RESERVED_ATTRS = set(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {
    "message",
    "asctime",
    "color_message",
}


class JsonFormatter(logging.Formatter):
    """Render log records as single-line JSON objects.

    Any attributes passed through `extra=` are copied into the payload next to
    the standard fields.
    """

    def format(self, record):
        payload = {
            "timestamp": self.formatTime(record, "%Y-%m-%dT%H:%M:%S%z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS and not key.startswith("_"):
                payload[key] = value
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def configure_logging(level: str = "INFO", fmt: str = "text") -> None:
    """Install a single stdout handler on the root logger.

    Args:
        level: Log level name (e.g. "INFO", "debug").
        fmt: "text" or "json".

    Raises:
        ValueError: If `fmt` is not a known format.
    """
    if fmt == "json":
        formatter = JsonFormatter()
    elif fmt == "text":
        formatter = logging.Formatter(TEXT_FORMAT)
    else:
        raise ValueError(f"Unknown log format: {fmt}")

    handler = logging.StreamHandler(sys.stdout)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    for existing in list(root.handlers):
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(level.upper())

    # uvicorn attaches its own handlers when it configures logging; route them to root instead.
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        uv_logger = logging.getLogger(name)
        uv_logger.handlers.clear()
        uv_logger.propagate = True


def add_request_logging(app, logger: logging.Logger) -> None:
    """Register an HTTP middleware that logs one line per request.

    Probe traffic is logged at DEBUG, everything else at INFO. A request that
    ends in an unhandled exception is logged at ERROR with status 500 before
    the exception is re-raised to the framework's error handler.
    """

    def _log(request, status, started, level):
        duration_ms = round((time.perf_counter() - started) * 1000, 2)
        logger.log(
            level,
            "%s %s -> %s",
            request.method,
            request.url.path,
            status,
            extra={
                "method": request.method,
                "path": request.url.path,
                "status": status,
                "duration_ms": duration_ms,
            },
        )

    @app.middleware("http")
    async def log_requests(request, call_next):
        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            _log(request, 500, started, logging.ERROR)
            raise
        level = logging.DEBUG if request.url.path in PROBE_PATHS else logging.INFO
        _log(request, response.status_code, started, level)
        return response
