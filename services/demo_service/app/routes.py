"""demo-service routes.

Single read-only endpoint: `GET /` answers with the configured message as
plain text. The message is bound when the router is built, so the handler
never re-reads configuration.
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from .settings import DemoServiceSettings


def build_router(settings: DemoServiceSettings) -> APIRouter:
    router = APIRouter()
    message = settings.message

    @router.get("/", response_class=PlainTextResponse)
    def get_message():
        """Return the configured welcome message."""
        return message

    return router
