"""demo-client routes.

`GET /` calls demo-service, decorates the returned text and answers with it
as plain text. A failed downstream call is reported as 502 Bad Gateway.
"""

import logging

import httpx
from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import PlainTextResponse

from .client import DemoServiceClient, decorate

logger = logging.getLogger("demo_client")

router = APIRouter()


def get_demo_client(request: Request) -> DemoServiceClient:
    """FastAPI dependency returning the process-wide demo-service client."""
    return request.app.state.demo_client


@router.get("/", response_class=PlainTextResponse)
async def get_message(client: DemoServiceClient = Depends(get_demo_client)):
    """Relay the demo-service message with a fixed prefix.

    Raises:
        HTTPException: 502 if demo-service is unreachable, times out or
            answers with an error status.
    """
    try:
        message = await client.fetch_message()
    except httpx.HTTPError as exc:
        logger.warning(
            "Call to demo-service at %s failed: %s: %s",
            client.url,
            type(exc).__name__,
            exc,
        )
        raise HTTPException(status_code=502, detail="demo-service unavailable") from exc

    return decorate(message)
