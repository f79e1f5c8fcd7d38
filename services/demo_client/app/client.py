"""Outbound HTTP client for demo-service.

One `httpx.AsyncClient` is opened per process (in the app lifespan) and
shared by all requests. Each call runs under a total deadline of `timeout`
seconds, covering connect, request and the whole body read; httpx's own
per-phase timeouts use the same value. There is no retry or fallback,
failures are raised to the caller as `httpx.HTTPError`.
"""

import anyio
import httpx

PREFIX = "The service says: "


def decorate(message: str) -> str:
    """Prefix a message fetched from demo-service."""
    return PREFIX + message


class DemoServiceClient:
    """Thin wrapper around `httpx.AsyncClient` pointed at demo-service."""

    def __init__(self, service_url, timeout: float, transport: httpx.AsyncBaseTransport | None = None):
        self.url = str(service_url)
        self.timeout = timeout
        self._http = httpx.AsyncClient(timeout=timeout, transport=transport)

    async def fetch_message(self) -> str:
        """GET the service URL and return the body as text.

        Raises:
            httpx.HTTPStatusError: If demo-service answers with a non-2xx status.
            httpx.TimeoutException: If the whole call takes longer than `timeout`.
            httpx.HTTPError: On connection errors.
        """
        request = self._http.build_request("GET", self.url)
        try:
            with anyio.fail_after(self.timeout):
                response = await self._http.send(request)
        except TimeoutError as exc:
            raise httpx.TimeoutException(
                f"demo-service did not answer within {self.timeout}s", request=request
            ) from exc
        response.raise_for_status()
        return response.text

    async def aclose(self) -> None:
        await self._http.aclose()
