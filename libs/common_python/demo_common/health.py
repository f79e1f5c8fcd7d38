"""Liveness and readiness probes.

Kubernetes polls these endpoints (see `services/*/k8s/deployment.yml`):
- liveness: is the process able to answer at all?
- readiness: should the Service route traffic to this pod?

Readiness is only reported once the application lifespan has started, and is
withdrawn as soon as shutdown begins so the pod drains before it stops.
"""

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

UP = "UP"
OUT_OF_SERVICE = "OUT_OF_SERVICE"


class ProbeState:
    """Readiness flag stored on `app.state.probes`.

    Liveness has no state of its own: any process that can answer the
    liveness route is alive.
    """

    def __init__(self):
        self.ready = False

    def mark_ready(self):
        self.ready = True

    def mark_stopping(self):
        self.ready = False


def _probe_response(ok: bool) -> JSONResponse:
    if ok:
        return JSONResponse({"status": UP})
    return JSONResponse({"status": OUT_OF_SERVICE}, status_code=503)


def health_router(service_name: str) -> APIRouter:
    """Build the health routes for one service.

    Args:
        service_name: Name reported by the plain `/health` endpoint.

    Returns:
        APIRouter: Router exposing `/health` and `/actuator/health[/liveness|/readiness]`.
    """
    router = APIRouter(tags=["health"])

    @router.get("/health")
    def health():
        return {"status": "ok", "service": service_name}

    @router.get("/actuator/health")
    def overall(request: Request):
        return _probe_response(request.app.state.probes.ready)

    @router.get("/actuator/health/liveness")
    def liveness():
        return _probe_response(True)

    @router.get("/actuator/health/readiness")
    def readiness(request: Request):
        return _probe_response(request.app.state.probes.ready)

    return router
