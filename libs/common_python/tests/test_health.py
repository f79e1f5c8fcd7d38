"""Tests for `demo_common.health`."""

from fastapi import FastAPI
from fastapi.testclient import TestClient

from demo_common.health import ProbeState, health_router


def _app():
    app = FastAPI()
    app.state.probes = ProbeState()
    app.include_router(health_router("unit"))
    return app


def test_liveness_is_up() -> None:
    response = TestClient(_app()).get("/actuator/health/liveness")
    assert response.status_code == 200
    assert response.json() == {"status": "UP"}


def test_readiness_follows_probe_state() -> None:
    app = _app()
    client = TestClient(app)

    response = client.get("/actuator/health/readiness")
    assert response.status_code == 503
    assert response.json() == {"status": "OUT_OF_SERVICE"}

    app.state.probes.mark_ready()
    assert client.get("/actuator/health/readiness").status_code == 200
    assert client.get("/actuator/health").json() == {"status": "UP"}

    app.state.probes.mark_stopping()
    assert client.get("/actuator/health/readiness").status_code == 503
    assert client.get("/actuator/health").status_code == 503


def test_plain_health_names_service() -> None:
    response = TestClient(_app()).get("/health")
    assert response.json() == {"status": "ok", "service": "unit"}


def test_liveness_stays_up_while_draining() -> None:
    app = _app()
    app.state.probes.mark_ready()
    app.state.probes.mark_stopping()
    client = TestClient(app)
    assert client.get("/actuator/health/liveness").status_code == 200
    assert client.get("/actuator/health/readiness").status_code == 503
    assert not hasattr(app.state.probes, "live")
