from __future__ import annotations

import sys
from pathlib import Path
from typing import Iterable

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import pytest
from fastapi.testclient import TestClient

MARCH_5_2013 = 1362441600000


@pytest.fixture(scope="module")
def api_client() -> Iterable[TestClient]:
    from suncalc_api import app

    with TestClient(app) as client:
        yield client


def test_health_endpoint(api_client: TestClient) -> None:
    response = api_client.get("/health")
    assert response.status_code == 200
    payload = response.json()
    assert payload["ok"] is True
    assert payload["ready"] is True
    assert payload["version"]


def test_sun_position(api_client: TestClient) -> None:
    response = api_client.get(
        "/sun/position", params={"timestamp": MARCH_5_2013, "lat": 50.5, "lon": 30.5}
    )
    assert response.status_code == 200
    payload = response.json()
    assert payload["timestamp"] == MARCH_5_2013
    assert payload["azimuth"] == pytest.approx(-2.5003175907168385, abs=1e-5)
    assert payload["altitude"] == pytest.approx(-0.7000406838781611, abs=1e-5)
    assert payload["distance"] == 0.0


def test_sun_position_defaults_to_now(api_client: TestClient) -> None:
    response = api_client.get("/sun/position", params={"lat": 0, "lon": 0})
    assert response.status_code == 200
    assert response.json()["timestamp"] > MARCH_5_2013


def test_sun_times(api_client: TestClient) -> None:
    response = api_client.get(
        "/sun/times", params={"timestamp": MARCH_5_2013, "lat": 50.5, "lon": 30.5}
    )
    assert response.status_code == 200
    payload = response.json()
    assert payload["height"] == 0.0
    assert len(payload["times"]) == 14
    assert payload["times_utc"]["solar_noon"].startswith("2013-03-05T10:1")
    assert payload["times_utc"]["solar_noon"].endswith("Z")


def test_sun_times_polar_day(api_client: TestClient) -> None:
    response = api_client.get(
        "/sun/times",
        params={"timestamp": 1371772800000, "lat": 78.2232, "lon": 15.6469},
    )
    assert response.status_code == 200
    payload = response.json()
    assert payload["times"]["night"] is None
    assert payload["times_utc"]["sunrise"] is None
    assert isinstance(payload["times"]["solar_noon"], int)


def test_moon_position(api_client: TestClient) -> None:
    response = api_client.get(
        "/moon/position", params={"timestamp": MARCH_5_2013, "lat": 50.5, "lon": 30.5}
    )
    assert response.status_code == 200
    payload = response.json()
    assert payload["distance"] == pytest.approx(364121.37256256194, rel=1e-9)


def test_moon_illumination(api_client: TestClient) -> None:
    response = api_client.get("/moon/illumination", params={"timestamp": MARCH_5_2013})
    assert response.status_code == 200
    payload = response.json()
    assert payload["fraction"] == pytest.approx(0.4848068202456373, abs=1e-9)
    assert payload["phase"] == pytest.approx(0.7548368838538762, abs=1e-9)


def test_validation_error(api_client: TestClient) -> None:
    response = api_client.get(
        "/sun/position",
        params={
            "lat": 95,  # invalid latitude
            "lon": 0,
        },
    )
    assert response.status_code == 422
    payload = response.json()
    assert payload["code"] == "validation_error"
    assert payload["ok"] is False


def test_negative_height_rejected(api_client: TestClient) -> None:
    response = api_client.get("/sun/times", params={"lat": 0, "lon": 0, "height": -5})
    assert response.status_code == 422


def test_unknown_route_uses_error_envelope(api_client: TestClient) -> None:
    response = api_client.get("/nope")
    assert response.status_code == 404
    payload = response.json()
    assert payload["ok"] is False
    assert payload["code"] == "http_404"
    assert payload["error"] == "Not Found"


def test_wrong_method_uses_error_envelope(api_client: TestClient) -> None:
    response = api_client.post("/health")
    assert response.status_code == 405
    payload = response.json()
    assert payload["ok"] is False
    assert payload["code"] == "http_405"
