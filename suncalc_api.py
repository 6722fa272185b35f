"""FastAPI application exposing Sun and Moon calculations."""

from __future__ import annotations

import json
import logging
import math
import time
from contextlib import asynccontextmanager
from datetime import UTC, datetime
from typing import Annotated, Dict, Optional

from fastapi import FastAPI, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

import suncalc
from models import (
    ErrorResponse,
    HealthResponse,
    IlluminationQueryParams,
    IlluminationResponse,
    LocationQueryParams,
    PositionResponse,
    SunTimesResponse,
    TimesQueryParams,
)
from suncalc.config import load_settings
from suncalc.types import Position, Timestamp

SETTINGS = load_settings()

logging.basicConfig(level=SETTINGS.log_level, format="%(message)s")
LOGGER = logging.getLogger("suncalc-api")

APP_DESCRIPTION = "Sun and Moon positions, sunlight phases and lunar illumination"

READY = False


@asynccontextmanager
async def lifespan(app: FastAPI):
    global READY
    LOGGER.info(
        json.dumps(
            {
                "event": "startup",
                "version": suncalc.__version__,
                "cors_origins": list(SETTINGS.cors_origins),
            }
        )
    )
    READY = True
    yield
    READY = False


app = FastAPI(
    title="SunCalc API",
    description=APP_DESCRIPTION,
    version=suncalc.__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(SETTINGS.cors_origins),
    allow_credentials=False,
    allow_methods=["GET"],
    allow_headers=["*"],
)


def _resolve_timestamp(timestamp: Optional[int]) -> int:
    if timestamp is not None:
        return timestamp
    return suncalc.to_timestamp(datetime.now(UTC))


def _event_ms(value: Timestamp) -> Optional[int]:
    if isinstance(value, float) and math.isnan(value):
        return None
    return int(value)


def _format_utc(value: Timestamp) -> Optional[str]:
    dt = suncalc.from_timestamp(value)
    if dt is None:
        return None
    return dt.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _log_request(event: str, start_time: float, **fields: object) -> None:
    duration_ms = (time.perf_counter() - start_time) * 1000.0
    LOGGER.info(
        json.dumps({"event": event, **fields, "duration_ms": round(duration_ms, 3)})
    )


def _error_response(status_code: int, code: str, message: str) -> JSONResponse:
    payload = ErrorResponse(code=code, error=message)
    LOGGER.error(json.dumps({"event": "error", "code": code, "message": message}))
    return JSONResponse(status_code=status_code, content=payload.model_dump())


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    messages = ", ".join(error["msg"] for error in exc.errors())
    return _error_response(422, "validation_error", messages)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    detail = exc.detail
    if isinstance(detail, dict):
        message = detail.get("error") or detail.get("message") or str(detail)
    elif isinstance(detail, list):
        message = ", ".join(str(item) for item in detail)
    else:
        message = str(detail)
    return _error_response(exc.status_code, f"http_{exc.status_code}", message)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    LOGGER.exception("Unhandled exception", exc_info=exc)
    return _error_response(500, "internal_error", "Unhandled server error")


ERROR_RESPONSES = {
    422: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


def _position_response(
    timestamp: int, params: LocationQueryParams, position: Position
) -> PositionResponse:
    return PositionResponse(
        timestamp=timestamp,
        latitude=params.lat,
        longitude=params.lon,
        azimuth=position.azimuth,
        altitude=position.altitude,
        distance=position.distance,
        parallactic_angle=position.parallactic_angle,
    )


@app.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    return HealthResponse(ok=True, ready=READY, version=suncalc.__version__)


@app.get("/sun/position", response_model=PositionResponse, responses=ERROR_RESPONSES)
def sun_position_endpoint(params: Annotated[LocationQueryParams, Query()]) -> PositionResponse:
    start_time = time.perf_counter()
    timestamp = _resolve_timestamp(params.timestamp)
    position = suncalc.get_position(timestamp, params.lat, params.lon)
    _log_request("sun_position", start_time, lat=params.lat, lon=params.lon, timestamp=timestamp)
    return _position_response(timestamp, params, position)


@app.get("/sun/times", response_model=SunTimesResponse, responses=ERROR_RESPONSES)
def sun_times_endpoint(params: Annotated[TimesQueryParams, Query()]) -> SunTimesResponse:
    start_time = time.perf_counter()
    timestamp = _resolve_timestamp(params.timestamp)
    events = suncalc.get_times(timestamp, params.lat, params.lon, params.height).as_dict()

    times: Dict[str, Optional[int]] = {name: _event_ms(value) for name, value in events.items()}
    times_utc: Dict[str, Optional[str]] = {
        name: _format_utc(value) for name, value in events.items()
    }

    _log_request(
        "sun_times",
        start_time,
        lat=params.lat,
        lon=params.lon,
        height=params.height,
        timestamp=timestamp,
        absent=sorted(name for name, value in times.items() if value is None),
    )
    return SunTimesResponse(
        timestamp=timestamp,
        latitude=params.lat,
        longitude=params.lon,
        height=params.height,
        times=times,
        times_utc=times_utc,
    )


@app.get("/moon/position", response_model=PositionResponse, responses=ERROR_RESPONSES)
def moon_position_endpoint(params: Annotated[LocationQueryParams, Query()]) -> PositionResponse:
    start_time = time.perf_counter()
    timestamp = _resolve_timestamp(params.timestamp)
    position = suncalc.get_moon_position(timestamp, params.lat, params.lon)
    _log_request("moon_position", start_time, lat=params.lat, lon=params.lon, timestamp=timestamp)
    return _position_response(timestamp, params, position)


@app.get(
    "/moon/illumination", response_model=IlluminationResponse, responses=ERROR_RESPONSES
)
def moon_illumination_endpoint(
    params: Annotated[IlluminationQueryParams, Query()],
) -> IlluminationResponse:
    start_time = time.perf_counter()
    timestamp = _resolve_timestamp(params.timestamp)
    illumination = suncalc.get_moon_illumination(timestamp)
    _log_request("moon_illumination", start_time, timestamp=timestamp)
    return IlluminationResponse(
        timestamp=timestamp,
        fraction=illumination.fraction,
        phase=illumination.phase,
        angle=illumination.angle,
    )
