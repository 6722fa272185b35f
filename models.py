"""Pydantic models for API requests and responses."""

from __future__ import annotations

from typing import Dict, Optional

from pydantic import BaseModel, Field


class IlluminationQueryParams(BaseModel):
    """Validated query parameters for the ``/moon/illumination`` endpoint."""

    timestamp: Optional[int] = Field(
        None,
        description="Milliseconds since the Unix epoch; defaults to the current time",
    )


class LocationQueryParams(IlluminationQueryParams):
    """Validated query parameters for the position endpoints."""

    lat: float = Field(..., ge=-90.0, le=90.0, description="Latitude in degrees")
    lon: float = Field(..., ge=-180.0, le=180.0, description="Longitude in degrees")


class TimesQueryParams(LocationQueryParams):
    """Validated query parameters for the ``/sun/times`` endpoint."""

    height: float = Field(0.0, ge=0.0, description="Observer height in meters")


class PositionResponse(BaseModel):
    """Horizontal position of the Sun or the Moon."""

    ok: bool = True
    timestamp: int = Field(..., description="Requested instant in epoch milliseconds")
    latitude: float
    longitude: float
    azimuth: float = Field(
        ..., description="Azimuth in radians, measured from south towards west"
    )
    altitude: float = Field(..., description="Altitude above the horizon in radians")
    distance: float = Field(0.0, description="Distance in kilometers (Moon only)")
    parallactic_angle: float = Field(
        0.0, description="Parallactic angle in radians (Moon only)"
    )


class SunTimesResponse(BaseModel):
    """Solar events of one day."""

    ok: bool = True
    timestamp: int
    latitude: float
    longitude: float
    height: float
    times: Dict[str, Optional[int]] = Field(
        ..., description="Event times in epoch milliseconds, null when absent"
    )
    times_utc: Dict[str, Optional[str]] = Field(
        ..., description="Event times in UTC (ISO-8601), null when absent"
    )


class IlluminationResponse(BaseModel):
    """Lunar illumination payload."""

    ok: bool = True
    timestamp: int
    fraction: float = Field(..., description="Illuminated fraction of the disk")
    phase: float = Field(..., description="0 new moon, 0.5 full moon")
    angle: float = Field(..., description="Bright limb angle in radians")


class HealthResponse(BaseModel):
    """Health-check response."""

    ok: bool = True
    ready: bool
    version: str


class ErrorResponse(BaseModel):
    """Error payload."""

    ok: bool = False
    code: str
    error: str
