"""Elevation API: request validation, query building and results."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from .client import ApiConfig, Client, MapsError, check_status
from .values import LatLng, encode_polyline

ELEVATION_API = ApiConfig(
    host="https://maps.googleapis.com",
    path="/maps/api/elevation/json",
    accepts_client_id=True,
    accepts_signature=False,
)


@dataclass
class ElevationRequest:
    """Parameters of an Elevation API request; locations or path must be set."""

    locations: list[LatLng] = field(default_factory=list)
    path: list[LatLng] = field(default_factory=list)
    samples: int = 0

    def validate(self) -> None:
        """Raise MapsError if the request cannot be sent."""
        if not self.path and not self.locations:
            raise MapsError("maps: Path and Locations empty")
        if self.path and self.samples == 0:
            raise MapsError("maps: Samples empty")

    def params(self) -> dict[str, str]:
        """Query parameters for this request."""
        query: dict[str, str] = {}
        if self.path:
            query["path"] = "enc:" + encode_polyline(self.path)
            query["samples"] = str(self.samples)
        if self.locations:
            query["locations"] = "enc:" + encode_polyline(self.locations)
        return query


@dataclass
class ElevationResult:
    """Elevation at a location, in meters, with its resolution."""

    location: LatLng | None = None
    elevation: float = 0.0
    resolution: float = 0.0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> ElevationResult:
        data = data or {}
        location = data.get("location")
        return cls(
            location=LatLng.from_dict(location) if location is not None else None,
            elevation=float(data.get("elevation", 0.0) or 0.0),
            resolution=float(data.get("resolution", 0.0) or 0.0),
        )


def elevation(client: Client, request: ElevationRequest) -> list[ElevationResult]:
    """Issue an Elevation request and return its results."""
    request.validate()
    data = client.get_json(ELEVATION_API, request.params())
    check_status(data)
    return [ElevationResult.from_dict(item) for item in data.get("results") or []]