"""Shared value types and the encoded polyline format."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, Mapping


class _StrEnum(str, Enum):
    """String enumeration whose str() is the wire value."""

    def __str__(self) -> str:
        return self.value


class Mode(_StrEnum):
    """Mode of travel."""

    DRIVING = "driving"
    WALKING = "walking"
    BICYCLING = "bicycling"
    TRANSIT = "transit"


class Avoid(_StrEnum):
    """Route features to avoid."""

    TOLLS = "tolls"
    HIGHWAYS = "highways"
    FERRIES = "ferries"


class Units(_StrEnum):
    """Unit system for displayed distances."""

    METRIC = "metric"
    IMPERIAL = "imperial"


class TransitMode(_StrEnum):
    """Preferred mode of public transit."""

    BUS = "bus"
    SUBWAY = "subway"
    TRAIN = "train"
    TRAM = "tram"
    RAIL = "rail"


class TransitRoutingPreference(_StrEnum):
    """Preference applied when choosing transit routes."""

    LESS_WALKING = "less_walking"
    FEWER_TRANSFERS = "fewer_transfers"


class TrafficModel(_StrEnum):
    """Assumptions used when estimating time in traffic."""

    BEST_GUESS = "best_guess"
    OPTIMISTIC = "optimistic"
    PESSIMISTIC = "pessimistic"


@dataclass(frozen=True)
class LatLng:
    """A latitude/longitude pair in degrees."""

    lat: float = 0.0
    lng: float = 0.0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> LatLng:
        data = data or {}
        return cls(lat=float(data.get("lat", 0.0)), lng=float(data.get("lng", 0.0)))

    def to_dict(self) -> dict[str, float]:
        return {"lat": self.lat, "lng": self.lng}


@dataclass(frozen=True)
class LatLngBounds:
    """A rectangle given by its north-east and south-west corners."""

    north_east: LatLng = field(default_factory=LatLng)
    south_west: LatLng = field(default_factory=LatLng)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> LatLngBounds:
        data = data or {}
        return cls(
            north_east=LatLng.from_dict(data.get("northeast")),
            south_west=LatLng.from_dict(data.get("southwest")),
        )

    def to_dict(self) -> dict[str, dict[str, float]]:
        return {
            "northeast": self.north_east.to_dict(),
            "southwest": self.south_west.to_dict(),
        }


@dataclass(frozen=True)
class Distance:
    """A distance as human-readable text and in meters."""

    human_readable: str = ""
    meters: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> Distance:
        data = data or {}
        return cls(
            human_readable=data.get("text", "") or "",
            meters=int(data.get("value", 0) or 0),
        )

    def to_dict(self) -> dict[str, Any]:
        return {"text": self.human_readable, "value": self.meters}


@dataclass(frozen=True)
class Polyline:
    """An encoded polyline."""

    points: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> Polyline:
        data = data or {}
        return cls(points=data.get("points", "") or "")

    def to_dict(self) -> dict[str, str]:
        return {"points": self.points}


def _scaled(value: float) -> int:
    return int(math.floor(value * 1e5 + 0.5))


def _encode_int(value: int) -> str:
    encoded = ~(value << 1) if value < 0 else value << 1
    chars = []
    while encoded >= 0x20:
        chars.append(chr((0x20 | (encoded & 0x1F)) + 63))
        encoded >>= 5
    chars.append(chr(encoded + 63))
    return "".join(chars)


def encode_polyline(points: Iterable[LatLng]) -> str:
    """Encode a sequence of points in the encoded polyline format."""
    parts = []
    prev_lat = prev_lng = 0
    for point in points:
        lat, lng = _scaled(point.lat), _scaled(point.lng)
        parts.append(_encode_int(lat - prev_lat))
        parts.append(_encode_int(lng - prev_lng))
        prev_lat, prev_lng = lat, lng
    return "".join(parts)


def _decode_ints(encoded: str):
    """Yield the signed integers of an encoded string; a truncated tail ends it."""
    result = shift = 0
    for char in encoded:
        code = ord(char) - 63
        if not 0 <= code < 64:
            raise ValueError(f"invalid polyline character {char!r}")
        result |= (code & 0x1F) << shift
        shift += 5
        if code < 0x20:
            yield ~(result >> 1) if result & 1 else result >> 1
            result = shift = 0


def decode_polyline(encoded: str) -> list[LatLng]:
    """Decode an encoded polyline into points; an unpaired trailing value is dropped."""
    values = _decode_ints(encoded)
    path = []
    lat = lng = 0
    for dlat, dlng in zip(values, values):
        lat += dlat
        lng += dlng
        path.append(LatLng(lat=lat * 1e-5, lng=lng * 1e-5))
    return path