"""Directions API: request validation, query building and response types."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone, tzinfo
from typing import Any, Mapping
from urllib.parse import urlsplit
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .client import ApiConfig, Client, MapsError, check_status
from .values import (
    Avoid,
    Distance,
    LatLng,
    LatLngBounds,
    Mode,
    Polyline,
    TrafficModel,
    TransitMode,
    TransitRoutingPreference,
    Units,
)

DIRECTIONS_API = ApiConfig(
    host="https://maps.googleapis.com",
    path="/maps/api/directions/json",
    accepts_client_id=True,
    accepts_signature=False,
)

_KNOWN_MODES = frozenset(mode.value for mode in Mode)


def _duration_from(data: Mapping[str, Any] | None) -> timedelta:
    if not data:
        return timedelta(0)
    return timedelta(seconds=data.get("value", 0) or 0)


def _duration_to(value: timedelta) -> dict[str, Any]:
    return {"value": int(value.total_seconds())}


def _zone(name: str) -> tzinfo:
    if not name:
        return timezone.utc
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        return timezone.utc


def _datetime_from(data: Mapping[str, Any] | None) -> datetime | None:
    if not data:
        return None
    zone = _zone(data.get("time_zone", "") or "")
    return datetime.fromtimestamp(data.get("value", 0) or 0, tz=zone)


def _datetime_to(value: datetime | None) -> dict[str, Any] | None:
    if value is None:
        return None
    zone_name = getattr(value.tzinfo, "key", None) or "UTC"
    return {"value": int(value.timestamp()), "time_zone": zone_name}


def _parse_url(value: Any) -> str:
    text = value or ""
    try:
        urlsplit(text)
    except ValueError as exc:
        raise MapsError(f"maps: invalid URL {text!r}: {exc}") from exc
    return text


@dataclass
class DirectionsRequest:
    """Parameters of a Directions API request."""

    origin: str = ""
    destination: str = ""
    mode: Mode | str = ""
    departure_time: str = ""
    arrival_time: str = ""
    waypoints: list[str] = field(default_factory=list)
    alternatives: bool = False
    optimize: bool = False
    avoid: list[Avoid | str] = field(default_factory=list)
    language: str = ""
    units: Units | str = ""
    region: str = ""
    transit_mode: list[TransitMode | str] = field(default_factory=list)
    transit_routing_preference: TransitRoutingPreference | str = ""
    traffic_model: TrafficModel | str = ""

    def validate(self) -> None:
        """Raise MapsError if the request cannot be sent."""
        mode = str(self.mode)
        if not self.origin:
            raise MapsError("maps: origin missing")
        if not self.destination:
            raise MapsError("maps: destination missing")
        if mode and mode not in _KNOWN_MODES:
            raise MapsError(f"maps: unknown Mode: '{mode}'")
        if self.departure_time and self.arrival_time:
            raise MapsError("maps: DepartureTime and ArrivalTime both specified")
        if self.transit_mode and mode != Mode.TRANSIT.value:
            raise MapsError("maps: TransitMode specified while Mode != TravelModeTransit")
        if self.transit_routing_preference and mode != Mode.TRANSIT.value:
            raise MapsError(
                f"maps: mode of transit '{mode}' invalid for TransitRoutingPreference"
            )

    def _waypoints_query(self) -> str:
        prefix = "optimize:true|" if self.optimize else ""
        return prefix + "|".join(self.waypoints)

    def params(self) -> dict[str, str]:
        """Query parameters for this request."""
        query = {"origin": self.origin, "destination": self.destination}
        optional = {
            "mode": str(self.mode),
            "departure_time": self.departure_time,
            "arrival_time": self.arrival_time,
            "waypoints": self._waypoints_query() if self.waypoints else "",
            "alternatives": "true" if self.alternatives else "",
            "avoid": "|".join(str(a) for a in self.avoid),
            "language": self.language,
            "units": str(self.units),
            "region": self.region,
            "transit_mode": "|".join(str(t) for t in self.transit_mode),
            "transit_routing_preference": str(self.transit_routing_preference),
            "traffic_model": str(self.traffic_model),
        }
        query.update({key: value for key, value in optional.items() if value})
        return query


@dataclass
class GeocodedWaypoint:
    """Geocoding result for the origin, a waypoint or the destination."""

    geocoder_status: str = ""
    partial_match: bool = False
    place_id: str = ""
    types: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> GeocodedWaypoint:
        data = data or {}
        return cls(
            geocoder_status=data.get("geocoder_status", "") or "",
            partial_match=bool(data.get("partial_match", False)),
            place_id=data.get("place_id", "") or "",
            types=list(data.get("types") or []),
        )


@dataclass
class Fare:
    """Total fare of a route."""

    currency: str = ""
    value: float = 0.0
    text: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> Fare:
        data = data or {}
        return cls(
            currency=data.get("currency", "") or "",
            value=float(data.get("value", 0.0) or 0.0),
            text=data.get("text", "") or "",
        )


@dataclass
class ViaWaypoint:
    """A point through which a leg passes."""

    location: LatLng = field(default_factory=LatLng)
    step_index: int = 0
    step_interpolation: float = 0.0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> ViaWaypoint:
        data = data or {}
        return cls(
            location=LatLng.from_dict(data.get("location")),
            step_index=int(data.get("step_index", 0) or 0),
            step_interpolation=float(data.get("step_interpolation", 0.0) or 0.0),
        )


@dataclass
class TransitStop:
    """A transit stop or station."""

    location: LatLng = field(default_factory=LatLng)
    name: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> TransitStop:
        data = data or {}
        return cls(
            location=LatLng.from_dict(data.get("location")),
            name=data.get("name", "") or "",
        )

    def to_dict(self) -> dict[str, Any]:
        return {"location": self.location.to_dict(), "name": self.name}


@dataclass
class TransitAgency:
    """Operator of a transit line."""

    name: str = ""
    url: str = ""
    phone: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> TransitAgency:
        data = data or {}
        return cls(
            name=data.get("name", "") or "",
            url=_parse_url(data.get("url")),
            phone=data.get("phone", "") or "",
        )

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "url": self.url, "phone": self.phone}


@dataclass
class TransitLineVehicle:
    """Type of vehicle used on a transit line."""

    name: str = ""
    type: str = ""
    icon: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> TransitLineVehicle:
        data = data or {}
        return cls(
            name=data.get("name", "") or "",
            type=data.get("type", "") or "",
            icon=_parse_url(data.get("icon")),
        )

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "type": self.type, "icon": self.icon}


@dataclass
class TransitLine:
    """A transit line used in a step."""

    name: str = ""
    short_name: str = ""
    color: str = ""
    agencies: list[TransitAgency] = field(default_factory=list)
    url: str = ""
    icon: str = ""
    text_color: str = ""
    vehicle: TransitLineVehicle = field(default_factory=TransitLineVehicle)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> TransitLine:
        data = data or {}
        return cls(
            name=data.get("name", "") or "",
            short_name=data.get("short_name", "") or "",
            color=data.get("color", "") or "",
            agencies=[TransitAgency.from_dict(a) for a in data.get("agencies") or []],
            url=_parse_url(data.get("url")),
            icon=_parse_url(data.get("icon")),
            text_color=data.get("text_color", "") or "",
            vehicle=TransitLineVehicle.from_dict(data.get("vehicle")),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "short_name": self.short_name,
            "color": self.color,
            "agencies": [agency.to_dict() for agency in self.agencies],
            "url": self.url,
            "icon": self.icon,
            "text_color": self.text_color,
            "vehicle": self.vehicle.to_dict(),
        }


@dataclass
class TransitDetails:
    """Transit-specific information for a step."""

    arrival_stop: TransitStop = field(default_factory=TransitStop)
    departure_stop: TransitStop = field(default_factory=TransitStop)
    arrival_time: datetime | None = None
    departure_time: datetime | None = None
    headsign: str = ""
    headway: timedelta = field(default_factory=timedelta)
    num_stops: int = 0
    line: TransitLine = field(default_factory=TransitLine)
    trip_short_name: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> TransitDetails:
        data = data or {}
        return cls(
            arrival_stop=TransitStop.from_dict(data.get("arrival_stop")),
            departure_stop=TransitStop.from_dict(data.get("departure_stop")),
            arrival_time=_datetime_from(data.get("arrival_time")),
            departure_time=_datetime_from(data.get("departure_time")),
            headsign=data.get("headsign", "") or "",
            headway=timedelta(seconds=data.get("headway", 0) or 0),
            num_stops=int(data.get("num_stops", 0) or 0),
            line=TransitLine.from_dict(data.get("line")),
            trip_short_name=data.get("trip_short_name", "") or "",
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "arrival_stop": self.arrival_stop.to_dict(),
            "departure_stop": self.departure_stop.to_dict(),
            "arrival_time": _datetime_to(self.arrival_time),
            "departure_time": _datetime_to(self.departure_time),
            "headsign": self.headsign,
            "headway": int(self.headway.total_seconds()),
            "num_stops": self.num_stops,
            "line": self.line.to_dict(),
            "trip_short_name": self.trip_short_name,
        }


@dataclass
class Step:
    """A single step of a leg."""

    html_instructions: str = ""
    distance: Distance = field(default_factory=Distance)
    duration: timedelta = field(default_factory=timedelta)
    start_location: LatLng = field(default_factory=LatLng)
    end_location: LatLng = field(default_factory=LatLng)
    polyline: Polyline = field(default_factory=Polyline)
    steps: list[Step] = field(default_factory=list)
    transit_details: TransitDetails | None = None
    travel_mode: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> Step:
        data = data or {}
        details = data.get("transit_details")
        return cls(
            html_instructions=data.get("html_instructions", "") or "",
            distance=Distance.from_dict(data.get("distance")),
            duration=_duration_from(data.get("duration")),
            start_location=LatLng.from_dict(data.get("start_location")),
            end_location=LatLng.from_dict(data.get("end_location")),
            polyline=Polyline.from_dict(data.get("polyline")),
            steps=[Step.from_dict(s) for s in data.get("steps") or []],
            transit_details=TransitDetails.from_dict(details) if details else None,
            travel_mode=data.get("travel_mode", "") or "",
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "html_instructions": self.html_instructions,
            "distance": self.distance.to_dict(),
            "duration": _duration_to(self.duration),
            "start_location": self.start_location.to_dict(),
            "end_location": self.end_location.to_dict(),
            "polyline": self.polyline.to_dict(),
            "steps": [step.to_dict() for step in self.steps],
            "transit_details": (
                self.transit_details.to_dict() if self.transit_details else None
            ),
            "travel_mode": self.travel_mode,
        }


@dataclass
class Leg:
    """A single leg of a route."""

    steps: list[Step] = field(default_factory=list)
    distance: Distance = field(default_factory=Distance)
    duration: timedelta = field(default_factory=timedelta)
    duration_in_traffic: timedelta = field(default_factory=timedelta)
    arrival_time: datetime | None = None
    departure_time: datetime | None = None
    start_location: LatLng = field(default_factory=LatLng)
    end_location: LatLng = field(default_factory=LatLng)
    start_address: str = ""
    end_address: str = ""
    via_waypoint: list[ViaWaypoint] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> Leg:
        data = data or {}
        return cls(
            steps=[Step.from_dict(s) for s in data.get("steps") or []],
            distance=Distance.from_dict(data.get("distance")),
            duration=_duration_from(data.get("duration")),
            duration_in_traffic=_duration_from(data.get("duration_in_traffic")),
            arrival_time=_datetime_from(data.get("arrival_time")),
            departure_time=_datetime_from(data.get("departure_time")),
            start_location=LatLng.from_dict(data.get("start_location")),
            end_location=LatLng.from_dict(data.get("end_location")),
            start_address=data.get("start_address", "") or "",
            end_address=data.get("end_address", "") or "",
            via_waypoint=[ViaWaypoint.from_dict(v) for v in data.get("via_waypoint") or []],
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "steps": [step.to_dict() for step in self.steps],
            "distance": self.distance.to_dict(),
            "duration": _duration_to(self.duration),
            "duration_in_traffic": _duration_to(self.duration_in_traffic),
            "arrival_time": _datetime_to(self.arrival_time),
            "departure_time": _datetime_to(self.departure_time),
            "start_location": self.start_location.to_dict(),
            "end_location": self.end_location.to_dict(),
            "start_address": self.start_address,
            "end_address": self.end_address,
            "via_waypoint": [
                {
                    "location": via.location.to_dict(),
                    "step_index": via.step_index,
                    "step_interpolation": via.step_interpolation,
                }
                for via in self.via_waypoint
            ],
        }


@dataclass
class Route:
    """A single route between an origin and a destination."""

    summary: str = ""
    legs: list[Leg] = field(default_factory=list)
    waypoint_order: list[int] = field(default_factory=list)
    overview_polyline: Polyline = field(default_factory=Polyline)
    bounds: LatLngBounds = field(default_factory=LatLngBounds)
    copyrights: str = ""
    warnings: list[str] = field(default_factory=list)
    fare: Fare | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> Route:
        data = data or {}
        fare = data.get("fare")
        return cls(
            summary=data.get("summary", "") or "",
            legs=[Leg.from_dict(leg) for leg in data.get("legs") or []],
            waypoint_order=[int(i) for i in data.get("waypoint_order") or []],
            overview_polyline=Polyline.from_dict(data.get("overview_polyline")),
            bounds=LatLngBounds.from_dict(data.get("bounds")),
            copyrights=data.get("copyrights", "") or "",
            warnings=list(data.get("warnings") or []),
            fare=Fare.from_dict(fare) if fare else None,
        )


def directions(
    client: Client, request: DirectionsRequest
) -> tuple[list[Route], list[GeocodedWaypoint]]:
    """Issue a Directions request and return its routes and geocoded waypoints."""
    request.validate()
    data = client.get_json(DIRECTIONS_API, request.params())
    check_status(data)
    routes = [Route.from_dict(route) for route in data.get("routes") or []]
    waypoints = [
        GeocodedWaypoint.from_dict(wp) for wp in data.get("geocoded_waypoints") or []
    ]
    return routes, waypoints