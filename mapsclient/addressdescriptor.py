"""Address descriptors: landmarks and areas that describe a location."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping, TypeVar


class SpatialRelationship(str, Enum):
    """Relationship in space between a landmark and the target."""

    NEAR = "NEAR"
    WITHIN = "WITHIN"
    BESIDE = "BESIDE"
    ACROSS_THE_ROAD = "ACROSS_THE_ROAD"
    DOWN_THE_ROAD = "DOWN_THE_ROAD"
    AROUND_THE_CORNER = "AROUND_THE_CORNER"
    BEHIND = "BEHIND"

    def __str__(self) -> str:
        return self.value


class Containment(str, Enum):
    """Relationship in space between an area and the target."""

    UNSPECIFIED = "CONTAINMENT_UNSPECIFIED"
    WITHIN = "WITHIN"
    OUTSKIRTS = "OUTSKIRTS"
    NEAR = "NEAR"

    def __str__(self) -> str:
        return self.value


_E = TypeVar("_E", bound=Enum)


def _enum_or_raw(enum_cls: type[_E], value: Any) -> _E | str:
    """Return the enum member for a known value, the raw string otherwise."""
    text = value or ""
    try:
        return enum_cls(text)
    except ValueError:
        return text


@dataclass
class LocalizedText:
    """A text in a particular language."""

    text: str = ""
    language_code: str = ""

    def __str__(self) -> str:
        return f"(text={self.text}, languageCode={self.language_code})"

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> LocalizedText:
        data = data or {}
        return cls(
            text=data.get("text", "") or "",
            language_code=data.get("language_code", "") or "",
        )


@dataclass
class Landmark:
    """A landmark useful for describing a location."""

    place_id: str = ""
    display_name: LocalizedText = field(default_factory=LocalizedText)
    types: list[str] = field(default_factory=list)
    spatial_relationship: SpatialRelationship | str = ""
    straight_line_distance_meters: float = 0.0
    travel_distance_meters: float = 0.0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> Landmark:
        data = data or {}
        return cls(
            place_id=data.get("place_id", "") or "",
            display_name=LocalizedText.from_dict(data.get("display_name")),
            types=list(data.get("types") or []),
            spatial_relationship=_enum_or_raw(
                SpatialRelationship, data.get("spatial_relationship")
            ),
            straight_line_distance_meters=float(
                data.get("straight_line_distance_meters", 0.0) or 0.0
            ),
            travel_distance_meters=float(data.get("travel_distance_meters", 0.0) or 0.0),
        )


@dataclass
class Area:
    """A precise region useful for describing a location."""

    place_id: str = ""
    display_name: LocalizedText = field(default_factory=LocalizedText)
    containment: Containment | str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> Area:
        data = data or {}
        return cls(
            place_id=data.get("place_id", "") or "",
            display_name=LocalizedText.from_dict(data.get("display_name")),
            containment=_enum_or_raw(Containment, data.get("containment")),
        )


@dataclass
class AddressDescriptor:
    """Ranked landmarks and areas describing an address."""

    landmarks: list[Landmark] = field(default_factory=list)
    areas: list[Area] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> AddressDescriptor:
        data = data or {}
        return cls(
            landmarks=[Landmark.from_dict(item) for item in data.get("landmarks") or []],
            areas=[Area.from_dict(item) for item in data.get("areas") or []],
        )