import pytest

from mapsclient.addressdescriptor import (
    AddressDescriptor,
    Area,
    Containment,
    Landmark,
    LocalizedText,
    SpatialRelationship,
)

SAMPLE = {
    "landmarks": [
        {
            "place_id": "landmark-one",
            "display_name": {"text": "Town Hall", "language_code": "en"},
            "types": ["city_hall", "point_of_interest"],
            "spatial_relationship": "ACROSS_THE_ROAD",
            "straight_line_distance_meters": 42.5,
            "travel_distance_meters": 60.25,
        },
        {
            "place_id": "landmark-two",
            "display_name": {"text": "Park", "language_code": "en"},
            "types": ["park"],
            "spatial_relationship": "BEHIND",
        },
    ],
    "areas": [
        {
            "place_id": "area-one",
            "display_name": {"text": "Old Town", "language_code": "en"},
            "containment": "OUTSKIRTS",
        }
    ],
}


def test_localized_text_str():
    text = LocalizedText(text="Foo", language_code="en")
    assert str(text) == "(text=Foo, languageCode=en)"


def test_localized_text_from_dict():
    text = LocalizedText.from_dict({"text": "Zentrum", "language_code": "de"})
    assert text == LocalizedText(text="Zentrum", language_code="de")


def test_descriptor_from_dict_preserves_ranking():
    descriptor = AddressDescriptor.from_dict(SAMPLE)
    assert [landmark.place_id for landmark in descriptor.landmarks] == [
        "landmark-one",
        "landmark-two",
    ]
    assert [area.place_id for area in descriptor.areas] == ["area-one"]


def test_landmark_fields():
    landmark = Landmark.from_dict(SAMPLE["landmarks"][0])
    assert landmark.display_name.text == "Town Hall"
    assert landmark.types == ["city_hall", "point_of_interest"]
    assert landmark.spatial_relationship is SpatialRelationship.ACROSS_THE_ROAD
    assert landmark.straight_line_distance_meters == pytest.approx(42.5)
    assert landmark.travel_distance_meters == pytest.approx(60.25)


def test_landmark_missing_distances_default_to_zero():
    landmark = Landmark.from_dict(SAMPLE["landmarks"][1])
    assert landmark.travel_distance_meters == 0.0
    assert landmark.spatial_relationship is SpatialRelationship.BEHIND


def test_area_containment():
    area = Area.from_dict(SAMPLE["areas"][0])
    assert area.containment is Containment.OUTSKIRTS
    assert str(area.display_name) == "(text=Old Town, languageCode=en)"


def test_unspecified_containment_value():
    area = Area.from_dict({"containment": "CONTAINMENT_UNSPECIFIED"})
    assert area.containment is Containment.UNSPECIFIED


def test_unknown_relationship_kept_as_text():
    landmark = Landmark.from_dict({"spatial_relationship": "SOMEWHERE_ELSE"})
    assert landmark.spatial_relationship == "SOMEWHERE_ELSE"


def test_empty_descriptor():
    descriptor = AddressDescriptor.from_dict(None)
    assert descriptor.landmarks == []
    assert descriptor.areas == []


def test_enum_str_is_value():
    landmark = Landmark.from_dict({"spatial_relationship": "DOWN_THE_ROAD"})
    assert str(landmark.spatial_relationship) == "DOWN_THE_ROAD"
    area = Area.from_dict({"containment": "NEAR"})
    assert str(area.containment) == "NEAR"