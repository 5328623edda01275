import pytest

from mapsclient.values import (
    Distance,
    LatLng,
    LatLngBounds,
    Mode,
    Polyline,
    TrafficModel,
    TransitMode,
    decode_polyline,
    encode_polyline,
)


def test_encode_locations_from_elevation_request():
    assert encode_polyline([LatLng(1, 2), LatLng(3, 4)]) == "_ibE_seK_seK_seK"


def test_encode_path_from_elevation_request():
    assert encode_polyline([LatLng(5, 6), LatLng(7, 8)]) == "_qo]_{rc@_seK_seK"


def test_encode_documented_example():
    points = [LatLng(38.5, -120.2), LatLng(40.7, -120.95), LatLng(43.252, -126.453)]
    assert encode_polyline(points) == "_p~iF~ps|U_ulLnnqC_mqNvxq`@"


def test_decode_inverts_encode():
    decoded = decode_polyline("_ibE_seK_seK_seK")
    assert len(decoded) == 2
    assert decoded[0].lat == pytest.approx(1)
    assert decoded[0].lng == pytest.approx(2)
    assert decoded[1].lat == pytest.approx(3)
    assert decoded[1].lng == pytest.approx(4)


@pytest.mark.parametrize(
    "points",
    [
        [LatLng(-33.870315, 151.196532)],
        [LatLng(-1.5, -2.25), LatLng(0, 0), LatLng(89.99999, -179.99999)],
        [LatLng(36.578581, -118.291994), LatLng(36.23998, -116.83171)],
    ],
)
def test_round_trip(points):
    decoded = decode_polyline(encode_polyline(points))
    assert len(decoded) == len(points)
    for got, want in zip(decoded, points):
        assert got.lat == pytest.approx(want.lat, abs=1e-5)
        assert got.lng == pytest.approx(want.lng, abs=1e-5)


def test_empty_polyline():
    assert encode_polyline([]) == ""
    assert decode_polyline("") == []


def test_decode_rejects_invalid_characters():
    with pytest.raises(ValueError):
        decode_polyline("_ibE !")


def test_latlng_dict_round_trip():
    point = LatLng(39.7391536, -104.9847034)
    assert LatLng.from_dict(point.to_dict()) == point
    assert LatLng.from_dict({"lat": 39.7391536, "lng": -104.9847034}) == point


def test_bounds_from_dict():
    bounds = LatLngBounds.from_dict(
        {"northeast": {"lat": 2, "lng": 3}, "southwest": {"lat": -1, "lng": -2}}
    )
    assert bounds.north_east == LatLng(2, 3)
    assert bounds.south_west == LatLng(-1, -2)
    assert LatLngBounds.from_dict(bounds.to_dict()) == bounds


def test_distance_from_dict():
    distance = Distance.from_dict({"text": "12.5 km", "value": 12535})
    assert distance == Distance(human_readable="12.5 km", meters=12535)
    assert Distance.from_dict(distance.to_dict()) == distance


def test_missing_data_gives_defaults():
    assert Distance.from_dict(None) == Distance()
    assert Polyline.from_dict(None).points == ""
    assert LatLng.from_dict({}) == LatLng(0.0, 0.0)


def test_polyline_dict_round_trip():
    line = Polyline(points="_ibE_seK_seK_seK")
    assert Polyline.from_dict(line.to_dict()) == line


def test_enums_render_as_wire_values():
    assert str(Mode.TRANSIT) == "transit"
    assert Mode("driving") is Mode.DRIVING
    assert str(TransitMode.RAIL) == "rail"
    assert TrafficModel("pessimistic") is TrafficModel.PESSIMISTIC
    with pytest.raises(ValueError):
        Mode("flying")