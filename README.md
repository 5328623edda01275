# mapsclient

A small client for the Maps web service APIs. It builds and validates
requests, signs them with your credentials, applies a client-side rate limit
and decodes responses into plain dataclasses.

Supported services:

- Directions (`mapsclient.directions`)
- Elevation (`mapsclient.elevation`)

Shared value types (`LatLng`, `LatLngBounds`, `Distance`, `Polyline` and the
`Mode`, `Avoid`, `Units`, `TransitMode`, `TransitRoutingPreference` and
`TrafficModel` enumerations) live in `mapsclient.values`. Dataclasses for
address descriptors (`AddressDescriptor`, `Landmark`, `Area`,
`LocalizedText`) live in `mapsclient.addressdescriptor` and are built from
response data with their `from_dict` class methods.

## Installation

```
pip install mapsclient
```

## Creating a client

A client needs either an API key, or a client ID together with a URL-safe
base64 signing secret. Without either, `Client` raises `MapsError`.

```python
from mapsclient.client import Client

client = Client(api_key="placeholder")
```

By default requests are limited to 50 per second; pass `rate_limit=0` to
turn limiting off. A `channel`, a custom `base_url` and a
`requests.Session` can also be supplied.

`MapsError` is raised for invalid requests, for failed HTTP requests, for
bodies that are not JSON, and for any response status other than `OK` or
`ZERO_RESULTS`.

The lower-level methods `get_json`, `post_json` and `get_binary` take an
`ApiConfig` (host, path and which credentials the API accepts) and can be
used for other endpoints.

## Directions

```python
from mapsclient.client import Client
from mapsclient.directions import DirectionsRequest, directions
from mapsclient.values import Mode

client = Client(api_key="placeholder")
request = DirectionsRequest(
    origin="Sydney",
    destination="Parramatta",
    mode=Mode.TRANSIT,
)
routes, waypoints = directions(client, request)
for route in routes:
    print(route.summary)
    for leg in route.legs:
        print(leg.distance.human_readable, leg.duration)
```

`DirectionsRequest.validate()` checks the request before it is sent: origin
and destination are required, departure and arrival time cannot both be
set, and transit modes or a transit routing preference need
`mode=Mode.TRANSIT`. Durations are decoded as `timedelta`, arrival and
departure times as timezone-aware `datetime`.

## Elevation

```python
from mapsclient.elevation import ElevationRequest, elevation
from mapsclient.values import LatLng

request = ElevationRequest(locations=[LatLng(39.7391536, -104.9847034)])
for result in elevation(client, request):
    print(result.location, result.elevation, result.resolution)
```

A request needs locations or a path; a path also needs `samples`.

Locations and paths are sent as encoded polylines. The encoder and decoder
are available on their own:

```python
from mapsclient.values import LatLng, decode_polyline, encode_polyline

encoded = encode_polyline([LatLng(1, 2), LatLng(3, 4)])
points = decode_polyline(encoded)
```

## Experience IDs

Experience IDs set on the client (the `experience_ids` argument) are sent in
the `X-GOOG-MAPS-EXPERIENCE-ID` header of every request. They can be changed
with `set_experience_id`, read with `get_experience_id` and removed with
`clear_experience_id`. IDs for a block of calls only can be added with the
`experience_id_context` context manager; they are appended to the client's
own.

```python
from mapsclient.client import experience_id_context

with experience_id_context("checkout"):
    routes, waypoints = directions(client, request)
```

## What this package does not do

- It has no Distance Matrix support.
- It installs no command-line tool; it is used as a library only.