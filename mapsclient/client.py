"""HTTP client for the Maps web service APIs."""

from __future__ import annotations

import base64
import binascii
import contextvars
import hashlib
import hmac
import threading
import time
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Iterator, Mapping
from urllib.parse import urlencode

import requests

EXPERIENCE_ID_HEADER = "X-GOOG-MAPS-EXPERIENCE-ID"
DEFAULT_REQUESTS_PER_SECOND = 50

_context_experience_ids: contextvars.ContextVar[tuple[str, ...] | None] = (
    contextvars.ContextVar("maps_experience_ids", default=None)
)


class MapsError(Exception):
    """Raised when a request cannot be made or the service reports an error."""


@dataclass(frozen=True)
class ApiConfig:
    """Where an API lives and which credentials it accepts."""

    host: str
    path: str
    accepts_client_id: bool = True
    accepts_signature: bool = False


@dataclass(frozen=True)
class BinaryResponse:
    """A raw, non-JSON response body."""

    status_code: int
    content_type: str
    data: bytes


@contextmanager
def experience_id_context(*args: str) -> Iterator[None]:
    """Attach experience ids to every request made inside the block."""
    token = _context_experience_ids.set(tuple(args))
    try:
        yield
    finally:
        _context_experience_ids.reset(token)


def experience_ids_from_context() -> list[str] | None:
    """Return the experience ids attached by the innermost active context, if any."""
    ids = _context_experience_ids.get()
    return None if ids is None else list(ids)


def check_status(data: Mapping[str, Any]) -> None:
    """Raise MapsError unless the response status is OK or ZERO_RESULTS."""
    status = data.get("status", "") or ""
    if status not in ("OK", "ZERO_RESULTS"):
        message = data.get("error_message", "") or ""
        raise MapsError(f"maps: {status} - {message}")


def _encode_query(params: Mapping[str, str]) -> str:
    return urlencode(sorted(params.items()))


def _decode_signature(signature: str) -> bytes:
    try:
        return base64.urlsafe_b64decode(signature.encode("ascii"))
    except (binascii.Error, ValueError) as exc:
        raise MapsError(f"maps: invalid signature: {exc}") from exc


class _RateLimiter:
    """Token bucket allowing `rate` requests per second with an equal burst."""

    def __init__(self, rate: int) -> None:
        self._rate = float(rate)
        self._burst = float(rate)
        self._tokens = float(rate)
        self._last = time.monotonic()
        self._lock = threading.Lock()

    def wait(self) -> None:
        with self._lock:
            now = time.monotonic()
            self._tokens = min(self._burst, self._tokens + (now - self._last) * self._rate)
            self._last = now
            self._tokens -= 1.0
            delay = -self._tokens / self._rate if self._tokens < 0 else 0.0
        if delay > 0:
            time.sleep(delay)


class Client:
    """Makes authenticated, rate-limited requests to the Maps web services."""

    def __init__(
        self,
        api_key: str = "",
        signature: str = "",
        client_id: str = "",
        base_url: str = "",
        channel: str = "",
        rate_limit: int = DEFAULT_REQUESTS_PER_SECOND,
        experience_ids: tuple[str, ...] | list[str] = (),
        session: requests.Session | None = None,
    ) -> None:
        self.api_key = api_key
        self.client_id = client_id
        self.base_url = base_url
        self.channel = channel
        self._signature = _decode_signature(signature) if signature else b""
        self._experience_ids = list(experience_ids)
        self.session = session if session is not None else requests.Session()

        if not self.api_key and (not self.client_id or not self._signature):
            raise MapsError("maps: API Key or Maps for Work credentials missing")

        self._rate_limiter = _RateLimiter(rate_limit) if rate_limit > 0 else None

    def set_experience_id(self, *args: str) -> None:
        self._experience_ids = list(args)

    def get_experience_id(self) -> list[str]:
        return list(self._experience_ids)

    def clear_experience_id(self) -> None:
        self._experience_ids = []

    def experience_id_header(self) -> str | None:
        """The experience id header value for the current context, or None."""
        ids = list(self._experience_ids)
        ids.extend(experience_ids_from_context() or [])
        return ",".join(ids) if ids else None

    def auth_query(
        self,
        path: str,
        params: Mapping[str, str],
        accepts_client_id: bool,
        accepts_signature: bool,
    ) -> str:
        """Return the encoded query string carrying the credentials."""
        query = dict(params)
        if self.channel:
            query["channel"] = self.channel
        if self.api_key:
            query["key"] = self.api_key
            if accepts_signature and self._signature:
                return self._sign(path, query)
            return _encode_query(query)
        if accepts_client_id:
            query["client"] = self.client_id
            return self._sign(path, query)
        raise MapsError("maps: API Key missing")

    def _sign(self, path: str, query: dict[str, str]) -> str:
        query.pop("signature", None)
        encoded = _encode_query(query)
        digest = hmac.new(
            self._signature, f"{path}?{encoded}".encode(), hashlib.sha1
        ).digest()
        return f"{encoded}&signature={base64.urlsafe_b64encode(digest).decode()}"

    def _url(self, config: ApiConfig, query: str) -> str:
        host = self.base_url or config.host
        return f"{host}{config.path}?{query}"

    def _headers(self) -> dict[str, str]:
        header = self.experience_id_header()
        return {EXPERIENCE_ID_HEADER: header} if header else {}

    def _send(self, method: str, url: str, **kwargs: Any) -> requests.Response:
        if self._rate_limiter is not None:
            self._rate_limiter.wait()
        try:
            return self.session.request(method, url, **kwargs)
        except requests.RequestException as exc:
            raise MapsError(f"maps: request failed: {exc}") from exc

    @staticmethod
    def _decode(response: requests.Response) -> Any:
        try:
            return response.json()
        except ValueError as exc:
            raise MapsError(f"maps: invalid JSON response: {exc}") from exc

    def _get(self, config: ApiConfig, params: Mapping[str, str]) -> requests.Response:
        query = self.auth_query(
            config.path, params, config.accepts_client_id, config.accepts_signature
        )
        return self._send("GET", self._url(config, query), headers=self._headers())

    def get_json(self, config: ApiConfig, params: Mapping[str, str]) -> Any:
        """Issue a GET request and return the decoded JSON body."""
        return self._decode(self._get(config, params))

    def post_json(self, config: ApiConfig, body: Any) -> Any:
        """Issue a POST request with a JSON body and return the decoded JSON body."""
        query = self.auth_query(
            config.path, {}, config.accepts_client_id, config.accepts_signature
        )
        headers = {"Content-Type": "application/json", **self._headers()}
        response = self._send("POST", self._url(config, query), json=body, headers=headers)
        return self._decode(response)

    def get_binary(self, config: ApiConfig, params: Mapping[str, str]) -> BinaryResponse:
        """Issue a GET request and return the raw body with its status and type."""
        response = self._get(config, params)
        return BinaryResponse(
            status_code=response.status_code,
            content_type=response.headers.get("Content-Type", ""),
            data=response.content,
        )