"""Transport abstraction and the default requests-based HTTP implementation.

The client only sees Transport.request(); anything that turns (body, endpoint, method)
into response bytes, or raises TransportError, can stand in for HttpTransport.

HttpTransport uses a persistent requests.Session with connection pooling so that
repeated calls from one process reuse connections to the API host.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Literal

import requests

from clarifai_v1.core.config import Settings
from clarifai_v1.core.exceptions import TransportError

_log = logging.getLogger(__name__)

Method = Literal["GET", "POST"]


class Transport(ABC):
    """Performs one request against a named API endpoint and returns the raw body."""

    @abstractmethod
    def request(
        self,
        body: dict[str, Any] | None,
        endpoint: str,
        method: Method,
        multipart: bool = False,
    ) -> bytes:
        """Send body to endpoint; return response bytes or raise TransportError."""
        ...


def _form_fields(body: dict[str, Any]) -> list[tuple[str, tuple[None, str]]]:
    """Flatten a payload into multipart form fields; list values become repeated fields."""
    fields: list[tuple[str, tuple[None, str]]] = []
    for key, value in body.items():
        values = value if isinstance(value, (list, tuple)) else [value]
        for v in values:
            fields.append((key, (None, str(v))))
    return fields


class HttpTransport(Transport):
    """
    Transport that talks to the Clarifai v1 HTTP API.

    The access token, if given, is sent as a bearer token on every request; obtaining
    and refreshing it is the caller's business.
    """

    def __init__(
        self,
        api_root: str,
        access_token: str | None = None,
        timeout: float = 120.0,
        session: requests.Session | None = None,
    ) -> None:
        self._api_root = api_root.rstrip("/")
        self._access_token = access_token
        self._timeout = timeout
        if session is None:
            session = requests.Session()
            adapter = requests.adapters.HTTPAdapter(pool_connections=10, pool_maxsize=20)
            session.mount("http://", adapter)
            session.mount("https://", adapter)
        self._session = session

    @classmethod
    def from_settings(cls, settings: Settings) -> "HttpTransport":
        return cls(
            api_root=settings.api_root,
            access_token=settings.access_token,
            timeout=settings.timeout_seconds,
        )

    def url_for(self, endpoint: str) -> str:
        """v1 endpoints are addressed with a trailing slash, e.g. /v1/tag/."""
        return f"{self._api_root}/{endpoint.strip('/')}/"

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if self._access_token:
            headers["Authorization"] = f"Bearer {self._access_token}"
        return headers

    def request(
        self,
        body: dict[str, Any] | None,
        endpoint: str,
        method: Method,
        multipart: bool = False,
    ) -> bytes:
        url = self.url_for(endpoint)
        kwargs: dict[str, Any] = {"headers": self._headers(), "timeout": self._timeout}
        if body is not None and method != "GET":
            if multipart:
                kwargs["files"] = _form_fields(body)
            else:
                kwargs["json"] = body

        try:
            resp = self._session.request(method, url, **kwargs)
        except requests.RequestException as e:
            _log.warning("%s %s failed: %s", method, url, e)
            raise TransportError(endpoint, str(e)) from e

        if resp.status_code >= 400:
            _log.warning("%s %s returned HTTP %s", method, url, resp.status_code)
            raise TransportError(endpoint, resp.reason or "HTTP error", status_code=resp.status_code)
        return resp.content

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> "HttpTransport":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
