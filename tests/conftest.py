"""Pytest fixtures: a recording stub transport and config isolation."""

import json

import pytest

from clarifai_v1.api.client import ClarifaiClient
from clarifai_v1.api.transport import Transport
from clarifai_v1.core import config as config_module


class StubTransport(Transport):
    """
    Transport that records each call and replies from a queue.

    Queue entries may be bytes, a dict (JSON-encoded on the way out), or an exception to raise.
    """

    def __init__(self, *responses) -> None:
        self.calls: list[dict] = []
        self._responses = list(responses)

    def queue(self, response) -> None:
        self._responses.append(response)

    def request(self, body, endpoint, method, multipart=False):
        self.calls.append(
            {"body": body, "endpoint": endpoint, "method": method, "multipart": multipart}
        )
        if not self._responses:
            raise AssertionError(f"unexpected transport call to {endpoint}")
        response = self._responses.pop(0)
        if isinstance(response, BaseException):
            raise response
        if isinstance(response, dict):
            return json.dumps(response).encode()
        return response


@pytest.fixture
def stub_transport():
    return StubTransport()


@pytest.fixture
def client(stub_transport):
    return ClarifaiClient(stub_transport)


@pytest.fixture(autouse=True)
def _reset_cached_config():
    """Keep the get_config() singleton from leaking between tests."""
    config_module._config = None  # type: ignore[attr-defined]
    yield
    config_module._config = None  # type: ignore[attr-defined]
