"""Clarifai v1 client: one method per API operation.

Each call validates the request, hands it to the transport, and decodes the response
bytes into the matching envelope. A non-OK status_code in the envelope is returned to
the caller as-is; only validation, transport and decoding failures raise.
"""

import json
import logging
from typing import Any, TypeVar

from pydantic import ValidationError as PydanticValidationError

from clarifai_v1.api.schema import (
    ColorRequest,
    ColorResp,
    Envelope,
    FeedbackForm,
    FeedbackResp,
    InfoResp,
    TagRequest,
    TagResp,
)
from clarifai_v1.api.transport import HttpTransport, Method, Transport
from clarifai_v1.api.validators import (
    validate_color_request,
    validate_feedback_form,
    validate_tag_request,
)
from clarifai_v1.core.config import Settings, get_config
from clarifai_v1.core.exceptions import DecodingError

_log = logging.getLogger(__name__)

E = TypeVar("E", bound=Envelope)


def decode_envelope(raw: bytes | str, envelope: type[E], endpoint: str) -> E:
    """
    Parse response bytes into envelope.

    The standard json decoder is used so integers of any size come through intact
    (docid values can exceed 64 bits). An integer past the interpreter's digit limit
    for int conversion makes the payload undecodable. Unknown keys are ignored by the models.
    """
    try:
        data = json.loads(raw)
    except (TypeError, ValueError) as e:
        raise DecodingError(endpoint, f"invalid JSON: {e}") from e
    if not isinstance(data, dict):
        raise DecodingError(endpoint, f"expected a JSON object, got {type(data).__name__}")
    try:
        return envelope.model_validate(data)
    except PydanticValidationError as e:
        raise DecodingError(endpoint, str(e)) from e


class ClarifaiClient:
    """Stateless façade over a Transport; safe to share if the transport is."""

    def __init__(self, transport: Transport) -> None:
        self._transport = transport

    @classmethod
    def from_config(cls, settings: Settings | None = None) -> "ClarifaiClient":
        """Build a client backed by HttpTransport, using get_config() when settings is None."""
        if settings is None:
            settings = get_config()
        return cls(HttpTransport.from_settings(settings))

    @property
    def transport(self) -> Transport:
        return self._transport

    def _call(self, body: dict[str, Any] | None, endpoint: str, method: Method, envelope: type[E]) -> E:
        _log.debug("%s %s", method, endpoint)
        raw = self._transport.request(body, endpoint, method, multipart=False)
        resp = decode_envelope(raw, envelope, endpoint)
        if not resp.ok:
            _log.debug("%s returned status %s: %s", endpoint, resp.status_code, resp.status_message)
        return resp

    def info(self) -> InfoResp:
        """Return service limits and defaults; see InfoResp.results."""
        return self._call(None, "info", "GET", InfoResp)

    def tag(self, req: TagRequest) -> TagResp:
        """Request tags for one or more image URLs."""
        validate_tag_request(req)
        return self._call(req.to_payload(), "tag", "POST", TagResp)

    def color(self, req: ColorRequest) -> ColorResp:
        """Request dominant colours for one or more image URLs."""
        validate_color_request(req)
        return self._call(req.to_payload(), "color", "POST", ColorResp)

    def feedback(self, form: FeedbackForm) -> FeedbackResp:
        """Send tag corrections and similarity signals for earlier results."""
        validate_feedback_form(form)
        return self._call(form.to_payload(), "feedback", "POST", FeedbackResp)
