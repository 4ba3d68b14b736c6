"""API module: wire contracts, validation, transport and the client façade."""

from clarifai_v1.api.client import ClarifaiClient, decode_envelope
from clarifai_v1.api.schema import (
    Color,
    ColorRequest,
    ColorResp,
    ColorResult,
    FeedbackForm,
    FeedbackResp,
    InfoResp,
    ServiceInfo,
    TagOutcome,
    TagRequest,
    TagResp,
    TagResult,
    W3CColor,
)
from clarifai_v1.api.transport import HttpTransport, Transport

__all__ = [
    "ClarifaiClient",
    "Color",
    "ColorRequest",
    "ColorResp",
    "ColorResult",
    "FeedbackForm",
    "FeedbackResp",
    "HttpTransport",
    "InfoResp",
    "ServiceInfo",
    "TagOutcome",
    "TagRequest",
    "TagResp",
    "TagResult",
    "Transport",
    "W3CColor",
    "decode_envelope",
]
