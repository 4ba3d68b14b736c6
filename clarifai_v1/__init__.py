"""Client library for the Clarifai v1 image recognition API."""

import logging

from clarifai_v1.api import (
    ClarifaiClient,
    Color,
    ColorRequest,
    ColorResp,
    ColorResult,
    FeedbackForm,
    FeedbackResp,
    HttpTransport,
    InfoResp,
    ServiceInfo,
    TagOutcome,
    TagRequest,
    TagResp,
    TagResult,
    Transport,
    W3CColor,
)
from clarifai_v1.core.exceptions import ClarifaiError, DecodingError, TransportError, ValidationError

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ClarifaiClient",
    "ClarifaiError",
    "Color",
    "ColorRequest",
    "ColorResp",
    "ColorResult",
    "DecodingError",
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
    "TransportError",
    "ValidationError",
    "W3CColor",
]
