from clarifai_v1.core.config import Settings, get_config
from clarifai_v1.core.exceptions import ClarifaiError, DecodingError, TransportError, ValidationError
from clarifai_v1.core.logging import setup_logging

__all__ = [
    "ClarifaiError",
    "DecodingError",
    "Settings",
    "TransportError",
    "ValidationError",
    "get_config",
    "setup_logging",
]
