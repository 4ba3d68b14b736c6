"""
Exceptions raised by the Clarifai client.

Application-level failures reported by the service (a non-OK status_code in a
response envelope) are not exceptions; callers inspect the envelope.
"""


class ClarifaiError(Exception):
    """Base exception for client errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class ValidationError(ClarifaiError):
    """Raised when a request fails a precondition before it is sent."""


class TransportError(ClarifaiError):
    """Raised when the HTTP exchange with the service fails."""

    def __init__(self, endpoint: str, reason: str, status_code: int | None = None):
        self.endpoint = endpoint
        self.reason = reason
        self.status_code = status_code
        if status_code is not None:
            message = f"Request to '{endpoint}' failed with HTTP {status_code}: {reason}"
        else:
            message = f"Request to '{endpoint}' failed: {reason}"
        super().__init__(message)


class DecodingError(ClarifaiError):
    """Raised when response bytes do not match the expected envelope."""

    def __init__(self, endpoint: str, reason: str):
        self.endpoint = endpoint
        self.reason = reason
        message = f"Could not decode '{endpoint}' response: {reason}"
        super().__init__(message)
