"""
Gateway exceptions.

Raised by the gateway itself, before the retrieval pipeline returns anything.
Each class carries the HTTP status it is rendered with.
"""

from typing import Optional


class GatewayError(Exception):
    """Base exception for request errors detected by the gateway itself."""

    status_code: int = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidPlatformError(GatewayError):
    """The platform tag is unknown, or none was given and no default is set."""

    def __init__(self, tag: Optional[str]):
        if tag is None:
            message = "No platform was provided and no default platform is configured!"
        else:
            message = f"{tag} is not a valid platform!"
        super().__init__(message)
        self.tag = tag


class MissingRequiredFieldError(GatewayError):
    """A required query field was null when the descriptor was built."""

    def __init__(self, field: str):
        super().__init__(f"Required query field '{field}' is missing")
        self.field = field


class PipelineUnavailableError(GatewayError):
    """The retrieval pipeline has not been started or was already shut down."""

    status_code = 503

    def __init__(self):
        super().__init__("Retrieval pipeline is not available")
