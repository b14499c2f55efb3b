"""Core infrastructure module.

This module exports core utilities used across features.
Never imports from features - only from external libraries.
"""

from .config import Settings, get_settings, get_global_settings
from .exceptions import (
    GatewayError,
    InvalidPlatformError,
    MissingRequiredFieldError,
    PipelineUnavailableError,
)
from .platforms import PlatformRegistry, PlatformResolver
from .query import (
    UNSET,
    OptionalField,
    QueryDescriptor,
    build_query,
    is_missing,
    is_unset,
)

__all__ = [
    # Config
    "Settings",
    "get_settings",
    "get_global_settings",
    # Exceptions
    "GatewayError",
    "InvalidPlatformError",
    "MissingRequiredFieldError",
    "PipelineUnavailableError",
    # Platforms
    "PlatformRegistry",
    "PlatformResolver",
    # Query descriptors
    "UNSET",
    "OptionalField",
    "QueryDescriptor",
    "build_query",
    "is_missing",
    "is_unset",
]
