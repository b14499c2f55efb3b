"""
Riot API retrieval pipeline for the match-v4 endpoints.

This package provides the pipeline contract used by the gateway and an HTTP
implementation with caching, rate limiting and error classification.
"""

from .client import RiotAPIClient
from .constants import Platform
from .errors import (
    RiotAPIError,
    RateLimitError,
    AuthenticationError,
    ForbiddenError,
    NotFoundError,
    BadRequestError,
    ServiceUnavailableError,
    DecodeError,
)
from .models import (
    MatchDTO,
    MatchlistDTO,
    MatchTimelineDTO,
    TournamentMatchesDTO,
)
from .pipeline import DataPipeline, RiotAPIPipeline

__all__ = [
    "RiotAPIClient",
    "Platform",
    "RiotAPIError",
    "RateLimitError",
    "AuthenticationError",
    "ForbiddenError",
    "NotFoundError",
    "BadRequestError",
    "ServiceUnavailableError",
    "DecodeError",
    "MatchDTO",
    "MatchlistDTO",
    "MatchTimelineDTO",
    "TournamentMatchesDTO",
    "DataPipeline",
    "RiotAPIPipeline",
]
