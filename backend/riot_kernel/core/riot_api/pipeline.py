"""Retrieval pipeline contract and its Riot API implementation.

The match gateway only depends on ``DataPipeline``. ``RiotAPIPipeline`` is the
implementation wired into the application: response cache in front of the
rate-limited HTTP client, with payloads validated into the requested result
type.
"""

from typing import Optional, Protocol, Type, TypeVar

import structlog
from pydantic import ValidationError

from ..query import QueryDescriptor
from .cache import TTLCache
from .client import RiotAPIClient
from .endpoints import RiotAPIEndpoints
from .errors import DecodeError
from .models import MatchDTO, MatchlistDTO, MatchTimelineDTO, TournamentMatchesDTO

logger = structlog.get_logger(__name__)

# Closed set of result types a pipeline can be asked for.
ResultT = TypeVar(
    "ResultT", MatchDTO, MatchlistDTO, MatchTimelineDTO, TournamentMatchesDTO
)

MATCHLIST_FILTERS = ("queues", "seasons", "champions")


class DataPipeline(Protocol):
    """Fetches one typed result for a query descriptor.

    Implementations own caching, rate limiting, retries and transport, and
    raise ``RiotAPIError`` subclasses on failure.
    """

    async def fetch(self, result_type: Type[ResultT], query: QueryDescriptor) -> ResultT:
        ...


class RiotAPIPipeline:
    """Cache, then the Riot API."""

    def __init__(
        self,
        client: RiotAPIClient,
        cache: Optional[TTLCache] = None,
        endpoints: Optional[RiotAPIEndpoints] = None,
    ):
        self.client = client
        self.cache = cache or TTLCache()
        self.endpoints = endpoints or RiotAPIEndpoints()

    async def fetch(self, result_type: Type[ResultT], query: QueryDescriptor) -> ResultT:
        """
        Fetch a typed result.

        :param result_type: Result DTO class to produce
        :param query: Query descriptor
        :returns: Validated result
        :raises RiotAPIError: If the request fails or the payload is invalid
        """
        cache_key = (result_type.__name__, query)
        cached = self.cache.get(cache_key)
        if cached is not None:
            logger.debug("Pipeline cache hit", result_type=result_type.__name__)
            return cached

        if result_type is MatchlistDTO and self._has_empty_filter(query):
            # An empty filter set matches nothing and cannot be sent to Riot.
            return MatchlistDTO(
                matches=[],
                totalGames=0,
                startIndex=query.get("beginIndex", 0),
                endIndex=query.get("beginIndex", 0),
            )

        url, params = self.endpoints.resolve(result_type, query)
        payload = await self.client.get(url, params=params)

        try:
            result = result_type.model_validate(payload)
        except ValidationError as e:
            logger.warning(
                "Riot API payload failed validation",
                result_type=result_type.__name__,
                url=url,
                errors=e.error_count(),
            )
            raise DecodeError(
                f"Response from {url} is not a valid {result_type.__name__}"
            ) from e

        self.cache.set(cache_key, result)
        return result

    @staticmethod
    def _has_empty_filter(query: QueryDescriptor) -> bool:
        return any(
            field in query and len(query[field]) == 0 for field in MATCHLIST_FILTERS
        )
