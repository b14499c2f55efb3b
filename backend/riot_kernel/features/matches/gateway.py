"""Dispatch gateway for the Riot match-v4 endpoints.

Each operation resolves the platform, builds a query descriptor from the
endpoint's declared fields and asks the retrieval pipeline for exactly one
result type. Results and pipeline errors are passed through unchanged.
"""

from typing import AbstractSet, Optional, Type

import structlog

from riot_kernel.core.platforms import PlatformResolver
from riot_kernel.core.query import (
    UNSET,
    OptionalField,
    QueryDescriptor,
    build_query,
    is_missing,
    is_unset,
)
from riot_kernel.core.riot_api.models import (
    MatchDTO,
    MatchlistDTO,
    MatchTimelineDTO,
    TournamentMatchesDTO,
)
from riot_kernel.core.riot_api.pipeline import DataPipeline, ResultT

logger = structlog.get_logger(__name__)


class MatchGateway:
    """Gateway from match-v4 requests to the retrieval pipeline.

    The gateway never caches, retries or rate-limits; the pipeline does.
    """

    def __init__(self, resolver: PlatformResolver, pipeline: DataPipeline):
        """Initialize gateway.

        :param resolver: Platform resolver (registry + default platform)
        :param pipeline: Retrieval pipeline
        """
        self.resolver = resolver
        self.pipeline = pipeline

    async def _dispatch(
        self, result_type: Type[ResultT], query: QueryDescriptor
    ) -> ResultT:
        logger.debug(
            "Dispatching match query",
            result_type=result_type.__name__,
            fields=list(query),
        )
        return await self.pipeline.fetch(result_type, query)

    async def get_match(self, platform_tag: Optional[str], match_id: int) -> MatchDTO:
        """Get a match by id.

        :raises InvalidPlatformError: If the platform cannot be resolved
        :raises RiotAPIError: Propagated from the pipeline
        """
        platform = self.resolver.resolve(platform_tag)
        query = build_query({"platform": platform, "matchId": match_id})
        return await self._dispatch(MatchDTO, query)

    async def get_match_by_tournament_code(
        self, platform_tag: Optional[str], match_id: int, tournament_code: str
    ) -> MatchDTO:
        """Get a match by id, scoped to a tournament code."""
        platform = self.resolver.resolve(platform_tag)
        query = build_query(
            {
                "platform": platform,
                "matchId": match_id,
                "tournamentCode": tournament_code,
            }
        )
        return await self._dispatch(MatchDTO, query)

    async def get_match_ids_by_tournament_code(
        self, platform_tag: Optional[str], tournament_code: str
    ) -> TournamentMatchesDTO:
        """Get the ids of the matches played with a tournament code."""
        platform = self.resolver.resolve(platform_tag)
        query = build_query({"platform": platform, "tournamentCode": tournament_code})
        return await self._dispatch(TournamentMatchesDTO, query)

    async def get_matchlist(
        self,
        platform_tag: Optional[str],
        account_id: str,
        queue: Optional[AbstractSet[int]] = None,
        end_time: int = UNSET,
        begin_index: int = UNSET,
        begin_time: int = UNSET,
        season: Optional[AbstractSet[int]] = None,
        champion: Optional[AbstractSet[int]] = None,
        end_index: int = UNSET,
    ) -> MatchlistDTO:
        """Get the matchlist of an account.

        Every filter is independent. Integer filters equal to ``UNSET`` and
        collection filters that are None are left out of the query; an empty
        collection is kept and matches nothing.

        :param platform_tag: Platform tag, or None for the default platform
        :param account_id: Encrypted account id
        :param queue: Queue ids
        :param end_time: Latest game timestamp (epoch milliseconds)
        :param begin_index: Index of the first result
        :param begin_time: Earliest game timestamp (epoch milliseconds)
        :param season: Season ids
        :param champion: Champion ids
        :param end_index: Index after the last result
        :returns: Matchlist from the pipeline
        """
        platform = self.resolver.resolve(platform_tag)
        query = build_query(
            {"platform": platform, "accountId": account_id},
            [
                OptionalField("queues", queue, is_missing),
                OptionalField("endTime", end_time, is_unset),
                OptionalField("beginIndex", begin_index, is_unset),
                OptionalField("beginTime", begin_time, is_unset),
                OptionalField("seasons", season, is_missing),
                OptionalField("champions", champion, is_missing),
                OptionalField("endIndex", end_index, is_unset),
            ],
        )
        return await self._dispatch(MatchlistDTO, query)

    async def get_match_timeline(
        self, platform_tag: Optional[str], match_id: int
    ) -> MatchTimelineDTO:
        """Get the timeline of a match."""
        platform = self.resolver.resolve(platform_tag)
        query = build_query({"platform": platform, "matchId": match_id})
        return await self._dispatch(MatchTimelineDTO, query)
