"""Riot match-v4 endpoint definitions and rate-limit header parsing."""

from typing import Any, Dict, List, Tuple, Type
from urllib.parse import quote

import structlog

from ..query import QueryDescriptor
from .constants import Platform
from .models import MatchDTO, MatchlistDTO, MatchTimelineDTO, TournamentMatchesDTO

logger = structlog.get_logger(__name__)

MATCH_V4 = "/lol/match/v4"

# Descriptor field name -> matchlist query parameter name
MATCHLIST_PARAMS = (
    ("queues", "queue"),
    ("endTime", "endTime"),
    ("beginIndex", "beginIndex"),
    ("beginTime", "beginTime"),
    ("seasons", "season"),
    ("champions", "champion"),
    ("endIndex", "endIndex"),
)

Params = List[Tuple[str, Any]]


def path_segment(value: Any) -> str:
    """Percent-encode a value for use as a single URL path segment."""
    return quote(str(value), safe="")


class RiotAPIEndpoints:
    """Maps a (result type, query descriptor) pair onto a match-v4 request."""

    def get_platform_url(self, platform: Platform) -> str:
        """Get base URL for platform endpoints."""
        return f"https://{platform.host}"

    def match(self, query: QueryDescriptor) -> str:
        base_url = self.get_platform_url(query["platform"])
        match_id = path_segment(query["matchId"])
        if "tournamentCode" in query:
            code = path_segment(query["tournamentCode"])
            return f"{base_url}{MATCH_V4}/matches/{match_id}/by-tournament-code/{code}"
        return f"{base_url}{MATCH_V4}/matches/{match_id}"

    def match_ids_by_tournament_code(self, query: QueryDescriptor) -> str:
        base_url = self.get_platform_url(query["platform"])
        code = path_segment(query["tournamentCode"])
        return f"{base_url}{MATCH_V4}/matches/by-tournament-code/{code}/ids"

    def matchlist(self, query: QueryDescriptor) -> Tuple[str, Params]:
        """Matchlist URL plus its filter parameters, collections repeated."""
        base_url = self.get_platform_url(query["platform"])
        account_id = path_segment(query["accountId"])
        url = f"{base_url}{MATCH_V4}/matchlists/by-account/{account_id}"

        params: Params = []
        for field, param in MATCHLIST_PARAMS:
            if field not in query:
                continue
            value = query[field]
            if isinstance(value, frozenset):
                params.extend((param, item) for item in sorted(value))
            else:
                params.append((param, value))
        return url, params

    def match_timeline(self, query: QueryDescriptor) -> str:
        base_url = self.get_platform_url(query["platform"])
        match_id = path_segment(query["matchId"])
        return f"{base_url}{MATCH_V4}/timelines/by-match/{match_id}"

    def resolve(self, result_type: Type[Any], query: QueryDescriptor) -> Tuple[str, Params]:
        """
        Resolve the request for a result type.

        :param result_type: One of the match-v4 result DTOs
        :param query: Query descriptor built by the gateway
        :returns: Tuple of (url, query params)
        :raises ValueError: If the result type is not a match-v4 result
        """
        if result_type is MatchDTO:
            return self.match(query), []
        if result_type is TournamentMatchesDTO:
            return self.match_ids_by_tournament_code(query), []
        if result_type is MatchlistDTO:
            return self.matchlist(query)
        if result_type is MatchTimelineDTO:
            return self.match_timeline(query), []
        raise ValueError(f"Unsupported result type: {result_type.__name__}")


def parse_rate_limit_header(header_value: str) -> List[Dict[str, int]]:
    """
    Parse rate limit header value.

    Example: "20:1,100:120" -> [{"requests": 20, "window": 1}, {"requests": 100, "window": 120}]

    Args:
        header_value: Rate limit or rate count header value

    Returns:
        List of rate limit dictionaries
    """
    if not header_value:
        return []

    limits: list[dict[str, int]] = []
    for part in header_value.split(","):
        try:
            requests, window = map(int, part.strip().split(":"))
            limits.append({"requests": requests, "window": window})
        except (ValueError, AttributeError):
            logger.warning(
                "Failed to parse rate limit part", part=part, header=header_value
            )
            continue

    return limits
