"""
Tests for the Riot API retrieval pipeline.
"""

from unittest.mock import AsyncMock

import httpx
import pytest

from riot_kernel.core.query import QueryDescriptor
from riot_kernel.core.riot_api.cache import TTLCache
from riot_kernel.core.riot_api.client import RiotAPIClient
from riot_kernel.core.riot_api.constants import Platform
from riot_kernel.core.riot_api.errors import DecodeError, NotFoundError
from riot_kernel.core.riot_api.models import (
    MatchDTO,
    MatchlistDTO,
    MatchTimelineDTO,
    TournamentMatchesDTO,
)
from riot_kernel.core.riot_api.pipeline import RiotAPIPipeline
from riot_kernel.core.riot_api.rate_limiter import RateLimiter

MATCH_QUERY = QueryDescriptor([("platform", Platform.NA1), ("matchId", 3012345678)])


@pytest.fixture
def mock_client():
    return AsyncMock(spec=RiotAPIClient)


@pytest.fixture
def pipeline(mock_client):
    return RiotAPIPipeline(mock_client, cache=TTLCache(ttl=60))


async def test_fetch_match(pipeline, mock_client, sample_match_data):
    mock_client.get.return_value = sample_match_data

    match = await pipeline.fetch(MatchDTO, MATCH_QUERY)

    assert isinstance(match, MatchDTO)
    assert match.game_id == 3012345678
    assert match.participants[0].stats["kills"] == 12
    mock_client.get.assert_awaited_once_with(
        "https://na1.api.riotgames.com/lol/match/v4/matches/3012345678", params=[]
    )


async def test_fetch_keeps_unknown_fields(pipeline, mock_client, sample_match_data):
    mock_client.get.return_value = {**sample_match_data, "newRiotField": "x"}

    match = await pipeline.fetch(MatchDTO, MATCH_QUERY)

    assert match.model_dump(by_alias=True)["newRiotField"] == "x"


async def test_fetch_is_cached(pipeline, mock_client, sample_match_data):
    mock_client.get.return_value = sample_match_data

    first = await pipeline.fetch(MatchDTO, MATCH_QUERY)
    second = await pipeline.fetch(
        MatchDTO, QueryDescriptor([("platform", Platform.NA1), ("matchId", 3012345678)])
    )

    assert first is second
    mock_client.get.assert_awaited_once()


async def test_cache_key_includes_result_type(
    pipeline, mock_client, sample_match_data, sample_timeline_data
):
    mock_client.get.side_effect = [sample_match_data, sample_timeline_data]

    await pipeline.fetch(MatchDTO, MATCH_QUERY)
    timeline = await pipeline.fetch(MatchTimelineDTO, MATCH_QUERY)

    assert isinstance(timeline, MatchTimelineDTO)
    assert timeline.frames[1].events[0].type == "ITEM_PURCHASED"
    assert mock_client.get.await_count == 2


async def test_fetch_tournament_matches(pipeline, mock_client):
    mock_client.get.return_value = [1, 2, 3]
    query = QueryDescriptor([("platform", Platform.NA1), ("tournamentCode", "CODE")])

    result = await pipeline.fetch(TournamentMatchesDTO, query)

    assert result.match_ids == [1, 2, 3]


async def test_invalid_payload_is_decode_error(pipeline, mock_client):
    mock_client.get.return_value = {"gameId": "not-a-number"}

    with pytest.raises(DecodeError):
        await pipeline.fetch(MatchDTO, MATCH_QUERY)


async def test_client_errors_propagate(pipeline, mock_client):
    mock_client.get.side_effect = NotFoundError("Resource not found", status_code=404)

    with pytest.raises(NotFoundError):
        await pipeline.fetch(MatchDTO, MATCH_QUERY)


async def test_empty_filter_matches_nothing(pipeline, mock_client):
    query = QueryDescriptor(
        [
            ("platform", Platform.NA1),
            ("accountId", "ABC"),
            ("queues", frozenset()),
            ("beginIndex", 5),
        ]
    )

    result = await pipeline.fetch(MatchlistDTO, query)

    assert result.matches == []
    assert result.total_games == 0
    assert result.start_index == 5
    mock_client.get.assert_not_awaited()


async def test_matchlist_with_filters(pipeline, mock_client, sample_matchlist_data):
    mock_client.get.return_value = sample_matchlist_data
    query = QueryDescriptor(
        [
            ("platform", Platform.NA1),
            ("accountId", "ABC"),
            ("queues", frozenset({400, 420})),
            ("beginIndex", 5),
        ]
    )

    result = await pipeline.fetch(MatchlistDTO, query)

    assert result.total_games == 1
    mock_client.get.assert_awaited_once_with(
        "https://na1.api.riotgames.com/lol/match/v4/matchlists/by-account/ABC",
        params=[("queue", 400), ("queue", 420), ("beginIndex", 5)],
    )


async def test_tournament_code_cannot_change_the_upstream_resource():
    seen = []

    def handler(request):
        seen.append(request.url.raw_path)
        return httpx.Response(200, json=[3012345678])

    client = RiotAPIClient(
        api_key="RGAPI-test",
        rate_limiter=RateLimiter(request_spacing=0),
        transport=httpx.MockTransport(handler),
    )
    query = QueryDescriptor(
        [("platform", Platform.NA1), ("tournamentCode", "CODE?injected=1#")]
    )

    async with client:
        result = await RiotAPIPipeline(client).fetch(TournamentMatchesDTO, query)

    assert result.match_ids == [3012345678]
    assert seen == [
        b"/lol/match/v4/matches/by-tournament-code/CODE%3Finjected%3D1%23/ids"
    ]
