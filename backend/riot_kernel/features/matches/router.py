"""Match-v4 API endpoints.

Route paths mirror the Riot API path scheme under ``/match/v4``.
"""

from typing import Annotated, Optional, Set

from fastapi import APIRouter, Path, Query
from pydantic import Field

from riot_kernel.core.query import UNSET
from riot_kernel.core.riot_api.constants import INT32_MAX, INT32_MIN, INT64_MAX, INT64_MIN
from riot_kernel.core.riot_api.models import (
    MatchDTO,
    MatchlistDTO,
    MatchTimelineDTO,
    TournamentMatchesDTO,
)

from .dependencies import MatchGatewayDep

Int32 = Annotated[int, Field(ge=INT32_MIN, le=INT32_MAX)]

router = APIRouter(prefix="/match/v4", tags=["match"])

PlatformQuery = Annotated[
    Optional[str],
    Query(
        alias="platform",
        description="Platform tag (e.g. NA1). Uses the default platform if omitted.",
    ),
]
MatchIdPath = Annotated[
    int, Path(ge=INT64_MIN, le=INT64_MAX, description="Match id")
]
TournamentCodePath = Annotated[
    str, Path(description="Tournament code")
]


@router.get(
    "/matches/by-tournament-code/{tournament_code}/ids",
    response_model=TournamentMatchesDTO,
)
async def get_match_ids_by_tournament_code(
    gateway: MatchGatewayDep,
    tournament_code: TournamentCodePath,
    platform: PlatformQuery = None,
):
    """Get match ids by tournament code."""
    return await gateway.get_match_ids_by_tournament_code(platform, tournament_code)


@router.get("/matches/{match_id}", response_model=MatchDTO)
async def get_match(
    gateway: MatchGatewayDep,
    match_id: MatchIdPath,
    platform: PlatformQuery = None,
):
    """Get match by match id."""
    return await gateway.get_match(platform, match_id)


@router.get(
    "/matches/{match_id}/by-tournament-code/{tournament_code}",
    response_model=MatchDTO,
)
async def get_match_by_tournament_code(
    gateway: MatchGatewayDep,
    match_id: MatchIdPath,
    tournament_code: TournamentCodePath,
    platform: PlatformQuery = None,
):
    """Get match by match id and tournament code."""
    return await gateway.get_match_by_tournament_code(
        platform, match_id, tournament_code
    )


@router.get("/matchlists/by-account/{account_id}", response_model=MatchlistDTO)
async def get_matchlist(
    gateway: MatchGatewayDep,
    account_id: Annotated[str, Path(description="Encrypted account id")],
    platform: PlatformQuery = None,
    queue: Annotated[Optional[Set[Int32]], Query(description="Queue ids")] = None,
    end_time: Annotated[
        int,
        Query(alias="endTime", ge=INT64_MIN, le=INT64_MAX, description="Latest game time (epoch ms)"),
    ] = UNSET,
    begin_index: Annotated[
        int,
        Query(alias="beginIndex", ge=INT32_MIN, le=INT32_MAX, description="First result index"),
    ] = UNSET,
    begin_time: Annotated[
        int,
        Query(alias="beginTime", ge=INT64_MIN, le=INT64_MAX, description="Earliest game time (epoch ms)"),
    ] = UNSET,
    season: Annotated[Optional[Set[Int32]], Query(description="Season ids")] = None,
    champion: Annotated[Optional[Set[Int32]], Query(description="Champion ids")] = None,
    end_index: Annotated[
        int,
        Query(alias="endIndex", ge=INT32_MIN, le=INT32_MAX, description="Index after the last result"),
    ] = UNSET,
):
    """
    Get matchlist for an account.

    Every filter is optional. ``queue``, ``season`` and ``champion`` may be
    repeated, e.g. ``?queue=400&queue=420``.
    """
    return await gateway.get_matchlist(
        platform,
        account_id,
        queue=queue,
        end_time=end_time,
        begin_index=begin_index,
        begin_time=begin_time,
        season=season,
        champion=champion,
        end_index=end_index,
    )


@router.get("/timelines/by-match/{match_id}", response_model=MatchTimelineDTO)
async def get_match_timeline(
    gateway: MatchGatewayDep,
    match_id: MatchIdPath,
    platform: PlatformQuery = None,
):
    """Get match timeline by match id."""
    return await gateway.get_match_timeline(platform, match_id)
