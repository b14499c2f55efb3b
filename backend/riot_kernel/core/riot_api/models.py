"""Pydantic models for match-v4 response data.

Only the fields the gateway and its clients commonly rely on are declared;
everything else Riot returns is kept as extra data and serialized back
unchanged.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, RootModel


class RiotDTO(BaseModel):
    """Base class for every result type the retrieval pipeline can produce."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")


class PlayerDTO(RiotDTO):
    """Player identity attached to a match participant."""

    account_id: Optional[str] = Field(None, alias="accountId")
    current_account_id: Optional[str] = Field(None, alias="currentAccountId")
    summoner_id: Optional[str] = Field(None, alias="summonerId")
    summoner_name: Optional[str] = Field(None, alias="summonerName")
    platform_id: Optional[str] = Field(None, alias="platformId")
    current_platform_id: Optional[str] = Field(None, alias="currentPlatformId")
    profile_icon: Optional[int] = Field(None, alias="profileIcon")


class ParticipantIdentityDTO(RiotDTO):
    participant_id: int = Field(..., alias="participantId")
    player: Optional[PlayerDTO] = None


class TeamBansDTO(RiotDTO):
    champion_id: int = Field(..., alias="championId")
    pick_turn: int = Field(..., alias="pickTurn")


class TeamStatsDTO(RiotDTO):
    """Team-level outcome of a match."""

    team_id: int = Field(..., alias="teamId")
    win: Optional[str] = None
    first_blood: Optional[bool] = Field(None, alias="firstBlood")
    first_tower: Optional[bool] = Field(None, alias="firstTower")
    tower_kills: Optional[int] = Field(None, alias="towerKills")
    baron_kills: Optional[int] = Field(None, alias="baronKills")
    dragon_kills: Optional[int] = Field(None, alias="dragonKills")
    bans: List[TeamBansDTO] = Field(default_factory=list)


class ParticipantDTO(RiotDTO):
    """Match participant information."""

    participant_id: int = Field(..., alias="participantId")
    team_id: int = Field(..., alias="teamId")
    champion_id: int = Field(..., alias="championId")
    spell1_id: Optional[int] = Field(None, alias="spell1Id")
    spell2_id: Optional[int] = Field(None, alias="spell2Id")
    highest_achieved_season_tier: Optional[str] = Field(
        None, alias="highestAchievedSeasonTier"
    )
    stats: Optional[dict] = None
    timeline: Optional[dict] = None


class MatchDTO(RiotDTO):
    """Complete match data (``/lol/match/v4/matches/{matchId}``)."""

    game_id: int = Field(..., alias="gameId")
    platform_id: str = Field(..., alias="platformId")
    game_creation: int = Field(..., alias="gameCreation")
    game_duration: int = Field(..., alias="gameDuration")
    queue_id: int = Field(..., alias="queueId")
    map_id: int = Field(..., alias="mapId")
    season_id: int = Field(..., alias="seasonId")
    game_version: str = Field(..., alias="gameVersion")
    game_mode: str = Field(..., alias="gameMode")
    game_type: str = Field(..., alias="gameType")
    teams: List[TeamStatsDTO] = Field(default_factory=list)
    participants: List[ParticipantDTO] = Field(default_factory=list)
    participant_identities: List[ParticipantIdentityDTO] = Field(
        default_factory=list, alias="participantIdentities"
    )


class MatchReferenceDTO(RiotDTO):
    """One entry of a matchlist."""

    game_id: int = Field(..., alias="gameId")
    platform_id: str = Field(..., alias="platformId")
    champion: int
    queue: int
    season: int
    timestamp: int
    role: Optional[str] = None
    lane: Optional[str] = None


class MatchlistDTO(RiotDTO):
    """Matchlist for an account (``/lol/match/v4/matchlists/by-account/...``)."""

    matches: List[MatchReferenceDTO] = Field(default_factory=list)
    total_games: int = Field(0, alias="totalGames")
    start_index: int = Field(0, alias="startIndex")
    end_index: int = Field(0, alias="endIndex")


class MatchPositionDTO(RiotDTO):
    x: int
    y: int


class MatchEventDTO(RiotDTO):
    type: str
    timestamp: int
    participant_id: Optional[int] = Field(None, alias="participantId")
    position: Optional[MatchPositionDTO] = None


class MatchFrameDTO(RiotDTO):
    timestamp: int
    participant_frames: dict = Field(default_factory=dict, alias="participantFrames")
    events: List[MatchEventDTO] = Field(default_factory=list)


class MatchTimelineDTO(RiotDTO):
    """Frame-by-frame timeline (``/lol/match/v4/timelines/by-match/{matchId}``)."""

    frame_interval: int = Field(..., alias="frameInterval")
    frames: List[MatchFrameDTO] = Field(default_factory=list)


class TournamentMatchesDTO(RootModel[List[int]]):
    """Match ids played with a tournament code.

    Riot returns a bare JSON array of match ids for this endpoint.
    """

    @property
    def match_ids(self) -> List[int]:
        """Match ids in the order Riot returned them."""
        return list(self.root)
