"""Shared fixtures for the match gateway tests."""

import pytest

from riot_kernel.core.platforms import PlatformRegistry, PlatformResolver
from riot_kernel.core.riot_api.constants import Platform


@pytest.fixture
def registry():
    """Registry with NA1 as the default platform."""
    return PlatformRegistry(default=Platform.NA1)


@pytest.fixture
def resolver(registry):
    return PlatformResolver(registry)


@pytest.fixture
def sample_match_data():
    """Sample match-v4 payload."""
    return {
        "gameId": 3012345678,
        "platformId": "NA1",
        "gameCreation": 1560000000000,
        "gameDuration": 1800,
        "queueId": 420,
        "mapId": 11,
        "seasonId": 13,
        "gameVersion": "9.12.276.4303",
        "gameMode": "CLASSIC",
        "gameType": "MATCHED_GAME",
        "teams": [
            {
                "teamId": 100,
                "win": "Win",
                "firstBlood": True,
                "towerKills": 9,
                "bans": [{"championId": 157, "pickTurn": 1}],
            },
            {"teamId": 200, "win": "Fail", "towerKills": 2, "bans": []},
        ],
        "participants": [
            {
                "participantId": 1,
                "teamId": 100,
                "championId": 238,
                "spell1Id": 4,
                "spell2Id": 14,
                "stats": {"kills": 12, "deaths": 2, "assists": 6, "win": True},
            }
        ],
        "participantIdentities": [
            {
                "participantId": 1,
                "player": {
                    "accountId": "ABC",
                    "summonerName": "TestPlayer",
                    "platformId": "NA1",
                },
            }
        ],
    }


@pytest.fixture
def sample_matchlist_data():
    """Sample matchlist payload."""
    return {
        "matches": [
            {
                "gameId": 3012345678,
                "platformId": "NA1",
                "champion": 238,
                "queue": 420,
                "season": 13,
                "timestamp": 1560000000000,
                "role": "SOLO",
                "lane": "MID",
            }
        ],
        "totalGames": 1,
        "startIndex": 5,
        "endIndex": 6,
    }


@pytest.fixture
def sample_timeline_data():
    """Sample timeline payload."""
    return {
        "frameInterval": 60000,
        "frames": [
            {
                "timestamp": 0,
                "participantFrames": {"1": {"participantId": 1, "totalGold": 500}},
                "events": [],
            },
            {
                "timestamp": 60000,
                "participantFrames": {},
                "events": [
                    {
                        "type": "ITEM_PURCHASED",
                        "timestamp": 2345,
                        "participantId": 1,
                        "itemId": 1055,
                    }
                ],
            },
        ],
    }
