"""Riot API constants and enum definitions."""

from enum import Enum
from typing import Optional

API_HOST_SUFFIX = "api.riotgames.com"

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class Platform(str, Enum):
    """Riot API platforms for platform routing."""

    BR1 = "br1"
    EUN1 = "eun1"
    EUW1 = "euw1"
    JP1 = "jp1"
    KR = "kr"
    LA1 = "la1"
    LA2 = "la2"
    NA1 = "na1"
    OC1 = "oc1"
    PH2 = "ph2"
    RU = "ru"
    SG2 = "sg2"
    TH2 = "th2"
    TR1 = "tr1"
    TW2 = "tw2"
    VN2 = "vn2"

    @property
    def tag(self) -> str:
        """Upper-case platform tag as used in platform ids (e.g. ``NA1``)."""
        return self.value.upper()

    @property
    def host(self) -> str:
        """Routing host for platform endpoints."""
        return f"{self.value}.{API_HOST_SUFFIX}"

    @classmethod
    def from_tag(cls, tag: str) -> Optional["Platform"]:
        """Look up a platform by tag, ignoring case. Returns None if unknown."""
        try:
            return cls(tag.strip().lower())
        except ValueError:
            return None

