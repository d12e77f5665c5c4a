"""
Constants and lookup tables for Battle.net API requests
"""

from enum import Enum
from typing import Dict, Iterable


# ============================================================================
# REGIONS
# ============================================================================

class Region(str, Enum):
    """Battle.net API region."""

    US = "us"
    EU = "eu"
    KR = "kr"
    TW = "tw"
    CN = "cn"

    @property
    def api_uri(self) -> str:
        """Root of the REST API for this region."""
        if self is Region.CN:
            return "https://gateway.battlenet.com.cn"
        return f"https://{self.value}.api.blizzard.com"

    @property
    def oauth_uri(self) -> str:
        if self is Region.CN:
            return "https://www.battlenet.com.cn/oauth"
        return f"https://{self.value}.battle.net/oauth"

    @property
    def authorize_uri(self) -> str:
        return f"{self.oauth_uri}/authorize"

    @property
    def token_uri(self) -> str:
        return f"{self.oauth_uri}/token"

    @property
    def check_token_uri(self) -> str:
        return f"{self.oauth_uri}/check_token"


class Locale(str, Enum):
    """Locales accepted by the ``locale`` query parameter."""

    EN_US = "en_US"
    ES_MX = "es_MX"
    PT_BR = "pt_BR"
    DE_DE = "de_DE"
    EN_GB = "en_GB"
    ES_ES = "es_ES"
    FR_FR = "fr_FR"
    IT_IT = "it_IT"
    RU_RU = "ru_RU"
    KO_KR = "ko_KR"
    ZH_TW = "zh_TW"
    ZH_CN = "zh_CN"


# ============================================================================
# NAMESPACES
# ============================================================================

NAMESPACE_HEADER = "Battlenet-Namespace"


class Namespace(str, Enum):
    """Namespace partition for game data and profile calls."""

    STATIC = "static"
    DYNAMIC = "dynamic"
    PROFILE = "profile"

    def header_value(self, region: Region) -> str:
        """Value of the namespace header, e.g. ``dynamic-us``."""
        return f"{self.value}-{Region(region).value}"


# ============================================================================
# OAUTH
# ============================================================================

class Scope(str, Enum):
    """OAuth scopes a user can grant."""

    OPENID = "openid"
    WOW_PROFILE = "wow.profile"
    SC2_PROFILE = "sc2.profile"
    D3_PROFILE = "d3.profile"

    @staticmethod
    def render(scopes: Iterable["Scope"]) -> str:
        """Space separated scope string, in declaration order."""
        requested = {Scope(scope) for scope in scopes}
        return " ".join(scope.value for scope in Scope if scope in requested)


# ============================================================================
# API CLASSIFICATION
# ============================================================================

class APIType(str, Enum):
    """
    Classification of a request by the credential it needs.

    game_data uses the client token, profile the user token, community the
    deprecated API key (or nothing) and oauth the Basic client credentials.
    """

    GAME_DATA = "game_data"
    PROFILE = "profile"
    COMMUNITY = "community"
    OAUTH = "oauth"


class Game(str, Enum):
    """Game family an endpoint belongs to."""

    WOW = "wow"
    SC2 = "sc2"


BASE_PATHS: Dict[Game, Dict[APIType, str]] = {
    Game.WOW: {
        APIType.GAME_DATA: "/data/wow",
        APIType.PROFILE: "/profile/wow",
        APIType.COMMUNITY: "/wow",
    },
    Game.SC2: {
        APIType.GAME_DATA: "/data/sc2",
        APIType.PROFILE: "/sc2",
        APIType.COMMUNITY: "/sc2",
    },
}


def base_path(game: Game, api_type: APIType) -> str:
    """Path prefix for an endpoint of ``game`` classified as ``api_type``."""
    return BASE_PATHS[Game(game)].get(APIType(api_type), "")


# ============================================================================
# HTTP
# ============================================================================

JSON_CONTENT_TYPE = "application/json"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"

PVP_BRACKETS = ("2v2", "3v3", "5v5", "rbg")
