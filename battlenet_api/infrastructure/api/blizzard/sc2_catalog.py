"""
StarCraft II endpoints

Profile, ladder and league calls. The profile and ladder calls live under
``/sc2`` but are authorized with the client token, so they are declared as
game data with an explicit root.
"""

from typing import List

from ....core.constants import APIType, Game
from .endpoints import Endpoint
from .sc2_models import (
    SC2AchievementIndex,
    SC2GrandmasterLeaderboard,
    SC2LadderSummary,
    SC2MatchHistory,
    SC2Player,
    SC2RewardIndex,
    SC2Season,
)

SC2_ROOT = "/sc2"
PROFILE_PATH = "/profile/{region_id}/{realm_id}/{profile_id}"
LEGACY_PROFILE_PATH = "/legacy/profile/{region_id}/{realm_id}/{profile_id}"


def _sc2(name, path, schema=dict, **kwargs) -> Endpoint:
    return Endpoint(name, Game.SC2, path, APIType.GAME_DATA, schema, root=SC2_ROOT, **kwargs)


def _legacy(name, path, schema=dict, **kwargs) -> Endpoint:
    return Endpoint(name, Game.SC2, path, APIType.COMMUNITY, schema, **kwargs)


ENDPOINTS = (
    _sc2("static_profile", "/static/profile/{region_id}"),
    _sc2("metadata", "/metadata" + PROFILE_PATH),
    _sc2("profile", PROFILE_PATH),
    _sc2("ladder_summary", PROFILE_PATH + "/ladder/summary", SC2LadderSummary),
    _sc2("ladder", PROFILE_PATH + "/ladder/{ladder_id}"),
    _sc2("grandmaster_leaderboard", "/ladder/grandmaster/{region_id}", SC2GrandmasterLeaderboard),
    _sc2("season", "/ladder/season/{region_id}", SC2Season),
    Endpoint(
        "player", Game.SC2, "/player/{account_id}", APIType.PROFILE, List[SC2Player]
    ),
    _legacy("legacy_profile", LEGACY_PROFILE_PATH),
    _legacy("legacy_ladders", LEGACY_PROFILE_PATH + "/ladders"),
    _legacy("legacy_match_history", LEGACY_PROFILE_PATH + "/matches", SC2MatchHistory),
    _legacy("legacy_ladder", "/legacy/ladder/{region_id}/{ladder_id}"),
    _legacy("legacy_achievements", "/legacy/data/achievements/{region_id}", SC2AchievementIndex),
    _legacy("legacy_rewards", "/legacy/data/rewards/{region_id}", SC2RewardIndex),
    Endpoint(
        "league_data", Game.SC2,
        "/league/{season_id}/{queue_id}/{team_type}/{league_id}",
        APIType.GAME_DATA
    ),
)
