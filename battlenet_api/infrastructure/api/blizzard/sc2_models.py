"""
StarCraft II Models

Pydantic models for StarCraft II community and game data responses.
"""

from typing import Any, Dict, List, Optional

from pydantic import Field

from .models import BattleNetModel


class SC2Reward(BattleNetModel):
    """Portrait, decal or skin unlockable."""
    id: str
    achievement_id: Optional[str] = Field(default=None, alias="achievementId")
    name: str
    image_url: str = Field(alias="imageUrl")
    is_skin: bool = Field(default=False, alias="isSkin")
    ui_order_hint: int = Field(default=0, alias="uiOrderHint")
    unlockable_type: str = Field(default="", alias="unlockableType")
    flags: int = 0
    command: Optional[str] = None


class SC2RewardIndex(BattleNetModel):
    """Legacy rewards wrapper."""
    portraits: List[SC2Reward] = Field(default_factory=list)
    skins: List[SC2Reward] = Field(default_factory=list)
    animations: List[SC2Reward] = Field(default_factory=list)


class SC2Achievement(BattleNetModel):
    id: str
    title: str
    description: Optional[str] = None
    category_id: Optional[str] = Field(default=None, alias="categoryId")
    points: Optional[int] = None


class SC2AchievementIndex(BattleNetModel):
    achievements: List[SC2Achievement] = Field(default_factory=list)
    categories: List[Dict[str, Any]] = Field(default_factory=list)


class SC2Player(BattleNetModel):
    """Profile linked to a Battle.net account."""
    name: str
    profile_url: str = Field(alias="profileUrl")
    avatar_url: Optional[str] = Field(default=None, alias="avatarUrl")
    profile_id: str = Field(alias="profileId")
    region_id: int = Field(alias="regionId")
    realm_id: int = Field(alias="realmId")


class SC2Season(BattleNetModel):
    season_id: int = Field(alias="seasonId")
    number: int
    year: int
    start_date: Optional[str] = Field(default=None, alias="startDate")
    end_date: Optional[str] = Field(default=None, alias="endDate")


class SC2LadderSummary(BattleNetModel):
    show_case_entries: List[Dict[str, Any]] = Field(default_factory=list, alias="showCaseEntries")
    placement_matches: List[Dict[str, Any]] = Field(default_factory=list, alias="placementMatches")
    all_ladder_memberships: List[Dict[str, Any]] = Field(default_factory=list, alias="allLadderMemberships")


class SC2GrandmasterLeaderboard(BattleNetModel):
    ladder_teams: List[Dict[str, Any]] = Field(default_factory=list, alias="ladderTeams")


class SC2MatchHistory(BattleNetModel):
    matches: List[Dict[str, Any]] = Field(default_factory=list)
