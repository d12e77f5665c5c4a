"""
Battle.net API Models

Pydantic models for Battle.net API responses.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class BattleNetModel(BaseModel):
    """Base for response models; unknown fields are ignored."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


# ---------------------------------------------------------------------------
# Links
# ---------------------------------------------------------------------------

class Link(BattleNetModel):
    """Reference to another resource."""
    href: str


class SelfLink(BattleNetModel):
    """The ``_links`` block of a resource."""
    self_link: Link = Field(alias="self")


class KeyLink(BattleNetModel):
    """Named reference (``{"key": {...}, "name": ..., "id": ...}``)."""
    key: Link
    name: Optional[str] = None
    id: Optional[int] = None


class TypeName(BattleNetModel):
    """Typed enumeration value such as a faction or realm status."""
    type: str
    name: Optional[str] = None


# ---------------------------------------------------------------------------
# Realms and regions
# ---------------------------------------------------------------------------

class Realm(BattleNetModel):
    """Realm model."""
    id: int
    name: str
    slug: str
    region: Optional[KeyLink] = None
    connected_realm: Optional[Link] = None
    category: Optional[str] = None
    locale: Optional[str] = None
    timezone: Optional[str] = None
    type: Optional[TypeName] = None
    is_tournament: Optional[bool] = None


class RealmIndexEntry(BattleNetModel):
    """Entry of the realm index."""
    key: Link
    name: str
    id: int
    slug: str


class RealmIndex(BattleNetModel):
    """Realm index wrapper (``{"realms": [...]}``)."""
    realms: List[RealmIndexEntry]


class ConnectedRealm(BattleNetModel):
    """Connected realm model."""
    id: int
    has_queue: Optional[bool] = None
    status: Optional[TypeName] = None
    population: Optional[TypeName] = None
    realms: List[Realm] = Field(default_factory=list)
    mythic_leaderboards: Optional[Link] = None
    auctions: Optional[Link] = None


class ConnectedRealmIndex(BattleNetModel):
    """Connected realm index wrapper (``{"connected_realms": [...]}``)."""
    connected_realms: List[Link]


class Region(BattleNetModel):
    """Region model."""
    id: int
    name: str
    tag: str


class RegionIndex(BattleNetModel):
    """Region index wrapper (``{"regions": [...]}``)."""
    regions: List[Link]


class TokenIndex(BattleNetModel):
    """WoW Token price model."""
    last_updated_timestamp: int
    price: int


# ---------------------------------------------------------------------------
# Mythic keystone
# ---------------------------------------------------------------------------

class KeystoneAffix(BattleNetModel):
    """Keystone affix model."""
    id: int
    name: str
    description: Optional[str] = None


class KeystoneAffixSummary(BattleNetModel):
    """Affix reference inside another resource."""
    key: Optional[Link] = None
    name: Optional[str] = None
    id: Optional[int] = None
    starting_level: Optional[int] = None


class KeystoneAffixIndex(BattleNetModel):
    """Keystone affix index model."""
    affixes: List[KeyLink]


class MythicChallengeMode(BattleNetModel):
    """Current mythic challenge mode period and affixes."""
    links: SelfLink = Field(alias="_links")
    current_period: int
    current_period_start_timestamp: int
    current_period_end_timestamp: int
    current_keystone_affixes: List[KeystoneAffixSummary]


# ---------------------------------------------------------------------------
# Playable classes and specializations
# ---------------------------------------------------------------------------

class PlayableClass(BattleNetModel):
    """Playable class model."""
    id: int
    name: str
    power_type: Optional[KeyLink] = None
    specializations: List[KeyLink] = Field(default_factory=list)


class PlayableClassIndex(BattleNetModel):
    """Playable class index model."""
    classes: List[KeyLink]


class Role(BattleNetModel):
    type: str
    name: str


class SpellTooltip(BattleNetModel):
    description: str
    cast_time: str
    cooldown: Optional[str] = None
    power_cost: Optional[str] = None
    range: Optional[str] = None


class Talent(BattleNetModel):
    talent: KeyLink
    spell_tooltip: SpellTooltip


class TalentTier(BattleNetModel):
    level: int
    talents: List[Talent]


class GenderName(BattleNetModel):
    male: str
    female: str


class Specialization(BattleNetModel):
    """Playable specialization model."""
    links: SelfLink = Field(alias="_links")
    id: int
    name: str
    playable_class: KeyLink
    gender_description: GenderName
    role: Role
    pvp_talents: List[Talent] = Field(default_factory=list)
    talent_tiers: List[TalentTier] = Field(default_factory=list)
    media: Optional[Dict[str, Any]] = None


class SpecializationIndex(BattleNetModel):
    """Playable specialization index model."""
    links: SelfLink = Field(alias="_links")
    character_specializations: List[KeyLink]
    pet_specializations: List[KeyLink]


class PowerType(BattleNetModel):
    id: int
    name: str


class PowerTypeIndex(BattleNetModel):
    power_types: List[KeyLink]


class PlayableRace(BattleNetModel):
    """Playable race model."""
    id: int
    name: str
    faction: Optional[TypeName] = None
    is_selectable: Optional[bool] = None
    is_allied_race: Optional[bool] = None


class PlayableRaceIndex(BattleNetModel):
    races: List[KeyLink]


# ---------------------------------------------------------------------------
# Profile
# ---------------------------------------------------------------------------

class WOWCharacter(BattleNetModel):
    """Character of the logged in user."""
    name: str
    realm: str
    level: Optional[int] = None
    battlegroup: Optional[str] = None
    character_class: Optional[int] = Field(default=None, alias="class")
    race: Optional[int] = None
    gender: Optional[int] = None
    guild: Optional[str] = None
    guild_realm: Optional[str] = Field(default=None, alias="guildRealm")
    achievement_points: Optional[int] = Field(default=None, alias="achievementPoints")
    thumbnail: Optional[str] = None
    last_modified: Optional[int] = Field(default=None, alias="lastModified")


class WOWCharacterResult(BattleNetModel):
    """Wrapper of the user characters call (``{"characters": [...]}``)."""
    characters: List[WOWCharacter]


class MythicKeystoneProfile(BattleNetModel):
    """Mythic keystone profile of a character."""
    character: Optional[KeyLink] = None
    current_period: Optional[Dict[str, Any]] = None
    seasons: List[KeyLink] = Field(default_factory=list)
    current_mythic_rating: Optional[Dict[str, Any]] = None


# ---------------------------------------------------------------------------
# Legacy community models
# ---------------------------------------------------------------------------

class WOWRealm(BattleNetModel):
    """Realm status entry of the legacy realm status call."""
    type: str
    population: str
    queue: bool
    status: bool
    name: str
    slug: str
    battlegroup: str
    locale: str
    timezone: str
    connected_realms: List[str] = Field(default_factory=list)


class WOWRealmIndex(BattleNetModel):
    realms: List[WOWRealm]


class AuctionFile(BattleNetModel):
    """Location of an auction house dump."""
    url: str
    last_modified: int = Field(alias="lastModified")


class AuctionDataIndex(BattleNetModel):
    """Index of auction house dumps; the dump itself is fetched by URL."""
    files: List[AuctionFile]


class Auction(BattleNetModel):
    """Auction model."""
    id: int
    item: Dict[str, Any]
    quantity: int
    unit_price: Optional[int] = None
    bid: Optional[int] = None
    buyout: Optional[int] = None
    time_left: str


class AuctionData(BattleNetModel):
    """Auction house data model."""
    auctions: List[Auction]
    connected_realm: Optional[Link] = None


class Challenge(BattleNetModel):
    """Challenge mode leaderboard entry."""
    realm: Optional[Dict[str, Any]] = None
    map: Dict[str, Any]
    groups: List[Dict[str, Any]] = Field(default_factory=list)


class ChallengeIndex(BattleNetModel):
    challenge: List[Challenge]


class PvPLeaderboard(BattleNetModel):
    """Legacy PvP bracket leaderboard."""
    rows: List[Dict[str, Any]]


class Zone(BattleNetModel):
    id: int
    name: str
    url_slug: Optional[str] = Field(default=None, alias="urlSlug")
    description: Optional[str] = None
    bosses: List[Dict[str, Any]] = Field(default_factory=list)


class ZoneIndex(BattleNetModel):
    zones: List[Zone]


class Pet(BattleNetModel):
    name: str
    species_id: Optional[int] = Field(default=None, alias="speciesId")
    creature_id: Optional[int] = Field(default=None, alias="creatureId")
    family: Optional[str] = None
    can_battle: Optional[bool] = Field(default=None, alias="canBattle")
    icon: Optional[str] = None


class PetIndex(BattleNetModel):
    pets: List[Pet]


class PetStats(BattleNetModel):
    species_id: int = Field(alias="speciesId")
    breed_id: int = Field(alias="breedId")
    pet_quality_id: int = Field(alias="petQualityId")
    level: int
    health: int
    power: int
    speed: int

