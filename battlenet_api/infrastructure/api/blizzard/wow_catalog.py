"""
World of Warcraft endpoints

Game data (``/data/wow``), profile (``/profile/wow``) and the legacy
community API (``/wow``).
"""

from ....core.constants import PVP_BRACKETS, APIType, Game, Namespace
from .endpoints import Endpoint, Params, require_choice, require_one_of
from .models import (
    AuctionData,
    AuctionDataIndex,
    ChallengeIndex,
    ConnectedRealm,
    ConnectedRealmIndex,
    KeystoneAffix,
    KeystoneAffixIndex,
    MythicChallengeMode,
    MythicKeystoneProfile,
    PetIndex,
    PetStats,
    PlayableClass,
    PlayableClassIndex,
    PlayableRace,
    PlayableRaceIndex,
    PowerType,
    PowerTypeIndex,
    PvPLeaderboard,
    Realm,
    RealmIndex,
    Region,
    RegionIndex,
    Specialization,
    SpecializationIndex,
    TokenIndex,
    WOWCharacterResult,
    WOWRealmIndex,
    Zone,
    ZoneIndex,
)

GAME_DATA = APIType.GAME_DATA
PROFILE = APIType.PROFILE
COMMUNITY = APIType.COMMUNITY
STATIC = Namespace.STATIC
DYNAMIC = Namespace.DYNAMIC

FACTIONS = ("alliance", "horde")

_require_realm = require_one_of("id", "slug", message="Must pass a value for id or slug")
_require_bracket = require_choice("bracket", PVP_BRACKETS)


def _realm(params: Params) -> Params:
    """Accept a realm by ``id`` or ``slug``; the id wins when both are given."""
    params = _require_realm(dict(params))
    realm_id = params.pop("id", None)
    slug = params.pop("slug", None)
    params["realm"] = realm_id if realm_id not in (None, "") else slug
    return params


def _faction(params: Params) -> Params:
    params = dict(params)
    if params.get("faction") is not None:
        params["faction"] = str(getattr(params["faction"], "value", params["faction"])).lower()
    return require_choice("faction", FACTIONS)(params)


def _game_data(name, path, schema=dict, namespace=STATIC, **kwargs) -> Endpoint:
    return Endpoint(name, Game.WOW, path, GAME_DATA, schema, namespace, **kwargs)


def _community(name, path, schema=dict, **kwargs) -> Endpoint:
    return Endpoint(name, Game.WOW, path, COMMUNITY, schema, **kwargs)


GAME_DATA_ENDPOINTS = (
    _game_data("achievement", "/achievement/{id}"),
    _game_data("auctions", "/connected-realm/{connected_realm_id}/auctions", AuctionData, namespace=DYNAMIC),
    _game_data(
        "connected_realm_index", "/connected-realm/index", ConnectedRealmIndex,
        namespace=DYNAMIC, extract=lambda index: index.connected_realms
    ),
    _game_data("connected_realm", "/connected-realm/{id}", ConnectedRealm, namespace=DYNAMIC),
    _game_data("item", "/item/{id}"),
    _game_data("item_set", "/item-set/{id}"),
    _game_data("mount_index", "/mount/index"),
    _game_data("keystone_affix_index", "/keystone-affix/index", KeystoneAffixIndex),
    _game_data("keystone_affix", "/keystone-affix/{id}", KeystoneAffix),
    _game_data("mythic_keystone_dungeon_index", "/mythic-keystone/dungeon/index", namespace=DYNAMIC),
    _game_data("mythic_keystone_dungeon", "/mythic-keystone/dungeon/{id}", namespace=DYNAMIC),
    _game_data("mythic_keystone_index", "/mythic-keystone/index", namespace=DYNAMIC),
    _game_data("mythic_keystone_period_index", "/mythic-keystone/period/index", namespace=DYNAMIC),
    _game_data("mythic_keystone_period", "/mythic-keystone/period/{id}", namespace=DYNAMIC),
    _game_data("mythic_keystone_season_index", "/mythic-keystone/season/index", namespace=DYNAMIC),
    _game_data("mythic_keystone_season", "/mythic-keystone/season/{id}", namespace=DYNAMIC),
    _game_data(
        "mythic_leaderboard_index",
        "/connected-realm/{connected_realm_id}/mythic-leaderboard/index",
        namespace=DYNAMIC
    ),
    _game_data(
        "mythic_leaderboard",
        "/connected-realm/{connected_realm_id}/mythic-leaderboard/{dungeon_id}/period/{period}",
        namespace=DYNAMIC
    ),
    _game_data(
        "mythic_raid_leaderboard", "/leaderboard/hall-of-fame/{raid}/{faction}",
        namespace=DYNAMIC, prepare=_faction
    ),
    _game_data("mythic_challenge_mode", "/mythic-challenge-mode/", MythicChallengeMode, namespace=DYNAMIC),
    _game_data("playable_class_index", "/playable-class/index", PlayableClassIndex),
    _game_data("playable_class", "/playable-class/{id}", PlayableClass),
    _game_data("pvp_talent_slots", "/playable-class/{id}/pvp-talent-slots"),
    _game_data("playable_specialization_index", "/playable-specialization/index", SpecializationIndex),
    _game_data("playable_specialization", "/playable-specialization/{id}", Specialization),
    _game_data("power_type_index", "/power-type/index", PowerTypeIndex),
    _game_data("power_type", "/power-type/{id}", PowerType),
    _game_data("playable_race_index", "/playable-race/index", PlayableRaceIndex),
    _game_data("playable_race", "/playable-race/{id}", PlayableRace),
    _game_data("realm_index", "/realm/index", RealmIndex, namespace=DYNAMIC),
    _game_data("realm", "/realm/{realm}", Realm, namespace=DYNAMIC, prepare=_realm),
    _game_data("region_index", "/region/index", RegionIndex, namespace=DYNAMIC),
    _game_data("region", "/region/{id}", Region, namespace=DYNAMIC),
    _game_data("token_index", "/token/index", TokenIndex, namespace=DYNAMIC),
)

PROFILE_ENDPOINTS = (
    # Account characters live under the legacy root but need the user token
    Endpoint(
        "user_characters", Game.WOW, "/user/characters", PROFILE, WOWCharacterResult,
        extract=lambda result: result.characters, root="/wow"
    ),
    Endpoint(
        "mythic_keystone_profile", Game.WOW,
        "/character/{realm_slug}/{character_name}/mythic-keystone-profile",
        PROFILE, MythicKeystoneProfile, Namespace.PROFILE
    ),
    Endpoint(
        "mythic_keystone_profile_season", Game.WOW,
        "/character/{realm_slug}/{character_name}/mythic-keystone-profile/season/{season_id}",
        PROFILE, dict, Namespace.PROFILE
    ),
)

COMMUNITY_ENDPOINTS = (
    _community("auction_data_index", "/auction/data/{realm}", AuctionDataIndex),
    _community("challenge_leaderboards", "/challenge/{realm}", ChallengeIndex),
    _community("top_challenge_leaderboards", "/challenge/region", ChallengeIndex),
    _community("character", "/character/{realm}/{name}", query={"fields": "fields"}),
    _community("guild", "/guild/{realm}/{name}", query={"fields": "fields"}),
    _community("pets", "/pet/", PetIndex),
    _community("pet_ability", "/pet/ability/{id}"),
    _community("pet_species", "/pet/species/{id}"),
    _community(
        "pet_stats", "/pet/stats/{species_id}", PetStats,
        query={"level": "level", "breed_id": "breedId", "quality_id": "qualityId"},
        defaults={"level": 1, "breed_id": 3, "quality_id": 1}
    ),
    _community("leaderboard", "/leaderboard/{bracket}", PvPLeaderboard, prepare=_require_bracket),
    _community("quest", "/quest/{id}"),
    _community("realm_status", "/realm/status", WOWRealmIndex, extract=lambda index: index.realms),
    _community("recipe", "/recipe/{id}"),
    _community("spell", "/spell/{id}"),
    _community("zones", "/zone/", ZoneIndex, extract=lambda index: index.zones),
    _community("zone", "/zone/{id}", Zone),
    # Data resources
    _community("battlegroups", "/data/battlegroups/"),
    _community("character_races", "/data/character/races"),
    _community("character_classes", "/data/character/classes"),
    _community("character_achievements", "/data/character/achievements"),
    _community("guild_rewards", "/data/guild/rewards"),
    _community("guild_perks", "/data/guild/perks"),
    _community("guild_achievements", "/data/guild/achievements"),
    _community("item_classes", "/data/item/classes"),
    _community("talents", "/data/talents"),
    _community("pet_types", "/data/pet/types"),
)

ENDPOINTS = GAME_DATA_ENDPOINTS + PROFILE_ENDPOINTS + COMMUNITY_ENDPOINTS
