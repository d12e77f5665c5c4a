from battlenet_api.infrastructure.api.auth import AccessToken
from battlenet_api.infrastructure.api.blizzard.models import (
    ConnectedRealmIndex,
    MythicChallengeMode,
    Realm,
    SelfLink,
    Specialization,
    WOWCharacter,
)
from battlenet_api.infrastructure.api.blizzard.sc2_models import SC2Reward


def test_self_link_alias():
    links = SelfLink.model_validate({"self": {"href": "https://x"}})

    assert links.self_link.href == "https://x"
    assert links.model_dump(by_alias=True) == {"self": {"href": "https://x"}}


def test_unknown_fields_are_ignored():
    index = ConnectedRealmIndex.model_validate({
        "_links": {"self": {"href": "a"}},
        "connected_realms": [{"href": "b"}],
        "added_later": True,
    })

    assert [link.href for link in index.connected_realms] == ["b"]


def test_realm():
    realm = Realm.model_validate({
        "id": 60, "name": "Stormrage", "slug": "stormrage",
        "region": {"key": {"href": "r"}, "name": "North America", "id": 1},
        "type": {"type": "NORMAL", "name": "Normal"},
    })

    assert realm.region.id == 1
    assert realm.type.type == "NORMAL"


def test_character_class_alias():
    character = WOWCharacter.model_validate({
        "name": "Thrall", "realm": "Stormrage", "class": 7, "achievementPoints": 100
    })

    assert character.character_class == 7
    dumped = character.model_dump(by_alias=True, exclude_none=True)
    assert dumped["class"] == 7
    assert dumped["achievementPoints"] == 100


def test_specialization():
    spec = Specialization.model_validate({
        "_links": {"self": {"href": "s"}},
        "id": 62,
        "playable_class": {"key": {"href": "c"}, "name": "Mage", "id": 8},
        "name": "Arcane",
        "gender_description": {"male": "Arcane Mage", "female": "Arcane Mage"},
        "role": {"type": "DAMAGE", "name": "Damage"},
        "talent_tiers": [{"level": 15, "talents": [{
            "talent": {"key": {"href": "t"}, "id": 1},
            "spell_tooltip": {"description": "Blink", "cast_time": "Instant"},
        }]}],
    })

    assert spec.playable_class.name == "Mage"
    assert spec.talent_tiers[0].level == 15


def test_mythic_challenge_mode_links():
    mode = MythicChallengeMode.model_validate({
        "_links": {"self": {"href": "m"}},
        "current_period": 641,
        "current_period_start_timestamp": 1,
        "current_period_end_timestamp": 2,
        "current_keystone_affixes": [{"keystone_affix": {"key": {"href": "a"}}, "starting_level": 2}],
    })

    assert mode.links.self_link.href == "m"
    assert mode.current_keystone_affixes[0].starting_level == 2


def test_sc2_reward_aliases():
    reward = SC2Reward.model_validate({
        "id": "2951153716", "achievementId": "91475035553845", "name": "Kachinsky",
        "imageUrl": "http://media.blizzard.com/sc2/portraits/0-75.jpg", "isSkin": False,
        "uiOrderHint": 0, "unlockableType": "portrait"
    })

    assert reward.achievement_id == "91475035553845"
    assert reward.unlockable_type == "portrait"


def test_access_token_requires_token():
    token = AccessToken.model_validate({"access_token": "t", "token_type": "bearer", "expires_in": 86399})

    assert token.expires_in == 86399
