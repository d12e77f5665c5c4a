from battlenet_api.core import APIType, Game, Namespace, Region, Scope
from battlenet_api.core.constants import base_path


def test_region_hosts():
    assert Region.EU.api_uri == "https://eu.api.blizzard.com"
    assert Region.US.token_uri == "https://us.battle.net/oauth/token"
    assert Region.KR.authorize_uri == "https://kr.battle.net/oauth/authorize"
    assert Region.TW.check_token_uri == "https://tw.battle.net/oauth/check_token"


def test_china_uses_its_own_hosts():
    assert Region.CN.api_uri == "https://gateway.battlenet.com.cn"
    assert Region.CN.token_uri == "https://www.battlenet.com.cn/oauth/token"


def test_namespace_header_value():
    assert Namespace.DYNAMIC.header_value(Region.US) == "dynamic-us"
    assert Namespace.STATIC.header_value("eu") == "static-eu"
    assert Namespace.PROFILE.header_value(Region.KR) == "profile-kr"


def test_scopes_render_space_separated():
    assert Scope.render([Scope.SC2_PROFILE, Scope.WOW_PROFILE]) == "wow.profile sc2.profile"
    assert Scope.render([]) == ""


def test_base_paths():
    assert base_path(Game.WOW, APIType.GAME_DATA) == "/data/wow"
    assert base_path(Game.WOW, APIType.PROFILE) == "/profile/wow"
    assert base_path(Game.WOW, APIType.COMMUNITY) == "/wow"
    assert base_path(Game.SC2, APIType.GAME_DATA) == "/data/sc2"
    assert base_path(Game.SC2, APIType.COMMUNITY) == "/sc2"
