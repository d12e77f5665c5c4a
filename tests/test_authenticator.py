import base64
from urllib.parse import parse_qs, urlsplit

import pytest

from battlenet_api.core import ErrorType, Region, Scope
from battlenet_api.infrastructure.api.auth import AccessToken, Authenticator, CredentialStore, TokenInfo


@pytest.fixture
def store():
    return CredentialStore()


@pytest.fixture
def auth(transport, store):
    return Authenticator(
        client_id="my-client",
        client_secret="my-secret",
        transport=transport,
        credentials=store,
        redirect_uri="myapp://oauth"
    )


def test_requires_client_credentials(transport):
    with pytest.raises(ValueError):
        Authenticator(client_id="", client_secret="secret", transport=transport)


@pytest.mark.asyncio
async def test_client_credentials_flow_stores_token(server, auth, store):
    server.respond(200, {"access_token": "fresh", "token_type": "bearer", "expires_in": 86399})

    result = await auth.get_client_access_token()

    assert result.value == AccessToken(access_token="fresh", token_type="bearer", expires_in=86399)
    assert store.client_token == "fresh"

    request = server.last
    assert server.calls == 1
    assert request.method == "POST"
    assert request.url.host == "us.battle.net"
    assert request.url.path == "/oauth/token"
    assert request.url.params["grant_type"] == "client_credentials"
    assert request.url.params["client_id"] == "my-client"
    assert request.url.params["client_secret"] == "my-secret"
    expected = base64.b64encode(b"my-client:my-secret").decode("ascii")
    assert request.headers["Authorization"] == f"Basic {expected}"


@pytest.mark.asyncio
async def test_client_credentials_flow_uses_region_host(server, auth):
    server.respond(200, {"access_token": "fresh"})

    await auth.get_client_access_token(Region.CN)

    assert server.last.url.host == "www.battlenet.com.cn"


@pytest.mark.asyncio
async def test_failed_token_request_leaves_store_unchanged(server, auth, store):
    await store.set_client_token("old")
    server.respond(401)

    result = await auth.get_client_access_token()

    assert result.error.type is ErrorType.UNAUTHORIZED
    assert store.client_token == "old"


@pytest.mark.asyncio
async def test_missing_access_token_is_decode_error(server, auth, store):
    server.respond(200, {"token_type": "bearer"})

    result = await auth.get_client_access_token()

    assert result.error.type is ErrorType.DESERIALIZATION_FAILURE
    assert store.client_token is None


@pytest.mark.asyncio
async def test_non_object_token_response_is_unexpected(server, auth):
    server.respond(200, ["access_token"])

    result = await auth.get_client_access_token()

    assert result.error.type is ErrorType.UNEXPECTED_RESPONSE


@pytest.mark.asyncio
async def test_authorization_url(auth, store):
    url = await auth.authorization_url([Scope.WOW_PROFILE, Scope.SC2_PROFILE], region=Region.EU)

    parts = urlsplit(url)
    query = {key: values[0] for key, values in parse_qs(parts.query).items()}
    assert f"{parts.scheme}://{parts.netloc}{parts.path}" == "https://eu.battle.net/oauth/authorize"
    assert query["client_id"] == "my-client"
    assert query["scope"] == "wow.profile sc2.profile"
    assert query["redirect_uri"] == "myapp://oauth"
    assert query["response_type"] == "code"
    assert query["state"].startswith("BattleNetAPI")
    assert query["state"] == store.pending_state


@pytest.mark.asyncio
async def test_authorization_url_defaults_to_wow_profile(auth):
    url = await auth.authorization_url()

    assert parse_qs(urlsplit(url).query)["scope"] == ["wow.profile"]


@pytest.mark.asyncio
async def test_authorization_state_is_fresh_each_time(auth):
    first = await auth.authorization_url([Scope.WOW_PROFILE])
    second = await auth.authorization_url([Scope.WOW_PROFILE])

    assert parse_qs(urlsplit(first).query)["state"] != parse_qs(urlsplit(second).query)["state"]


@pytest.mark.asyncio
async def test_authorization_url_requires_redirect(transport):
    auth = Authenticator(client_id="id", client_secret="secret", transport=transport)

    with pytest.raises(ValueError):
        await auth.authorization_url([Scope.WOW_PROFILE])


@pytest.mark.asyncio
async def test_state_mismatch_is_rejected_without_network(server, auth, store):
    await auth.authorization_url([Scope.WOW_PROFILE])

    result = await auth.complete_authorization("myapp://oauth?code=abc&state=BattleNetAPIforged")

    assert result.error.type is ErrorType.UNAUTHORIZED
    assert server.calls == 0
    assert store.user_token is None


@pytest.mark.asyncio
async def test_redirect_without_code_is_rejected(auth):
    await auth.authorization_url([Scope.WOW_PROFILE])

    result = await auth.parse_redirect("myapp://oauth?state=x")

    assert result.error.type is ErrorType.UNAUTHORIZED


@pytest.mark.asyncio
async def test_authorization_code_flow(server, auth, store):
    url = await auth.authorization_url([Scope.WOW_PROFILE])
    state = parse_qs(urlsplit(url).query)["state"][0]
    server.respond(200, {"access_token": "user-token"})

    result = await auth.complete_authorization(f"myapp://oauth?code=abc&state={state}")

    assert result.value.access_token == "user-token"
    assert store.user_token == "user-token"
    assert store.pending_state is None

    request = server.last
    assert request.method == "POST"
    assert request.headers["Content-Type"] == "application/x-www-form-urlencoded"
    body = {key: values[0] for key, values in parse_qs(request.content.decode()).items()}
    assert body == {
        "grant_type": "authorization_code",
        "client_id": "my-client",
        "client_secret": "my-secret",
        "code": "abc",
        "redirect_uri": "myapp://oauth",
    }


@pytest.mark.asyncio
async def test_state_is_single_use(server, auth):
    url = await auth.authorization_url([Scope.WOW_PROFILE])
    state = parse_qs(urlsplit(url).query)["state"][0]
    callback = f"myapp://oauth?code=abc&state={state}"
    server.respond(200, {"access_token": "user-token"})

    await auth.complete_authorization(callback)
    replay = await auth.complete_authorization(callback)

    assert replay.error.type is ErrorType.UNAUTHORIZED
    assert server.calls == 1


@pytest.mark.asyncio
async def test_exchange_requires_code(server, auth):
    result = await auth.get_user_access_token("")

    assert result.error.type is ErrorType.MALFORMED_BODY
    assert server.calls == 0


@pytest.mark.asyncio
async def test_validate_client_token_stores_valid_token(server, auth, store):
    server.respond(200, {"client_id": "my-client", "exp": 1700000000, "scope": ["wow.profile"]})

    result = await auth.validate_client_access_token("checked")

    assert result.value == TokenInfo(client_id="my-client", exp=1700000000, scope=["wow.profile"])
    assert store.client_token == "checked"
    assert server.last.url.path == "/oauth/check_token"
    assert server.last.url.params["token"] == "checked"


@pytest.mark.asyncio
async def test_validate_user_token_rejected(server, auth, store):
    server.respond(400, {"error": "invalid_token"})

    result = await auth.validate_user_access_token("stale")

    assert result.error.type is ErrorType.SERVER_ERROR
    assert result.error.code == 400
    assert store.user_token is None


@pytest.mark.asyncio
async def test_legacy_api_key(auth, store):
    await auth.set_api_key_legacy("legacy")

    assert store.api_key == "legacy"
