import asyncio
import base64

import pytest

from battlenet_api.infrastructure.api.auth import CredentialStore


def test_client_credentials_digest():
    store = CredentialStore()
    store.set_client_credentials("id", "secret")

    assert base64.b64decode(store.basic_credentials) == b"id:secret"


@pytest.mark.asyncio
async def test_tokens_are_stored_until_cleared():
    store = CredentialStore()
    await store.set_client_token("c")
    await store.set_user_token("u")

    assert store.snapshot().client_token == "c"
    assert store.snapshot().user_token == "u"

    await store.clear()

    assert store.client_token is None
    assert store.user_token is None


@pytest.mark.asyncio
async def test_pending_state_is_consumed_once():
    store = CredentialStore()
    await store.set_pending_state("BattleNetAPIabc")

    assert await store.consume_pending_state() == "BattleNetAPIabc"
    assert await store.consume_pending_state() is None


@pytest.mark.asyncio
async def test_concurrent_writes_keep_one_value():
    store = CredentialStore()

    await asyncio.gather(*(store.set_client_token(f"token-{i}") for i in range(10)))

    assert store.client_token in {f"token-{i}" for i in range(10)}
