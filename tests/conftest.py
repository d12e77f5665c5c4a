"""Shared fixtures: a fake Battle.net server behind httpx.MockTransport."""

import json
from typing import Any, List, Optional

import httpx
import pytest
import pytest_asyncio

from battlenet_api.core.config import ConfigLoader
from battlenet_api.infrastructure.api import CredentialStore, Transport
from battlenet_api.infrastructure.api.blizzard import BattleNetClient


class FakeServer:
    """Serves queued responses in order and records every request."""

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self._responses: List[Any] = []

    def respond(self, status: int = 200, json_body: Any = None, content: Optional[bytes] = None):
        if content is None:
            content = json.dumps({} if json_body is None else json_body).encode("utf-8")
        self._responses.append(httpx.Response(status, content=content))

    def fail_with(self, exc_type: type, message: str = "boom"):
        self._responses.append((exc_type, message))

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        response = self._responses.pop(0) if self._responses else httpx.Response(200, content=b"{}")
        if isinstance(response, tuple):
            exc_type, message = response
            raise exc_type(message, request=request)
        return response

    @property
    def calls(self) -> int:
        return len(self.requests)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def server():
    return FakeServer()


@pytest_asyncio.fixture
async def session(server):
    client = httpx.AsyncClient(transport=httpx.MockTransport(server.handler))
    yield client
    await client.aclose()


@pytest.fixture
def transport(session):
    return Transport(session=session)


@pytest.fixture
def credentials():
    return CredentialStore(client_token="client-token")


@pytest.fixture
def client(transport, credentials):
    return BattleNetClient(
        client_id="my-client",
        client_secret="my-secret",
        transport=transport,
        credentials=credentials,
        redirect_uri="myapp://oauth"
    )


@pytest.fixture(autouse=True)
def reset_config():
    ConfigLoader.reset()
    yield
    ConfigLoader.reset()
