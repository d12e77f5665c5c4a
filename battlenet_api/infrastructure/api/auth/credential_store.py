"""
Credential Store

Holds the access tokens and credentials used to authorize requests.
"""

import asyncio
import base64
import logging
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CredentialSnapshot:
    """Point-in-time view of the stored credentials."""

    client_token: Optional[str] = None
    user_token: Optional[str] = None
    basic_credentials: Optional[str] = None
    api_key: Optional[str] = None


class CredentialStore:
    """
    Stores OAuth tokens for one client.

    Writes are serialized by a lock. Concurrent token acquisitions are
    resolved last-writer-wins. Tokens are kept until replaced or
    ``clear()`` is called; expiry is decided by the server (401).
    """

    def __init__(
        self,
        client_token: Optional[str] = None,
        user_token: Optional[str] = None,
        api_key: Optional[str] = None
    ):
        self._client_token = client_token
        self._user_token = user_token
        self._api_key = api_key
        self._basic_credentials: Optional[str] = None
        self._pending_state: Optional[str] = None
        self._lock = asyncio.Lock()

    @property
    def client_token(self) -> Optional[str]:
        return self._client_token

    @property
    def user_token(self) -> Optional[str]:
        return self._user_token

    @property
    def basic_credentials(self) -> Optional[str]:
        """Base64 ``client_id:client_secret`` for Basic authorization."""
        return self._basic_credentials

    @property
    def api_key(self) -> Optional[str]:
        return self._api_key

    @property
    def pending_state(self) -> Optional[str]:
        return self._pending_state

    def snapshot(self) -> CredentialSnapshot:
        return CredentialSnapshot(
            client_token=self._client_token,
            user_token=self._user_token,
            basic_credentials=self._basic_credentials,
            api_key=self._api_key
        )

    @staticmethod
    def encode_client_credentials(client_id: str, client_secret: str) -> str:
        raw = f"{client_id}:{client_secret}".encode("utf-8")
        return base64.b64encode(raw).decode("ascii")

    def set_client_credentials(self, client_id: str, client_secret: str) -> None:
        """Store the Basic digest; derived from settings, not from a response."""
        self._basic_credentials = self.encode_client_credentials(client_id, client_secret)

    async def set_client_token(self, token: str) -> None:
        async with self._lock:
            self._client_token = token
        logger.debug("Client access token stored")

    async def set_user_token(self, token: str) -> None:
        async with self._lock:
            self._user_token = token
        logger.debug("User access token stored")

    async def set_api_key(self, api_key: Optional[str]) -> None:
        async with self._lock:
            self._api_key = api_key

    async def set_pending_state(self, state: Optional[str]) -> None:
        async with self._lock:
            self._pending_state = state

    async def consume_pending_state(self) -> Optional[str]:
        """Return the pending state and forget it."""
        async with self._lock:
            state, self._pending_state = self._pending_state, None
            return state

    async def clear(self) -> None:
        """Forget both access tokens and any pending state."""
        async with self._lock:
            self._client_token = None
            self._user_token = None
            self._pending_state = None
        logger.info("Stored access tokens cleared")
