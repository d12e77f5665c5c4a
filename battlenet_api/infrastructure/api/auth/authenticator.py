"""
Battle.net OAuth2 Service

Handles the client credentials and authorization code flows and token
validation against the regional OAuth hosts.
"""

import hmac
import logging
import secrets
from typing import Iterable, Optional
from urllib.parse import parse_qs, urlencode, urlsplit

from ....core.constants import APIType, Region, Scope
from ....core.exceptions import ErrorType, HTTPError
from ....core.protocols import OAuthProtocol, TransportProtocol
from ....core.result import Result
from ..decoding import decode, decode_json_object
from ..request_builder import RequestBuilder
from .credential_store import CredentialStore
from .models import AccessToken, TokenInfo

logger = logging.getLogger(__name__)


class Authenticator(OAuthProtocol):
    """Battle.net OAuth2 service implementation."""

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        transport: TransportProtocol,
        credentials: Optional[CredentialStore] = None,
        region: Region = Region.US,
        redirect_uri: Optional[str] = None,
        scopes: Optional[Iterable[Scope]] = None
    ):
        """
        Initialize OAuth service.

        Args:
            client_id: Battle.net application client ID
            client_secret: Battle.net application client secret
            transport: Transport the token calls are sent with
            credentials: Store updated with acquired tokens
            region: Default region of the OAuth hosts
            redirect_uri: Default redirect for the authorization code flow
            scopes: Default scopes of the authorization code flow
        """
        if not client_id or not client_secret:
            raise ValueError(
                "client_id and client_secret are required"
            )

        self.client_id = client_id
        self.client_secret = client_secret
        self.transport = transport
        self.credentials = credentials or CredentialStore()
        self.region = Region(region)
        self.redirect_uri = redirect_uri
        self.scopes = list(scopes) if scopes is not None else [Scope.WOW_PROFILE]

        self.credentials.set_client_credentials(client_id, client_secret)
        self._builder = RequestBuilder(self.credentials)

    # ------------------------------------------------------------------
    # Client credentials flow
    # ------------------------------------------------------------------

    async def get_client_access_token(self, region: Optional[Region] = None) -> Result[AccessToken]:
        """
        Get an access token for the application itself.

        The token is stored as the client token on success; on failure the
        store is left untouched.
        """
        region = Region(region or self.region)
        logger.info(f"Requesting client access token ({region.value})")

        result = await self._request_token(
            region.token_uri,
            query={
                "grant_type": "client_credentials",
                "client_id": self.client_id,
                "client_secret": self.client_secret,
            }
        )
        if result.is_success:
            await self.credentials.set_client_token(result.value.access_token)
            logger.info("Client access token obtained")
        return result

    # ------------------------------------------------------------------
    # Authorization code flow
    # ------------------------------------------------------------------

    async def authorization_url(
        self,
        scopes: Optional[Iterable[Scope]] = None,
        redirect_uri: Optional[str] = None,
        region: Optional[Region] = None
    ) -> str:
        """
        Build the URL the user logs in on.

        A fresh ``state`` value is generated and kept until a redirect
        carrying it is accepted by ``parse_redirect``.

        ``scopes`` defaults to the scopes the authenticator was built with.

        Raises:
            ValueError: If no redirect URI is configured
        """
        region = Region(region or self.region)
        redirect_uri = redirect_uri or self.redirect_uri
        if not redirect_uri:
            raise ValueError("redirect_uri is required for the authorization code flow")

        state = f"BattleNetAPI{secrets.token_urlsafe(24)}"
        await self.credentials.set_pending_state(state)

        query = urlencode({
            "client_id": self.client_id,
            "scope": Scope.render(self.scopes if scopes is None else scopes),
            "state": state,
            "redirect_uri": redirect_uri,
            "response_type": "code",
        })
        return f"{region.authorize_uri}?{query}"

    async def parse_redirect(self, callback_url: str) -> Result[str]:
        """
        Extract the authorization code from the redirect callback.

        The callback is rejected when ``code`` or ``state`` is missing, when
        no login is pending or when ``state`` differs from the value
        generated by ``authorization_url``.
        """
        query = parse_qs(urlsplit(callback_url).query)
        code = (query.get("code") or [None])[0]
        state = (query.get("state") or [None])[0]

        if not code or not state:
            logger.warning("OAuth redirect is missing code or state")
            return Result.failure(HTTPError.of(
                ErrorType.UNAUTHORIZED,
                "The login redirect did not contain a code and state."
            ))

        expected = self.credentials.pending_state
        if expected is None or not hmac.compare_digest(state.encode("utf-8"), expected.encode("utf-8")):
            logger.warning("OAuth redirect state does not match the pending login")
            return Result.failure(HTTPError.of(
                ErrorType.UNAUTHORIZED,
                "The login redirect did not match the login request."
            ))

        await self.credentials.consume_pending_state()
        return Result.success(code)

    async def get_user_access_token(
        self,
        code: str,
        redirect_uri: Optional[str] = None,
        region: Optional[Region] = None
    ) -> Result[AccessToken]:
        """Exchange an authorization code for a user access token."""
        region = Region(region or self.region)
        redirect_uri = redirect_uri or self.redirect_uri
        if not code or not redirect_uri:
            return Result.failure(HTTPError.of(
                ErrorType.MALFORMED_BODY,
                "An authorization code and redirect URI are required."
            ))

        logger.info(f"Exchanging authorization code for user access token ({region.value})")
        result = await self._request_token(
            region.token_uri,
            form={
                "grant_type": "authorization_code",
                "client_id": self.client_id,
                "client_secret": self.client_secret,
                "code": code,
                "redirect_uri": redirect_uri,
            }
        )
        if result.is_success:
            await self.credentials.set_user_token(result.value.access_token)
            logger.info("User access token obtained")
        return result

    async def complete_authorization(
        self,
        callback_url: str,
        redirect_uri: Optional[str] = None,
        region: Optional[Region] = None
    ) -> Result[AccessToken]:
        """Validate the redirect callback, then exchange its code."""
        code = await self.parse_redirect(callback_url)
        if code.is_failure:
            return Result.failure(code.error)
        return await self.get_user_access_token(code.value, redirect_uri, region)

    # ------------------------------------------------------------------
    # Token validation
    # ------------------------------------------------------------------

    async def validate_client_access_token(
        self,
        token: str,
        region: Optional[Region] = None
    ) -> Result[TokenInfo]:
        """Check a client token; a valid token is stored as the client token."""
        response = await self._check_token(token, region)
        if response.is_success:
            await self.credentials.set_client_token(token)
        return decode(response, TokenInfo)

    async def validate_user_access_token(
        self,
        token: str,
        region: Optional[Region] = None
    ) -> Result[TokenInfo]:
        """Check a user token; a valid token is stored as the user token."""
        response = await self._check_token(token, region)
        if response.is_success:
            await self.credentials.set_user_token(token)
        return decode(response, TokenInfo)

    # ------------------------------------------------------------------
    # Legacy
    # ------------------------------------------------------------------

    async def set_api_key_legacy(self, api_key: str) -> None:
        """
        Store the API key used by community endpoints.

        Deprecated: the community API was replaced by OAuth game data and
        profile endpoints.
        """
        logger.warning("Community API keys are deprecated; prefer OAuth access tokens")
        await self.credentials.set_api_key(api_key)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    async def _check_token(self, token: str, region: Optional[Region]) -> Result[bytes]:
        region = Region(region or self.region)
        built = self._builder.build(
            region.check_token_uri,
            method="POST",
            api_type=APIType.OAUTH,
            query={"token": token}
        )
        if built.is_failure:
            return Result.failure(built.error)

        response = await self.transport.send(built.value)
        if response.is_failure:
            logger.warning(f"Token validation failed: {response.error.message}")
        return response

    async def _request_token(
        self,
        url: str,
        query: Optional[dict] = None,
        form: Optional[dict] = None
    ) -> Result[AccessToken]:
        built = self._builder.build(
            url,
            method="POST",
            api_type=APIType.OAUTH,
            query=query,
            body=form,
            form=form is not None
        )
        if built.is_failure:
            return Result.failure(built.error)

        response = await self.transport.send(built.value)
        if response.is_failure:
            logger.warning(f"Token request failed: {response.error.message}")
            return Result.failure(response.error)

        # A non-object payload is the wrong shape, a missing field a decode error
        payload = decode_json_object(response)
        if payload.is_failure:
            return Result.failure(payload.error)
        return decode(response, AccessToken)
