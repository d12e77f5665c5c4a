"""
Battle.net API Client

Composes the transport, credential store, request builder and authenticator
and runs catalog endpoints through them.
"""

import logging
from typing import Any, Iterable, Optional, Union

from ....core.config import BattleNetSettings, ConfigLoader
from ....core.constants import APIType, Locale, Namespace, Region, Scope
from ....core.exceptions import ErrorType, HTTPError
from ....core.protocols import TransportProtocol
from ....core.result import Result
from ..auth.authenticator import Authenticator
from ..auth.credential_store import CredentialStore
from ..base_client import Transport
from ..decoding import decode
from ..request_builder import RequestBuilder
from . import sc2_catalog, wow_catalog
from .endpoints import Endpoint, EndpointRegistry

logger = logging.getLogger(__name__)

REGISTRY = EndpointRegistry()
REGISTRY.register(*wow_catalog.ENDPOINTS, *sc2_catalog.ENDPOINTS)


class BattleNetClient:
    """Battle.net API client."""

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        region: Region = Region.US,
        locale: Optional[Locale] = None,
        transport: Optional[TransportProtocol] = None,
        credentials: Optional[CredentialStore] = None,
        redirect_uri: Optional[str] = None,
        registry: Optional[EndpointRegistry] = None,
        debug: bool = False,
        scopes: Optional[Iterable[Scope]] = None
    ):
        """
        Initialize Battle.net client.

        Args:
            client_id: Battle.net application client ID
            client_secret: Battle.net application client secret
            region: Default region of every call
            locale: Default ``locale`` query parameter, omitted when ``None``
            transport: Transport to send with; the client creates and owns one when omitted
            credentials: Token store shared with the authenticator
            redirect_uri: Default redirect of the authorization code flow
            registry: Endpoints addressable by name, the built-in catalog when omitted
            debug: Use debug descriptions in ``error_message``
            scopes: Default scopes of the authorization code flow
        """
        self.region = Region(region)
        self.locale = Locale(locale) if locale else None
        self.debug = debug
        self.registry = registry or REGISTRY

        self._owns_transport = transport is None
        self.transport = transport or Transport()
        self.credentials = credentials or CredentialStore()
        self.builder = RequestBuilder(self.credentials)
        self.auth = Authenticator(
            client_id=client_id,
            client_secret=client_secret,
            transport=self.transport,
            credentials=self.credentials,
            region=self.region,
            redirect_uri=redirect_uri,
            scopes=scopes
        )

    @classmethod
    def from_settings(cls, settings: Optional[BattleNetSettings] = None) -> "BattleNetClient":
        """Build a client from configuration, loading it when not given."""
        settings = settings or ConfigLoader.load_config()
        client = cls(
            client_id=settings.client_id,
            client_secret=settings.client_secret,
            region=settings.region,
            locale=settings.locale,
            transport=Transport(timeout=settings.timeout),
            credentials=CredentialStore(api_key=settings.api_key),
            redirect_uri=settings.redirect_uri,
            debug=settings.debug,
            scopes=settings.scopes
        )
        client._owns_transport = True
        return client

    async def __aenter__(self):
        """Enter async context."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Exit async context."""
        await self.close()

    async def close(self) -> None:
        """Close the transport if this client created it."""
        if self._owns_transport:
            await self.transport.close()

    async def authenticate(self) -> Result:
        """Acquire a client token for game data calls."""
        return await self.auth.get_client_access_token(self.region)

    def endpoint(self, name: str) -> Endpoint:
        """
        Look up an endpoint by qualified (``"wow.realm"``) or WoW-relative name.

        Raises:
            KeyError: If no such endpoint exists
        """
        if name not in self.registry and "." not in name:
            name = f"wow.{name}"
        return self.registry.get(name)

    async def execute(
        self,
        endpoint: Union[Endpoint, str],
        *,
        region: Optional[Region] = None,
        locale: Optional[Locale] = None,
        namespace: Optional[Namespace] = None,
        **params: Any
    ) -> Result[Any]:
        """
        Call an endpoint and decode its response.

        Invalid parameters and requests that cannot be built fail without
        touching the network.

        Args:
            endpoint: Endpoint or its name
            region: Overrides the client region
            locale: Overrides the client locale
            namespace: Overrides the endpoint namespace
            **params: Path and query parameters of the endpoint

        Returns:
            Result carrying the decoded response; an unknown endpoint name
            is a ``malformed_request`` failure
        """
        if isinstance(endpoint, str):
            try:
                endpoint = self.endpoint(endpoint)
            except KeyError:
                logger.warning(f"Unknown endpoint: {endpoint}")
                return Result.failure(HTTPError.of(
                    ErrorType.MALFORMED_REQUEST,
                    f"Unknown endpoint: {endpoint}"
                ))
        region = Region(region or self.region)

        try:
            path, query = endpoint.resolve(params)
        except HTTPError as e:
            logger.warning(f"Rejected {endpoint.qualified_name}: {e.message}")
            return Result.failure(e)

        built = self.builder.build(
            region.api_uri + path,
            method=endpoint.method,
            api_type=endpoint.api_type,
            locale=locale or self.locale,
            namespace=namespace or endpoint.namespace,
            region=region,
            query=query
        )
        if built.is_failure:
            logger.warning(f"Could not build {endpoint.qualified_name}: {built.error.message}")
            return Result.failure(built.error)

        response = await self.transport.send(built.value)
        return decode(response, endpoint.schema, endpoint.extract)

    async def get_resource(
        self,
        href: str,
        schema: Any = dict,
        api_type: APIType = APIType.GAME_DATA,
        locale: Optional[Locale] = None
    ) -> Result[Any]:
        """
        Follow a ``href`` found in another response.

        Links returned by the API already carry their namespace; only the
        locale is appended.
        """
        built = self.builder.build(
            href,
            api_type=api_type,
            locale=locale or self.locale
        )
        if built.is_failure:
            return Result.failure(built.error)

        response = await self.transport.send(built.value)
        return decode(response, schema)

    def error_message(self, error: HTTPError) -> str:
        """Message for ``error``, the debug description in debug mode."""
        return error.display_message(debug=self.debug)
