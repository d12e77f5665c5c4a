"""
OAuth Protocol Definition

Protocol for the Battle.net OAuth2 flows.
"""

from typing import Protocol, Iterable, Optional, runtime_checkable

from ..constants import Region, Scope
from ..result import Result


@runtime_checkable
class OAuthProtocol(Protocol):
    """Protocol for OAuth2 authentication."""

    async def get_client_access_token(self, region: Optional[Region] = None) -> Result:
        """
        Get an application access token (client credentials flow).

        Returns:
            Result carrying the decoded token response
        """
        ...

    async def authorization_url(
        self,
        scopes: Optional[Iterable[Scope]] = None,
        redirect_uri: Optional[str] = None,
        region: Optional[Region] = None
    ) -> str:
        """
        Build the page the user logs in on (authorization code flow).

        Args:
            scopes: Scopes requested from the user, the configured ones when omitted
            redirect_uri: Where Battle.net redirects with the code

        Returns:
            Authorize URL with a fresh state value
        """
        ...

    async def get_user_access_token(
        self,
        code: str,
        redirect_uri: Optional[str] = None,
        region: Optional[Region] = None
    ) -> Result:
        """
        Exchange an authorization code for a user access token.

        Returns:
            Result carrying the decoded token response
        """
        ...

    async def validate_client_access_token(self, token: str, region: Optional[Region] = None) -> Result:
        ...

    async def validate_user_access_token(self, token: str, region: Optional[Region] = None) -> Result:
        ...
