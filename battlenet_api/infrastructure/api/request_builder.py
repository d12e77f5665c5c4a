"""
Request Builder

Turns a URL, an API classification and stored credentials into a fully
described request.
"""

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple
from urllib.parse import urlencode

import httpx

from ...core.constants import (
    APIType,
    FORM_CONTENT_TYPE,
    JSON_CONTENT_TYPE,
    Locale,
    NAMESPACE_HEADER,
    Namespace,
    Region,
)
from ...core.exceptions import ErrorType, HTTPError
from ...core.result import Result
from .auth.credential_store import CredentialStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class APIRequest:
    """Immutable description of one request."""

    method: str
    url: str
    headers: Dict[str, str] = field(default_factory=dict)
    content: Optional[bytes] = None

    @property
    def path(self) -> str:
        return httpx.URL(self.url).path


class RequestBuilder:
    """Builds requests authorized according to their ``APIType``."""

    def __init__(self, credentials: CredentialStore):
        self.credentials = credentials

    def build(
        self,
        url: str,
        method: str = "GET",
        api_type: Optional[APIType] = None,
        body: Any = None,
        locale: Optional[Locale] = None,
        namespace: Optional[Namespace] = None,
        region: Optional[Region] = None,
        query: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
        form: bool = False
    ) -> Result[APIRequest]:
        """
        Build a request description.

        Args:
            url: Absolute URL, may already carry query parameters
            method: HTTP method
            api_type: Decides which credential is attached
            body: JSON-serializable body, or a mapping when ``form`` is set
            locale: Appended as the ``locale`` query parameter
            namespace: Sent as the namespace header for ``region``
            region: Region qualifying the namespace
            query: Endpoint-specific query parameters; ``None`` values are dropped
            headers: Extra headers
            form: Encode ``body`` as ``application/x-www-form-urlencoded``

        Returns:
            The request, or a failure when it cannot be built or the
            required credential is missing
        """
        params = []
        if locale is not None:
            params.append(("locale", Locale(locale).value))
        for key, value in (query or {}).items():
            if value is not None:
                params.append((key, self._query_value(value)))

        auth = self._authorization(api_type)
        if auth.is_failure:
            return Result.failure(auth.error)
        auth_header, extra_params = auth.value
        params.extend(extra_params)

        try:
            parsed = httpx.URL(url)
            if not parsed.scheme or not parsed.host:
                raise httpx.InvalidURL(f"Not an absolute URL: {url}")
            if params:
                parsed = parsed.copy_merge_params(params)
        except httpx.InvalidURL as e:
            return Result.failure(HTTPError.of(
                ErrorType.MALFORMED_REQUEST,
                details={"url": url},
                original_exception=e
            ))

        request_headers = {
            "Content-Type": JSON_CONTENT_TYPE,
            "Accept": JSON_CONTENT_TYPE,
        }
        if namespace is not None:
            if region is None:
                return Result.failure(HTTPError.of(
                    ErrorType.MALFORMED_REQUEST,
                    "A namespace requires a region"
                ))
            request_headers[NAMESPACE_HEADER] = Namespace(namespace).header_value(region)
        if auth_header:
            request_headers["Authorization"] = auth_header
        request_headers.update(headers or {})

        content = None
        if body is not None:
            try:
                if form:
                    content = urlencode(body).encode("utf-8")
                    request_headers["Content-Type"] = FORM_CONTENT_TYPE
                elif isinstance(body, bytes):
                    content = body
                else:
                    content = json.dumps(body).encode("utf-8")
            except (TypeError, ValueError) as e:
                return Result.failure(HTTPError.of(
                    ErrorType.MALFORMED_BODY,
                    original_exception=e
                ))

        return Result.success(APIRequest(
            method=method.upper(),
            url=str(parsed),
            headers=request_headers,
            content=content
        ))

    def _authorization(self, api_type: Optional[APIType]) -> Result[Tuple[Optional[str], list]]:
        """Authorization header and extra query parameters for ``api_type``."""
        creds = self.credentials.snapshot()

        if api_type == APIType.PROFILE:
            if not creds.user_token:
                return Result.failure(HTTPError.of(
                    ErrorType.UNAUTHORIZED,
                    "No user access token. Complete the OAuth login before calling profile endpoints."
                ))
            return Result.success((f"Bearer {creds.user_token}", []))

        if api_type == APIType.GAME_DATA:
            if not creds.client_token:
                return Result.failure(HTTPError.of(
                    ErrorType.UNAUTHORIZED,
                    "No client access token. Request one before calling game data endpoints."
                ))
            return Result.success((f"Bearer {creds.client_token}", []))

        if api_type == APIType.OAUTH and creds.basic_credentials:
            return Result.success((f"Basic {creds.basic_credentials}", []))

        if api_type == APIType.COMMUNITY and creds.api_key:
            return Result.success((None, [("apikey", creds.api_key)]))

        return Result.success((None, []))

    @staticmethod
    def _query_value(value: Any) -> str:
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (list, tuple, set, frozenset)):
            return ",".join(str(item) for item in value)
        if hasattr(value, "value"):
            return str(value.value)
        return str(value)
