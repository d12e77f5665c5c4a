"""
Battle.net API SDK

Async client for the Battle.net OAuth, game data, profile and community APIs.
"""

__version__ = "1.0.0"

# Public API exports
from .core import (
    APIType,
    BattleNetError,
    ConfigurationError,
    ErrorType,
    Game,
    HTTPError,
    Locale,
    Namespace,
    Region,
    Result,
    Scope,
)
from .core.config import BattleNetSettings, ConfigLoader
from .infrastructure.api import Transport
from .infrastructure.api.auth import Authenticator, CredentialStore
from .infrastructure.api.blizzard import BattleNetClient, Endpoint

__all__ = [
    "APIType",
    "BattleNetError",
    "ConfigurationError",
    "ErrorType",
    "Game",
    "HTTPError",
    "Locale",
    "Namespace",
    "Region",
    "Result",
    "Scope",
    "BattleNetSettings",
    "ConfigLoader",
    "Transport",
    "Authenticator",
    "CredentialStore",
    "BattleNetClient",
    "Endpoint",
]
