"""
Core

Constants, configuration, error taxonomy and the Result type.
"""

from .constants import APIType, Game, Locale, Namespace, Region, Scope
from .exceptions import BattleNetError, ConfigurationError, ErrorType, HTTPError
from .result import Result

__all__ = [
    "APIType",
    "Game",
    "Locale",
    "Namespace",
    "Region",
    "Scope",
    "BattleNetError",
    "ConfigurationError",
    "ErrorType",
    "HTTPError",
    "Result",
]
