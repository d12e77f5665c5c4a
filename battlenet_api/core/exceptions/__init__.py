"""
Core Exceptions

Exception classes and error taxonomy for the SDK.
"""

from .base import (
    BattleNetError,
    ErrorType,
    HTTPError,
    ConfigurationError,
)

__all__ = [
    "BattleNetError",
    "ErrorType",
    "HTTPError",
    "ConfigurationError",
]
