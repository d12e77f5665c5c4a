"""
Configuration Management

Centralized configuration for the SDK.
"""

from .settings import BattleNetSettings
from .loader import ConfigLoader, get_settings

__all__ = [
    "BattleNetSettings",
    "ConfigLoader",
    "get_settings",
]
