"""
Configuration Loader

Handles loading and validation of configuration.
"""

import logging
from typing import Optional, Dict, Any

from pydantic import ValidationError

from ..exceptions import ConfigurationError
from .settings import BattleNetSettings

logger = logging.getLogger(__name__)


class ConfigLoader:
    """Loads and manages SDK configuration."""

    _instance: Optional['ConfigLoader'] = None
    _settings: Optional[BattleNetSettings] = None

    def __new__(cls):
        """Singleton pattern implementation."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @classmethod
    def load_config(
        cls,
        env_file: Optional[str] = None,
        overrides: Optional[Dict[str, Any]] = None
    ) -> BattleNetSettings:
        """
        Load configuration from environment and files.

        Args:
            env_file: Path to .env file
            overrides: Dictionary of config overrides

        Returns:
            Loaded settings

        Raises:
            ConfigurationError: If required values are missing or invalid
        """
        if cls._settings is not None:
            return cls._settings

        kwargs: Dict[str, Any] = dict(overrides or {})
        if env_file:
            kwargs["_env_file"] = env_file

        try:
            cls._settings = BattleNetSettings(**kwargs)
        except ValidationError as e:
            logger.error(f"Failed to load configuration: {e}")
            keys = ", ".join(
                ".".join(str(part) for part in err["loc"]) for err in e.errors()
            )
            raise ConfigurationError(
                f"Invalid Battle.net configuration: {keys}",
                config_key=keys or None,
                details={"errors": e.errors(include_url=False)}
            ) from e

        logger.info(
            f"Configuration loaded successfully "
            f"(debug={cls._settings.debug})"
        )
        cls._log_config_info()

        return cls._settings

    @classmethod
    def get_settings(cls) -> BattleNetSettings:
        """
        Get current settings instance.

        Raises:
            ConfigurationError: If config not loaded
        """
        if cls._settings is None:
            raise ConfigurationError(
                "Configuration not loaded. Call load_config() first."
            )
        return cls._settings

    @classmethod
    def reload_config(
        cls,
        env_file: Optional[str] = None,
        overrides: Optional[Dict[str, Any]] = None
    ) -> BattleNetSettings:
        """Drop the cached settings and load them again."""
        cls._settings = None
        return cls.load_config(env_file, overrides)

    @classmethod
    def reset(cls) -> None:
        cls._settings = None

    @classmethod
    def _log_config_info(cls) -> None:
        """Log non-sensitive configuration information."""
        if not cls._settings:
            return

        locale = cls._settings.locale.value if cls._settings.locale else "none"
        logger.info(f"Region: {cls._settings.region.value}")
        logger.info(f"Locale: {locale}")
        logger.info(f"Scopes: {' '.join(s.value for s in cls._settings.scopes)}")

    @classmethod
    def validate_config(cls) -> bool:
        """
        Validate current configuration.

        Returns:
            True if config is valid
        """
        if not cls._settings:
            logger.error("No configuration loaded")
            return False

        required_checks = [
            (cls._settings.client_id, "Battle.net Client ID"),
            (cls._settings.client_secret, "Battle.net Client Secret"),
        ]

        for value, name in required_checks:
            if not value:
                logger.error(f"Missing required config: {name}")
                return False

        redirect_uri = cls._settings.redirect_uri
        if redirect_uri and "://" not in redirect_uri:
            logger.error(f"Invalid redirect URI format: {redirect_uri}")
            return False

        return True


# Convenience function
def get_settings() -> BattleNetSettings:
    """Get current settings instance."""
    return ConfigLoader.get_settings()
