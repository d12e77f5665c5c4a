"""
SDK Settings

Configuration classes using Pydantic for validation.
"""

from typing import Annotated, List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from ..constants import Locale, Region, Scope


class BattleNetSettings(BaseSettings):
    """Battle.net client settings, read from ``BATTLENET_*`` variables."""

    model_config = SettingsConfigDict(
        env_prefix="BATTLENET_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    client_id: str = Field(
        ...,
        description="Battle.net application client ID"
    )
    client_secret: str = Field(
        ...,
        description="Battle.net application client secret"
    )
    region: Region = Field(
        default=Region.US,
        description="Default API region"
    )
    locale: Optional[Locale] = Field(
        default=None,
        description="Locale appended to every call, omitted when unset"
    )
    redirect_uri: Optional[str] = Field(
        default=None,
        description="OAuth redirect registered for the application"
    )
    scopes: Annotated[List[Scope], NoDecode] = Field(
        default=[Scope.WOW_PROFILE],
        description="Scopes requested from the user"
    )
    api_key: Optional[str] = Field(
        default=None,
        description="Deprecated community API key"
    )
    timeout: Optional[float] = Field(
        default=None,
        description="Request timeout in seconds (httpx default when unset)"
    )
    debug: bool = Field(
        default=False,
        description="Show verbose error descriptions"
    )

    @field_validator("region", mode="before")
    @classmethod
    def validate_region(cls, v):
        """Validate region value."""
        value = v.value if isinstance(v, Region) else str(v).lower()
        valid_regions = {region.value for region in Region}
        if value not in valid_regions:
            raise ValueError(
                f"Invalid region: {v}. Must be one of {sorted(valid_regions)}"
            )
        return value

    @field_validator("locale", mode="before")
    @classmethod
    def empty_locale_is_none(cls, v):
        if v == "":
            return None
        return v

    @field_validator("scopes", mode="before")
    @classmethod
    def split_scopes(cls, v):
        """Accept a space or comma separated string."""
        if isinstance(v, str):
            return [s for s in v.replace(",", " ").split() if s]
        return v
