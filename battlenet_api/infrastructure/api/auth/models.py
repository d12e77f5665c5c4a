"""
OAuth Models

Pydantic models for the Battle.net OAuth token responses.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class AccessToken(BaseModel):
    """Response of the token endpoint."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    access_token: str
    token_type: Optional[str] = None
    expires_in: Optional[int] = None
    scope: Optional[str] = None
    sub: Optional[str] = None


class TokenInfo(BaseModel):
    """Response of the check token endpoint."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    client_id: Optional[str] = None
    exp: Optional[int] = None
    authorities: List[str] = Field(default_factory=list)
    scope: List[str] = Field(default_factory=list)
    user_name: Optional[str] = None
