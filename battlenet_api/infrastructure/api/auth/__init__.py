"""
Battle.net OAuth

Token acquisition, validation and storage.
"""

from .authenticator import Authenticator
from .credential_store import CredentialSnapshot, CredentialStore
from .models import AccessToken, TokenInfo

__all__ = [
    "Authenticator",
    "CredentialSnapshot",
    "CredentialStore",
    "AccessToken",
    "TokenInfo",
]
