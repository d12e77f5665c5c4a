"""
Core Protocol Definitions

This module defines the interfaces that all implementations must follow.
"""

from .transport_protocol import TransportProtocol
from .oauth_protocol import OAuthProtocol

__all__ = [
    "TransportProtocol",
    "OAuthProtocol",
]
