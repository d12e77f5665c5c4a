"""
API Infrastructure

Request building, transport and response decoding.
"""

from .auth import Authenticator, CredentialStore
from .base_client import Transport, classify_response
from .decoding import decode, decode_json_object, encode
from .request_builder import APIRequest, RequestBuilder

__all__ = [
    # OAuth
    "Authenticator",
    "CredentialStore",

    # Transport
    "Transport",
    "classify_response",

    # Requests
    "APIRequest",
    "RequestBuilder",

    # Decoding
    "decode",
    "decode_json_object",
    "encode",
]
