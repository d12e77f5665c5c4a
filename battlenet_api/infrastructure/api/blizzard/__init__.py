"""
Battle.net API

Endpoint catalog and the client that runs it.
"""

from .client import REGISTRY, BattleNetClient
from .endpoints import Endpoint, EndpointRegistry
from .models import (
    ConnectedRealm,
    ConnectedRealmIndex,
    KeyLink,
    Link,
    Realm,
    RealmIndex,
    SelfLink,
    Specialization,
    WOWCharacter,
    WOWRealm,
)
from .sc2_models import SC2Reward

__all__ = [
    # Client
    "BattleNetClient",
    "REGISTRY",

    # Catalog
    "Endpoint",
    "EndpointRegistry",

    # Models
    "ConnectedRealm",
    "ConnectedRealmIndex",
    "KeyLink",
    "Link",
    "Realm",
    "RealmIndex",
    "SelfLink",
    "Specialization",
    "WOWCharacter",
    "WOWRealm",
    "SC2Reward",
]
