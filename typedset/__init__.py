"""Typed, identity-keyed object collections.

A TypedSet stores objects of one Collectable capability, keyed by an
identity hash, with union, difference and intersection-retain operations.
"""

from .config import CollectionConfig, configure_logging, load_config
from .core.capabilities import ItemCapability
from .core.collectable import Collectable, capability_name, resolve_capability
from .core.contracts import CollectionInterface
from .core.exceptions import (
    CapabilityErrorKind,
    CollectionConfigurationError,
    CollectionError,
    InvalidCapabilityError,
    InvalidCollectableError,
    NotFoundError,
)
from .core.hashing import HASH_STRATEGIES, identity_hash, resolve_hash_strategy, value_hash
from .core.typed_set import TypedSet

__all__ = [
    "TypedSet",
    "Collectable",
    "CollectionInterface",
    "ItemCapability",
    "capability_name",
    "resolve_capability",
    "CollectionConfig",
    "load_config",
    "configure_logging",
    "HASH_STRATEGIES",
    "identity_hash",
    "value_hash",
    "resolve_hash_strategy",
    "CollectionError",
    "CollectionConfigurationError",
    "CapabilityErrorKind",
    "InvalidCapabilityError",
    "InvalidCollectableError",
    "NotFoundError",
]
