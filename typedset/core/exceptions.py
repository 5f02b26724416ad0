from __future__ import annotations

from enum import Enum
from typing import Any, Optional


class CapabilityErrorKind(str, Enum):
    """
    Reason a capability descriptor was rejected.

    Using str Enum keeps the kind comparable with plain strings.
    """

    NOT_STRING = "NOT_STRING"
    NOT_COLLECTABLE = "NOT_COLLECTABLE"


class CollectionError(Exception):
    """
    Base exception for all collection-related failures.
    """

    pass


class CollectionConfigurationError(CollectionError, ValueError):
    """
    Raised when collection configuration is invalid.
    """

    pass


class InvalidCapabilityError(CollectionError, TypeError):
    """
    Raised at construction time when the capability descriptor is unusable.
    """

    def __init__(self, message: str, *, kind: CapabilityErrorKind, descriptor: Any = None):
        super().__init__(message)
        self.kind = kind
        self.descriptor = descriptor


class InvalidCollectableError(CollectionError, TypeError):
    """
    Raised when an object does not satisfy the collection's capability.
    """

    def __init__(self, message: str, *, expected: str, received: Optional[type] = None):
        super().__init__(message)
        self.expected = expected
        self.received = received


class NotFoundError(CollectionError, KeyError):
    """
    Raised when removing an object or key that is not in the collection.
    """

    def __init__(self, message: str, *, key: str):
        super().__init__(message)
        self.key = key

    def __str__(self) -> str:
        # KeyError would repr() the message
        return str(self.args[0]) if self.args else ""
