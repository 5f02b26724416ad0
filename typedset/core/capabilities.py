from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from typedset.core.collectable import require_string, resolve_capability
from typedset.core.exceptions import CapabilityErrorKind, InvalidCapabilityError


@dataclass(frozen=True)
class ItemCapability:
    """
    Immutable capability descriptor of a collection.

    Invariants
    - name is the descriptor exactly as given by the caller
    - item_type is a strict Collectable subclass resolved from name
    """

    name: str
    item_type: type = field(compare=False)

    @classmethod
    def parse(cls, name: Any) -> "ItemCapability":
        normalized = require_string(name).strip()
        if not normalized:
            raise InvalidCapabilityError(
                "Item class must be non-empty",
                kind=CapabilityErrorKind.NOT_COLLECTABLE,
                descriptor=name,
            )

        return cls(name=name, item_type=resolve_capability(normalized))

    def matches(self, obj: Any) -> bool:
        return isinstance(obj, self.item_type)
