from __future__ import annotations

import logging
from typing import Any, Dict, Generic, Iterable, Iterator, List, Optional, Self, TypeVar

from typedset.config import CollectionConfig, load_config
from typedset.core.capabilities import ItemCapability
from typedset.core.collectable import Collectable, capability_name
from typedset.core.exceptions import InvalidCollectableError, NotFoundError
from typedset.core.hashing import HashFunc, resolve_hash_strategy

log = logging.getLogger("typedset.collection")

T = TypeVar("T", bound=Collectable)


class TypedSet(Generic[T]):
    """
    Mutable set of objects that all satisfy one Collectable capability.

    Items are keyed by get_item_hash(obj), which defaults to the object's
    identity. Iteration yields the stored objects in insertion order.

    Invariants
    - Every stored object is an instance of the capability's class
    - The capability descriptor never changes after construction
    - Bulk operations stop at the first error and keep what was applied

    Complexity
    - add / contains / remove / indexed access: O(1) average
    - add_all / remove_all / remove_all_except / to_list: O(n)
    """

    def __init__(
        self,
        capability: str,
        *,
        hash_func: Optional[HashFunc] = None,
        config: Optional[CollectionConfig] = None,
    ):
        self._capability = ItemCapability.parse(capability)
        if hash_func is None:
            cfg = config or load_config()
            hash_func = resolve_hash_strategy(cfg.hash_strategy)
        self._hash_func = hash_func
        self._items: Dict[str, T] = {}

        log.debug("created %s for %s", type(self).__name__, self._capability.name)

    @classmethod
    def of(cls, item_type: type, **kwargs: Any) -> Self:
        """Create a collection for a Collectable class."""
        return cls(capability_name(item_type), **kwargs)

    # ------------------------------
    # Identity
    # ------------------------------

    def get_item_hash(self, obj: T) -> str:
        """Return the key obj is stored under. Override to change indexing."""
        return self._hash_func(obj)

    def get_item_class(self) -> str:
        return self._capability.name

    @property
    def item_type(self) -> type:
        return self._capability.item_type

    # ------------------------------
    # Single-item operations
    # ------------------------------

    def add(self, obj: T) -> None:
        self._validate(obj)
        self._items[self.get_item_hash(obj)] = obj

    def contains(self, obj: T) -> bool:
        self._validate(obj)
        return self.exists(self.get_item_hash(obj))

    def remove(self, obj: T) -> None:
        self._validate(obj)
        self.delete(self.get_item_hash(obj))

    def is_empty(self) -> bool:
        return not self._items

    def clear(self) -> None:
        self._items.clear()

    def count(self) -> int:
        return len(self._items)

    # ------------------------------
    # Bulk operations
    # ------------------------------

    def add_all(self, other: Iterable[T]) -> None:
        """Add every item of other. Not transactional."""
        items = list(other)
        log.debug("add_all: %d item(s)", len(items))
        for obj in items:
            self.add(obj)

    def remove_all(self, other: Iterable[T]) -> None:
        """Remove every item of other. Not transactional."""
        items = list(other)
        log.debug("remove_all: %d item(s)", len(items))
        for obj in items:
            self.remove(obj)

    def remove_all_except(self, other: Iterable[T]) -> None:
        """Keep only the items also contained in other.

        The surviving items are reordered to follow other's iteration order.
        """
        intersection = [obj for obj in list(other) if self.contains(obj)]

        self.clear()
        for obj in intersection:
            self._items[self.get_item_hash(obj)] = obj

        log.debug("remove_all_except: kept %d item(s)", len(self._items))

    # ------------------------------
    # Export
    # ------------------------------

    def to_list(self) -> List[T]:
        return list(self._items.values())

    def to_dict(self) -> Dict[str, T]:
        """Return a copy of the key -> object mapping."""
        return dict(self._items)

    # ------------------------------
    # Indexed access
    # ------------------------------

    def exists(self, key: str) -> bool:
        return key in self._items

    def get(self, key: str) -> Optional[T]:
        """Return the object stored at key, or None."""
        return self._items.get(key)

    def set(self, key: str, obj: T) -> None:
        """Store obj at key, bypassing get_item_hash."""
        self._validate(obj)
        self._items[key] = obj

    def delete(self, key: str) -> None:
        if key not in self._items:
            raise NotFoundError(f"Item #{key} not found in the collection.", key=key)
        del self._items[key]

    # ------------------------------
    # Python protocols
    # ------------------------------

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        # iterates a snapshot; the collection may be mutated during the loop
        return iter(list(self._items.values()))

    def __contains__(self, obj: object) -> bool:
        return self.contains(obj)  # type: ignore[arg-type]

    def __getitem__(self, key: str) -> Optional[T]:
        return self.get(key)

    def __setitem__(self, key: str, obj: T) -> None:
        self.set(key, obj)

    def __delitem__(self, key: str) -> None:
        self.delete(key)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._capability.name!r}, count={len(self._items)})"

    def _validate(self, obj: Any) -> None:
        if not self._capability.matches(obj):
            raise InvalidCollectableError(
                f"{type(self).__name__} can contain only {self._capability.name} instances!",
                expected=self._capability.name,
                received=type(obj),
            )
