from __future__ import annotations

from typing import Any, Iterable, Iterator, List, Protocol, runtime_checkable


# ------------------------------
# Collection Interface / Protocol
# ------------------------------

@runtime_checkable
class CollectionInterface(Protocol):
    """
    Protocol all typed collections implement.
    """

    def get_item_class(self) -> str:
        """
        Return the capability descriptor the collection was created with.
        """
        ...

    def add(self, obj: Any) -> None: ...

    def add_all(self, other: Iterable[Any]) -> None: ...

    def contains(self, obj: Any) -> bool: ...

    def is_empty(self) -> bool: ...

    def remove(self, obj: Any) -> None: ...

    def remove_all(self, other: Iterable[Any]) -> None: ...

    def remove_all_except(self, other: Iterable[Any]) -> None:
        """
        Keep only the items also found in other, in other's order.
        """
        ...

    def clear(self) -> None: ...

    def to_list(self) -> List[Any]: ...

    def count(self) -> int: ...

    def __len__(self) -> int: ...

    def __iter__(self) -> Iterator[Any]: ...
