from __future__ import annotations

import importlib
from abc import ABC
from typing import Any, List, Optional
from weakref import WeakValueDictionary

from typedset.core.exceptions import CapabilityErrorKind, InvalidCapabilityError

# "<module>.<qualname>" -> class, for every concrete subclass of Collectable
_REGISTRY: "WeakValueDictionary[str, type]" = WeakValueDictionary()


def capability_name(cls: type) -> str:
    """Return the canonical descriptor string for a class."""
    return f"{cls.__module__}.{cls.__qualname__}"


class Collectable(ABC):
    """
    Marker for objects that may be stored in a TypedSet.

    There are no required methods. Classes opt in by subclassing, or by
    Collectable.register(cls) for types that cannot inherit from it.
    """

    __slots__ = ()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        _REGISTRY[capability_name(cls)] = cls


def _not_collectable(name: str, reason: str) -> InvalidCapabilityError:
    return InvalidCapabilityError(
        f"Item class must extend or implement {capability_name(Collectable)}: {name!r} {reason}",
        kind=CapabilityErrorKind.NOT_COLLECTABLE,
        descriptor=name,
    )


def _lookup_registered(name: str) -> Optional[type]:
    cls = _REGISTRY.get(name)
    if cls is not None:
        return cls

    matches: List[type] = [
        c for c in list(_REGISTRY.values()) if name in (c.__qualname__, c.__name__)
    ]
    if len(matches) > 1:
        raise _not_collectable(name, "is ambiguous; use the full module path")
    return matches[0] if matches else None


def _get_path(obj: Any, path: str) -> Any:
    for part in path.split("."):
        obj = getattr(obj, part)
    return obj


def _check_dotted(path: str) -> None:
    # rejects empty segments, so relative module names never reach importlib
    if not all(part.isidentifier() for part in path.split(".")):
        raise ImportError(f"Not a dotted name: {path!r}")


def _import_object(name: str) -> Any:
    """Import "pkg.mod.Class" or "pkg.mod:Outer.Inner"."""
    if ":" in name:
        module_name, _, attr_path = name.partition(":")
        _check_dotted(module_name)
        _check_dotted(attr_path)
        module = importlib.import_module(module_name)
        return _get_path(module, attr_path)

    _check_dotted(name)
    parts = name.split(".")
    # Longest importable module prefix wins
    for i in range(len(parts) - 1, 0, -1):
        module_name = ".".join(parts[:i])
        try:
            module = importlib.import_module(module_name)
        except ModuleNotFoundError:
            continue
        return _get_path(module, ".".join(parts[i:]))

    raise ImportError(f"No importable module in {name!r}")


def require_string(name: Any) -> str:
    """Return name unchanged, or raise NOT_STRING for anything but a str."""
    if not isinstance(name, str):
        raise InvalidCapabilityError(
            f"Item class must be string, {type(name).__name__} given.",
            kind=CapabilityErrorKind.NOT_STRING,
            descriptor=name,
        )
    return name


def resolve_capability(name: str) -> type:
    """Resolve a capability descriptor string to a Collectable subclass.

    Lookup order: exact registry name, unique bare class name, import path.
    The Collectable marker itself is not a valid capability.
    """

    require_string(name)

    cls = _lookup_registered(name)
    if cls is None:
        # any failure while importing means the name resolves to no type
        try:
            cls = _import_object(name)
        except Exception as exc:
            raise _not_collectable(name, "could not be resolved") from exc

    if not isinstance(cls, type):
        raise _not_collectable(name, "is not a class")
    if cls is Collectable or not issubclass(cls, Collectable):
        raise _not_collectable(name, "is not a subclass of it")
    return cls
