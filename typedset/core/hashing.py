from __future__ import annotations

import hashlib
import json
from typing import Any, Callable, Dict

from typedset.core.exceptions import CollectionConfigurationError
from typedset.utils.json_safe import to_jsonable

HashFunc = Callable[[Any], str]


def identity_hash(obj: Any) -> str:
    """
    Return a 32 character hex key derived from the identity of obj.

    Two distinct live objects never share a key. A key may be reused after
    the object is garbage collected, so it is only meaningful while the
    object is referenced (a collection always holds a reference).
    """
    return format(id(obj), "032x")


def value_hash(obj: Any) -> str:
    """
    Compute a deterministic key from the value of obj.

    Objects of the same type with equal fields share a key.
    """
    serialized = json.dumps(to_jsonable(obj), sort_keys=True, separators=(",", ":"))
    return hashlib.sha256(serialized.encode("utf-8")).hexdigest()


HASH_STRATEGIES: Dict[str, HashFunc] = {
    "identity": identity_hash,
    "value": value_hash,
}


def resolve_hash_strategy(name: str) -> HashFunc:
    """Look up a named hash strategy."""
    try:
        return HASH_STRATEGIES[name]
    except KeyError:
        known = ", ".join(sorted(HASH_STRATEGIES))
        raise CollectionConfigurationError(
            f"Unknown hash strategy {name!r} (expected one of: {known})"
        ) from None
