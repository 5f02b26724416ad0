from __future__ import annotations

import base64
from dataclasses import fields, is_dataclass
from datetime import date, datetime
from enum import Enum
from pathlib import Path
from typing import Any, Mapping, Optional, Set

from pydantic import BaseModel


def type_tag(obj: Any) -> str:
    """Return "<module>.<qualname>" for the type of obj."""
    cls = type(obj)
    return f"{cls.__module__}.{cls.__qualname__}"


def to_jsonable(obj: Any, _active: Optional[Set[int]] = None) -> Any:
    """
    Convert common Python objects to JSON-serializable equivalents.

    Structured objects (dataclasses, pydantic models, plain instances) are
    tagged with their type so that equal fields of different types stay
    distinguishable.

    - bytes are base64-encoded.
    - an object reached again through its own fields (a reference cycle) is
      emitted as {"__ref__": <type tag>} instead of being expanded.
    - does NOT execute or import anything dynamically.
    """
    if isinstance(obj, Enum):
        return to_jsonable(obj.value, _active)

    if obj is None or isinstance(obj, (str, int, float, bool)):
        return obj

    # datetime/date -> ISO 8601
    if isinstance(obj, (datetime, date)):
        return obj.isoformat()

    if isinstance(obj, Path):
        return str(obj)

    if isinstance(obj, (bytes, bytearray)):
        return {"__bytes_b64__": base64.b64encode(bytes(obj)).decode("ascii")}

    if _active is None:
        _active = set()
    if id(obj) in _active:
        return {"__ref__": type_tag(obj)}

    # ids on the current path only; shared non-cyclic references expand fully
    _active.add(id(obj))
    try:
        return _convert_nested(obj, _active)
    finally:
        _active.discard(id(obj))


def _convert_nested(obj: Any, active: Set[int]) -> Any:
    if isinstance(obj, BaseModel):
        return {"__type__": type_tag(obj), "fields": to_jsonable(obj.model_dump(), active)}

    # dataclass instances (not dataclass types)
    if is_dataclass(obj) and not isinstance(obj, type):
        values = {f.name: to_jsonable(getattr(obj, f.name), active) for f in fields(obj)}
        return {"__type__": type_tag(obj), "fields": values}

    if isinstance(obj, Mapping):
        return {str(k): to_jsonable(v, active) for k, v in obj.items()}

    if isinstance(obj, (list, tuple)):
        return [to_jsonable(x, active) for x in obj]

    # sets have no stable order; sort the converted members
    if isinstance(obj, (set, frozenset)):
        return sorted((to_jsonable(x, active) for x in obj), key=repr)

    if hasattr(obj, "__dict__") and not isinstance(obj, type):
        return {"__type__": type_tag(obj), "fields": to_jsonable(vars(obj), active)}

    # fallback: string representation
    return str(obj)
