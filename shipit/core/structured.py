"""Helpers for safely working with dynamic (untyped) structures.

Use these at boundaries where we ingest TOML or JSON (``shipit.toml``,
``gcloud ... --format=json``). They validate at runtime and narrow types
statically.
"""

from __future__ import annotations

from typing import Mapping, TypeGuard, cast

StrDict = dict[str, object]
ObjList = list[object]


def is_str_dict(obj: object) -> TypeGuard[StrDict]:
    """Return True if obj is a dict with string keys."""
    if not isinstance(obj, dict):
        return False
    d = cast(dict[object, object], obj)
    return all(isinstance(k, str) for k in d.keys())


def as_str_dict(obj: object) -> StrDict | None:
    if is_str_dict(obj):
        return obj
    return None


def as_obj_list(obj: object) -> ObjList | None:
    if isinstance(obj, list):
        return cast(ObjList, obj)
    return None


def get_str(table: Mapping[str, object], key: str) -> str | None:
    """Get a string value from a mapping, stripping whitespace.

    Returns None if missing, not a str, or empty after stripping.
    """
    value = table.get(key)
    if not isinstance(value, str):
        return None
    s = value.strip()
    return s or None


def get_int(table: Mapping[str, object], key: str) -> int | None:
    """Get an int value; bools are rejected even though they subclass int."""
    value = table.get(key)
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


def get_str_list(table: Mapping[str, object], key: str) -> list[str] | None:
    """Get a list of non-empty, stripped strings. Non-string items are dropped."""
    items = as_obj_list(table.get(key))
    if items is None:
        return None
    out: list[str] = []
    for item in items:
        if isinstance(item, str) and item.strip():
            out.append(item.strip())
    return out
