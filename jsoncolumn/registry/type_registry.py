# jsoncolumn/registry/type_registry.py
"""
Explicit registry of column value types.

Each entry ties a tag (e.g. "json_object") to a type object exposing the
storage conversion pair: `disassemble` (value -> text) and `assemble`
(text -> value). Storage-mapping code looks types up by tag instead of
discovering them reflectively.
"""
from __future__ import annotations

from typing import Any, Dict

from jsoncolumn.types.json_object import JSONObjectType

JSON_OBJECT = "json_object"

_type_registry: Dict[str, Any] = {}


def register(tag: str, column_type: Any) -> None:
    """
    Register a column type under the given tag.

    Raises:
        ValueError: If the tag is already taken, or the type lacks the
            `disassemble`/`assemble` conversion pair.

    Example:
        >>> register("json_object", JSONObjectType())
    """
    if tag in _type_registry:
        raise ValueError(f"Column type '{tag}' is already registered")
    for attr in ("disassemble", "assemble"):
        if not callable(getattr(column_type, attr, None)):
            raise ValueError(f"Column type '{tag}' has no callable '{attr}'")
    _type_registry[tag] = column_type


def get_registered_type(tag: str) -> Any:
    """
    Get a registered column type by tag.

    Raises:
        ValueError: If the tag is not registered.
    """
    if tag not in _type_registry:
        available = list(_type_registry.keys())
        raise ValueError(
            f"Column type '{tag}' is not registered. "
            f"Available types: {available}"
        )
    return _type_registry[tag]


def has_registered_type(tag: str) -> bool:
    return tag in _type_registry


def to_storage(tag: str, value: Any) -> Any:
    """Convert an in-memory value to its stored form using the tagged type."""
    return get_registered_type(tag).disassemble(value)


def from_storage(tag: str, stored: Any, owner: Any = None) -> Any:
    """Convert a stored form back to a fresh in-memory value."""
    return get_registered_type(tag).assemble(stored, owner)


def register_defaults(cfg=None) -> None:
    """Register the built-in types not already present."""
    if not has_registered_type(JSON_OBJECT):
        column_type = JSONObjectType.from_config(cfg) if cfg is not None else JSONObjectType()
        register(JSON_OBJECT, column_type)


def clear_registry() -> None:
    """Clear all registered types (primarily for testing)."""
    _type_registry.clear()


def get_all_types() -> dict:
    return dict(_type_registry)
