# jsoncolumn/types/mutable.py
from __future__ import annotations

from typing import Any

from sqlalchemy.ext.mutable import MutableDict

from jsoncolumn.errors import JSONTypeMismatchError
from jsoncolumn.types.json_object import JSONObjectType


class MutableJSONObject(MutableDict):
    """
    MutableDict for JSON object columns.

    Only top-level key changes mark the parent dirty; reassign the key (or
    the attribute) after editing a nested list or dict in place.
    """

    @classmethod
    def coerce(cls, key: str, value: Any):
        if value is None or isinstance(value, cls):
            return value
        if isinstance(value, dict):
            return cls(value)
        raise JSONTypeMismatchError(
            f"Attribute '{key}' expects a JSON object (dict), got {type(value).__name__}"
        )


def mutable_json_object(**options) -> JSONObjectType:
    """A JSONObjectType whose values are tracked for in-place changes."""
    return MutableJSONObject.as_mutable(JSONObjectType(**options))
