# jsoncolumn/types/json_object.py
from __future__ import annotations

import json
import logging
from typing import Any, Optional

from sqlalchemy.types import TEXT, TypeDecorator

from jsoncolumn.errors import (JSONSerializationError, JSONTypeMismatchError,
                               MalformedJSONError)

log = logging.getLogger(__name__)

_PREVIEW_CHARS = 80


def dumps(value: Any, *, ensure_ascii: bool = False, sort_keys: bool = False) -> str:
    """Render a value as compact JSON text. NaN/Infinity are refused."""
    try:
        return json.dumps(
            value,
            ensure_ascii=ensure_ascii,
            sort_keys=sort_keys,
            separators=(",", ":"),
            allow_nan=False,
        )
    except (TypeError, ValueError) as e:
        raise JSONSerializationError(f"Value is not JSON serializable: {e}") from e


def loads(text: Any) -> dict:
    """
    Parse JSON text into a dict.

    Accepts str or any bytes-like value (decoded as UTF-8). Anything that is
    not a JSON object, including well-formed arrays and scalars, raises
    MalformedJSONError.
    """
    if isinstance(text, (bytes, bytearray, memoryview)):
        try:
            text = bytes(text).decode("utf-8")
        except UnicodeDecodeError as e:
            raise MalformedJSONError(f"JSON text is not valid UTF-8: {e}") from e
    if not isinstance(text, str):
        raise JSONTypeMismatchError(
            f"Expected JSON text, got {type(text).__name__}"
        )
    try:
        value = json.loads(text)
    except json.JSONDecodeError as e:
        raise MalformedJSONError(f"Malformed JSON text: {e}", text=text) from e
    if not isinstance(value, dict):
        raise MalformedJSONError(
            f"JSON text must be an object, got {type(value).__name__}", text=text
        )
    return value


def _freeze(value: Any) -> Any:
    if isinstance(value, dict):
        return frozenset((k, _freeze(v)) for k, v in value.items())
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(v) for v in value)
    return value


def _check_tree(value: Any, op: str, path: str) -> None:
    # json.dumps would coerce these silently and the text would not read back equal
    if isinstance(value, dict):
        for k, v in value.items():
            if not isinstance(k, str):
                raise JSONTypeMismatchError(
                    f"{op}: key {k!r} at {path} is {type(k).__name__}, JSON object keys must be str"
                )
            _check_tree(v, op, f"{path}.{k}")
    elif isinstance(value, list):
        for i, v in enumerate(value):
            _check_tree(v, op, f"{path}[{i}]")
    elif isinstance(value, tuple):
        raise JSONTypeMismatchError(
            f"{op}: tuple at {path} would be stored as a JSON array; use a list"
        )


def _require_object(value: Any, op: str) -> dict:
    if not isinstance(value, dict):
        raise JSONTypeMismatchError(
            f"{op} expected a JSON object (dict), got {type(value).__name__}"
        )
    _check_tree(value, op, "$")
    return value


class JSONObjectType(TypeDecorator):
    """Stores a JSON object in a TEXT column.

    Values are plain dicts in memory and compact JSON text at rest. The type
    is mutable: every copy handed to a cache, a merge target or a freshly
    assembled instance goes through a full serialize/parse round trip, so no
    nested structure is ever shared with the source.
    """
    impl = TEXT
    cache_ok = True

    def __init__(self, ensure_ascii: bool = False, sort_keys: bool = False):
        super().__init__()
        self.ensure_ascii = ensure_ascii
        self.sort_keys = sort_keys

    @classmethod
    def from_config(cls, cfg) -> "JSONObjectType":
        """Build from a CodecCfg (or an AppConfig carrying one as `.codec`)."""
        codec = getattr(cfg, "codec", cfg)
        return cls(ensure_ascii=codec.ensure_ascii, sort_keys=codec.sort_keys)

    # ---------- column / value class ----------

    def sql_types(self) -> tuple:
        return (TEXT(),)

    @property
    def python_type(self) -> type:
        return dict

    def returned_class(self) -> type:
        return self.python_type

    # ---------- equality ----------

    def compare_values(self, x: Any, y: Any) -> bool:
        if x is None or y is None:
            return x is None and y is None
        return x == y

    def hash_value(self, x: Any) -> int:
        if x is None:
            return 0
        try:
            return hash(_freeze(x))
        except TypeError as e:
            raise JSONSerializationError(f"Value is not hashable as JSON: {e}") from e

    # ---------- read / write ----------

    def process_bind_param(self, value: Any, dialect) -> Optional[str]:
        if value is None:
            return None
        return self._dumps(_require_object(value, "write"))

    def process_literal_param(self, value: Any, dialect) -> Optional[str]:
        return self.process_bind_param(value, dialect)

    def process_result_value(self, value: Any, dialect) -> Optional[dict]:
        if value is None:
            return None
        try:
            return loads(value)
        except MalformedJSONError as e:
            log.debug("Malformed JSON column value: %r", (e.text or "")[:_PREVIEW_CHARS])
            raise

    # ---------- copies, cache, merge ----------

    def deep_copy(self, value: Any) -> Optional[dict]:
        if value is None:
            return None
        return loads(self._dumps(_require_object(value, "deep_copy")))

    def copy_value(self, value: Any) -> Optional[dict]:
        return self.deep_copy(value)

    def is_mutable(self) -> bool:
        return True

    def disassemble(self, value: Any) -> Optional[str]:
        """Cacheable form: the canonical text."""
        if value is None:
            return None
        return self._dumps(_require_object(value, "disassemble"))

    def assemble(self, cached: Any, owner: Any = None) -> Optional[dict]:
        """Rebuild a fresh dict from disassembled text."""
        if cached is None:
            return None
        if isinstance(cached, dict):
            return self.deep_copy(cached)
        return loads(cached)

    def replace(self, original: Any, target: Any, owner: Any = None) -> Optional[dict]:
        # target is discarded; the managed entity gets its own copy of original
        return self.deep_copy(original)

    def _dumps(self, value: dict) -> str:
        return dumps(value, ensure_ascii=self.ensure_ascii, sort_keys=self.sort_keys)
