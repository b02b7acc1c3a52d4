# jsoncolumn/memory/value_cache.py
from __future__ import annotations

import logging
from collections import OrderedDict
from threading import RLock
from typing import Any, Hashable, Optional

from jsoncolumn.types.json_object import JSONObjectType

log = logging.getLogger(__name__)

_MISSING = object()


class ValueCache:
    """
    Second-level cache for JSON column values.

    Entries hold only disassembled text, least recently used evicted first.
    Every `get` assembles a brand-new dict, so callers can mutate what they
    get back (or what they put in) without touching the cached state.
    """

    def __init__(self, column_type: Optional[JSONObjectType] = None, *, max_size: int = 1024):
        if max_size <= 0:
            raise ValueError("max_size must be > 0")
        self.column_type = column_type or JSONObjectType()
        self.max_size = int(max_size)
        self._entries: OrderedDict[Hashable, Optional[str]] = OrderedDict()
        self._lock = RLock()

    @classmethod
    def from_config(cls, cfg) -> "ValueCache":
        return cls(JSONObjectType.from_config(cfg), max_size=cfg.cache.max_size)

    def put(self, key: Hashable, value: Optional[dict]) -> None:
        text = self.column_type.disassemble(value)
        with self._lock:
            self._entries[key] = text
            self._entries.move_to_end(key)
            if len(self._entries) > self.max_size:
                self._entries.popitem(last=False)

    def get(self, key: Hashable, owner: Any = None) -> Optional[dict]:
        with self._lock:
            text = self._entries.get(key, _MISSING)
            if text is not _MISSING:
                self._entries.move_to_end(key)
        if text is _MISSING:
            log.debug("ValueCache miss: %r", key)
            return None
        return self.column_type.assemble(text, owner)

    def invalidate(self, key: Hashable) -> None:
        with self._lock:
            self._entries.pop(key, None)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __contains__(self, key: Hashable) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
