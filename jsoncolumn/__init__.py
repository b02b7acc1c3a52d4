# jsoncolumn/__init__.py
"""
jsoncolumn: store JSON objects in relational columns through SQLAlchemy.

`JSONObjectType` maps a Python dict to a TEXT column, serializing on write,
parsing on read, and supplying the value semantics (equality, hashing, deep
copies, cache disassembly/assembly, merge replacement) a mutable column
value needs. `MutableJSONObject` adds in-place change tracking.
"""
from jsoncolumn.errors import (JSONColumnError, JSONSerializationError,
                               JSONTypeMismatchError, MalformedJSONError)
from jsoncolumn.types import (JSONObjectType, MutableJSONObject, dumps, loads,
                              mutable_json_object)

__version__ = "0.1.0"

__all__ = [
    "JSONColumnError",
    "JSONObjectType",
    "JSONSerializationError",
    "JSONTypeMismatchError",
    "MalformedJSONError",
    "MutableJSONObject",
    "dumps",
    "loads",
    "mutable_json_object",
]
