from jsoncolumn.types.json_object import JSONObjectType, dumps, loads
from jsoncolumn.types.mutable import MutableJSONObject, mutable_json_object

__all__ = [
    "JSONObjectType",
    "MutableJSONObject",
    "dumps",
    "loads",
    "mutable_json_object",
]
