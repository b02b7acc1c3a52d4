# jsoncolumn/errors.py
from __future__ import annotations

class JSONColumnError(Exception):
    """Base exception for all JSON column errors."""
    pass

class MalformedJSONError(JSONColumnError, ValueError):
    """Raised when stored text is not a well-formed JSON object."""

    def __init__(self, message: str, text: str | None = None):
        super().__init__(message)
        self.text = text

class JSONTypeMismatchError(JSONColumnError, TypeError):
    """Raised when a value handed to the column type is not a JSON object."""
    pass

class JSONSerializationError(JSONColumnError, ValueError):
    """Raised when an in-memory value cannot be rendered as JSON text."""
    pass
