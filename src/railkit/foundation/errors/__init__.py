"""Error record, normalization and shared type aliases.

- SerializableError: flat, transport-safe error record
- normalize_error: project exceptions/mappings onto SerializableError
- UnwrapError: raised by the opt-in Result extractors
- Implies/Predicate/Product/Double: function and pair shapes
"""

from .errors import UNKNOWN_ERROR, ErrorName, SerializableError, UnwrapError, normalize_error
from .types import Double, Implies, JsonDict, JsonPrimitive, JsonValue, Predicate, Product

__all__ = [
    # Errors
    "ErrorName", "SerializableError", "UNKNOWN_ERROR", "UnwrapError", "normalize_error",
    # Type aliases
    "Implies", "Predicate", "Product", "Double",
    "JsonPrimitive", "JsonValue", "JsonDict",
]
