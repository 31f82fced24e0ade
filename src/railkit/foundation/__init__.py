"""Foundation layer: error record, type aliases and settings."""

from .config import CodecSettings, LoggingSettings, RailkitSettings, clear_settings_cache, get_settings
from .errors import (
    UNKNOWN_ERROR,
    Double,
    ErrorName,
    Implies,
    JsonDict,
    JsonValue,
    Predicate,
    Product,
    SerializableError,
    UnwrapError,
    normalize_error,
)

__all__ = [
    # Config
    "CodecSettings", "LoggingSettings", "RailkitSettings", "clear_settings_cache", "get_settings",
    # Errors
    "ErrorName", "SerializableError", "UNKNOWN_ERROR", "UnwrapError", "normalize_error",
    # Types
    "Implies", "Predicate", "Product", "Double", "JsonDict", "JsonValue",
]
