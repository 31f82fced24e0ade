"""Serializable error record and error normalization.

A SerializableError is the only error shape railkit knows about. It is a flat,
transport-safe projection of an exception (or of a record that already looks
like one): tracebacks, causes and live object references are never kept.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum
from typing import TYPE_CHECKING, Callable, Self

from pydantic import BaseModel, ConfigDict

if TYPE_CHECKING:
    from railkit.result import Result

    from .types import JsonDict


class ErrorName(StrEnum):
    """Error names produced by railkit itself."""
    UNKNOWN = "Unknown error"
    DECODE = "DecodeError"


# Optional fields copied verbatim when present on the source
_OPTIONAL_FIELDS: tuple[str, ...] = ("code", "details", "hint")


class SerializableError(BaseModel):
    """Flat error record safe to send across a process or network boundary."""

    model_config = ConfigDict(frozen=True, extra="ignore", revalidate_instances="never")

    name: str
    message: str
    code: str | None = None
    details: str | None = None
    hint: str | None = None

    @classmethod
    def create(
        cls,
        name: str,
        message: str,
        *,
        code: str | None = None,
        details: str | None = None,
        hint: str | None = None,
    ) -> Self:
        """Factory method for construction."""
        return cls(name=name, message=message, code=code, details=details, hint=hint)

    def to_dict(self) -> JsonDict:
        """Plain dict without the optional fields that are absent."""
        return self.model_dump(exclude_none=True)

    def __str__(self) -> str:
        suffix = f" [{self.code}]" if self.code else ""
        return f"{self.name}: {self.message}{suffix}"


UNKNOWN_ERROR = SerializableError(name=ErrorName.UNKNOWN.value, message=ErrorName.UNKNOWN.value)


def _safe_str(value: object, fallback: str) -> str:
    """``str(value)``, or ``fallback`` when the value cannot render itself."""
    try:
        return str(value)
    except Exception:
        return fallback


def _read(source: Callable[[str], object], key: str) -> str | None:
    """``source(key)`` as a string; None when absent or unreadable."""
    try:
        value = source(key)
        return None if value is None else str(value)
    except Exception:
        return None


def normalize_error(err: object) -> SerializableError:
    """Project any error-like value onto a SerializableError.

    - SerializableError: returned unchanged (already immutable)
    - exceptions: class name, ``str(exc)``, plus code/details/hint attributes
    - mappings: name/message/code/details/hint keys, defaults for missing ones
    - anything else: type name and ``str(value)``

    Never raises.
    """
    match err:
        case SerializableError():
            return err
        case BaseException():
            return SerializableError(
                name=type(err).__name__,
                message=_safe_str(err, type(err).__name__),
                **{f: _read(lambda key: getattr(err, key, None), f) for f in _OPTIONAL_FIELDS},
            )
        case Mapping():
            return SerializableError(
                name=_read(err.get, "name") or ErrorName.UNKNOWN.value,
                message=_read(err.get, "message") or ErrorName.UNKNOWN.value,
                **{f: _read(err.get, f) for f in _OPTIONAL_FIELDS},
            )
        case None:
            return UNKNOWN_ERROR
        case _:
            return SerializableError(name=type(err).__name__, message=_safe_str(err, type(err).__name__))


class UnwrapError(RuntimeError):
    """Raised when a value is extracted from the wrong Result variant."""

    __slots__ = ("result",)

    def __init__(self, result: Result[object], message: str) -> None:
        self.result = result
        super().__init__(message)
