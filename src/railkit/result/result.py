"""Result type: success with data, or failure with a SerializableError.

A Result always has exactly one populated side:

- success: ``data`` is the payload, ``error`` is ``None``
- failure: ``data`` is ``None``, ``error`` is a SerializableError

The variant flag, not the payload, decides the branch, so ``success(None)`` is
still a success.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Callable, Generic, TypeVar, cast

from railkit.foundation.errors import (
    UNKNOWN_ERROR,
    SerializableError,
    UnwrapError,
    normalize_error,
)

if TYPE_CHECKING:
    from collections.abc import Iterator

    from railkit.foundation.errors import JsonDict

T = TypeVar("T")  # Success type
U = TypeVar("U")  # Mapped success type

_RESULT_KEYS = frozenset({"data", "error"})


class Result(Generic[T]):
    """Discriminated union of a success payload and a normalized error.

    Construct with ``success()`` / ``failure()``; the constructor is private.
    Results unpack like the ``{data, error}`` record they model:

        >>> data, error = success(42)
        >>> (data, error)
        (42, None)

        >>> failure(ValueError("bad")).error.message
        'bad'

    Notes:
        - Uses __slots__, immutable (helpers always build new Results)
        - Pattern matching via ``case Result(data, None)`` or ``match()``
    """

    __slots__ = ("_value", "_is_success")
    __match_args__ = ("data", "error")

    def __init__(self, value: T | SerializableError, is_success: bool) -> None:
        """Private constructor. Use success() or failure() instead.

        Raises:
            TypeError: If a failure is built from anything but a SerializableError
        """
        if not is_success and not isinstance(value, SerializableError):
            raise TypeError(f"failure Result needs a SerializableError, got {type(value).__name__}")
        self._value: T | SerializableError = value
        self._is_success: bool = is_success

    # ─────────────────────────────────────────────────────────────────
    # Record Access
    # ─────────────────────────────────────────────────────────────────

    @property
    def data(self) -> T | None:
        """Success payload, None on failure."""
        return cast(T, self._value) if self._is_success else None

    @property
    def error(self) -> SerializableError | None:
        """Normalized error, None on success."""
        return None if self._is_success else cast(SerializableError, self._value)

    def is_success(self) -> bool:
        return self._is_success

    def is_failure(self) -> bool:
        return not self._is_success

    # ─────────────────────────────────────────────────────────────────
    # Value Extraction
    # ─────────────────────────────────────────────────────────────────

    def unwrap(self) -> T:
        """Extract the success payload.

        Raises:
            UnwrapError: If Result is a failure
        """
        if self._is_success:
            return cast(T, self._value)
        raise UnwrapError(self, f"Called unwrap() on failure: {self._value}")

    def unwrap_error(self) -> SerializableError:
        """Extract the error.

        Raises:
            UnwrapError: If Result is a success
        """
        if not self._is_success:
            return cast(SerializableError, self._value)
        raise UnwrapError(self, f"Called unwrap_error() on success: {self._value!r}")

    def unwrap_or(self, default: T) -> T:
        """Extract the success payload or return default."""
        return cast(T, self._value) if self._is_success else default

    def match(
        self,
        *,
        success: Callable[[T], U],
        failure: Callable[[SerializableError], U],
    ) -> U:
        """Exhaustive case analysis over both variants.

        Example:
            >>> success(2).match(success=lambda x: x * 10, failure=lambda e: -1)
            20
        """
        if self._is_success:
            return success(cast(T, self._value))
        return failure(cast(SerializableError, self._value))

    # ─────────────────────────────────────────────────────────────────
    # Conversion
    # ─────────────────────────────────────────────────────────────────

    def to_tuple(self) -> tuple[T | None, SerializableError | None]:
        """Convert to (data, error) tuple."""
        return (self.data, self.error)

    def to_dict(self) -> JsonDict:
        """Plain ``{"data": ..., "error": ...}`` record for serialization."""
        if self._is_success:
            return {"data": self._value, "error": None}
        return {"data": None, "error": cast(SerializableError, self._value).to_dict()}

    @classmethod
    def from_dict(cls, record: Mapping[str, object]) -> Result[T]:
        """Rebuild a Result from a ``to_dict()`` record.

        A record with a non-null ``error`` becomes a failure (the error is
        re-normalized); one with a null ``error`` becomes a success.

        Raises:
            ValueError: If the record is not shaped like ``{"data", "error"}``
        """
        if not isinstance(record, Mapping) or not record.keys() >= _RESULT_KEYS:
            raise ValueError(f"expected a mapping with 'data' and 'error' keys, got {record!r}")
        if (error := record["error"]) is not None:
            return failure(error)
        return success(cast(T, record["data"]))

    # ─────────────────────────────────────────────────────────────────
    # Dunder Methods
    # ─────────────────────────────────────────────────────────────────

    def __bool__(self) -> bool:
        """True if success."""
        return self._is_success

    def __iter__(self) -> Iterator[T | SerializableError | None]:
        """Yield ``data`` then ``error`` so a Result unpacks as a pair."""
        yield self.data
        yield self.error

    def __repr__(self) -> str:
        variant = "success" if self._is_success else "failure"
        return f"{variant}({self._value!r})"

    def __eq__(self, other: object) -> bool:
        """Structural equality."""
        if not isinstance(other, Result):
            return NotImplemented
        return self._is_success == other._is_success and self._value == other._value

    def __hash__(self) -> int:
        return hash((self._is_success, self._value))


# ═════════════════════════════════════════════════════════════════════════════
# Constructor Functions
# ═════════════════════════════════════════════════════════════════════════════


def success(data: T) -> Result[T]:
    """Construct a success.

    Type signature: T -> Result[T]
    """
    return Result(data, is_success=True)


def failure(err: object = None) -> Result[T]:
    """Construct a failure from an exception, error record or mapping.

    With no argument (or ``None``) the error is the fixed
    ``{"name": "Unknown error", "message": "Unknown error"}`` record.

    Type signature: Error? -> Result[T]
    """
    return Result(UNKNOWN_ERROR if err is None else normalize_error(err), is_success=False)
