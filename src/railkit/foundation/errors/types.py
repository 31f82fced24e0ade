"""Type aliases shared by the result type, the combinators and the logger."""

from __future__ import annotations

from typing import Any, Callable, TypeAlias, TypeVar, Union

T = TypeVar("T")
U = TypeVar("U")

# ═══════════════════════════════════════════════════════════════════════════════
# Function & Tuple Shapes
# ═══════════════════════════════════════════════════════════════════════════════

Implies: TypeAlias = Callable[[T], U]
Predicate: TypeAlias = Callable[[T], bool]
Product: TypeAlias = tuple[T, U]
Double: TypeAlias = tuple[T, T]

# ═══════════════════════════════════════════════════════════════════════════════
# JSON Shapes
# ═══════════════════════════════════════════════════════════════════════════════

# Any for recursive slots
JsonPrimitive = Union[str, int, float, bool, None]
JsonValue = Union[JsonPrimitive, list[Any], dict[str, Any]]
JsonDict = dict[str, Any]
