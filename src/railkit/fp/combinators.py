"""Function combinators and Result mapping helpers.

Everything here is curried the way it is meant to be used in a pipeline:
supply the behaviour first, get back a one-argument function that takes the
data. None of these log, raise or mutate their inputs.

Example:
    >>> from railkit import compose, map_success, success
    >>> double_then_str = compose(str, lambda x: x * 2)
    >>> map_success(double_then_str)(success(21)).data
    '42'
"""

from __future__ import annotations

from collections.abc import Awaitable, Collection, Iterable
from functools import reduce
from typing import Any, Callable, TypeVar

from railkit.foundation.errors import Implies, Predicate, SerializableError
from railkit.result import Result, failure, success

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")
T = TypeVar("T")
U = TypeVar("U")
V = TypeVar("V")


# ═════════════════════════════════════════════════════════════════════════════
# Composition
# ═════════════════════════════════════════════════════════════════════════════


def identity(x: T) -> T:
    return x


def compose(f: Callable[[B], C], g: Callable[[A], B]) -> Callable[[A], C]:
    """Right-to-left composition: ``compose(f, g)(x) == f(g(x))``."""
    return lambda x: f(g(x))


def pipe(*functions: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Left-to-right composition: ``pipe(g, f)(x) == f(g(x))``. ``pipe()`` is identity."""
    return reduce(lambda acc, fn: compose(fn, acc), functions, identity)


def curry(f: Callable[[A, B], C]) -> Callable[[A], Callable[[B], C]]:
    """Turn a two-argument function into nested one-argument functions."""
    return lambda a: lambda b: f(a, b)


def uncurry(f: Callable[[A], Callable[[B], C]]) -> Callable[[A, B], C]:
    """Inverse of ``curry``."""
    return lambda a, b: f(a)(b)


def negate(value: object) -> bool:
    return not value


def as_list(xs: Iterable[T] | None) -> list[T]:
    """List of ``xs``; ``None`` (or anything empty) becomes ``[]``."""
    return list(xs) if xs else []


# ═════════════════════════════════════════════════════════════════════════════
# Effects
# ═════════════════════════════════════════════════════════════════════════════


def tap_effect(callback: Callable[[T], object]) -> Callable[[T], T]:
    """Run ``callback`` for its side effect and hand back the input unchanged.

    The callback's return value is discarded, so logging or metrics can be
    spliced into a pipeline without altering what flows through it.
    """
    def tap(data: T) -> T:
        callback(data)
        return data

    return tap


def on_result(
    on_data: Callable[[T], object],
    on_error: Callable[[SerializableError], object],
) -> Callable[[Result[T]], None]:
    """Dispatch a Result to one of two side-effecting handlers."""
    def dispatch(result: Result[T]) -> None:
        if result.is_success():
            on_data(result.unwrap())
        else:
            on_error(result.unwrap_error())

    return dispatch


# ═════════════════════════════════════════════════════════════════════════════
# Result Mapping
# ═════════════════════════════════════════════════════════════════════════════


def map_success(callback: Callable[[T], U]) -> Callable[[Result[T]], Result[U]]:
    """Apply ``callback`` to the data of a success; pass failures through.

    Type signature: (T -> U) -> Result[T] -> Result[U]
    """
    def mapper(result: Result[T]) -> Result[U]:
        if result.is_success():
            return success(callback(result.unwrap()))
        return failure(result.error)

    return mapper


def map_error(callback: Callable[[SerializableError], object]) -> Callable[[Result[T]], Result[T]]:
    """Apply ``callback`` to the error of a failure; pass successes through.

    Whatever the callback returns is normalized back into a SerializableError.
    """
    def mapper(result: Result[T]) -> Result[T]:
        if result.is_failure():
            return failure(callback(result.unwrap_error()))
        return success(result.unwrap())

    return mapper


def map_success_async(
    callback: Callable[[T], Awaitable[Result[U]]],
) -> Callable[[Result[T]], Awaitable[Result[U]]]:
    """Asynchronous bind: chain an awaitable step that can itself fail.

    The returned function builds a coroutine without running anything. A
    failure resolves to itself without invoking ``callback``; a success
    resolves to whatever ``callback(data)`` resolves to.

    Example:
        >>> async def load(user_id: int) -> Result[dict]:
        ...     return success({"id": user_id})
        >>>
        >>> await map_success_async(load)(success(7))
        success({'id': 7})
    """
    async def bind(result: Result[T]) -> Result[U]:
        if result.is_failure():
            return failure(result.error)
        return await callback(result.unwrap())

    return bind


# ═════════════════════════════════════════════════════════════════════════════
# Branching & Predicates
# ═════════════════════════════════════════════════════════════════════════════


def choose(
    predicate: Predicate[T],
    on_true: Implies[T, U],
    on_false: Implies[T, V],
) -> Callable[[T], U | V]:
    """Send the same input to ``on_true`` or ``on_false`` depending on ``predicate``."""
    return lambda x: on_true(x) if predicate(x) else on_false(x)


def filter_condition(value: T, predicate: Predicate[T]) -> bool:
    """``predicate(value)`` when value is truthy; an absent value passes vacuously."""
    return predicate(value) if value else True


def equals(a: T) -> Predicate[T]:
    return lambda b: a == b


def contained_by(items: Collection[T]) -> Predicate[T]:
    return lambda item: item in items
