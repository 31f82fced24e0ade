"""Curried list helpers, pair projections, partitioning and Result flattening.

Nothing here mutates its input: list helpers build new lists and pair
helpers build new tuples.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from functools import reduce
from typing import Callable, TypeVar

from railkit.foundation.errors import Double, Implies, Predicate, Product
from railkit.result import Result, failure, success

T = TypeVar("T")
U = TypeVar("U")
V = TypeVar("V")
M = TypeVar("M")


# ═════════════════════════════════════════════════════════════════════════════
# Curried Map / Reduce
# ═════════════════════════════════════════════════════════════════════════════


def map_array(f: Callable[[T], U]) -> Callable[[Iterable[T]], list[U]]:
    return lambda items: [f(x) for x in items]


def reduce_array(f: Callable[[U, T], U], initial: U) -> Callable[[Iterable[T]], U]:
    return lambda items: reduce(f, items, initial)


# ═════════════════════════════════════════════════════════════════════════════
# Result Collections
# ═════════════════════════════════════════════════════════════════════════════


def flatten_results(results: Iterable[Result[T]]) -> Result[list[T]]:
    """Combine Results into one Result of a list, stopping at the first failure.

    Fails fast from the head: the first failure's error is returned as-is and
    nothing after it is looked at. An empty input is ``success([])``.

    Type signature: [Result[T]] -> Result[[T]]

    Example:
        >>> flatten_results([success(1), success(2)]).data
        [1, 2]
        >>> flatten_results([success(1), failure(KeyError("x"))]).error.name
        'KeyError'
    """
    values: list[T] = []
    for result in results:
        if result.is_failure():
            return failure(result.error)
        values.append(result.unwrap())
    return success(values)


def traverse_results(f: Callable[[T], Result[U]]) -> Callable[[Iterable[T]], Result[list[U]]]:
    """Map a Result-returning ``f`` over items, then ``flatten_results``.

    Items past the first failure are never passed to ``f``.
    """
    return lambda items: flatten_results(f(item) for item in items)


# ═════════════════════════════════════════════════════════════════════════════
# Append
# ═════════════════════════════════════════════════════════════════════════════


def append(value: T) -> Callable[[Sequence[T]], list[T]]:
    """``append(v)(items) == [*items, v]``."""
    return lambda items: [*items, value]


def append_to(items: Sequence[T]) -> Callable[[T], list[T]]:
    """``append_to(items)(v) == [*items, v]``."""
    return lambda value: [*items, value]


# ═════════════════════════════════════════════════════════════════════════════
# Pairs
# ═════════════════════════════════════════════════════════════════════════════


def first_of(pair: Product[T, U]) -> T:
    return pair[0]


def second_of(pair: Product[T, U]) -> U:
    return pair[1]


def with_first(callback: Implies[T, M]) -> Callable[[Product[T, U]], Product[M, U]]:
    """Transform the first component, keeping the second as-is."""
    return lambda pair: (callback(pair[0]), pair[1])


def with_second(callback: Implies[U, M]) -> Callable[[Product[T, U]], Product[T, M]]:
    """Transform the second component, keeping the first as-is."""
    return lambda pair: (pair[0], callback(pair[1]))


def project(f: Implies[Product[T, U], V]) -> Callable[[T, U], V]:
    """Adapt a function of a pair into a function of two arguments."""
    return lambda a, b: f((a, b))


# ═════════════════════════════════════════════════════════════════════════════
# Partitioning
# ═════════════════════════════════════════════════════════════════════════════


def binary_reduct(
    predicate: Predicate[T],
    f: Callable[[T], Implies[U, V]],
) -> Callable[[Double[U], T], Product[V, U] | Product[U, V]]:
    """Reducer step that routes ``f(cur)`` to one side of a pair accumulator.

    ``predicate(cur)`` true applies ``f(cur)`` to the first component,
    false to the second; the other component is carried over untouched.
    """
    def step(acc: Double[U], cur: T) -> Product[V, U] | Product[U, V]:
        return with_first(f(cur))(acc) if predicate(cur) else with_second(f(cur))(acc)

    return step


def partition_reduct(predicate: Predicate[T]) -> Callable[[Double[list[T]], T], Double[list[T]]]:
    """``binary_reduct`` that appends the current element to its bucket."""
    return binary_reduct(predicate, append)


def partition(items: Iterable[T], predicate: Predicate[T]) -> Double[list[T]]:
    """Split items into ``(matching, rest)``, preserving order within each.

    Example:
        >>> partition([1, 2, 3, 4, 5, 6], lambda n: n % 2 == 0)
        ([2, 4, 6], [1, 3, 5])
    """
    return reduce(partition_reduct(predicate), items, ([], []))
