"""Composable helpers: combinators, Result mapping, list and pair utilities."""

from .combinators import (
    as_list,
    choose,
    compose,
    contained_by,
    curry,
    equals,
    filter_condition,
    identity,
    map_error,
    map_success,
    map_success_async,
    negate,
    on_result,
    pipe,
    tap_effect,
    uncurry,
)
from .sequences import (
    append,
    append_to,
    binary_reduct,
    first_of,
    flatten_results,
    map_array,
    partition,
    partition_reduct,
    project,
    reduce_array,
    second_of,
    traverse_results,
    with_first,
    with_second,
)

__all__ = [
    # Composition
    "identity", "compose", "pipe", "curry", "uncurry", "negate", "as_list",
    # Effects
    "tap_effect", "on_result",
    # Result mapping
    "map_success", "map_error", "map_success_async",
    # Branching & predicates
    "choose", "filter_condition", "equals", "contained_by",
    # Lists
    "map_array", "reduce_array", "append", "append_to",
    # Result collections
    "flatten_results", "traverse_results",
    # Pairs
    "first_of", "second_of", "with_first", "with_second", "project",
    # Partitioning
    "binary_reduct", "partition_reduct", "partition",
]
