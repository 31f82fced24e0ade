"""railkit - a Result type and a toolbox of small functional helpers.

Results carry either data or a flat, serializable error; helpers transform,
combine and branch over data without raising.

Quick Start:
    >>> from railkit import success, failure, map_success, flatten_results
    >>>
    >>> def parse(s: str):
    ...     try:
    ...         return success(int(s))
    ...     except ValueError as e:
    ...         return failure(e)
    >>>
    >>> map_success(lambda n: n * 2)(parse("21")).data
    42
    >>> parse("x").error.name
    'ValueError'
    >>> flatten_results([parse("1"), parse("2")]).data
    [1, 2]

Point-free pipelines:
    >>> from railkit import pipe, map_array, reduce_array
    >>> total_of_squares = pipe(map_array(lambda n: n * n), reduce_array(lambda a, b: a + b, 0))
    >>> total_of_squares([1, 2, 3])
    14

Transport:
    >>> from railkit import encode_result, decode_result
    >>> decode_result(encode_result(parse("x"))).error.name
    'ValueError'
"""

from __future__ import annotations

__version__ = "0.1.0"

# Errors & types
from .foundation.errors import (
    UNKNOWN_ERROR,
    Double,
    ErrorName,
    Implies,
    Predicate,
    Product,
    SerializableError,
    UnwrapError,
    normalize_error,
)

# Config
from .foundation.config import RailkitSettings, clear_settings_cache, get_settings

# Result
from .result import Result, decode_result, encode_result, failure, success

# Helpers
from .fp import (
    append,
    append_to,
    as_list,
    binary_reduct,
    choose,
    compose,
    contained_by,
    curry,
    equals,
    filter_condition,
    first_of,
    flatten_results,
    identity,
    map_array,
    map_error,
    map_success,
    map_success_async,
    negate,
    on_result,
    partition,
    partition_reduct,
    pipe,
    project,
    reduce_array,
    second_of,
    tap_effect,
    traverse_results,
    uncurry,
    with_first,
    with_second,
)

# Observability
from .observability import configure_logging, get_logger, labelled_log

__all__ = [
    "__version__",
    # Errors & types
    "SerializableError", "ErrorName", "UNKNOWN_ERROR", "UnwrapError", "normalize_error",
    "Implies", "Predicate", "Product", "Double",
    # Config
    "RailkitSettings", "get_settings", "clear_settings_cache",
    # Result
    "Result", "success", "failure", "encode_result", "decode_result",
    # Combinators
    "identity", "compose", "pipe", "curry", "uncurry", "negate", "as_list",
    "tap_effect", "on_result",
    "map_success", "map_error", "map_success_async",
    "choose", "filter_condition", "equals", "contained_by",
    # Lists & pairs
    "map_array", "reduce_array", "append", "append_to",
    "flatten_results", "traverse_results",
    "first_of", "second_of", "with_first", "with_second", "project",
    "binary_reduct", "partition_reduct", "partition",
    # Observability
    "configure_logging", "get_logger", "labelled_log",
]
