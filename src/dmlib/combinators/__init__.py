"""Combinators - operations over sequences and mappings, and their composition."""

from dmlib.combinators._containers import force_table
from dmlib.combinators.compose import (
    I,
    K,
    Pipeline,
    alt,
    alt2,
    case,
    compose,
    curry,
    curry_all,
    curry_last,
    equals,
    first,
    flip,
    force_table_input,
    has_nargs,
    identity,
    if_then,
    less_than,
    log_pipe,
    make_enum,
    maybe,
    not_,
    once,
    pipe,
    second,
    sequence,
    unary,
    wrap,
)
from dmlib.combinators.ops import (
    Match,
    any,
    build_keys,
    drop_nils,
    extract_value,
    filter,
    first_in,
    flatten,
    flip_array,
    for_each,
    irange,
    is_empty,
    keys,
    map,
    reduce,
    reject,
    skip,
    table_from_numbers,
    table_len,
    take,
    take_a,
    tap,
    values,
)
from dmlib.combinators.records import (
    assign,
    deep_copy,
    join_tables,
    process_record,
    process_table,
)

__all__ = [
    # Sequence/mapping operations
    "map",
    "filter",
    "reject",
    "first_in",
    "reduce",
    "take",
    "take_a",
    "skip",
    "any",
    "Match",
    "for_each",
    "tap",
    "flatten",
    "flip_array",
    "drop_nils",
    "build_keys",
    "keys",
    "values",
    "table_len",
    "is_empty",
    "extract_value",
    "force_table",
    "irange",
    "table_from_numbers",
    # Composition
    "Pipeline",
    "pipe",
    "compose",
    "sequence",
    "log_pipe",
    "curry",
    "curry_last",
    "curry_all",
    "wrap",
    "once",
    "maybe",
    # Primitives
    "identity",
    "I",
    "K",
    "first",
    "second",
    "not_",
    "unary",
    "flip",
    "alt",
    "alt2",
    "force_table_input",
    "has_nargs",
    "equals",
    "less_than",
    "if_then",
    "case",
    "make_enum",
    # Records
    "deep_copy",
    "assign",
    "join_tables",
    "process_record",
    "process_table",
]
