"""dmlib - functional combinators for game scripting.

Sequence/mapping operations are pipeable: call them without their
container to get a pipeline stage.

    from dmlib import filter, map, pipe, reduce

    total = pipe(map(lambda x: x * 2), filter(lambda x: x > 2), reduce(0, add))
    total([1, 2, 3])  # 10
"""

from .combinators import (
    I,
    K,
    Match,
    Pipeline,
    alt,
    alt2,
    any,
    assign,
    build_keys,
    case,
    compose,
    curry,
    curry_all,
    curry_last,
    deep_copy,
    drop_nils,
    equals,
    extract_value,
    filter,
    first,
    first_in,
    flatten,
    flip,
    flip_array,
    for_each,
    force_table,
    force_table_input,
    has_nargs,
    identity,
    if_then,
    irange,
    is_empty,
    join_tables,
    keys,
    less_than,
    log_pipe,
    make_enum,
    map,
    maybe,
    not_,
    once,
    pipe,
    process_record,
    process_table,
    reduce,
    reject,
    second,
    sequence,
    skip,
    table_from_numbers,
    table_len,
    take,
    take_a,
    tap,
    unary,
    values,
    wrap,
)
from .config import DEFAULT_CONFIG, LibConfig
from .interop import HostMap, filter_map, from_host, to_host, to_host_fn
from .kernel import (
    NOTHING,
    ConversionError,
    Curried,
    DmlibError,
    Nothing,
    Once,
    Pipeable,
    is_nothing,
    pipeable,
)

__all__ = [
    # Kernel
    "NOTHING",
    "Nothing",
    "is_nothing",
    "Pipeable",
    "Curried",
    "pipeable",
    "Once",
    "DmlibError",
    "ConversionError",
    # Config
    "LibConfig",
    "DEFAULT_CONFIG",
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
    # Interop
    "HostMap",
    "to_host",
    "from_host",
    "to_host_fn",
    "filter_map",
]
