# dashchain init

from .dashchain import (
    DashUtility,
    FUNCTIONS,
    UNCHAINABLE,
    UNDEF,
    add,
    after,
    ary,
    assign,
    attempt,
    before,
    camel_case,
    capitalize,
    cast_array,
    ceil,
    chunk,
    clamp,
    clone,
    clone_deep,
    compact,
    concat,
    constant,
    count_by,
    default_to,
    defaults,
    difference,
    divide,
    drop,
    drop_right,
    drop_right_while,
    drop_while,
    each,
    ends_with,
    eq,
    escape,
    escape_reg_exp,
    every,
    fill,
    filter,
    find,
    find_index,
    find_key,
    find_last,
    find_last_index,
    first,
    flat_map,
    flatten,
    flatten_deep,
    flatten_depth,
    floor,
    flow,
    flow_right,
    for_each,
    for_each_right,
    from_pairs,
    get,
    group_by,
    gt,
    gte,
    has,
    head,
    identity,
    in_range,
    includes,
    index_of,
    initial,
    intersection,
    invert,
    is_array,
    is_boolean,
    is_dict,
    is_empty,
    is_equal,
    is_function,
    is_integer,
    is_nil,
    is_none,
    is_number,
    is_string,
    iteratee,
    join,
    kebab_case,
    key_by,
    keys,
    last,
    last_index_of,
    lower_case,
    lower_first,
    lt,
    lte,
    map,
    map_keys,
    map_values,
    matches,
    matches_property,
    max,
    max_by,
    mean,
    mean_by,
    merge,
    min,
    min_by,
    multiply,
    negate,
    noop,
    now,
    nth,
    omit,
    omit_by,
    once,
    order_by,
    pad,
    pad_end,
    pad_start,
    partial,
    partial_right,
    partition,
    pick,
    pick_by,
    property,
    pull,
    pull_at,
    random,
    range,
    range_right,
    rearg,
    reduce,
    reduce_right,
    reject,
    remove,
    repeat,
    replace,
    reverse,
    round,
    sample,
    sample_size,
    set,
    shuffle,
    size,
    slice,
    snake_case,
    some,
    sort_by,
    sorted_index,
    sorted_uniq,
    split,
    spread,
    start_case,
    starts_with,
    stub_array,
    stub_dict,
    stub_false,
    stub_string,
    stub_true,
    subtract,
    sum,
    sum_by,
    tail,
    take,
    take_right,
    take_right_while,
    take_while,
    tap,
    thru,
    times,
    to_array,
    to_integer,
    to_lower,
    to_number,
    to_pairs,
    to_path,
    to_string,
    to_upper,
    trim,
    trim_end,
    trim_start,
    truncate,
    unary,
    unescape,
    union,
    uniq,
    uniq_by,
    unique_id,
    unset,
    unzip,
    update,
    upper_case,
    upper_first,
    values,
    without,
    words,
    wrap,
    zip,
    zip_object
)

from .chain import (
    COLLECTION_BUILTINS,
    Chain,
    STRING_BUILTINS,
    chain
)

from .errors import (
    ChainStateError,
    DashError,
    MethodNotFoundError
)


__all__ = [
    'COLLECTION_BUILTINS',
    'Chain',
    'ChainStateError',
    'DashError',
    'DashUtility',
    'FUNCTIONS',
    'MethodNotFoundError',
    'STRING_BUILTINS',
    'UNCHAINABLE',
    'UNDEF',
    'chain',
    'add',
    'after',
    'ary',
    'assign',
    'attempt',
    'before',
    'camel_case',
    'capitalize',
    'cast_array',
    'ceil',
    'chunk',
    'clamp',
    'clone',
    'clone_deep',
    'compact',
    'concat',
    'constant',
    'count_by',
    'default_to',
    'defaults',
    'difference',
    'divide',
    'drop',
    'drop_right',
    'drop_right_while',
    'drop_while',
    'each',
    'ends_with',
    'eq',
    'escape',
    'escape_reg_exp',
    'every',
    'fill',
    'filter',
    'find',
    'find_index',
    'find_key',
    'find_last',
    'find_last_index',
    'first',
    'flat_map',
    'flatten',
    'flatten_deep',
    'flatten_depth',
    'floor',
    'flow',
    'flow_right',
    'for_each',
    'for_each_right',
    'from_pairs',
    'get',
    'group_by',
    'gt',
    'gte',
    'has',
    'head',
    'identity',
    'in_range',
    'includes',
    'index_of',
    'initial',
    'intersection',
    'invert',
    'is_array',
    'is_boolean',
    'is_dict',
    'is_empty',
    'is_equal',
    'is_function',
    'is_integer',
    'is_nil',
    'is_none',
    'is_number',
    'is_string',
    'iteratee',
    'join',
    'kebab_case',
    'key_by',
    'keys',
    'last',
    'last_index_of',
    'lower_case',
    'lower_first',
    'lt',
    'lte',
    'map',
    'map_keys',
    'map_values',
    'matches',
    'matches_property',
    'max',
    'max_by',
    'mean',
    'mean_by',
    'merge',
    'min',
    'min_by',
    'multiply',
    'negate',
    'noop',
    'now',
    'nth',
    'omit',
    'omit_by',
    'once',
    'order_by',
    'pad',
    'pad_end',
    'pad_start',
    'partial',
    'partial_right',
    'partition',
    'pick',
    'pick_by',
    'property',
    'pull',
    'pull_at',
    'random',
    'range',
    'range_right',
    'rearg',
    'reduce',
    'reduce_right',
    'reject',
    'remove',
    'repeat',
    'replace',
    'reverse',
    'round',
    'sample',
    'sample_size',
    'set',
    'shuffle',
    'size',
    'slice',
    'snake_case',
    'some',
    'sort_by',
    'sorted_index',
    'sorted_uniq',
    'split',
    'spread',
    'start_case',
    'starts_with',
    'stub_array',
    'stub_dict',
    'stub_false',
    'stub_string',
    'stub_true',
    'subtract',
    'sum',
    'sum_by',
    'tail',
    'take',
    'take_right',
    'take_right_while',
    'take_while',
    'tap',
    'thru',
    'times',
    'to_array',
    'to_integer',
    'to_lower',
    'to_number',
    'to_pairs',
    'to_path',
    'to_string',
    'to_upper',
    'trim',
    'trim_end',
    'trim_start',
    'truncate',
    'unary',
    'unescape',
    'union',
    'uniq',
    'uniq_by',
    'unique_id',
    'unset',
    'unzip',
    'update',
    'upper_case',
    'upper_first',
    'values',
    'without',
    'words',
    'wrap',
    'zip',
    'zip_object',
]
