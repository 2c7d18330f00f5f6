# Copyright (c) 2025 dashchain contributors. MIT LICENSE.
#
# Dashchain
# =========
#
# Utility functions over lists, dicts, strings and functions, in the
# style of lodash. Every function stands alone. Functions are pure and
# return new values, except where noted as mutating: those change their
# first argument in place and return it (or the removed elements).
#
# Array
# - chunk, compact, concat, difference, drop, drop_right, drop_right_while,
#   drop_while, fill (mutates), find_index, find_last_index, first/head,
#   flatten, flatten_deep, flatten_depth, from_pairs, index_of, initial,
#   intersection, join, last, last_index_of, nth, pull (mutates),
#   pull_at (mutates), remove (mutates), reverse, slice, sorted_index,
#   sorted_uniq, tail, take, take_right, take_right_while, take_while,
#   union, uniq, uniq_by, unzip, without, zip, zip_object.
#
# Collection (dicts by value, strings by character, other iterables by item)
# - count_by, every, filter, find, find_last, flat_map, for_each/each,
#   for_each_right, group_by, includes, key_by, map, order_by, partition,
#   reduce, reduce_right, reject, sample, sample_size, shuffle, size,
#   some, sort_by.
#
# Function
# - after, ary, before, negate, once, partial, partial_right, rearg,
#   spread, unary, wrap.
#
# Lang
# - cast_array, clone, clone_deep, eq, gt, gte, is_*, lt, lte, to_array,
#   to_integer, to_number, to_string.
#
# Math
# - add, ceil, clamp, divide, floor, in_range, max, max_by, mean, mean_by,
#   min, min_by, multiply, random, round, subtract, sum, sum_by.
#
# Object
# - assign (mutates), defaults (mutates), find_key, get, has, invert,
#   keys, map_keys, map_values, merge (mutates), omit, omit_by, pick,
#   pick_by, set (mutates), to_pairs, unset (mutates), update (mutates),
#   values.
#
# Seq
# - tap, thru.
#
# String
# - camel_case, capitalize, ends_with, escape, escape_reg_exp, kebab_case,
#   lower_case, lower_first, pad, pad_end, pad_start, repeat, replace,
#   snake_case, split, start_case, starts_with, to_lower, to_upper, trim,
#   trim_end, trim_start, truncate, unescape, upper_case, upper_first,
#   words.
#
# Util
# - attempt, constant, default_to, flow, flow_right, identity, iteratee,
#   matches, matches_property, noop, now, property, range, range_right,
#   stub_*, times, to_path, unique_id.
#
# Iteratees: wherever a function takes an iteratee or predicate, the
# shorthand forms of `iteratee` are accepted. Iteratees are called with
# one argument, the element (the value, for dicts). Reducers are called
# with (accumulator, value).
#
# NOTE: several names here shadow builtins (map, filter, max, min, sum,
# round, range, slice, set, zip, property). Inside this module the
# builtins are reached through `builtins`.


from typing import *
import builtins
import copy
import functools
import itertools
import logging
import math
import random as _random
import re
import sys
import time


logger = logging.getLogger(__name__)


# The standard undefined value for this language.
UNDEF = None

# Marks an argument that was not given, where None is a valid value.
_MISSING = object()

# Sort orders.
S_asc = 'asc'
S_desc = 'desc'

# General strings.
S_MT = ''
S_SP = ' '
S_CM = ','

# Regex patterns for string processing.
R_WORDS = re.compile(
    r'[A-Z]{2,}(?=[A-Z][a-z]+[0-9]*|[^A-Za-z]|$)'  # Acronyms: XMLHttp, FOO_BAR.
    r'|[A-Z]?[a-z]+[0-9]*'                         # Words: foo, Bar, abc123.
    r'|[A-Z]'                                      # Single capitals.
    r'|[0-9]+'                                     # Numbers.
)
R_PATH_PART = re.compile(r'[^.\[\]]+')
R_INT_KEY = re.compile(r'^-?[0-9]+$')
R_REGEXP_CHAR = re.compile(r'[\\^$.*+?()\[\]{}|]')
R_HTML_ESCAPE = re.compile(r'[&<>"\']')
R_HTML_UNESCAPE = re.compile(r'&(?:amp|lt|gt|quot|#39);')

HTML_ESCAPES = {
    '&': '&amp;',
    '<': '&lt;',
    '>': '&gt;',
    '"': '&quot;',
    "'": '&#39;',
}
HTML_UNESCAPES = {v: k for k, v in HTML_ESCAPES.items()}


# Names that are not exposed as chain methods: predicates, constants,
# scalar reducers and string formatters, whose results are not meant to
# continue a chain. Kept as a literal list; names need not be present in
# the registry.
UNCHAINABLE = frozenset((
    'add', 'attempt', 'camel_case', 'capitalize', 'ceil', 'clamp', 'clone',
    'clone_deep', 'clone_deep_with', 'clone_with', 'conforms_to', 'deburr',
    'default_to', 'divide', 'each', 'each_right', 'ends_with', 'eq',
    'escape', 'escape_reg_exp', 'every', 'find', 'find_index', 'find_key',
    'find_last', 'find_last_index', 'find_last_key', 'first', 'floor',
    'for_each', 'for_each_right', 'for_in', 'for_in_right', 'for_own',
    'for_own_right', 'get', 'gt', 'gte', 'has', 'has_in', 'head',
    'identity', 'includes', 'index_of', 'in_range', 'invoke',
    'is_arguments', 'is_array', 'is_array_buffer', 'is_array_like',
    'is_array_like_object', 'is_boolean', 'is_buffer', 'is_date',
    'is_dict', 'is_element', 'is_empty', 'is_equal', 'is_equal_with',
    'is_error', 'is_finite', 'is_function', 'is_integer', 'is_length',
    'is_map', 'is_match', 'is_match_with', 'is_nan', 'is_native', 'is_nil',
    'is_none', 'is_null', 'is_number', 'is_object', 'is_object_like',
    'is_plain_object', 'is_reg_exp', 'is_safe_integer', 'is_set',
    'is_string', 'is_undefined', 'is_typed_array', 'is_weak_map',
    'is_weak_set', 'join', 'kebab_case', 'last', 'last_index_of',
    'lower_case', 'lower_first', 'lt', 'lte', 'max', 'max_by', 'mean',
    'mean_by', 'min', 'min_by', 'multiply', 'no_conflict', 'noop', 'now',
    'nth', 'pad', 'pad_end', 'pad_start', 'parse_int', 'pop', 'random',
    'reduce', 'reduce_right', 'repeat', 'result', 'round',
    'run_in_context', 'sample', 'shift', 'size', 'snake_case', 'some',
    'sorted_index', 'sorted_index_by', 'sorted_last_index',
    'sorted_last_index_by', 'start_case', 'starts_with', 'stub_array',
    'stub_dict', 'stub_false', 'stub_object', 'stub_string', 'stub_true',
    'subtract', 'sum', 'sum_by', 'template', 'times', 'to_finite',
    'to_integer', 'to_json', 'to_length', 'to_lower', 'to_number',
    'to_safe_integer', 'to_string', 'to_upper', 'trim', 'trim_end',
    'trim_start', 'truncate', 'unescape', 'unique_id', 'upper_case',
    'upper_first', 'value', 'words',
))


def _isnode(val: Any = UNDEF) -> bool:
    return isinstance(val, (dict, list))


def _seq(val: Any) -> list:
    """
    Values of a collection as a list: dict values, string characters, the
    items of any other iterable. Non-iterables give [].
    """
    if UNDEF is val:
        return []
    if isinstance(val, dict):
        return list(val.values())
    if isinstance(val, Iterable):
        return list(val)
    return []


def _flat(args) -> list:
    "Flatten one level of list or tuple arguments."
    out = []
    for arg in args:
        if isinstance(arg, (list, tuple)):
            out.extend(arg)
        else:
            out.append(arg)
    return out


def _span(length: int, start: Any = UNDEF, end: Any = UNDEF) -> Tuple[int, int]:
    "Resolve start and end positions, counting negatives from the end."
    start = 0 if UNDEF is start else to_integer(start)
    end = length if UNDEF is end else to_integer(end)
    if start < 0:
        start = builtins.max(length + start, 0)
    if end < 0:
        end = builtins.max(length + end, 0)
    return builtins.min(start, length), builtins.min(end, length)


def _getkey(val: Any, key: Any) -> Tuple[bool, Any]:
    """
    Look up one key of a node. Returns (found, value).
    Dicts try the key as given, then as an integer or string equivalent.
    Lists, tuples and strings accept integer keys or integer strings.
    """
    if isinstance(val, dict):
        if key in val:
            return True, val[key]
        if isinstance(key, str) and R_INT_KEY.match(key) and int(key) in val:
            return True, val[int(key)]
        if isinstance(key, int) and not isinstance(key, bool) and str(key) in val:
            return True, val[str(key)]
        return False, UNDEF

    if isinstance(val, (list, tuple, str)):
        if isinstance(key, bool):
            return False, UNDEF
        if isinstance(key, str) and R_INT_KEY.match(key):
            key = int(key)
        if isinstance(key, int) and -len(val) <= key < len(val):
            return True, val[key]

    return False, UNDEF


def _pathkey(part: Any, container: Any) -> Any:
    "Key to use when writing a path part into a container."
    if isinstance(container, list) and isinstance(part, str) and R_INT_KEY.match(part):
        return int(part)
    return part


def _isindex(part: Any) -> bool:
    if isinstance(part, bool):
        return False
    if isinstance(part, int):
        return part >= 0
    return isinstance(part, str) and R_INT_KEY.match(part) is not None and not part.startswith('-')


def _putkey(container: Any, key: Any, val: Any) -> None:
    "Set a key on a dict or list, extending lists with None as needed."
    if isinstance(container, list):
        key = int(key)
        if key >= len(container):
            container.extend([UNDEF] * (key + 1 - len(container)))
        container[key] = val
    else:
        container[key] = val


# Array
# =====

def chunk(array: Sequence, size: int = 1) -> list:
    "Split a list into groups of `size` elements. The final group may be shorter."
    size = to_integer(size)
    if size < 1:
        return []
    items = list(array)
    return [items[i:i + size] for i in builtins.range(0, len(items), size)]


def compact(array: Sequence) -> list:
    "Remove falsey values (None, False, 0, '', empty nodes)."
    return [v for v in array if v]


def concat(array: Any, *values: Any) -> list:
    "Concatenate a list with values and lists of values (one level)."
    out = list(array) if isinstance(array, (list, tuple)) else [array]
    out.extend(_flat(values))
    return out


def difference(array: Sequence, *others: Sequence) -> list:
    "Values of `array` not present in any of the other lists."
    exclude = _flat(others)
    return [v for v in array if v not in exclude]


def drop(array: Sequence, n: int = 1) -> list:
    return list(array)[builtins.max(to_integer(n), 0):]


def drop_right(array: Sequence, n: int = 1) -> list:
    items = list(array)
    return items[:builtins.max(len(items) - to_integer(n), 0)]


def drop_right_while(array: Sequence, predicate: Any = UNDEF) -> list:
    "Drop elements from the end while the predicate holds."
    pred = iteratee(predicate)
    items = list(array)
    end = len(items)
    while 0 < end and pred(items[end - 1]):
        end -= 1
    return items[:end]


def drop_while(array: Sequence, predicate: Any = UNDEF) -> list:
    "Drop elements from the start while the predicate holds."
    pred = iteratee(predicate)
    items = list(array)
    start = 0
    while start < len(items) and pred(items[start]):
        start += 1
    return items[start:]


def fill(array: list, value: Any, start: int = UNDEF, end: int = UNDEF) -> list:
    "Fill elements from start up to, not including, end with value. Mutates."
    start, end = _span(len(array), start, end)
    for i in builtins.range(start, end):
        array[i] = value
    return array


def find_index(array: Sequence, predicate: Any = UNDEF, from_index: int = 0) -> int:
    "Index of the first element the predicate holds for, else -1."
    pred = iteratee(predicate)
    start, _ = _span(len(array), from_index)
    for i in builtins.range(start, len(array)):
        if pred(array[i]):
            return i
    return -1


def find_last_index(array: Sequence, predicate: Any = UNDEF, from_index: int = UNDEF) -> int:
    "Index of the last element the predicate holds for, else -1."
    pred = iteratee(predicate)
    length = len(array)
    start = length - 1
    if UNDEF is not from_index:
        start = to_integer(from_index)
        start = builtins.min(length + start if start < 0 else start, length - 1)
    for i in builtins.range(start, -1, -1):
        if pred(array[i]):
            return i
    return -1


def head(array: Sequence) -> Any:
    "First element, or None if empty."
    return array[0] if UNDEF is not array and 0 < len(array) else UNDEF


first = head


def flatten(array: Sequence) -> list:
    "Flatten one level."
    return _flat(array)


def flatten_deep(array: Sequence) -> list:
    "Flatten recursively."
    return flatten_depth(array, math.inf)


def flatten_depth(array: Sequence, depth: int = 1) -> list:
    "Flatten up to `depth` levels."
    out = []
    for v in array:
        if isinstance(v, (list, tuple)) and 0 < depth:
            out.extend(flatten_depth(v, depth - 1))
        else:
            out.append(v)
    return out


def from_pairs(pairs: Sequence) -> dict:
    "Inverse of to_pairs."
    return {pair[0]: pair[1] for pair in pairs}


def index_of(array: Sequence, value: Any, from_index: int = 0) -> int:
    start, _ = _span(len(array), from_index)
    for i in builtins.range(start, len(array)):
        if eq(array[i], value):
            return i
    return -1


def initial(array: Sequence) -> list:
    "All but the last element."
    return list(array)[:-1]


def intersection(*arrays: Sequence) -> list:
    "Unique values present in every list, in the order of the first list."
    if 0 == len(arrays):
        return []
    rest = arrays[1:]
    return [v for v in uniq(arrays[0]) if all(v in other for other in rest)]


def join(array: Sequence, separator: str = S_CM) -> str:
    "Join elements as strings. None elements become empty strings."
    return separator.join(to_string(v) for v in array)


def last(array: Sequence) -> Any:
    "Last element, or None if empty."
    return array[-1] if UNDEF is not array and 0 < len(array) else UNDEF


def last_index_of(array: Sequence, value: Any, from_index: int = UNDEF) -> int:
    return find_last_index(array, lambda v: eq(v, value), from_index)


def nth(array: Sequence, n: int = 0) -> Any:
    "Element at index n. Negative n counts from the end."
    n = to_integer(n)
    return array[n] if -len(array) <= n < len(array) else UNDEF


def pull(array: list, *values: Any) -> list:
    "Remove all given values. Mutates."
    array[:] = [v for v in array if v not in values]
    return array


def pull_at(array: list, *indexes: Any) -> list:
    """
    Remove the elements at the given indexes and return them, in the
    order of the indexes. Mutates.
    """
    indexes = [to_integer(i) for i in _flat(indexes)]
    length = len(array)
    removed = [array[i] if -length <= i < length else UNDEF for i in indexes]
    doomed = sorted({i % length for i in indexes if -length <= i < length}, reverse=True)
    for i in doomed:
        del array[i]
    return removed


def remove(array: list, predicate: Any = UNDEF) -> list:
    "Remove elements the predicate holds for, and return them. Mutates."
    pred = iteratee(predicate)
    removed = []
    kept = []
    for v in array:
        (removed if pred(v) else kept).append(v)
    array[:] = kept
    return removed


def reverse(array: Sequence) -> Any:
    "Reversed copy. Strings reverse to strings."
    if isinstance(array, str):
        return array[::-1]
    return list(array)[::-1]


def slice(array: Sequence, start: int = 0, end: int = UNDEF) -> Any:
    "Part of a list (or string) from start up to, not including, end."
    start, end = _span(len(array), start, end)
    part = array[start:end]
    return part if isinstance(array, str) else list(part)


def sorted_index(array: Sequence, value: Any, iteratee_: Any = UNDEF) -> int:
    "Lowest index at which value should be inserted to keep a sorted list sorted."
    fn = iteratee(iteratee_)
    target = fn(value)
    low, high = 0, len(array)
    while low < high:
        mid = (low + high) // 2
        if fn(array[mid]) < target:
            low = mid + 1
        else:
            high = mid
    return low


def sorted_uniq(array: Sequence) -> list:
    "Unique values of a sorted list."
    out = []
    for v in array:
        if 0 == len(out) or out[-1] != v:
            out.append(v)
    return out


def tail(array: Sequence) -> list:
    "All but the first element."
    return list(array)[1:]


def take(array: Sequence, n: int = 1) -> list:
    return list(array)[:builtins.max(to_integer(n), 0)]


def take_right(array: Sequence, n: int = 1) -> list:
    n = to_integer(n)
    if n < 1:
        return []
    return list(array)[-n:]


def take_right_while(array: Sequence, predicate: Any = UNDEF) -> list:
    pred = iteratee(predicate)
    items = list(array)
    start = len(items)
    while 0 < start and pred(items[start - 1]):
        start -= 1
    return items[start:]


def take_while(array: Sequence, predicate: Any = UNDEF) -> list:
    pred = iteratee(predicate)
    items = list(array)
    end = 0
    while end < len(items) and pred(items[end]):
        end += 1
    return items[:end]


def union(*arrays: Sequence) -> list:
    "Unique values, in order, from all lists."
    return uniq(_flat(arrays))


def uniq(array: Sequence) -> list:
    "Unique values in order of first occurrence. Values need not be hashable."
    out = []
    for v in array:
        if v not in out:
            out.append(v)
    return out


def uniq_by(array: Sequence, iteratee_: Any = UNDEF) -> list:
    "Like uniq, comparing by the iteratee result."
    fn = iteratee(iteratee_)
    seen = []
    out = []
    for v in array:
        computed = fn(v)
        if computed not in seen:
            seen.append(computed)
            out.append(v)
    return out


def unzip(array: Sequence) -> list:
    "Regroup a list of grouped elements. Short groups are padded with None."
    width = builtins.max((len(group) for group in array), default=0)
    return [[group[i] if i < len(group) else UNDEF for group in array]
            for i in builtins.range(width)]


def without(array: Sequence, *values: Any) -> list:
    return [v for v in array if v not in values]


def zip(*arrays: Sequence) -> list:
    "Group the first elements, then the second elements, and so on."
    return unzip(arrays)


def zip_object(props: Sequence, values: Sequence = ()) -> dict:
    return {k: values[i] if i < len(values) else UNDEF for i, k in enumerate(props)}


# Collection
# ==========

def count_by(collection: Any, iteratee_: Any = UNDEF) -> dict:
    "Count elements by iteratee result."
    fn = iteratee(iteratee_)
    out = {}
    for v in _seq(collection):
        key = fn(v)
        out[key] = out.get(key, 0) + 1
    return out


def for_each(collection: Any, iteratee_: Any = UNDEF) -> Any:
    "Call the iteratee for each element. Returning False stops early."
    fn = iteratee(iteratee_)
    for v in _seq(collection):
        if fn(v) is False:
            break
    return collection


each = for_each


def for_each_right(collection: Any, iteratee_: Any = UNDEF) -> Any:
    fn = iteratee(iteratee_)
    for v in reversed(_seq(collection)):
        if fn(v) is False:
            break
    return collection


def every(collection: Any, predicate: Any = UNDEF) -> bool:
    pred = iteratee(predicate)
    return all(pred(v) for v in _seq(collection))


def filter(collection: Any, predicate: Any = UNDEF) -> list:
    pred = iteratee(predicate)
    return [v for v in _seq(collection) if pred(v)]


def find(collection: Any, predicate: Any = UNDEF, from_index: int = 0) -> Any:
    "First element the predicate holds for, else None."
    pred = iteratee(predicate)
    items = _seq(collection)
    start, _ = _span(len(items), from_index)
    for v in items[start:]:
        if pred(v):
            return v
    return UNDEF


def find_last(collection: Any, predicate: Any = UNDEF) -> Any:
    pred = iteratee(predicate)
    for v in reversed(_seq(collection)):
        if pred(v):
            return v
    return UNDEF


def flat_map(collection: Any, iteratee_: Any = UNDEF) -> list:
    "Map, then flatten one level."
    return _flat(map(collection, iteratee_))


def group_by(collection: Any, iteratee_: Any = UNDEF) -> dict:
    "Group elements into lists keyed by iteratee result."
    fn = iteratee(iteratee_)
    out = {}
    for v in _seq(collection):
        out.setdefault(fn(v), []).append(v)
    return out


def includes(collection: Any, value: Any, from_index: int = 0) -> bool:
    "Value is in the collection. For strings, value is a substring."
    if isinstance(collection, str):
        start, _ = _span(len(collection), from_index)
        return value in collection[start:]
    items = _seq(collection)
    start, _ = _span(len(items), from_index)
    return value in items[start:]


def key_by(collection: Any, iteratee_: Any = UNDEF) -> dict:
    "Dict of elements keyed by iteratee result. Later elements win."
    fn = iteratee(iteratee_)
    return {fn(v): v for v in _seq(collection)}


def map(collection: Any, iteratee_: Any = UNDEF) -> list:
    fn = iteratee(iteratee_)
    return [fn(v) for v in _seq(collection)]


def order_by(collection: Any, iteratees: Any = UNDEF, orders: Any = UNDEF) -> list:
    """
    Stable sort by several iteratees. Orders are 'asc' (default) or
    'desc', one per iteratee.
    """
    fns = [iteratee(it) for it in cast_array(iteratees)]
    orders = cast_array(orders)
    out = _seq(collection)

    # Sort by the least significant key first; sort is stable.
    for i in builtins.range(len(fns) - 1, -1, -1):
        order = orders[i] if i < len(orders) else S_asc
        out.sort(key=fns[i], reverse=S_desc == order)

    return out


def partition(collection: Any, predicate: Any = UNDEF) -> list:
    "Split into [truthy, falsey] lists."
    pred = iteratee(predicate)
    truthy, falsey = [], []
    for v in _seq(collection):
        (truthy if pred(v) else falsey).append(v)
    return [truthy, falsey]


def reduce(collection: Any, iteratee_: Callable, accumulator: Any = _MISSING) -> Any:
    """
    Reduce a collection to a value. Without an accumulator the first
    element is used as the initial value.
    """
    items = _seq(collection)
    if accumulator is _MISSING:
        if 0 == len(items):
            return UNDEF
        accumulator, items = items[0], items[1:]
    for v in items:
        accumulator = iteratee_(accumulator, v)
    return accumulator


def reduce_right(collection: Any, iteratee_: Callable, accumulator: Any = _MISSING) -> Any:
    return reduce(list(reversed(_seq(collection))), iteratee_, accumulator)


def reject(collection: Any, predicate: Any = UNDEF) -> list:
    "Opposite of filter."
    pred = iteratee(predicate)
    return [v for v in _seq(collection) if not pred(v)]


def sample(collection: Any) -> Any:
    items = _seq(collection)
    return _random.choice(items) if items else UNDEF


def sample_size(collection: Any, n: int = 1) -> list:
    items = _seq(collection)
    return _random.sample(items, builtins.min(builtins.max(to_integer(n), 0), len(items)))


def shuffle(collection: Any) -> list:
    items = _seq(collection)
    _random.shuffle(items)
    return items


def size(collection: Any) -> int:
    "Number of elements of a list, dict or string. Other values have size 0."
    if isinstance(collection, (list, tuple, dict, str)):
        return len(collection)
    return 0


def some(collection: Any, predicate: Any = UNDEF) -> bool:
    pred = iteratee(predicate)
    return any(pred(v) for v in _seq(collection))


def sort_by(collection: Any, iteratees: Any = UNDEF) -> list:
    "Stable ascending sort by one or more iteratees."
    return order_by(collection, iteratees)


# Function
# ========

def after(n: int, func: Callable) -> Callable:
    "Function that calls func only once it has been called n or more times."
    calls = 0

    def after_func(*args, **kwargs):
        nonlocal calls
        calls += 1
        if n <= calls:
            return func(*args, **kwargs)
        return UNDEF

    return after_func


def ary(func: Callable, n: int = UNDEF) -> Callable:
    "Function that calls func with at most n arguments."
    def capped(*args):
        return func(*(args if UNDEF is n else args[:n]))
    return capped


def before(n: int, func: Callable) -> Callable:
    """
    Function that calls func while it has been called fewer than n times.
    Later calls return the result of the last func call.
    """
    calls = 0
    result = UNDEF

    def before_func(*args, **kwargs):
        nonlocal calls, result
        calls += 1
        if calls < n:
            result = func(*args, **kwargs)
        return result

    return before_func


def negate(predicate: Callable) -> Callable:
    def negated(*args, **kwargs):
        return not predicate(*args, **kwargs)
    return negated


def once(func: Callable) -> Callable:
    return before(2, func)


def partial(func: Callable, *partials: Any) -> Callable:
    "Function with arguments prepended."
    return functools.partial(func, *partials)


def partial_right(func: Callable, *partials: Any) -> Callable:
    "Function with arguments appended."
    def partial_right_func(*args):
        return func(*args, *partials)
    return partial_right_func


def rearg(func: Callable, *indexes: Any) -> Callable:
    "Function whose arguments are rearranged by index."
    indexes = [to_integer(i) for i in _flat(indexes)]

    def rearg_func(*args):
        moved = [args[i] if i < len(args) else UNDEF for i in indexes]
        return func(*moved, *args[len(indexes):])

    return rearg_func


def spread(func: Callable, start: int = 0) -> Callable:
    "Function that calls func with the list at position start spread out."
    def spread_func(*args):
        spread_args = args[start] if start < len(args) else ()
        return func(*args[:start], *spread_args)
    return spread_func


def unary(func: Callable) -> Callable:
    return ary(func, 1)


def wrap(value: Any, wrapper: Callable = UNDEF) -> Callable:
    "Function that calls wrapper with value as the first argument."
    if UNDEF is wrapper:
        wrapper = identity

    def wrapped(*args, **kwargs):
        return wrapper(value, *args, **kwargs)

    return wrapped


# Lang
# ====

def cast_array(*args: Any) -> list:
    "Value as a list. Lists are returned as is; no argument gives []."
    if 0 == len(args):
        return []
    val = args[0]
    if isinstance(val, list):
        return val
    if isinstance(val, tuple):
        return list(val)
    return [val]


def clone(val: Any) -> Any:
    "Shallow copy."
    return copy.copy(val)


def clone_deep(val: Any) -> Any:
    """
    Deep copy.
    NOTE: function references are shared, not copied.
    """
    return copy.deepcopy(val)


def eq(val: Any, other: Any) -> bool:
    "Values are equal. NaN equals NaN."
    if val is other or val == other:
        return True
    return isinstance(val, float) and isinstance(other, float) and \
        math.isnan(val) and math.isnan(other)


def gt(val: Any, other: Any) -> bool:
    return val > other


def gte(val: Any, other: Any) -> bool:
    return val >= other


def lt(val: Any, other: Any) -> bool:
    return val < other


def lte(val: Any, other: Any) -> bool:
    return val <= other


def is_array(val: Any = UNDEF) -> bool:
    return isinstance(val, list)


def is_boolean(val: Any = UNDEF) -> bool:
    return isinstance(val, bool)


def is_dict(val: Any = UNDEF) -> bool:
    return isinstance(val, dict)


def is_empty(val: Any = UNDEF) -> bool:
    "None, scalars, and empty strings, lists and dicts are empty."
    if isinstance(val, (str, list, tuple, dict)):
        return 0 == len(val)
    if isinstance(val, (bool, int, float)) or UNDEF is val:
        return True
    try:
        return 0 == len(val)
    except TypeError:
        return True


def is_equal(val: Any, other: Any) -> bool:
    "Deep equality."
    return val == other


def is_function(val: Any = UNDEF) -> bool:
    return callable(val)


def is_integer(val: Any = UNDEF) -> bool:
    if isinstance(val, bool):
        return False
    if isinstance(val, int):
        return True
    return isinstance(val, float) and val.is_integer()


def is_nil(val: Any = UNDEF) -> bool:
    return UNDEF is val


is_none = is_nil


def is_number(val: Any = UNDEF) -> bool:
    return isinstance(val, (int, float)) and not isinstance(val, bool)


def is_string(val: Any = UNDEF) -> bool:
    return isinstance(val, str)


def to_array(val: Any = UNDEF) -> list:
    "Values of a dict, characters of a string, or a copy of a list."
    return _seq(val)


def to_number(val: Any = UNDEF) -> Union[int, float]:
    "Convert to a number. Unconvertible values give NaN."
    if UNDEF is val:
        return 0
    if isinstance(val, bool):
        return int(val)
    if isinstance(val, (int, float)):
        return val
    if isinstance(val, str):
        val = val.strip()
        if S_MT == val:
            return 0
        try:
            return int(val, 0)
        except ValueError:
            pass
        try:
            return float(val)
        except ValueError:
            return math.nan
    return math.nan


def to_integer(val: Any = UNDEF) -> int:
    "Convert to an integer, truncating toward zero. NaN gives 0."
    num = to_number(val)
    if isinstance(num, int):
        return num
    if math.isnan(num):
        return 0
    if math.isinf(num):
        num = math.copysign(sys.float_info.max, num)
    return int(num)


def to_string(val: Any = UNDEF) -> str:
    "Convert to a string. None gives '', lists join with commas."
    if UNDEF is val:
        return S_MT
    if isinstance(val, str):
        return val
    if isinstance(val, (list, tuple)):
        return S_CM.join(to_string(v) for v in val)
    return str(val)


# Math
# ====

def _decimal_adjust(func: Callable, number: Any, precision: Any) -> Any:
    precision = to_integer(precision)
    if 0 < precision:
        factor = 10 ** precision
        return func(number * factor) / factor
    factor = 10 ** -precision
    return func(number / factor) * factor


def add(augend: Any, addend: Any) -> Any:
    return augend + addend


def subtract(minuend: Any, subtrahend: Any) -> Any:
    return minuend - subtrahend


def multiply(multiplier: Any, multiplicand: Any) -> Any:
    return multiplier * multiplicand


def divide(dividend: Any, divisor: Any) -> Any:
    return dividend / divisor


def ceil(number: Any, precision: int = 0) -> Any:
    "Round up to precision (digits after the point; negative rounds to tens etc)."
    return _decimal_adjust(math.ceil, number, precision)


def floor(number: Any, precision: int = 0) -> Any:
    return _decimal_adjust(math.floor, number, precision)


def round(number: Any, precision: int = 0) -> Any:
    "Round half up to precision."
    return _decimal_adjust(lambda n: math.floor(n + 0.5), number, precision)


def clamp(number: Any, lower: Any = UNDEF, upper: Any = UNDEF) -> Any:
    "Clamp number within bounds. With one bound, it is the upper bound."
    if UNDEF is upper:
        lower, upper = UNDEF, lower
    if UNDEF is not upper:
        number = builtins.min(number, upper)
    if UNDEF is not lower:
        number = builtins.max(number, lower)
    return number


def in_range(number: Any, start: Any = 0, end: Any = UNDEF) -> bool:
    "Number is between start and up to, not including, end."
    if UNDEF is end:
        start, end = 0, start
    if end < start:
        start, end = end, start
    return start <= number < end


def max(array: Sequence) -> Any:
    "Largest value, or None if empty."
    return builtins.max(array, default=UNDEF)


def max_by(array: Sequence, iteratee_: Any = UNDEF) -> Any:
    return builtins.max(array, key=iteratee(iteratee_)) if array else UNDEF


def min(array: Sequence) -> Any:
    return builtins.min(array, default=UNDEF)


def min_by(array: Sequence, iteratee_: Any = UNDEF) -> Any:
    return builtins.min(array, key=iteratee(iteratee_)) if array else UNDEF


def sum(array: Sequence) -> Any:
    return builtins.sum(array)


def sum_by(array: Sequence, iteratee_: Any = UNDEF) -> Any:
    return sum(map(array, iteratee_))


def mean(array: Sequence) -> float:
    "Mean of the values. Empty lists give NaN."
    return sum(array) / len(array) if array else math.nan


def mean_by(array: Sequence, iteratee_: Any = UNDEF) -> float:
    return mean(map(array, iteratee_))


def random(lower: Any = UNDEF, upper: Any = UNDEF, floating: bool = False) -> Any:
    """
    Random number between lower and upper, inclusive. With one bound the
    range is 0 to that bound; with none it is 0 to 1. Integers unless
    floating is set or a bound is a float.
    """
    if UNDEF is lower:
        lower = 1
    if UNDEF is upper:
        lower, upper = 0, lower
    if upper < lower:
        lower, upper = upper, lower
    if floating or isinstance(lower, float) or isinstance(upper, float):
        return _random.uniform(lower, upper)
    return _random.randint(lower, upper)


# Object
# ======

def assign(obj: dict, *sources: dict) -> dict:
    "Copy keys of the sources into obj. Later sources win. Mutates."
    for source in sources:
        if source:
            obj.update(source)
    return obj


def defaults(obj: dict, *sources: dict) -> dict:
    "Set keys of obj that are missing or None from the sources. Mutates."
    for source in sources:
        if source:
            for key, val in source.items():
                if UNDEF is obj.get(key):
                    obj[key] = val
    return obj


def find_key(obj: dict, predicate: Any = UNDEF) -> Any:
    "Key of the first value the predicate holds for, else None."
    pred = iteratee(predicate)
    for key, val in obj.items():
        if pred(val):
            return key
    return UNDEF


def to_path(val: Any) -> list:
    "Convert a path string like 'a[0].b' to a list of parts."
    if isinstance(val, (list, tuple)):
        return list(val)
    if isinstance(val, str):
        return R_PATH_PART.findall(val)
    if UNDEF is val:
        return []
    return [val]


def get(obj: Any, path: Any, default: Any = UNDEF) -> Any:
    "Value at path inside obj, or default when missing or None."
    parts = to_path(path)
    if 0 == len(parts):
        return default
    val = obj
    for part in parts:
        found, val = _getkey(val, part)
        if not found:
            return default
    return default if UNDEF is val else val


def has(obj: Any, path: Any) -> bool:
    "Path exists inside obj."
    parts = to_path(path)
    if 0 == len(parts):
        return False
    val = obj
    for part in parts:
        found, val = _getkey(val, part)
        if not found:
            return False
    return True


def invert(obj: dict) -> dict:
    return {val: key for key, val in obj.items()}


def keys(obj: Any) -> list:
    "Keys of a dict, or indexes of a list or string."
    if isinstance(obj, dict):
        return list(obj.keys())
    if isinstance(obj, (list, tuple, str)):
        return list(builtins.range(len(obj)))
    return []


def values(obj: Any) -> list:
    return _seq(obj)


def map_keys(obj: dict, iteratee_: Callable = UNDEF) -> dict:
    "Dict with the same values, keys mapped by the iteratee (called with the key)."
    fn = iteratee(iteratee_)
    return {fn(key): val for key, val in obj.items()}


def map_values(obj: dict, iteratee_: Any = UNDEF) -> dict:
    "Dict with the same keys, values mapped by the iteratee."
    fn = iteratee(iteratee_)
    return {key: fn(val) for key, val in obj.items()}


def _merge_node(target: Any, source: Any) -> None:
    pairs = source.items() if isinstance(source, dict) else enumerate(source)

    for key, val in pairs:
        if isinstance(target, dict):
            found = key in target
            cur = target.get(key)
        else:
            found = key < len(target)
            cur = target[key] if found else UNDEF

        if UNDEF is val and found:
            continue

        if _isnode(val) and type(val) is type(cur):
            _merge_node(cur, val)
        else:
            _putkey(target, key, clone_deep(val) if _isnode(val) else val)


def merge(obj: Any, *sources: Any) -> Any:
    """
    Deep merge sources into obj. Dicts merge by key, lists by index.
    Nodes of a different kind replace each other. None values in sources
    do not overwrite existing values. Mutates obj.
    """
    for source in sources:
        if _isnode(source) and type(source) is type(obj):
            _merge_node(obj, source)
    return obj


def omit(obj: dict, *paths: Any) -> dict:
    "Deep copy of obj without the given paths."
    out = clone_deep(obj)
    for path in _flat(paths):
        unset(out, path)
    return out


def omit_by(obj: dict, predicate: Any = UNDEF) -> dict:
    pred = iteratee(predicate)
    return {key: val for key, val in obj.items() if not pred(val)}


def pick(obj: dict, *paths: Any) -> dict:
    "Dict of only the given paths of obj."
    out = {}
    for path in _flat(paths):
        if has(obj, path):
            set(out, path, get(obj, path))
    return out


def pick_by(obj: dict, predicate: Any = UNDEF) -> dict:
    pred = iteratee(predicate)
    return {key: val for key, val in obj.items() if pred(val)}


def set(obj: Any, path: Any, val: Any) -> Any:
    """
    Set the value at path, creating missing nodes: lists for index parts,
    dicts otherwise. Mutates.
    """
    parts = to_path(path)
    if 0 == len(parts):
        return obj

    node = obj
    for pI, part in enumerate(parts):
        key = _pathkey(part, node)
        if pI == len(parts) - 1:
            _putkey(node, key, val)
        else:
            _, child = _getkey(node, key)
            if not _isnode(child):
                child = [] if _isindex(parts[pI + 1]) else {}
                _putkey(node, key, child)
            node = child

    return obj


def unset(obj: Any, path: Any) -> Any:
    "Remove the value at path, if present. Mutates."
    parts = to_path(path)
    if 0 == len(parts):
        return obj

    parent = obj
    for part in parts[:-1]:
        found, parent = _getkey(parent, part)
        if not found:
            return obj

    key = parts[-1]
    if isinstance(parent, dict):
        if key in parent:
            del parent[key]
        elif isinstance(key, str) and R_INT_KEY.match(key) and int(key) in parent:
            del parent[int(key)]
    elif isinstance(parent, list):
        found, _ = _getkey(parent, key)
        if found:
            del parent[int(key)]

    return obj


def update(obj: Any, path: Any, updater: Callable) -> Any:
    "Set the value at path to updater(current value). Mutates."
    return set(obj, path, updater(get(obj, path)))


def to_pairs(obj: dict) -> list:
    return [[key, val] for key, val in obj.items()]


# Seq
# ===

def tap(val: Any, interceptor: Callable) -> Any:
    "Call interceptor with val, then return val."
    interceptor(val)
    return val


def thru(val: Any, interceptor: Callable) -> Any:
    "Return the result of calling interceptor with val."
    return interceptor(val)


# String
# ======

def words(string: str, pattern: Any = UNDEF) -> list:
    "Split a string into words. Splits camelCase, snake_case, kebab-case."
    if UNDEF is pattern:
        return R_WORDS.findall(to_string(string))
    return re.findall(pattern, to_string(string))


def _upper_first_lower_rest(word: str) -> str:
    return word[:1].upper() + word[1:].lower()


def camel_case(string: str) -> str:
    parts = words(string)
    if 0 == len(parts):
        return S_MT
    return parts[0].lower() + S_MT.join(_upper_first_lower_rest(w) for w in parts[1:])


def kebab_case(string: str) -> str:
    return '-'.join(w.lower() for w in words(string))


def snake_case(string: str) -> str:
    return '_'.join(w.lower() for w in words(string))


def lower_case(string: str) -> str:
    return S_SP.join(w.lower() for w in words(string))


def upper_case(string: str) -> str:
    return S_SP.join(w.upper() for w in words(string))


def start_case(string: str) -> str:
    return S_SP.join(upper_first(w) for w in words(string))


def capitalize(string: str) -> str:
    return _upper_first_lower_rest(to_string(string))


def lower_first(string: str) -> str:
    string = to_string(string)
    return string[:1].lower() + string[1:]


def upper_first(string: str) -> str:
    string = to_string(string)
    return string[:1].upper() + string[1:]


def ends_with(string: str, target: str, position: int = UNDEF) -> bool:
    "String ends with target, checking up to position."
    string = to_string(string)
    end = len(string) if UNDEF is position else _span(len(string), position)[0]
    return string[:end].endswith(target)


def starts_with(string: str, target: str, position: int = 0) -> bool:
    string = to_string(string)
    start, _ = _span(len(string), position)
    return string.startswith(target, start)


def escape(string: str) -> str:
    "Escape the HTML characters &, <, >, \" and '."
    return R_HTML_ESCAPE.sub(lambda m: HTML_ESCAPES[m.group(0)], to_string(string))


def unescape(string: str) -> str:
    "Inverse of escape."
    return R_HTML_UNESCAPE.sub(lambda m: HTML_UNESCAPES[m.group(0)], to_string(string))


def escape_reg_exp(string: str) -> str:
    "Escape regular expression special characters."
    return R_REGEXP_CHAR.sub(lambda m: '\\' + m.group(0), to_string(string))


def _padding(length: int, chars: str) -> str:
    if length <= 0 or S_MT == chars:
        return S_MT
    return (chars * (length // len(chars) + 1))[:length]


def pad(string: str, length: int = 0, chars: str = S_SP) -> str:
    "Pad both sides to length. Padding chars are truncated to fit."
    string = to_string(string)
    missing = to_integer(length) - len(string)
    if missing <= 0:
        return string
    left = missing // 2
    return _padding(left, chars) + string + _padding(missing - left, chars)


def pad_end(string: str, length: int = 0, chars: str = S_SP) -> str:
    string = to_string(string)
    return string + _padding(to_integer(length) - len(string), chars)


def pad_start(string: str, length: int = 0, chars: str = S_SP) -> str:
    string = to_string(string)
    return _padding(to_integer(length) - len(string), chars) + string


def repeat(string: str, n: int = 1) -> str:
    return to_string(string) * builtins.max(to_integer(n), 0)


def replace(string: str, pattern: Any, replacement: Any) -> str:
    """
    Replace pattern in string. A string pattern replaces the first
    occurrence; a compiled regex replaces every match.
    """
    string = to_string(string)
    if isinstance(pattern, re.Pattern):
        return pattern.sub(replacement, string)
    return string.replace(pattern, replacement, 1)


def split(string: str, separator: Any = UNDEF, limit: int = UNDEF) -> list:
    "Split by a string or compiled regex separator, keeping at most limit parts."
    string = to_string(string)
    if UNDEF is separator:
        parts = [string]
    elif isinstance(separator, re.Pattern):
        parts = separator.split(string)
    elif S_MT == separator:
        parts = list(string)
    else:
        parts = string.split(separator)
    return parts if UNDEF is limit else parts[:builtins.max(to_integer(limit), 0)]


def to_lower(string: str) -> str:
    return to_string(string).lower()


def to_upper(string: str) -> str:
    return to_string(string).upper()


def trim(string: str, chars: str = UNDEF) -> str:
    "Remove whitespace, or the given characters, from both ends."
    return to_string(string).strip(chars)


def trim_end(string: str, chars: str = UNDEF) -> str:
    return to_string(string).rstrip(chars)


def trim_start(string: str, chars: str = UNDEF) -> str:
    return to_string(string).lstrip(chars)


def truncate(
        string: str,
        length: int = 30,
        omission: str = '...',
        separator: Any = UNDEF,
) -> str:
    """
    Truncate string to length, ending with omission. If separator (a
    string or compiled regex) is given, cut at its last occurrence.
    """
    string = to_string(string)
    if len(string) <= length:
        return string

    end = length - len(omission)
    if end < 1:
        return omission

    result = string[:end]

    if isinstance(separator, re.Pattern):
        found = list(separator.finditer(result))
        if found:
            result = result[:found[-1].start()]
    elif UNDEF is not separator and string.find(separator, end) != end:
        index = result.rfind(separator)
        if -1 < index:
            result = result[:index]

    return result + omission


# Util
# ====

def attempt(func: Callable, *args: Any) -> Any:
    "Call func with args, returning the result, or the exception raised."
    try:
        return func(*args)
    except Exception as err:
        return err


def constant(val: Any) -> Callable:
    def constant_func(*_args):
        return val
    return constant_func


def default_to(val: Any, default: Any) -> Any:
    "Value, or default if the value is None or NaN."
    if UNDEF is val or (isinstance(val, float) and math.isnan(val)):
        return default
    return val


def flow(*funcs: Callable) -> Callable:
    "Function that calls each func with the result of the previous one."
    funcs = _flat(funcs)

    def flowed(*args, **kwargs):
        if 0 == len(funcs):
            return args[0] if args else UNDEF
        result = funcs[0](*args, **kwargs)
        for func in funcs[1:]:
            result = func(result)
        return result

    return flowed


def flow_right(*funcs: Callable) -> Callable:
    return flow(*reversed(_flat(funcs)))


def identity(val: Any = UNDEF, *_args: Any) -> Any:
    return val


def _ismatch(obj: Any, source: Any) -> bool:
    for key, expected in source.items():
        found, val = _getkey(obj, key)
        if not found:
            return False
        if callable(expected):
            if not expected(val):
                return False
        elif isinstance(expected, dict) and isinstance(val, dict):
            if not _ismatch(val, expected):
                return False
        elif not eq(val, expected):
            return False
    return True


def matches(source: dict) -> Callable:
    """
    Predicate that does a partial deep comparison against source.
    Callable source values are used as predicates on the matching value.
    """
    source = clone_deep(source)

    def matcher(obj):
        return _ismatch(obj, source)

    return matcher


def matches_property(path: Any, src_value: Any) -> Callable:
    "Predicate that compares the value at path with src_value."
    if isinstance(src_value, dict):
        check = matches(src_value)
    else:
        def check(val):
            return eq(val, src_value)

    def matcher(obj):
        return has(obj, path) and bool(check(get(obj, path)))

    return matcher


def property(path: Any) -> Callable:
    "Function that returns the value at path of its argument."
    def getter(obj):
        return get(obj, path)
    return getter


def iteratee(func: Any = UNDEF) -> Callable:
    """
    Create a callable from shorthand:
    - None: identity
    - callable: itself
    - str or int: property getter
    - dict: matches
    - [path, value]: matches_property
    """
    if UNDEF is func:
        return identity
    if callable(func):
        return func
    if isinstance(func, (str, int)) and not isinstance(func, bool):
        return property(func)
    if isinstance(func, dict):
        return matches(func)
    if isinstance(func, (list, tuple)) and 2 == len(func):
        return matches_property(func[0], func[1])
    raise TypeError(f'Cannot create an iteratee from: {func!r}')


def noop(*_args: Any) -> None:
    return UNDEF


def now() -> int:
    "Milliseconds since the Unix epoch."
    return int(time.time() * 1000)


def range(start: Any = 0, end: Any = UNDEF, step: Any = UNDEF) -> list:
    """
    List of numbers from start up to, not including, end. Step defaults
    to 1, or -1 when end is below start. A step of 0 repeats start.
    """
    if UNDEF is end:
        start, end = 0, start
    if UNDEF is step:
        step = 1 if start < end else -1

    count = builtins.max(math.ceil((end - start) / (step or 1)), 0)

    out = []
    val = start
    for _ in builtins.range(count):
        out.append(val)
        val += step
    return out


def range_right(start: Any = 0, end: Any = UNDEF, step: Any = UNDEF) -> list:
    return range(start, end, step)[::-1]


def stub_array() -> list:
    return []


def stub_dict() -> dict:
    return {}


def stub_false() -> bool:
    return False


def stub_string() -> str:
    return S_MT


def stub_true() -> bool:
    return True


def times(n: int, iteratee_: Any = UNDEF) -> list:
    "Call the iteratee n times with the index, collecting the results."
    fn = iteratee(iteratee_)
    return [fn(i) for i in builtins.range(builtins.max(to_integer(n), 0))]


_idcounter = itertools.count(1)


def unique_id(prefix: str = S_MT) -> str:
    return to_string(prefix) + str(next(_idcounter))


# Name to function map of every utility.
FUNCTIONS = {
    # Array
    'chunk': chunk,
    'compact': compact,
    'concat': concat,
    'difference': difference,
    'drop': drop,
    'drop_right': drop_right,
    'drop_right_while': drop_right_while,
    'drop_while': drop_while,
    'fill': fill,
    'find_index': find_index,
    'find_last_index': find_last_index,
    'first': first,
    'flatten': flatten,
    'flatten_deep': flatten_deep,
    'flatten_depth': flatten_depth,
    'from_pairs': from_pairs,
    'head': head,
    'index_of': index_of,
    'initial': initial,
    'intersection': intersection,
    'join': join,
    'last': last,
    'last_index_of': last_index_of,
    'nth': nth,
    'pull': pull,
    'pull_at': pull_at,
    'remove': remove,
    'reverse': reverse,
    'slice': slice,
    'sorted_index': sorted_index,
    'sorted_uniq': sorted_uniq,
    'tail': tail,
    'take': take,
    'take_right': take_right,
    'take_right_while': take_right_while,
    'take_while': take_while,
    'union': union,
    'uniq': uniq,
    'uniq_by': uniq_by,
    'unzip': unzip,
    'without': without,
    'zip': zip,
    'zip_object': zip_object,

    # Collection
    'count_by': count_by,
    'each': each,
    'every': every,
    'filter': filter,
    'find': find,
    'find_last': find_last,
    'flat_map': flat_map,
    'for_each': for_each,
    'for_each_right': for_each_right,
    'group_by': group_by,
    'includes': includes,
    'key_by': key_by,
    'map': map,
    'order_by': order_by,
    'partition': partition,
    'reduce': reduce,
    'reduce_right': reduce_right,
    'reject': reject,
    'sample': sample,
    'sample_size': sample_size,
    'shuffle': shuffle,
    'size': size,
    'some': some,
    'sort_by': sort_by,

    # Function
    'after': after,
    'ary': ary,
    'before': before,
    'negate': negate,
    'once': once,
    'partial': partial,
    'partial_right': partial_right,
    'rearg': rearg,
    'spread': spread,
    'unary': unary,
    'wrap': wrap,

    # Lang
    'cast_array': cast_array,
    'clone': clone,
    'clone_deep': clone_deep,
    'eq': eq,
    'gt': gt,
    'gte': gte,
    'is_array': is_array,
    'is_boolean': is_boolean,
    'is_dict': is_dict,
    'is_empty': is_empty,
    'is_equal': is_equal,
    'is_function': is_function,
    'is_integer': is_integer,
    'is_nil': is_nil,
    'is_none': is_none,
    'is_number': is_number,
    'is_string': is_string,
    'lt': lt,
    'lte': lte,
    'to_array': to_array,
    'to_integer': to_integer,
    'to_number': to_number,
    'to_string': to_string,

    # Math
    'add': add,
    'ceil': ceil,
    'clamp': clamp,
    'divide': divide,
    'floor': floor,
    'in_range': in_range,
    'max': max,
    'max_by': max_by,
    'mean': mean,
    'mean_by': mean_by,
    'min': min,
    'min_by': min_by,
    'multiply': multiply,
    'random': random,
    'round': round,
    'subtract': subtract,
    'sum': sum,
    'sum_by': sum_by,

    # Object
    'assign': assign,
    'defaults': defaults,
    'find_key': find_key,
    'get': get,
    'has': has,
    'invert': invert,
    'keys': keys,
    'map_keys': map_keys,
    'map_values': map_values,
    'merge': merge,
    'omit': omit,
    'omit_by': omit_by,
    'pick': pick,
    'pick_by': pick_by,
    'set': set,
    'to_pairs': to_pairs,
    'unset': unset,
    'update': update,
    'values': values,

    # Seq
    'tap': tap,
    'thru': thru,

    # String
    'camel_case': camel_case,
    'capitalize': capitalize,
    'ends_with': ends_with,
    'escape': escape,
    'escape_reg_exp': escape_reg_exp,
    'kebab_case': kebab_case,
    'lower_case': lower_case,
    'lower_first': lower_first,
    'pad': pad,
    'pad_end': pad_end,
    'pad_start': pad_start,
    'repeat': repeat,
    'replace': replace,
    'snake_case': snake_case,
    'split': split,
    'start_case': start_case,
    'starts_with': starts_with,
    'to_lower': to_lower,
    'to_upper': to_upper,
    'trim': trim,
    'trim_end': trim_end,
    'trim_start': trim_start,
    'truncate': truncate,
    'unescape': unescape,
    'upper_case': upper_case,
    'upper_first': upper_first,
    'words': words,

    # Util
    'attempt': attempt,
    'constant': constant,
    'default_to': default_to,
    'flow': flow,
    'flow_right': flow_right,
    'identity': identity,
    'iteratee': iteratee,
    'matches': matches,
    'matches_property': matches_property,
    'noop': noop,
    'now': now,
    'property': property,
    'range': range,
    'range_right': range_right,
    'stub_array': stub_array,
    'stub_dict': stub_dict,
    'stub_false': stub_false,
    'stub_string': stub_string,
    'stub_true': stub_true,
    'times': times,
    'to_path': to_path,
    'unique_id': unique_id,
}


# Registry of utility functions, with the names that may not be chained.
class DashUtility:
    """
    Registry of utility functions by name. Functions are also available
    as attributes: `DashUtility().sort_by(...)`.
    """

    def __init__(self, funcs: Dict[str, Callable] = UNDEF, unchainable: Iterable[str] = UNDEF):
        self._funcs = dict(FUNCTIONS if UNDEF is funcs else funcs)
        self.unchainable = frozenset(UNCHAINABLE if UNDEF is unchainable else unchainable)

    def __getattr__(self, name: str) -> Callable:
        if name.startswith('_'):
            raise AttributeError(name)
        try:
            return self._funcs[name]
        except KeyError:
            raise AttributeError(name) from None

    def __contains__(self, name: str) -> bool:
        return name in self._funcs

    def names(self) -> List[str]:
        "Sorted names of all registered functions."
        return sorted(self._funcs)

    def lookup(self, name: str, alt: Any = UNDEF) -> Any:
        "Function registered under name, else alt."
        return self._funcs.get(name, alt)

    def chainable(self) -> List[str]:
        "Sorted names of registered functions that are not in the exclusion set."
        return [name for name in self.names() if name not in self.unchainable]

    def mixin(self, source: Dict[str, Any], chain: bool = True) -> 'DashUtility':
        """
        Add the callables in source to this registry. If chain is False
        the names are also added to the exclusion set.
        """
        added = [name for name, func in source.items() if callable(func)]
        for name in added:
            self._funcs[name] = source[name]
        if not chain:
            self.unchainable = self.unchainable | frozenset(added)
        logger.debug('mixin: %d functions (chain=%s): %s', len(added), chain, added)
        return self


__all__ = list(FUNCTIONS) + [
    'DashUtility',
    'FUNCTIONS',
    'UNCHAINABLE',
    'UNDEF',
]
