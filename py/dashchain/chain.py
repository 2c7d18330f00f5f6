# Copyright (c) 2025 dashchain contributors. MIT LICENSE.
#
# Method chaining over the utility functions.
#
# chain(value) wraps a value. Each chained method call passes the current
# value as the first argument to a utility function (or a str, list or
# dict method), and keeps the result as the new current value. value()
# ends the chain and returns the current value.
#
#   chain(users).sort_by('age').map('user').thru(head).value()
#
# Methods are looked up in a dispatch table built once per chain, from,
# in order of precedence:
# - utility functions not in the utility's unchainable set,
# - STRING_BUILTINS,
# - COLLECTION_BUILTINS.
# A name is taken from the first source that has it.


from typing import *
from types import MappingProxyType
import logging

from .dashchain import UNDEF, DashUtility
from .errors import ChainStateError, MethodNotFoundError


logger = logging.getLogger(__name__)


def _inplace(method: Callable) -> Callable:
    "Bind a method that mutates and returns None so that it returns its target."
    def inplace(target, *args, **kwargs):
        method(target, *args, **kwargs)
        return target
    inplace.__name__ = method.__name__
    return inplace


KINDS = {'str': str, 'list': list, 'dict': dict}


def _bykind(name: str, **methods: Callable) -> Callable:
    "Select a method by the kind of the target (str, list, dict)."
    def bykind(target, *args, **kwargs):
        for kind, method in methods.items():
            if isinstance(target, KINDS[kind]):
                return method(target, *args, **kwargs)
        raise TypeError(f'{name} does not apply to a {type(target).__name__}')
    bykind.__name__ = name
    return bykind


def _listof(method: Callable) -> Callable:
    "Bind a method that returns a view so that it returns a list."
    def listof(target, *args, **kwargs):
        return list(method(target, *args, **kwargs))
    listof.__name__ = method.__name__
    return listof


# String methods. Where a list method has the same name, the entry
# serves lists as well.
STRING_BUILTINS = MappingProxyType({
    'capitalize': str.capitalize,
    'casefold': str.casefold,
    'center': str.center,
    'count': _bykind('count', str=str.count, list=list.count),
    'encode': str.encode,
    'endswith': str.endswith,
    'expandtabs': str.expandtabs,
    'find': str.find,
    'format': str.format,
    'format_map': str.format_map,
    'index': _bykind('index', str=str.index, list=list.index),
    'isalnum': str.isalnum,
    'isalpha': str.isalpha,
    'isascii': str.isascii,
    'isdecimal': str.isdecimal,
    'isdigit': str.isdigit,
    'isidentifier': str.isidentifier,
    'islower': str.islower,
    'isnumeric': str.isnumeric,
    'isprintable': str.isprintable,
    'isspace': str.isspace,
    'istitle': str.istitle,
    'isupper': str.isupper,
    'join': str.join,
    'ljust': str.ljust,
    'lower': str.lower,
    'lstrip': str.lstrip,
    'partition': str.partition,
    'removeprefix': str.removeprefix,
    'removesuffix': str.removesuffix,
    'replace': str.replace,
    'rfind': str.rfind,
    'rindex': str.rindex,
    'rjust': str.rjust,
    'rpartition': str.rpartition,
    'rsplit': str.rsplit,
    'rstrip': str.rstrip,
    'split': str.split,
    'splitlines': str.splitlines,
    'startswith': str.startswith,
    'strip': str.strip,
    'swapcase': str.swapcase,
    'title': str.title,
    'translate': str.translate,
    'upper': str.upper,
    'zfill': str.zfill,
})


# List and dict methods. Methods that mutate and return None return the
# mutated target instead; dict views are returned as lists.
COLLECTION_BUILTINS = MappingProxyType({
    'append': _inplace(list.append),
    'clear': _bykind('clear', list=_inplace(list.clear), dict=_inplace(dict.clear)),
    'copy': _bykind('copy', list=list.copy, dict=dict.copy),
    'extend': _inplace(list.extend),
    'get': dict.get,
    'insert': _inplace(list.insert),
    'items': _listof(dict.items),
    'keys': _listof(dict.keys),
    'pop': _bykind('pop', list=list.pop, dict=dict.pop),
    'popitem': dict.popitem,
    'remove': _inplace(list.remove),
    'reverse': _inplace(list.reverse),
    'setdefault': dict.setdefault,
    'sort': _inplace(list.sort),
    'update': _inplace(dict.update),
    'values': _listof(dict.values),
})


def _dispatch(utility: DashUtility) -> Mapping[str, Callable]:
    "Build the method table for a chain."
    methods = {name: utility.lookup(name) for name in utility.chainable()}
    numutil = len(methods)

    for source in (STRING_BUILTINS, COLLECTION_BUILTINS):
        for name, method in source.items():
            methods.setdefault(name, method)

    logger.debug('chain dispatch: %d methods (%d utility, %d builtin)',
                 len(methods), numutil, len(methods) - numutil)

    return MappingProxyType(methods)


class Chain:
    """
    Wrapper for method chaining. Holds the current value; each chained
    call replaces it with the method result and returns the chain.
    Not safe for concurrent use.
    """

    def __init__(self, value: Any = UNDEF, utility: DashUtility = UNDEF) -> None:
        self._value = value
        self._utility = DashUtility() if UNDEF is utility else utility
        self._methods = _dispatch(self._utility)

    def invoke(self, name: str, *args: Any, **kwargs: Any) -> 'Chain':
        """
        Call method `name` with the current value as the first argument.
        The result becomes the current value if it is not the current
        value itself.
        """
        if UNDEF is self._value:
            raise ChainStateError()

        method = self._methods.get(name)
        if method is None:
            raise MethodNotFoundError(name)

        result = method(self._value, *args, **kwargs)

        replaced = result is not self._value
        if replaced:
            self._value = result

        logger.debug('chain invoke: %s (replaced=%s)', name, replaced)
        return self

    def value(self) -> Any:
        "End the chain, returning the current value."
        return self._value

    def methods(self) -> List[str]:
        "Sorted names of the methods available in this chain."
        return sorted(self._methods)

    def __getattr__(self, name: str) -> Callable[..., 'Chain']:
        if name.startswith('_'):
            raise AttributeError(name)

        # Unknown names fail on access, unless the value is None, in which
        # case the call fails with ChainStateError.
        if UNDEF is not self._value and name not in self._methods:
            raise MethodNotFoundError(name)

        def method(*args, **kwargs):
            return self.invoke(name, *args, **kwargs)

        method.__name__ = name
        return method

    def __repr__(self) -> str:
        return f'Chain({self._value!r})'


def chain(value: Any = UNDEF, utility: DashUtility = UNDEF) -> Chain:
    "Wrap value for method chaining."
    return Chain(value, utility)


__all__ = [
    'COLLECTION_BUILTINS',
    'Chain',
    'STRING_BUILTINS',
    'chain',
]
