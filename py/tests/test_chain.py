# RUN: python -m unittest discover -s tests
# RUN-SOME: python -m unittest discover -s tests -k chain

import unittest

import dashchain as _
from dashchain import (
    COLLECTION_BUILTINS,
    Chain,
    ChainStateError,
    DashError,
    DashUtility,
    MethodNotFoundError,
    STRING_BUILTINS,
    chain,
)


USERS = [
    {'user': 'barney', 'age': 36},
    {'user': 'fred', 'age': 40},
    {'user': 'pebbles', 'age': 1},
]


class TestChain(unittest.TestCase):

    def test_exists(self):
        self.assertTrue(callable(chain))
        self.assertIsInstance(chain([]), Chain)
        self.assertTrue(issubclass(ChainStateError, DashError))
        self.assertTrue(issubclass(MethodNotFoundError, AttributeError))


    # scenarios
    # =========

    def test_scenario_sort_map_head(self):
        self.assertEqual(
            chain(USERS).sort_by('age').map('user').thru(_.head).value(),
            'pebbles')

    def test_scenario_tap_reverse(self):
        self.assertEqual(
            chain([1, 2, 3]).tap(lambda arr: arr.pop()).invoke('reverse').value(),
            [2, 1])

    def test_scenario_map_thru(self):
        self.assertEqual(
            chain(['  abc  ']).invoke('map', _.trim).thru(_.identity).value(),
            ['abc'])

    def test_scenario_labels(self):
        self.assertEqual(
            chain(USERS)
            .sort_by('age')
            .map(lambda o: o['user'] + ' is ' + str(o['age']))
            .thru(_.head)
            .value(),
            'pebbles is 1')


    # dispatch
    # ========

    def test_matches_direct_calls(self):
        cases = [
            ('chunk', ['a', 'b', 'c'], (2,)),
            ('compact', [0, 1, None, 2], ()),
            ('drop', [1, 2, 3], (2,)),
            ('uniq', [2, 1, 2], ()),
            ('sort_by', USERS, ('age',)),
            ('filter', USERS, (lambda o: 30 < o['age'],)),
            ('group_by', ['one', 'two', 'three'], (len,)),
            ('to_pairs', {'a': 1}, ()),
            ('invert', {'a': 'x'}, ()),
            ('split', 'a-b', ('-',)),
            ('reverse', 'abc', ()),
        ]
        for name, val, args in cases:
            with self.subTest(name=name):
                direct = _.clone_deep(val)
                chained = _.clone_deep(val)
                self.assertEqual(
                    chain(chained).invoke(name, *args).value(),
                    getattr(_, name)(direct, *args))

    def test_attribute_and_invoke_agree(self):
        self.assertEqual(chain([1, 2, 3]).take(2).value(),
                         chain([1, 2, 3]).invoke('take', 2).value())

    def test_utility_before_builtins(self):
        # Registry replace changes the first match only; str.replace changes all.
        self.assertEqual(chain('a-a').replace('a', 'b').value(), 'b-a')

        # Registry reverse returns a new list; list.reverse would reverse in place.
        arr = [1, 2, 3]
        self.assertEqual(chain(arr).reverse().value(), [3, 2, 1])
        self.assertEqual(arr, [1, 2, 3])

        # Registry keys and values also serve lists and strings.
        self.assertEqual(chain('hi').keys().value(), [0, 1])

        # Registry update sets a path; dict.update is not reachable.
        obj = {'a': 1}
        self.assertIs(chain(obj).update('a', lambda n: n + 1).value(), obj)
        self.assertEqual(obj, {'a': 2})

    def test_string_builtins(self):
        self.assertEqual(chain('  Abc ').strip().upper().value(), 'ABC')
        self.assertEqual(chain('a,b').rsplit(',', 1).value(), ['a', 'b'])
        self.assertEqual(chain('abcab').count('ab').value(), 2)
        self.assertEqual(chain('x').zfill(3).value(), '00x')

    def test_collection_builtins(self):
        self.assertEqual(chain([1, 2, 1]).count(1).value(), 2)
        self.assertEqual(chain([1, 2, 1]).index(2).value(), 1)
        self.assertEqual(chain({'a': 1}).items().value(), [('a', 1)])
        self.assertEqual(chain({'a': 1}).get('a').value(), 1)
        self.assertEqual(chain([1, 2]).pop().value(), 2)
        self.assertEqual(chain({'a': 1}).pop('a').value(), 1)

        with self.assertRaises(TypeError):
            chain(5).count(1)

    def test_excluded_builtin_names(self):
        # find is excluded from the registry, so str.find is used.
        self.assertEqual(chain('abc').find('c').value(), 2)
        with self.assertRaises(TypeError):
            chain([1, 2]).find(lambda n: 1 < n)

    def test_inplace_keeps_value(self):
        arr = [3, 1, 2]
        ch = chain(arr).sort()
        self.assertIs(ch.value(), arr)
        self.assertEqual(arr, [1, 2, 3])

        ch.append(4).extend([5]).insert(0, 0)
        self.assertIs(ch.value(), arr)
        self.assertEqual(arr, [0, 1, 2, 3, 4, 5])

        obj = {'a': 1}
        self.assertIs(chain(obj).defaults({'b': 2}).value(), obj)
        self.assertIs(chain(obj).assign({'c': 3}).value(), obj)
        self.assertIs(chain(obj).set('d.e', 4).value(), obj)
        self.assertEqual(obj, {'a': 1, 'b': 2, 'c': 3, 'd': {'e': 4}})

        self.assertIs(chain(arr).clear().value(), arr)
        self.assertEqual(arr, [])

    def test_equal_result_replaces(self):
        arr = [1, 2]
        value = chain(arr).thru(list).value()
        self.assertEqual(value, arr)
        self.assertIsNot(value, arr)

    def test_keyword_arguments(self):
        self.assertEqual(chain([3, 1, 2]).sort(reverse=True).value(), [3, 2, 1])
        self.assertEqual(chain(['b', 'a']).order_by(orders='desc').value(), ['b', 'a'])

    def test_falsey_values_chain(self):
        self.assertEqual(chain(0).thru(lambda n: n + 1).value(), 1)
        self.assertEqual(chain(False).thru(lambda b: not b).value(), True)
        self.assertEqual(chain([]).concat(1).value(), [1])


    # errors
    # ======

    def test_excluded_name(self):
        for name in ('is_array', 'head', 'noop', 'stub_true', 'size'):
            with self.subTest(name=name):
                with self.assertRaises(MethodNotFoundError) as ctx:
                    getattr(chain([1]), name)()
                self.assertEqual(ctx.exception.name, name)
                self.assertIn(name, str(ctx.exception))

                with self.assertRaises(MethodNotFoundError):
                    chain([1]).invoke(name)

    def test_unknown_name(self):
        ch = chain([1])
        self.assertFalse(hasattr(ch, 'nonesuch'))
        self.assertFalse(hasattr(ch, '_private'))
        with self.assertRaises(AttributeError):
            ch.nonesuch()

    def test_none_value(self):
        with self.assertRaises(ChainStateError):
            chain(None).map('a')
        with self.assertRaises(ChainStateError):
            chain().sort_by()

        # None is checked before the method lookup.
        with self.assertRaises(ChainStateError):
            chain().nonesuch()
        with self.assertRaises(ChainStateError):
            chain(None).invoke('is_array')

        with self.assertRaises(ValueError) as ctx:
            chain().invoke('map')
        self.assertIn('None', str(ctx.exception))

    def test_drained_chain(self):
        ch = chain([1, 2]).thru(_.noop)
        self.assertIsNone(ch.value())
        with self.assertRaises(ChainStateError):
            ch.map()

    def test_method_errors_propagate(self):
        with self.assertRaises(ZeroDivisionError):
            chain([1]).thru(lambda arr: 1 / 0)


    # state
    # =====

    def test_value_idempotent(self):
        ch = chain([1, 2, 3]).drop(1)
        first = ch.value()
        self.assertIs(ch.value(), first)
        self.assertEqual(first, [2, 3])

    def test_returns_self(self):
        ch = chain([1])
        self.assertIs(ch.map(), ch)
        self.assertIs(ch.invoke('map'), ch)

    def test_methods(self):
        names = chain([]).methods()
        self.assertEqual(names, sorted(names))
        self.assertIn('map', names)
        self.assertIn('tap', names)
        self.assertIn('upper', names)
        self.assertIn('append', names)
        self.assertIn('find', names)
        self.assertNotIn('is_array', names)
        self.assertNotIn('head', names)
        self.assertTrue(set(STRING_BUILTINS) <= set(names))
        self.assertTrue(set(COLLECTION_BUILTINS) <= set(names))

    def test_repr(self):
        self.assertEqual(repr(chain([1, 'a'])), "Chain([1, 'a'])")


    # utility
    # =======

    def test_custom_utility(self):
        util = DashUtility().mixin({'double': lambda n: n * 2})
        self.assertEqual(chain(4, util).double().double().value(), 16)

        util.mixin({'halve': lambda n: n / 2}, chain=False)
        with self.assertRaises(MethodNotFoundError):
            chain(4, util).halve()

        # The default utility does not see mixins on another registry.
        with self.assertRaises(MethodNotFoundError):
            chain(4).double()

    def test_dispatch_fixed_at_creation(self):
        util = DashUtility()
        ch = chain(3, util)
        util.mixin({'triple': lambda n: n * 3})
        with self.assertRaises(MethodNotFoundError):
            ch.triple()
        self.assertEqual(chain(3, util).triple().value(), 9)

    def test_utility_without_exclusions(self):
        util = DashUtility(unchainable=())
        self.assertEqual(chain([5, 6], util).head().value(), 5)
        self.assertEqual(chain([1, 2], util).find(lambda n: 1 < n).value(), 2)


    # logging
    # =======

    def test_logging(self):
        with self.assertLogs('dashchain.chain', 'DEBUG') as logs:
            chain([1, 2]).reverse()

        output = '\n'.join(logs.output)
        self.assertIn('chain dispatch', output)
        self.assertIn('chain invoke: reverse', output)
        self.assertIn('replaced=True', output)


if __name__ == "__main__":
    unittest.main()
