"""Test Collection core container behaviour

Covers construction, the make() factory, counting, plain-structure export,
JSON export and the round trip back into a collection.
"""

from __future__ import annotations

import pytest
from typing import Any, Dict

from plainview import Collection, InvalidArgumentException, collect


class TestCollectionConstruction:
    """Test suite for building collections."""

    def test_list_is_keyed_sequentially(self) -> None:
        """Test that a list becomes 0..n-1 keys."""
        assert Collection([1, 2, 3]).all() == {0: 1, 1: 2, 2: 3}

    def test_mapping_keys_are_normalized(self) -> None:
        """Test that integer-like string keys become ints."""
        items = Collection({'1': 'a', 'x': 'b', True: 'c'})
        assert items.all() == {1: 'c', 'x': 'b'}
        assert list(items.keys()) == [1, 'x']

    def test_default_is_empty(self) -> None:
        """Test the empty constructor."""
        assert Collection().all() == {}
        assert Collection(None).count() == 0

    def test_source_structure_is_not_aliased(self) -> None:
        """Test that later changes to the source never reach the collection."""
        source: Dict[str, Any] = {'a': 1}
        items = Collection(source)
        source['b'] = 2
        assert items.count() == 1

        exported = items.all()
        exported['c'] = 3
        assert items.has('c') is False

    def test_scalar_is_rejected_by_constructor(self) -> None:
        """Test that the constructor wants array-like input."""
        with pytest.raises(InvalidArgumentException):
            Collection('abc')

    def test_generator_is_consumed(self) -> None:
        """Test that iterables are consumed into a sequence."""
        assert Collection(x * 2 for x in range(3)).all() == {0: 0, 1: 2, 2: 4}


class TestCollectionMake:
    """Test suite for the make() factory."""

    def test_none_gives_empty_collection(self) -> None:
        """Test make(None)."""
        assert Collection.make(None).is_empty()

    def test_collection_is_returned_unchanged(self) -> None:
        """Test that an existing collection is not rewrapped."""
        items = collect([1, 2])
        assert Collection.make(items) is items

    def test_arrays_are_wrapped_as_is(self) -> None:
        """Test that lists, tuples and dicts keep their structure."""
        assert Collection.make([1, 2]).all() == {0: 1, 1: 2}
        assert Collection.make((1, 2)).all() == {0: 1, 1: 2}
        assert Collection.make({'a': 1}).all() == {'a': 1}

    def test_scalars_become_single_element(self) -> None:
        """Test that scalars, strings included, are wrapped."""
        assert Collection.make('abc').all() == {0: 'abc'}
        assert Collection.make(5).all() == {0: 5}
        assert collect(False).all() == {0: False}


class TestCollectionCounting:
    """Test suite for count and emptiness."""

    def test_count_and_len(self) -> None:
        """Test count() against len()."""
        items = collect({'a': 1, 'b': 2})
        assert items.count() == 2
        assert len(items) == 2

    def test_emptiness(self) -> None:
        """Test is_empty() and its alias."""
        assert collect().is_empty()
        assert collect().isEmpty()
        assert not collect([None]).is_empty()
        assert bool(collect([0])) is True
        assert bool(collect()) is False

    def test_count_tracks_every_operation(self) -> None:
        """Test that count always equals the number of stored pairs."""
        items = collect([3, 1, 2])
        items.put('x', 9).push(0).forget(1)
        items.pop()
        items.shift()
        items.sort(lambda a, b: a - b).values()
        assert items.count() == len(items.all())
        assert items.count() == 2


class TestCollectionExport:
    """Test suite for to_array() and to_json()."""

    def test_sequential_keys_export_as_list(self) -> None:
        """Test the list side of the array/object duality."""
        assert collect([1, 2, 3]).map(lambda x: x * 2).to_array() == [2, 4, 6]
        assert collect([1, 2]).toArray() == [1, 2]

    def test_other_keys_export_as_dict(self) -> None:
        """Test the dict side of the array/object duality."""
        assert collect({'a': 1, 'b': 2}).filter(lambda v: v > 1).to_array() == {'b': 2}
        assert collect({1: 'a', 0: 'b'}).to_array() == {1: 'a', 0: 'b'}

    def test_nested_collections_are_converted(self) -> None:
        """Test that to_array() unwraps nested collections."""
        items = collect({'a': collect([1, 2]), 'b': collect({'c': 3})})
        assert items.to_array() == {'a': [1, 2], 'b': {'c': 3}}

    def test_json_list_and_object(self) -> None:
        """Test to_json() for both shapes."""
        assert collect([1, 2, 3]).to_json() == '[1,2,3]'
        assert collect({'a': 1}).toJson() == '{"a":1}'
        assert collect().to_json() == '[]'

    def test_associative_sort_encodes_as_object(self) -> None:
        """Test that reordered integer keys stop being a JSON array."""
        items = collect([5, 3, 1]).sort(lambda a, b: a - b)
        assert items.to_json() == '{"2":1,"1":3,"0":5}'

    def test_string_conversion_is_json(self) -> None:
        """Test str() and repr()."""
        items = collect({'a': [1, 2]})
        assert str(items) == '{"a":[1,2]}'
        assert repr(items) == "Collection({'a': [1, 2]})"

    def test_json_options_pass_through(self) -> None:
        """Test that option flags reach the encoder."""
        from plainview import JsonOptions

        assert collect(['a/b']).to_json(JsonOptions.UNESCAPED_SLASHES) == '["a/b"]'
        assert collect([1]).to_json(JsonOptions.FORCE_OBJECT) == '{"0":1}'


class TestCollectionRoundTrip:
    """Test suite for rebuilding collections from their exports."""

    @pytest.fixture
    def items(self) -> Collection[Any]:
        """Create a collection with mixed keys and nested values."""
        return collect({'a': 1, 0: 'zero', 'b': [1, 2], 'c': {'d': None}})

    def test_from_array_round_trip(self, items: Collection[Any]) -> None:
        """Test that the plain structure rebuilds the same collection."""
        assert Collection.from_array(items.to_array()) == items
        assert Collection.from_array(collect([1, 2]).to_array()) == collect([1, 2])

    def test_from_json_round_trip(self, items: Collection[Any]) -> None:
        """Test that JSON text rebuilds the same collection."""
        rebuilt = Collection.from_json(items.to_json())
        assert rebuilt == items
        assert list(rebuilt.keys()) == ['a', 0, 'b', 'c']

    def test_equality_is_order_sensitive(self) -> None:
        """Test that equality compares pairs in order."""
        assert collect({'a': 1, 'b': 2}) == collect({'a': 1, 'b': 2})
        assert collect({'a': 1, 'b': 2}) != collect({'b': 2, 'a': 1})
        assert collect([1]) != [1]


class TestCollectionIteration:
    """Test suite for the iteration protocol."""

    def test_iterates_key_value_pairs(self) -> None:
        """Test that iteration yields pairs in order."""
        items = collect({'x': 1, 0: 2})
        assert list(items) == [('x', 1), (0, 2)]
        assert list(items.items()) == [('x', 1), (0, 2)]

    def test_iteration_is_restartable(self) -> None:
        """Test that two passes see the same order."""
        items = collect([3, 2, 1])
        assert list(items) == list(items)
        assert list(items.get_iterator()) == [(0, 3), (1, 2), (2, 1)]


class TestMutatingAndTransformingOperations:
    """Test suite for which operations hand back the receiver."""

    @pytest.fixture
    def items(self) -> Collection[Any]:
        """Create a small mixed-key collection."""
        return collect({'b': 2, 0: 1, 'a': 3})

    @pytest.mark.parametrize('operation, args', [
        ('put', ('c', 4)),
        ('forget', ('a',)),
        ('push', (0,)),
        ('sort', (lambda a, b: a - b,)),
        ('sort_by', (lambda v: -v,)),
        ('values', ()),
        ('each', (lambda v: None,)),
    ])
    def test_mutating_operations_return_receiver(
        self, items: Collection[Any], operation: str, args: Any
    ) -> None:
        """Test that in-place operations return the same instance."""
        assert getattr(items, operation)(*args) is items

    @pytest.mark.parametrize('operation, args', [
        ('map', (lambda v: v * 2,)),
        ('filter', (lambda v: v > 1,)),
        ('merge', ([9],)),
        ('reverse', ()),
        ('slice', (1,)),
        ('take', (2,)),
        ('fetch', ('x',)),
    ])
    def test_transforming_operations_leave_receiver_alone(
        self, items: Collection[Any], operation: str, args: Any
    ) -> None:
        """Test that transforming operations return a new instance and keep the original."""
        before = items.all()
        result = getattr(items, operation)(*args)
        assert isinstance(result, Collection)
        assert result is not items
        assert items.all() == before
        assert list(items.keys()) == list(before)
