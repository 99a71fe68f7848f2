from __future__ import annotations

from functools import cmp_to_key
from typing import Any, Callable, Dict, Generic, Iterator, KeysView, ItemsView, List, Optional, Tuple, TypeVar, Union

from typing_extensions import Self

from plainview.Types.JsonTypes import ArrayKey, Comparator, PlainArray
from .Arr import Arr
from .Exceptions import InvalidArgumentException, KeyNotFoundException
from .Fields import data_get
from .Json import Json
from .Str import Str

T = TypeVar('T')
U = TypeVar('U')


def _ensure_callable(callback: Any, operation: str) -> None:
    if callback is None or not callable(callback):
        raise InvalidArgumentException(
            f"{operation}() expects a callable, got {type(callback).__name__}", 'callback'
        )


class Collection(Generic[T]):
    """
    Laravel-style collection over an ordered associative structure.

    Keys are ints or strings, unique, and iteration follows insertion order
    unless an operation reorders or reindexes. Mutating operations (put,
    forget, push, sort, sort_by, values, each) return the same instance;
    transforming operations (map, filter, merge, slice, ...) return a new one.
    """

    def __init__(self, items: Any = None) -> None:
        self._items: Dict[ArrayKey, T] = Arr.from_value(items)

    @classmethod
    def make(cls, items: Any = None) -> 'Collection[Any]':
        """Create a new collection instance if the value isn't one already."""
        if items is None:
            return cls()
        if isinstance(items, Collection):
            return items
        return cls(Arr.wrap(items))

    @classmethod
    def from_array(cls, items: Any) -> 'Collection[Any]':
        """Create a collection from a plain list or dict."""
        return cls(items)

    @classmethod
    def from_json(cls, text: Union[str, bytes]) -> 'Collection[Any]':
        """Create a collection from JSON text."""
        return cls.make(Json.decode(text))

    # Core methods
    def all(self) -> Dict[ArrayKey, T]:
        """Get all of the items as an ordered dict."""
        return self._items.copy()

    def count(self) -> int:
        """Get the number of items."""
        return len(self._items)

    def is_empty(self) -> bool:
        """Check if the collection is empty."""
        return len(self._items) == 0

    def isEmpty(self) -> bool:
        return self.is_empty()

    def keys(self) -> KeysView[ArrayKey]:
        """Get the keys in iteration order."""
        return self._items.keys()

    def items(self) -> ItemsView[ArrayKey, T]:
        """Get the (key, value) pairs in iteration order."""
        return self._items.items()

    def get_iterator(self) -> Iterator[Tuple[ArrayKey, T]]:
        """Get an iterator over (key, value) pairs."""
        return iter(list(self._items.items()))

    # Key-based access
    def get(self, key: Any, default: Any = None) -> Any:
        """Get an item by key, or the default when absent or not a legal key."""
        try:
            key = Arr.normalize_key(key)
        except InvalidArgumentException:
            return default
        if key in self._items:
            return self._items[key]
        return default

    def has(self, key: Any) -> bool:
        """Determine if an item exists by key. Illegal key types are never present."""
        try:
            return Arr.normalize_key(key) in self._items
        except InvalidArgumentException:
            return False

    def put(self, key: Any, value: T) -> Self:
        """Put an item in the collection by key. Mutating: returns the same instance."""
        self._items[Arr.normalize_key(key)] = value
        return self

    def set(self, key: Any, value: T) -> Self:
        """Alias of put()."""
        return self.put(key, value)

    def forget(self, key: Any) -> Self:
        """Remove an item from the collection by key. Mutating: returns the same instance."""
        self._items.pop(Arr.normalize_key(key), None)
        return self

    # Index access
    def offset_exists(self, key: Any) -> bool:
        """Determine if an item exists at an offset."""
        return self.has(key)

    def offset_get(self, key: Any) -> T:
        """Get an item at a given offset, failing when it is absent."""
        normalized = Arr.normalize_key(key)
        if normalized not in self._items:
            raise KeyNotFoundException(key)
        return self._items[normalized]

    def offset_set(self, key: Any, value: T) -> None:
        """Set the item at a given offset; a None offset appends."""
        if key is None:
            self._items[Arr.next_index(self._items)] = value
        else:
            self.put(key, value)

    def offset_unset(self, key: Any) -> None:
        """Unset the item at a given offset."""
        self.forget(key)

    # Transforming
    def each(self, callback: Callable[[T], Any]) -> Self:
        """Execute a callback over each item. Mutating: returns the same instance."""
        _ensure_callable(callback, 'each')
        for item in list(self._items.values()):
            callback(item)
        return self

    def map(self, callback: Callable[[T], U]) -> 'Collection[U]':
        """Run a map over each of the items, keeping keys. Returns a new collection."""
        _ensure_callable(callback, 'map')
        return self.__class__({key: callback(item) for key, item in self._items.items()})

    def filter(self, callback: Callable[[T], Any]) -> Self:
        """Keep the items passing the truth test, keeping keys. Returns a new collection."""
        _ensure_callable(callback, 'filter')
        return self.__class__({key: item for key, item in self._items.items() if callback(item)})

    def collapse(self) -> 'Collection[Any]':
        """Collapse a collection of arrays into a single, flat collection. Returns a new collection."""
        return self.__class__(Arr.collapse(self._items))

    def flatten(self) -> 'Collection[Any]':
        """Get a flattened collection of the items, at any depth. Returns a new collection."""
        return self.__class__(Arr.flatten(self._items))

    def merge(self, items: Any) -> 'Collection[Any]':
        """Merge the collection with the given items. Returns a new collection."""
        return self.__class__(Arr.merge(self._items, items))

    def reverse(self, preserve_keys: bool = True) -> Self:
        """Reverse items order. Returns a new collection."""
        return self.__class__(Arr.reverse(self._items, preserve_keys))

    def slice(self, offset: int, length: Optional[int] = None, preserve_keys: bool = False) -> Self:
        """Slice the underlying collection array. Returns a new collection."""
        return self.__class__(Arr.slice(self._items, offset, length, preserve_keys))

    def take(self, limit: Optional[int] = None) -> Self:
        """Take the first or last {limit} items. Returns a new collection."""
        if limit is not None and limit < 0:
            return self.slice(limit, abs(limit))
        return self.slice(0, limit)

    def sort(self, callback: Comparator) -> Self:
        """Sort through each item with a comparator, keeping keys attached. Mutating: sorts in place."""
        _ensure_callable(callback, 'sort')

        def compare(left: Tuple[ArrayKey, T], right: Tuple[ArrayKey, T]) -> int:
            result = callback(left[1], right[1])
            if isinstance(result, bool):
                # A boolean comparator only says "greater"; ask the other way round for "less"
                if result:
                    return 1
                return -1 if callback(right[1], left[1]) else 0
            return (result > 0) - (result < 0)

        self._items = dict(sorted(self._items.items(), key=cmp_to_key(compare)))
        return self

    def sort_by(self, callback: Callable[[T], Any]) -> Self:
        """Sort the collection by the value each item maps to, keeping keys attached. Mutating: sorts in place."""
        _ensure_callable(callback, 'sort_by')

        # Derive every sort value first, then order the keys by them
        results = [(key, callback(item)) for key, item in self._items.items()]
        try:
            results.sort(key=lambda pair: pair[1])
        except TypeError as e:
            raise InvalidArgumentException(f"sort_by() derived values are not comparable: {e}", 'callback') from e

        self._items = {key: self._items[key] for key, _ in results}
        return self

    def sortBy(self, callback: Callable[[T], Any]) -> Self:
        return self.sort_by(callback)

    def values(self) -> Self:
        """Reset the keys on the underlying array. Mutating: reindexes in place."""
        self._items = Arr.values(self._items)
        return self

    # Extraction
    def first(self) -> Optional[T]:
        """Get the first item from the collection."""
        for item in self._items.values():
            return item
        return None

    def last(self) -> Optional[T]:
        """Get the last item from the collection."""
        for item in reversed(self._items.values()):
            return item
        return None

    def pop(self) -> Optional[T]:
        """Get and remove the last item from the collection. Mutating."""
        return Arr.pop(self._items)

    def shift(self) -> Optional[T]:
        """Get and remove the first item from the collection. Mutating: renumbers integer keys."""
        return Arr.shift(self._items)

    def push(self, value: T) -> Self:
        """Push an item onto the beginning of the collection. Mutating: returns the same instance."""
        Arr.unshift(self._items, value)
        return self

    def lists(self, value: Any, key: Any = None) -> Union[List[Any], Dict[ArrayKey, Any]]:
        """Get a list with the values of a given field, optionally keyed by another."""
        if key is None:
            return [self._get_list_value(item, value) for item in self._items.values()]

        results: Dict[ArrayKey, Any] = {}
        for item in self._items.values():
            results[Arr.normalize_key(self._get_list_value(item, key))] = self._get_list_value(item, value)
        return results

    def implode(self, value: Any, glue: Optional[str] = None) -> str:
        """Concatenate values of a given field as a string."""
        return (glue or '').join(Str.from_value(item) for item in self.lists(value))

    def fetch(self, key: str) -> 'Collection[Any]':
        """Fetch a nested element of the collection. Returns a new collection."""
        return self.__class__(Arr.fetch(self._items, key))

    def _get_list_value(self, item: Any, key: Any) -> Any:
        """Get the value of a list item object."""
        return data_get(item, key)

    # Serialization
    def to_array(self) -> PlainArray:
        """Get the collection of items as a plain list or dict."""
        return Arr.to_plain(self._items)

    def toArray(self) -> PlainArray:
        return self.to_array()

    def json_serialize(self) -> PlainArray:
        """Get the value to encode when the collection is nested in another."""
        return self.to_array()

    def to_json(self, options: int = 0, depth: Optional[int] = None) -> str:
        """Get the collection of items as JSON."""
        return Json.encode(self.to_array(), options, depth)

    def toJson(self, options: int = 0) -> str:
        return self.to_json(options)

    # Magic methods
    def __iter__(self) -> Iterator[Tuple[ArrayKey, T]]:
        """Iterate over (key, value) pairs."""
        return self.get_iterator()

    def __len__(self) -> int:
        """Get length."""
        return len(self._items)

    def __getitem__(self, key: Any) -> T:
        return self.offset_get(key)

    def __setitem__(self, key: Any, value: T) -> None:
        self.offset_set(key, value)

    def __delitem__(self, key: Any) -> None:
        self.offset_unset(key)

    def __contains__(self, key: Any) -> bool:
        """Check if a key exists in the collection."""
        return self.offset_exists(key)

    def __bool__(self) -> bool:
        """Check if collection is not empty."""
        return not self.is_empty()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Collection):
            return NotImplemented
        return list(self._items.items()) == list(other._items.items())

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        """String representation."""
        return f"{self.__class__.__name__}({self._items!r})"

    def __str__(self) -> str:
        """JSON representation."""
        return self.to_json()


# Helper function
def collect(items: Any = None) -> Collection[Any]:
    """Create a collection instance."""
    return Collection.make(items)
