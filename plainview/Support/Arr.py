from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from typing import Any, List, Optional, Tuple

from plainview.Contracts.Support.Arrayable import Arrayable
from plainview.Types.JsonTypes import ArrayKey, OrderedItems, PlainArray
from plainview.Utils.Logger import get_logger
from .Exceptions import InvalidArgumentException
from .Fields import data_find
from .Str import Str

logger = get_logger(__name__)

_MISSING = object()


class Arr:
    """Laravel-style array helper class with PHP array semantics over ordered dicts."""

    @staticmethod
    def normalize_key(key: Any) -> ArrayKey:
        """Cast a key the way PHP casts array offsets."""
        if isinstance(key, bool):
            return int(key)
        if isinstance(key, int):
            return key
        if isinstance(key, str):
            return int(key) if Str.is_integer_key(key) else key
        if isinstance(key, float):
            if math.isnan(key) or math.isinf(key):
                raise InvalidArgumentException(f"Illegal offset {key!r}", 'key')
            return int(key)
        if key is None:
            return ''
        raise InvalidArgumentException(f"Illegal offset type {type(key).__name__}", 'key')

    @staticmethod
    def accessible(value: Any) -> bool:
        """Determine whether the given value is array accessible."""
        return isinstance(value, (Mapping, list, tuple)) or isinstance(value, Arrayable)

    @staticmethod
    def from_value(value: Any) -> OrderedItems:
        """Build ordered items from a mapping, sequence, collection or iterable."""
        if value is None:
            return {}
        if isinstance(value, Mapping):
            return {Arr.normalize_key(k): v for k, v in value.items()}
        if isinstance(value, (list, tuple)):
            return dict(enumerate(value))
        if isinstance(value, Arrayable):
            # Collections hand over their raw items, other arrayables their plain form
            raw = value.all() if callable(getattr(value, 'all', None)) else value.to_array()
            return Arr.from_value(raw)
        if isinstance(value, Iterable) and not isinstance(value, (str, bytes, bytearray)):
            return dict(enumerate(value))
        raise InvalidArgumentException(
            f"Expected an array-like value, got {type(value).__name__}", 'items'
        )

    @staticmethod
    def wrap(value: Any) -> OrderedItems:
        """Wrap the given value in an array if it's not already an array."""
        if value is None:
            return {}
        if Arr.accessible(value):
            return Arr.from_value(value)
        logger.debug("Wrapping scalar value", {'type': type(value).__name__})
        return {0: value}

    @staticmethod
    def is_list(items: OrderedItems) -> bool:
        """Determine if the keys are exactly 0..n-1 in order."""
        for expected, key in enumerate(items):
            if key != expected or not isinstance(key, int) or isinstance(key, bool):
                return False
        return True

    @staticmethod
    def next_index(items: OrderedItems) -> int:
        """Get the integer key an append would use."""
        int_keys = [key for key in items if isinstance(key, int)]
        if not int_keys:
            return 0
        return max(0, max(int_keys) + 1)

    @staticmethod
    def values(items: OrderedItems) -> OrderedItems:
        """Reindex the values sequentially from zero."""
        return dict(enumerate(items.values()))

    @staticmethod
    def renumber(entries: Iterable[Tuple[ArrayKey, Any]]) -> OrderedItems:
        """Renumber integer keys from zero, leaving string keys alone."""
        result: OrderedItems = {}
        index = 0
        for key, value in entries:
            if isinstance(key, int):
                result[index] = value
                index += 1
            else:
                result[key] = value
        return result

    @staticmethod
    def merge(*arrays: Any) -> OrderedItems:
        """
        Merge arrays the way array_merge does.

        String keys from later arrays overwrite earlier ones in place; integer
        keys from every array are renumbered and appended in order.
        """
        result: OrderedItems = {}
        index = 0
        for array in arrays:
            if not Arr.accessible(array):
                raise InvalidArgumentException(
                    f"Cannot merge value of type {type(array).__name__}", 'items'
                )
            for key, value in Arr.from_value(array).items():
                if isinstance(key, int):
                    result[index] = value
                    index += 1
                else:
                    result[key] = value
        return result

    @staticmethod
    def slice(items: OrderedItems, offset: int, length: Optional[int] = None,
              preserve_keys: bool = False) -> OrderedItems:
        """Extract a slice of the array the way array_slice does."""
        count = len(items)
        if offset > count:
            return {}
        if offset < 0:
            offset = max(0, count + offset)

        if length is None:
            length = count - offset
        elif length < 0:
            length = count - offset + length
        elif offset + length > count:
            length = count - offset

        if length <= 0:
            return {}

        entries = list(items.items())[offset:offset + length]
        if preserve_keys:
            return dict(entries)
        return Arr.renumber(entries)

    @staticmethod
    def reverse(items: OrderedItems, preserve_keys: bool = True) -> OrderedItems:
        """Reverse the order of the entries."""
        entries = reversed(list(items.items()))
        if preserve_keys:
            return dict(entries)
        return Arr.renumber(entries)

    @staticmethod
    def pop(items: OrderedItems) -> Any:
        """Remove and return the last value, or None when empty."""
        if not items:
            return None
        _, value = items.popitem()
        return value

    @staticmethod
    def shift(items: OrderedItems) -> Any:
        """Remove and return the first value, renumbering the remaining integer keys."""
        if not items:
            return None
        first_key = next(iter(items))
        value = items.pop(first_key)
        remaining = Arr.renumber(items.items())
        items.clear()
        items.update(remaining)
        return value

    @staticmethod
    def unshift(items: OrderedItems, *values: Any) -> int:
        """Prepend values, renumbering integer keys. Returns the new count."""
        prepended = Arr.renumber(
            [(index, value) for index, value in enumerate(values)] + list(items.items())
        )
        items.clear()
        items.update(prepended)
        return len(items)

    @staticmethod
    def collapse(items: OrderedItems) -> OrderedItems:
        """Collapse an array of arrays into a single array."""
        for key, value in items.items():
            if not Arr.accessible(value):
                raise InvalidArgumentException(
                    f"Cannot collapse value of type {type(value).__name__} at key {key!r}",
                    'items'
                )
        return Arr.merge(*items.values())

    @staticmethod
    def flatten(data: Any) -> List[Any]:
        """Flatten a multi-dimensional array into a single level."""
        result: List[Any] = []

        def _flatten_recursive(value: Any) -> None:
            if isinstance(value, Arrayable) and not isinstance(value, (Mapping, list, tuple)):
                value = value.to_array()
            if isinstance(value, Mapping):
                for item in value.values():
                    _flatten_recursive(item)
            elif isinstance(value, (list, tuple)):
                for item in value:
                    _flatten_recursive(item)
            else:
                result.append(value)

        for value in Arr.from_value(data).values():
            _flatten_recursive(value)
        return result

    @staticmethod
    def fetch(items: OrderedItems, path: str) -> OrderedItems:
        """
        Fetch a flattened column of nested values using dot notation.

        Each segment is resolved against every current value; values missing
        the segment drop out, and the survivors are reindexed from zero.
        """
        current: List[Any] = list(items.values())
        for segment in str(path).split('.'):
            found: List[Any] = []
            for value in current:
                resolved = data_find(value, segment, _MISSING)
                if resolved is not _MISSING:
                    found.append(resolved)
            skipped = len(current) - len(found)
            if skipped:
                logger.debug("Fetch skipped unresolved entries", {'segment': segment, 'skipped': skipped})
            current = found
        return dict(enumerate(current))

    @staticmethod
    def to_plain(items: OrderedItems) -> PlainArray:
        """Convert ordered items to a list when sequential, a dict otherwise."""
        converted: OrderedItems = {
            key: value.to_array() if isinstance(value, Arrayable) else value
            for key, value in items.items()
        }
        if Arr.is_list(converted):
            return list(converted.values())
        return converted
