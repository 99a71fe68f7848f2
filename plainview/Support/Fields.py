"""
Field resolution for collection items.

Items handed to lists(), implode() and fetch() come in two shapes:
records exposing named attributes (plain objects, dataclasses, models)
and keyed maps (dicts, lists, tuples, collections). Each shape gets a
reader implementing FieldReadable, and reader_for() picks one at runtime.
"""

from __future__ import annotations

import inspect
from collections.abc import Mapping, Sequence
from typing import Any, List, Protocol, runtime_checkable

from .Exceptions import FieldResolutionException
from .Str import Str

_MISSING = object()

# Scalars never expose fields, whatever attributes the type carries
_SCALARS = (str, bytes, bytearray, int, float, complex, bool, type(None))


@runtime_checkable
class FieldReadable(Protocol):
    """Capability of reading a named field off an item."""

    def has(self, name: Any) -> bool:
        """Determine if the field resolves."""
        ...

    def read(self, name: Any) -> Any:
        """Read the field or raise FieldResolutionException."""
        ...


class KeyedMapReader:
    """Reads fields from dicts, sequences and index-accessible objects by key."""

    def __init__(self, item: Any) -> None:
        self.item = item

    def _candidates(self, name: Any) -> List[Any]:
        candidates = [name]
        if isinstance(name, str) and Str.is_integer_key(name):
            candidates.append(int(name))
        elif isinstance(name, int) and not isinstance(name, bool):
            candidates.append(str(name))
        return candidates

    def _lookup(self, name: Any) -> Any:
        item = self.item
        for key in self._candidates(name):
            if isinstance(item, Mapping):
                if key in item:
                    return item[key]
            elif isinstance(item, Sequence):
                if isinstance(key, int) and 0 <= key < len(item):
                    return item[key]
            elif item.offset_exists(key):
                return item.offset_get(key)
        return _MISSING

    def has(self, name: Any) -> bool:
        return self._lookup(name) is not _MISSING

    def read(self, name: Any) -> Any:
        value = self._lookup(name)
        if value is _MISSING:
            raise FieldResolutionException(name, self.item)
        return value


class NamedFieldReader:
    """Reads data attributes and properties from objects; methods are not fields."""

    def __init__(self, item: Any) -> None:
        self.item = item

    def _lookup(self, name: Any) -> Any:
        if not isinstance(name, str):
            return _MISSING
        value = getattr(self.item, name, _MISSING)
        if inspect.isroutine(value):
            return _MISSING
        return value

    def has(self, name: Any) -> bool:
        return self._lookup(name) is not _MISSING

    def read(self, name: Any) -> Any:
        value = self._lookup(name)
        if value is _MISSING:
            raise FieldResolutionException(name, self.item)
        return value


class _UnreadableItem:
    """Reader for scalars, which expose no fields at all."""

    def __init__(self, item: Any) -> None:
        self.item = item

    def has(self, name: Any) -> bool:
        return False

    def read(self, name: Any) -> Any:
        raise FieldResolutionException(name, self.item)


def is_keyed(item: Any) -> bool:
    """Determine if an item is read by key rather than by attribute."""
    if isinstance(item, (Mapping, list, tuple)):
        return True
    return hasattr(item, 'offset_exists') and hasattr(item, 'offset_get')


def reader_for(item: Any) -> FieldReadable:
    """Pick the reader matching the shape of the item."""
    if isinstance(item, _SCALARS):
        return _UnreadableItem(item)
    if is_keyed(item):
        return KeyedMapReader(item)
    return NamedFieldReader(item)


def data_get(item: Any, field: Any) -> Any:
    """Resolve a single field on an item, raising when it does not resolve."""
    return reader_for(item).read(field)


def data_find(item: Any, field: Any, default: Any = None) -> Any:
    """Resolve a single field on an item, falling back to a default."""
    reader = reader_for(item)
    if not reader.has(field):
        return default
    return reader.read(field)
