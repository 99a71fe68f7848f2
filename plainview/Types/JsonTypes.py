"""Common type definitions for collection data.

This module provides reusable aliases for keys, plain array structures
and callback shapes so collection signatures avoid bare Any types.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Union

from typing_extensions import TypeAlias

# Keys of an ordered associative structure (PHP array keys)
ArrayKey: TypeAlias = Union[int, str]

# The storage behind every collection
OrderedItems: TypeAlias = Dict[ArrayKey, Any]

# What to_array() hands back: a list for sequential keys, a dict otherwise
PlainArray: TypeAlias = Union[List[Any], Dict[ArrayKey, Any]]

# Callback shapes accepted by collection operations
Comparator: TypeAlias = Callable[[Any, Any], Union[int, float, bool]]
