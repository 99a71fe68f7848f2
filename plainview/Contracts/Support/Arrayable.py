from __future__ import annotations

from typing import Protocol, runtime_checkable

from plainview.Types.JsonTypes import PlainArray


@runtime_checkable
class Arrayable(Protocol):
    """
    Contract for objects that can hand back a plain array structure.

    Collections implement it, and so can any value that should be unwrapped
    when it is nested inside a collection being exported or encoded.
    """

    def to_array(self) -> PlainArray:
        """Get the instance as a plain list or dict."""
        ...
