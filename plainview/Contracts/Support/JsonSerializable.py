from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class JsonSerializable(Protocol):
    """Contract for objects that choose the value the JSON encoder sees."""

    def json_serialize(self) -> Any:
        """Get the data which should be encoded in place of the object."""
        ...
