from __future__ import annotations

from typing import Any, Optional


class CollectionException(Exception):
    """Base exception for collections"""
    pass


class KeyNotFoundException(CollectionException, KeyError):
    """Exception raised when an index-style read hits an absent key"""

    def __init__(self, key: Any) -> None:
        self.key = key
        super().__init__(f"Undefined collection key `{key!r}`.")

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the message readable
        return str(self.args[0])


class FieldResolutionException(CollectionException, LookupError):
    """Exception raised when a field can be read neither as an attribute nor as a key"""

    def __init__(self, field: Any, item: Any) -> None:
        self.field = field
        self.item_type = type(item).__name__

        super().__init__(
            f"Unable to resolve field `{field}` on item of type `{self.item_type}`."
        )


class InvalidArgumentException(CollectionException, ValueError):
    """Exception raised when an operation receives an unusable argument"""

    def __init__(self, message: str, argument: Optional[str] = None) -> None:
        self.argument = argument
        super().__init__(message)


class JsonEncodingException(CollectionException, ValueError):
    """Exception raised when a value cannot be encoded as JSON"""
    pass


class JsonDecodingException(CollectionException, ValueError):
    """Exception raised when JSON text cannot be decoded"""

    def __init__(self, message: str, position: Optional[int] = None) -> None:
        self.position = position
        super().__init__(message)
