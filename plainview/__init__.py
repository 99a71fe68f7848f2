"""Plainview collections: Laravel-style ordered collections for Python."""

from .Support import (
    Arr,
    Collection,
    CollectionException,
    FieldResolutionException,
    InvalidArgumentException,
    Json,
    JsonDecodingException,
    JsonEncodingException,
    JsonOptions,
    KeyNotFoundException,
    collect,
)

__version__ = "1.0.0"

__all__ = [
    "Arr",
    "Collection",
    "CollectionException",
    "FieldResolutionException",
    "InvalidArgumentException",
    "Json",
    "JsonDecodingException",
    "JsonEncodingException",
    "JsonOptions",
    "KeyNotFoundException",
    "collect",
]
