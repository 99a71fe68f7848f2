from .Collection import Collection, collect
from .Arr import Arr
from .Str import Str
from .Json import Json, JsonOptions
from .Fields import FieldReadable, KeyedMapReader, NamedFieldReader, data_get, reader_for
from .Exceptions import (
    CollectionException,
    KeyNotFoundException,
    FieldResolutionException,
    InvalidArgumentException,
    JsonEncodingException,
    JsonDecodingException,
)

__all__ = [
    "Collection",
    "collect",
    "Arr",
    "Str",
    "Json",
    "JsonOptions",
    "FieldReadable",
    "KeyedMapReader",
    "NamedFieldReader",
    "data_get",
    "reader_for",
    "CollectionException",
    "KeyNotFoundException",
    "FieldResolutionException",
    "InvalidArgumentException",
    "JsonEncodingException",
    "JsonDecodingException",
]
