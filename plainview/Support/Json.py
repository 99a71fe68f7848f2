"""
JSON encoding for ordered associative structures.

Ordered dicts whose keys run 0..n-1 encode as JSON arrays and every other
dict encodes as a JSON object, so a collection and the plain structure it
was built from serialize identically. Option flags share their values with
PHP's JSON_* constants, which lets stored integer bitmasks carry over.
"""

from __future__ import annotations

import json
import math
import re
from collections.abc import Mapping
from enum import IntFlag
from typing import Any, List, Optional, Union

from plainview.Contracts.Support.Arrayable import Arrayable
from plainview.Contracts.Support.JsonSerializable import JsonSerializable
from plainview.Utils.Logger import get_logger
from ..Config.settings import settings
from .Arr import Arr
from .Exceptions import JsonDecodingException, JsonEncodingException
from .Str import Str

logger = get_logger(__name__)


class JsonOptions(IntFlag):
    """Encoder option flags."""
    NONE = 0
    HEX_TAG = 1
    HEX_AMP = 2
    HEX_APOS = 4
    HEX_QUOT = 8
    FORCE_OBJECT = 16
    NUMERIC_CHECK = 32
    UNESCAPED_SLASHES = 64
    PRETTY_PRINT = 128
    UNESCAPED_UNICODE = 256
    PARTIAL_OUTPUT_ON_ERROR = 512
    PRESERVE_ZERO_FRACTION = 1024
    THROW_ON_ERROR = 4194304


# Escape sequences inside an encoded string literal; escaped backslashes come first
_ESCAPED_QUOTE = re.compile(r'\\\\|\\"')


class _Encoder:
    """Single-use encoder carrying the options and nesting depth."""

    def __init__(self, options: int, depth: int) -> None:
        self.options = JsonOptions(options)
        self.max_depth = depth
        self.indent = '    ' if self.options & JsonOptions.PRETTY_PRINT else ''

    def has(self, flag: JsonOptions) -> bool:
        return bool(self.options & flag)

    def fail(self, message: str, value: Any) -> str:
        """Raise, or degrade the value to null under partial output."""
        if self.has(JsonOptions.PARTIAL_OUTPUT_ON_ERROR):
            logger.warning("JSON partial output substituted null", {
                'reason': message,
                'type': type(value).__name__,
            })
            return 'null'
        raise JsonEncodingException(message)

    def encode(self, value: Any, depth: int = 0) -> str:
        if value is None:
            return 'null'
        if value is True:
            return 'true'
        if value is False:
            return 'false'
        if isinstance(value, int):
            return str(int(value))
        if isinstance(value, float):
            return self.encode_float(value)
        if isinstance(value, (bytes, bytearray)):
            try:
                return self.encode_string(bytes(value).decode('utf-8'))
            except UnicodeDecodeError:
                return self.fail("Malformed UTF-8 characters, possibly incorrectly encoded", value)
        if isinstance(value, str):
            return self.encode_string(value)

        if depth >= self.max_depth:
            return self.fail("Maximum stack depth exceeded", value)

        if isinstance(value, Mapping):
            items = Arr.from_value(value)
            if Arr.is_list(items) and not self.has(JsonOptions.FORCE_OBJECT):
                return self.encode_array(list(items.values()), depth)
            return self.encode_object(items, depth)
        if isinstance(value, (list, tuple)):
            if self.has(JsonOptions.FORCE_OBJECT):
                return self.encode_object(dict(enumerate(value)), depth)
            return self.encode_array(list(value), depth)
        if isinstance(value, JsonSerializable):
            return self.encode(value.json_serialize(), depth)
        if isinstance(value, Arrayable):
            return self.encode(value.to_array(), depth)
        if isinstance(value, (set, frozenset, complex)) or callable(value):
            return self.fail(f"Type is not supported: {type(value).__name__}", value)
        if hasattr(value, '__dict__'):
            public = {k: v for k, v in vars(value).items() if not k.startswith('_')}
            return self.encode_object(public, depth)
        return self.fail(f"Type is not supported: {type(value).__name__}", value)

    def encode_float(self, value: float) -> str:
        if math.isnan(value) or math.isinf(value):
            return self.fail("Inf and NaN cannot be JSON encoded", value)
        if value.is_integer() and not self.has(JsonOptions.PRESERVE_ZERO_FRACTION):
            if abs(value) < 1e15:
                return str(int(value))
        return json.dumps(value)

    def encode_string(self, value: str, numeric_check: bool = True) -> str:
        if numeric_check and self.has(JsonOptions.NUMERIC_CHECK) and Str.is_numeric(value):
            number = Str.to_number(value)
            if isinstance(number, int):
                return str(number)
            return self.encode_float(number)

        literal = json.dumps(value, ensure_ascii=not self.has(JsonOptions.UNESCAPED_UNICODE))
        body = literal[1:-1]
        if not self.has(JsonOptions.UNESCAPED_SLASHES):
            body = body.replace('/', '\\/')
        if self.has(JsonOptions.HEX_TAG):
            body = body.replace('<', '\\u003C').replace('>', '\\u003E')
        if self.has(JsonOptions.HEX_AMP):
            body = body.replace('&', '\\u0026')
        if self.has(JsonOptions.HEX_APOS):
            body = body.replace("'", '\\u0027')
        if self.has(JsonOptions.HEX_QUOT):
            body = _ESCAPED_QUOTE.sub(
                lambda match: '\\u0022' if match.group(0) == '\\"' else match.group(0),
                body
            )
        return f'"{body}"'

    def encode_array(self, values: List[Any], depth: int) -> str:
        if not values:
            return '[]'
        parts = [self.encode(value, depth + 1) for value in values]
        return self.join('[', parts, ']', depth)

    def encode_object(self, items: Mapping[Any, Any], depth: int) -> str:
        if not items:
            return '{}'
        separator = ': ' if self.indent else ':'
        parts = [
            f"{self.encode_string(str(key), numeric_check=False)}{separator}{self.encode(value, depth + 1)}"
            for key, value in items.items()
        ]
        return self.join('{', parts, '}', depth)

    def join(self, opening: str, parts: List[str], closing: str, depth: int) -> str:
        if not self.indent:
            return opening + ','.join(parts) + closing
        inner = '\n' + self.indent * (depth + 1)
        outer = '\n' + self.indent * depth
        return opening + inner + (',' + inner).join(parts) + outer + closing


class Json:
    """JSON helper for collections and plain ordered structures."""

    @staticmethod
    def encode(value: Any, options: Union[int, JsonOptions] = 0, depth: Optional[int] = None) -> str:
        """Encode a value as JSON text."""
        if depth is None:
            depth = settings.JSON_DEPTH
        if depth <= 0:
            raise JsonEncodingException("Depth must be greater than zero")
        encoder = _Encoder(int(options) | settings.JSON_OPTIONS, depth)
        return encoder.encode(value)

    @staticmethod
    def decode(text: Union[str, bytes]) -> Any:
        """Decode JSON text; objects become ordered dicts with normalised keys."""
        try:
            return json.loads(
                text,
                object_pairs_hook=lambda pairs: {Arr.normalize_key(k): v for k, v in pairs},
            )
        except json.JSONDecodeError as e:
            raise JsonDecodingException(f"Syntax error: {e.msg}", e.pos) from e
        except UnicodeDecodeError as e:
            raise JsonDecodingException("Malformed UTF-8 characters, possibly incorrectly encoded") from e
