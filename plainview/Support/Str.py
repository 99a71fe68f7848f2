from __future__ import annotations

import math
import re
from typing import Any, Dict, Pattern


class Str:
    """Laravel-style string helper class."""

    # Cache for compiled regex patterns
    _patterns: Dict[str, Pattern[str]] = {
        # PHP is_numeric(): optional surrounding whitespace, sign, digits, fraction, exponent
        'numeric': re.compile(r'^[ \t\n\r\v\f]*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?[ \t\n\r\v\f]*$'),
        # Strings PHP turns into integer array keys
        'integer_key': re.compile(r'^(0|-?[1-9][0-9]*)$'),
    }

    @staticmethod
    def from_value(value: Any) -> str:
        """Cast a scalar to a string the way PHP's string conversion does."""
        if value is None or value is False:
            return ''
        if value is True:
            return '1'
        if isinstance(value, str):
            return value
        if isinstance(value, bytes):
            return value.decode('utf-8', errors='replace')
        if isinstance(value, float):
            if math.isnan(value):
                return 'NAN'
            if math.isinf(value):
                return 'INF' if value > 0 else '-INF'
            if value.is_integer() and abs(value) < 1e15:
                return str(int(value))
            return repr(value)
        return str(value)

    @staticmethod
    def is_numeric(value: Any) -> bool:
        """Determine if a value is a number or a numeric string."""
        if isinstance(value, bool):
            return False
        if isinstance(value, (int, float)):
            return True
        if not isinstance(value, str):
            return False
        return Str._patterns['numeric'].match(value) is not None

    @staticmethod
    def to_number(value: str) -> Any:
        """Convert a numeric string to an int or a float."""
        stripped = value.strip()
        try:
            return int(stripped)
        except ValueError:
            return float(stripped)

    @staticmethod
    def is_integer_key(value: str) -> bool:
        """Determine if a string would be stored as an integer array key."""
        if not Str._patterns['integer_key'].match(value):
            return False
        # Only strings that fit a 64-bit signed integer are converted
        return -(2 ** 63) <= int(value) <= 2 ** 63 - 1
