from __future__ import annotations

from .Support.Arrayable import Arrayable
from .Support.JsonSerializable import JsonSerializable

__all__: list[str] = [
    'Arrayable',
    'JsonSerializable',
]
