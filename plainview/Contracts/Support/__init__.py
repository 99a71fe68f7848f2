from .Arrayable import Arrayable
from .JsonSerializable import JsonSerializable

__all__ = ["Arrayable", "JsonSerializable"]
