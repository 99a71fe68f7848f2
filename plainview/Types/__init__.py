from .JsonTypes import ArrayKey, OrderedItems, PlainArray, Comparator

__all__ = ["ArrayKey", "OrderedItems", "PlainArray", "Comparator"]
