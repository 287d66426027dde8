from .sequences import CollectionMixin, Entities
from .sorting import parse_sort_keys, sort_items

__all__ = [
    "CollectionMixin",
    "Entities",
    "parse_sort_keys",
    "sort_items",
]
