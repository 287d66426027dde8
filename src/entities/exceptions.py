from __future__ import annotations

from typing import Any


class EntitiesError(Exception):
    pass


class OutOfRangeError(EntitiesError, ValueError):
    """Raised when a head/tail count falls outside ``[0, count]``."""

    def __init__(self, message: str, n: int, count: int):
        super().__init__(message)
        self.n: int = n
        self.count: int = count


class IndexOutOfRangeError(EntitiesError, IndexError):
    def __init__(self, index: Any, count: int):
        super().__init__(
            f"Index {index!r} is out of range for a collection of {count} items."
        )
        self.index: Any = index
        self.count: int = count


class SortKeyError(EntitiesError, TypeError):
    """Raised when a sort key specification cannot be parsed."""

    pass


class UnknownSortFieldError(SortKeyError, AttributeError):
    def __init__(self, field: str, item: Any):
        super().__init__(
            f"Item of type {type(item).__name__} has no field '{field}' to sort by."
        )
        self.field: str = field
        self.item: Any = item


class IncomparableValuesError(SortKeyError):
    def __init__(self, field: str, left: Any, right: Any):
        super().__init__(
            f"Values of field '{field}' cannot be ordered: "
            f"{type(left).__name__} and {type(right).__name__}"
        )
        self.field: str = field
        self.left: Any = left
        self.right: Any = right


class CollectionModifiedError(EntitiesError, RuntimeError):
    pass


class ConfigurationError(EntitiesError, ValueError):
    pass
