from __future__ import annotations

import abc
from collections.abc import (
    Collection,
    Iterable,
    Iterator,
)
from typing import (
    Any,
    Generic,
    Self,
    TypeVar,
)

from typing_extensions import override

from entities.config import config
from entities.exceptions import (
    CollectionModifiedError,
    IndexOutOfRangeError,
    OutOfRangeError,
)
from entities.log import logger
from entities.models import SortPolicy
from entities.protocols import EntityCollection

from .sorting import SortSpec, parse_sort_keys, sort_items

ValueT = TypeVar("ValueT")
ValueT_co = TypeVar("ValueT_co", covariant=True)


class CollectionMixin(abc.ABC, Collection[ValueT_co]):
    @property
    @abc.abstractmethod
    def _datastore(self) -> Collection[ValueT_co]:
        """Contract: The consuming class must provide a list-like object."""
        raise NotImplementedError

    @override
    def __len__(self) -> int:
        return self._datastore.__len__()

    @override
    def __contains__(self, value: object) -> bool:
        return value in self._datastore


class Entities(CollectionMixin[ValueT], Generic[ValueT]):
    """
    An ordered, in-memory collection of record-like items.

    Subclasses only contribute the item type. ``head``, ``tail``, ``copy`` and
    ``sorted`` return instances of the receiver's own class, created through
    ``_new_empty``; override it when the subclass constructor needs arguments.
    """

    def __init__(
        self,
        *,
        items: Iterable[ValueT | EntityCollection[ValueT]] | None = None,
    ):
        self._items: list[ValueT] = []
        self._version: int = 0
        for item in items or ():
            self.add(item)

    @property
    @override
    def _datastore(self) -> list[ValueT]:
        return self._items

    def _new_empty(self) -> Self:
        return type(self)()

    def add(self, item: ValueT | EntityCollection[ValueT]) -> None:
        """
        Appends ``item``. Collections are unrolled, nested ones included,
        so that their elements land at the end in their own order.
        """
        self._items.extend(list(_flatten(item)))
        self._version += 1

    @property
    def count(self) -> int:
        return len(self._items)

    def get(self, index: int) -> ValueT:
        self._check_index(index)
        return self._items[index]

    def set(self, index: int, value: ValueT) -> None:
        self._check_index(index)
        self._items[index] = value
        self._version += 1

    def __getitem__(self, index: int) -> ValueT:
        return self.get(index)

    def __setitem__(self, index: int, value: ValueT) -> None:
        self.set(index, value)

    def _check_index(self, index: Any) -> None:
        if (
            not isinstance(index, int)
            or isinstance(index, bool)
            or not 0 <= index < len(self._items)
        ):
            raise IndexOutOfRangeError(index, len(self._items))

    @override
    def __iter__(self) -> Iterator[ValueT]:
        for _, item in self.enumerate():
            yield item

    def enumerate(self) -> Iterator[tuple[int, ValueT]]:
        version = self._version
        for index in range(len(self._items)):
            yield index, self._items[index]
            if self._version != version:
                raise CollectionModifiedError(
                    f"{type(self).__name__} was modified during iteration"
                )

    def head(self, n: int | None = None) -> Self:
        return self._extremity(n, from_start=True)

    def tail(self, n: int | None = None) -> Self:
        return self._extremity(n, from_start=False)

    def _extremity(self, n: int | None, from_start: bool) -> Self:
        if n is None:
            n = config().default_slice_size
        if n < 0:
            raise OutOfRangeError("n must be 0 or greater", n=n, count=self.count)
        if n > self.count:
            raise OutOfRangeError(
                "Requested number of objects exceeds the length of the collection.",
                n=n,
                count=self.count,
            )

        start = 0 if from_start else self.count - n
        result = self._new_empty()
        for item in self._items[start : start + n]:
            result.add(item)
        return result

    def copy(self) -> Self:
        result = self._new_empty()
        result.add(self)
        return result

    def sort(self, *keys: SortSpec, policy: SortPolicy | None = None) -> None:
        """
        Reorders the collection in place.

        Keys are field names, each optionally followed by ``Ascending`` or
        ``Descending``; ties on every key keep their current order.

        Example:
            coins.sort("date", Descending, "type", "weight")
        """
        parsed = parse_sort_keys(keys)
        if not parsed:
            return

        policy = policy or config().sort_policy
        logger().debug(
            f"Sorting {type(self).__name__} of {self.count} items by "
            f"{[(key.field, key.order.value) for key in parsed]} ({policy.value})"
        )
        self._items[:] = sort_items(self._items, parsed, policy)
        self._version += 1

    def sorted(self, *keys: SortSpec, policy: SortPolicy | None = None) -> Self:
        result = self.copy()
        result.sort(*keys, policy=policy)
        return result

    @override
    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"


def _flatten(value: Any) -> Iterator[Any]:
    # Nested collections are snapshotted before they are walked, which also
    # makes ``c.add(c)`` append the current contents exactly once.
    stack: list[Iterator[Any]] = [iter((value,))]
    while stack:
        for element in stack[-1]:
            if isinstance(element, EntityCollection):
                stack.append(iter(list(element)))  # pyright: ignore[reportUnknownArgumentType]
                break
            yield element
        else:
            stack.pop()
