from __future__ import annotations

from collections.abc import Iterator
from typing import (
    Protocol,
    TypeVar,
    runtime_checkable,
)

T_co = TypeVar("T_co", covariant=True)


@runtime_checkable
class EntityCollection(Protocol[T_co]):
    """
    Anything that can be flattened into a collection by ``add``.

    Plain lists and tuples do not qualify: they are stored as single items.
    """

    @property
    def count(self) -> int: ...

    def get(self, index: int) -> T_co: ...

    def enumerate(self) -> Iterator[tuple[int, T_co]]: ...

    def __iter__(self) -> Iterator[T_co]: ...
