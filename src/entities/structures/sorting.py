from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping, Sequence
from functools import cmp_to_key
from typing import Any, Final, TypeVar

from pydantic import ValidationError

from entities.exceptions import (
    IncomparableValuesError,
    SortKeyError,
    UnknownSortFieldError,
)
from entities.log import logger
from entities.models import SortKey, SortOrder, SortPolicy

ValueT = TypeVar("ValueT")

SortSpec = str | SortOrder | SortKey


class _Missing:
    def __repr__(self) -> str:
        return "<missing>"


MISSING: Final = _Missing()


def parse_sort_keys(specs: Iterable[SortSpec]) -> list[SortKey]:
    """
    Turns ``("date", Descending, "type")`` style arguments into sort keys.

    A field name may be followed by one order marker that applies to it alone;
    fields without a marker sort ascending.
    """
    keys: list[SortKey] = []
    pending: str | None = None

    for spec in specs:
        match spec:
            case SortOrder():
                if pending is None:
                    raise SortKeyError(
                        f"Sort order {spec.name} must directly follow a field name"
                    )
                keys.append(_make_key(pending, spec))
                pending = None
            case SortKey():
                if pending is not None:
                    keys.append(_make_key(pending))
                    pending = None
                keys.append(spec)
            case str():
                if pending is not None:
                    keys.append(_make_key(pending))
                pending = spec
            case _:
                raise SortKeyError(f"Unsupported sort key argument: {spec!r}")

    if pending is not None:
        keys.append(_make_key(pending))
    return keys


def _make_key(field: str, order: SortOrder = SortOrder.ASCENDING) -> SortKey:
    try:
        return SortKey(field=field, order=order)
    except ValidationError as e:
        raise SortKeyError(f"Invalid sort field {field!r}") from e


def extract_field(item: Any, field: str) -> Any:
    if isinstance(item, Mapping):
        return item.get(field, MISSING)  # pyright: ignore[reportUnknownMemberType]
    return getattr(item, field, MISSING)


def sort_items(
    items: Sequence[ValueT],
    keys: Sequence[SortKey],
    policy: SortPolicy = SortPolicy.LENIENT,
) -> list[ValueT]:
    """
    Returns ``items`` stably ordered by ``keys``.

    Field values are read once per item up front, so a failure under the
    strict policy happens before any ordering work and leaves ``items`` as is.
    """
    rows = [_extract_row(item, keys, policy) for item in items]
    compare = _make_comparator(keys, policy)
    order = sorted(
        range(len(items)),
        key=cmp_to_key(lambda left, right: compare(rows[left], rows[right])),
    )
    return [items[i] for i in order]


def _extract_row(
    item: Any,
    keys: Sequence[SortKey],
    policy: SortPolicy,
) -> tuple[Any, ...]:
    row = tuple(extract_field(item, key.field) for key in keys)
    if policy is SortPolicy.STRICT:
        for key, value in zip(keys, row):
            if value is MISSING:
                raise UnknownSortFieldError(key.field, item)
    return row


def _make_comparator(
    keys: Sequence[SortKey],
    policy: SortPolicy,
) -> Callable[[tuple[Any, ...], tuple[Any, ...]], int]:
    reported: set[str] = set()

    def report(field: str, reason: str) -> None:
        if field not in reported:
            reported.add(field)
            logger().debug(f"Treating values of '{field}' as equal: {reason}")

    def compare(left: tuple[Any, ...], right: tuple[Any, ...]) -> int:
        for key, a, b in zip(keys, left, right):
            if a is MISSING or b is MISSING:
                report(key.field, "field is missing on some items")
                continue
            try:
                if a < b:
                    result = -1
                elif a > b:
                    result = 1
                else:
                    continue
            except TypeError as e:
                if policy is SortPolicy.STRICT:
                    raise IncomparableValuesError(key.field, a, b) from e
                report(
                    key.field,
                    f"{type(a).__name__} and {type(b).__name__} are not comparable",
                )
                continue
            return -result if key.descending else result
        return 0

    return compare
