from __future__ import annotations

from enum import Enum
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, field_validator


class SortOrder(Enum):
    ASCENDING = "asc"
    DESCENDING = "desc"


Ascending = SortOrder.ASCENDING
Descending = SortOrder.DESCENDING


class SortPolicy(Enum):
    """How sorting treats missing fields and values that cannot be ordered."""

    LENIENT = "lenient"
    STRICT = "strict"


class SortKey(BaseModel):
    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)

    field: str
    order: SortOrder = SortOrder.ASCENDING

    @field_validator("field")
    @classmethod
    def check_field_is_named(cls, v: str) -> str:
        if not v:
            raise ValueError("Sort field name must not be empty.")
        return v

    @property
    def descending(self) -> bool:
        return self.order is SortOrder.DESCENDING
