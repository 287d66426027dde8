from __future__ import annotations

import os
from collections.abc import Mapping
from os import PathLike
from typing import Any, ClassVar

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .exceptions import ConfigurationError
from .models import SortPolicy


class EntitiesConfig(BaseModel):
    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="forbid")

    ENV_PREFIX: ClassVar[str] = "ENTITIES_"

    default_slice_size: int = Field(default=10, ge=0)
    sort_policy: SortPolicy = SortPolicy.LENIENT

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> EntitiesConfig:
        """
        Builds a configuration from ``ENTITIES_<FIELD>`` environment variables.
        Unset variables keep their defaults.
        """
        environ = os.environ if environ is None else environ
        values: dict[str, Any] = {}
        for name in cls.model_fields:
            raw = environ.get(f"{cls.ENV_PREFIX}{name.upper()}")
            if raw is not None:
                values[name] = raw.strip()
        return cls._validate(values, source="environment")

    @classmethod
    def from_yaml(cls, path: str | PathLike[str]) -> EntitiesConfig:
        try:
            with open(path, encoding="utf-8") as stream:
                data = yaml.safe_load(stream)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Failed to read configuration from {path}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Configuration in {path} must be a mapping, got {type(data).__name__}"  # pyright: ignore[reportUnknownArgumentType]
            )
        return cls._validate(data, source=str(path))  # pyright: ignore[reportUnknownArgumentType]

    @classmethod
    def _validate(cls, values: Mapping[str, Any], source: str) -> EntitiesConfig:
        try:
            return cls.model_validate(values)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration from {source}: {e}") from e


current_config: EntitiesConfig = EntitiesConfig()


def set_config(config: EntitiesConfig) -> None:
    global current_config
    current_config = config


def config() -> EntitiesConfig:
    return current_config
