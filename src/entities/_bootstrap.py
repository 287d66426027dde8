import logging
import os
from os import PathLike

from entities.config import EntitiesConfig, set_config
from entities.log import logger as current_logger
from entities.log import set_logger


def bootstrap(
    *,
    config: EntitiesConfig | None = None,
    config_path: str | PathLike[str] | None = None,
    logger: logging.Logger | None = None,
) -> EntitiesConfig:
    if logger is not None:
        set_logger(logger)

    if config is None:
        config = load_config(config_path)
    set_config(config)

    current_logger().debug(f"Bootstrapped entities with {config!r}")
    return config


def load_config(path: str | PathLike[str] | None = None) -> EntitiesConfig:
    if path is None:
        path = os.getenv("ENTITIES_CONFIG_PATH")
    if path:
        return EntitiesConfig.from_yaml(path)
    return EntitiesConfig.from_env()
