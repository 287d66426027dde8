__all__ = [
    "Ascending",
    "Descending",
    "Entities",
    "EntitiesConfig",
    "EntityCollection",
    "SortKey",
    "SortOrder",
    "SortPolicy",
    "bootstrap",
    "config",
    "exceptions",
    "logger",
    "set_config",
]
from . import exceptions as exceptions
from ._bootstrap import bootstrap as bootstrap
from .config import EntitiesConfig, config, set_config
from .log import logger as logger
from .models import Ascending, Descending, SortKey, SortOrder, SortPolicy
from .protocols import EntityCollection
from .structures import Entities
