import logging
from datetime import datetime

import pytest

from entities import Entities, EntitiesConfig, set_config
from entities.log import set_logger


class Coin:
    def __init__(self, date: datetime):
        self._date = date

    @property
    def date(self) -> datetime:
        return self._date

    def __repr__(self) -> str:
        return f"Coin({self._date:%Y-%m-%d})"


class Penny(Coin):
    def __init__(self, date: datetime, type: str, weight: float = 2.5):
        super().__init__(date)
        self._type = type
        self._weight = weight

    @property
    def type(self) -> str:
        return self._type

    @property
    def weight(self) -> float:
        return self._weight

    def __repr__(self) -> str:
        return f"Penny({self._date:%Y-%m-%d}, {self._type}, {self._weight})"


class Coins(Entities[Coin]):
    pass


def year(y: int) -> datetime:
    return datetime(y, 1, 1)


@pytest.fixture(autouse=True)
def default_config():
    set_config(EntitiesConfig())
    yield
    set_config(EntitiesConfig())
    set_logger(logging.getLogger("entities.log"))


@pytest.fixture
def century() -> Coins:
    """Coins dated 2000-01-01 through 2099-01-01, in ascending order."""
    cs = Coins()
    for y in range(2000, 2100):
        cs.add(Coin(year(y)))
    return cs


@pytest.fixture
def pennies() -> Coins:
    cs = Coins()
    cs.add(Penny(year(2021), "lincoln", 2.5))
    cs.add(Penny(year(2020), "wheat", 3.1))
    cs.add(Penny(year(2021), "indian", 3.0))
    cs.add(Penny(year(2020), "lincoln", 2.5))
    cs.add(Penny(year(2021), "indian", 2.9))
    cs.add(Penny(year(2020), "lincoln", 2.4))
    return cs
