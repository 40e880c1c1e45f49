"""Build enemies from a CSV table of their statistics."""

from __future__ import annotations

import csv
from dataclasses import dataclass
from os import PathLike
from typing import Union

from cui_rpg.character import BattleCharacter
from cui_rpg.enemy import BigBear

DEFAULT_PATH = "test.csv"
BIG_BEAR_NAME = "おおぐま"

_COLUMNS = ("hp", "mp", "attack", "defense", "speed", "exp")


class EnemyNotFoundError(LookupError):
    """The requested enemy has no row in the table."""


@dataclass
class EnemyData:
    """One enemy's statistics as stored in the table."""

    hp: int
    mp: int
    attack: int
    defense: int
    speed: int
    exp: int


def get_enemy_data(name: str, path: Union[str, PathLike] = DEFAULT_PATH) -> EnemyData:
    """Read the statistics of the first row named ``name``.

    Rows are ``name,hp,mp,attack,defense,speed,exp``.
    """
    with open(path, newline="", encoding="utf-8") as file:
        for row in csv.reader(file):
            if row and row[0] == name:
                break
        else:
            raise EnemyNotFoundError(name)

    values = row[1:1 + len(_COLUMNS)]
    if len(values) < len(_COLUMNS):
        raise ValueError(f"row for {name!r} has too few columns")
    return EnemyData(**{key: int(value.strip()) for key, value in zip(_COLUMNS, values)})


def generate_big_bear(brave: BattleCharacter, path: Union[str, PathLike] = DEFAULT_PATH) -> BigBear:
    """Create the forest's big bear, facing ``brave``."""
    data = get_enemy_data(BIG_BEAR_NAME, path)
    return BigBear(brave, BIG_BEAR_NAME, data.hp, data.mp, data.attack, data.defense, data.speed, data.exp)