"""Static description of a level, read from its JSON file."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from os import PathLike
from typing import TYPE_CHECKING, Any, Mapping, Optional, Union

from .factories import EnemyFactories
from .user_data import UserData

if TYPE_CHECKING:
    from .wave import LevelWave

Coordinates = tuple[int, int]


@dataclass
class WaveInfo:
    """The enemies a wave spawns, in order, and the interval between them."""

    number_of_enemies: int
    spawn_interval: int
    spawn_order: list[int] = field(default_factory=list)


def _coordinates(section: Mapping[str, Any], count: int) -> list[Coordinates]:
    return [
        (int(section[str(i)]["x"]), int(section[str(i)]["z"])) for i in range(count)
    ]


def _wave(data: Mapping[str, Any]) -> WaveInfo:
    amount = int(data["spawn_amount"])
    order = data["spawn_order"]
    return WaveInfo(
        number_of_enemies=amount,
        spawn_interval=int(data["spawn_interval"]),
        spawn_order=[int(order[str(j)]) for j in range(1, amount + 1)],
    )


@dataclass
class LevelCore:
    """Checkpoints, tower spots and waves of a level, plus its progress."""

    number_of_checkpoints: int
    checkpoints_coordinates: list[Coordinates]
    number_of_towers: int
    towers_coordinates: list[Coordinates]
    number_of_waves: int
    waves: list[WaveInfo]
    number_of_enemies: int
    current_wave_id: int = 1
    user_data: Optional[UserData] = None
    factories: Optional[EnemyFactories] = None
    current_wave: Optional["LevelWave"] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> LevelCore:
        """Build a level from parsed JSON; a missing key raises KeyError."""
        checkpoints = int(data["number_of_checkpoints"])
        towers = int(data["number_of_towers"])
        enemies = int(data["number_of_enemies"])
        waves = int(data["number_of_waves"])
        return cls(
            number_of_checkpoints=checkpoints,
            checkpoints_coordinates=_coordinates(
                data["checkpoints_coordinates"] if checkpoints else {}, checkpoints
            ),
            number_of_towers=towers,
            towers_coordinates=_coordinates(
                data["towers_coordinates"] if towers else {}, towers
            ),
            number_of_waves=waves,
            waves=[_wave(data[f"wave_{i}"]) for i in range(1, waves + 1)],
            number_of_enemies=enemies,
        )

    @classmethod
    def from_file(cls, path: Union[str, PathLike]) -> LevelCore:
        """Read and parse a level JSON file."""
        with open(path, encoding="utf-8") as handle:
            return cls.from_dict(json.load(handle))