"""Owner of every object that makes up a level in play."""

from __future__ import annotations

from os import PathLike
from typing import Optional, Union

from .factories import EnemyFactories
from .level import LevelCore
from .tower import Tower
from .user_data import UserData
from .wave import LevelWave


class GameManager:
    """Creates and holds the level, the player data, factories, towers and wave."""

    def __init__(self) -> None:
        self.level_core: Optional[LevelCore] = None
        self.user_data: Optional[UserData] = None
        self.current_wave: Optional[LevelWave] = None
        self.towers: list[Tower] = []
        self.factories: Optional[EnemyFactories] = None

    def _level(self) -> LevelCore:
        if self.level_core is None:
            raise RuntimeError("no level loaded")
        return self.level_core

    def instantiate_level_core(self, json_path: Union[str, PathLike]) -> None:
        """Load the level description from a JSON file."""
        self.level_core = LevelCore.from_file(json_path)

    def instantiate_user_data(self) -> None:
        """Create fresh player data and attach it to the level."""
        level = self._level()
        self.user_data = UserData()
        level.user_data = self.user_data

    def instantiate_level_wave(self) -> None:
        """Start the level's current wave."""
        level = self._level()
        if self.user_data is None or level.factories is None:
            raise RuntimeError("user data and enemy factories must exist first")
        self.current_wave = LevelWave(
            level.waves[level.current_wave_id - 1],
            self.user_data,
            level.factories,
            level.checkpoints_coordinates,
        )
        level.current_wave = self.current_wave

    def instantiate_enemy_factories(self) -> None:
        """Place the enemy factories at the first checkpoint."""
        level = self._level()
        x, y = level.checkpoints_coordinates[0]
        self.factories = EnemyFactories.at_position(x, y)
        level.factories = self.factories

    def instantiate_towers(self) -> None:
        """Create a tower on each of the level's tower spots."""
        level = self._level()
        self.towers.extend(Tower(x, y) for x, y in level.towers_coordinates)

    def wave_is_running(self) -> bool:
        """Whether the current wave still has living enemies."""
        if self.current_wave is None:
            raise RuntimeError("no wave in progress")
        return self.current_wave.wave_is_running()

    def delete_manager(self) -> None:
        """Release everything the manager holds."""
        self.current_wave = None
        self.level_core = None
        self.user_data = None
        self.factories = None
        self.towers.clear()