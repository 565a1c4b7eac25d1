"""The game loop's entry points for a level in play, wave by wave."""

from __future__ import annotations

import logging
from os import PathLike
from typing import Optional, Union

from .enemies import Enemy
from .level import LevelCore
from .manager import GameManager
from .movements import MovementStatus
from .tower import Tower
from .user_data import UserData, WaveResults
from .wave import LevelWave

logger = logging.getLogger(__name__)

MAX_TOWER_LEVEL = 3


class GameSession:
    """Drives one level: player data, enemies, towers and waves."""

    def __init__(self) -> None:
        self.manager = GameManager()

    def _level(self) -> LevelCore:
        if self.manager.level_core is None:
            raise RuntimeError("no level loaded")
        return self.manager.level_core

    def _user(self) -> UserData:
        if self.manager.user_data is None:
            raise RuntimeError("no level loaded")
        return self.manager.user_data

    def _wave(self) -> LevelWave:
        if self.manager.current_wave is None:
            raise RuntimeError("no wave in progress")
        return self.manager.current_wave

    def load_level(self, json_path: Union[str, PathLike]) -> tuple[int, int, int]:
        """Load a level and return its checkpoint, tower and wave counts."""
        logger.info("loading level from %s", json_path)
        self.manager.instantiate_level_core(json_path)
        self.manager.instantiate_user_data()
        self.manager.instantiate_enemy_factories()
        self.manager.instantiate_towers()
        level = self._level()
        return (
            level.number_of_checkpoints,
            level.number_of_towers,
            level.number_of_waves,
        )

    def level_end(self) -> None:
        """Release everything belonging to the level."""
        self.manager.delete_manager()
        logger.info("level released")

    def gold(self) -> int:
        """Gold the player can spend."""
        return self._user().current_gold

    def score(self) -> int:
        """The player's score."""
        return self._user().score

    def through_enemies(self) -> int:
        """How many enemies reached the end of the path."""
        return self._user().through_enemies

    def enemy(self, enemy_id: int) -> Optional[Enemy]:
        """The enemy of the current wave at the given index."""
        enemies = self._wave().instantiated_enemies
        if not 0 <= enemy_id < len(enemies):
            raise IndexError(f"no enemy with id {enemy_id}")
        return enemies[enemy_id]

    def enemy_spawned(self, enemy: Enemy) -> None:
        """Mark the enemy as present on the map."""
        enemy.enemy_spawned = True

    def enemy_move(self, enemy: Enemy, time_factor: float) -> MovementStatus:
        """Move the enemy one step along the level's path."""
        return enemy.move(self._level().checkpoints_coordinates, time_factor)

    def enemy_slayed(self, enemy: Enemy) -> None:
        """Reward the player for a kill and record it in the wave."""
        user = self._user()
        user.win_gold(enemy.revenue)
        user.win_score(enemy.revenue)
        self._wave().enemy_slayed(enemy)

    def enemy_went_through(self, enemy: Enemy) -> None:
        """Record an enemy that reached the end of the path."""
        self._user().through_enemies += 1
        logger.info("enemy went through")
        self._wave().enemy_went_through(enemy)

    def tower(self, tower_id: int) -> Tower:
        """The tower at the given index."""
        towers = self.manager.towers
        if not 0 <= tower_id < len(towers):
            raise IndexError(f"no tower with id {tower_id}")
        return towers[tower_id]

    def tower_buy_status(self, tower: Tower) -> tuple[int, bool]:
        """The price of the tower's next level and whether it is affordable."""
        user = self._user()
        prices = user.towers_actual_prices
        if not 0 <= tower.level < len(prices):
            raise IndexError(f"no tower price for level {tower.level}")
        price = prices[tower.level]
        return price, user.current_gold >= price

    def buy_tower(self, tower: Tower) -> int:
        """Pay for the tower, raise its level and return the new level."""
        self._user().buy_tower(tower.level)
        tower.buy()
        return tower.level

    def upgrade_tower(self, tower: Tower) -> tuple[int, float, int]:
        """Upgrade the tower unless at the top level.

        Returns its level, shooting speed and special charge.
        """
        if tower.level < MAX_TOWER_LEVEL:
            self._user().buy_tower(tower.level)
            tower.upgrade()
            logger.info("tower upgraded to level %d", tower.level)
        return tower.level, tower.shooting_speed, tower.special_charge

    def enemy_observer(self, tower: Tower) -> Optional[Enemy]:
        """The first living, spawned enemy within the tower's range, if any."""
        wave = self.manager.current_wave
        if wave is None:
            return None
        return next(
            (
                enemy
                for enemy in wave.instantiated_enemies
                if enemy is not None
                and tower.is_in_range(enemy)
                and enemy.health_points > 0
                and enemy.enemy_spawned
            ),
            None,
        )

    def attack_close_enemy(
        self, tower: Tower, enemy: Optional[Enemy]
    ) -> Optional[bool]:
        """Attack the enemy; True for a special attack, None without a target."""
        if enemy is None:
            return None
        if tower.special_ready:
            tower.special_attack(enemy)
            return True
        tower.attack(enemy)
        return False

    def start_wave(self) -> tuple[int, int]:
        """Start the current wave; return its enemy count and spawn interval."""
        self.manager.instantiate_level_wave()
        level = self._level()
        info = level.waves[level.current_wave_id - 1]
        return info.number_of_enemies, info.spawn_interval

    def wave_is_running(self) -> bool:
        """Whether the current wave still has living enemies."""
        return self.manager.wave_is_running()

    def wave_end(self) -> WaveResults:
        """Record the current wave's outcome and discard the wave."""
        results = self._wave().wave_end()
        self.manager.current_wave = None
        if self.manager.level_core is not None:
            self.manager.level_core.current_wave = None
        return results

    def _finish_wave(self, won: bool, seconds_elapsed: int) -> WaveResults:
        wave = self._wave()
        logger.info(
            "wave %d %s", self._level().current_wave_id, "won" if won else "lost"
        )
        wave.victory = won
        wave.seconds_elapsed = seconds_elapsed
        return self.wave_end()

    def wave_win(self, seconds_elapsed: int) -> WaveResults:
        """End the current wave as a victory."""
        return self._finish_wave(True, seconds_elapsed)

    def wave_lost(self, seconds_elapsed: int) -> WaveResults:
        """End the current wave as a defeat."""
        return self._finish_wave(False, seconds_elapsed)

    def advance_wave(self) -> int:
        """Move to the next wave and return its id, or 0 after the last."""
        level = self._level()
        if level.current_wave_id == level.number_of_waves:
            return 0
        level.current_wave_id += 1
        return level.current_wave_id