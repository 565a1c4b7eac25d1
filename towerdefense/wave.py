"""A single running wave of enemies."""

from __future__ import annotations

from typing import Optional, Sequence

from .enemies import Enemy
from .factories import EnemyFactories
from .level import Coordinates, WaveInfo
from .movements import UpMovement
from .user_data import UserData, WaveResults


class LevelWave:
    """Spawns a wave's enemies and tracks how the wave goes."""

    def __init__(
        self,
        wave_data: WaveInfo,
        user_data: UserData,
        factories: EnemyFactories,
        checkpoints_coordinates: Sequence[Coordinates],
    ) -> None:
        self.wave_data = wave_data
        self.user_data = user_data
        self.factories = factories
        self.checkpoints_coordinates = list(checkpoints_coordinates)
        self.victory = True
        self.enemies_through_wave = 0
        self.slayed_enemies = 0
        self.gold_won = 0
        self.seconds_elapsed = 0
        self.instantiated_enemies: list[Optional[Enemy]] = []
        for i in range(wave_data.number_of_enemies):
            factory = factories.for_type(wave_data.spawn_order[i])
            self.instantiated_enemies.append(
                factory.create_enemy(UpMovement()) if factory is not None else None
            )

    def _enemies(self) -> list[Enemy]:
        return [enemy for enemy in self.instantiated_enemies if enemy is not None]

    def wave_is_running(self) -> bool:
        """Whether any enemy of the wave is still alive."""
        return any(enemy.health_points > 0 for enemy in self._enemies())

    def enemy_slayed(self, enemy: Enemy) -> None:
        """Count a kill and collect its revenue."""
        self.slayed_enemies += 1
        self.gold_won += enemy.revenue
        enemy.enemy_spawned = False

    def enemy_went_through(self, enemy: Enemy) -> None:
        """Count an enemy that reached the end of the path."""
        enemy.enemy_spawned = False
        self.enemies_through_wave += 1

    def enemy_erased(self, enemy: Enemy) -> None:
        """Drop the enemy, and any empty slots, from the wave."""
        self.instantiated_enemies = [
            other for other in self._enemies() if other is not enemy
        ]

    def wave_end(self) -> WaveResults:
        """Record the wave's outcome in the user data and return it."""
        results = WaveResults(
            wave_won=self.victory,
            gold_collected=self.gold_won,
            seconds_elapsed=self.seconds_elapsed,
            enemies_slayed=self.slayed_enemies,
            enemies_through=self.enemies_through_wave,
        )
        self.user_data.waves_outcomes.append(results)
        return results