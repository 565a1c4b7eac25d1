"""Factories that spawn enemies at a fixed position."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .enemies import Boss, Enemy, Flash, Tank
from .movements import MovementStrategy


class EnemyFactory:
    """Creates basic enemies at (x, y)."""

    enemy_class: type[Enemy] = Enemy

    def __init__(self, x: float, y: float) -> None:
        self.x = float(x)
        self.y = float(y)

    def create_enemy(self, strategy: Optional[MovementStrategy]) -> Enemy:
        """Return a new enemy at the factory's position."""
        return self.enemy_class(strategy, self.x, self.y)


class FlashFactory(EnemyFactory):
    """Creates Flash enemies."""

    enemy_class = Flash

    def create_enemy(self, strategy: Optional[MovementStrategy]) -> Enemy:
        """Return a new Flash at the factory's position."""
        return Flash(strategy, self.x, self.y)


class TankFactory(EnemyFactory):
    """Creates Tank enemies."""

    enemy_class = Tank

    def create_enemy(self, strategy: Optional[MovementStrategy]) -> Enemy:
        """Return a new Tank at the factory's position."""
        return Tank(strategy, self.x, self.y)


class BossFactory(EnemyFactory):
    """Creates Boss enemies."""

    enemy_class = Boss

    def create_enemy(self, strategy: Optional[MovementStrategy]) -> Enemy:
        """Return a new Boss at the factory's position."""
        return Boss(strategy, self.x, self.y)


@dataclass
class EnemyFactories:
    """One factory for each enemy type."""

    basic_enemy_factory: EnemyFactory
    flash_enemy_factory: FlashFactory
    tank_enemy_factory: TankFactory
    boss_factory: BossFactory

    @classmethod
    def at_position(cls, x: float, y: float) -> EnemyFactories:
        """Build all four factories at the same spawn point."""
        return cls(
            EnemyFactory(x, y),
            FlashFactory(x, y),
            TankFactory(x, y),
            BossFactory(x, y),
        )

    def for_type(self, type_id: int) -> Optional[EnemyFactory]:
        """Return the factory for an enemy type id, or None if unknown."""
        return {
            0: self.basic_enemy_factory,
            1: self.flash_enemy_factory,
            2: self.tank_enemy_factory,
            3: self.boss_factory,
        }.get(type_id)