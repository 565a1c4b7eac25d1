"""Towers that attack enemies within range."""

from __future__ import annotations

from dataclasses import dataclass

from .enemies import Enemy


@dataclass
class Tower:
    """A tower at a fixed grid position."""

    x: int
    y: int
    damage: int = 20
    level: int = 0
    shooting_speed: float = 1.0
    perimeter: float = 10.5
    special_charge: int = 5
    hit_counter: int = 0
    special_ready: bool = False

    def attack(self, enemy: Enemy) -> None:
        """Hit the enemy and charge the special attack."""
        enemy.take_damage(self.damage)
        self.hit_counter += 1
        if self.hit_counter >= self.special_charge:
            self.special_ready = True

    def special_attack(self, enemy: Enemy) -> None:
        """Hit the enemy for double damage and reset the charge."""
        enemy.take_damage(self.damage * 2)
        self.special_ready = False
        self.hit_counter = 0

    def is_in_range(self, enemy: Enemy) -> bool:
        """Whether the enemy lies within the tower's square perimeter."""
        return (
            abs(enemy.x - float(self.x)) <= self.perimeter
            and abs(enemy.y - float(self.y)) <= self.perimeter
        )

    def buy(self) -> None:
        """Raise the level from unbought to the first level."""
        self.level += 1

    def upgrade(self) -> None:
        """Raise the level and improve the tower's stats."""
        self.level += 1
        self.damage += 10
        self.shooting_speed += 0.5
        self.perimeter += 1
        self.special_charge -= 1
        self.hit_counter = 0
        self.special_ready = False