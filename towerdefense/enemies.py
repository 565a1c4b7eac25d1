"""Enemies that walk a path of checkpoints."""

from __future__ import annotations

from typing import Optional, Sequence

from .movements import (
    DownMovement,
    LeftMovement,
    MovementStatus,
    MovementStrategy,
    RightMovement,
    UpMovement,
)


class Enemy:
    """A basic enemy; subclasses adjust its stats through class constants."""

    TYPE_ID = 0
    HP_PERCENT = 100.0
    SPEED_PERCENT = 100.0
    REVENUE_FACTOR = 1.0

    BASE_HEALTH = 100
    BASE_SPEED = 2.0
    BASE_REVENUE = 70

    def __init__(
        self,
        strategy: Optional[MovementStrategy] = None,
        x: float = 0.0,
        y: float = 0.0,
    ) -> None:
        self.strategy = strategy
        self.x = float(x)
        self.y = float(y)
        self.enemy_type_id = self.TYPE_ID
        self.enemy_spawned = False
        self.current_following_checkpoint = 1
        self.health_points = self.BASE_HEALTH
        self.speed = self.BASE_SPEED
        self.revenue = int(self.BASE_REVENUE * self.REVENUE_FACTOR)
        self.scale_hp(self.HP_PERCENT)
        self.init_speed(self.SPEED_PERCENT)

    def move(
        self, checkpoints: Sequence[Sequence[int]], time_multiplicator: float
    ) -> MovementStatus:
        """Take one step toward the current checkpoint, scaled by time."""
        usual_speed = self.speed
        self.speed = self.speed * time_multiplicator
        status = MovementStatus.NONE

        last = checkpoints[-1]
        if (self.x != last[0] and self.y != last[1]) or (
            self.current_following_checkpoint < len(checkpoints)
        ):
            self.change_direction(checkpoints[self.current_following_checkpoint])
        else:
            status = MovementStatus.ARRIVED

        if self.strategy is not None and status != MovementStatus.ARRIVED:
            status = self.strategy.move(
                self, checkpoints[self.current_following_checkpoint]
            )

        self.speed = usual_speed
        return status

    def take_damage(self, damage: int) -> None:
        """Subtract damage from the health points."""
        self.health_points -= damage

    def scale_hp(self, percent: float) -> None:
        """Scale health points to the given percentage, truncating."""
        self.health_points = int(self.health_points * (percent / 100.0))

    def init_speed(self, percent: float) -> None:
        """Scale the speed to the given percentage."""
        self.speed = self.speed * (percent / 100.0)

    def shift_x(self, dx: float) -> None:
        """Move along the x axis by dx."""
        self.x += dx

    def shift_y(self, dy: float) -> None:
        """Move along the y axis by dy."""
        self.y += dy

    def change_direction(self, checkpoint: Sequence[int]) -> None:
        """Pick the strategy that heads toward the checkpoint, x axis first."""
        if checkpoint[0] < self.x:
            self.strategy = LeftMovement()
        elif checkpoint[0] > self.x:
            self.strategy = RightMovement()
        elif checkpoint[1] > self.y:
            self.strategy = UpMovement()
        elif checkpoint[1] < self.y:
            self.strategy = DownMovement()


class Flash(Enemy):
    """A fast, slightly tougher enemy."""

    TYPE_ID = 1
    HP_PERCENT = 110.0
    SPEED_PERCENT = 350.0
    REVENUE_FACTOR = 1.1


class Tank(Enemy):
    """A slow, heavily armoured enemy."""

    TYPE_ID = 2
    HP_PERCENT = 400.0
    SPEED_PERCENT = 75.0
    REVENUE_FACTOR = 1.3


class Boss(Enemy):
    """A very tough enemy worth a large reward."""

    TYPE_ID = 3
    HP_PERCENT = 750.0
    SPEED_PERCENT = 125.0
    REVENUE_FACTOR = 5.0