"""Movement strategies that step an enemy toward its next checkpoint."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum
from typing import Protocol, Sequence


class MovementStatus(IntEnum):
    """Outcome of one movement step."""

    NONE = -1
    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3
    ARRIVED = 5


class _Movable(Protocol):
    x: float
    y: float
    speed: float
    current_following_checkpoint: int

    def shift_x(self, dx: float) -> None: ...

    def shift_y(self, dy: float) -> None: ...


Checkpoint = Sequence[int]


class MovementStrategy(ABC):
    """Moves an enemy one step along a single axis toward a checkpoint."""

    @abstractmethod
    def move(self, enemy: _Movable, checkpoint: Checkpoint) -> MovementStatus:
        """Advance the enemy and report the direction taken."""


class UpMovement(MovementStrategy):
    """Increase the enemy's y coordinate."""

    def move(self, enemy: _Movable, checkpoint: Checkpoint) -> MovementStatus:
        if enemy.y + enemy.speed > checkpoint[1]:
            enemy.speed = checkpoint[1] - enemy.y
            enemy.current_following_checkpoint += 1
        enemy.shift_y(enemy.speed)
        return MovementStatus.UP


class DownMovement(MovementStrategy):
    """Decrease the enemy's y coordinate."""

    def move(self, enemy: _Movable, checkpoint: Checkpoint) -> MovementStatus:
        if enemy.y - enemy.speed < checkpoint[1]:
            enemy.speed = abs(checkpoint[1] - enemy.y)
            enemy.current_following_checkpoint += 1
        enemy.shift_y(-enemy.speed)
        return MovementStatus.DOWN


class LeftMovement(MovementStrategy):
    """Decrease the enemy's x coordinate."""

    def move(self, enemy: _Movable, checkpoint: Checkpoint) -> MovementStatus:
        if enemy.x - enemy.speed < checkpoint[0]:
            enemy.speed = abs(checkpoint[0] - enemy.x)
            enemy.current_following_checkpoint += 1
        enemy.shift_x(-enemy.speed)
        return MovementStatus.LEFT


class RightMovement(MovementStrategy):
    """Increase the enemy's x coordinate."""

    def move(self, enemy: _Movable, checkpoint: Checkpoint) -> MovementStatus:
        if enemy.x + enemy.speed > checkpoint[0]:
            enemy.speed = checkpoint[0] - enemy.x
            enemy.current_following_checkpoint += 1
        enemy.shift_x(enemy.speed)
        return MovementStatus.RIGHT