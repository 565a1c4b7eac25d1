"""Player state: gold, score, tower prices and the outcome of each wave."""

from __future__ import annotations

from dataclasses import dataclass, field

TOWER_BASE_PRICES = (120, 320, 800)
STARTING_GOLD = 120
PRICE_INCREASE_PER_PURCHASE = 0.1


@dataclass
class WaveResults:
    """Summary of a finished wave."""

    wave_won: bool
    gold_collected: int
    seconds_elapsed: int
    enemies_slayed: int
    enemies_through: int


@dataclass
class UserData:
    """Gold, score and tower purchases of the player."""

    current_gold: int = STARTING_GOLD
    spent_gold: int = 0
    total_gold: int = STARTING_GOLD
    through_enemies: int = 0
    score: int = 0
    current_level: int = 1
    waves_outcomes: list[WaveResults] = field(default_factory=list)
    towers_base_price: list[int] = field(
        default_factory=lambda: list(TOWER_BASE_PRICES)
    )
    towers_actual_prices: list[int] = field(
        default_factory=lambda: list(TOWER_BASE_PRICES)
    )
    towers_bought: list[int] = field(default_factory=lambda: [0, 0, 0])

    def refresh_prices(self) -> None:
        """Raise each price by a tenth of its base for every tower bought."""
        self.towers_actual_prices = [
            int(base + base * bought * PRICE_INCREASE_PER_PURCHASE)
            for base, bought in zip(self.towers_base_price, self.towers_bought)
        ]

    def win_gold(self, reward: int) -> None:
        """Add gold to the purse and to the running total."""
        self.current_gold += reward
        self.total_gold += reward

    def buy_tower(self, tower_level: int) -> None:
        """Pay for a tower of the given level and update prices."""
        if not 0 <= tower_level < len(self.towers_actual_prices):
            raise IndexError(f"no tower price for level {tower_level}")
        price = self.towers_actual_prices[tower_level]
        self.current_gold -= price
        self.spent_gold += price
        self.towers_bought[tower_level] += 1
        self.refresh_prices()

    def win_score(self, reward: int) -> None:
        """Add to the score."""
        self.score += reward