import pytest

from towerdefense.enemies import Enemy
from towerdefense.tower import Tower


def test_attack_deals_damage_and_counts():
    tower = Tower(0, 0)
    enemy = Enemy()
    start = enemy.health_points
    tower.attack(enemy)
    assert enemy.health_points == start - tower.damage
    assert tower.hit_counter == 1
    assert tower.special_ready is False


def test_special_ready_after_charge():
    tower = Tower(0, 0)
    enemy = Enemy()
    for _ in range(tower.special_charge - 1):
        tower.attack(enemy)
    assert tower.special_ready is False
    tower.attack(enemy)
    assert tower.special_ready is True


def test_special_attack_double_damage_and_reset():
    tower = Tower(0, 0)
    enemy = Enemy()
    tower.attack(enemy)
    before = enemy.health_points
    tower.special_attack(enemy)
    assert enemy.health_points == before - 2 * tower.damage
    assert tower.hit_counter == 0
    assert tower.special_ready is False


@pytest.mark.parametrize(
    "dx, dy, expected",
    [(0, 0, True), (1, 0, True), (0, -1, True), (1, 1, True),
     (1.01, 0, False), (0, -1.01, False)],
)
def test_is_in_range_square(dx, dy, expected):
    tower = Tower(10, 20)
    enemy = Enemy(None, 10 + dx * tower.perimeter, 20 + dy * tower.perimeter)
    assert tower.is_in_range(enemy) is expected


def test_buy_only_raises_level():
    tower = Tower(0, 0)
    reference = Tower(0, 0)
    tower.buy()
    assert tower.level == reference.level + 1
    assert tower.damage == reference.damage
    assert tower.perimeter == reference.perimeter


def test_upgrade_improves_stats_and_resets_charge():
    tower = Tower(0, 0)
    reference = Tower(0, 0)
    enemy = Enemy()
    for _ in range(tower.special_charge):
        tower.attack(enemy)
    assert tower.special_ready is True
    tower.upgrade()
    assert tower.level == reference.level + 1
    assert tower.damage > reference.damage
    assert tower.shooting_speed > reference.shooting_speed
    assert tower.perimeter > reference.perimeter
    assert tower.special_charge == reference.special_charge - 1
    assert tower.hit_counter == 0
    assert tower.special_ready is False


def test_upgrade_extends_range():
    tower = Tower(0, 0)
    enemy = Enemy(None, tower.perimeter + 0.5, 0)
    assert tower.is_in_range(enemy) is False
    tower.upgrade()
    assert tower.is_in_range(enemy) is True