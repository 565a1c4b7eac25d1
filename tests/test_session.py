import json

import pytest

from towerdefense.enemies import Boss, Enemy, Flash
from towerdefense.movements import MovementStatus
from towerdefense.session import GameSession
from towerdefense.user_data import STARTING_GOLD, TOWER_BASE_PRICES

LEVEL = {
    "number_of_checkpoints": 3,
    "number_of_towers": 1,
    "number_of_enemies": 3,
    "number_of_waves": 2,
    "checkpoints_coordinates": {
        "0": {"x": 0, "z": 0},
        "1": {"x": 0, "z": 10},
        "2": {"x": 10, "z": 10},
    },
    "towers_coordinates": {"0": {"x": 0, "z": 5}},
    "wave_1": {"spawn_amount": 2, "spawn_interval": 3, "spawn_order": {"1": 0, "2": 1}},
    "wave_2": {"spawn_amount": 1, "spawn_interval": 4, "spawn_order": {"1": 3}},
}


@pytest.fixture
def session(tmp_path):
    path = tmp_path / "level.json"
    path.write_text(json.dumps(LEVEL), encoding="utf-8")
    game = GameSession()
    game.load_level(path)
    return game


@pytest.fixture
def running(session):
    session.start_wave()
    return session


def test_load_level_returns_counts(tmp_path):
    path = tmp_path / "level.json"
    path.write_text(json.dumps(LEVEL), encoding="utf-8")
    assert GameSession().load_level(path) == (3, 1, 2)


def test_initial_player_state(session):
    assert session.gold() == STARTING_GOLD
    assert session.score() == 0
    assert session.through_enemies() == 0


def test_start_wave_returns_amount_and_interval(session):
    assert session.start_wave() == (2, 3)


def test_start_wave_without_level_raises():
    with pytest.raises(RuntimeError):
        GameSession().start_wave()


def test_enemies_follow_spawn_order(running):
    assert type(running.enemy(0)) is Enemy
    assert isinstance(running.enemy(1), Flash)
    with pytest.raises(IndexError):
        running.enemy(2)


def test_enemy_slayed_rewards_player(running):
    enemy = running.enemy(1)
    running.enemy_slayed(enemy)
    assert running.gold() == STARTING_GOLD + enemy.revenue
    assert running.score() == enemy.revenue
    assert running.manager.current_wave.slayed_enemies == 1
    assert enemy.enemy_spawned is False


def test_enemy_went_through_counts(running):
    enemy = running.enemy(0)
    running.enemy_spawned(enemy)
    running.enemy_went_through(enemy)
    assert running.through_enemies() == 1
    assert running.manager.current_wave.enemies_through_wave == 1
    assert enemy.enemy_spawned is False


def test_enemy_move_heads_to_next_checkpoint(running):
    enemy = running.enemy(0)
    speed = enemy.speed
    status = running.enemy_move(enemy, 1.0)
    assert status == MovementStatus.UP
    assert enemy.y == pytest.approx(speed)
    assert enemy.x == 0


def test_tower_lookup(session):
    tower = session.tower(0)
    assert (tower.x, tower.y) == (0, 5)
    with pytest.raises(IndexError):
        session.tower(1)


def test_buy_tower_and_buy_status(session):
    tower = session.tower(0)
    assert session.tower_buy_status(tower) == (TOWER_BASE_PRICES[0], True)
    assert session.buy_tower(tower) == 1
    assert session.gold() == STARTING_GOLD - TOWER_BASE_PRICES[0]
    price, affordable = session.tower_buy_status(tower)
    assert price == TOWER_BASE_PRICES[1]
    assert affordable is False


def test_upgrade_tower_reports_stats(session):
    tower = session.tower(0)
    session.buy_tower(tower)
    speed_before = tower.shooting_speed
    result = session.upgrade_tower(tower)
    assert result == (tower.level, tower.shooting_speed, tower.special_charge)
    assert tower.level == 2
    assert tower.shooting_speed > speed_before


def test_upgrade_tower_at_top_level_is_noop(session):
    tower = session.tower(0)
    tower.level = 3
    gold = session.gold()
    level, _, _ = session.upgrade_tower(tower)
    assert level == 3
    assert session.gold() == gold


def test_enemy_observer_needs_spawned_enemy(running):
    tower = running.tower(0)
    assert running.enemy_observer(tower) is None
    enemy = running.enemy(0)
    running.enemy_spawned(enemy)
    assert running.enemy_observer(tower) is enemy


def test_enemy_observer_without_wave(session):
    assert session.enemy_observer(session.tower(0)) is None


def test_attack_close_enemy(running):
    tower = running.tower(0)
    enemy = running.enemy(0)
    assert running.attack_close_enemy(tower, None) is None
    hp = enemy.health_points
    assert running.attack_close_enemy(tower, enemy) is False
    assert enemy.health_points == hp - tower.damage
    tower.special_ready = True
    hp = enemy.health_points
    assert running.attack_close_enemy(tower, enemy) is True
    assert enemy.health_points == hp - 2 * tower.damage
    assert tower.special_ready is False


def test_wave_is_running_until_all_dead(running):
    assert running.wave_is_running() is True
    for index in range(2):
        enemy = running.enemy(index)
        enemy.take_damage(enemy.health_points)
    assert running.wave_is_running() is False


def test_wave_win_records_outcome(running):
    results = running.wave_win(30)
    assert results.wave_won is True
    assert results.seconds_elapsed == 30
    assert running.manager.user_data.waves_outcomes[-1] == results
    with pytest.raises(RuntimeError):
        running.wave_is_running()


def test_wave_lost_records_defeat(running):
    results = running.wave_lost(12)
    assert results.wave_won is False
    assert results.seconds_elapsed == 12
    assert running.manager.current_wave is None


def test_advance_wave_stops_at_last(session):
    assert session.advance_wave() == 2
    assert session.start_wave() == (1, 4)
    assert isinstance(session.enemy(0), Boss)
    assert session.advance_wave() == 0


def test_level_end_releases_state(session):
    session.level_end()
    with pytest.raises(RuntimeError):
        session.gold()