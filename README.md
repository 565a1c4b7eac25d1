# towerdefense

The rules engine behind a tower defense level. It holds the game state and
applies the rules:

- enemies that walk from checkpoint to checkpoint,
- waves of enemies spawned in a fixed order,
- towers that are bought, upgraded and shoot at enemies in range,
- the player's gold, score and wave outcomes.

It has no dependencies outside the standard library.

## What it does not do

The package has no rendering, no input handling, no clock and no command to
run. A front end draws the map, decides when enemies spawn and move, and calls
into the package each tick. Nothing is saved between runs. The player data
lives only as long as the session. Progress messages go to the standard
`logging` module under the `towerdefense.session` logger.

## Level files

A level is a JSON document. Checkpoints and tower spots are keyed by index
from `"0"`, and each has an `x` and a `z` coordinate. Waves are keyed
`wave_1`, `wave_2`, and so on. Each wave's spawn order is keyed from `"1"`
and has `spawn_amount` entries.

```json
{
  "number_of_checkpoints": 3,
  "number_of_towers": 1,
  "number_of_enemies": 3,
  "number_of_waves": 1,
  "checkpoints_coordinates": {
    "0": {"x": 0, "z": 0},
    "1": {"x": 0, "z": 10},
    "2": {"x": 10, "z": 10}
  },
  "towers_coordinates": {
    "0": {"x": 5, "z": 5}
  },
  "wave_1": {
    "spawn_amount": 3,
    "spawn_interval": 2,
    "spawn_order": {"1": 0, "2": 1, "3": 2}
  }
}
```

A missing key raises `KeyError`. Each entry in a spawn order is an enemy type:

| Type | Class   | Health | Speed | Revenue |
|------|---------|--------|-------|---------|
| 0    | `Enemy` | 100    | 2.0   | 70      |
| 1    | `Flash` | 110    | 7.0   | 77      |
| 2    | `Tank`  | 400    | 1.5   | 91      |
| 3    | `Boss`  | 750    | 2.5   | 350     |

An unknown type leaves an empty slot (`None`) in the wave. All enemies spawn
on the first checkpoint. From there they follow the remaining checkpoints in
order. They move along the x axis first, then along the y axis.

## Playing a level

`towerdefense.session.GameSession` is the single object a front end talks to.

```python
from towerdefense.session import GameSession

session = GameSession()
checkpoints, towers, waves = session.load_level("level_1.json")

enemy_count, spawn_interval = session.start_wave()
enemy = session.enemy(0)
session.enemy_spawned(enemy)

tower = session.tower(0)
price, affordable = session.tower_buy_status(tower)
if affordable:
    session.buy_tower(tower)

for _ in range(100):
    if not session.wave_is_running():
        break
    status = session.enemy_move(enemy, 1.0)
    target = session.enemy_observer(tower)
    if target is not None:
        session.attack_close_enemy(tower, target)
    if enemy.health_points <= 0:
        session.enemy_slayed(enemy)

results = session.wave_win(seconds_elapsed=30)
next_wave = session.advance_wave()   # 0 once the last wave is reached
session.level_end()
```

`session.gold()`, `session.score()` and `session.through_enemies()` report
the player's standing at any time. Other calls:

- `enemy_move` returns a `MovementStatus`: `UP`, `RIGHT`, `DOWN`, `LEFT`, or
  `ARRIVED` once the enemy has passed its last checkpoint.
- `enemy_slayed` adds the enemy's revenue to the gold and the score.
  `enemy_went_through` counts an enemy that reached the end.
- `upgrade_tower` pays for and upgrades a tower below level 3. It returns the
  level, shooting speed and special charge.
- `attack_close_enemy` returns `True` for a special attack, `False` for a
  normal one and `None` when there is no enemy.
- `wave_win`, `wave_lost` and `wave_end` return the `WaveResults` of the wave
  and append them to the player data.

Calls that need a level or a wave raise `RuntimeError` when there is none.
An out-of-range enemy or tower index raises `IndexError`.

## Building blocks

The pieces that `GameSession` uses can also be used on their own:

- `towerdefense.level.LevelCore` reads a level with `LevelCore.from_file(path)`
  or `LevelCore.from_dict(data)`. Each wave's description is a `WaveInfo`.
- `towerdefense.wave.LevelWave` holds the enemies of one wave. It counts the
  enemies slain and those that got through, and tracks the gold won.
- `towerdefense.user_data.UserData` holds the player's gold (120 to start),
  score and tower prices (120, 320 and 800). Each purchase at a level raises
  that level's price by 10% of its base price. `WaveResults` records the
  outcome of one wave.
- `towerdefense.enemies` provides `Enemy`, `Flash`, `Tank` and `Boss`.
- `towerdefense.factories` provides one factory per enemy type.
  `EnemyFactories` groups the four, with `at_position(x, y)` and
  `for_type(type_id)`.
- `towerdefense.movements` provides the four movement strategies
  (`UpMovement`, `DownMovement`, `LeftMovement`, `RightMovement`) and
  `MovementStatus`.
- `towerdefense.tower.Tower` deals 20 damage per hit in a square range of
  10.5 around it. After 5 hits its special attack becomes ready, and it deals
  double damage. Each upgrade adds 10 damage, 0.5 shooting speed and 1 range,
  and needs one hit fewer to charge.
- `towerdefense.manager.GameManager` wires these objects together for a
  level.

## Tests

The test suite runs under pytest. Install the `test` extra to get it:

```
pip install -e ".[test]"
pytest
```