import pytest

from config import FLOOR_Y, WIDTH, ENEMY_PATROL_SPEED
from delve.ai.enemy_movement import MovementStrategy, MovementStrategyFactory, PatrolStrategy
from delve.core.geometry import Rect
from delve.entities.enemy_entities import Skeleton

GROUND_Y = FLOOR_Y - 16


def test_skeleton_starts_walking_left():
    skeleton = Skeleton(100, GROUND_Y)
    assert skeleton.vx == -ENEMY_PATROL_SPEED
    assert skeleton.alive
    assert isinstance(skeleton.movement_strategy, PatrolStrategy)


def test_patrol_walks_along_floor(floor):
    skeleton = Skeleton(100, GROUND_Y)
    for _ in range(10):
        skeleton.update([floor])
    assert skeleton.x == 90
    assert skeleton.y == GROUND_Y
    assert skeleton.vy == 0


def test_skeleton_falls_and_lands(floor):
    skeleton = Skeleton(150, 100)
    for _ in range(40):
        skeleton.update([floor])
    assert skeleton.y == GROUND_Y
    assert skeleton.vy == 0


def test_side_contact_with_platform_reverses(floor):
    wall = Rect(90, FLOOR_Y - 50, 10, 50)
    skeleton = Skeleton(100.5, GROUND_Y)
    skeleton.update([floor, wall])
    assert skeleton.vx == ENEMY_PATROL_SPEED
    skeleton.update([floor, wall])
    assert skeleton.x == pytest.approx(100.5)
    assert skeleton.vx == ENEMY_PATROL_SPEED


def test_each_overlapping_platform_flips_direction(floor):
    # Wedged into two overlapping blocks the flips cancel out
    blocks = [Rect(90, FLOOR_Y - 50, 10, 50), Rect(92, FLOOR_Y - 40, 10, 40)]
    skeleton = Skeleton(100.5, GROUND_Y)
    skeleton.update([floor] + blocks)
    assert skeleton.vx == -ENEMY_PATROL_SPEED


def test_left_world_edge_turns_around(floor):
    skeleton = Skeleton(0.5, GROUND_Y)
    skeleton.update([floor])
    assert skeleton.vx == ENEMY_PATROL_SPEED
    assert skeleton.x == 0
    skeleton.update([floor])
    assert skeleton.x == 1


def test_right_world_edge_turns_around(floor):
    skeleton = Skeleton(WIDTH - 16.5, GROUND_Y)
    skeleton.vx = ENEMY_PATROL_SPEED
    skeleton.update([floor])
    assert skeleton.vx == -ENEMY_PATROL_SPEED
    assert skeleton.x == WIDTH - 16


def test_dead_skeleton_does_not_move(floor):
    skeleton = Skeleton(100, GROUND_Y)
    skeleton.kill()
    skeleton.update([floor])
    assert skeleton.x == 100
    assert not skeleton.alive


def test_unknown_strategy_raises():
    with pytest.raises(ValueError):
        MovementStrategyFactory.create_strategy("teleport")


def test_registered_strategy_is_used():
    class Standing(MovementStrategy):
        def __init__(self):
            super().__init__("standing")

        def move(self, enemy, platforms):
            enemy.vx = 0

    MovementStrategyFactory.register_strategy("standing", Standing)
    try:
        assert MovementStrategyFactory.create_strategy("standing").name == "standing"
    finally:
        MovementStrategyFactory._strategies.pop("standing")
