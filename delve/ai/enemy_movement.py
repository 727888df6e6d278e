"""
Enemy Movement System - Movement strategies for enemies
Each enemy owns one strategy and delegates its per-frame motion to it.
"""

from abc import ABC, abstractmethod
from typing import Dict, Type

from config import WIDTH


class MovementStrategy(ABC):
    """Base class for enemy movement strategies"""

    def __init__(self, name: str):
        self.name = name

    @abstractmethod
    def move(self, enemy, platforms) -> None:
        """Execute movement strategy for one frame"""


class PatrolStrategy(MovementStrategy):
    """Constant-speed horizontal patrol - for Skeleton

    Gravity pulls the enemy down onto platforms; any side contact with a
    platform turns it around, and so does either world edge. There is no
    edge detection, so an enemy standing half off a ledge walks off it.
    """

    def __init__(self, world_width=WIDTH):
        super().__init__("patrol")
        self.world_width = world_width

    def move(self, enemy, platforms) -> None:
        physics = enemy.physics
        physics.apply_gravity()

        # Every overlapping platform flips the direction once. Overlap is not
        # pushed out, so an enemy wedged in a platform keeps flipping.
        for _ in physics.move_horizontal(platforms, push_out=False):
            enemy.vx = -enemy.vx

        # Land only; enemies never move upwards on their own
        physics.move_vertical(platforms, stop_upward=False)

        edge = physics.at_world_edge(self.world_width)
        if edge < 0:
            enemy.vx = abs(enemy.vx)
        elif edge > 0:
            enemy.vx = -abs(enemy.vx)
        physics.clamp_to_world(self.world_width)


class MovementStrategyFactory:
    """Looks up strategies by name"""

    _strategies: Dict[str, Type[MovementStrategy]] = {
        'patrol': PatrolStrategy,
    }

    @classmethod
    def create_strategy(cls, name: str) -> MovementStrategy:
        """Create a movement strategy by name"""
        try:
            return cls._strategies[name]()
        except KeyError:
            raise ValueError(f"Unknown movement strategy: {name}") from None

    @classmethod
    def register_strategy(cls, name: str, strategy_cls: Type[MovementStrategy]) -> None:
        """Register a new movement strategy"""
        cls._strategies[name] = strategy_cls
