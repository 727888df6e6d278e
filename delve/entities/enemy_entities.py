import logging

from config import ENEMY_W, ENEMY_H, ENEMY_PATROL_SPEED
from .entity_common import Entity
from .components.physics_component import PhysicsComponent
from ..ai.enemy_movement import MovementStrategyFactory

logger = logging.getLogger(__name__)


class Enemy(Entity):
    """Base enemy: an entity with a movement strategy and an alive flag.

    An enemy is removed from the level roster once `alive` is False; it is
    never deleted from inside another entity's update.
    """

    def __init__(self, x, y, width, height, strategy='patrol'):
        super().__init__(x, y, width, height)
        self.alive = True
        self.physics = PhysicsComponent(self)
        self.movement_strategy = MovementStrategyFactory.create_strategy(strategy)

    @property
    def facing(self):
        return 1 if self.vx > 0 else -1

    def update(self, platforms):
        if not self.alive:
            return
        self.movement_strategy.move(self, platforms)

    def kill(self):
        if self.alive:
            logger.debug("%s killed at (%.1f, %.1f)", self.__class__.__name__, self.x, self.y)
        self.alive = False


class Skeleton(Enemy):
    """Patrolling skeleton; starts walking left."""
    sprite_key = 'SKELETON'

    def __init__(self, x, y):
        super().__init__(x, y, ENEMY_W, ENEMY_H, strategy='patrol')
        self.vx = -float(ENEMY_PATROL_SPEED)
