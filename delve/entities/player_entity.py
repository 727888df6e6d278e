import logging
from dataclasses import dataclass, field
from typing import List

from config import (
    PLAYER_W, PLAYER_H, PLAYER_SPEED, PLAYER_JUMP_V,
    WIDTH, FALL_LIMIT_Y, RESPAWN_POINT,
)
from .entity_common import Entity, Hitbox
from .components.physics_component import PhysicsComponent
from .components.combat_component import CombatComponent

logger = logging.getLogger(__name__)


@dataclass
class PlayerFrameEvents:
    """What happened to the player this frame that the session must score."""
    kills: List = field(default_factory=list)
    fell: bool = False


class Player(Entity):
    sprite_key = 'DWARF_IDLE'

    def __init__(self, x, y):
        super().__init__(x, y, PLAYER_W, PLAYER_H)
        self.facing = 1
        self.on_ground = False
        self.physics = PhysicsComponent(self)
        self.combat = CombatComponent(self)

    @property
    def facing_right(self):
        return self.facing > 0

    @property
    def invulnerable(self):
        return self.combat.is_invulnerable()

    @property
    def is_attacking(self):
        return self.combat.state.attacking

    def update(self, inputs, platforms, enemies=()):
        """Run one frame: timers, attack, input, physics, fall check.

        Enemies hit by a new swing are marked dead here and reported in the
        returned events; score and lives are the caller's business.
        """
        events = PlayerFrameEvents()

        if self.combat.update(inputs.attack):
            events.kills = self.resolve_attack(enemies)

        self.input(inputs)

        self.physics.apply_gravity()
        self.physics.move_horizontal(platforms)
        self.physics.move_vertical(platforms)
        self.physics.clamp_to_world(WIDTH)

        if self.y > FALL_LIMIT_Y:
            logger.debug("Player fell out of the world at x=%.1f", self.x)
            events.fell = True
        return events

    def input(self, inputs):
        # No acceleration curve: velocity is set straight from the keys
        if inputs.left:
            self.vx = -PLAYER_SPEED
            self.facing = -1
        elif inputs.right:
            self.vx = PLAYER_SPEED
            self.facing = 1
        else:
            self.vx = 0

        if inputs.jump and self.on_ground:
            self.vy = PLAYER_JUMP_V
            self.on_ground = False

    def resolve_attack(self, enemies):
        """Kill every alive enemy inside the forward hitbox. Returns the kills."""
        hitbox = Hitbox.ahead_of(self)
        kills = hitbox.query(enemies)
        for enemy in kills:
            enemy.kill()
        return kills

    def hurt(self):
        """Enemy contact: invulnerability window plus bounce and knockback."""
        return self.combat.take_hit()

    def respawn(self, point=RESPAWN_POINT):
        """Move to the recovery point and stop vertical motion; vx is left as is."""
        self.x, self.y = float(point[0]), float(point[1])
        self.vy = 0
