"""
Combat Component - Attack timing and post-damage invulnerability for the player

All combat timers live in one `CombatState` record and are advanced by a
single transition function, `CombatComponent.update`, once per frame.
"""

import logging
from dataclasses import dataclass

from config import (
    ATTACK_DURATION, ATTACK_COOLDOWN, INVULNERABLE_FRAMES,
    HURT_BOUNCE_VY, HURT_KNOCKBACK_VX,
)

logger = logging.getLogger(__name__)


@dataclass
class CombatState:
    """Orthogonal combat sub-states and their counters.

    attacking / attack_timer: frames of swing left (counts down).
    attack_cooldown: frames until another swing may start (counts down).
    invulnerable / invulnerable_elapsed: frames since the last hit (counts up).
    """
    attacking: bool = False
    attack_timer: int = 0
    attack_cooldown: int = 0
    invulnerable: bool = False
    invulnerable_elapsed: int = 0


class CombatComponent:
    """Handles attack activation and damage response for an entity"""

    def __init__(self, entity, attack_duration=ATTACK_DURATION,
                 attack_cooldown=ATTACK_COOLDOWN, invulnerable_frames=INVULNERABLE_FRAMES):
        self.entity = entity
        self.state = CombatState()
        self.attack_duration = attack_duration
        self.attack_cooldown = attack_cooldown
        self.invulnerable_frames = invulnerable_frames
        self._attack_held = False

    def update(self, attack_down: bool) -> bool:
        """Advance every combat timer by one frame.

        Order: invulnerability window, cooldown, attack activation, swing
        timer. A swing starts only on the frame the attack button goes down,
        with no cooldown and no swing in progress.

        Returns:
            True on the frame a new attack starts; the caller resolves the
            hit exactly once for that activation.
        """
        s = self.state

        if s.invulnerable:
            s.invulnerable_elapsed += 1
            if s.invulnerable_elapsed > self.invulnerable_frames:
                s.invulnerable = False
                s.invulnerable_elapsed = 0

        if s.attack_cooldown > 0:
            s.attack_cooldown -= 1

        pressed = attack_down and not self._attack_held
        self._attack_held = attack_down

        started = False
        if pressed and s.attack_cooldown <= 0 and not s.attacking:
            s.attacking = True
            s.attack_timer = self.attack_duration
            s.attack_cooldown = self.attack_cooldown
            started = True

        if s.attacking:
            s.attack_timer -= 1
            if s.attack_timer <= 0:
                s.attacking = False
                s.attack_timer = 0

        return started

    def take_hit(self, bounce_vy=HURT_BOUNCE_VY, knockback_vx=HURT_KNOCKBACK_VX):
        """Start the invulnerability window and knock the entity back.

        The knockback pushes away from the facing direction. Returns False
        (and does nothing) while already invulnerable.
        """
        s = self.state
        if s.invulnerable:
            return False
        s.invulnerable = True
        s.invulnerable_elapsed = 0
        self.entity.vy = bounce_vy
        self.entity.vx = -knockback_vx if self.entity.facing > 0 else knockback_vx
        logger.debug("%s hurt, knockback vx=%s", self.entity.__class__.__name__, self.entity.vx)
        return True

    def is_invulnerable(self):
        return self.state.invulnerable
