"""
Physics Component - Shared gravity and platform collision for all entities

Movement is integrated one axis at a time: horizontal displacement and its
collisions are resolved before vertical displacement and its collisions,
so a diagonal move can never tunnel through a platform corner.
"""

from config import GRAVITY, WIDTH
from ...core.geometry import overlaps


class PhysicsComponent:
    """Handles gravity and push-out collision against a platform list"""

    def __init__(self, entity, gravity=GRAVITY):
        self.entity = entity
        self.gravity = gravity

    def apply_gravity(self):
        """Accelerate downwards; there is no terminal velocity."""
        self.entity.vy += self.gravity

    def move_horizontal(self, platforms, push_out=True):
        """Apply vx and resolve overlaps. Returns the platforms that were hit.

        With push_out the entity is snapped flush against each overlapping
        platform in list order (the last one wins). Without it the entity is
        left where it is and the caller decides how to react.
        """
        e = self.entity
        e.x += e.vx
        hits = []
        for p in platforms:
            if overlaps(e, p):
                hits.append(p)
                if not push_out:
                    continue
                if e.vx > 0:
                    # Moving right, hit left side of platform
                    e.x = p.x - e.w
                elif e.vx < 0:
                    # Moving left, hit right side of platform
                    e.x = p.x + p.w
        return hits

    def move_vertical(self, platforms, stop_upward=True):
        """Apply vy and resolve overlaps. Returns the platforms that were hit.

        Landing snaps the bottom edge to the platform top, zeroes vy and
        marks the entity grounded; with stop_upward a head bump snaps the
        top edge to the platform bottom. Either correction zeroes vy, so
        later overlapping platforms in the list leave the entity alone.
        """
        e = self.entity
        if hasattr(e, 'on_ground'):
            e.on_ground = False

        e.y += e.vy
        hits = []
        for p in platforms:
            if overlaps(e, p):
                hits.append(p)
                if e.vy > 0:
                    # Moving down, land on top of platform
                    e.y = p.y - e.h
                    e.vy = 0
                    if hasattr(e, 'on_ground'):
                        e.on_ground = True
                elif e.vy < 0 and stop_upward:
                    # Moving up, hit bottom of platform
                    e.y = p.y + p.h
                    e.vy = 0
        return hits

    def clamp_to_world(self, width=WIDTH):
        """Keep the entity horizontally inside the world."""
        e = self.entity
        if e.x < 0:
            e.x = 0
        elif e.x > width - e.w:
            e.x = width - e.w

    def at_world_edge(self, width=WIDTH):
        """Return -1 at the left bound, 1 at the right bound, else 0."""
        e = self.entity
        if e.x <= 0:
            return -1
        if e.x >= width - e.w:
            return 1
        return 0

