from config import ATTACK_HITBOX_W, ATTACK_HITBOX_H
from ..core.geometry import Rect


class Entity:
    """Position, velocity and a fixed-size bounding box.

    (x, y) is the top-left corner of the box. Only the entity's own update
    step moves it.
    """

    def __init__(self, x, y, w, h):
        self.x = float(x)
        self.y = float(y)
        self.w = w
        self.h = h
        self.vx = 0.0
        self.vy = 0.0

    @property
    def centerx(self):
        return self.x + self.w / 2

    def __repr__(self):
        return (f"{self.__class__.__name__}(x={self.x:.1f}, y={self.y:.1f}, "
                f"vx={self.vx:.1f}, vy={self.vy:.1f})")


class Hitbox:
    """A one-frame attack query box; never stored between frames."""

    def __init__(self, rect):
        self.rect = rect

    @classmethod
    def ahead_of(cls, owner, w=ATTACK_HITBOX_W, h=ATTACK_HITBOX_H):
        """Box one body-width ahead of `owner` in its facing direction, same y."""
        hit_x = owner.x + owner.w if owner.facing > 0 else owner.x - owner.w
        return cls(Rect(hit_x, owner.y, w, h))

    def query(self, targets):
        """Return the alive targets this box overlaps, in roster order."""
        return [t for t in targets if getattr(t, 'alive', True) and self.rect.overlaps(t)]
