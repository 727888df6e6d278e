"""
Axis-aligned rectangle geometry used by every collision query in the game.

Coordinate System:
- Origin: Top-left corner of the logical play area.
- X-axis: Increases from left to right (0 to WIDTH).
- Y-axis: Increases from top to bottom (0 to HEIGHT).

`overlaps` is duck-typed: anything exposing x, y, w, h (platforms, entities,
hitboxes) can be tested against anything else.
"""
from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Rect:
    """Immutable rectangle given by its top-left corner and size."""
    x: float
    y: float
    w: float
    h: float

    def __post_init__(self):
        if self.w <= 0 or self.h <= 0:
            raise ValueError(f"Rect size must be positive, got {self.w}x{self.h}")

    @property
    def left(self):
        return self.x

    @property
    def right(self):
        return self.x + self.w

    @property
    def top(self):
        return self.y

    @property
    def bottom(self):
        return self.y + self.h

    @property
    def centerx(self):
        return self.x + self.w / 2

    def move(self, dx, dy) -> "Rect":
        return replace(self, x=self.x + dx, y=self.y + dy)

    def overlaps(self, other) -> bool:
        return overlaps(self, other)


def overlaps(a, b) -> bool:
    """Return True if the two boxes overlap strictly on both axes.

    Boxes that only share an edge do not overlap.
    """
    return (a.x < b.x + b.w and
            a.x + a.w > b.x and
            a.y < b.y + b.h and
            a.y + a.h > b.y)


def clamp_rect(rect: Rect, width: float, height: float) -> Rect:
    """Shift `rect` so it lies inside [0, width] x [0, height].

    A rectangle larger than the area on some axis is shrunk to fit it.
    """
    w = min(rect.w, width)
    h = min(rect.h, height)
    x = min(max(rect.x, 0), width - w)
    y = min(max(rect.y, 0), height - h)
    if (x, y, w, h) == (rect.x, rect.y, rect.w, rect.h):
        return rect
    return Rect(x, y, w, h)
