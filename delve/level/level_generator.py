"""Procedural level layout generator.

Every level is built the same way:
- A full-width floor near the bottom of the play area
- Three tiers above it, each with 1 or 2 platforms of random width and
  position; each tier platform has a 60% chance of a skeleton on top
- A door near the top at a random x, standing on a small support platform
- The player spawn at a fixed point bottom-left
- `level_num` extra skeletons scattered along the floor

The generator draws from an injected randomness source in a fixed order, so
a seeded `random.Random` always reproduces the same level:
tier platform count, then per platform width, x and spawn roll; then the
exit x; then one x per floor skeleton.

The layout is not checked for solvability. Geometry that would leave the
world (the exit support platform can, near the right edge) is clamped back
into bounds.
"""

from __future__ import annotations

import logging
import math
import random
from typing import List, Optional

from ..core.geometry import Rect, clamp_rect
from ..entities.entities import Skeleton
from .level_data import GeneratorConfig, LevelLayout

logger = logging.getLogger(__name__)


def _clamped(rect: Rect, config: GeneratorConfig, what: str) -> Rect:
    fixed = clamp_rect(rect, config.world_width, config.world_height)
    if fixed is not rect:
        logger.debug("Clamped %s from %s to %s", what, rect, fixed)
    return fixed


def _tier_platforms(tier: int, rng, config: GeneratorConfig, enemies: List[Skeleton]) -> List[Rect]:
    """Generate the platforms of one tier, spawning skeletons onto them."""
    y = config.tier_y(tier)
    count = 1 + math.floor(rng.random() * config.tier_max_platforms)
    platforms = []
    for _ in range(count):
        w = config.platform_min_w + rng.random() * config.platform_w_range
        x = rng.random() * (config.world_width - w)
        platform = _clamped(Rect(math.floor(x), y, math.floor(w), config.platform_h), config,
                            f"tier {tier} platform")
        platforms.append(platform)

        # A roll above 1 - chance spawns, e.g. > 0.4 for a 60% chance
        if rng.random() > 1.0 - config.enemy_spawn_chance:
            ex = platform.centerx - config.enemy_w / 2
            enemies.append(Skeleton(ex, platform.top - config.enemy_h))
    return platforms


def generate_level(level_num: int, rng: Optional[random.Random] = None,
                   config: Optional[GeneratorConfig] = None) -> LevelLayout:
    """
    Build the layout for one level.

    Args:
        level_num: 1-based level number; also the number of floor skeletons
        rng: Randomness source exposing random() -> float in [0, 1)
        config: Layout settings, defaults to GeneratorConfig()

    Returns:
        LevelLayout: platforms (floor first, exit support last), enemies,
        door and player spawn
    """
    if level_num < 1:
        raise ValueError(f"level_num must be >= 1, got {level_num}")
    rng = rng or random.Random()
    config = config or GeneratorConfig()

    platforms = [Rect(0, config.floor_y, config.world_width, config.floor_h)]
    enemies: List[Skeleton] = []

    for tier in range(1, config.tier_count + 1):
        platforms.extend(_tier_platforms(tier, rng, config, enemies))
    tier_enemy_count = len(enemies)

    exit_x = config.exit_min_x + rng.random() * config.exit_x_range
    exit_y = config.exit_y
    platforms.append(_clamped(
        Rect(exit_x + config.exit_platform_offset_x, exit_y + config.door_h,
             config.exit_platform_w, config.platform_h),
        config, "exit platform"))
    door = _clamped(Rect(exit_x, exit_y, config.door_w, config.door_h), config, "door")

    floor_enemy_y = config.floor_y - config.enemy_h
    for _ in range(level_num):
        ex = config.floor_enemy_min_x + rng.random() * config.floor_enemy_x_range
        ex = min(max(ex, 0), config.world_width - config.enemy_w)
        enemies.append(Skeleton(ex, floor_enemy_y))

    layout = LevelLayout(
        level_num=level_num,
        platforms=tuple(platforms),
        enemies=enemies,
        door=door,
        spawn=config.player_spawn,
        tier_enemy_count=tier_enemy_count,
    )
    logger.info("Generated level %d: %d platforms, %d enemies (%d on tiers), door at x=%.1f",
                level_num, len(layout.platforms), len(enemies), tier_enemy_count, door.x)
    return layout
