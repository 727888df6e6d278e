"""Level layout data and generation settings."""

from dataclasses import dataclass, field
from typing import List, Tuple

import config
from ..core.geometry import Rect


@dataclass
class GeneratorConfig:
    """Configuration for procedural level layout."""
    world_width: int = config.WIDTH
    world_height: int = config.HEIGHT

    # Full-width floor
    floor_y: int = config.FLOOR_Y
    floor_h: int = config.FLOOR_H

    # Tiers are counted upward from the floor: tier i sits at floor_y - i * tier_spacing
    tier_count: int = config.TIER_COUNT
    tier_spacing: int = config.TIER_SPACING
    # Each tier holds 1..tier_max_platforms platforms
    tier_max_platforms: int = config.TIER_MAX_PLATFORMS
    platform_h: int = config.PLATFORM_H
    platform_min_w: int = config.PLATFORM_MIN_W
    platform_w_range: int = config.PLATFORM_W_RANGE
    # Chance that a tier platform gets a skeleton standing on it
    enemy_spawn_chance: float = config.ENEMY_SPAWN_CHANCE

    # Exit: door near the top with a small support platform under it
    exit_min_x: int = config.EXIT_MIN_X
    exit_x_range: int = config.EXIT_X_RANGE
    exit_y: int = config.EXIT_Y
    exit_platform_offset_x: int = config.EXIT_PLATFORM_OFFSET_X
    exit_platform_w: int = config.EXIT_PLATFORM_W
    door_w: int = config.DOOR_W
    door_h: int = config.DOOR_H

    player_spawn: Tuple[float, float] = config.PLAYER_SPAWN

    # One extra floor skeleton per level number, scattered in this band
    floor_enemy_min_x: int = config.FLOOR_ENEMY_MIN_X
    floor_enemy_x_range: int = config.FLOOR_ENEMY_X_RANGE
    enemy_w: int = config.ENEMY_W
    enemy_h: int = config.ENEMY_H

    def tier_y(self, tier: int) -> int:
        return self.floor_y - tier * self.tier_spacing


@dataclass
class LevelLayout:
    """Everything the game needs to start a level."""
    level_num: int
    platforms: Tuple[Rect, ...]
    enemies: List = field(default_factory=list)
    door: Rect = None
    spawn: Tuple[float, float] = config.PLAYER_SPAWN
    # How many enemies came from tier platforms (the rest are floor spawns)
    tier_enemy_count: int = 0

    @property
    def floor(self) -> Rect:
        return self.platforms[0]

    @property
    def tier_platforms(self) -> Tuple[Rect, ...]:
        # floor first, exit support platform last
        return self.platforms[1:-1]

    @property
    def exit_platform(self) -> Rect:
        return self.platforms[-1]
