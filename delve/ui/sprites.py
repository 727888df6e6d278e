"""
Pixel-art sprites defined as string grids.

Legend: '.' transparent, 'C' cyan, 'M' magenta, 'W' white, 'B' black.
Grids are 16x16; short rows are padded with transparency.
"""
import logging
from typing import Dict, List, Tuple

import pygame

from config import SPRITE_PALETTE, SPRITE_SIZE

logger = logging.getLogger(__name__)

SPRITES: Dict[str, List[str]] = {
    'DWARF_IDLE': [
        "................",
        "................",
        ".....CCCCCC.....",
        "....CCCCCCCC....",
        "....CCCCCCCC....",
        ".....CCCCCC.....",  # Helmet
        ".....MMMMMM.....",  # Face
        ".....MWMWMW.....",  # Eyes
        "....WWWWWWWW....",  # Beard
        "....WWWWWWWW....",
        ".....WWWWWW.....",
        "....CCCCCCCC....",  # Body
        "...CCCCCCCCCC...",
        "...CCCCCCCCCC...",
        "....CC....CC....",  # Legs
        "....CC....CC....",
    ],
    'SKELETON': [
        "................",
        ".....WWWWWW.....",
        "....WBBWBBWW....",  # Skull
        "....WWWWWWWW....",
        ".....WWWWWW.....",
        "......WWWW......",  # Neck
        "....WWWWWWWW....",  # Ribs
        "....WBBBBBBW....",
        "....WWWWWWWW....",
        "......WWWW......",  # Spine
        ".....WW..WW.....",  # Pelvis
        ".....W....W.....",
        ".....W....W.....",  # Legs
        ".....W....W.....",
        "....WW....WW....",
    ],
    'DOOR': [
        "CCCC........CCCC",
        "CC............CC",
        "CC..MMMMMMMM..CC",
        "CC..MMMMMMMM..CC",
        "CC..MM....MM..CC",
        "CC..MM....MM..CC",
        "CC..MM....MM..CC",
        "CC..MM....MM..CC",
        "CC..MM....MM..CC",
        "CC..MM....MM..CC",
        "CC..MM....MM..CC",
        "CC..MM....MM..CC",
        "CC..MMMMMMMM..CC",
        "CC..MMMMMMMM..CC",
        "CCCC........CCCC",
        "CCCC........CCCC",
    ],
    'AXE': [
        "................",
        "......CCC.......",
        "....CCBBCC......",
        "...CBBBBC.......",  # Blade
        "...CBBBBC.......",
        "....CCBBCC......",
        "......CCC.......",
        ".......W........",
        ".......W........",  # Handle
        ".......W........",
        ".......W........",
        ".......W........",
        ".......W........",
        ".......W........",
        "................",
        "................",
    ],
}


def rasterize(rows: List[str], palette=SPRITE_PALETTE, size=SPRITE_SIZE) -> pygame.Surface:
    """Paint a string grid onto a transparent surface, one pixel per character."""
    surf = pygame.Surface((size, size), pygame.SRCALPHA)
    for row, line in enumerate(rows[:size]):
        for col, char in enumerate(line.ljust(size, '.')[:size]):
            color = palette.get(char)
            if color is not None:
                surf.set_at((col, row), color)
    return surf


class SpriteSheet:
    """Lazily rasterized sprites, cached per (key, flipped)."""

    def __init__(self, sprites: Dict[str, List[str]] = None):
        self.sprites = sprites or SPRITES
        self._cache: Dict[Tuple[str, bool], pygame.Surface] = {}

    def get(self, key: str, flip: bool = False):
        cache_key = (key, flip)
        if cache_key not in self._cache:
            rows = self.sprites.get(key)
            if rows is None:
                logger.warning("Unknown sprite key %r", key)
                return None
            surf = rasterize(rows)
            if flip:
                surf = pygame.transform.flip(surf, True, False)
            self._cache[cache_key] = surf
        return self._cache[cache_key]

    def draw(self, target: pygame.Surface, key: str, x, y, flip: bool = False) -> None:
        surf = self.get(key, flip)
        if surf is not None:
            target.blit(surf, (int(x), int(y)))
