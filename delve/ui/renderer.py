"""
World rendering at the logical resolution.

Draw order: background, platforms, door, enemies, player (with axe).
Reads the `WorldView` only; never mutates game state.
"""
import pygame

from config import WIDTH, HEIGHT, BG, CYAN, BLACK, IFRAME_BLINK_INTERVAL
from .sprites import SpriteSheet

# The axe is held this far in front of the dwarf
AXE_OFFSET_X = 12


def draw_platform(surf: pygame.Surface, p) -> None:
    """Cyan border, black fill and two studs so platforms look constructed."""
    x, y, w, h = int(p.x), int(p.y), int(p.w), int(p.h)
    pygame.draw.rect(surf, CYAN, pygame.Rect(x, y, w, h))
    if w > 2 and h > 2:
        pygame.draw.rect(surf, BLACK, pygame.Rect(x + 1, y + 1, w - 2, h - 2))
    pygame.draw.rect(surf, CYAN, pygame.Rect(x + 2, y + 2, 2, 2))
    pygame.draw.rect(surf, CYAN, pygame.Rect(x + w - 4, y + h - 4, 2, 2))


def player_visible(player) -> bool:
    """Blink while invulnerable: hidden on every other 5-frame slice."""
    state = player.combat.state
    if not state.invulnerable:
        return True
    return (state.invulnerable_elapsed // IFRAME_BLINK_INTERVAL) % 2 != 0


def draw_player(surf: pygame.Surface, player, sprites: SpriteSheet) -> None:
    if not player_visible(player):
        return
    flip = not player.facing_right
    sprites.draw(surf, player.sprite_key, player.x, player.y, flip)
    if player.is_attacking:
        axe_x = player.x + AXE_OFFSET_X if player.facing_right else player.x - AXE_OFFSET_X
        sprites.draw(surf, 'AXE', axe_x, player.y, flip)


def draw_world(surf: pygame.Surface, view, sprites: SpriteSheet) -> None:
    surf.fill(BG, pygame.Rect(0, 0, WIDTH, HEIGHT))
    for p in view.platforms:
        draw_platform(surf, p)
    sprites.draw(surf, 'DOOR', view.door.x, view.door.y)
    for enemy in view.enemies:
        # Skeleton art faces left; mirror it when walking right
        sprites.draw(surf, enemy.sprite_key, enemy.x, enemy.y, enemy.vx > 0)
    draw_player(surf, view.player, sprites)
