"""
HUD drawing for Delve.

`draw_hud(view, screen)` draws the status line (level, lives, score) and
`draw_game_over(screen, score)` the end-of-session banner. Both are
draw-only and read the game state without changing it.
"""
import pygame

from config import WIDTH, HEIGHT, MAGENTA, WHITE, BLACK, CYAN, START_LIVES
from ..core.utils import draw_text

LIFE_BOX = 6


def draw_hud(view, screen: pygame.Surface) -> None:
    """Draw the status line using the world view.

    Args:
        view: WorldView snapshot of the running game.
        screen: Pygame surface to draw onto (logical resolution).
    """
    x, y = 5, 3
    draw_text(screen, f"LVL: {view.level_num}", (x, y), MAGENTA)
    x += 48
    draw_text(screen, "HP:", (x, y), MAGENTA)
    x += 20
    for i in range(view.lives):
        pygame.draw.rect(screen, MAGENTA, pygame.Rect(x + i * (LIFE_BOX + 2), y + 3, LIFE_BOX, LIFE_BOX))
    x += START_LIVES * (LIFE_BOX + 2) + 8
    draw_text(screen, f"PTS: {view.score}", (x, y), MAGENTA)


def draw_game_over(screen: pygame.Surface, score: int) -> None:
    """Centered banner announcing the end of a session."""
    box = pygame.Rect(0, 0, 180, 40)
    box.center = (WIDTH // 2, HEIGHT // 2)
    pygame.draw.rect(screen, BLACK, box)
    pygame.draw.rect(screen, CYAN, box, width=1)
    draw_text(screen, "GAME OVER!", (box.centerx, box.y + 12), WHITE, bold=True, center=True)
    draw_text(screen, f"Score: {score}", (box.centerx, box.y + 28), MAGENTA, center=True)
