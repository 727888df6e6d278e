import pygame
from config import WHITE

# Fonts are created on first use, after pygame.init()
_fonts = {}
FONT_NAME = "monospace"


def get_font(size=10, bold=False):
    key = (FONT_NAME, size, bold)
    font = _fonts.get(key)
    if font is None:
        font = _fonts[key] = pygame.font.SysFont(FONT_NAME, size, bold=bold)
    return font


def draw_text(surf, text, pos, col=WHITE, size=10, bold=False, center=False):
    """Blit unantialiased text (the palette has no in-between colours).

    With center=True, pos is the middle of the text instead of its top-left.
    Returns the rect that was drawn.
    """
    image = get_font(size=size, bold=bold).render(text, False, col)
    rect = image.get_rect(center=pos) if center else image.get_rect(topleft=pos)
    surf.blit(image, rect)
    return rect
