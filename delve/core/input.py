"""
Input handling for Delve.

`InputState` is the per-frame snapshot the simulation consumes: one boolean
per logical action. `InputHandler` builds it from pygame's keyboard state
and also drains the event queue so the window stays responsive.

Design:
- Sample once per frame; missed presses are not buffered.
- Key names come from config.KEY_BINDINGS so bindings can be changed
  without touching this module.
"""
from dataclasses import dataclass
from typing import Dict, Iterable, Optional, Tuple
import logging
import pygame

from config import KEY_BINDINGS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InputState:
    left: bool = False
    right: bool = False
    jump: bool = False
    attack: bool = False


NO_INPUT = InputState()


def resolve_bindings(bindings: Dict[str, Iterable[str]]) -> Dict[str, Tuple[int, ...]]:
    """Translate key names ('left', 'space', 'a') into pygame key codes."""
    resolved = {}
    for action, names in bindings.items():
        codes = []
        for name in names:
            try:
                codes.append(pygame.key.key_code(name))
            except ValueError:
                logger.warning("Unknown key name %r for action %s, ignoring", name, action)
        resolved[action] = tuple(codes)
    return resolved


class InputHandler:
    """Centralized keyboard sampling.

    Usage:
        handler = InputHandler()
        if handler.process_events():
            state = handler.poll()
    """

    def __init__(self, bindings: Optional[Dict[str, Iterable[str]]] = None):
        self.key_codes = resolve_bindings(bindings or KEY_BINDINGS)
        self.quit_requested = False

    def process_events(self) -> bool:
        """Drain pygame events. Returns False once the player asked to quit."""
        for ev in pygame.event.get():
            if ev.type == pygame.QUIT:
                self.quit_requested = True
            elif ev.type == pygame.KEYDOWN and ev.key == pygame.K_ESCAPE:
                self.quit_requested = True
        return not self.quit_requested

    def poll(self) -> InputState:
        keys = pygame.key.get_pressed()

        def down(action):
            return any(keys[code] for code in self.key_codes.get(action, ()))

        return InputState(
            left=down('left'),
            right=down('right'),
            jump=down('jump'),
            attack=down('attack'),
        )
