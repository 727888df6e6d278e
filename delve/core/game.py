"""
Game orchestration: owns the session and the current level's entities and
applies the per-frame rules.

One call to `Game.update` runs a whole frame to completion:
1. Player update (input, attack, physics); kills score, a fall costs a life
2. Player reaching the door advances to a freshly generated level
3. Enemies move; touching a live one while vulnerable costs a life
4. Dead enemies are dropped from the roster in one pass

A level change or game over replaces platforms, enemies, door and player
together, so nothing from the previous level is visible afterwards.
"""
import logging
import random
from typing import Callable, NamedTuple, Optional, Tuple

from config import KILL_SCORE, LEVEL_SCORE
from .geometry import Rect, overlaps
from .session import SessionState
from ..entities.entities import Player
from ..level.level_data import GeneratorConfig
from ..level.level_generator import generate_level

logger = logging.getLogger(__name__)


class WorldView(NamedTuple):
    """Read-only snapshot handed to the renderer."""
    platforms: Tuple[Rect, ...]
    door: Rect
    player: Player
    enemies: Tuple
    score: int
    lives: int
    level_num: int
    frame: int


class Game:
    def __init__(self, rng: Optional[random.Random] = None,
                 on_game_over: Optional[Callable[[int], None]] = None,
                 generator_config: Optional[GeneratorConfig] = None):
        self.rng = rng or random.Random()
        self.on_game_over = on_game_over
        self.generator_config = generator_config or GeneratorConfig()
        self.session = SessionState()
        self.frame = 0
        self.platforms: Tuple[Rect, ...] = ()
        self.enemies = []
        self.door: Optional[Rect] = None
        self.player: Optional[Player] = None
        self.reset_level()

    # Convenience accessors for the session counters
    @property
    def score(self):
        return self.session.score

    @property
    def lives(self):
        return self.session.lives

    @property
    def level_num(self):
        return self.session.level_num

    def reset_level(self):
        """Generate the current level and swap it in as a whole."""
        layout = generate_level(self.session.level_num, self.rng, self.generator_config)
        self.platforms, self.enemies, self.door, self.player = (
            layout.platforms,
            list(layout.enemies),
            layout.door,
            Player(*layout.spawn),
        )

    def next_level(self):
        self.session.advance_level()
        self.session.award(LEVEL_SCORE)
        logger.info("Door reached, entering level %d (score %d)",
                    self.session.level_num, self.session.score)
        self.reset_level()

    def game_over(self):
        """Report the final score, then restart the session from level 1."""
        final_score = self.session.score
        logger.info("GAME OVER! Score: %d (level %d)", final_score, self.session.level_num)
        if self.on_game_over is not None:
            self.on_game_over(final_score)
        self.session.reset()
        self.reset_level()

    def lose_life(self) -> bool:
        """Take a life; on the last one the session is reset. Returns True on game over."""
        if self.session.lose_life():
            self.game_over()
            return True
        return False

    def update(self, inputs):
        self.frame += 1
        player = self.player

        events = player.update(inputs, self.platforms, self.enemies)
        if events.kills:
            self.session.award(KILL_SCORE * len(events.kills))
            logger.debug("Killed %d enemies, score %d", len(events.kills), self.session.score)
        if events.fell:
            if self.lose_life():
                return
            player.respawn()

        if overlaps(self.player, self.door):
            self.next_level()

        player = self.player
        for enemy in self.enemies:
            enemy.update(self.platforms)
            if enemy.alive and not player.invulnerable and overlaps(player, enemy):
                if self.lose_life():
                    # The roster was replaced; none of the old enemies may act further
                    return
                player.hurt()

        self.enemies = [e for e in self.enemies if e.alive]

    @property
    def view(self) -> WorldView:
        return WorldView(
            platforms=tuple(self.platforms),
            door=self.door,
            player=self.player,
            enemies=tuple(self.enemies),
            score=self.session.score,
            lives=self.session.lives,
            level_num=self.session.level_num,
            frame=self.frame,
        )
