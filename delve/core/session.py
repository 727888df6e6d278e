"""Score, lives and level progression for one play session."""

import logging
from dataclasses import dataclass

from config import START_LIVES, START_LEVEL

logger = logging.getLogger(__name__)


@dataclass
class SessionState:
    score: int = 0
    lives: int = START_LIVES
    level_num: int = START_LEVEL

    def award(self, points: int) -> None:
        """Add points to the score. The score never decreases."""
        if points < 0:
            raise ValueError(f"Cannot award negative points: {points}")
        self.score += points

    def lose_life(self) -> bool:
        """Take one life away. Returns True when no lives are left."""
        self.lives = max(0, self.lives - 1)
        logger.debug("Life lost, %d remaining", self.lives)
        return self.is_over

    def advance_level(self) -> None:
        self.level_num += 1

    def reset(self) -> None:
        self.score = 0
        self.lives = START_LIVES
        self.level_num = START_LEVEL

    @property
    def is_over(self) -> bool:
        return self.lives <= 0
