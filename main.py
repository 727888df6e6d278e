import sys
import random

import pygame
import logging
logger = logging.getLogger(__name__)

from config import WIDTH, HEIGHT, FPS, RUNTIME_CONFIG_PATH

from delve.core.config_loader import load_runtime_config, resolve_seed
from delve.core.game import Game
from delve.core.input import InputHandler
from delve.ui.sprites import SpriteSheet
from delve.ui.renderer import draw_world
from delve.ui.hud import draw_hud, draw_game_over

# How long the game-over banner stays up
GAME_OVER_BANNER_FRAMES = 3 * FPS


class App:
    def __init__(self, config_path=RUNTIME_CONFIG_PATH):
        runtime = load_runtime_config(config_path)
        logging.getLogger().setLevel(runtime.log_level)

        self.seed = resolve_seed(runtime)
        logger.info("Starting Delve (seed=%d, mode=%s)", self.seed, runtime.seed_mode)

        pygame.init()
        self.scale = runtime.scale
        self.window = pygame.display.set_mode((WIDTH * self.scale, HEIGHT * self.scale))
        pygame.display.set_caption("Delve")
        # All drawing happens on the logical surface, scaled up on flip
        self.screen = pygame.Surface((WIDTH, HEIGHT))
        self.clock = pygame.time.Clock()
        self.sprites = SpriteSheet()
        self.input_handler = InputHandler()

        self.game_over_score = None
        self.game_over_timer = 0
        self.game = Game(rng=random.Random(self.seed), on_game_over=self.show_game_over)

    def show_game_over(self, score):
        self.game_over_score = score
        self.game_over_timer = GAME_OVER_BANNER_FRAMES

    def update(self):
        inputs = self.input_handler.poll()
        self.game.update(inputs)
        if self.game_over_timer > 0:
            self.game_over_timer -= 1

    def draw(self):
        view = self.game.view
        draw_world(self.screen, view, self.sprites)
        try:
            draw_hud(view, self.screen)
            if self.game_over_timer > 0:
                draw_game_over(self.screen, self.game_over_score)
        except Exception:
            logger.exception('HUD draw failed')
        pygame.transform.scale(self.screen, self.window.get_size(), self.window)

    def run(self):
        while self.input_handler.process_events():
            self.clock.tick(FPS)
            try:
                self.update()
            except Exception:
                logger.exception('Frame update failed')
            try:
                self.draw()
            except Exception:
                logger.exception('Frame draw failed')
            pygame.display.flip()
        logger.info("Quit requested, final score %d", self.game.score)
        pygame.quit()


def main():
    logging.basicConfig(level=logging.INFO,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    App().run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
