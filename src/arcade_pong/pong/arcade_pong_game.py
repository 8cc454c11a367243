# pylint: disable=no-member
"""
Functionality for combining the simulation with a pygame window,
the keyboard and the speakers
"""
import random
import pygame
from arcade_pong.pong import constants
from arcade_pong.pong.simulation import new_game_state, tick
from arcade_pong.pong.game_state import GameState
from arcade_pong.pong.sound import SoundManager
from arcade_pong.models.pong import Controls, GameEvent
from arcade_pong.logger.logger import logger


class ArcadePongGame:
    """
    Arcade Pong game class: a human on the left against the computer on the right
    """

    def __init__(
        self,
        hard: bool = False,
        headless: bool = False,
        rng: random.Random = None,
    ):
        self.hard = hard
        self.headless = headless
        self.sound = None
        if not headless:
            pygame.init()
            self.screen = pygame.display.set_mode(
                (constants.SCREEN_WIDTH, constants.SCREEN_HEIGHT)
            )
            pygame.display.set_caption(
                constants.SCREEN_CAPTION_HARD if hard else constants.SCREEN_CAPTION
            )
            self.clock = pygame.time.Clock()
            self.font = pygame.font.Font(None, constants.GAME_FONT_SIZE)
            self.sound = SoundManager()
        else:
            # Off-screen surface so the game can be stepped without a display
            self.screen = pygame.Surface(
                (constants.SCREEN_WIDTH, constants.SCREEN_HEIGHT)
            )

        self.state: GameState = new_game_state(hard=hard, rng=rng)

    def step(self, controls: Controls, delta_seconds: float) -> GameState:
        """
        Advance the game by one tick using the held keys and the time
        elapsed since the previous tick
        """
        self.state = tick(self.state, controls, delta_seconds)
        if self.sound and any(
            event in (GameEvent.WALL_BOUNCE, GameEvent.PADDLE_HIT)
            for event in self.state.events
        ):
            self.sound.play_effect()
        return self.state

    def score_text(self) -> str:
        return f"{self.state.scores.left}    {self.state.scores.right}"

    def render(self):
        """Render the current game state."""
        if self.headless:
            return
        self.screen.fill(constants.BLACK)
        for rect in (
            self.state.human.rect,
            self.state.computer.rect,
            self.state.ball.rect,
        ):
            corners = rect.corners()
            pygame.draw.polygon(
                self.screen,
                corners.color,
                [
                    (corners.x1, corners.y1),
                    (corners.x2, corners.y1),
                    (corners.x2, corners.y2),
                    (corners.x1, corners.y2),
                ],
            )

        score_surface = self.font.render(self.score_text(), True, constants.WHITE)
        self.screen.blit(
            score_surface,
            (
                constants.SCREEN_WIDTH / 2 - score_surface.get_width() / 2,
                constants.SCORE_TOP_MARGIN,
            ),
        )

        pygame.display.flip()

    def close(self):
        """Close the Pygame window."""
        pygame.quit()

    def run(self):
        """Main game loop for human play."""
        if self.headless:
            raise RuntimeError("A headless game has no window to run in, use step()")
        logger.info(f"Playing against the {'smart' if self.hard else 'dumb'} computer")
        self.sound.start_music()
        self.clock.tick()
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return

            keys = pygame.key.get_pressed()
            controls = Controls(up=keys[pygame.K_UP], down=keys[pygame.K_DOWN])
            delta_seconds = self.clock.tick(constants.FPS) / 1000

            self.step(controls, delta_seconds)
            self.render()
