"""
Functionality for advancing the game by one tick.
Nothing in here touches the window, the keyboard or the speakers, so whole
games can be played out without a display.
"""

import random
from arcade_pong.pong import constants
from arcade_pong.pong.ai import get_ai_strategy, next_ai_command
from arcade_pong.pong.game_object import Paddle, Ball
from arcade_pong.pong.game_state import GameState
from arcade_pong.models.pong import Command, Controls, GameEvent, Scores
from arcade_pong.logger.logger import logger


def new_game_state(hard: bool = False, rng: random.Random = None) -> GameState:
    """
    Create the state at the start of a game: paddles centered, ball served
    from the center and no points scored
    """
    rng = rng or random.Random()
    return GameState(
        human=Paddle.new(constants.PADDLE_MARGIN),
        computer=Paddle.new(constants.SCREEN_WIDTH - constants.PADDLE_MARGIN),
        ball=Ball.new(rng),
        scores=Scores(),
        strategy=get_ai_strategy(hard),
        rng=rng,
    )


def human_command(controls: Controls) -> Command:
    """
    Command for the held keys. Up wins when both are held.
    """
    if controls.up:
        return Command.UP
    if controls.down:
        return Command.DOWN
    return Command.NONE


def tick(state: GameState, controls: Controls, delta_seconds: float) -> GameState:
    """
    Advance the game by one tick and return the new state.
    The state passed in is left untouched; the events of this tick are
    available on the returned state.
    """
    state = state.copy()
    state.events = []

    # Paddles move before anything is checked against them
    for paddle in state.paddles():
        paddle.command = Command.NONE
    state.human.apply_command(human_command(controls))
    state.ai_command = next_ai_command(state)
    state.computer.apply_command(state.ai_command)

    ball = state.ball
    if ball.update(delta_seconds) and ball.in_bounds():
        logger.debug(f"Ball bounced off a wall at x={ball.x:.1f}")
        state.events.append(GameEvent.WALL_BOUNCE)

    for paddle in state.paddles():
        if paddle.rect.intersects(ball.rect) and ball.hit(paddle.velocity()):
            logger.debug(f"Paddle at x={paddle.x:.1f} hit the ball")
            state.events.append(GameEvent.PADDLE_HIT)

    left_bound, right_bound = constants.SCORE_BOUNDS
    if ball.x < left_bound or ball.x > right_bound:
        if ball.x < left_bound:
            state.scores.right += 1
        else:
            state.scores.left += 1
        logger.info(f"Score: {state.scores.left} - {state.scores.right}")
        state.events.append(GameEvent.SCORE)
        state.ball = Ball.new(state.rng)

    return state
