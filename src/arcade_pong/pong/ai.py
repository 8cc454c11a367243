"""
Strategies for the computer controlled paddle.

The dumb strategy follows the ball's current height. The smart one estimates
where the ball will be once it reaches the computer's side, folding the path
back into the screen at every wall bounce. Neither reacts every tick: a new
command is only picked now and then, which is what gives the computer its
reaction time.
"""

from typing import Callable
from arcade_pong.pong import constants
from arcade_pong.pong.game_object import Paddle, reflect_into_bounds
from arcade_pong.pong.game_state import GameState
from arcade_pong.models.pong import Command

Strategy = Callable[[GameState], Command]


def steer_towards(paddle: Paddle, target_y: float) -> Command:
    """
    Command that brings the paddle's vertical span over target_y
    """
    if target_y < paddle.rect.top:
        return Command.UP
    if target_y > paddle.rect.bottom:
        return Command.DOWN
    return Command.NONE


def dumb_ai(state: GameState) -> Command:
    """
    Chase the ball's current height
    """
    return steer_towards(state.computer, state.ball.y)


def smart_ai(state: GameState) -> Command:
    """
    Chase the height at which the ball is expected to reach the computer paddle.
    A ball moving away is assumed to come back after bouncing off the wall
    behind the human paddle. Future speed ups and hits are ignored.
    """
    ball = state.ball
    paddle = state.computer
    if ball.velocity.x > 0:
        distance = paddle.x - ball.x
    else:
        distance = ball.x + paddle.x

    time_to_impact = distance / abs(ball.velocity.x) if ball.velocity.x else 0
    predicted_y = reflect_into_bounds(ball.y + ball.velocity.y * time_to_impact)
    return steer_towards(paddle, predicted_y)


def get_ai_strategy(hard: bool) -> Strategy:
    """
    Get the computer's strategy for the chosen difficulty
    """
    match hard:
        case True:
            return smart_ai
        case False:
            return dumb_ai
        case _:
            raise ValueError(f"Invalid difficulty: {hard}")


def next_ai_command(state: GameState) -> Command:
    """
    Occasionally asks the strategy for a new command, otherwise keeps
    the previous one
    """
    if state.rng.random() < constants.AI_RESAMPLE_PROBABILITY:
        return state.strategy(state)
    return state.ai_command
