"""
Everything the simulation needs to advance the game by one tick
"""

import random
from typing import Callable, List
from arcade_pong.pong.game_object import Paddle, Ball
from arcade_pong.models.pong import Command, GameEvent, Scores


class GameState:
    """
    The paddles, the ball, the scores and the computer player's memory.
    The human plays the left paddle and the computer the right one.
    """

    def __init__(
        self,
        human: Paddle,
        computer: Paddle,
        ball: Ball,
        scores: Scores,
        strategy: Callable[["GameState"], Command],
        rng: random.Random,
        ai_command: Command = Command.NONE,
    ):
        self.human = human
        self.computer = computer
        self.ball = ball
        self.scores = scores
        self.strategy = strategy
        self.rng = rng
        self.ai_command = ai_command
        self.events: List[GameEvent] = []

    def paddles(self) -> List[Paddle]:
        return [self.human, self.computer]

    def copy(self) -> "GameState":
        """
        Create an independent copy, random number generator included
        """
        rng = random.Random()
        rng.setstate(self.rng.getstate())
        new_state = GameState(
            human=self.human.copy(),
            computer=self.computer.copy(),
            ball=self.ball.copy(),
            scores=self.scores.model_copy(),
            strategy=self.strategy,
            rng=rng,
            ai_command=self.ai_command,
        )
        new_state.events = list(self.events)
        return new_state
