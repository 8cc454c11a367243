"""
Functionality related to the paddles and the ball.
Both are built around a Rect that holds their position and size.
"""

import random
from arcade_pong.pong import constants
from arcade_pong.models.pong import Velocity, Command, Rect, Color
from arcade_pong.utils.utils import clamp


def reflect_into_bounds(y: float, height: float = constants.SCREEN_HEIGHT) -> float:
    """
    Folds y back into [0, height] as if it had bounced off the top and
    bottom walls, however many times that takes
    """
    y = abs(y) % (2 * height)
    if y > height:
        y = 2 * height - y
    return y


class Paddle:
    """
    Represents a paddle that moves vertically along one side of the screen
    """

    @staticmethod
    def new(x: float, color: Color = constants.WHITE) -> "Paddle":
        """
        Create a new paddle vertically centered on the screen
        """
        return Paddle(x, constants.SCREEN_HEIGHT / 2, color)

    def __init__(self, x: float, y: float, color: Color = constants.WHITE):
        self.rect = Rect(
            x=x,
            y=y,
            width=constants.PADDLE_WIDTH,
            height=constants.PADDLE_HEIGHT,
            color=color,
        )
        self.command = Command.NONE

    @property
    def x(self) -> float:
        return self.rect.x

    @property
    def y(self) -> float:
        return self.rect.y

    def apply_command(self, command: Command):
        """
        Remembers the command and moves the paddle by one step in its
        direction, keeping the whole paddle on the screen
        """
        self.command = command
        match command:
            case Command.UP:
                new_y = self.rect.y - constants.PADDLE_SPEED
            case Command.DOWN:
                new_y = self.rect.y + constants.PADDLE_SPEED
            case Command.NONE:
                new_y = self.rect.y
            case _:
                raise ValueError(f"Invalid command: {command}")

        half_height = self.rect.height / 2
        self.rect.y = clamp(new_y, half_height, constants.SCREEN_HEIGHT - half_height)

    def velocity(self) -> float:
        """
        Vertical velocity implied by the last command
        """
        return self.command.value * constants.PADDLE_SPEED

    def copy(self) -> "Paddle":
        new_paddle = Paddle(self.rect.x, self.rect.y, self.rect.color)
        new_paddle.command = self.command
        return new_paddle


class Ball:
    """
    Represents the ball. It waits for a moment after being served and then
    speeds up the longer it stays in play.
    """

    @staticmethod
    def new(rng: random.Random = None) -> "Ball":
        """
        Serve a new ball from the center of the screen in a random direction
        """
        rng = rng or random.Random()
        velocity = Velocity(
            x=rng.choice(constants.BALL_SPEEDS_X) * rng.choice((1, -1)),
            y=rng.choice(constants.BALL_SPEEDS_Y) * rng.choice((1, -1)),
        )
        return Ball(constants.SCREEN_WIDTH / 2, constants.SCREEN_HEIGHT / 2, velocity)

    def __init__(
        self,
        x: float,
        y: float,
        velocity: Velocity,
        elapsed_seconds: float = 0.0,
        color: Color = constants.YELLOW,
    ):
        self.rect = Rect(
            x=x, y=y, width=constants.BALL_SIZE, height=constants.BALL_SIZE, color=color
        )
        self.velocity = velocity
        self.elapsed_seconds = elapsed_seconds

    @property
    def x(self) -> float:
        return self.rect.x

    @property
    def y(self) -> float:
        return self.rect.y

    def speed_multiplier(self) -> float:
        return 1 + self.elapsed_seconds / constants.SPEED_RAMP_SECONDS

    def update(self, delta_seconds: float) -> bool:
        """
        Moves the ball and returns whether it bounced off the top or bottom wall.
        The ball stays put until the serve delay has passed.
        """
        self.elapsed_seconds += delta_seconds
        if self.elapsed_seconds < constants.SERVE_DELAY_SECONDS:
            return False

        multiplier = self.speed_multiplier()
        self.rect.x += self.velocity.x * multiplier
        self.rect.y += self.velocity.y * multiplier

        half_height = self.rect.height / 2
        if half_height <= self.rect.y <= constants.SCREEN_HEIGHT - half_height:
            return False

        self.velocity.y *= -1
        return True

    def hit(self, paddle_velocity: float) -> bool:
        """
        Sends the ball back after it touched a paddle moving at paddle_velocity.
        Only counts while the ball is still travelling towards the side it is on,
        so a ball that keeps overlapping the paddle is not sent back twice.
        """
        moving_right = self.velocity.x > 0 and self.rect.x > constants.SCREEN_WIDTH / 2
        moving_left = self.velocity.x < 0 and self.rect.x < constants.SCREEN_WIDTH / 2
        if not (moving_right or moving_left):
            return False

        self.velocity.x *= -1
        self.velocity.y = (
            constants.PADDLE_HIT_BALL_WEIGHT * self.velocity.y + paddle_velocity
        ) / (constants.PADDLE_HIT_BALL_WEIGHT + 1)
        return True

    def in_bounds(self) -> bool:
        """
        Whether the ball is still horizontally within the screen
        """
        return 0 <= self.rect.x <= constants.SCREEN_WIDTH

    def copy(self) -> "Ball":
        return Ball(
            self.rect.x,
            self.rect.y,
            Velocity(x=self.velocity.x, y=self.velocity.y),
            self.elapsed_seconds,
            self.rect.color,
        )
