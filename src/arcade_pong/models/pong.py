# pylint: disable=missing-class-docstring
"""
Models related to the Pong game
"""
from enum import Enum
from typing import Tuple
from pydantic import BaseModel

Color = Tuple[int, int, int]


class Velocity(BaseModel):

    x: float
    y: float


class Command(Enum):
    NONE = 0
    UP = -1
    DOWN = 1


class GameEvent(Enum):
    WALL_BOUNCE = "wall_bounce"
    PADDLE_HIT = "paddle_hit"
    SCORE = "score"


class Controls(BaseModel):
    """
    Directional keys held during a tick
    """

    up: bool = False
    down: bool = False


class Scores(BaseModel):

    left: int = 0
    right: int = 0


class Corners(BaseModel):

    x1: float
    y1: float
    x2: float
    y2: float
    color: Color


class Rect(BaseModel):
    """
    Axis-aligned rectangle described by its center point
    """

    x: float
    y: float
    width: float
    height: float
    color: Color

    @property
    def left(self) -> float:
        return self.x - self.width / 2

    @property
    def right(self) -> float:
        return self.x + self.width / 2

    @property
    def top(self) -> float:
        return self.y - self.height / 2

    @property
    def bottom(self) -> float:
        return self.y + self.height / 2

    def intersects(self, other: "Rect") -> bool:
        """
        Whether both rectangles overlap. Touching edges do not count.
        """
        return (
            self.left < other.right
            and self.right > other.left
            and self.top < other.bottom
            and self.bottom > other.top
        )

    def corners(self) -> Corners:
        """
        Top-left and bottom-right corners along with the fill color
        """
        return Corners(
            x1=self.left, y1=self.top, x2=self.right, y2=self.bottom, color=self.color
        )
