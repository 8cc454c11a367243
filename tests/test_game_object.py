import random

import pytest

from arcade_pong.models.pong import Command, Velocity
from arcade_pong.pong import constants
from arcade_pong.pong.game_object import Ball, Paddle, reflect_into_bounds


def test_new_paddle_is_vertically_centered():
    paddle = Paddle.new(constants.PADDLE_MARGIN)
    assert paddle.x == constants.PADDLE_MARGIN
    assert paddle.y == constants.SCREEN_HEIGHT / 2
    assert paddle.command == Command.NONE


@pytest.mark.parametrize(
    "command, expected_y",
    [(Command.UP, 235), (Command.DOWN, 245), (Command.NONE, 240)],
)
def test_apply_command_moves_paddle_one_step(command, expected_y):
    paddle = Paddle.new(20)
    paddle.apply_command(command)
    assert paddle.y == expected_y
    assert paddle.x == 20


@pytest.mark.parametrize("command", [Command.UP, Command.DOWN])
def test_paddle_never_leaves_the_screen(command):
    paddle = Paddle.new(20)
    for _ in range(500):
        paddle.apply_command(command)
        assert paddle.rect.top >= 0
        assert paddle.rect.bottom <= constants.SCREEN_HEIGHT


def test_paddle_stops_flush_with_the_walls():
    paddle = Paddle.new(20)
    for _ in range(100):
        paddle.apply_command(Command.UP)
    assert paddle.rect.top == 0
    for _ in range(200):
        paddle.apply_command(Command.DOWN)
    assert paddle.rect.bottom == constants.SCREEN_HEIGHT


def test_paddle_velocity_follows_last_command():
    paddle = Paddle.new(20)
    paddle.apply_command(Command.UP)
    assert paddle.velocity() == -constants.PADDLE_SPEED
    paddle.apply_command(Command.DOWN)
    assert paddle.velocity() == constants.PADDLE_SPEED
    paddle.apply_command(Command.NONE)
    assert paddle.velocity() == 0


def test_paddle_rejects_unknown_command():
    with pytest.raises(ValueError):
        Paddle.new(20).apply_command("up")


def test_new_ball_is_served_from_the_center():
    ball = Ball.new(random.Random(7))
    assert (ball.x, ball.y) == (constants.SCREEN_WIDTH / 2, constants.SCREEN_HEIGHT / 2)
    assert ball.elapsed_seconds == 0
    assert abs(ball.velocity.x) in constants.BALL_SPEEDS_X
    assert abs(ball.velocity.y) in constants.BALL_SPEEDS_Y


def test_ball_waits_during_serve_delay():
    ball = Ball(320, 240, Velocity(x=4, y=2))
    for _ in range(3):
        assert ball.update(0.3) is False
        assert (ball.x, ball.y) == (320, 240)
    assert ball.elapsed_seconds == pytest.approx(0.9)


def test_ball_speeds_up_over_time():
    ball = Ball(320, 240, Velocity(x=4, y=2))
    assert ball.update(1.5) is False
    assert ball.x == pytest.approx(320 + 4 * 1.1)
    assert ball.y == pytest.approx(240 + 2 * 1.1)


def test_ball_bounces_off_top_wall():
    ball = Ball(320, 8, Velocity(x=4, y=-3), elapsed_seconds=1.0)
    assert ball.update(0) is True
    assert ball.velocity.y == 3


def test_ball_bounces_off_bottom_wall():
    ball = Ball(320, 474, Velocity(x=4, y=3), elapsed_seconds=1.0)
    assert ball.update(0) is True
    assert ball.velocity.y == -3


def test_ball_inside_does_not_bounce():
    ball = Ball(320, 240, Velocity(x=4, y=2), elapsed_seconds=1.0)
    assert ball.update(0) is False
    assert ball.velocity == Velocity(x=4, y=2)


def test_hit_sends_ball_back_and_blends_paddle_velocity():
    ball = Ball(600, 240, Velocity(x=4, y=2))
    assert ball.hit(5) is True
    assert ball.velocity.x == -4
    assert ball.velocity.y == pytest.approx((3 * 2 + 5) / 4)


def test_hit_is_ignored_while_ball_still_overlaps():
    ball = Ball(600, 240, Velocity(x=4, y=2))
    assert ball.hit(0) is True
    velocity = ball.velocity.model_copy()
    assert ball.hit(0) is False
    assert ball.velocity == velocity

    # Counts again once the ball has crossed to the other half
    ball.rect.x = 100
    assert ball.hit(0) is True
    assert ball.velocity.x == 4


def test_hit_ignored_when_moving_away_from_own_half():
    ball = Ball(100, 240, Velocity(x=4, y=2))
    assert ball.hit(5) is False
    assert ball.velocity == Velocity(x=4, y=2)


@pytest.mark.parametrize(
    "x, expected", [(-1, False), (0, True), (320, True), (640, True), (641, False)]
)
def test_in_bounds(x, expected):
    assert Ball(x, 240, Velocity(x=4, y=0)).in_bounds() is expected


def test_ball_copy_is_independent():
    ball = Ball(320, 240, Velocity(x=4, y=2), elapsed_seconds=2.0)
    ball_copy = ball.copy()
    ball_copy.update(0.5)
    assert (ball.x, ball.y, ball.elapsed_seconds) == (320, 240, 2.0)


@pytest.mark.parametrize(
    "y, expected", [(-30, 30), (500, 460), (1450, 470), (0, 0), (480, 480)]
)
def test_reflect_into_bounds(y, expected):
    assert reflect_into_bounds(y) == pytest.approx(expected)


@pytest.mark.parametrize(
    "y", [-1e20, -2000, -480.5, -1, 0, 240, 480, 481, 1000, 5000.5, 1e9, 1e20]
)
def test_reflect_into_bounds_stays_in_range_and_is_idempotent(y):
    reflected = reflect_into_bounds(y)
    assert 0 <= reflected <= constants.SCREEN_HEIGHT
    assert reflect_into_bounds(reflected) == reflected
