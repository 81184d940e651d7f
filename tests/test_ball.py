import random

import pygame
import pytest

from pypong.ball import Ball, Score
from pypong.paddle import Paddle
from pypong.settings import Settings

SETTINGS = Settings(1000, 500)


class Recorder:
    def __init__(self):
        self.events = []

    def paddle(self):
        self.events.append("paddle")

    def wall(self):
        self.events.append("wall")

    def score(self):
        self.events.append("score")


@pytest.fixture
def recorder():
    return Recorder()


@pytest.fixture
def ball(recorder):
    return Ball(SETTINGS, recorder, random.Random(7))


def test_initial_ball_heads_left_from_center(ball):
    assert (ball.x, ball.y) == (SETTINGS.width / 2, SETTINGS.height / 2)
    assert ball.vx < 0


@pytest.mark.parametrize("seed", range(30))
@pytest.mark.parametrize("is_right", [True, False])
def test_reset_speeds_within_range(seed, is_right):
    ball = Ball(SETTINGS, rng=random.Random(seed))
    ball.reset(is_right)
    sx, sy = SETTINGS.ball_speed_x(), SETTINGS.ball_speed_y()
    assert sx <= abs(ball.vx) <= sx * 1.5
    assert sy <= abs(ball.vy) <= sy * 1.5
    assert (ball.vx > 0) == is_right


def test_reset_picks_both_vertical_directions():
    ball = Ball(SETTINGS, rng=random.Random(3))
    signs = set()
    for _ in range(50):
        ball.reset(True)
        signs.add(ball.vy > 0)
    assert signs == {True, False}


def test_move_adds_velocity(ball):
    ball.x, ball.y, ball.vx, ball.vy = 100.0, 200.0, 3.0, -2.0
    ball.move()
    assert ball.velocity == (3.0, -2.0)
    assert (ball.x, ball.y) == (103.0, 198.0)


def test_top_wall_bounce(ball, recorder):
    ball.x, ball.y, ball.vx, ball.vy = 300.0, -3.0, 4.0, -2.0
    score = ball.check_collisions()
    assert score == Score(0, False)
    assert ball.y == 0
    assert ball.vy == 2.0
    assert recorder.events == ["wall"]


def test_bottom_wall_bounce(ball, recorder):
    ball.x, ball.y, ball.vx, ball.vy = 300.0, float(SETTINGS.height), 4.0, 2.0
    ball.check_collisions()
    assert ball.y + 2 * ball.radius == pytest.approx(SETTINGS.height)
    assert ball.vy == -2.0
    assert recorder.events == ["wall"]


def test_left_exit_scores_for_right_player(ball, recorder):
    ball.x, ball.y = -1.0, 200.0
    score = ball.check_collisions()
    assert score == Score(1, True)
    assert ball.vx > 0
    assert (ball.x, ball.y) == (SETTINGS.width / 2, SETTINGS.height / 2)
    assert recorder.events == ["score"]


def test_right_exit_scores_for_left_player(ball, recorder):
    ball.x, ball.y = SETTINGS.width - ball.radius, 200.0
    score = ball.check_collisions()
    assert score == Score(1, False)
    assert ball.vx < 0
    assert recorder.events == ["score"]


def test_no_collision_returns_empty_score(ball, recorder):
    ball.x, ball.y = 300.0, 200.0
    assert ball.check_collisions() == Score()
    assert recorder.events == []


def test_miss_leaves_velocity(ball, recorder):
    paddle = Paddle(SETTINGS, False)
    ball.x, ball.y, ball.vx, ball.vy = 500.0, 200.0, -5.0, 1.0
    assert ball.check_object_collisions(paddle) is False
    assert ball.velocity == (-5.0, 1.0)
    assert recorder.events == []


def test_hit_from_right_side_of_left_paddle(ball, recorder):
    paddle = Paddle(SETTINGS, False)
    ball.x = paddle.x - ball.radius / 2
    ball.y = paddle.y - ball.radius
    ball.vx, ball.vy = -5.0, 1.0
    assert ball.check_object_collisions(paddle) is True
    assert ball.x == pytest.approx(paddle.x + paddle.width / 2)
    assert ball.vx > 5.0
    assert ball.vy == pytest.approx(1.0)
    assert recorder.events == ["paddle"]
    assert ball.check_object_collisions(paddle) is False


def test_hit_from_left_side_of_right_paddle(ball, recorder):
    paddle = Paddle(SETTINGS, True)
    ball.x = paddle.x - ball.radius * 1.5
    ball.y = paddle.y - ball.radius
    ball.vx, ball.vy = 5.0, 0.0
    assert ball.check_object_collisions(paddle) is True
    assert ball.x + 2 * ball.radius == pytest.approx(paddle.x - paddle.width / 2)
    assert ball.vx < -5.0
    assert recorder.events == ["paddle"]


def test_horizontal_speed_is_capped(ball):
    paddle = Paddle(SETTINGS, False)
    ball.x = paddle.x - ball.radius / 2
    ball.y = paddle.y - ball.radius
    ball.vx, ball.vy = -31.9, 0.0
    ball.check_object_collisions(paddle)
    assert ball.vx == 32.0


def test_vertical_speed_is_capped(ball):
    paddle = Paddle(SETTINGS, False)
    ball.x = paddle.x - ball.radius / 2
    ball.y = paddle.y - paddle.height / 2 - ball.radius
    ball.vx, ball.vy = -5.0, -6.0
    ball.check_object_collisions(paddle)
    assert ball.vy == -8.0


def test_bounds_cover_diameter(ball):
    ball.x, ball.y = 10.0, 20.0
    assert ball.bounds() == (10.0, 20.0, ball.radius * 2, ball.radius * 2)


def test_draw_paints_disc(ball):
    surface = pygame.Surface((SETTINGS.width, SETTINGS.height))
    surface.fill((0, 0, 0))
    ball.x, ball.y = 100.0, 100.0
    ball.draw(surface)
    center = (round(ball.x + ball.radius), round(ball.y + ball.radius))
    assert surface.get_at(center) == (255, 255, 255, 255)
    assert surface.get_at((5, 5)) == (0, 0, 0, 255)