"""
Tests for the court scene systems.
"""

from __future__ import annotations

import random
from types import SimpleNamespace

import pytest

from duel_pong.entities import PlayerId, WallSide
from duel_pong.scenes.commands import GameOverCommand, PauseGameCommand
from duel_pong.scenes.court.systems import (
    BallMovementSystem,
    CourtCollisionSystem,
    CourtPauseSystem,
    CourtRulesSystem,
    PaddleSystem,
)


def intent(left=0.0, right=0.0, pause=False):
    return SimpleNamespace(
        move_left_paddle=left, move_right_paddle=right, pause=pause
    )


def place_ball(world, x, y, dx, dy):
    world.ball.center.x = x
    world.ball.center.y = y
    world.ball.dx = dx
    world.ball.dy = dy


def test_world_is_laid_out_around_center(world):
    assert world.ball.cx == 400
    assert world.ball.cy == 300
    assert world.ball.speed == 1.0
    assert world.running
    assert (world.score.left, world.score.right) == (0, 0)


class TestBallMovement:
    def test_scales_elapsed_seconds(self, world, make_ctx):
        place_ball(world, 400, 300, 1.0, -1.0)
        BallMovementSystem().step(make_ctx(dt=0.01))

        step = 0.01 * world.ball_time_scale
        assert world.ball.cx == pytest.approx(400 + step)
        assert world.ball.cy == pytest.approx(300 - step)

    def test_slow_ball(self, world, make_ctx):
        place_ball(world, 400, 300, 1.0, 1.0)
        world.slow_ball = True
        BallMovementSystem().step(make_ctx(dt=0.01))

        step = 0.01 * world.ball_time_scale * world.slow_mo_scale
        assert world.ball.cx == pytest.approx(400 + step)

    def test_paused_world_does_not_move(self, world, make_ctx):
        world.paused = True
        BallMovementSystem().step(make_ctx(dt=1.0))
        assert (world.ball.cx, world.ball.cy) == (400, 300)


class TestPaddles:
    def test_paddles_stay_between_walls(self, world, make_ctx):
        PaddleSystem().step(make_ctx(dt=10.0, intent=intent(-1.0, 1.0)))

        assert world.left_paddle.top == pytest.approx(
            world.walls[WallSide.TOP].bottom
        )
        assert world.right_paddle.bottom == pytest.approx(
            world.walls[WallSide.BOTTOM].top
        )

    def test_no_intent_no_move(self, world, make_ctx):
        PaddleSystem().step(make_ctx(dt=1.0))
        assert world.left_paddle.center.y == 300


class TestCollision:
    def test_bounces_off_top_and_bottom(self, world, make_ctx):
        place_ball(world, 400, 12, -1.0, -1.0)
        CourtCollisionSystem().step(make_ctx())
        assert (world.ball.dx, world.ball.dy) == (-1.0, 1.0)

        place_ball(world, 400, 588, 1.0, 1.0)
        CourtCollisionSystem().step(make_ctx())
        assert (world.ball.dx, world.ball.dy) == (1.0, -1.0)

    def test_side_walls_are_open_goals(self, world, make_ctx):
        place_ball(world, 5, 300, -1.0, 1.0)
        CourtCollisionSystem().step(make_ctx())
        assert world.ball.dx == -1.0

    def test_guarded_side_wall_bounces(self, world, make_ctx):
        world.guard_p1 = True
        place_ball(world, 5, 300, -1.0, 1.0)
        CourtCollisionSystem().step(make_ctx())
        assert world.ball.dx == 1.0

        world.guard_p2 = True
        place_ball(world, 795, 300, 1.0, 1.0)
        CourtCollisionSystem().step(make_ctx())
        assert world.ball.dx == -1.0

    def test_paddles_send_ball_back(self, world, make_ctx):
        left = world.left_paddle
        place_ball(world, left.right, left.center.y, -1.0, 1.0)
        CourtCollisionSystem().step(make_ctx())
        assert (world.ball.dx, world.ball.dy) == (1.0, 1.0)

        right = world.right_paddle
        place_ball(world, right.left, right.center.y, 1.0, -1.0)
        CourtCollisionSystem().step(make_ctx())
        assert (world.ball.dx, world.ball.dy) == (-1.0, -1.0)

    def test_ball_far_from_everything_keeps_direction(self, world, make_ctx):
        place_ball(world, 400, 300, 1.0, -1.0)
        CourtCollisionSystem().step(make_ctx())
        assert (world.ball.dx, world.ball.dy) == (1.0, -1.0)


class TestRules:
    def test_left_goal_scores_for_player_two(self, world, make_ctx):
        place_ball(world, -1, 200, -1.0, 1.0)
        ctx = make_ctx()
        CourtRulesSystem(rng=random.Random(3)).step(ctx)

        assert (world.score.left, world.score.right) == (0, 1)
        assert (world.ball.cx, world.ball.cy) == (400, 300)
        assert ctx.commands.pushed == []

    def test_right_goal_scores_for_player_one(self, world, make_ctx):
        place_ball(world, 801, 200, 1.0, 1.0)
        CourtRulesSystem().step(make_ctx())
        assert (world.score.left, world.score.right) == (1, 0)

    def test_ball_inside_court_scores_nothing(self, world, make_ctx):
        place_ball(world, 0, 200, -1.0, 1.0)
        CourtRulesSystem().step(make_ctx())
        assert (world.score.left, world.score.right) == (0, 0)
        assert world.ball.cx == 0

    def test_guard_bounces_instead_of_scoring(self, world, make_ctx):
        world.guard_p1 = True
        place_ball(world, -20, 200, -1.0, 1.0)
        CourtRulesSystem().step(make_ctx())

        wall = world.walls[WallSide.LEFT]
        assert (world.score.left, world.score.right) == (0, 0)
        assert world.ball.left == pytest.approx(wall.right)
        assert world.ball.dx == 1.0

    def test_winning_point_ends_match(self, world, make_ctx):
        world.score.left = world.points_to_win - 1
        place_ball(world, 801, 200, 1.0, 1.0)
        ctx = make_ctx()
        CourtRulesSystem().step(ctx)

        assert world.winner == PlayerId.PLAYER1
        assert not world.running
        assert len(ctx.commands.pushed) == 1
        assert isinstance(ctx.commands.pushed[0], GameOverCommand)

        # finished match no longer moves or scores
        place_ball(world, 801, 200, 1.0, 1.0)
        CourtRulesSystem().step(make_ctx())
        BallMovementSystem().step(make_ctx(dt=1.0))
        assert world.score.left == world.points_to_win
        assert world.ball.cx == 801


class TestPause:
    def test_pause_pushes_overlay_once(self, world, make_ctx):
        ctx = make_ctx(intent=intent(pause=True))
        CourtPauseSystem().step(ctx)
        CourtPauseSystem().step(ctx)

        assert world.paused
        assert len(ctx.commands.pushed) == 1
        assert isinstance(ctx.commands.pushed[0], PauseGameCommand)

    def test_no_pause_intent(self, world, make_ctx):
        CourtPauseSystem().step(make_ctx(intent=intent()))
        assert not world.paused


def test_rally_across_frames(world, make_ctx):
    """Ball served up-right bounces off the top wall and keeps going."""
    place_ball(world, 400, 300, 1.0, -1.0)
    systems = [
        BallMovementSystem(),
        CourtCollisionSystem(),
        CourtRulesSystem(),
    ]

    for _ in range(60):
        ctx = make_ctx(dt=1 / 60)
        for system in systems:
            system.step(ctx)

    # 360px of travel at 45 degrees, top wall reached on frame 48
    assert world.ball.dy == 1.0
    assert world.ball.dx == 1.0
    assert world.ball.cx == pytest.approx(760)
    assert (world.score.left, world.score.right) == (0, 0)
