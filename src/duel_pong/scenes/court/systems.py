"""
Simulation systems for the court scene.

Each system has a ``name``, an ``order`` within the pipeline and a
``step(ctx)`` method run once per frame.
"""

from __future__ import annotations

import random
from dataclasses import dataclass

from mini_arcade_core.utils import logger

from duel_pong.entities import PlayerId, WallSide
from duel_pong.scenes.commands import GameOverCommand, PauseGameCommand
from duel_pong.scenes.court.models import CourtTickContext, serve_ball


@dataclass
class CourtPauseSystem:
    """System to handle pausing the match."""

    name: str = "court_pause"
    order: int = 12  # right after input

    def step(self, ctx: CourtTickContext):
        """Pause the game if pause intent is triggered."""
        if not ctx.intent or not ctx.intent.pause:
            return

        # avoid re-triggering every frame
        if not ctx.world.running:
            return

        ctx.world.paused = True
        ctx.commands.push(PauseGameCommand())


@dataclass
class PaddleSystem:
    """
    Move paddles based on intent, between the top and bottom walls.
    """

    name: str = "court_paddles"
    order: int = 20

    def step(self, ctx: CourtTickContext):
        """Move paddles based on intent."""
        if not ctx.world.running or ctx.intent is None:
            return

        top = ctx.world.walls[WallSide.TOP].bottom
        bottom = ctx.world.walls[WallSide.BOTTOM].top

        ctx.world.left_paddle.move(
            ctx.intent.move_left_paddle, ctx.dt, top, bottom
        )
        ctx.world.right_paddle.move(
            ctx.intent.move_right_paddle, ctx.dt, top, bottom
        )


@dataclass
class BallMovementSystem:
    """
    Advance the ball by the frame's elapsed time.
    """

    name: str = "court_ball_move"
    order: int = 30

    def step(self, ctx: CourtTickContext):
        """Move the ball."""
        if not ctx.world.running:
            return

        ball_dt = ctx.dt * ctx.world.ball_time_scale
        if ctx.world.slow_ball:
            ball_dt *= ctx.world.slow_mo_scale

        ctx.world.ball.advance(ball_dt)


@dataclass
class CourtCollisionSystem:
    """
    Check the ball against walls and paddles and apply the bounces.

    Top and bottom walls always bounce. A side wall only bounces while that
    side's guard is on; otherwise it is an open goal line.
    """

    name: str = "court_collision"
    order: int = 40

    def solid_walls(self, ctx: CourtTickContext) -> list[WallSide]:
        """Wall sides the ball bounces off this frame."""
        sides = [WallSide.TOP, WallSide.BOTTOM]
        if ctx.world.guard_p1:
            sides.append(WallSide.LEFT)
        if ctx.world.guard_p2:
            sides.append(WallSide.RIGHT)
        return sides

    def step(self, ctx: CourtTickContext):
        """Handle ball collisions with walls and paddles."""
        if not ctx.world.running:
            return

        ball = ctx.world.ball

        for side in self.solid_walls(ctx):
            wall = ctx.world.walls[side]
            if ball.collides_with_wall(wall):
                ball.on_wall_collision(wall.id)

        for paddle in ctx.world.paddles:
            if ball.collides_with_player(paddle):
                ball.on_player_collision(paddle.id)


@dataclass
class CourtRulesSystem:
    """
    Apply match rules: scoring, serving a new ball and game over.
    """

    name: str = "court_rules"
    order: int = 50
    rng: random.Random | None = None

    def _bounce_from_goal(self, ctx: CourtTickContext, side: WallSide):
        ball = ctx.world.ball
        wall = ctx.world.walls[side]

        # place ball just inside the guarded wall
        if side == WallSide.LEFT:
            ball.center.x = wall.right + ball.half_width
        else:
            ball.center.x = wall.left - ball.half_width

        ball.on_wall_collision(side)

    def _award_point(self, ctx: CourtTickContext, player: PlayerId):
        world = ctx.world
        if player == PlayerId.PLAYER1:
            world.score.left += 1
            points = world.score.left
        else:
            world.score.right += 1
            points = world.score.right

        logger.info(
            f"Point for {player.value}: "
            f"{world.score.left} - {world.score.right}"
        )

        vw, vh = world.viewport
        world.ball = serve_ball(vw, vh, rng=self.rng)

        if points >= world.points_to_win:
            world.winner = player
            logger.info(f"{player.value} wins the match")
            ctx.commands.push(GameOverCommand())

    def step(self, ctx: CourtTickContext):
        """Apply match rules."""
        if not ctx.world.running:
            return

        vw, _ = ctx.world.viewport
        x = ctx.world.ball.cx

        # ball center past the left/right court edge
        if x < 0:
            if ctx.world.guard_p1:
                self._bounce_from_goal(ctx, WallSide.LEFT)
                return
            self._award_point(ctx, PlayerId.PLAYER2)
            return

        if x > vw:
            if ctx.world.guard_p2:
                self._bounce_from_goal(ctx, WallSide.RIGHT)
                return
            self._award_point(ctx, PlayerId.PLAYER1)
