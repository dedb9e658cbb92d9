"""
Two-player court scene using mini-arcade-core.
"""

from __future__ import annotations

from dataclasses import dataclass

from mini_arcade_core.backend import Backend
from mini_arcade_core.backend.keys import Key
from mini_arcade_core.scenes.autoreg import (  # pyright: ignore[reportMissingImports]
    register_scene,
)
from mini_arcade_core.scenes.sim_scene import (  # pyright: ignore[reportMissingImports]
    Drawable,
    DrawCall,
    SimScene,
)
from mini_arcade_core.scenes.systems.builtins import (
    BaseRenderSystem,
    InputIntentSystem,
)

from duel_pong.constants import LINE, WALL_COLOR
from duel_pong.entities import Paddle, WallSide
from duel_pong.entities.rect import CenteredRect
from duel_pong.scenes.commands import GuardCommand, SlowMoCommand
from duel_pong.scenes.court.models import (
    CourtIntent,
    CourtTickContext,
    CourtWorld,
    build_world,
)
from duel_pong.scenes.court.systems import (
    BallMovementSystem,
    CourtCollisionSystem,
    CourtPauseSystem,
    CourtRulesSystem,
    PaddleSystem,
)


@dataclass
class CourtInputSystem(InputIntentSystem):
    """
    Process input and update intent.
    """

    name: str = "court_input"

    def build_intent(self, ctx: CourtTickContext):
        """Process input and update intent."""
        down = ctx.input_frame.keys_down

        # Player 1: W/S
        left = (1.0 if Key.S in down else 0.0) - (
            1.0 if Key.W in down else 0.0
        )
        # Player 2: UP/DOWN
        right = (1.0 if Key.DOWN in down else 0.0) - (
            1.0 if Key.UP in down else 0.0
        )

        return CourtIntent(
            move_left_paddle=left,
            move_right_paddle=right,
            pause=Key.ESCAPE in ctx.input_frame.keys_pressed,
        )


def fill_rect(backend: Backend, rect: CenteredRect, color):
    """Draw ``rect`` filled, converting its center to the top-left corner."""
    x, y = rect.top_left()
    backend.render.draw_rect(
        int(x),
        int(y),
        int(rect.size.width),
        int(rect.size.height),
        color=color,
    )


class DrawCenterLine(Drawable[CourtTickContext]):
    """
    Drawable to render the center dashed line.
    """

    def draw(self, backend: Backend, ctx: CourtTickContext):
        vw, vh = ctx.world.viewport

        x = int(vw / 2) - 2  # center line X (2px thickness)
        dash_w = 4
        dash_h = 16
        gap = 12

        y = 0
        while y < vh:
            backend.render.draw_rect(x, int(y), dash_w, dash_h, color=LINE)
            y += dash_h + gap


class DrawWalls(Drawable[CourtTickContext]):
    """
    Drawable to render the top/bottom walls and any guarded side wall.
    """

    def draw(self, backend: Backend, ctx: CourtTickContext):
        walls = ctx.world.walls
        fill_rect(backend, walls[WallSide.TOP], WALL_COLOR)
        fill_rect(backend, walls[WallSide.BOTTOM], WALL_COLOR)
        if ctx.world.guard_p1:
            fill_rect(backend, walls[WallSide.LEFT], WALL_COLOR)
        if ctx.world.guard_p2:
            fill_rect(backend, walls[WallSide.RIGHT], WALL_COLOR)


class DrawPaddle(Drawable[CourtTickContext]):
    """
    Drawable to render one paddle.
    """

    def __init__(self, paddle: Paddle):
        self.paddle = paddle

    def draw(self, backend: Backend, ctx: CourtTickContext):
        fill_rect(backend, self.paddle, self.paddle.color)


class DrawBall(Drawable[CourtTickContext]):
    """
    Drawable to render the ball.
    """

    def draw(self, backend: Backend, ctx: CourtTickContext):
        ball = ctx.world.ball
        fill_rect(backend, ball, ball.color)


class DrawScore(Drawable[CourtTickContext]):
    """
    Drawable to render the score and, once decided, the winner.
    """

    def draw(self, backend: Backend, ctx: CourtTickContext):
        vw, vh = ctx.world.viewport

        left_text = str(ctx.world.score.left)
        right_text = str(ctx.world.score.right)

        # measure pixel width of each score
        left_w, _ = backend.text.measure(left_text)

        center_x = vw // 2
        gap = 40  # distance from center line to each score

        # left score: right-aligned to the left side of center
        left_x = (center_x - gap) - left_w

        # right score: left-aligned to the right side of center
        right_x = center_x + gap

        backend.text.draw(left_x, 20, left_text, color=LINE)
        backend.text.draw(right_x, 20, right_text, color=LINE)

        if ctx.world.winner is not None:
            banner = f"{ctx.world.winner.value.upper()} WINS"
            banner_w, _ = backend.text.measure(banner)
            backend.text.draw(
                center_x - banner_w // 2, vh // 3, banner, color=LINE
            )


@dataclass
class CourtRenderSystem(BaseRenderSystem):
    """
    Render the court world.
    """

    name: str = "court_render"
    order: int = 100

    def step(self, ctx: CourtTickContext):
        """Render the court world."""

        ctx.draw_ops = [
            DrawCall(drawable=DrawCenterLine(), ctx=ctx),
            DrawCall(drawable=DrawWalls(), ctx=ctx),
            DrawCall(drawable=DrawPaddle(ctx.world.left_paddle), ctx=ctx),
            DrawCall(drawable=DrawPaddle(ctx.world.right_paddle), ctx=ctx),
            DrawCall(drawable=DrawBall(), ctx=ctx),
            DrawCall(drawable=DrawScore(), ctx=ctx),
        ]
        super().step(ctx)


@register_scene("court")
class CourtScene(SimScene[CourtTickContext, CourtWorld]):
    """
    Two-player match: Player 1 on W/S, Player 2 on UP/DOWN.
    """

    tick_context_type = CourtTickContext

    def on_enter(self):
        # Add cheats
        self.context.cheats.register(
            "guard",
            sequence=["G", "O", "D"],
            command_factory=lambda ctx: GuardCommand("P1"),
            clear_buffer_on_match=True,
        )
        self.context.cheats.register(
            "slow_mo",
            sequence=["S", "L", "O", "W"],
            command_factory=lambda ctx: SlowMoCommand(),
            clear_buffer_on_match=True,
        )
        # Justification: window typer is protocol, mypy can't infer correctly
        # pylint: disable=assignment-from-no-return
        vw, vh = self.context.services.window.get_virtual_size()
        # pylint: enable=assignment-from-no-return

        self.world = build_world((vw, vh))

        self.systems.extend(
            [
                CourtInputSystem(),
                CourtPauseSystem(),
                PaddleSystem(),
                BallMovementSystem(),
                CourtCollisionSystem(),
                CourtRulesSystem(),
                CourtRenderSystem(),
            ]
        )
