"""
Court scene Model
"""

from __future__ import annotations

import random
from dataclasses import dataclass

from mini_arcade_core.scenes.sim_scene import (  # pyright: ignore[reportMissingImports]
    BaseIntent,
    BaseTickContext,
    BaseWorld,
)

from duel_pong.constants import (
    BALL_COLOR,
    BALL_SIZE,
    BALL_SPEED,
    BALL_TIME_SCALE,
    PADDLE_MARGIN,
    PADDLE_SIZE,
    PADDLE_SPEED,
    PLAYER1_COLOR,
    PLAYER2_COLOR,
    POINTS_TO_WIN,
    SLOW_MO_SCALE,
    WALL_THICKNESS,
)
from duel_pong.entities import (
    Ball,
    Paddle,
    PlayerId,
    Wall,
    WallSide,
    build_paddles,
    build_walls,
)


@dataclass
class ScoreState:
    """
    Score state for the court scene.

    :ivar left (int): Score for Player 1 (left paddle).
    :ivar right (int): Score for Player 2 (right paddle).
    """

    left: int = 0
    right: int = 0


# Justification: many attributes needed for world state
# pylint: disable=too-many-instance-attributes
@dataclass
class CourtWorld(BaseWorld):
    """
    Court world state.

    :ivar viewport (tuple[float, float]): Court size (width, height).
    :ivar walls (dict[WallSide, Wall]): Court walls by side.
    :ivar left_paddle (Paddle): Player 1 paddle.
    :ivar right_paddle (Paddle): Player 2 paddle.
    :ivar ball (Ball): Ball entity.
    :ivar score (ScoreState): Current score state.
    :ivar points_to_win (int): Points that end the match.
    :ivar ball_time_scale (float): Seconds-to-ball-time factor.
    """

    viewport: tuple[float, float]
    walls: dict[WallSide, Wall]
    left_paddle: Paddle
    right_paddle: Paddle
    ball: Ball
    score: ScoreState
    points_to_win: int
    ball_time_scale: float

    paused: bool = False
    winner: PlayerId | None = None

    guard_p1: bool = False
    guard_p2: bool = False

    slow_ball: bool = False
    slow_mo_scale: float = 0.25

    @property
    def paddles(self) -> tuple[Paddle, Paddle]:
        """Both paddles, left first."""
        return self.left_paddle, self.right_paddle

    @property
    def running(self) -> bool:
        """Whether the simulation should advance this frame."""
        return not self.paused and self.winner is None


@dataclass(frozen=True)
class CourtIntent(BaseIntent):
    """
    Player intent for the court scene.

    :ivar move_left_paddle (float): Player 1 movement (-1.0 to +1.0).
    :ivar move_right_paddle (float): Player 2 movement (-1.0 to +1.0).
    :ivar pause (bool): Whether to pause the game.
    """

    move_left_paddle: float  # -1.0 (up) to +1.0 (down)
    move_right_paddle: float  # -1.0 (up) to +1.0 (down)
    pause: bool = False


# pylint: enable=too-many-instance-attributes


@dataclass
class CourtTickContext(BaseTickContext[CourtWorld, CourtIntent]):
    """
    Context for a court scene tick.

    :ivar input_frame (InputFrame): Current input frame.
    :ivar dt (float): Delta time since last tick.

    :ivar world (CourtWorld): Current court world state.
    :ivar commands (CommandQueue): Command queue.

    :ivar intent (Optional[CourtIntent]): Player intent for this tick.
    """


def build_world(
    viewport: tuple[float, float],
    *,
    points_to_win: int = POINTS_TO_WIN,
    rng: random.Random | None = None,
) -> CourtWorld:
    """
    Lay out a fresh court: walls, both paddles and a ball served from the
    center in a random direction.

    :param viewport: Court size (width, height).
    :type viewport: tuple[float, float]

    :param points_to_win: Points that end the match.
    :type points_to_win: int

    :param rng: Random source for the serve direction.
    :type rng: random.Random, optional

    :return: The new world.
    :rtype: CourtWorld
    """
    vw, vh = viewport
    left, right = build_paddles(
        vw,
        vh,
        PADDLE_SIZE,
        PADDLE_MARGIN,
        PADDLE_SPEED,
        (PLAYER1_COLOR, PLAYER2_COLOR),
    )
    return CourtWorld(
        viewport=(vw, vh),
        walls=build_walls(vw, vh, WALL_THICKNESS),
        left_paddle=left,
        right_paddle=right,
        ball=serve_ball(vw, vh, rng=rng),
        score=ScoreState(),
        points_to_win=points_to_win,
        ball_time_scale=BALL_TIME_SCALE,
        slow_mo_scale=SLOW_MO_SCALE,
    )


def serve_ball(
    width: float, height: float, *, rng: random.Random | None = None
) -> Ball:
    """Create a ball at the court center with a random direction."""
    ball_w, ball_h = BALL_SIZE
    return Ball.create(
        width / 2, height / 2, ball_w, ball_h, BALL_COLOR, BALL_SPEED, rng=rng
    )
