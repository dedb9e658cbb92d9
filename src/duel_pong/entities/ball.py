"""
Ball entity for the Duel Pong court.

The ball owns its center, a constant speed and a per-axis direction value.
The scene advances it each frame, asks it whether it touches a wall or a
paddle, and calls the matching reaction on contact.

Caller contract (not validated): ``elapsed`` passed to :meth:`Ball.advance`
is non-negative and ``speed`` is finite and non-zero.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Tuple, Union

from mini_arcade_core.spaces.d2.geometry2d import Position2D, Size2D
from mini_arcade_core.utils import logger

from duel_pong.entities.paddle import RECOGNIZED_PLAYERS, Paddle, PlayerId
from duel_pong.entities.rect import CenteredRect
from duel_pong.entities.wall import Wall, WallSide

Color = Union[Tuple[int, int, int], str]

_SIGNS = (1.0, -1.0)


@dataclass
class Ball(CenteredRect):
    """
    Ball entity for the court.

    :ivar center (Position2D): Center of the ball.
    :ivar size (Size2D): Size of the ball's bounding rectangle.
    :ivar color (Color): Fill color, only used for drawing.
    :ivar speed (float): Constant speed; its sign is ignored by reactions.
    :ivar dx (float): Horizontal direction, +1 right / -1 left.
    :ivar dy (float): Vertical direction, +1 down / -1 up.
    """

    center: Position2D
    size: Size2D
    color: Color
    speed: float
    dx: float = 1.0
    dy: float = 1.0

    # pylint: disable=too-many-arguments
    @classmethod
    def create(
        cls,
        cx: float,
        cy: float,
        width: float,
        height: float,
        color: Color,
        speed: float,
        *,
        rng: random.Random | None = None,
    ) -> Ball:
        """
        Create a ball centered at (cx, cy) heading in a random direction.

        Each axis gets an independent fair coin flip for its sign.

        :param rng: Random source; pass a seeded ``random.Random`` for
            deterministic directions. Defaults to the ``random`` module.
        :type rng: random.Random, optional

        :return: The new ball.
        :rtype: Ball
        """
        source = rng or random
        return cls(
            center=Position2D(cx, cy),
            size=Size2D(width, height),
            color=color,
            speed=speed,
            dx=source.choice(_SIGNS),
            dy=source.choice(_SIGNS),
        )

    # pylint: enable=too-many-arguments

    @property
    def cx(self) -> float:
        """X of the ball center."""
        return self.center.x

    @property
    def cy(self) -> float:
        """Y of the ball center."""
        return self.center.y

    def advance(self, elapsed: float):
        """
        Move the ball by ``direction * speed * elapsed`` on each axis.

        :param elapsed: Time since the previous update.
        :type elapsed: float
        """
        self.center.x = self.center.x + self.dx * self.speed * elapsed
        self.center.y = self.center.y + self.dy * self.speed * elapsed

    def collides_with_wall(self, wall: Wall) -> bool:
        """
        Check the ball against a wall on the wall's axis only.

        Top/bottom walls compare y edges, left/right walls compare x edges;
        the other axis is not checked. Unknown wall ids never collide.
        """
        side = wall.id
        if side == WallSide.TOP:
            return self.top <= wall.bottom
        if side == WallSide.BOTTOM:
            return self.bottom >= wall.top
        if side == WallSide.LEFT:
            return self.left <= wall.right
        if side == WallSide.RIGHT:
            return self.right >= wall.left
        return False

    def collides_with_player(self, player: Paddle) -> bool:
        """
        Check for a strict rectangle overlap with a recognized paddle.
        """
        if player.id not in RECOGNIZED_PLAYERS:
            return False

        return (
            self.left < player.right
            and self.right > player.left
            and self.top < player.bottom
            and self.bottom > player.top
        )

    def on_wall_collision(self, wall_id: WallSide | str):
        """
        Point the ball back into the court after touching ``wall_id``.

        Only the axis of that wall changes.
        """
        magnitude = abs(self.speed)
        if wall_id == WallSide.TOP:
            self.dy = magnitude
        elif wall_id == WallSide.BOTTOM:
            self.dy = -magnitude
        elif wall_id == WallSide.LEFT:
            self.dx = magnitude
        elif wall_id == WallSide.RIGHT:
            self.dx = -magnitude
        else:
            logger.debug(f"Ignoring collision with unknown wall {wall_id!r}")

    def on_player_collision(self, player_id: PlayerId | str):
        """
        Send the ball right off Player 1's paddle, left off anything else.

        The vertical direction is kept.
        """
        magnitude = abs(self.speed)
        if player_id == PlayerId.PLAYER1:
            self.dx = magnitude
        else:
            self.dx = -magnitude
