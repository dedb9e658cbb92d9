"""
Paddle entity for Duel Pong.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from mini_arcade_core.spaces.d2.geometry2d import Position2D, Size2D

from duel_pong.entities.rect import CenteredRect


class PlayerId(str, Enum):
    """Identity of the two paddles."""

    PLAYER1 = "Player 1"
    PLAYER2 = "Player 2"


RECOGNIZED_PLAYERS = (PlayerId.PLAYER1, PlayerId.PLAYER2)


@dataclass
class Paddle(CenteredRect):
    """
    Player-controlled paddle.

    :ivar id (PlayerId | str): Which player owns the paddle.
    :ivar center (Position2D): Center of the paddle.
    :ivar size (Size2D): Size of the paddle.
    :ivar color (tuple[int, int, int]): Fill color.
    :ivar speed (float): Vertical movement speed (units/sec).
    """

    id: PlayerId | str
    center: Position2D
    size: Size2D
    color: tuple[int, int, int] = (255, 255, 255)
    speed: float = 300.0

    def move(self, direction: float, dt: float, top: float, bottom: float):
        """
        Move vertically and keep the paddle between ``top`` and ``bottom``.

        :param direction: -1.0 (up) to +1.0 (down).
        :type direction: float

        :param dt: Elapsed seconds.
        :type dt: float

        :param top: Lowest y the paddle's top edge may reach.
        :type top: float

        :param bottom: Highest y the paddle's bottom edge may reach.
        :type bottom: float
        """
        y = self.center.y + direction * self.speed * dt
        y = max(top + self.half_height, min(bottom - self.half_height, y))
        self.center.y = y


def build_paddles(
    width: float,
    height: float,
    size: tuple[float, float],
    margin: float,
    speed: float,
    colors: tuple[tuple[int, int, int], tuple[int, int, int]],
) -> tuple[Paddle, Paddle]:
    """Create the left (Player 1) and right (Player 2) paddles."""
    pad_w, pad_h = size
    left = Paddle(
        PlayerId.PLAYER1,
        Position2D(margin + pad_w / 2, height / 2),
        Size2D(pad_w, pad_h),
        color=colors[0],
        speed=speed,
    )
    right = Paddle(
        PlayerId.PLAYER2,
        Position2D(width - margin - pad_w / 2, height / 2),
        Size2D(pad_w, pad_h),
        color=colors[1],
        speed=speed,
    )
    return left, right
