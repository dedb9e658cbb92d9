"""
Wall entity for the Duel Pong court.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from mini_arcade_core.spaces.d2.geometry2d import Position2D, Size2D

from duel_pong.entities.rect import CenteredRect


class WallSide(str, Enum):
    """Identity of a court wall."""

    TOP = "TOP"
    BOTTOM = "BOTTOM"
    LEFT = "LEFT"
    RIGHT = "RIGHT"


@dataclass
class Wall(CenteredRect):
    """
    Fixed court boundary.

    :ivar id (WallSide | str): Which side of the court the wall closes.
    :ivar center (Position2D): Center of the wall.
    :ivar size (Size2D): Size of the wall.
    """

    id: WallSide | str
    center: Position2D
    size: Size2D


def build_walls(
    width: float, height: float, thickness: float
) -> dict[WallSide, Wall]:
    """
    Build the four walls of a ``width`` x ``height`` court.

    Top and bottom walls lie inside the court edges and span its full
    width; side walls sit on the left/right edges and span its full height.

    :param width: Court width.
    :type width: float

    :param height: Court height.
    :type height: float

    :param thickness: Wall thickness.
    :type thickness: float

    :return: Walls keyed by side.
    :rtype: dict[WallSide, Wall]
    """
    half = thickness / 2
    return {
        WallSide.TOP: Wall(
            WallSide.TOP,
            Position2D(width / 2, half),
            Size2D(width, thickness),
        ),
        WallSide.BOTTOM: Wall(
            WallSide.BOTTOM,
            Position2D(width / 2, height - half),
            Size2D(width, thickness),
        ),
        WallSide.LEFT: Wall(
            WallSide.LEFT,
            Position2D(half, height / 2),
            Size2D(thickness, height),
        ),
        WallSide.RIGHT: Wall(
            WallSide.RIGHT,
            Position2D(width - half, height / 2),
            Size2D(thickness, height),
        ),
    }
