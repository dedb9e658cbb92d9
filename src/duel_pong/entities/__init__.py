"""
Entities package for Duel Pong.
This package contains the ball, paddles and walls of the court.
"""

from __future__ import annotations

from .ball import Ball
from .paddle import Paddle, PlayerId, build_paddles
from .wall import Wall, WallSide, build_walls

__all__ = [
    "Ball",
    "Paddle",
    "PlayerId",
    "Wall",
    "WallSide",
    "build_paddles",
    "build_walls",
]
