"""
Shared fixtures for the Duel Pong tests.
"""

from __future__ import annotations

import random
from types import SimpleNamespace

import pytest
from mini_arcade_core.spaces.d2.geometry2d import Position2D, Size2D

from duel_pong.entities import Ball
from duel_pong.scenes.court.models import build_world


class RecordingQueue:
    """Stand-in for the engine command queue."""

    def __init__(self):
        self.pushed = []

    def push(self, command):
        self.pushed.append(command)


@pytest.fixture
def make_ball():
    """Build a ball with a forced direction."""

    def _make(
        cx=50.0, cy=50.0, width=10.0, height=10.0, speed=0.2, dx=1.0, dy=1.0
    ):
        return Ball(
            Position2D(cx, cy), Size2D(width, height), "red", speed, dx, dy
        )

    return _make


@pytest.fixture
def world():
    return build_world((800, 600), rng=random.Random(0))


@pytest.fixture
def make_ctx(world):
    """Build a tick context around the shared world."""

    def _make(dt=1 / 60, intent=None):
        return SimpleNamespace(
            world=world, dt=dt, intent=intent, commands=RecordingQueue()
        )

    return _make
