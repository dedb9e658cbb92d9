"""
Module defining game commands for Duel Pong.
"""

from __future__ import annotations

from typing import Literal

from mini_arcade_core.engine.commands import Command, CommandContext
from mini_arcade_core.utils import logger

Player = Literal["P1", "P2"]


class StartGameCommand(Command):
    """BaseCommand to start the game."""

    def execute(
        self,
        context: CommandContext,
    ):
        context.services.scenes.change("court")


class PauseGameCommand(Command):
    """
    Command to pause the game.
    """

    def execute(self, context: CommandContext):
        context.services.scenes.push("pause", as_overlay=True)


class GameOverCommand(Command):
    """
    Command to show the game over overlay.
    """

    def execute(self, context: CommandContext):
        context.services.scenes.push("game_over", as_overlay=True)


class GuardCommand(Command):
    """
    Command to toggle a player's guard: that side's wall turns solid.
    """

    def __init__(self, player: Player):
        """
        :param player: "P1" or "P2"
        :type player: Player
        """
        self.player = player

    def execute(self, context: CommandContext):
        world = context.world
        if world is None:
            return

        logger.info(f"Toggling guard for {self.player}")
        if self.player == "P1":
            world.guard_p1 = not world.guard_p1
        elif self.player == "P2":
            world.guard_p2 = not world.guard_p2


class SlowMoCommand(Command):
    """
    Command to toggle slow ball mode.
    """

    def execute(self, context: CommandContext):
        world = context.world
        if world is None:
            return

        world.slow_ball = not world.slow_ball
        logger.info(f"Slow ball {'on' if world.slow_ball else 'off'}")


class ContinueCommand(Command):
    """
    Command to continue the game from pause.
    """

    def execute(self, context: CommandContext):
        world = context.world
        if world is not None:
            world.paused = False
            logger.info("Resuming game from pause")

        context.services.scenes.pop()


class RestartCommand(Command):
    """
    Command to start a fresh match from the game over overlay.
    """

    def execute(self, context: CommandContext):
        context.services.scenes.change("court")


class BackToMenuCommand(Command):
    """
    Command to return to the main menu.
    """

    def execute(self, context: CommandContext):
        context.services.scenes.change("menu")
