"""
Minimal main application for Duel Pong.
"""

from __future__ import annotations

from mini_arcade_core import (  # pyright: ignore[reportMissingImports]
    GameConfig,
    SceneRegistry,
    run_game,
)
from mini_arcade_core.utils import logger

# Justification: in editable installs, this module is provided by the package.
# pylint: disable=no-name-in-module
from mini_arcade_native_backend import (  # pyright: ignore[reportMissingImports]
    BackendSettings,
    FontSettings,
    NativeBackend,
    RendererSettings,
    WindowSettings,
)

from duel_pong.constants import ASSETS_ROOT, BACKGROUND, FPS, WINDOW_SIZE

# pylint: enable=no-name-in-module


def font_settings() -> list[FontSettings]:
    """Fonts to load; the bundled font is optional."""
    font_path = ASSETS_ROOT / "fonts" / "default.ttf"
    if not font_path.is_file():
        logger.info(f"No font at {font_path}, using backend default")
        return []
    return [FontSettings(name="default", path=str(font_path), size=24)]


def run():
    """
    Main entry point for Duel Pong.

    - Auto-discovers scenes from the `duel_pong.scenes` package.
    - Sets up the game window with specified dimensions and background color.
    - Runs the game with the initial scene set to "menu".
    """
    scene_registry = SceneRegistry(_factories={}).discover(
        "duel_pong.scenes", "mini_arcade_core.scenes"
    )

    w_width, w_height = WINDOW_SIZE
    backend_settings = BackendSettings(
        window=WindowSettings(
            width=w_width,
            height=w_height,
            title="Duel Pong",
            high_dpi=False,
        ),
        renderer=RendererSettings(background_color=BACKGROUND),
        fonts=font_settings(),
    )
    backend = NativeBackend(settings=backend_settings)

    game_config = GameConfig(
        initial_scene="menu",
        fps=FPS,
        backend=backend,
    )
    logger.info("Starting Duel Pong...")
    run_game(game_config=game_config, scene_registry=scene_registry)


if __name__ == "__main__":
    run()
