"""
Center-anchored rectangle helpers shared by the court entities.
"""

from __future__ import annotations

from mini_arcade_core.spaces.d2.geometry2d import Position2D, Size2D


class CenteredRect:
    """
    Mixin for entities whose ``center`` is the middle of an axis-aligned
    rectangle of ``size``.

    :ivar center (Position2D): Center of the rectangle.
    :ivar size (Size2D): Full width and height of the rectangle.
    """

    center: Position2D
    size: Size2D

    @property
    def half_width(self) -> float:
        """Half of the rectangle width."""
        return self.size.width / 2

    @property
    def half_height(self) -> float:
        """Half of the rectangle height."""
        return self.size.height / 2

    @property
    def left(self) -> float:
        """X of the left edge."""
        return self.center.x - self.half_width

    @property
    def right(self) -> float:
        """X of the right edge."""
        return self.center.x + self.half_width

    @property
    def top(self) -> float:
        """Y of the top edge (y grows downward)."""
        return self.center.y - self.half_height

    @property
    def bottom(self) -> float:
        """Y of the bottom edge."""
        return self.center.y + self.half_height

    def top_left(self) -> tuple[float, float]:
        """Top-left corner, as expected by the backend's draw_rect."""
        return self.left, self.top
