"""A bordered bar showing a health value."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import pygame

Vector = Tuple[float, float]


@dataclass
class _Panel:
    position: Vector
    size: Vector
    color: pygame.Color

    def draw(self, surface: pygame.Surface) -> None:
        x, y = self.position
        width, height = self.size
        pygame.draw.rect(surface, self.color, pygame.Rect(round(x), round(y), round(width), round(height)))


class HealthBar:
    """A border, a background and a fill whose width follows the health value.

    A non-static bar is positioned above a parent of ``parent_size`` on each update.
    """

    BORDER_SIZE = 2.0
    PARENT_OFFSET = 7.0

    def __init__(
        self,
        size: Vector,
        pos: Vector,
        health: float,
        border_color,
        background_color,
        health_color,
        is_static: bool = True,
        parent_size: Vector = (-1.0, -1.0),
    ) -> None:
        border_size = (float(size[0]), float(size[1]))
        border_pos = (pos[0] - size[0] / 2, pos[1] - size[1] - self.PARENT_OFFSET)
        inset = self.BORDER_SIZE * 2

        self.parent_size = (float(parent_size[0]), float(parent_size[1]))
        self.health = health
        self.is_static = is_static
        self.size = (border_size[0] - inset, border_size[1] - inset)
        self.position = (border_pos[0] + inset, border_pos[1] + inset)

        self.border = _Panel(border_pos, border_size, pygame.Color(border_color))
        self.background = _Panel(self.position, self.size, pygame.Color(background_color))
        self.fill = _Panel(self.position, self.size, pygame.Color(health_color))

        self.chunk_size = self.size[0] / health

    def update(self, health: float, pos: Vector) -> None:
        """Resize the fill for *health*; a non-static bar also follows *pos*."""
        if not self.is_static:
            width, height = self.size
            border_pos = (
                pos[0] + self.parent_size[0] / 2 - width / 2 - self.BORDER_SIZE,
                pos[1] - height - self.PARENT_OFFSET,
            )
            self.position = (border_pos[0] + self.BORDER_SIZE, border_pos[1] + self.BORDER_SIZE)
            self.border.position = border_pos
            self.background.position = self.position
            self.fill.position = self.position

        fill_width = self.chunk_size * health if health > 0 else 0.0
        self.fill.size = (fill_width, self.size[1])

    def draw(self, surface: pygame.Surface) -> None:
        """Draw border, background and fill onto *surface*."""
        for panel in (self.border, self.background, self.fill):
            panel.draw(surface)