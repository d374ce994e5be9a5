"""A textured sprite with a position and an optional source rectangle."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

import pygame

TextureRect = Tuple[int, int, int, int]


@dataclass
class Sprite:
    """Draws a region of a texture at a position.

    ``texture_rect`` is ``(left, top, width, height)``; a negative width or
    height selects the region to the left of / above the origin and mirrors it.
    """

    texture: pygame.Surface
    position: Tuple[float, float] = (0.0, 0.0)
    texture_rect: Optional[TextureRect] = None

    def image(self) -> pygame.Surface:
        """Return the surface that this sprite shows."""
        if self.texture_rect is None:
            return self.texture
        left, top, width, height = self.texture_rect
        area = pygame.Rect(
            min(left, left + width),
            min(top, top + height),
            abs(width),
            abs(height),
        ).clip(self.texture.get_rect())
        image = self.texture.subsurface(area)
        if width < 0 or height < 0:
            image = pygame.transform.flip(image, width < 0, height < 0)
        return image

    def draw(self, surface: pygame.Surface) -> None:
        """Blit the sprite onto *surface* at its position."""
        x, y = self.position
        surface.blit(self.image(), (round(x), round(y)))