"""Small utilities shared by engine components."""

from __future__ import annotations

from itertools import product

import pygame


def average_texture_color(texture: pygame.Surface) -> pygame.Color:
    """Return the mean colour of all pixels of *texture* that are not fully transparent.

    Each channel is averaged separately and truncated to an integer.
    Raises ValueError when the texture has no visible pixel.
    """
    width, height = texture.get_size()
    visible = [
        color
        for color in (texture.get_at(point) for point in product(range(width), range(height)))
        if color.a != 0
    ]
    if not visible:
        raise ValueError("texture has no visible pixels")

    count = len(visible)
    channels = (sum(values) / count for values in zip(*visible))
    return pygame.Color(*(int(value) for value in channels))