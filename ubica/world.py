"""The single game world holding the background and the border tiles."""

from __future__ import annotations

from typing import ClassVar, List, Optional

import pygame

from ubica.constants import SPRITE_SIZE, WORLD_HEIGHT, WORLD_WIDTH
from ubica.sprite import Sprite


class World:
    """Holds the background sprite and the border tile sprites.

    Obtain the shared instance with :meth:`get_world`.
    """

    _instance: ClassVar[Optional["World"]] = None

    def __init__(self) -> None:
        self.background_texture: Optional[pygame.Surface] = None
        self.border_texture: Optional[pygame.Surface] = None
        self.background_sprite: Optional[Sprite] = None
        self.border_sprites: List[Sprite] = []

    @classmethod
    def get_world(cls) -> "World":
        """Return the shared world, creating it on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Discard the shared world; the next :meth:`get_world` creates a new one."""
        cls._instance = None

    def init_world(self, background: pygame.Surface, border: pygame.Surface) -> None:
        """Store copies of the textures and lay border tiles along all four edges."""
        self.background_texture = background.copy()
        self.border_texture = border.copy()

        across = int(WORLD_WIDTH / SPRITE_SIZE) + 1
        down = int(WORLD_HEIGHT / SPRITE_SIZE) + 1

        positions = [
            *((i * SPRITE_SIZE, 0.0) for i in range(across)),
            *((i * SPRITE_SIZE, WORLD_HEIGHT) for i in range(across)),
            *((0.0, i * SPRITE_SIZE) for i in range(down)),
            *((WORLD_WIDTH, i * SPRITE_SIZE) for i in range(down)),
        ]
        self.border_sprites.extend(Sprite(self.border_texture, position) for position in positions)

        self.background_sprite = Sprite(self.background_texture)