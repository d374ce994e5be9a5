"""Registry of drawable objects that can be rendered in one pass."""

from __future__ import annotations

from typing import ClassVar, List, Optional, Union

import pygame

from ubica.sprite import Sprite


class Drawable:
    """An object that owns a sprite and registers itself for drawing.

    Built from a texture (a copy of it is kept) or from a ready sprite, the
    object is registered and drawn by :meth:`draw_all`. Built from anything
    else, it has no sprite and is not registered.
    """

    _registry: ClassVar[List["Drawable"]] = []

    def __init__(self, source: Union[pygame.Surface, Sprite, object, None] = None) -> None:
        if source is None:
            source = pygame.Surface((0, 0))

        self.texture: Optional[pygame.Surface]
        self.sprite: Optional[Sprite]
        if isinstance(source, pygame.Surface):
            self.texture = source.copy()
            self.sprite = Sprite(self.texture)
        elif isinstance(source, Sprite):
            self.texture = source.texture
            self.sprite = source
        else:
            self.texture = None
            self.sprite = None

        self.has_sprite = self.sprite is not None
        if self.has_sprite:
            Drawable._registry.append(self)

    def release(self) -> None:
        """Remove this object from the drawing registry."""
        if self in Drawable._registry:
            Drawable._registry.remove(self)

    def __enter__(self) -> "Drawable":
        return self

    def __exit__(self, *exc_info) -> None:
        self.release()

    @classmethod
    def draw_all(cls, surface: pygame.Surface) -> None:
        """Draw every registered object's sprite onto *surface*, in creation order."""
        for drawable in list(Drawable._registry):
            if drawable.has_sprite:
                drawable.sprite.draw(surface)