"""Base classes for objects and characters that live in the game world."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional, Tuple

import pygame

from ubica.animation import Animation
from ubica.drawable import Drawable
from ubica.health_bar import HealthBar

Vector = Tuple[float, float]


class Direction(Enum):
    """The way a character is facing."""

    LEFT = 0
    RIGHT = 1


class GameObject(Drawable):
    """A drawable object with a position and a size."""

    def __init__(self, texture: Optional[pygame.Surface] = None) -> None:
        super().__init__(texture)
        self.size: Vector = (0.0, 0.0)
        self.position: Vector = (0.0, 0.0)


class Pickable(GameObject, ABC):
    """A game object that can be collected once."""

    def __init__(self, texture: Optional[pygame.Surface] = None) -> None:
        super().__init__(texture)
        self.picked = False

    def _common_picked(self) -> None:
        """Mark the object as collected; subclasses call this from :meth:`on_picked`."""
        self.picked = True

    @abstractmethod
    def on_picked(self) -> None:
        """React to being collected."""


class Character(Drawable, ABC):
    """A drawable entity with health, speed, a facing direction and an optional health bar."""

    def __init__(self, texture: pygame.Surface) -> None:
        super().__init__(texture)
        self.health = 0.0
        self.speed = 0.0
        self.size: Vector = (0.0, 0.0)
        self.position: Vector = (0.0, 0.0)
        self.run_animation: Optional[Animation] = None
        self.health_bar: Optional[HealthBar] = None
        self.direction = Direction.RIGHT

    @abstractmethod
    def update(self, time: float) -> None:
        """Advance the character by *time* seconds."""

    def take_damage(self, damage: float) -> None:
        """Lower health by *damage*."""
        self.health -= damage

    def add_hp(self, health: float) -> None:
        """Raise health by *health*."""
        self.health += health