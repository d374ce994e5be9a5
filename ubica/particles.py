"""Short-lived coloured particles and the system that owns them."""

from __future__ import annotations

import math
import random
from typing import ClassVar, List, Optional, Tuple

import pygame

from ubica.constants import BURSTING_BUBBLE_PARTICLES_COUNT, PARTICLE_RADIUS, PI
from ubica.helpers import average_texture_color

Vector = Tuple[float, float]

_MAX_SPEED = 100.0
_LIFETIME = 1.0


class Particle:
    """A small circle flying in a random direction and fading out over one second."""

    def __init__(self, pos: Vector, color, rng: Optional[random.Random] = None) -> None:
        rng = rng or random
        self.position: Vector = (float(pos[0]), float(pos[1]))
        self.radius = PARTICLE_RADIUS
        self.color = pygame.Color(color)

        angle = rng.random() * 2 * PI
        speed = rng.random() * _MAX_SPEED
        self.velocity: Vector = (math.cos(angle) * speed, math.sin(angle) * speed)

        self.lifetime = _LIFETIME

    def update(self, time: float) -> None:
        """Move by the velocity over *time*, shorten the lifetime and fade accordingly."""
        x, y = self.position
        vx, vy = self.velocity
        self.position = (x + vx * time, y + vy * time)
        self.lifetime -= time
        alpha = int(255 * (self.lifetime / _LIFETIME))
        self.color.a = max(0, min(255, alpha))


class ParticleSystem:
    """Owns every live particle; obtain the shared one with :meth:`instance`."""

    _instance: ClassVar[Optional["ParticleSystem"]] = None

    def __init__(self) -> None:
        self.particles: List[Particle] = []

    @classmethod
    def instance(cls) -> "ParticleSystem":
        """Return the shared particle system, creating it on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Discard the shared particle system."""
        cls._instance = None

    def update(self, time: float) -> None:
        """Advance every particle and drop those whose lifetime has run out."""
        for particle in self.particles:
            particle.update(time)
        self.particles = [p for p in self.particles if p.lifetime > 0]

    def bursting_bubble(self, pos: Vector, texture: pygame.Surface) -> None:
        """Spawn a burst of particles at *pos* coloured like the average of *texture*."""
        color = average_texture_color(texture)
        self.particles.extend(
            Particle(pos, color) for _ in range(BURSTING_BUBBLE_PARTICLES_COUNT)
        )

    def draw(self, surface: pygame.Surface) -> None:
        """Draw every particle onto *surface*, honouring its transparency."""
        for particle in self.particles:
            self._draw_particle(surface, particle)

    @staticmethod
    def _draw_particle(surface: pygame.Surface, particle: Particle) -> None:
        radius = particle.radius
        diameter = max(1, round(radius * 2))
        dot = pygame.Surface((diameter, diameter), pygame.SRCALPHA)
        pygame.draw.circle(dot, particle.color, (diameter / 2, diameter / 2), radius)
        x, y = particle.position
        surface.blit(dot, (round(x), round(y)))