"""A small 2D game engine toolkit built on pygame: sprites, animation, entities, health bars, particles, timers and a bordered world."""

__version__ = "0.1.0"