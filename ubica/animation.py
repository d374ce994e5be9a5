"""Frame-based sprite animation over a texture atlas."""

from __future__ import annotations

from typing import List

import pygame

from ubica.sprite import Sprite, TextureRect


class Animation:
    """Cycles a sprite through equally sized frames laid out in a row of an atlas."""

    def __init__(
        self,
        texture: pygame.Surface,
        x: int,
        y: int,
        width: int,
        height: int,
        frames_count: int,
        animation_speed: float,
        step: int,
    ) -> None:
        self.animation_speed = animation_speed
        self.current_frame = 0.0
        self.sprite = Sprite(texture)
        offsets = [x + i * step for i in range(frames_count)]
        self.frames: List[TextureRect] = [(left, y, width, height) for left in offsets]
        self.rotated_frames: List[TextureRect] = [
            (left + width, y, -width, height) for left in offsets
        ]

    def tick(self, time: float, rotate: bool) -> Sprite:
        """Advance by *time* seconds and return the sprite showing the current frame.

        With *rotate* the frame is mirrored horizontally.
        """
        self.current_frame += self.animation_speed * time
        if self.current_frame >= len(self.frames):
            self.current_frame -= len(self.frames)

        index = int(self.current_frame)
        frames = self.rotated_frames if rotate else self.frames
        self.sprite.texture_rect = frames[index]
        return self.sprite