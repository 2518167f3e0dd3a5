"""Sprites: regions of a texture, and frame sequences for animation."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace

from dungeoncrawl.vec import Vec


@dataclass
class Sprite:
    """A 2D image region plus how to place it on screen."""

    texture_id: int = -1  # -1 means no texture
    location: Vec = Vec(0, 0)  # upper left corner in the image
    size: Vec = Vec(0, 0)
    shift: Vec = Vec(0, 0)  # pixel offset when drawn
    center: Vec = Vec(0, 0)  # rotation pivot
    angle: float = 0.0
    flip: bool = False  # horizontal flip

    def copy(self) -> Sprite:
        return replace(self)

    def restore(self, other: Sprite) -> None:
        """Overwrite every attribute with the values of ``other``."""
        for f in fields(self):
            setattr(self, f.name, getattr(other, f.name))


class AnimatedSprite:
    """A looping sequence of sprite frames."""

    def __init__(self, sprites=None, ticks_per_frame: int = 1, starting_frame: int = 0) -> None:
        frames = [Sprite()] if sprites is None else [sprite.copy() for sprite in sprites]
        if not frames:
            raise ValueError("an animated sprite needs at least one frame")
        self.visible = True
        self._sprites = frames
        self.ticks_per_frame = ticks_per_frame
        self.current_frame = starting_frame
        self._time = 0

    def flip(self, flipped: bool) -> None:
        """Flip every frame horizontally."""
        for sprite in self._sprites:
            sprite.flip = flipped

    def update(self) -> None:
        """Advance the animation clock by one tick."""
        if not self.visible:
            return
        self._time += 1
        if self._time >= self.ticks_per_frame:
            self.current_frame = (self.current_frame + 1) % len(self._sprites)

    def current(self) -> Sprite:
        """A copy of the frame being shown."""
        return self._sprites[self.current_frame].copy()

    def number_of_frames(self) -> int:
        return len(self._sprites)