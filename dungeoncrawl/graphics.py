"""Window, sprite sheets and drawing."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field, replace
from pathlib import Path

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
import pygame  # noqa: E402

from dungeoncrawl import randomness  # noqa: E402
from dungeoncrawl.sprite import AnimatedSprite, Sprite  # noqa: E402
from dungeoncrawl.vec import Vec  # noqa: E402

_INTEGER = re.compile(r"[+-]?\d+")


@dataclass
class SpriteSheet:
    """The image file of a sheet and the named sprite frames it holds."""

    image: str
    sprites: dict[str, list[Sprite]] = field(default_factory=dict)


def parse_spritesheet(text: str) -> SpriteSheet:
    """Parse ``image`` then entries ``name x y width height [frames]``."""
    tokens = text.split()
    if not tokens:
        raise ValueError("sprite sheet names no image file")
    sheet = SpriteSheet(tokens[0])
    rest = tokens[1:]
    i = 0
    while i + 5 <= len(rest):
        name, *numbers = rest[i : i + 5]
        if not all(_INTEGER.fullmatch(token) for token in numbers):
            break
        x, y, width, height = map(int, numbers)
        i += 5
        frames = 1
        if i < len(rest) and _INTEGER.fullmatch(rest[i]):
            frames = int(rest[i])
            i += 1
        size = Vec(width, height)
        shift = Vec(-width, -2 * height) // 2  # anchor at bottom centre
        center = size // 2
        new = [
            Sprite(location=Vec(x + n * width, y), size=size, shift=shift, center=center)
            for n in range(frames)
        ]
        if new:
            sheet.sprites.setdefault(name, []).extend(new)
    return sheet


class Graphics:
    """The game window together with every loaded sprite."""

    def __init__(self, title: str, width: int, height: int) -> None:
        self.width = width
        self.height = height
        try:
            pygame.display.init()
            self.screen = pygame.display.set_mode((width, height))
        except pygame.error as error:
            pygame.display.quit()
            raise RuntimeError(f"Unable to initialize video: {error}") from error
        pygame.display.set_caption(title)
        self._clock = pygame.time.Clock()
        self._textures: list[pygame.Surface] = []
        self._texture_ids: dict[str, int] = {}
        self._sprites: dict[str, list[Sprite]] = {}

    def __enter__(self) -> Graphics:
        return self

    def __exit__(self, *exc_info) -> None:
        pygame.display.quit()

    def load_spritesheet(self, filename) -> None:
        """Load a sprite sheet description and the image it names."""
        filename = str(filename)
        try:
            text = Path(filename).read_text()
        except OSError as error:
            raise FileNotFoundError(f"Could not open filename: {filename}") from error
        sheet = parse_spritesheet(text)
        parent = filename[: filename.find("/") + 1]
        texture_id = self._texture_id(parent + sheet.image)
        for name, frames in sheet.sprites.items():
            self._sprites.setdefault(name, []).extend(
                replace(sprite, texture_id=texture_id) for sprite in frames
            )
        if not self._sprites:
            raise ValueError(f"Could not read any sprites from filename: {filename}")

    def _frames(self, name: str) -> list[Sprite]:
        try:
            return self._sprites[name]
        except KeyError:
            raise KeyError(f"Cannot find sprite: {name}") from None

    def get_sprite(self, name: str) -> Sprite:
        return self._frames(name)[0].copy()

    def get_animated_sprite(
        self,
        name: str,
        ticks_per_frame: int = 1,
        random_start: bool = False,
        shuffle_order: bool = False,
    ) -> AnimatedSprite:
        sprites = [sprite.copy() for sprite in self._frames(name)]
        if shuffle_order:
            randomness.shuffle(sprites)
        if len(sprites) > 1 and random_start:
            starting_frame = randomness.randint(0, len(sprites) - 1)
            return AnimatedSprite(sprites, ticks_per_frame, starting_frame)
        return AnimatedSprite(sprites, ticks_per_frame)

    def clear(self) -> None:
        self.screen.fill((0, 0, 0))

    def draw_rect(self, pixel: Vec, size: Vec, red: int, green: int, blue: int, alpha: int) -> None:
        if size.x <= 0 or size.y <= 0:
            return
        rect = pygame.Rect(pixel.x, pixel.y, size.x, size.y)
        if alpha >= 255:
            self.screen.fill((red, green, blue), rect)
        else:
            overlay = pygame.Surface(rect.size, pygame.SRCALPHA)
            overlay.fill((red, green, blue, max(alpha, 0)))
            self.screen.blit(overlay, rect.topleft)

    def draw_sprite(self, pixel: Vec, sprite: Sprite, scale: int = 1) -> None:
        if sprite.texture_id < 0:
            return
        texture = self._textures[sprite.texture_id]
        image = texture.subsurface(
            pygame.Rect(sprite.location.x, sprite.location.y, sprite.size.x, sprite.size.y)
        )
        x = pixel.x + sprite.shift.x * scale
        y = pixel.y + sprite.shift.y * scale
        w = sprite.size.x * scale
        h = sprite.size.y * scale
        if scale != 1:
            image = pygame.transform.scale(image, (w, h))
        if sprite.flip:
            image = pygame.transform.flip(image, True, False)
        if sprite.angle:
            pivot = pygame.math.Vector2(x + sprite.center.x * scale, y + sprite.center.y * scale)
            offset = pygame.math.Vector2(x + w / 2, y + h / 2) - pivot
            image = pygame.transform.rotate(image, -sprite.angle)
            center = pivot + offset.rotate(sprite.angle)
            rect = image.get_rect(center=(round(center.x), round(center.y)))
        else:
            rect = pygame.Rect(x, y, w, h)
        self.screen.blit(image, rect)

    def redraw(self) -> None:
        pygame.display.flip()
        self._clock.tick(60)

    def _texture_id(self, image_filename: str) -> int:
        if image_filename in self._texture_ids:
            return self._texture_ids[image_filename]
        try:
            texture = pygame.image.load(image_filename).convert_alpha()
        except (pygame.error, OSError) as error:
            raise RuntimeError(f"Unable to load image {image_filename}: {error}") from error
        texture_id = len(self._textures)
        self._texture_ids[image_filename] = texture_id
        self._textures.append(texture)
        return texture_id