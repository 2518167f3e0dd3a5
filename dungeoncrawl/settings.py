"""Game settings read from a whitespace-separated key/value file."""

from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path

_INTEGER_FIELDS = frozenset(
    {
        "screen_width",
        "screen_height",
        "tilesize",
        "zoom",
        "map_width",
        "map_height",
        "room_placement_attempts",
    }
)


@dataclass
class Settings:
    """Window, camera, dungeon and asset settings."""

    path: Path
    title: str
    screen_width: int
    screen_height: int
    tilesize: int
    zoom: int
    tiles: str
    heros: str
    monsters: str
    weapons: str
    items: str
    effects: str
    sounds: str
    map_width: int
    map_height: int
    room_placement_attempts: int

    @classmethod
    def load(cls, path) -> Settings:
        """Read settings from a file of ``key value`` pairs."""
        path = Path(path).absolute()
        try:
            text = path.read_text()
        except OSError as error:
            raise FileNotFoundError(f"Could not open settings file: {path}") from error

        tokens = text.split()
        parameters = dict(zip(tokens[0::2], tokens[1::2]))

        values = {}
        for f in fields(cls):
            if f.name == "path":
                continue
            try:
                raw = parameters[f.name]
            except KeyError:
                raise ValueError(f"Parameter '{f.name}' not found in {path}") from None
            if f.name in _INTEGER_FIELDS:
                try:
                    values[f.name] = int(raw)
                except ValueError:
                    raise ValueError(
                        f"Parameter '{f.name}' in {path} is not an integer: {raw!r}"
                    ) from None
            else:
                values[f.name] = raw
        return cls(path=path, **values)