# dungeoncrawl

Building blocks for a turn-based dungeon crawler: random dungeon layouts of
rooms, maze corridors and doors; symmetric shadow-casting field of view; fog
of war; breadth-first pathfinding; entities that take turns by energy;
frame-by-frame events; and sprite-sheet graphics drawn with pygame.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## What is in the package

| module | contents |
| --- | --- |
| `dungeoncrawl.vec` | `Vec`, an immutable integer pair with `+`, `-`, `*` by an int, `//` (rounding toward zero, `ZeroDivisionError` on zero) and ordering; `distance(a, b)`; `DIRECTIONS` (right, up, left, down) |
| `dungeoncrawl.grid` | `Grid(width, height, initval)`, indexed as `grid[x, y]` or `grid[vec]`; each cell starts as a deep copy of `initval`; out-of-bounds access raises `IndexError` |
| `dungeoncrawl.randomness` | `seed`, `randint(low, high)` (inclusive, `low < high` required), `probability(percentage)`, `random_choice` (mappings give `(key, value)` pairs), `shuffle` |
| `dungeoncrawl.timer` | `Timer().elapsed()`: seconds since creation or the previous call |
| `dungeoncrawl.sprite` | `Sprite` (texture region, shift, rotation centre, angle, flip) and `AnimatedSprite` (looping frames) |
| `dungeoncrawl.room` | `Room` and `overlaps(a, b)` |
| `dungeoncrawl.tile` | `TileType`, `Tile`, `Door` (opening makes its tile walkable) and the abstract `Item` |
| `dungeoncrawl.builder` | `Builder(room_placement_attempts)` with `generate(width, height)` and `simple(width, height)`; `format_layout(layout)` |
| `dungeoncrawl.decorator` | `Decorator(graphics, layout, rooms).create_dungeon()`: tile types, sprites, doors, torches, pillars and broken walls |
| `dungeoncrawl.dungeon` | `Dungeon`: neighbours, line-of-sight blocking, field of view, paths, fog updates, random open room tiles |
| `dungeoncrawl.fov` | `FieldOfView(dungeon).compute(position)` and its helpers (`Quadrant`, `Row`, `slope`, `is_symmetric`, rounding) |
| `dungeoncrawl.pathfinding` | `breadth_first(dungeon, start, goal)`: shortest path over non-wall tiles, `[]` if unreachable |
| `dungeoncrawl.fog` | `Fog`: overlay darkness, 0 near the viewer up to 0.7 for tiles seen before, 1 for tiles never seen |
| `dungeoncrawl.graphics` | `parse_spritesheet(text)` and `Graphics(title, width, height)`, a pygame window that loads sprite sheets and draws sprites and rectangles |
| `dungeoncrawl.camera` | `Camera(graphics, tilesize, zoom)`: world-to-screen mapping, zoom 1 to 8, drawing of dungeon, entities, fog, overlays and a health bar |
| `dungeoncrawl.controls` | `Input`: reads `Quit`, `Click` and key names from the pygame window and remembers the last key press |
| `dungeoncrawl.action` | `Action`, `Result`, `success()`, `failure()`, `alternative(action)` |
| `dungeoncrawl.event` | `Event` (runs for a number of frames, then hands over to `next_events`) and `Events` |
| `dungeoncrawl.entity` | `Team`, `Weapon`, `Entity` (position, health, inventory, behaviour, sprites) and `Entities` (turn order by energy) |
| `dungeoncrawl.settings` | `Settings.load(path)` |
| `dungeoncrawl.content.events` | `AudioEvent`, `Die`, `DropLoot`, `Hit`, `Lightning`, `Swing`, `Throw`, `Thrust`, `UpdateFOV` |
| `dungeoncrawl.content.items` | `Heart` (heals 3), `AxeItem`, `SwordItem` |
| `dungeoncrawl.content.weapons` | `Axe`, `Bite`, `Cleaver`, `Club`, `Knife`, `Spear`, `Sword` |

## Generating a layout

```python
from dungeoncrawl import randomness
from dungeoncrawl.builder import Builder, format_layout

randomness.seed(1)
layout, rooms = Builder(200).generate(41, 31)
print(format_layout(layout))
```

Width and height must be odd and at least 19; otherwise `generate` raises
`ValueError`. In the layout, `-1` is a wall buried in other walls, `0` a
wall, `1` floor and `2` a doorway. `Decorator` turns the layout into a
`Dungeon`, taking its sprites from a `Graphics` object (or anything with the
same `get_sprite` and `get_animated_sprite` methods).

## Settings files

`Settings.load(path)` reads whitespace-separated `key value` pairs. Every
key is required; a missing one raises `ValueError`, an unreadable file
`FileNotFoundError`:

| key | meaning |
| --- | --- |
| `title` | window title |
| `screen_width`, `screen_height` | window size in pixels |
| `tilesize` | pixels per tile |
| `zoom` | camera zoom |
| `map_width`, `map_height` | dungeon size in tiles |
| `room_placement_attempts` | how many times the builder tries to place a room |
| `tiles`, `heros`, `monsters`, `weapons`, `items`, `effects` | sprite sheet description files |
| `sounds` | sound list file |

A sprite sheet description begins with the image file name, then one entry
per sprite: `name x y width height [frames]`. `Graphics.load_spritesheet`
resolves the image relative to the description file.

## Entities, weapons and events

Entities, weapons and the events in `dungeoncrawl.content` work against an
engine object that you supply. It needs the attributes they use:
`dungeon` (a `Dungeon`), `graphics`, `camera`, `events` (an `Events`),
`audio` (with `play_sound(name)`) and `hero` (an `Entity`). Each round,
call `Entities.take_turn(engine)` until it returns `False` or events are
pending, then `Events.execute(engine)` to advance every running event by one
frame.

New actions, events, weapons and items are written by subclassing `Action`,
`Event`, `Weapon` and `Item`, as the classes in `dungeoncrawl.content` do.

## What the package does not do

The package is a set of parts, not a game you can start. It has no command,
no main loop that ties dungeon, entities, events, camera and input together,
and no sound playback: the engine object above, including its `audio`, is
yours to provide. Nor does it ship the actions entities choose on their turn
(moving, attacking, opening doors and chests, picking up items) or
ready-made heroes, monsters and chests with their behaviours; an entity's
`behavior` is any callable you assign that returns an `Action`.