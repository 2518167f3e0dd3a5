"""Random dungeon layouts: rooms joined by maze corridors and doors.

A layout is a grid of integers: -1 for walls buried in other walls,
0 for walls, 1 for walkable floor and 2 for doorways.
"""

from __future__ import annotations

from typing import Iterator, Optional

from dungeoncrawl import randomness
from dungeoncrawl.grid import Grid
from dungeoncrawl.room import Room, overlaps
from dungeoncrawl.vec import DIRECTIONS, Vec, distance

Connector = tuple[Vec, int, int]


def format_layout(layout: Grid) -> str:
    """Draw a layout as text inside a box, buried walls shown as blanks."""
    border = "+" + "-" * layout.width + "+\n"
    rows = []
    for y in range(layout.height):
        cells = "".join(
            " " if layout[x, y] == -1 else str(layout[x, y]) for x in range(layout.width)
        )
        rows.append(f"|{cells}|\n")
    return border + "".join(rows) + border


class Builder:
    """Generates dungeon layouts and the rooms placed in them."""

    def __init__(self, room_placement_attempts: int) -> None:
        self.room_placement_attempts = room_placement_attempts
        self._id = 0
        self.rooms: list[Room] = []

    def generate(self, width: int, height: int) -> tuple[Grid, list[Room]]:
        """Build a random layout of the given odd dimensions (at least 19)."""
        if width % 2 == 0 or height % 2 == 0:
            raise ValueError(f"width and height must be odd numbers: ({width}, {height})")
        if width < 19 or height < 19:
            raise ValueError(f"width and height must be at least 19: ({width}, {height})")

        layout: Grid = Grid(width, height, 0)
        self._id = 1
        self.rooms = []

        self._add_rooms(layout)
        self._create_corridors(layout)

        connectors = self._reduce_connectors(self._find_all_connectors(layout))

        for y in range(1, layout.height):
            for x in range(1, layout.width):
                if layout[x, y] != 0:
                    layout[x, y] = 1

        for position in connectors:
            layout[position] = 2

        self._remove_deadends(layout)
        self._mark_surrounded_walls(layout)

        return layout, list(self.rooms)

    def simple(self, width: int, height: int) -> tuple[Grid, list[Room]]:
        """A single walled room with one wall block at (3, 2)."""
        layout: Grid = Grid(width, height, 0)
        for y in range(layout.height):
            for x in range(layout.width):
                on_border = y in (0, layout.height - 1) or x in (0, layout.width - 1)
                layout[x, y] = 0 if on_border else 1
        layout[3, 2] = 0
        self.rooms.append(Room(Vec(1, 1), Vec(layout.width - 2, layout.height - 2)))
        return layout, list(self.rooms)

    # rooms

    def _add_rooms(self, layout: Grid) -> None:
        for _ in range(self.room_placement_attempts):
            new_room = self._generate_room(layout)
            if (
                new_room.position.x >= layout.width - 2
                or new_room.position.y >= layout.height - 2
            ):
                continue
            if any(overlaps(new_room, room) for room in self.rooms):
                continue
            self.rooms.append(new_room)
            self._imprint_room(layout, new_room, self._id)
            self._id += 1

    def _generate_room(self, layout: Grid) -> Room:
        size = Vec(1, 1) * (1 + 2 * randomness.randint(1, 3))

        size_variation = 2 * randomness.randint(0, 1 + size.x // 2)
        if randomness.probability(50):
            size = Vec(size.x + size_variation, size.y)
        else:
            size = Vec(size.x, size.y + size_variation)

        x = randomness.randint(0, layout.width - 2 - size.x) // 2 * 2 + 1
        y = randomness.randint(0, layout.height - 2 - size.y) // 2 * 2 + 1
        return Room(Vec(x, y), size)

    @staticmethod
    def _imprint_room(layout: Grid, room: Room, region: int) -> None:
        for y in range(room.size.y):
            for x in range(room.size.x):
                layout[x + room.position.x, y + room.position.y] = region

    # corridors

    def _create_corridors(self, layout: Grid) -> None:
        directions = list(DIRECTIONS)
        for y in range(1, layout.height, 2):
            for x in range(1, layout.width, 2):
                if layout[x, y] == 0:
                    randomness.shuffle(directions)
                    self._carve_corridor(layout, Vec(x, y), directions)
                    self._id += 1

    def _carve_corridor(self, layout: Grid, start: Vec, directions: list[Vec]) -> None:
        """Depth-first maze carving, run with an explicit stack."""
        stack = [self._carve_steps(layout, start, directions)]
        while stack:
            try:
                position, next_directions = next(stack[-1])
            except StopIteration:
                stack.pop()
            else:
                stack.append(self._carve_steps(layout, position, next_directions))

    def _carve_steps(
        self, layout: Grid, position: Vec, directions: list[Vec]
    ) -> Iterator[tuple[Vec, list[Vec]]]:
        """Carve one cell, yielding each neighbouring cell to carve next."""
        if layout[position] != 0:
            return
        layout[position] = self._id
        directions = list(directions)

        # pick a new random direction when blocked, and now and then anyway
        ahead = position + directions[0] * 2
        if (
            not layout.within_bounds(ahead)
            or layout[ahead] != 0
            or randomness.probability(10)
        ):
            randomness.shuffle(directions)

        for direction in directions:
            target = position + direction * 2
            if layout.within_bounds(target) and layout[target] == 0:
                layout[position + direction] = self._id
                yield target, directions

    # connectors

    @staticmethod
    def _maybe_connector(layout: Grid, position: Vec) -> Optional[Connector]:
        if layout[position] != 0:
            return None
        regions = {
            layout[position + direction]
            for direction in DIRECTIONS
            if layout[position + direction] > 0
        }
        if len(regions) != 2:
            return None
        first, second = sorted(regions)
        return position, first, second

    def _find_all_connectors(self, layout: Grid) -> list[Connector]:
        connectors = []
        for y in range(1, layout.height - 1):
            for x in range(1, layout.width - 1):
                connector = self._maybe_connector(layout, Vec(x, y))
                if connector is not None:
                    connectors.append(connector)
        return connectors

    @staticmethod
    def _reduce_connectors(connectors: list[Connector]) -> list[Vec]:
        """Keep enough connectors to join every region, plus a few extra loops."""
        if not connectors:
            return []

        # region -> neighbouring region -> connector positions between them
        graph: dict[int, dict[int, set[Vec]]] = {}
        for position, region_a, region_b in connectors:
            graph.setdefault(region_a, {}).setdefault(region_b, set()).add(position)
            graph.setdefault(region_b, {}).setdefault(region_a, set()).add(position)

        reduced: list[Vec] = []
        main, _ = randomness.random_choice(graph)

        while len(graph) > 1:
            other, positions = randomness.random_choice(graph[main])
            positions = set(positions)

            position = randomness.random_choice(positions)
            reduced.append(position)
            graph[main][other].discard(position)

            # occasionally keep a second connector to avoid a pure tree
            if positions and randomness.probability(25):
                additional = randomness.random_choice(positions)
                if distance(position, additional) > 1:
                    reduced.append(additional)

            other_links = graph.setdefault(other, {})
            other_links.pop(main, None)
            main_links = graph[main]
            main_links.pop(other, None)
            for region, links in other_links.items():
                main_links.setdefault(region, links)
            del graph[other]
            for links in graph.values():
                links.pop(other, None)

        return reduced

    # clean-up

    @staticmethod
    def _remove_deadends(layout: Grid) -> None:
        """Fill open tiles that have walls on three or more sides, repeatedly."""
        removed = True
        while removed:
            removed = False
            for y in range(1, layout.height - 1):
                for x in range(1, layout.width - 1):
                    position = Vec(x, y)
                    if layout[position] == 0:
                        continue
                    walls = sum(
                        1 for direction in DIRECTIONS if layout[position + direction] == 0
                    )
                    if walls >= 3:
                        layout[position] = 0
                        removed = True

    @staticmethod
    def _mark_surrounded_walls(layout: Grid) -> None:
        """Set walls whose whole neighbourhood is wall to -1."""
        surrounded = []
        for y in range(layout.height):
            for x in range(layout.width):
                total = sum(
                    layout[x + i, y + j]
                    for j in (-1, 0, 1)
                    for i in (-1, 0, 1)
                    if layout.within_bounds((x + i, y + j))
                )
                if total == 0:
                    surrounded.append((x, y))
        for position in surrounded:
            layout[position] = -1