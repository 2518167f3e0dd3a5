"""Breadth-first path search between dungeon tiles."""

from __future__ import annotations

from collections import deque

from dungeoncrawl.vec import Vec

Path = list[Vec]


def breadth_first(dungeon, start: Vec, goal: Vec) -> Path:
    """Shortest path of non-wall tiles from start to goal, or [] if none."""
    frontier = deque([start])
    came_from: dict[Vec, Vec] = {start: start}

    while frontier:
        current = frontier.popleft()
        if current == goal:
            break
        for neighbor in dungeon.neighbors(current):
            if not dungeon.tiles[neighbor].is_wall() and neighbor not in came_from:
                frontier.append(neighbor)
                came_from[neighbor] = current

    if goal not in came_from:
        return []

    path: Path = []
    current = goal
    while current != start:
        path.append(current)
        current = came_from[current]
    path.append(start)
    path.reverse()
    return path