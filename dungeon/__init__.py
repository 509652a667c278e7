"""Procedural dungeon layouts and the analyses run over them.

Public surface::

    grid = generate_dungeon_layout(41, 21)       # [y][x] of "0"/"1"
    dead = get_dead_ends(grid)                   # [x][y] of bool
    dist = compute_distance_map(grid, 0, 10)     # [y][x] of int / UNREACHABLE
"""

from dungeon.pathfinding.distance_map import UNREACHABLE, compute_distance_map
from dungeon.world.dead_ends import get_dead_ends
from dungeon.world.grid import FLOOR, WALL
from dungeon.world.metrics import LayoutSummary, summarize_layout
from dungeon.world.procgen import MIN_LAYOUT_SIZE, generate_dungeon_layout

__all__ = [
    "FLOOR",
    "WALL",
    "UNREACHABLE",
    "MIN_LAYOUT_SIZE",
    "LayoutSummary",
    "generate_dungeon_layout",
    "get_dead_ends",
    "compute_distance_map",
    "summarize_layout",
]
