# dungeon/world/dead_ends.py
from typing import List

import numpy as np
import structlog

from dungeon.world.grid import GridLike, floor_mask

log = structlog.get_logger(__name__)

DeadEndMap = List[List[bool]]  # [x][y], transposed relative to Grid


def count_floor_neighbors(floor: np.ndarray) -> np.ndarray:
    """Number of orthogonal floor neighbours per cell; off-map counts as wall."""
    padded = np.pad(floor, 1, mode="constant", constant_values=False).astype(np.uint8)
    return (
        padded[:-2, 1:-1]  # up
        + padded[2:, 1:-1]  # down
        + padded[1:-1, :-2]  # left
        + padded[1:-1, 2:]  # right
    )


def dead_end_mask(floor: np.ndarray) -> np.ndarray:
    """Boolean ``(height, width)`` array of floor cells with exactly one floor neighbour."""
    return floor & (count_floor_neighbors(floor) == 1)


def get_dead_ends(grid: GridLike) -> DeadEndMap:
    """
    Flags dead-end cells of a layout.

    A dead end is a floor cell with exactly one floor neighbour among its
    four orthogonal neighbours. An isolated floor cell (no floor neighbours)
    is not a dead end.

    NOTE: the result is indexed ``[x][y]``, the transpose of the grid's
    ``[y][x]`` indexing. ``get_dead_ends(grid)[x][y]`` describes
    ``grid[y][x]``.
    """
    floor = floor_mask(grid)
    dead_ends = dead_end_mask(floor)
    log.debug(
        "Dead ends detected",
        shape=floor.shape,
        dead_ends=int(np.count_nonzero(dead_ends)),
    )
    return dead_ends.T.tolist()
