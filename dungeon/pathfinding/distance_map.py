# dungeon/pathfinding/distance_map.py
from collections import deque
from typing import Final, List, Union

import math
import numpy as np
import structlog

from dungeon.world.grid import DIRECTIONS_4, GridLike, floor_mask

log = structlog.get_logger(__name__)

# Distance of cells with no floor path from the start
UNREACHABLE: Final[float] = math.inf

Distance = Union[int, float]
DistanceMap = List[List[Distance]]  # [y][x]


def integrate_distances(floor: np.ndarray, start_x: int, start_y: int) -> np.ndarray:
    """
    Breadth-first search over 4-connected floor cells.

    Returns a float32 ``(height, width)`` field holding the step count from
    ``(start_x, start_y)``, ``np.inf`` where no path exists. The start is
    seeded with 0 whatever its tile; only floor cells are entered after that.
    Each cell is enqueued once, when its distance is first written.
    """
    height, width = floor.shape
    field = np.full((height, width), np.inf, dtype=np.float32)
    field[start_y, start_x] = 0.0
    queue = deque([(start_y, start_x)])

    processed_count = 0
    while queue:
        y, x = queue.popleft()
        processed_count += 1
        next_cost = field[y, x] + 1.0
        for dx, dy in DIRECTIONS_4:
            ny, nx = y + dy, x + dx
            if (
                0 <= ny < height
                and 0 <= nx < width
                and floor[ny, nx]
                and field[ny, nx] == np.inf
            ):
                field[ny, nx] = next_cost
                queue.append((ny, nx))

    log.debug(
        "Distance field integrated",
        start=(start_x, start_y),
        processed=processed_count,
    )
    return field


def compute_distance_map(grid: GridLike, start_x: int, start_y: int) -> DistanceMap:
    """
    Computes BFS step distances from ``(start_x, start_y)`` to every floor cell.

    The result is indexed ``[y][x]`` like the grid. Reached cells hold an
    ``int``; walls and floor cells cut off from the start hold
    :data:`UNREACHABLE`. Raises ``ValueError`` if the start lies outside the
    grid.
    """
    floor = floor_mask(grid)
    height, width = floor.shape
    if not (0 <= start_x < width and 0 <= start_y < height):
        log.error(
            "Distance map start out of bounds",
            start=(start_x, start_y),
            width=width,
            height=height,
        )
        raise ValueError(
            f"Start ({start_x}, {start_y}) is outside the {width}x{height} grid."
        )
    if not floor[start_y, start_x]:
        log.warning("Distance map start is a wall cell", start=(start_x, start_y))

    field = integrate_distances(floor, start_x, start_y)
    return [
        [int(value) if value != math.inf else UNREACHABLE for value in row]
        for row in field.tolist()
    ]
