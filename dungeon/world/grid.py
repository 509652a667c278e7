# dungeon/world/grid.py
from typing import Final, List, Sequence, Tuple

import numpy as np
import structlog

log = structlog.get_logger(__name__)

# Symbols used at the public boundary
FLOOR: Final[str] = "0"
WALL: Final[str] = "1"

# Internal tile ids, stored as uint8
TILE_ID_FLOOR: Final[int] = 0
TILE_ID_WALL: Final[int] = 1

# --- Type Aliases ---
Grid = List[List[str]]  # [y][x]
GridLike = Sequence[Sequence[str]]
GridPosition = Tuple[int, int]  # (x, y) format

DIRECTIONS_4: Final[Tuple[GridPosition, ...]] = ((1, 0), (-1, 0), (0, 1), (0, -1))


def new_tiles(width: int, height: int) -> np.ndarray:
    """Return a ``(height, width)`` tile array with every cell set to wall."""
    return np.full((height, width), fill_value=TILE_ID_WALL, dtype=np.uint8, order="C")


def tiles_to_grid(tiles: np.ndarray) -> Grid:
    """Convert an internal tile array to rows of ``"0"``/``"1"`` symbols."""
    return [
        [FLOOR if tile_id == TILE_ID_FLOOR else WALL for tile_id in row]
        for row in tiles.tolist()
    ]


def grid_to_tiles(grid: GridLike) -> np.ndarray:
    """
    Validate a caller-supplied grid and convert it to a tile array.

    Rows may be lists of symbols, strings, or rows of a numpy array of
    symbols. Raises ``ValueError`` for empty or ragged grids and for cells
    that are neither floor nor wall.
    """
    height = len(grid)
    if height == 0:
        log.error("Grid has no rows")
        raise ValueError("Grid must contain at least one row.")
    width = len(grid[0])
    if width == 0:
        log.error("Grid has empty rows", height=height)
        raise ValueError("Grid rows must contain at least one cell.")
    for y, row in enumerate(grid):
        if len(row) != width:
            log.error("Ragged grid row", row=y, expected=width, actual=len(row))
            raise ValueError(
                f"Grid is not rectangular: row {y} has {len(row)} cells, expected {width}."
            )

    symbols = np.array([[str(cell) for cell in row] for row in grid])
    unknown = ~np.isin(symbols, (FLOOR, WALL))
    if np.any(unknown):
        y, x = (int(v) for v in np.argwhere(unknown)[0])
        symbol = str(symbols[y, x])
        log.error("Unknown grid symbol", pos=(x, y), symbol=symbol)
        raise ValueError(
            f"Grid cell ({x}, {y}) is {symbol!r}; expected {FLOOR!r} or {WALL!r}."
        )

    return np.where(symbols == FLOOR, TILE_ID_FLOOR, TILE_ID_WALL).astype(np.uint8)


def floor_mask(grid: GridLike) -> np.ndarray:
    """Boolean ``(height, width)`` array, True on floor cells."""
    return grid_to_tiles(grid) == TILE_ID_FLOOR
