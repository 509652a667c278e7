# dungeon/world/procgen.py
from typing import Iterator, List, NamedTuple, Optional, Tuple

import numpy as np
import structlog

from dungeon.world.grid import (
    DIRECTIONS_4,
    TILE_ID_FLOOR,
    TILE_ID_WALL,
    Grid,
    GridPosition,
    new_tiles,
    tiles_to_grid,
)
from game_rng import GameRNG

log = structlog.get_logger(__name__)

# --- Configuration ---
MIN_LAYOUT_SIZE = 10
ROOM_COUNT = 5
ROOM_MIN_SIZE = 4
ROOM_MAX_SIZE = 7
ROOM_EDGE_MARGIN = 2
PILLAR_CHANCE = 0.5
MAZE_STEP = 2

# Process-wide random source, never seeded
_rng = GameRNG()


class Rect(NamedTuple):
    """A rectangle on the map, inclusive corners."""
    x1: int
    y1: int
    x2: int
    y2: int

    @property
    def width(self) -> int:
        return self.x2 - self.x1 + 1

    @property
    def height(self) -> int:
        return self.y2 - self.y1 + 1

    @property
    def interior(self) -> "Rect":
        """The rectangle shrunk by one cell on every side."""
        return Rect(self.x1 + 1, self.y1 + 1, self.x2 - 1, self.y2 - 1)

    def contains(self, x: int, y: int) -> bool:
        return self.x1 <= x <= self.x2 and self.y1 <= y <= self.y2

    def carve(self, tiles: np.ndarray) -> None:
        """Force every cell of this rectangle to floor."""
        tiles[self.y1 : self.y2 + 1, self.x1 : self.x2 + 1] = TILE_ID_FLOOR


class Room(NamedTuple):
    rect: Rect
    pillar: Optional[GridPosition]


def _entrance_position(height: int) -> GridPosition:
    return 0, height // 2


def _carve_maze(tiles: np.ndarray, start: GridPosition, rng: GameRNG) -> int:
    """
    Carves a maze by randomized depth-first search on the 2-cell lattice.

    Uses an explicit stack of (cell, remaining directions) frames so that
    large maps do not hit the interpreter's recursion limit. Each frame
    shuffles its directions when pushed, which gives the same visiting order
    as the recursive formulation. Returns the number of lattice cells visited.
    """
    height, width = tiles.shape
    visited = np.zeros((height, width), dtype=bool)

    def enter(x: int, y: int) -> Iterator[GridPosition]:
        tiles[y, x] = TILE_ID_FLOOR
        visited[y, x] = True
        directions = list(DIRECTIONS_4)
        rng.shuffle(directions)
        return iter(directions)

    start_x, start_y = start
    stack: List[Tuple[int, int, Iterator[GridPosition]]] = [
        (start_x, start_y, enter(start_x, start_y))
    ]
    visited_count = 1
    while stack:
        cx, cy, directions = stack[-1]
        for dx, dy in directions:
            nx, ny = cx + dx * MAZE_STEP, cy + dy * MAZE_STEP
            if 0 < nx < width - 1 and 0 < ny < height - 1 and not visited[ny, nx]:
                # Knock down the wall between the two lattice cells
                tiles[cy + dy, cx + dx] = TILE_ID_FLOOR
                stack.append((nx, ny, enter(nx, ny)))
                visited_count += 1
                break
        else:
            stack.pop()

    log.debug("Maze carved", start=start, lattice_cells=visited_count)
    return visited_count


def _room_size_limit(map_size: int) -> int:
    # Keeps the placement range non-empty on the smallest maps
    return max(ROOM_MIN_SIZE, min(ROOM_MAX_SIZE, map_size - 2 * ROOM_EDGE_MARGIN - 1))


def _carve_rooms(tiles: np.ndarray, rng: GameRNG, count: int = ROOM_COUNT) -> List[Room]:
    """
    Carves ``count`` rectangular rooms over whatever is already on the map.

    Rooms ignore the maze and each other: every cell inside a room becomes
    floor, then with ``PILLAR_CHANCE`` a single interior cell is turned back
    into wall.
    """
    height, width = tiles.shape
    max_w = _room_size_limit(width)
    max_h = _room_size_limit(height)
    rooms: List[Room] = []
    for index in range(count):
        room_w = rng.get_int(ROOM_MIN_SIZE, max_w)
        room_h = rng.get_int(ROOM_MIN_SIZE, max_h)
        x1 = ROOM_EDGE_MARGIN + rng.get_int(0, width - room_w - 2 * ROOM_EDGE_MARGIN - 1)
        y1 = ROOM_EDGE_MARGIN + rng.get_int(0, height - room_h - 2 * ROOM_EDGE_MARGIN - 1)
        rect = Rect(x1, y1, x1 + room_w - 1, y1 + room_h - 1)
        rect.carve(tiles)

        pillar: Optional[GridPosition] = None
        if rng.coin_flip(heads_probability=PILLAR_CHANCE) == "heads":
            inner = rect.interior
            pillar = (rng.get_int(inner.x1, inner.x2), rng.get_int(inner.y1, inner.y2))
            tiles[pillar[1], pillar[0]] = TILE_ID_WALL

        rooms.append(Room(rect, pillar))
        log.debug("Carved room", index=index, rect=rect, pillar=pillar)
    return rooms


def _validate_dimensions(width: int, height: int) -> None:
    for name, value in (("width", width), ("height", height)):
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            log.error("Invalid layout dimension type", name=name, value=value)
            raise ValueError(f"Layout {name} must be an integer, got {value!r}.")
    if width < MIN_LAYOUT_SIZE or height < MIN_LAYOUT_SIZE:
        log.error(
            "Invalid layout dimensions",
            width=width,
            height=height,
            minimum=MIN_LAYOUT_SIZE,
        )
        raise ValueError(
            f"Layout width and height must be at least {MIN_LAYOUT_SIZE}, "
            f"got {width}x{height}."
        )


def generate_dungeon_layout(width: int, height: int) -> Grid:
    """
    Generates a ``height`` x ``width`` dungeon layout.

    The layout is a randomized depth-first maze entered from the west edge at
    row ``height // 2``, with five rectangular rooms carved on top of it.
    Rooms may overlap each other and are not guaranteed to connect to the
    maze. Returns rows indexed ``[y][x]`` of ``"0"`` (floor) and ``"1"``
    (wall).
    """
    _validate_dimensions(width, height)
    log.info("Starting dungeon layout generation", width=width, height=height)

    tiles = new_tiles(width, height)
    entrance_x, entrance_y = _entrance_position(height)
    tiles[entrance_y, entrance_x] = TILE_ID_FLOOR

    _carve_maze(tiles, (entrance_x + 1, entrance_y), _rng)
    rooms = _carve_rooms(tiles, _rng)

    log.info(
        "Dungeon layout generated",
        width=width,
        height=height,
        rooms=len(rooms),
        pillars=sum(1 for room in rooms if room.pillar is not None),
        floor_cells=int(np.count_nonzero(tiles == TILE_ID_FLOOR)),
    )
    return tiles_to_grid(tiles)
