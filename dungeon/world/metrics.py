# dungeon/world/metrics.py
from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

import numpy as np
import structlog

from dungeon.pathfinding.distance_map import integrate_distances
from dungeon.world.dead_ends import dead_end_mask
from dungeon.world.grid import GridLike, GridPosition, floor_mask

log = structlog.get_logger(__name__)


@dataclass(frozen=True)
class LayoutSummary:
    """Headline numbers for a finished layout."""
    width: int
    height: int
    floor_cells: int
    dead_ends: int
    reachable_cells: int
    max_distance: int

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


def summarize_layout(
    grid: GridLike, start: Optional[GridPosition] = None
) -> LayoutSummary:
    """
    Summarizes a layout using the dead-end and distance analyses.

    ``start`` is an ``(x, y)`` pair and defaults to the west-edge entrance at
    ``(0, height // 2)``. ``reachable_cells`` counts floor cells with a finite
    distance from ``start``.
    """
    floor = floor_mask(grid)
    height, width = floor.shape
    start_x, start_y = start if start is not None else (0, height // 2)
    if not (0 <= start_x < width and 0 <= start_y < height):
        log.error("Summary start out of bounds", start=(start_x, start_y))
        raise ValueError(
            f"Start ({start_x}, {start_y}) is outside the {width}x{height} grid."
        )

    field = integrate_distances(floor, start_x, start_y)
    reached = floor & np.isfinite(field)
    finite = field[np.isfinite(field)]

    summary = LayoutSummary(
        width=width,
        height=height,
        floor_cells=int(np.count_nonzero(floor)),
        dead_ends=int(np.count_nonzero(dead_end_mask(floor))),
        reachable_cells=int(np.count_nonzero(reached)),
        max_distance=int(finite.max()),
    )
    log.info("Layout summarized", **summary.as_dict())
    return summary
