# main.py
import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import structlog
import yaml

from dungeon import (
    UNREACHABLE,
    compute_distance_map,
    generate_dungeon_layout,
    get_dead_ends,
    summarize_layout,
)
from dungeon.pathfinding.distance_map import DistanceMap
from dungeon.world.grid import Grid
from utils.config import DEFAULT_LOG_LEVEL, LayoutConfig, load_layout_config
from utils.logging_utils import LOG_LEVELS, setup_logging

log = structlog.get_logger(__name__)

# --- Paths relative to this script's location ---
SCRIPT_DIR = Path(__file__).parent.resolve()
CONFIG_DIR = SCRIPT_DIR / "config"
CONFIG_FILE = CONFIG_DIR / "config.yaml"

EXIT_OK = 0
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dungeon-layout",
        description="Generate a maze-and-rooms dungeon layout and analyse it.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help=f"YAML file with layout defaults (default: {CONFIG_FILE})",
    )
    parser.add_argument("--width", type=int, default=None, help="Layout width in cells.")
    parser.add_argument("--height", type=int, default=None, help="Layout height in cells.")
    parser.add_argument(
        "--dead-ends", action="store_true", help="Include the dead-end map."
    )
    parser.add_argument(
        "--distances", action="store_true", help="Include the BFS distance map."
    )
    parser.add_argument(
        "--start",
        type=int,
        nargs=2,
        metavar=("X", "Y"),
        default=None,
        help="Distance map origin (default: the entrance).",
    )
    parser.add_argument(
        "--format", choices=["text", "json"], default="text", help="Output format."
    )
    parser.add_argument(
        "--log-level",
        choices=list(LOG_LEVELS),
        default=None,
        help=f"Logging level (default: from config, else {DEFAULT_LOG_LEVEL})",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    return parser


def _load_config(config_path: Optional[Path]) -> LayoutConfig:
    if config_path is None:
        if not CONFIG_FILE.is_file():
            log.debug("No default config file, using built-in defaults", path=str(CONFIG_FILE))
            return LayoutConfig()
        config_path = CONFIG_FILE
    return load_layout_config(config_path)


def _distances_for_json(distances: DistanceMap) -> List[List[Optional[int]]]:
    return [[None if d == UNREACHABLE else d for d in row] for row in distances]


def _dead_ends_as_rows(dead_ends: List[List[bool]], width: int, height: int) -> List[str]:
    # Back to [y][x] so the rows line up with the grid
    return [
        "".join("x" if dead_ends[x][y] else "." for x in range(width))
        for y in range(height)
    ]


def _distances_as_rows(distances: DistanceMap) -> List[str]:
    cell_width = max(
        (len(str(d)) for row in distances for d in row if d != UNREACHABLE), default=1
    )
    return [
        " ".join(("-" if d == UNREACHABLE else str(d)).rjust(cell_width) for d in row)
        for row in distances
    ]


def build_report(
    grid: Grid,
    start: Sequence[int],
    include_dead_ends: bool,
    include_distances: bool,
) -> Dict[str, Any]:
    """Collects the layout and the requested analyses into one dict."""
    report: Dict[str, Any] = {
        "grid": ["".join(row) for row in grid],
        "summary": summarize_layout(grid, (start[0], start[1])).as_dict(),
    }
    if include_dead_ends:
        report["dead_ends"] = get_dead_ends(grid)
    if include_distances:
        report["distances"] = compute_distance_map(grid, start[0], start[1])
    return report


def print_report(report: Dict[str, Any], output_format: str) -> None:
    if output_format == "json":
        payload = dict(report)
        if "distances" in payload:
            payload["distances"] = _distances_for_json(payload["distances"])
        print(json.dumps(payload))
        return

    print("\n".join(report["grid"]))
    summary = report["summary"]
    print(" ".join(f"{key}={value}" for key, value in summary.items()))
    if "dead_ends" in report:
        print("\n--- Dead ends ---")
        rows = _dead_ends_as_rows(report["dead_ends"], summary["width"], summary["height"])
        print("\n".join(rows))
    if "distances" in report:
        print("\n--- Distances ---")
        print("\n".join(_distances_as_rows(report["distances"])))


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    cli_level = "DEBUG" if args.verbose else args.log_level
    setup_logging(cli_level or DEFAULT_LOG_LEVEL)

    try:
        config = _load_config(args.config)
        if cli_level is None:
            setup_logging(config.log_level)
        width = args.width if args.width is not None else config.width
        height = args.height if args.height is not None else config.height
        start = args.start if args.start is not None else (0, height // 2)
        grid = generate_dungeon_layout(width, height)
        report = build_report(grid, start, args.dead_ends, args.distances)
    except (FileNotFoundError, ValueError, yaml.YAMLError) as e:
        log.error("Dungeon layout generation failed", error=str(e))
        return EXIT_USAGE

    print_report(report, args.format)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
