import pytest

from dungeon import LayoutSummary, generate_dungeon_layout, summarize_layout

DETOUR_GRID = [
    "11111",
    "10001",
    "11101",
    "10001",
    "11111",
]


def test_summary_of_hand_built_grid():
    summary = summarize_layout(DETOUR_GRID, start=(1, 1))
    assert summary == LayoutSummary(
        width=5,
        height=5,
        floor_cells=7,
        dead_ends=2,
        reachable_cells=7,
        max_distance=6,
    )


def test_default_start_is_entrance():
    grid = generate_dungeon_layout(21, 15)
    summary = summarize_layout(grid)
    # Entrance and the maze cell behind it are always connected
    assert summary.reachable_cells >= 2
    assert summary.max_distance >= 1
    assert summary.reachable_cells <= summary.floor_cells


def test_as_dict_keys():
    summary = summarize_layout(DETOUR_GRID, start=(1, 1))
    assert set(summary.as_dict()) == {
        "width",
        "height",
        "floor_cells",
        "dead_ends",
        "reachable_cells",
        "max_distance",
    }


def test_rejects_start_outside_grid():
    with pytest.raises(ValueError):
        summarize_layout(DETOUR_GRID, start=(9, 9))
