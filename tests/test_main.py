import json
import logging

import pytest
import structlog

import main
from dungeon import FLOOR


@pytest.fixture(autouse=True)
def _restore_logging():
    # main() reconfigures logging onto the captured stderr of each test
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_json_output_contains_requested_maps(capsys):
    exit_code = main.main(
        ["--width", "15", "--height", "11", "--format", "json", "--dead-ends", "--distances"]
    )
    assert exit_code == main.EXIT_OK

    report = json.loads(capsys.readouterr().out)
    assert len(report["grid"]) == 11
    assert all(len(row) == 15 for row in report["grid"])
    assert report["grid"][5][0] == FLOOR
    # dead-end map is indexed [x][y]
    assert len(report["dead_ends"]) == 15
    assert len(report["dead_ends"][0]) == 11
    assert report["distances"][5][0] == 0
    for y, row in enumerate(report["grid"]):
        for x, cell in enumerate(row):
            if cell != FLOOR:
                assert report["distances"][y][x] is None
    assert report["summary"]["width"] == 15


def test_text_output_prints_grid_rows(capsys):
    assert main.main(["--width", "12", "--height", "10"]) == main.EXIT_OK
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 11
    assert all(len(line) == 12 and set(line) <= {"0", "1"} for line in lines[:10])
    assert lines[10].startswith("width=12 height=10")


def test_text_output_with_analyses(capsys):
    assert (
        main.main(["--width", "12", "--height", "10", "--dead-ends", "--distances"])
        == main.EXIT_OK
    )
    out = capsys.readouterr().out
    assert "--- Dead ends ---" in out
    assert "--- Distances ---" in out


def test_config_file_supplies_defaults(tmp_path, capsys):
    config_path = tmp_path / "config.yaml"
    config_path.write_text("layout:\n  width: 13\n  height: 12\nlogging:\n  level: WARNING\n")
    assert main.main(["--config", str(config_path), "--format", "json"]) == main.EXIT_OK
    report = json.loads(capsys.readouterr().out)
    assert len(report["grid"]) == 12
    assert len(report["grid"][0]) == 13
    assert "dead_ends" not in report
    assert "distances" not in report


def test_custom_start(capsys):
    assert (
        main.main(
            ["--width", "15", "--height", "11", "--format", "json", "--distances", "--start", "1", "5"]
        )
        == main.EXIT_OK
    )
    report = json.loads(capsys.readouterr().out)
    assert report["distances"][5][1] == 0
    assert report["distances"][5][0] == 1


@pytest.mark.parametrize(
    "argv",
    [
        ["--width", "4"],
        ["--config", "/definitely/missing.yaml"],
        ["--width", "15", "--height", "11", "--start", "40", "40"],
    ],
)
def test_invalid_arguments_exit_with_usage_code(argv, capsys):
    assert main.main(argv) == main.EXIT_USAGE
    assert capsys.readouterr().out == ""
