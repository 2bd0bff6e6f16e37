"""Tests for cli.py: argument parsing and subcommand dispatch."""

from __future__ import annotations

from pathlib import Path

import pytest

from grid_automata.cli import build_parser, main


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    (tmp_path / "navigation_input.txt").write_text("F10\nN3\nF7\nR90\nF11\n", encoding="utf-8")
    (tmp_path / "pocket_cubes_input.txt").write_text(".#.\n..#\n###\n", encoding="utf-8")
    return tmp_path


def test_no_subcommand_exits() -> None:
    with pytest.raises(SystemExit):
        main([])


def test_unknown_subcommand_exits() -> None:
    with pytest.raises(SystemExit):
        main(["does-not-exist"])


def test_parser_defaults() -> None:
    args = build_parser().parse_args(["run", "seating_part1"])
    assert args.names == ["seating_part1"]
    assert args.data_dir == Path("data")
    assert args.verbose is False


def test_list_prints_names(data_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["list", "--data-dir", str(data_dir)]) == 0
    names = capsys.readouterr().out.split()
    assert "navigation_part1" in names
    assert names == sorted(names)


def test_run_prints_results(data_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    status = main(["run", "navigation_part1", "navigation_part2", "--data-dir", str(data_dir)])
    assert status == 0
    assert capsys.readouterr().out.splitlines() == [
        "navigation_part1: 25",
        "navigation_part2: 286",
    ]


def test_run_unknown_solution_exits(data_dir: Path) -> None:
    with pytest.raises(SystemExit, match="unknown solution"):
        main(["run", "nope_part1", "--data-dir", str(data_dir)])


def test_run_missing_input_reports_error(
    data_dir: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    status = main(["run", "seating_part1", "--data-dir", str(data_dir)])
    assert status == 1
    assert capsys.readouterr().out.startswith("seating_part1: error:")


def test_run_all_continues_past_failures(
    data_dir: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    status = main(["run-all", "--data-dir", str(data_dir), "--verbose"])
    assert status == 1
    out = capsys.readouterr().out
    assert "pocket_cubes_part1: 112" in out
    assert "navigation_part1: 25" in out
    assert "hex_floor_part1: error:" in out
