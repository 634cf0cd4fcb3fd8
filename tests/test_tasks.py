"""Tests for the parabola / cubic pipelines and the point-file dump."""

from pathlib import Path

import pytest

from poly_drawer.config import CUBIC_POINTS, PARABOLA_POINTS, TaskSettings
from poly_drawer.points import PointSet
from poly_drawer.tasks import CubicTask, ParabolaTask, format_point, write_points_file


@pytest.fixture
def settings(tmp_path: Path) -> TaskSettings:
    return TaskSettings(output_dir=tmp_path, show_viewer=False)


def test_format_point_two_decimals() -> None:
    assert format_point((-10.0, -132.0)) == "(-10.00, -132.00)"
    assert format_point((0.5, 1.0 / 3.0)) == "(0.50, 0.33)"


def test_write_points_file_layout(tmp_path: Path) -> None:
    path = tmp_path / "out.txt"

    write_points_file(path, "y = 1.00x ", [(0.0, 0.0), (1.0, 1.0)])

    assert path.read_text(encoding="utf-8").splitlines() == [
        "y = 1.00x ",
        "(0.00, 0.00)",
        "(1.00, 1.00)",
    ]


def test_parabola_task_fits_working_set(settings: TaskSettings, capsys) -> None:
    report = ParabolaTask(PointSet(PARABOLA_POINTS), settings).run()

    assert report is not None
    assert report.source_points == PARABOLA_POINTS
    assert list(report.fit.coefficients) == pytest.approx(
        [-2.0 / 3.0, 35.0 / 6.0, -7.0], abs=1e-9)
    assert report.equation == "y = -0.67x^2 + 5.83x -7.00"
    assert len(report.curve) == 21

    lines = report.output_path.read_text(encoding="utf-8").splitlines()
    assert report.output_path.name == "parabola_points.txt"
    assert lines[0] == report.equation
    assert lines[1] == "(-10.00, -132.00)"
    assert lines[-1] == "(10.00, -15.33)"
    assert len(lines) == 22

    out = capsys.readouterr().out
    assert "Inverted matrix" in out
    assert " (3, 4.5)" in out


def test_parabola_task_from_candidate_plane(settings: TaskSettings) -> None:
    task = ParabolaTask(PointSet(PARABOLA_POINTS), settings, select_from_plane=True)

    report = task.run()

    assert report is not None
    assert report.source_points == ((2.0, 2.0), (3.0, 4.5), (6.0, 2.0))


def test_parabola_task_uses_mutated_working_set(settings: TaskSettings) -> None:
    points = PointSet(PARABOLA_POINTS)
    points.remove_point_by_index(2)
    points.add_point(5.0, 1.0)

    report = ParabolaTask(points, settings).run()

    assert report is not None
    assert report.source_points == ((2.0, 2.0), (3.0, 4.5), (5.0, 1.0))


def test_parabola_task_without_triangle_returns_none(settings: TaskSettings,
                                                     capsys) -> None:
    collinear = PointSet([(0.0, 0.0), (1.0, 1.0), (2.0, 2.0)])

    assert ParabolaTask(collinear, settings).run() is None
    assert not (settings.output_dir / "parabola_points.txt").exists()
    assert "No usable points" in capsys.readouterr().out


def test_cubic_task(settings: TaskSettings) -> None:
    report = CubicTask(PointSet(CUBIC_POINTS), settings).run()

    assert report is not None
    assert list(report.fit.coefficients) == pytest.approx(
        [1.0 / 3.0, -1.5, 19.0 / 6.0, 0.0], abs=1e-9)
    # d is round-off (~1e-15), not exactly 0, so its term is still written
    assert report.equation == "y = 0.33x^3 -1.50x^2 + 3.17x + 0.00"
    assert report.latex.startswith("$$y = ")

    lines = report.output_path.read_text(encoding="utf-8").splitlines()
    assert report.output_path.name == "cubic_points.txt"
    assert len(lines) == 22
    assert lines[0] == report.equation


def test_cubic_task_custom_range(tmp_path: Path) -> None:
    settings = TaskSettings(x_start=0.0, x_end=2.0, x_increment=0.5,
                            output_dir=tmp_path, show_viewer=False)

    report = CubicTask(PointSet(CUBIC_POINTS), settings).run()

    assert report is not None
    assert [x for x, _ in report.curve] == [0.0, 0.5, 1.0, 1.5, 2.0]


def test_cubic_task_empty_point_set(settings: TaskSettings) -> None:
    assert CubicTask(PointSet(), settings).run() is None


def test_task_propagates_write_failure(tmp_path: Path) -> None:
    settings = TaskSettings(output_dir=tmp_path / "missing", show_viewer=False)

    with pytest.raises(OSError):
        CubicTask(PointSet(CUBIC_POINTS), settings).run()


@pytest.mark.parametrize(
    "kwargs",
    [
        {"x_start": 1.0, "x_end": 0.0},
        {"x_increment": 0.0},
        {"latex_decimals": 11},
        {"x_start": 1e16, "x_end": 1.00000000000001e16},
        {"x_start": -1.0, "x_end": 1e17},
    ],
)
def test_task_settings_validation(kwargs) -> None:
    with pytest.raises(ValueError):
        TaskSettings(**kwargs)
