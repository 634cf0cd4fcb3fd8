"""
Polynomial Drawer: least-squares parabola / cubic through small point sets.

Tasks
-----
parabola    y = ax^2 + bx + c through the largest-area triangle of the
            working set (or of the 7-point candidate plane)
cubic       y = ax^3 + bx^2 + cx + d through four fixed points

Each task prints its matrices, coefficients and equation, writes the
sampled curve to ``<task>_points.txt`` and opens the curve viewer.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from .config import CUBIC_POINTS, PARABOLA_POINTS, TaskSettings
from .logging_config import setup_logging
from .points import PointSet
from .tasks import CubicTask, CurveTask, ParabolaTask

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="poly-drawer",
        description="Fit a parabola or cubic by least squares and draw it",
    )
    parser.add_argument("task", choices=("parabola", "cubic"), help="Curve to fit")
    parser.add_argument("--x-start", type=float, default=-10.0, help="First sampled x")
    parser.add_argument("--x-end", type=float, default=10.0, help="Last sampled x (inclusive)")
    parser.add_argument("--x-increment", type=float, default=1.0, help="Sampling step")
    parser.add_argument("--output-dir", "-o", type=Path, default=Path("."),
                        help="Directory for the <task>_points.txt dump")
    parser.add_argument("--from-plane", action="store_true",
                        help="parabola: pick the triangle from the candidate plane")
    parser.add_argument("--add-point", nargs=2, type=float, action="append", default=[],
                        metavar=("X", "Y"), help="Append a point to the working set")
    parser.add_argument("--remove-index", type=int, action="append", default=[],
                        metavar="I",
                        help="Remove the working-set point at index I (applied before --add-point)")
    parser.add_argument("--exact-latex", action="store_true",
                        help="Exact rational fractions in the LaTeX output")
    parser.add_argument("--latex-decimals", type=int, default=3,
                        help="Digits after the decimal point in the LaTeX output")
    parser.add_argument("--no-gui", action="store_true", help="Do not open the viewer")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Also log best-triangle areas and fit residuals")
    parser.add_argument("--log-file", type=str, default=None, help="Append log records to this file")
    return parser


def build_task(args: argparse.Namespace, settings: TaskSettings) -> CurveTask:
    base = PARABOLA_POINTS if args.task == "parabola" else CUBIC_POINTS
    points = PointSet(base)
    for index in args.remove_index:
        points.remove_point_by_index(index)
    for x, y in args.add_point:
        points.add_point(x, y)

    if args.task == "parabola":
        return ParabolaTask(points, settings, select_from_plane=args.from_plane)
    return CubicTask(points, settings)


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose, args.log_file)

    try:
        settings = TaskSettings(
            x_start=args.x_start,
            x_end=args.x_end,
            x_increment=args.x_increment,
            output_dir=args.output_dir,
            latex_approx=not args.exact_latex,
            latex_decimals=args.latex_decimals,
            show_viewer=not args.no_gui,
        )
    except ValueError as exc:
        parser.error(str(exc))

    task = build_task(args, settings)
    try:
        report = task.run()
    except OSError as exc:
        logger.error("Error opening %s for writing: %s", task.output_path, exc)
        return 1

    if report is None:
        return 1

    if settings.show_viewer:
        # Qt is only imported when a window is actually shown
        from .viewer import show_report
        return show_report(report)
    return 0


if __name__ == "__main__":
    sys.exit(main())
