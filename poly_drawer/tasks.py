"""
Parabola and cubic fitting pipelines.

Both tasks run the same sequence over an owned ``PointSet``:
select points -> print diagnostics -> least-squares fit -> format the
equation -> sample the curve -> dump the samples to a text file.
The returned ``FitReport`` is what the viewer draws.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence

import numpy as np

from .config import (
    CANDIDATE_PLANE,
    CUBIC_OUTPUT_FILE,
    PARABOLA_OUTPUT_FILE,
    TaskSettings,
)
from .equation import EQUATION_DECIMALS, LaTeXGenerator, format_polynomial
from .fitting import (
    CUBIC_DEGREE,
    PARABOLA_DEGREE,
    FittedPolynomial,
    build_coordinate_matrix,
    build_design_matrix,
    fit_polynomial,
    invert_square_matrix,
)
from .geometry import best_triangle
from .points import Point, PointCursor, PointSet
from .sampling import sample_curve

logger = logging.getLogger(__name__)

COEFFICIENT_NAMES: str = "abcdefghij"


@dataclass(frozen=True, slots=True)
class FitReport:
    name: str
    source_points: tuple[Point, ...]
    fit: FittedPolynomial
    equation: str
    latex: str
    curve: tuple[Point, ...]
    output_path: Path


def format_point(point: Point, decimals: int = EQUATION_DECIMALS) -> str:
    x, y = point
    return f"({x:.{decimals}f}, {y:.{decimals}f})"


def write_points_file(path: Path, equation: str, curve: Sequence[Point]) -> None:
    """Write the equation line followed by one ``(x, y)`` line per sample.

    Raises OSError if the file cannot be written.
    """
    with open(path, "w", encoding="utf-8") as fh:
        fh.write(f"{equation}\n")
        for point in curve:
            fh.write(f"{format_point(point)}\n")
    logger.info("Wrote %d curve point(s) to %s", len(curve), path)


def _print_matrix(title: str, matrix: np.ndarray) -> None:
    with np.printoptions(precision=4, suppress=True):
        print(f"\n{title}:\n{matrix}")


# ===========================================================================
# Abstract base task
# ===========================================================================

class CurveTask(ABC):

    name: str = ""
    degree: int = 0
    output_file: str = ""

    def __init__(self, points: PointSet, settings: Optional[TaskSettings] = None) -> None:
        self.points = points
        self.settings = settings or TaskSettings()
        self._latex_gen = LaTeXGenerator(
            approx=self.settings.latex_approx,
            decimals=self.settings.latex_decimals,
        )

    @property
    def output_path(self) -> Path:
        return Path(self.settings.output_dir) / self.output_file

    @abstractmethod
    def select_points(self) -> Optional[list[Point]]:
        """Points the polynomial is fitted to, or None if there are none."""
        raise NotImplementedError

    def describe_points(self, points: list[Point]) -> None:
        _print_matrix("Start matrix", build_design_matrix(points, self.degree))

    def run(self) -> Optional[FitReport]:
        """Run the whole pipeline; returns None when no fit was possible.

        OSError from writing the point file propagates.
        """
        logger.info("Running %s task on %d point(s)", self.name, len(self.points))
        selected = self.select_points()
        if not selected:
            print(f"\nNo usable points for the {self.name} fit.")
            return None

        self.describe_points(selected)

        fit = fit_polynomial(selected, self.degree, name=self.name)
        if fit is None:
            print(f"\nCould not fit a {self.name} to the chosen points.")
            return None

        names = COEFFICIENT_NAMES[: self.degree + 1]
        print(f"\nThe {self.name} coefficients are:")
        print(", ".join(f"{n}: {c:g}" for n, c in zip(names, fit.coefficients)))
        logger.debug("%s residuals: RMSE=%.3e L-inf=%.3e", self.name, fit.rmse, fit.l_inf)

        equation = format_polynomial(fit.coefficients)
        latex = self._latex_gen.generate(fit.coefficients)
        print(f"\nThe {self.name} equation for this matrix is:\n{equation}")
        print(f"LaTeX: {latex}")

        curve = sample_curve(fit.coefficients, self.settings.x_start,
                             self.settings.x_end, self.settings.x_increment)
        print(f"\nCalculated points on the {self.name}:")
        for point in curve:
            print(format_point(point))

        write_points_file(self.output_path, equation, curve)

        return FitReport(
            name=self.name,
            source_points=tuple(selected),
            fit=fit,
            equation=equation,
            latex=latex,
            curve=tuple(curve),
            output_path=self.output_path,
        )


# ===========================================================================
# Parabola through the largest triangle
# ===========================================================================

class ParabolaTask(CurveTask):
    """Fit y = ax^2 + bx + c through the maximum-area triangle.

    The triangle is searched in the working point set, or in the candidate
    plane when ``select_from_plane`` is set.
    """

    name = "parabola"
    degree = PARABOLA_DEGREE
    output_file = PARABOLA_OUTPUT_FILE

    def __init__(
        self,
        points: PointSet,
        settings: Optional[TaskSettings] = None,
        candidate_plane: Sequence[Point] = CANDIDATE_PLANE,
        select_from_plane: bool = False,
    ) -> None:
        super().__init__(points, settings)
        self.candidate_plane = PointSet(candidate_plane)
        self.select_from_plane = select_from_plane

    def select_points(self) -> Optional[list[Point]]:
        _print_matrix("For the first task I chose these points",
                      build_coordinate_matrix(self.candidate_plane))

        source = self.candidate_plane if self.select_from_plane else self.points
        triangle = best_triangle(list(source))
        if triangle is None:
            return None

        print("\nThese are the chosen coordinates for our matrix:")
        cursor = PointCursor(triangle)
        point = cursor.get_next()
        while point is not None:
            print(f" ({point[0]:g}, {point[1]:g})")
            point = cursor.get_next()
        return list(triangle)

    def describe_points(self, points: list[Point]) -> None:
        coords = build_coordinate_matrix(points)
        _print_matrix("Start matrix", coords)
        _print_matrix("Matrix after parabolic equation",
                      build_design_matrix(points, self.degree))
        inverse = invert_square_matrix(coords)
        if inverse.size:
            _print_matrix("Inverted matrix", inverse)


# ===========================================================================
# Cubic through fixed points
# ===========================================================================

class CubicTask(CurveTask):

    name = "cubic"
    degree = CUBIC_DEGREE
    output_file = CUBIC_OUTPUT_FILE

    def select_points(self) -> Optional[list[Point]]:
        return list(self.points)
