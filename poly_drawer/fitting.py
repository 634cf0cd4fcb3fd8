"""
Least-squares polynomial fitting.

The design matrix rows are ``(x^d, x^(d-1), ..., x, 1)`` so the solved
coefficient vector is highest power first, the order ``numpy.polyval``
and the equation formatter expect.

Solving uses column-pivoted Householder QR (``scipy.linalg.qr`` with
``pivoting=True``); explicit inversion is kept for the square-checked
display helper only.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

import numpy as np
from scipy.linalg import qr, solve_triangular

from .points import FloatArray, Point

logger = logging.getLogger(__name__)

PARABOLA_DEGREE: int = 2
CUBIC_DEGREE: int = 3


# ===========================================================================
# Data-classes
# ===========================================================================

@dataclass(frozen=True, slots=True)
class FittedPolynomial:
    name: str
    degree: int
    coefficients: FloatArray
    rmse: float
    l_inf: float

    def __post_init__(self) -> None:
        if self.degree < 0:
            raise ValueError(f"degree cannot be negative: {self.degree}")
        if len(self.coefficients) != self.degree + 1:
            raise ValueError(
                f"expected {self.degree + 1} coefficients, got {len(self.coefficients)}"
            )
        if self.rmse < 0:
            raise ValueError(f"RMSE cannot be negative: {self.rmse}")
        if self.l_inf < 0:
            raise ValueError(f"L-inf cannot be negative: {self.l_inf}")


# ===========================================================================
# Matrix builders
# ===========================================================================

def _as_xy(points: Iterable[Point]) -> tuple[FloatArray, FloatArray]:
    pts = np.asarray(list(points), dtype=np.float64).reshape(-1, 2)
    return pts[:, 0], pts[:, 1]


def build_design_matrix(points: Iterable[Point], degree: int) -> FloatArray:
    """Vandermonde matrix with powers ``degree`` down to 0, one row per point."""
    if degree < 0:
        raise ValueError(f"degree must be >= 0, got {degree}")
    x, _ = _as_xy(points)
    return np.vander(x, degree + 1, increasing=False).astype(np.float64)


def build_coordinate_matrix(points: Iterable[Point]) -> FloatArray:
    """Raw ``(x, y, 1)`` rows, for display only."""
    x, y = _as_xy(points)
    return np.column_stack((x, y, np.ones_like(x)))


# ===========================================================================
# Solvers
# ===========================================================================

def solve_coefficients(points: Iterable[Point], degree: int) -> FloatArray:
    """Least-squares polynomial coefficients, highest power first.

    Returns an empty array when there are no points. A rank-deficient
    system yields the basic solution: coefficients of the columns QR
    pivoted out are left at 0.
    """
    pts = list(points)
    a = build_design_matrix(pts, degree)
    _, b = _as_xy(pts)
    n, k = a.shape

    if n == 0:
        logger.warning("Cannot fit a degree-%d polynomial to an empty point set", degree)
        return np.empty(0, dtype=np.float64)

    q, r, perm = qr(a, mode="economic", pivoting=True)
    diag = np.abs(np.diag(r))
    tol = max(n, k) * np.finfo(np.float64).eps * (diag[0] if diag.size else 0.0)
    rank = int(np.sum(diag > tol))

    coeffs = np.zeros(k, dtype=np.float64)
    if rank == 0:
        logger.warning("Design matrix has rank 0; returning zero coefficients")
        return coeffs
    if rank < k:
        logger.warning(
            "Rank-deficient degree-%d fit (rank %d of %d, %d point(s)); "
            "using basic solution", degree, rank, k, n,
        )

    qtb = q.T @ b
    z = solve_triangular(r[:rank, :rank], qtb[:rank], lower=False)
    coeffs[perm[:rank]] = z
    return coeffs


def fit_polynomial(points: Iterable[Point], degree: int,
                   name: Optional[str] = None) -> Optional[FittedPolynomial]:
    pts = list(points)
    coeffs = solve_coefficients(pts, degree)
    if coeffs.size == 0:
        return None

    x, y = _as_xy(pts)
    y_pred = np.polyval(coeffs, x)
    residual = y - y_pred
    return FittedPolynomial(
        name=name or f"Polynomial (degree {degree})",
        degree=degree,
        coefficients=coeffs,
        rmse=float(np.sqrt(np.mean(residual ** 2))),
        l_inf=float(np.max(np.abs(residual))),
    )


def invert_square_matrix(matrix: FloatArray) -> FloatArray:
    """Inverse of a square matrix, or an empty array if it has none."""
    m = np.asarray(matrix, dtype=np.float64)
    if m.ndim != 2 or m.shape[0] != m.shape[1]:
        logger.error("Matrix must be square to compute its inverse (got shape %s).",
                     m.shape)
        return np.empty((0, 0), dtype=np.float64)
    try:
        return np.linalg.inv(m)
    except np.linalg.LinAlgError as exc:
        logger.error("Matrix is not invertible: %s", exc)
        return np.empty((0, 0), dtype=np.float64)
