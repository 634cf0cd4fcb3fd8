from __future__ import annotations

from typing import Sequence

import numpy as np

from .points import FloatArray, Point


def evaluate_polynomial(coefficients: Sequence[float], x: float) -> float:
    return float(np.polyval(np.asarray(coefficients, dtype=np.float64), x))


def step_advances(x: float, x_increment: float) -> bool:
    """True when adding *x_increment* to *x* changes it in float64."""
    return x + x_increment != x


def sample_curve(coefficients: Sequence[float], x_start: float, x_end: float,
                 x_increment: float) -> list[Point]:
    """Sample the polynomial at x_start, x_start + step, ... while x <= x_end.

    x is accumulated step by step, so the last sample may land slightly off
    x_end (or be dropped) for steps that are not exact in binary. A step
    too small to move x at its current magnitude raises ValueError.
    """
    if x_increment <= 0:
        raise ValueError(f"x_increment must be positive, got {x_increment}")

    coef: FloatArray = np.asarray(coefficients, dtype=np.float64)
    samples: list[Point] = []
    x = float(x_start)
    while x <= x_end:
        samples.append((x, evaluate_polynomial(coef, x)))
        if not step_advances(x, x_increment):
            raise ValueError(
                f"x_increment {x_increment} is below float spacing at x={x}"
            )
        x += x_increment
    return samples
