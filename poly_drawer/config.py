from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from .points import Point
from .sampling import step_advances

# ---------------------------------------------------------------------------
# Built-in point sets
# ---------------------------------------------------------------------------

# Candidate plane shown by the parabola task.
CANDIDATE_PLANE: tuple[Point, ...] = (
    (2.0, 2.0),
    (2.0, 4.0),
    (4.0, 2.0),
    (4.0, 4.0),
    (3.0, 4.5),
    (6.0, 2.0),
    (6.0, 4.0),
)

# Working set the parabola triangle is picked from.
PARABOLA_POINTS: tuple[Point, ...] = (
    (2.0, 2.0),
    (3.0, 4.5),
    (6.0, 4.0),
)

CUBIC_POINTS: tuple[Point, ...] = (
    (1.0, 2.0),
    (2.0, 3.0),
    (3.0, 5.0),
    (4.0, 10.0),
)

PARABOLA_OUTPUT_FILE: str = "parabola_points.txt"
CUBIC_OUTPUT_FILE: str = "cubic_points.txt"


# ===========================================================================
# Settings
# ===========================================================================

@dataclass(frozen=True, slots=True)
class TaskSettings:
    x_start: float = -10.0
    x_end: float = 10.0
    x_increment: float = 1.0
    output_dir: Path = field(default_factory=lambda: Path("."))
    latex_approx: bool = True    # decimal approximations in LaTeX output
    latex_decimals: int = 3      # digits after decimal point when approx is on
    show_viewer: bool = True

    def __post_init__(self) -> None:
        if self.x_start > self.x_end:
            raise ValueError(f"x_start ({self.x_start}) must be <= x_end ({self.x_end})")
        if self.x_increment <= 0:
            raise ValueError(f"x_increment must be positive, got {self.x_increment}")
        # Float spacing peaks at an endpoint, so both endpoints cover the range
        for x in (self.x_start, self.x_end):
            if not step_advances(x, self.x_increment):
                raise ValueError(
                    f"x_increment {self.x_increment} is below float spacing at x={x}"
                )
        if not (0 <= self.latex_decimals <= 10):
            raise ValueError(f"latex_decimals must be in [0, 10], got {self.latex_decimals}")
