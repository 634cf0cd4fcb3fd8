from __future__ import annotations

from typing import Any, Iterable, Iterator, Optional, Sequence

import numpy as np
from numpy.typing import NDArray

# ---------------------------------------------------------------------------
# Type aliases
# ---------------------------------------------------------------------------

Point = tuple[float, float]
FloatArray = NDArray[np.floating[Any]]


# ===========================================================================
# Owned point container
# ===========================================================================

class PointSet:
    """Ordered, mutable collection of 2D points.

    Order only matters for display; duplicates are allowed.
    """

    def __init__(self, points: Iterable[Point] = ()) -> None:
        self._points: list[Point] = [(float(x), float(y)) for x, y in points]

    def add_point(self, x: float, y: float) -> None:
        self._points.append((float(x), float(y)))

    def remove_point_by_index(self, index: int) -> None:
        # Out-of-range indices (negative ones included) are ignored.
        if 0 <= index < len(self._points):
            del self._points[index]

    def as_array(self) -> FloatArray:
        """Return an (n, 2) float64 array of the points."""
        if not self._points:
            return np.empty((0, 2), dtype=np.float64)
        return np.asarray(self._points, dtype=np.float64)

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self._points)

    def __getitem__(self, index: int) -> Point:
        return self._points[index]

    def __repr__(self) -> str:
        return f"PointSet({self._points!r})"


# ===========================================================================
# Sequential cursor
# ===========================================================================

class PointCursor:
    """One-way cursor over a point sequence it does not own.

    ``get_next`` returns the next point, or ``None`` once every point has
    been handed out (and on every call after that).
    """

    def __init__(self, points: Sequence[Point]) -> None:
        self._points = points
        self._index = 0

    def get_next(self) -> Optional[Point]:
        if self._index < len(self._points):
            point = self._points[self._index]
            self._index += 1
            return point
        return None
