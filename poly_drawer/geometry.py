from __future__ import annotations

import logging
from typing import Optional, Sequence

from .points import Point

logger = logging.getLogger(__name__)

Triangle = tuple[Point, Point, Point]


def triangle_area(p1: Point, p2: Point, p3: Point) -> float:
    """Unsigned area via the shoelace formula; 0 for collinear points."""
    (x1, y1), (x2, y2), (x3, y3) = p1, p2, p3
    return 0.5 * abs(x1 * (y2 - y3) + x2 * (y3 - y1) + x3 * (y1 - y2))


def best_triangle(points: Sequence[Point]) -> Optional[Triangle]:
    """Return the ordered triple of ``points`` spanning the largest area.

    Every ordered index triple is tried, repeated indices included; those
    score 0 and never beat the initial maximum. Ties keep the first triple
    found. Returns None when no triple has positive area.
    """
    max_area = 0.0
    best: Optional[Triangle] = None
    n = len(points)

    for i in range(n):
        for j in range(n):
            for k in range(n):
                area = triangle_area(points[i], points[j], points[k])
                if area > max_area:
                    max_area = area
                    best = (points[i], points[j], points[k])

    if best is None:
        logger.warning("No non-degenerate triangle among %d point(s)", n)
    else:
        logger.debug("Best triangle %s with area %.4f", best, max_area)
    return best
