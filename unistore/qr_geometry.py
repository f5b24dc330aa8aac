"""Plane geometry for QR-code location: line intersection and perspective maps."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from .qr_types import Point

PERSPECTIVE_PARAMS = 8


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


def line_intersect(p0: Point, p1: Point, q0: Point, q1: Point) -> Point | None:
    """Return the intersection of line p0-p1 with line q0-q1.

    Coordinates are integers; the result is truncated toward zero.
    Returns None if the lines are parallel.
    """
    # (a, b) is perpendicular to line p, (c, d) to line q.
    a = -(p1.y - p0.y)
    b = p1.x - p0.x
    c = -(q1.y - q0.y)
    d = q1.x - q0.x

    e = a * p1.x + b * p1.y
    f = c * q1.x + d * q1.y

    det = a * d - b * c
    if not det:
        return None

    return Point(_trunc_div(d * e - b * f, det), _trunc_div(-c * e + a * f, det))


@dataclass
class Perspective:
    """A projective transform from grid coordinates (u, v) to image points."""

    c: list[float] = field(default_factory=lambda: [0.0] * PERSPECTIVE_PARAMS)

    def __post_init__(self) -> None:
        self.c = [float(v) for v in self.c]
        if len(self.c) != PERSPECTIVE_PARAMS:
            raise ValueError(f"a perspective needs {PERSPECTIVE_PARAMS} coefficients")

    @classmethod
    def from_rect(
        cls, rect: Sequence[Point], width: float, height: float
    ) -> Perspective:
        """Build the transform taking (0,0), (w,0), (w,h), (0,h) onto ``rect``.

        Raises ValueError if the rectangle is degenerate.
        """
        if len(rect) != 4:
            raise ValueError("a perspective rectangle needs four corners")
        x0, y0 = float(rect[0].x), float(rect[0].y)
        x1, y1 = float(rect[1].x), float(rect[1].y)
        x2, y2 = float(rect[2].x), float(rect[2].y)
        x3, y3 = float(rect[3].x), float(rect[3].y)

        wden = width * (x2 * y3 - x3 * y2 + (x3 - x2) * y1 + x1 * (y2 - y3))
        hden = height * (x2 * y3 + x1 * (y2 - y3) - x3 * y2 + (x3 - x2) * y1)
        if wden == 0 or hden == 0:
            raise ValueError("degenerate perspective rectangle")

        c = [
            (x1 * (x2 * y3 - x3 * y2) + x0 * (-x2 * y3 + x3 * y2 + (x2 - x3) * y1)
             + x1 * (x3 - x2) * y0) / wden,
            -(x0 * (x2 * y3 + x1 * (y2 - y3) - x2 * y1) - x1 * x3 * y2 + x2 * x3 * y1
              + (x1 * x3 - x2 * x3) * y0) / hden,
            x0,
            (y0 * (x1 * (y3 - y2) - x2 * y3 + x3 * y2) + y1 * (x2 * y3 - x3 * y2)
             + x0 * y1 * (y2 - y3)) / wden,
            (x0 * (y1 * y3 - y2 * y3) + x1 * y2 * y3 - x2 * y1 * y3
             + y0 * (x3 * y2 - x1 * y2 + (x2 - x3) * y1)) / hden,
            y0,
            (x1 * (y3 - y2) + x0 * (y2 - y3) + (x2 - x3) * y1 + (x3 - x2) * y0) / wden,
            (-x2 * y3 + x1 * y3 + x3 * y2 + x0 * (y1 - y2) - x3 * y1
             + (x2 - x1) * y0) / hden,
        ]
        return cls(c)

    def map(self, u: float, v: float) -> Point:
        """Map grid coordinates to the nearest image point."""
        c = self.c
        den = c[6] * u + c[7] * v + 1.0
        if den == 0:
            raise ValueError(f"({u}, {v}) maps to infinity")
        x = (c[0] * u + c[1] * v + c[2]) / den
        y = (c[3] * u + c[4] * v + c[5]) / den
        return Point(round(x), round(y))

    def unmap(self, point: Point) -> tuple[float, float]:
        """Map an image point back to grid coordinates (u, v)."""
        c = self.c
        x = float(point.x)
        y = float(point.y)
        den = (-c[0] * c[7] * y + c[1] * c[6] * y + (c[3] * c[7] - c[4] * c[6]) * x
               + c[0] * c[4] - c[1] * c[3])
        if den == 0:
            raise ValueError("perspective cannot be inverted at this point")
        u = -(c[1] * (y - c[5]) - c[2] * c[7] * y + (c[5] * c[7] - c[4]) * x
              + c[2] * c[4]) / den
        v = (c[0] * (y - c[5]) - c[2] * c[6] * y + (c[5] * c[6] - c[3]) * x
             + c[2] * c[3]) / den
        return u, v