"""Tapered band geometry for hit-testing and tooltip anchoring."""

from __future__ import annotations

__all__ = ["BandGeometry"]

from dataclasses import dataclass

from sankey_flow.parser.model import Orientation


@dataclass
class BandGeometry:
    """A band between two boundary points with a thickness at each end.

    The primary axis is the one the band travels along (x for horizontal,
    y for vertical); thickness is measured on the other axis. Coordinates
    left as None are unset.
    """

    x: float | None = None
    y: float | None = None
    x2: float | None = None
    y2: float | None = None
    height: float | None = None
    height2: float | None = None
    orientation: Orientation | str = Orientation.HORIZONTAL

    def contains_point(self, px: float, py: float) -> bool:
        """Return True if (px, py) lies inside the band's linear taper.

        The thickness at the query point is interpolated linearly between
        the two end thicknesses, centered on the interpolated centerline.
        A zero-length band contains nothing.
        """
        if None in (self.x, self.y, self.x2, self.y2):
            return False
        h1 = self.height or 0.0
        h2 = self.height2 if self.height2 is not None else h1

        if Orientation(self.orientation) is Orientation.VERTICAL:
            start, end, along, across = self.y, self.y2, py, px
            c1, c2 = self.x, self.x2
        else:
            start, end, along, across = self.x, self.x2, px, py
            c1, c2 = self.y, self.y2

        if start == end:
            return False
        if along < min(start, end) or along > max(start, end):
            return False

        t = (along - start) / (end - start)
        center = c1 + t * (c2 - c1)
        half = (h1 + t * (h2 - h1)) / 2
        return center - half <= across <= center + half

    def center_point(self) -> tuple[float, float]:
        """Midpoint of the two endpoints; unset coordinates read as 0."""
        return (
            ((self.x or 0.0) + (self.x2 or 0.0)) / 2,
            ((self.y or 0.0) + (self.y2 or 0.0)) / 2,
        )

    def tooltip_position(self) -> tuple[float, float]:
        return self.center_point()
