from __future__ import annotations

from dataclasses import dataclass
import math


# Cell coordinate given to non-finite input; negative, so the grid drops it.
OFF_GRID = -1


@dataclass(frozen=True)
class Point:
    """Continuous 2-D coordinate in source units. Y grows downward."""

    x: float
    y: float

    def sub(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y)


def round_half_away(value: float) -> int:
    """Round to the nearest integer, ties away from zero (Python's round() ties to even)."""
    magnitude = abs(value)
    whole = math.floor(magnitude)
    if magnitude - whole >= 0.5:
        whole += 1
    return int(whole) if value >= 0.0 else -int(whole)


def to_cell(point: Point, scale: float) -> tuple[int, int]:
    """Map a source point onto integer grid coordinates.

    Negative results are valid and returned as-is; the grid discards writes there.
    """
    return (_axis(point.x, scale), _axis(point.y, scale))


def to_cells(length: float, scale: float) -> int:
    """Convert a source length (width, height, diameter) to a whole number of cells, never negative."""
    value = length / scale
    if not math.isfinite(value):
        return 0
    return max(0, round_half_away(value))


def _axis(value: float, scale: float) -> int:
    scaled = value / scale
    if not math.isfinite(scaled):
        return OFF_GRID
    return round_half_away(scaled)
