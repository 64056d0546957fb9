"""On-center grid placement with exclusion zones.

Studs, cripple studs and fire blocking all walk the wall's stud grid
(multiples of the stud spacing measured from the wall start) and skip
positions that collide with an opening.
"""

from __future__ import annotations
import math
from collections.abc import Iterable, Iterator

from wallframe.models import ExclusionZone, RoughOpening


EPSILON = 1e-9


def grid_positions(
    lower: float,
    upper: float,
    spacing: float,
    zones: Iterable[ExclusionZone] = (),
    span: float = 0.0,
) -> Iterator[float]:
    """
    Yield grid positions k * spacing with lower <= position <= upper.

    A position is skipped when the interval [position, position + span]
    touches any zone. Positions are computed from the index rather than
    accumulated, so long walls do not drift.
    """
    if spacing <= 0:
        raise ValueError(f"spacing must be positive, got {spacing}")
    zones = list(zones)
    k = max(0, math.ceil((lower - EPSILON) / spacing))
    while True:
        position = k * spacing
        if position > upper + EPSILON:
            return
        if not any(z.overlaps(position, position + span) for z in zones):
            yield position
        k += 1


def opening_exclusion_zones(
    rough_openings: Iterable[RoughOpening], lumber_width: float,
) -> list[ExclusionZone]:
    """Opening bounds widened by two lumber widths each side for king/jack studs."""
    return [
        ExclusionZone(
            start=ro.left - 2.0 * lumber_width,
            end=ro.right + 2.0 * lumber_width,
            opening_id=ro.opening_id,
        )
        for ro in rough_openings
    ]


def segment_within_opening(
    start: float, end: float, rough_openings: Iterable[RoughOpening],
) -> bool:
    """True if [start, end] lies wholly inside a single rough opening."""
    return any(start >= ro.left and end <= ro.right for ro in rough_openings)
