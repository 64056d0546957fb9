"""Opening analysis: rough openings, bounds and spacing checks."""

from __future__ import annotations
import logging

from wallframe.models import (
    FramingContext, Opening, OpeningType, RoughOpening, Wall, WallFramingConfig,
)
from wallframe.core.errors import (
    OpeningOutOfBounds, OpeningTooLarge, OverlappingOpenings,
)
from wallframe.core.zones import opening_exclusion_zones

logger = logging.getLogger(__name__)


MIN_OPENING_GAP = 3.5  # At least one stud width between rough openings


def compute_rough_opening(
    opening: Opening, wall: Wall, config: WallFramingConfig,
) -> RoughOpening:
    """
    Turn a parametric opening into a rough opening on this wall.

    Raises OpeningOutOfBounds if the tolerance-expanded opening runs past
    either wall end, and OpeningTooLarge if it is taller than the wall.
    """
    wall_length = wall.length
    position = opening.position_along_wall * wall_length

    if opening.type == OpeningType.WINDOW:
        ro = RoughOpening.for_window(
            opening.id, opening.width, opening.height, position, config.is_load_bearing,
        )
    else:
        # Doors and generic openings frame the same way
        ro = RoughOpening.for_door(
            opening.id, opening.width, opening.height, position, config.is_load_bearing,
        )

    if ro.left < 0.0 or ro.right > wall_length:
        raise OpeningOutOfBounds(
            opening.id,
            f"Opening extends beyond wall bounds (left: {ro.left:.2f}, "
            f"right: {ro.right:.2f}, wall length: {wall_length:.2f})",
        )

    if ro.height > wall.height:
        raise OpeningTooLarge(
            opening.id,
            f"Opening height ({ro.height:.2f}\") exceeds wall height ({wall.height:.2f}\")",
        )

    return ro


def compute_all_rough_openings(
    wall: Wall, openings: list[Opening], config: WallFramingConfig,
) -> list[RoughOpening]:
    """Rough openings for the openings that belong to `wall`, in input order."""
    return [
        compute_rough_opening(o, wall, config)
        for o in openings
        if o.wall_id == wall.id
    ]


def validate_openings_no_overlap(rough_openings: list[RoughOpening]) -> None:
    """Raise OverlappingOpenings for the first pair closer than MIN_OPENING_GAP."""
    for i, ro1 in enumerate(rough_openings):
        for ro2 in rough_openings[i + 1:]:
            if ro1.right + MIN_OPENING_GAP > ro2.left and ro2.right + MIN_OPENING_GAP > ro1.left:
                raise OverlappingOpenings(
                    [ro1.opening_id, ro2.opening_id],
                    f"Openings overlap or are too close (need at least {MIN_OPENING_GAP:.1f}\" gap)",
                )


class OpeningAnalyzer:
    """Computes and validates rough openings for a wall."""

    def analyze(self, context: FramingContext) -> None:
        """Populate rough openings and exclusion zones on the context."""
        wall = context.wall
        rough_openings = compute_all_rough_openings(wall, context.openings, context.config)
        validate_openings_no_overlap(rough_openings)

        context.rough_openings = rough_openings
        context.exclusion_zones = opening_exclusion_zones(rough_openings, context.lumber_width)
        logger.debug(
            "Wall %s: %d rough opening(s) computed", wall.id, len(rough_openings),
        )
