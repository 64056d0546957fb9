"""Fire blocking: horizontal blocks at mid-height of the stud cavity.

The wall is split into 10' segments. Each stud bay on the grid belongs to
the segment it starts in, so bays straddling a segment boundary are still
blocked. Segments wholly inside an opening and bays that run into an
opening's exclusion zone get no block.
"""

from __future__ import annotations

from wallframe.core.zones import EPSILON, grid_positions, segment_within_opening
from wallframe.models import ExclusionZone, FramingContext, FramingMember, FramingMemberType
from wallframe.rules.base import FramingRule


FIRE_BLOCK_INTERVAL = 120.0  # 10 feet


class FireBlockingRule(FramingRule):
    """Fire blocking for walls that require it."""

    priority = 40
    dependencies = ["wall.studs"]

    def get_id(self) -> str:
        return "wall.fire_blocking"

    def get_name(self) -> str:
        return "Fire Blocking"

    def applies(self, context: FramingContext) -> bool:
        return context.config.fire_blocking_required

    def generate(self, context: FramingContext) -> list[FramingMember]:
        wall_length = context.wall.length
        last_slot = wall_length - context.lumber_width
        spacing = context.config.stud_spacing
        blocking_z = context.stud_base_z + context.stud_height / 2.0

        members: list[FramingMember] = []
        segment_start = 0.0
        while segment_start < wall_length:
            segment_end = min(segment_start + FIRE_BLOCK_INTERVAL, wall_length)
            if not segment_within_opening(segment_start, segment_end, context.rough_openings):
                for pos, length in self.block_spans(
                    segment_start, min(segment_end, last_slot), spacing,
                    wall_length, context.exclusion_zones,
                ):
                    members.append(self.member(
                        context, FramingMemberType.FIRE_BLOCKING, pos, blocking_z, length,
                        horizontal=True,
                    ))
            segment_start += FIRE_BLOCK_INTERVAL
        return members

    @staticmethod
    def block_spans(
        start: float,
        limit: float,
        spacing: float,
        wall_length: float,
        zones: list[ExclusionZone],
    ) -> list[tuple[float, float]]:
        """(position, length) of each bay starting in [start, limit), clipped to the wall end."""
        spans = []
        for pos in grid_positions(start, limit, spacing):
            if pos >= limit - EPSILON:
                break
            length = min(spacing, wall_length - pos)
            if any(z.overlaps(pos, pos + length) for z in zones):
                continue
            spans.append((pos, length))
        return spans
