"""Opening framing: king and jack studs, header, sill and cripples.

For a rough opening spanning [left, right] along the wall:

    king | jack(s) |        rough opening        | jack(s) | king
         ^ left - width                    right ^

The header bears on the jacks at the top of the stud cavity. Windows
get a sill at the opening's bottom edge with cripples beneath it.
"""

from __future__ import annotations

from wallframe.core.errors import OpeningTooLarge
from wallframe.core.headers import header_material, size_header_lumber
from wallframe.core.zones import grid_positions
from wallframe.models import (
    ExclusionZone, FramingContext, FramingMember, FramingMemberType, RoughOpening,
)
from wallframe.rules.base import FramingRule


class OpeningFramingRule(FramingRule):
    """Frames every rough opening on the wall."""

    priority = 30
    dependencies = ["wall.studs"]

    def get_id(self) -> str:
        return "wall.opening_frame"

    def get_name(self) -> str:
        return "Opening Framing"

    def applies(self, context: FramingContext) -> bool:
        return len(context.rough_openings) > 0

    def generate(self, context: FramingContext) -> list[FramingMember]:
        members: list[FramingMember] = []
        for ro in context.rough_openings:
            members.extend(self._frame_opening(context, ro))
        return members

    def _frame_opening(
        self, context: FramingContext, ro: RoughOpening,
    ) -> list[FramingMember]:
        members: list[FramingMember] = []
        width = context.lumber_width
        depth = context.lumber_depth
        base_z = context.stud_base_z
        full_height = context.stud_height
        oid = ro.opening_id

        king_left = ro.left - width
        king_right = ro.right

        header_bottom_z = base_z + full_height - ro.header_depth
        jack_height = header_bottom_z - base_z
        if jack_height <= 0:
            raise OpeningTooLarge(
                oid,
                f"Header depth ({ro.header_depth:.2f}\") leaves no room for jack "
                f"studs in a {full_height:.2f}\" stud cavity",
            )

        # King studs, full height
        for pos in (king_left, king_right):
            members.append(self.member(
                context, FramingMemberType.KING_STUD, pos, base_z, full_height,
                opening_id=oid,
            ))

        # Jack studs, inside the kings
        for i in range(ro.jack_stud_count):
            offset = (i + 1) * width
            for pos in (king_left + offset, king_right - offset):
                members.append(self.member(
                    context, FramingMemberType.JACK_STUD, pos, base_z, jack_height,
                    opening_id=oid,
                ))

        # Header starts flush at the left jack and is width + 2n jack widths long,
        # so it ends (2n - 1) widths past the outer face of the right king
        header_start = king_left + width
        header_length = ro.width + ro.jack_stud_count * width * 2.0
        is_load_bearing = context.config.is_load_bearing
        members.append(self.member(
            context, FramingMemberType.HEADER, header_start, header_bottom_z, header_length,
            lumber_size=size_header_lumber(ro.width, is_load_bearing),
            material=header_material(ro.header_type),
            horizontal=True,
            opening_id=oid,
        ))

        jack_zones = self._jack_zones(ro, width)

        if ro.requires_sill:
            sill_z = base_z + jack_height - ro.height
            members.append(self.member(
                context, FramingMemberType.SILL, header_start, sill_z, header_length,
                horizontal=True,
                opening_id=oid,
            ))

            below_height = sill_z - base_z
            if below_height > depth:
                members.extend(self._cripples(
                    context, ro, jack_zones, base_z, below_height,
                ))

        above_z = header_bottom_z + ro.header_depth
        above_height = base_z + full_height - above_z
        if above_height > depth:
            members.extend(self._cripples(
                context, ro, jack_zones, above_z, above_height,
            ))

        return members

    @staticmethod
    def _jack_zones(ro: RoughOpening, width: float) -> list[ExclusionZone]:
        jack_run = ro.jack_stud_count * width
        return [
            ExclusionZone(start=ro.left, end=ro.left + jack_run, opening_id=ro.opening_id),
            ExclusionZone(start=ro.right - jack_run, end=ro.right, opening_id=ro.opening_id),
        ]

    def _cripples(
        self,
        context: FramingContext,
        ro: RoughOpening,
        jack_zones: list[ExclusionZone],
        z: float,
        height: float,
    ) -> list[FramingMember]:
        """Cripple studs on the wall's stud grid between the jacks."""
        width = context.lumber_width
        positions = grid_positions(
            ro.left, ro.right - width, context.config.stud_spacing,
            jack_zones, span=width,
        )
        return [
            self.member(
                context, FramingMemberType.CRIPPLE_STUD, pos, z, height,
                opening_id=ro.opening_id,
            )
            for pos in positions
        ]
