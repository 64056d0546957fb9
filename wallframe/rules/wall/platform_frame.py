"""Platform wall framing: plates and common studs.

Plates run the full wall length. Common studs sit on the on-center grid
measured from the wall start, skipping opening exclusion zones, with a
trailing stud at the far end when the grid stops short of it.
"""

from __future__ import annotations
import math

from wallframe.core.zones import grid_positions
from wallframe.models import FramingContext, FramingMember, FramingMemberType
from wallframe.rules.base import FramingRule


class PlateRule(FramingRule):
    """Bottom plate, top plate and optional double top plate."""

    priority = 10  # Plates define the stud cavity

    def get_id(self) -> str:
        return "wall.plates"

    def get_name(self) -> str:
        return "Wall Plates"

    def applies(self, context: FramingContext) -> bool:
        return True

    def generate(self, context: FramingContext) -> list[FramingMember]:
        wall = context.wall
        length = wall.length
        depth = context.lumber_depth

        members = [
            self.member(context, FramingMemberType.BOTTOM_PLATE, 0.0,
                        wall.base_offset, length, horizontal=True),
        ]

        top_plate_z = wall.base_offset + wall.height - depth
        members.append(
            self.member(context, FramingMemberType.TOP_PLATE, 0.0,
                        top_plate_z, length, horizontal=True),
        )

        if context.config.double_top_plate:
            members.append(
                self.member(context, FramingMemberType.DOUBLE_TOP_PLATE, 0.0,
                            top_plate_z - depth, length, horizontal=True),
            )

        return members


class StudRule(FramingRule):
    """Common studs at on-center spacing."""

    priority = 20
    dependencies = ["wall.plates"]

    def get_id(self) -> str:
        return "wall.studs"

    def get_name(self) -> str:
        return "Common Studs"

    def applies(self, context: FramingContext) -> bool:
        return context.stud_height > 0

    def generate(self, context: FramingContext) -> list[FramingMember]:
        width = context.lumber_width
        spacing = context.config.stud_spacing
        positions = self.stud_positions(
            context.wall.length, spacing, width, context.exclusion_zones,
        )
        return [
            self.member(context, FramingMemberType.STUD, pos,
                        context.stud_base_z, context.stud_height)
            for pos in positions
        ]

    @staticmethod
    def stud_positions(wall_length, spacing, lumber_width, zones) -> list[float]:
        last_slot = wall_length - lumber_width
        positions = list(grid_positions(0.0, last_slot, spacing, zones, span=lumber_width))

        # Trailing stud when the regular grid leaves more than a stud width
        if last_slot >= 0 and not any(z.overlaps(last_slot, wall_length) for z in zones):
            last_grid = math.floor(last_slot / spacing) * spacing
            if abs(last_slot - last_grid) > lumber_width:
                positions.append(last_slot)

        return positions
