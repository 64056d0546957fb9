"""Interface shared by the wall placement rules.

Each rule places one family of members (plates, studs, opening framing,
fire blocking) and decides for itself whether a wall needs it.
"""

from __future__ import annotations
from abc import ABC, abstractmethod

from wallframe.models import (
    FramingContext, FramingMaterial, FramingMember, FramingMemberType, LumberSize,
)


class FramingRule(ABC):
    """
    One placement step in a wall framing pass.

    Rules hold no state; the same instance may serve many walls.
    """

    # Lower runs earlier
    priority: int = 100

    # Rule ids whose members must be placed first
    dependencies: list[str] = []

    @abstractmethod
    def get_id(self) -> str:
        """Stable dotted id, e.g. "wall.studs"."""

    @abstractmethod
    def get_name(self) -> str:
        """Display name, e.g. "Common Studs"."""

    @abstractmethod
    def applies(self, context: FramingContext) -> bool:
        """Whether the wall in `context` needs this rule."""

    @abstractmethod
    def generate(self, context: FramingContext) -> list[FramingMember]:
        """Members for the wall in `context`. Rough openings and exclusion
        zones are already filled in by the analyzer."""

    @staticmethod
    def member(
        context: FramingContext,
        member_type: FramingMemberType,
        along: float,
        z: float,
        length: float,
        *,
        lumber_size: LumberSize | None = None,
        material: FramingMaterial = FramingMaterial.SPF,
        horizontal: bool = False,
        opening_id: str | None = None,
    ) -> FramingMember:
        """Build a member whose start sits `along` inches from the wall start."""
        return FramingMember(
            member_type=member_type,
            lumber_size=lumber_size or context.config.lumber_size,
            material=material,
            position=context.point_along(along, z),
            length=length,
            rotation=context.rotation if horizontal else 0.0,
            wall_id=context.wall.id,
            opening_id=opening_id,
        )
