"""Wall framing generator: orchestrates validation, analysis and rules."""

from __future__ import annotations
import logging

from wallframe.models import (
    FramingContext, FramingLayout, GenerationConfig, Opening, Wall, WallAssembly,
)
from wallframe.core.analyzer import OpeningAnalyzer
from wallframe.core.errors import FramingError, InvalidConfig, InvalidWallDimensions
from wallframe.core.registry import RuleRegistry, create_default_registry

logger = logging.getLogger(__name__)


MIN_WALL_LENGTH = 1.0
MIN_WALL_HEIGHT = 12.0


class FramingGenerator:
    """
    Stateless wall framing generator.

    Takes a wall, its assembly and openings, validates them, runs the
    applicable rules and returns a complete FramingLayout. Any error
    aborts the pass; no partial layout is returned.
    """

    def __init__(self, registry: RuleRegistry | None = None) -> None:
        self.registry = registry or create_default_registry()
        self.analyzer = OpeningAnalyzer()

    def generate(
        self,
        wall: Wall,
        assembly: WallAssembly,
        openings: list[Opening],
        options: GenerationConfig | None = None,
    ) -> FramingLayout:
        if options is None:
            options = GenerationConfig()

        context = FramingContext(
            wall=wall,
            assembly=assembly,
            openings=openings,
            options=options,
        )

        try:
            self._validate_wall(context)
            self._validate_config(context)

            # Analysis phase: rough openings, bounds and spacing
            self.analyzer.analyze(context)

            config = context.config
            layout = FramingLayout(
                wall_id=wall.id,
                stud_spacing=config.stud_spacing,
                double_top_plate=config.double_top_plate,
                lumber_size=config.lumber_size,
            )

            # Generation phase: run applicable rules
            for rule in self.registry.get_applicable_rules(context):
                members = rule.generate(context)
                logger.debug("Wall %s: %s placed %d member(s)", wall.id, rule.get_id(), len(members))
                for member in members:
                    layout.add_member(member)
        except FramingError as exc:
            logger.warning("Framing rejected for wall %s: %s", wall.id, exc)
            raise

        layout.recalculate_totals()
        logger.debug(
            "Wall %s: %d members, %d studs, %.2f board feet",
            wall.id, len(layout.members), layout.stud_count, layout.total_board_feet,
        )
        return layout

    @staticmethod
    def _validate_wall(context: FramingContext) -> None:
        wall = context.wall
        if wall.length < MIN_WALL_LENGTH:
            raise InvalidWallDimensions(
                wall.id, f"Wall length ({wall.length:.2f}\") is too short",
            )
        if wall.height < MIN_WALL_HEIGHT:
            raise InvalidWallDimensions(
                wall.id, f"Wall height ({wall.height:.2f}\") is too short",
            )
        if context.stud_height <= 0:
            raise InvalidWallDimensions(
                wall.id,
                f"Wall height ({wall.height:.2f}\") leaves no room for studs "
                f"between {context.plate_count} plates",
            )

    @staticmethod
    def _validate_config(context: FramingContext) -> None:
        spacing = context.config.stud_spacing
        if spacing <= context.lumber_width:
            raise InvalidConfig(
                f"Stud spacing ({spacing:.2f}\") must exceed the lumber width "
                f"({context.lumber_width:.2f}\")",
            )


_default_generator = FramingGenerator()


def generate_wall_framing(
    wall: Wall, assembly: WallAssembly, openings: list[Opening],
) -> FramingLayout:
    """Generate the framing layout for one wall with the standard rules."""
    return _default_generator.generate(wall, assembly, openings)
