"""High-level framing service: facade for the API layer and schedulers."""

from __future__ import annotations
import logging

from wallframe.models import (
    FramingLayout, GenerationConfig, Opening, Wall, WallAssembly,
)
from wallframe.core.errors import FramingError
from wallframe.core.generator import FramingGenerator
from wallframe.core.regeneration import RegenerationManager
from wallframe.core.registry import RuleRegistry, create_default_registry

logger = logging.getLogger(__name__)


class FrameService:
    """Delegates to the generator and drains regeneration requests."""

    def __init__(self, registry: RuleRegistry | None = None) -> None:
        self.registry = registry or create_default_registry()
        self.generator = FramingGenerator(self.registry)

    def generate(
        self,
        wall: Wall,
        openings: list[Opening] | None = None,
        assembly: WallAssembly | None = None,
        options: GenerationConfig | None = None,
    ) -> FramingLayout:
        if assembly is None:
            assembly = WallAssembly.exterior_2x6()
        return self.generator.generate(wall, assembly, openings or [], options)

    def regenerate_dirty(
        self,
        manager: RegenerationManager,
        walls: list[Wall],
        assembly: WallAssembly,
        openings: list[Opening],
    ) -> tuple[dict[str, FramingLayout], dict[str, FramingError]]:
        """
        Regenerate every dirty wall known to `walls`.

        Walls that frame successfully are marked clean. Walls that fail
        stay dirty so the caller can fix the input and retry. Dirty ids
        with no matching wall (e.g. deleted walls) are marked clean.
        """
        by_id = {w.id: w for w in walls}
        layouts: dict[str, FramingLayout] = {}
        errors: dict[str, FramingError] = {}

        for wall_id in sorted(manager.get_dirty_walls()):
            wall = by_id.get(wall_id)
            if wall is None:
                logger.debug("Dirty wall %s no longer exists; dropping", wall_id)
                manager.mark_clean(wall_id)
                continue
            try:
                layouts[wall_id] = self.generator.generate(wall, assembly, openings)
            except FramingError as exc:
                errors[wall_id] = exc
                continue
            manager.mark_clean(wall_id)

        logger.info(
            "Regenerated %d wall(s), %d failed", len(layouts), len(errors),
        )
        return layouts, errors

    def list_rules(self) -> list[dict[str, str]]:
        return [
            {"id": r.get_id(), "name": r.get_name()}
            for r in self.registry.list_rules()
        ]
