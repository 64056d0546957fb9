"""Framing configuration and generation options."""

from __future__ import annotations
from pydantic import BaseModel, Field

from .framing import LumberSize, NominalSize


class WallFramingConfig(BaseModel):
    """Per-wall framing settings, owned by the Wall."""
    stud_spacing: float = 16.0      # On-center, inches
    lumber_size: LumberSize = Field(default_factory=lambda: LumberSize.of(NominalSize.TWO_BY_SIX))
    double_top_plate: bool = True   # Required for load-bearing walls
    is_load_bearing: bool = True
    fire_blocking_required: bool = False

    @classmethod
    def exterior(cls) -> WallFramingConfig:
        """16" OC, 2x6, double top plate, load-bearing."""
        return cls()

    @classmethod
    def interior_partition(cls) -> WallFramingConfig:
        """16" OC, 2x4, single top plate, non-load-bearing."""
        return cls(
            lumber_size=LumberSize.of(NominalSize.TWO_BY_FOUR),
            double_top_plate=False,
            is_load_bearing=False,
        )

    @classmethod
    def interior_load_bearing(cls) -> WallFramingConfig:
        """16" OC, 2x4, double top plate, load-bearing."""
        return cls(lumber_size=LumberSize.of(NominalSize.TWO_BY_FOUR))

    def with_fire_blocking(self, required: bool = True) -> WallFramingConfig:
        return self.model_copy(update={"fire_blocking_required": required})


class GenerationConfig(BaseModel):
    """Controls which placement rules are applied."""
    enabled_rules: list[str] = []        # Empty = use all registered defaults
    disabled_rules: list[str] = []       # Explicitly disable specific rules
