"""Framing context: holds state during one wall's generation pass."""

from __future__ import annotations
from pydantic import BaseModel, Field

from .building import Wall, WallAssembly, Opening
from .framing import RoughOpening
from .geometry import Point3D, Vector2D
from .parameters import WallFramingConfig, GenerationConfig


class ExclusionZone(BaseModel):
    """A closed interval along the wall where grid members are not placed."""
    start: float
    end: float
    opening_id: str | None = None

    def contains(self, position: float) -> bool:
        return self.start <= position <= self.end

    def overlaps(self, start: float, end: float) -> bool:
        return start <= self.end and end >= self.start


class FramingContext(BaseModel):
    """
    Holds all state during a single wall framing pass.

    The analyzer adds rough openings and exclusion zones.
    Rules read the context and return members.
    The generator orchestrates the flow.
    """
    # Input
    wall: Wall
    assembly: WallAssembly
    openings: list[Opening] = []
    options: GenerationConfig = Field(default_factory=GenerationConfig)

    # Analysis results (populated by the analyzer)
    rough_openings: list[RoughOpening] = []
    exclusion_zones: list[ExclusionZone] = []

    @property
    def config(self) -> WallFramingConfig:
        return self.wall.framing_config

    @property
    def lumber_width(self) -> float:
        return self.config.lumber_size.actual_dimensions()[0]

    @property
    def lumber_depth(self) -> float:
        return self.config.lumber_size.actual_dimensions()[1]

    @property
    def plate_count(self) -> int:
        return 3 if self.config.double_top_plate else 2

    @property
    def stud_height(self) -> float:
        """Clear height between bottom plate and lowest top plate."""
        return self.wall.height - self.plate_count * self.lumber_depth

    @property
    def stud_base_z(self) -> float:
        """Elevation of the top of the bottom plate."""
        return self.wall.base_offset + self.lumber_depth

    @property
    def direction(self) -> Vector2D:
        return self.wall.direction()

    @property
    def rotation(self) -> float:
        return self.wall.rotation()

    def point_along(self, distance: float, z: float) -> Point3D:
        """Absolute point `distance` inches along the wall at elevation z."""
        return self.wall.start.offset(self.direction, distance).at_elevation(z)
