"""Building element models: walls, openings and wall assemblies."""

from __future__ import annotations
import uuid
from enum import Enum
from pydantic import BaseModel, Field

from .geometry import Point2D, Vector2D, direction_from_points
from .parameters import WallFramingConfig


def _new_id() -> str:
    return str(uuid.uuid4())


class OpeningType(str, Enum):
    WINDOW = "window"
    DOOR = "door"
    OTHER = "other"


class Wall(BaseModel):
    """A wall segment defined by two centerline endpoints."""
    id: str = Field(default_factory=_new_id)
    start: Point2D
    end: Point2D
    height: float                 # Inches
    base_offset: float = 0.0      # Offset from level elevation
    framing_config: WallFramingConfig = Field(default_factory=WallFramingConfig)

    @property
    def length(self) -> float:
        return self.start.distance_to(self.end)

    def direction(self) -> Vector2D:
        """Unit vector from start to end."""
        return direction_from_points(self.start, self.end)

    def rotation(self) -> float:
        """Angle of the wall about the vertical axis in radians."""
        return self.direction().heading()


class Opening(BaseModel):
    """An opening (window/door) positioned along a wall."""
    id: str = Field(default_factory=_new_id)
    wall_id: str
    type: OpeningType
    position_along_wall: float  # Parametric center, 0.0 = start, 1.0 = end
    width: float = Field(gt=0)  # Finished unit width (inches)
    height: float = Field(gt=0)  # Finished unit height (inches)
    sill_height: float = Field(default=0.0, ge=0)  # Floor to bottom of opening (inches)

    @classmethod
    def window(
        cls,
        wall_id: str,
        position_along_wall: float,
        width: float,
        height: float,
        sill_height: float,
        **kwargs,
    ) -> Opening:
        return cls(
            wall_id=wall_id, type=OpeningType.WINDOW,
            position_along_wall=position_along_wall,
            width=width, height=height, sill_height=sill_height,
            **kwargs,
        )

    @classmethod
    def door(
        cls,
        wall_id: str,
        position_along_wall: float,
        width: float,
        height: float,
        **kwargs,
    ) -> Opening:
        # Doors start at floor level
        return cls(
            wall_id=wall_id, type=OpeningType.DOOR,
            position_along_wall=position_along_wall,
            width=width, height=height, sill_height=0.0,
            **kwargs,
        )


class AssemblyLayer(BaseModel):
    name: str
    thickness: float  # Inches
    material: str = ""


class WallAssembly(BaseModel):
    """Layered wall build-up (sheathing, studs, finish)."""
    id: str = Field(default_factory=_new_id)
    name: str
    layers: list[AssemblyLayer] = []

    @property
    def total_thickness(self) -> float:
        return sum(layer.thickness for layer in self.layers)

    @classmethod
    def exterior_2x6(cls) -> WallAssembly:
        return cls(
            name="Exterior 2x6",
            layers=[
                AssemblyLayer(name="Siding", thickness=0.625, material="fiber_cement"),
                AssemblyLayer(name="Sheathing", thickness=0.4375, material="osb"),
                AssemblyLayer(name="Studs", thickness=5.5, material="spf"),
                AssemblyLayer(name="Drywall", thickness=0.5, material="gypsum"),
            ],
        )

    @classmethod
    def interior_partition(cls) -> WallAssembly:
        return cls(
            name="Interior Partition 2x4",
            layers=[
                AssemblyLayer(name="Drywall", thickness=0.5, material="gypsum"),
                AssemblyLayer(name="Studs", thickness=3.5, material="spf"),
                AssemblyLayer(name="Drywall", thickness=0.5, material="gypsum"),
            ],
        )
