from .geometry import Point2D, Point3D, Vector2D, direction_from_points
from .building import Wall, Opening, OpeningType, WallAssembly, AssemblyLayer
from .framing import (
    NominalSize, LumberSize, FramingMemberType, FramingMaterial, HeaderType,
    FramingMember, RoughOpening, FramingLayout, LayoutSummary, LumberTakeoff,
)
from .parameters import WallFramingConfig, GenerationConfig
from .context import FramingContext, ExclusionZone

__all__ = [
    "Point2D", "Point3D", "Vector2D", "direction_from_points",
    "Wall", "Opening", "OpeningType", "WallAssembly", "AssemblyLayer",
    "NominalSize", "LumberSize", "FramingMemberType", "FramingMaterial", "HeaderType",
    "FramingMember", "RoughOpening", "FramingLayout", "LayoutSummary", "LumberTakeoff",
    "WallFramingConfig", "GenerationConfig",
    "FramingContext", "ExclusionZone",
]
