"""Framing output models: lumber, members, rough openings and layouts."""

from __future__ import annotations
import math
import uuid
from collections import Counter
from enum import Enum
from pydantic import BaseModel, Field, model_validator

from .geometry import Point3D


class NominalSize(str, Enum):
    TWO_BY_FOUR = "2x4"
    TWO_BY_SIX = "2x6"
    TWO_BY_EIGHT = "2x8"
    TWO_BY_TEN = "2x10"
    TWO_BY_TWELVE = "2x12"
    FOUR_BY_FOUR = "4x4"
    FOUR_BY_SIX = "4x6"
    CUSTOM = "custom"


# Actual (milled) dimensions in inches: (width, depth)
ACTUAL_DIMENSIONS: dict[NominalSize, tuple[float, float]] = {
    NominalSize.TWO_BY_FOUR: (1.5, 3.5),
    NominalSize.TWO_BY_SIX: (1.5, 5.5),
    NominalSize.TWO_BY_EIGHT: (1.5, 7.25),
    NominalSize.TWO_BY_TEN: (1.5, 9.25),
    NominalSize.TWO_BY_TWELVE: (1.5, 11.25),
    NominalSize.FOUR_BY_FOUR: (3.5, 3.5),
    NominalSize.FOUR_BY_SIX: (3.5, 5.5),
}


class LumberSize(BaseModel):
    """
    A lumber cross-section.

    Standard sizes carry their nominal tag and get actual dimensions
    filled in from the milling table. Custom sizes (engineered lumber)
    carry explicit width and depth.
    """
    nominal: NominalSize = NominalSize.TWO_BY_SIX
    width: float | None = None   # Narrow face (inches)
    depth: float | None = None   # Wide face (inches)

    @model_validator(mode="after")
    def _fill_dimensions(self) -> LumberSize:
        if self.nominal == NominalSize.CUSTOM:
            if self.width is None or self.depth is None:
                raise ValueError("custom lumber requires width and depth")
            if self.width <= 0 or self.depth <= 0:
                raise ValueError("custom lumber dimensions must be positive")
        else:
            width, depth = ACTUAL_DIMENSIONS[self.nominal]
            for given, actual in ((self.width, width), (self.depth, depth)):
                if given is not None and not math.isclose(given, actual):
                    raise ValueError(
                        f"{self.nominal.value} lumber is {width:g}x{depth:g}, "
                        f"got {self.width}x{self.depth}"
                    )
            self.width, self.depth = width, depth
        return self

    @classmethod
    def of(cls, nominal: NominalSize | str) -> LumberSize:
        return cls(nominal=NominalSize(nominal))

    @classmethod
    def custom(cls, width: float, depth: float) -> LumberSize:
        return cls(nominal=NominalSize.CUSTOM, width=width, depth=depth)

    def actual_dimensions(self) -> tuple[float, float]:
        """(width, depth) in inches; width is the narrow face."""
        return self.width, self.depth  # type: ignore[return-value]

    def nominal_name(self) -> str:
        if self.nominal == NominalSize.CUSTOM:
            return f"{self.width:g}x{self.depth:g}"
        return self.nominal.value

    def board_feet_per_foot(self) -> float:
        # (w * d * 12) / 144 per linear foot
        width, depth = self.actual_dimensions()
        return width * depth / 12.0


class FramingMemberType(str, Enum):
    STUD = "stud"
    KING_STUD = "king_stud"
    JACK_STUD = "jack_stud"
    HEADER = "header"
    BOTTOM_PLATE = "bottom_plate"
    TOP_PLATE = "top_plate"
    DOUBLE_TOP_PLATE = "double_top_plate"
    CRIPPLE_STUD = "cripple_stud"
    SILL = "sill"
    FIRE_BLOCKING = "fire_blocking"

    def display_name(self) -> str:
        return _MEMBER_DISPLAY_NAMES[self]

    def is_vertical(self) -> bool:
        return self in VERTICAL_MEMBER_TYPES

    def is_horizontal(self) -> bool:
        return not self.is_vertical()


VERTICAL_MEMBER_TYPES = frozenset({
    FramingMemberType.STUD,
    FramingMemberType.KING_STUD,
    FramingMemberType.JACK_STUD,
    FramingMemberType.CRIPPLE_STUD,
})

PLATE_MEMBER_TYPES = frozenset({
    FramingMemberType.BOTTOM_PLATE,
    FramingMemberType.TOP_PLATE,
    FramingMemberType.DOUBLE_TOP_PLATE,
})

_MEMBER_DISPLAY_NAMES = {
    FramingMemberType.STUD: "Stud",
    FramingMemberType.KING_STUD: "King Stud",
    FramingMemberType.JACK_STUD: "Jack Stud",
    FramingMemberType.HEADER: "Header",
    FramingMemberType.BOTTOM_PLATE: "Bottom Plate",
    FramingMemberType.TOP_PLATE: "Top Plate",
    FramingMemberType.DOUBLE_TOP_PLATE: "Double Top Plate",
    FramingMemberType.CRIPPLE_STUD: "Cripple Stud",
    FramingMemberType.SILL: "Sill",
    FramingMemberType.FIRE_BLOCKING: "Fire Blocking",
}


class FramingMaterial(str, Enum):
    SPF = "spf"      # Spruce-Pine-Fir
    DF = "df"        # Douglas Fir
    SYP = "syp"      # Southern Yellow Pine
    LVL = "lvl"      # Laminated Veneer Lumber
    PSL = "psl"      # Parallel Strand Lumber
    STEEL = "steel"

    def display_name(self) -> str:
        return {
            FramingMaterial.SPF: "SPF (Spruce-Pine-Fir)",
            FramingMaterial.DF: "Douglas Fir",
            FramingMaterial.SYP: "Southern Yellow Pine",
            FramingMaterial.LVL: "LVL (Laminated Veneer Lumber)",
            FramingMaterial.PSL: "PSL (Parallel Strand Lumber)",
            FramingMaterial.STEEL: "Steel",
        }[self]

    def is_engineered(self) -> bool:
        return self in (FramingMaterial.LVL, FramingMaterial.PSL)


class HeaderType(str, Enum):
    DOUBLE_LUMBER = "double_lumber"
    TRIPLE_LUMBER = "triple_lumber"
    LVL = "lvl"
    PSL = "psl"
    STEEL_LINTEL = "steel_lintel"
    GLULAM = "glulam"

    def display_name(self) -> str:
        return {
            HeaderType.DOUBLE_LUMBER: "Double Lumber",
            HeaderType.TRIPLE_LUMBER: "Triple Lumber",
            HeaderType.LVL: "LVL Beam",
            HeaderType.PSL: "PSL Beam",
            HeaderType.STEEL_LINTEL: "Steel Lintel",
            HeaderType.GLULAM: "Glulam Beam",
        }[self]

    @classmethod
    def for_span(cls, span: float, is_load_bearing: bool) -> HeaderType:
        """Pick a header type for a clear span in inches."""
        if not is_load_bearing:
            return cls.DOUBLE_LUMBER if span <= 48.0 else cls.TRIPLE_LUMBER
        if span <= 36.0:
            return cls.DOUBLE_LUMBER
        if span <= 60.0:
            return cls.TRIPLE_LUMBER
        if span <= 96.0:
            return cls.LVL
        return cls.PSL


def _new_id() -> str:
    return str(uuid.uuid4())


class FramingMember(BaseModel):
    """
    A single piece of framing positioned in 3D space.

    `position` is the member's start point: the base of a vertical member,
    or the wall-start end of a horizontal member. Horizontal members run
    along `rotation` (radians about the vertical axis).
    """
    id: str = Field(default_factory=_new_id)
    member_type: FramingMemberType
    lumber_size: LumberSize
    material: FramingMaterial = FramingMaterial.SPF
    position: Point3D
    length: float = Field(gt=0)  # Inches
    rotation: float = 0.0
    wall_id: str
    opening_id: str | None = None

    def with_opening(self, opening_id: str) -> FramingMember:
        return self.model_copy(update={"opening_id": opening_id})

    def board_feet(self) -> float:
        return self.lumber_size.board_feet_per_foot() * (self.length / 12.0)

    def cross_section(self) -> tuple[float, float]:
        return self.lumber_size.actual_dimensions()

    def box_dimensions(self) -> tuple[float, float, float]:
        """Box extents as (along wall, through wall, vertical)."""
        width, depth = self.cross_section()
        if self.member_type.is_vertical():
            return width, depth, self.length
        return self.length, width, depth


class RoughOpening(BaseModel):
    """The framed cavity for a door or window, including tolerance."""
    opening_id: str
    width: float
    height: float
    position_along_wall: float  # Wall start to RO center (inches)
    jack_stud_count: int = 1    # Per side
    header_depth: float = 7.25  # 2x8 depth
    header_type: HeaderType = HeaderType.DOUBLE_LUMBER
    requires_sill: bool = False

    @property
    def left(self) -> float:
        return self.position_along_wall - self.width / 2.0

    @property
    def right(self) -> float:
        return self.position_along_wall + self.width / 2.0

    @classmethod
    def for_window(
        cls,
        opening_id: str,
        width: float,
        height: float,
        position_along_wall: float,
        is_load_bearing: bool,
    ) -> RoughOpening:
        # 1/2" each side, 1/2" on height
        ro_width = width + 1.0
        return cls(
            opening_id=opening_id,
            width=ro_width,
            height=height + 0.5,
            position_along_wall=position_along_wall,
            jack_stud_count=2 if ro_width > 48.0 else 1,
            header_type=HeaderType.for_span(ro_width, is_load_bearing),
            requires_sill=True,
        )

    @classmethod
    def for_door(
        cls,
        opening_id: str,
        width: float,
        height: float,
        position_along_wall: float,
        is_load_bearing: bool,
    ) -> RoughOpening:
        ro_width = width + 2.0
        return cls(
            opening_id=opening_id,
            width=ro_width,
            height=height + 0.5,
            position_along_wall=position_along_wall,
            jack_stud_count=2 if ro_width > 48.0 else 1,
            header_type=HeaderType.for_span(ro_width, is_load_bearing),
            requires_sill=False,
        )

    def with_header_type(self, header_type: HeaderType) -> RoughOpening:
        return self.model_copy(update={"header_type": header_type})

    def with_jack_studs(self, count: int) -> RoughOpening:
        return self.model_copy(update={"jack_stud_count": count})


class LayoutSummary(BaseModel):
    """Summary of a generated layout."""
    wall_id: str
    member_count: int = 0
    stud_count: int = 0
    total_board_feet: float = 0.0
    stud_spacing: float = 16.0
    lumber_size: str = "2x6"
    double_top_plate: bool = True
    member_breakdown: dict[str, int] = {}


class LumberTakeoff(BaseModel):
    """Quantity of one lumber size across a layout."""
    lumber_size: str
    pieces: int = 0
    linear_feet: float = 0.0
    board_feet: float = 0.0


class FramingLayout(BaseModel):
    """The complete framing for one wall."""
    id: str = Field(default_factory=_new_id)
    wall_id: str
    members: list[FramingMember] = []
    stud_spacing: float = 16.0
    double_top_plate: bool = True
    lumber_size: LumberSize = Field(default_factory=LumberSize)
    total_board_feet: float = 0.0
    stud_count: int = 0

    def add_member(self, member: FramingMember) -> None:
        # Running totals only; recalculate_totals() is authoritative.
        self.total_board_feet += member.board_feet()
        if member.member_type.is_vertical():
            self.stud_count += 1
        self.members.append(member)

    def members_of_type(self, member_type: FramingMemberType) -> list[FramingMember]:
        return [m for m in self.members if m.member_type == member_type]

    def members_for_opening(self, opening_id: str) -> list[FramingMember]:
        return [m for m in self.members if m.opening_id == opening_id]

    def recalculate_totals(self) -> None:
        self.total_board_feet = sum(m.board_feet() for m in self.members)
        self.stud_count = sum(1 for m in self.members if m.member_type.is_vertical())

    def summary(self) -> LayoutSummary:
        breakdown = Counter(m.member_type.display_name() for m in self.members)
        return LayoutSummary(
            wall_id=self.wall_id,
            member_count=len(self.members),
            stud_count=self.stud_count,
            total_board_feet=self.total_board_feet,
            stud_spacing=self.stud_spacing,
            lumber_size=self.lumber_size.nominal_name(),
            double_top_plate=self.double_top_plate,
            member_breakdown=dict(breakdown),
        )

    def lumber_takeoff(self) -> list[LumberTakeoff]:
        """Pieces, linear feet and board feet per lumber size, largest first."""
        takeoff: dict[str, LumberTakeoff] = {}
        for m in self.members:
            name = m.lumber_size.nominal_name()
            item = takeoff.setdefault(name, LumberTakeoff(lumber_size=name))
            item.pieces += 1
            item.linear_feet += m.length / 12.0
            item.board_feet += m.board_feet()
        return sorted(takeoff.values(), key=lambda t: t.board_feet, reverse=True)
