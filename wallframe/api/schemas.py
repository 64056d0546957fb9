"""API request/response schemas."""

from __future__ import annotations
from pydantic import BaseModel, Field

from wallframe.models import (
    FramingLayout, FramingMaterial, GenerationConfig, HeaderType, LayoutSummary,
    LumberSize, LumberTakeoff, Opening, Wall, WallAssembly,
)


class GenerateRequest(BaseModel):
    """Request body for the /framing/generate endpoint."""
    wall: Wall
    assembly: WallAssembly = Field(default_factory=WallAssembly.exterior_2x6)
    openings: list[Opening] = []
    options: GenerationConfig = Field(default_factory=GenerationConfig)


class GenerateResponse(BaseModel):
    """Response from the /framing/generate endpoint."""
    layout: FramingLayout
    summary: LayoutSummary
    takeoff: list[LumberTakeoff]


class RoughOpeningRequest(BaseModel):
    wall: Wall
    opening: Opening


class HeaderSizeResponse(BaseModel):
    span: float
    is_load_bearing: bool
    header_type: HeaderType
    lumber_size: LumberSize
    material: FramingMaterial


class RuleInfo(BaseModel):
    id: str
    name: str
