"""FastAPI route definitions."""

from __future__ import annotations

from fastapi import APIRouter, Query

from wallframe.core.analyzer import compute_rough_opening
from wallframe.core.headers import header_material, size_header, size_header_lumber
from wallframe.models import RoughOpening
from wallframe.services.frame_service import FrameService
from wallframe.api.schemas import (
    GenerateRequest, GenerateResponse, HeaderSizeResponse, RoughOpeningRequest, RuleInfo,
)

router = APIRouter()

# Stateless; safe to share across requests
_service = FrameService()


@router.post("/framing/generate", response_model=GenerateResponse)
async def generate_framing(request: GenerateRequest) -> GenerateResponse:
    """Generate the framing layout for one wall."""
    layout = _service.generate(
        request.wall, request.openings, request.assembly, request.options,
    )
    return GenerateResponse(
        layout=layout,
        summary=layout.summary(),
        takeoff=layout.lumber_takeoff(),
    )


@router.post("/framing/rough-opening", response_model=RoughOpening)
async def rough_opening(request: RoughOpeningRequest) -> RoughOpening:
    """Preview the rough opening for an opening without full generation."""
    return compute_rough_opening(request.opening, request.wall, request.wall.framing_config)


@router.get("/framing/header", response_model=HeaderSizeResponse)
async def header_size(
    span: float = Query(..., gt=0),
    load_bearing: bool = True,
) -> HeaderSizeResponse:
    """Header type, lumber and material for a clear span in inches."""
    header_type = size_header(span, load_bearing)
    return HeaderSizeResponse(
        span=span,
        is_load_bearing=load_bearing,
        header_type=header_type,
        lumber_size=size_header_lumber(span, load_bearing),
        material=header_material(header_type),
    )


@router.get("/rules", response_model=list[RuleInfo])
async def list_rules() -> list[RuleInfo]:
    """List all available framing rules."""
    return [RuleInfo(**r) for r in _service.list_rules()]


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}
