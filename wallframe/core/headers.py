"""Header sizing tables (simplified IRC Table R602.7).

Header *type* and header *lumber* are chosen from two separate tables
with different span breakpoints. Keep them separate.
"""

from __future__ import annotations

from wallframe.models import FramingMaterial, HeaderType, LumberSize, NominalSize


# Engineered fallback for spans over 10': 1-3/4" x 11-7/8" LVL
LVL_HEADER_WIDTH = 1.75
LVL_HEADER_DEPTH = 11.875


def size_header(span: float, is_load_bearing: bool) -> HeaderType:
    """Header type for a clear span in inches."""
    return HeaderType.for_span(span, is_load_bearing)


def size_header_lumber(span: float, is_load_bearing: bool) -> LumberSize:
    """Header lumber cross-section for a clear span in inches."""
    if not is_load_bearing:
        if span <= 48.0:
            return LumberSize.of(NominalSize.TWO_BY_SIX)
        return LumberSize.of(NominalSize.TWO_BY_EIGHT)

    if span <= 48.0:
        return LumberSize.of(NominalSize.TWO_BY_SIX)
    if span <= 72.0:
        return LumberSize.of(NominalSize.TWO_BY_EIGHT)
    if span <= 96.0:
        return LumberSize.of(NominalSize.TWO_BY_TEN)
    if span <= 120.0:
        return LumberSize.of(NominalSize.TWO_BY_TWELVE)
    return LumberSize.custom(LVL_HEADER_WIDTH, LVL_HEADER_DEPTH)


_HEADER_MATERIALS = {
    HeaderType.DOUBLE_LUMBER: FramingMaterial.SPF,
    HeaderType.TRIPLE_LUMBER: FramingMaterial.SPF,
    HeaderType.LVL: FramingMaterial.LVL,
    HeaderType.PSL: FramingMaterial.PSL,
    HeaderType.STEEL_LINTEL: FramingMaterial.STEEL,
    HeaderType.GLULAM: FramingMaterial.DF,
}


def header_material(header_type: HeaderType) -> FramingMaterial:
    return _HEADER_MATERIALS[header_type]
