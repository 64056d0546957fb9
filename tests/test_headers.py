"""Tests for the header sizing tables."""

import pytest

from wallframe.core.headers import header_material, size_header, size_header_lumber
from wallframe.models import FramingMaterial, HeaderType, LumberSize, NominalSize


class TestSizeHeader:
    def test_reference_spans(self):
        assert size_header(36.0, False) == HeaderType.DOUBLE_LUMBER
        assert size_header(72.0, True) == HeaderType.LVL
        assert size_header(120.0, True) == HeaderType.PSL

    @pytest.mark.parametrize("span, expected", [
        (48.0, HeaderType.DOUBLE_LUMBER),
        (48.5, HeaderType.TRIPLE_LUMBER),
        (200.0, HeaderType.TRIPLE_LUMBER),
    ])
    def test_non_load_bearing_breakpoints(self, span, expected):
        assert size_header(span, False) == expected

    @pytest.mark.parametrize("span, expected", [
        (36.0, HeaderType.DOUBLE_LUMBER),
        (36.5, HeaderType.TRIPLE_LUMBER),
        (60.0, HeaderType.TRIPLE_LUMBER),
        (60.5, HeaderType.LVL),
        (96.0, HeaderType.LVL),
        (96.5, HeaderType.PSL),
    ])
    def test_load_bearing_breakpoints(self, span, expected):
        assert size_header(span, True) == expected


class TestSizeHeaderLumber:
    @pytest.mark.parametrize("span, nominal", [
        (48.0, NominalSize.TWO_BY_SIX),
        (72.0, NominalSize.TWO_BY_EIGHT),
        (96.0, NominalSize.TWO_BY_TEN),
        (120.0, NominalSize.TWO_BY_TWELVE),
    ])
    def test_load_bearing_breakpoints(self, span, nominal):
        assert size_header_lumber(span, True) == LumberSize.of(nominal)

    def test_load_bearing_long_span_uses_lvl_section(self):
        size = size_header_lumber(120.5, True)
        assert size.nominal == NominalSize.CUSTOM
        assert size.actual_dimensions() == (1.75, 11.875)

    def test_non_load_bearing(self):
        assert size_header_lumber(48.0, False).nominal == NominalSize.TWO_BY_SIX
        assert size_header_lumber(200.0, False).nominal == NominalSize.TWO_BY_EIGHT

    def test_tables_use_different_breakpoints(self):
        # A 40" load-bearing span needs a triple header but only 2x6 stock
        assert size_header(40.0, True) == HeaderType.TRIPLE_LUMBER
        assert size_header_lumber(40.0, True).nominal == NominalSize.TWO_BY_SIX


class TestHeaderMaterial:
    @pytest.mark.parametrize("header_type, material", [
        (HeaderType.DOUBLE_LUMBER, FramingMaterial.SPF),
        (HeaderType.TRIPLE_LUMBER, FramingMaterial.SPF),
        (HeaderType.LVL, FramingMaterial.LVL),
        (HeaderType.PSL, FramingMaterial.PSL),
        (HeaderType.STEEL_LINTEL, FramingMaterial.STEEL),
        (HeaderType.GLULAM, FramingMaterial.DF),
    ])
    def test_mapping(self, header_type, material):
        assert header_material(header_type) == material
