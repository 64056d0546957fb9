import pytest

from wallframe import generate_wall_framing
from wallframe.models import FramingMemberType, Opening, WallFramingConfig
from wallframe.rules.wall.fire_blocking import FIRE_BLOCK_INTERVAL


def _blocks(layout):
    return [m for m in layout.members if m.member_type == FramingMemberType.FIRE_BLOCKING]


def test_no_blocking_unless_required(make_wall, assembly):
    layout = generate_wall_framing(make_wall(120.0, 96.0), assembly, [])
    assert _blocks(layout) == []


def test_blocks_fill_stud_bays_at_mid_height(make_wall, assembly):
    wall = make_wall(120.0, 96.0, config=WallFramingConfig().with_fire_blocking())
    blocks = _blocks(generate_wall_framing(wall, assembly, []))

    assert [b.position.x for b in blocks] == [0.0, 16.0, 32.0, 48.0, 64.0, 80.0, 96.0, 112.0]
    # last bay is clipped at the wall end
    assert [b.length for b in blocks] == [16.0] * 7 + [8.0]
    for block in blocks:
        assert block.position.z == pytest.approx(45.25)
        assert block.rotation == 0.0


def test_blocks_are_horizontal_and_not_counted_as_studs(make_wall, assembly):
    plain = generate_wall_framing(make_wall(120.0, 96.0), assembly, [])
    wall = make_wall(120.0, 96.0, config=WallFramingConfig().with_fire_blocking())
    blocked = generate_wall_framing(wall, assembly, [])

    assert blocked.stud_count == plain.stud_count
    assert blocked.total_board_feet > plain.total_board_feet


def test_blocks_skip_openings(make_wall, assembly):
    wall = make_wall(144.0, 96.0, config=WallFramingConfig().with_fire_blocking())
    window = Opening.window(wall.id, 0.5, 36.0, 48.0, 36.0)
    blocks = _blocks(generate_wall_framing(wall, assembly, [window]))

    # exclusion zone 50.5..93.5; segments 0..120 and 120..144
    assert [b.position.x for b in blocks] == [0.0, 16.0, 32.0, 96.0, 112.0, 128.0]


def test_every_bay_blocked_across_segment_boundary(make_wall, assembly):
    wall = make_wall(240.0, 96.0, config=WallFramingConfig().with_fire_blocking())
    layout = generate_wall_framing(wall, assembly, [])

    studs = [m.position.x for m in layout.members if m.member_type == FramingMemberType.STUD]
    blocks = _blocks(layout)
    for left, right in zip(studs, studs[1:]):
        assert any(
            b.position.x <= left and b.position.x + b.length >= right for b in blocks
        ), (left, right)
    assert 112.0 in [b.position.x for b in blocks]


def test_segment_interval_is_ten_feet():
    assert FIRE_BLOCK_INTERVAL == 120.0
