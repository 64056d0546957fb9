import pytest

from wallframe.core.errors import OpeningOutOfBounds
from wallframe.core.regeneration import RegenerationManager
from wallframe.models import FramingMemberType, GenerationConfig, Opening
from wallframe.services.frame_service import FrameService


@pytest.fixture
def service():
    return FrameService()


class TestGenerate:
    def test_defaults(self, service, make_wall):
        layout = service.generate(make_wall(120.0))
        assert layout.stud_count == 9

    def test_with_options(self, service, make_wall):
        options = GenerationConfig(disabled_rules=["wall.studs"])
        layout = service.generate(make_wall(120.0), options=options)
        assert not layout.members_of_type(FramingMemberType.STUD)

    def test_list_rules(self, service):
        ids = [r["id"] for r in service.list_rules()]
        assert ids == ["wall.plates", "wall.studs", "wall.opening_frame", "wall.fire_blocking"]
        assert all(r["name"] for r in service.list_rules())


class TestRegenerateDirty:
    def test_regenerates_only_dirty_walls(self, service, make_wall, assembly):
        first, second = make_wall(120.0), make_wall(96.0)
        manager = RegenerationManager()
        manager.invalidate_wall(second.id)

        layouts, errors = service.regenerate_dirty(manager, [first, second], assembly, [])

        assert list(layouts) == [second.id]
        assert errors == {}
        assert not manager.has_dirty_walls()

    def test_failed_wall_stays_dirty(self, service, make_wall, assembly):
        good, bad = make_wall(120.0), make_wall(48.0)
        door = Opening.door(bad.id, 0.1, 36.0, 80.0)
        manager = RegenerationManager()
        manager.invalidate_wall(good.id)
        manager.invalidate_opening(door.id, bad.id)

        layouts, errors = service.regenerate_dirty(manager, [good, bad], assembly, [door])

        assert set(layouts) == {good.id}
        assert isinstance(errors[bad.id], OpeningOutOfBounds)
        assert manager.get_dirty_walls() == {bad.id}

    def test_missing_wall_is_dropped(self, service, assembly):
        manager = RegenerationManager()
        manager.invalidate_wall("deleted-wall")

        layouts, errors = service.regenerate_dirty(manager, [], assembly, [])

        assert layouts == {}
        assert errors == {}
        assert not manager.has_dirty_walls()
