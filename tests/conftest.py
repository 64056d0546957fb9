import pytest

from wallframe.models import (
    Point2D, Wall, WallAssembly, WallFramingConfig,
)


@pytest.fixture
def make_wall():
    """Factory for straight walls running along +x from the origin."""
    def _make(length: float, height: float = 96.0, config: WallFramingConfig | None = None, **kwargs) -> Wall:
        return Wall(
            start=Point2D(x=0.0, y=0.0),
            end=Point2D(x=length, y=0.0),
            height=height,
            framing_config=config or WallFramingConfig(),
            **kwargs,
        )
    return _make


@pytest.fixture
def assembly() -> WallAssembly:
    return WallAssembly.exterior_2x6()
