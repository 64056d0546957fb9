"""Residential wall framing engine."""

__version__ = "0.1.0"

from wallframe.core.analyzer import compute_rough_opening  # noqa: E402
from wallframe.core.errors import FramingError  # noqa: E402
from wallframe.core.generator import FramingGenerator, generate_wall_framing  # noqa: E402
from wallframe.core.headers import size_header, size_header_lumber  # noqa: E402
from wallframe.core.regeneration import RegenerationManager  # noqa: E402

__all__ = [
    "__version__",
    "compute_rough_opening",
    "FramingError",
    "FramingGenerator",
    "generate_wall_framing",
    "size_header",
    "size_header_lumber",
    "RegenerationManager",
]
