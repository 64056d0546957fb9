"""Framing generation errors.

All errors are deterministic functions of the input geometry and
configuration; the only recovery is to change the input and regenerate.
"""

from __future__ import annotations
from typing import Any


class FramingError(Exception):
    """Base class for rejected framing input."""

    code = "framing_error"

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {"code": self.code, "message": self.message}


class InvalidWallDimensions(FramingError):
    code = "invalid_wall_dimensions"

    def __init__(self, wall_id: str, message: str) -> None:
        self.wall_id = wall_id
        super().__init__(message)

    def __str__(self) -> str:
        return f"Invalid wall dimensions: {self.message}"

    def to_dict(self) -> dict[str, Any]:
        return {**super().to_dict(), "wall_id": self.wall_id}


class OpeningTooLarge(FramingError):
    code = "opening_too_large"

    def __init__(self, opening_id: str, message: str) -> None:
        self.opening_id = opening_id
        super().__init__(message)

    def __str__(self) -> str:
        return f"Opening too large: {self.message}"

    def to_dict(self) -> dict[str, Any]:
        return {**super().to_dict(), "opening_id": self.opening_id}


class OpeningOutOfBounds(FramingError):
    code = "opening_out_of_bounds"

    def __init__(self, opening_id: str, message: str) -> None:
        self.opening_id = opening_id
        super().__init__(message)

    def __str__(self) -> str:
        return f"Opening out of bounds: {self.message}"

    def to_dict(self) -> dict[str, Any]:
        return {**super().to_dict(), "opening_id": self.opening_id}


class OverlappingOpenings(FramingError):
    code = "overlapping_openings"

    def __init__(self, opening_ids: list[str], message: str) -> None:
        self.opening_ids = list(opening_ids)
        super().__init__(message)

    def __str__(self) -> str:
        return f"Overlapping openings: {self.message}"

    def to_dict(self) -> dict[str, Any]:
        return {**super().to_dict(), "opening_ids": self.opening_ids}


class InvalidConfig(FramingError):
    code = "invalid_config"

    def __str__(self) -> str:
        return f"Invalid framing config: {self.message}"
