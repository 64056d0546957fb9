"""Dirty-state tracking for framing regeneration.

Edits to walls and openings are cheap to record and expensive to act on.
A RegenerationManager collects "this wall changed" signals so that a
scheduler can later regenerate only the walls that need it:

    manager = RegenerationManager()
    manager.invalidate_opening(opening.id, wall.id)
    ...
    for wall_id in manager.get_dirty_walls():
        layout = generate_wall_framing(walls[wall_id], assembly, openings)
        manager.mark_clean(wall_id)

One manager belongs to one editing session. It is not thread-safe; the
owner serializes access the same way it does for the wall data.
"""

from __future__ import annotations
import logging

logger = logging.getLogger(__name__)


class RegenerationManager:
    """Tracks dirty walls and which wall each opening belongs to."""

    def __init__(self) -> None:
        self._dirty_walls: set[str] = set()
        self._opening_walls: dict[str, str] = {}

    def invalidate_wall(self, wall_id: str) -> None:
        """Mark a wall for regeneration. Repeated calls are no-ops."""
        self._dirty_walls.add(wall_id)
        logger.debug("Wall %s invalidated", wall_id)

    def invalidate_opening(self, opening_id: str, wall_id: str) -> None:
        """Mark the opening's wall dirty and (re)register the opening."""
        self._opening_walls[opening_id] = wall_id
        self.invalidate_wall(wall_id)

    def invalidate_opening_by_id(self, opening_id: str) -> bool:
        """Mark the wall of a registered opening dirty. False if unregistered."""
        wall_id = self._opening_walls.get(opening_id)
        if wall_id is None:
            return False
        self.invalidate_wall(wall_id)
        return True

    def remove_opening(self, opening_id: str) -> None:
        """Forget an opening; its wall always needs reframing."""
        wall_id = self._opening_walls.pop(opening_id, None)
        if wall_id is not None:
            self.invalidate_wall(wall_id)

    def register_opening(self, opening_id: str, wall_id: str) -> None:
        """Record which wall an opening belongs to without dirtying it."""
        self._opening_walls[opening_id] = wall_id

    def mark_clean(self, wall_id: str) -> None:
        self._dirty_walls.discard(wall_id)

    def clear(self) -> None:
        """Clear all dirty flags; opening registrations are kept."""
        self._dirty_walls.clear()

    def reset(self) -> None:
        """Clear dirty flags and opening registrations."""
        self._dirty_walls.clear()
        self._opening_walls.clear()

    def get_dirty_walls(self) -> frozenset[str]:
        return frozenset(self._dirty_walls)

    def has_dirty_walls(self) -> bool:
        return bool(self._dirty_walls)

    def is_wall_dirty(self, wall_id: str) -> bool:
        return wall_id in self._dirty_walls

    def dirty_count(self) -> int:
        return len(self._dirty_walls)

    def get_wall_for_opening(self, opening_id: str) -> str | None:
        return self._opening_walls.get(opening_id)

    def get_registered_openings(self) -> list[str]:
        return list(self._opening_walls)

    def get_openings_for_wall(self, wall_id: str) -> list[str]:
        return [oid for oid, wid in self._opening_walls.items() if wid == wall_id]
