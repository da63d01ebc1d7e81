"""RoomSheet, the immutable state behind the room entry form.

Holds the raw ratio text, the list of rooms being edited and the index of
the room currently shown.  Every edit returns a new sheet; the previous one
is never modified.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from mortarcalc.config import ROOM_FIELDS
from mortarcalc.models.room import RoomInput

logger = logging.getLogger(__name__)


def parse_room_count(value: Any) -> int:
    """Parse the "number of rooms" entry.  Empty, invalid or negative → 0."""
    if value is None or isinstance(value, bool):
        return 0
    try:
        count = int(float(str(value).strip() or "0"))
    except (TypeError, ValueError, OverflowError):
        return 0
    return max(0, count)


class RoomSheet(BaseModel):
    """Rooms and mix ratio as currently typed on the form."""

    model_config = ConfigDict(frozen=True)

    cement_ratio: str = ""
    sand_ratio: str = ""
    rooms: tuple[RoomInput, ...] = Field(default_factory=tuple)
    current_index: int = 0

    # -- Ratio ----------------------------------------------------------------

    def with_ratio(self, cement_ratio: Any = None, sand_ratio: Any = None) -> RoomSheet:
        """Replace either ratio part.  ``None`` leaves a part unchanged."""
        updates: dict[str, str] = {}
        if cement_ratio is not None:
            updates["cement_ratio"] = str(cement_ratio)
        if sand_ratio is not None:
            updates["sand_ratio"] = str(sand_ratio)
        return self.model_copy(update=updates)

    # -- Rooms ----------------------------------------------------------------

    def with_room_count(self, raw_count: Any) -> RoomSheet:
        """Start over with *raw_count* blank rooms.

        Rooms already entered are discarded and the first room is shown.
        """
        count = parse_room_count(raw_count)
        logger.debug("Resetting sheet to %d blank room(s)", count)
        return self.model_copy(
            update={"rooms": tuple(RoomInput() for _ in range(count)), "current_index": 0}
        )

    def update_room(self, index: int, field: str, value: Any) -> RoomSheet:
        """Return a sheet with one field of one room replaced."""
        if field not in ROOM_FIELDS:
            raise ValueError(
                f"Unknown room field: {field!r}. Available: {list(ROOM_FIELDS)}"
            )
        if not 0 <= index < len(self.rooms):
            raise IndexError(f"Room index {index} out of range (0-{len(self.rooms) - 1})")

        if field == "name":
            value = "" if value is None else str(value)
        rooms = list(self.rooms)
        rooms[index] = rooms[index].model_copy(update={field: value})
        return self.model_copy(update={"rooms": tuple(rooms)})

    # -- Navigation -----------------------------------------------------------

    @property
    def room_count(self) -> int:
        return len(self.rooms)

    @property
    def current_room(self) -> RoomInput | None:
        if not self.rooms:
            return None
        return self.rooms[self.current_index]

    @property
    def has_previous(self) -> bool:
        return self.current_index > 0

    @property
    def has_next(self) -> bool:
        return self.current_index < len(self.rooms) - 1

    def select(self, index: int) -> RoomSheet:
        """Show room *index*, clamped to the rooms that exist."""
        last = max(0, len(self.rooms) - 1)
        return self.model_copy(update={"current_index": min(max(0, index), last)})

    def back(self) -> RoomSheet:
        return self.select(self.current_index - 1)

    def next(self) -> RoomSheet:
        return self.select(self.current_index + 1)
