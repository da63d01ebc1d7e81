"""Form state for entering rooms one at a time."""

from mortarcalc.forms.sheet import RoomSheet, parse_room_count

__all__ = ["RoomSheet", "parse_room_count"]
