"""Tests for RoomSheet, the immutable room entry form state."""

from __future__ import annotations

import pytest

from mortarcalc.forms.sheet import RoomSheet, parse_room_count
from mortarcalc.models.room import RoomInput


class TestRoomCount:

    @pytest.mark.parametrize(
        "raw,expected",
        [("3", 3), ("", 0), (None, 0), ("abc", 0), ("-2", 0), ("2.7", 2), (4, 4), (" 1 ", 1)],
    )
    def test_parse_room_count(self, raw, expected):
        assert parse_room_count(raw) == expected

    def test_creates_blank_rooms(self):
        sheet = RoomSheet().with_room_count("3")
        assert sheet.room_count == 3
        assert all(room == RoomInput() for room in sheet.rooms)

    def test_resize_discards_entries_and_resets_index(self):
        sheet = RoomSheet().with_room_count("2").update_room(1, "name", "Hall").next()
        resized = sheet.with_room_count("2")
        assert resized.rooms[1].name == ""
        assert resized.current_index == 0


class TestUpdateRoom:

    def test_update_returns_new_sheet(self):
        sheet = RoomSheet().with_room_count(2)
        updated = sheet.update_room(0, "length", "5")
        assert updated.rooms[0].length == "5"
        assert sheet.rooms[0].length == ""
        assert updated.rooms[1] == sheet.rooms[1]

    def test_name_is_stringified(self):
        sheet = RoomSheet().with_room_count(1).update_room(0, "name", None)
        assert sheet.rooms[0].name == ""

    def test_unknown_field(self):
        sheet = RoomSheet().with_room_count(1)
        with pytest.raises(ValueError, match="Unknown room field"):
            sheet.update_room(0, "depth", "3")

    @pytest.mark.parametrize("index", [-1, 2])
    def test_index_out_of_range(self, index):
        sheet = RoomSheet().with_room_count(2)
        with pytest.raises(IndexError):
            sheet.update_room(index, "name", "X")

    def test_ratio(self):
        sheet = RoomSheet().with_ratio("1", "4")
        assert (sheet.cement_ratio, sheet.sand_ratio) == ("1", "4")
        sheet = sheet.with_ratio(sand_ratio=6)
        assert (sheet.cement_ratio, sheet.sand_ratio) == ("1", "6")


class TestNavigation:

    def test_next_and_back_clamp(self):
        sheet = RoomSheet().with_room_count(3)
        assert not sheet.has_previous
        assert sheet.has_next
        sheet = sheet.next().next().next()
        assert sheet.current_index == 2
        assert not sheet.has_next
        sheet = sheet.back().back().back()
        assert sheet.current_index == 0

    def test_select_clamps(self):
        sheet = RoomSheet().with_room_count(3)
        assert sheet.select(10).current_index == 2
        assert sheet.select(-4).current_index == 0
        assert sheet.select(1).current_index == 1

    def test_current_room(self):
        sheet = RoomSheet().with_room_count(2).update_room(1, "name", "Hall").select(1)
        assert sheet.current_room.name == "Hall"

    def test_empty_sheet(self):
        sheet = RoomSheet()
        assert sheet.current_room is None
        assert sheet.next().current_index == 0
        assert not sheet.has_next
