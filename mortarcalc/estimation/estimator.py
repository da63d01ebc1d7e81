"""Plaster mortar takeoff from room dimensions and a mix ratio.

Treats the four walls of a rectangular room as one shell of uniform
thickness: ``V = 2 * (L + W) * H * T``.  The volume is inflated by a fixed
waste margin and split between cement (reported in bags) and sand (m3) in
proportion to the mix parts.  Openings and corner overlap are ignored.
"""

from __future__ import annotations

import logging
import math
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Iterable, Mapping

from mortarcalc.config import (
    CEMENT_BAG_VOLUME,
    DIMENSION_FIELDS,
    WASTE_MARGIN,
    ZERO_QUANTITY,
)
from mortarcalc.estimation.parsing import format_quantity, parse_decimal, quantity_value
from mortarcalc.models.room import MixRatio, RoomInput, RoomResult, Totals

logger = logging.getLogger(__name__)


def validate_ratio(cement_parts: Any, sand_parts: Any) -> bool:
    """Return True if both parts parse to finite numbers summing above zero."""
    return parse_ratio(cement_parts, sand_parts) is not None


def parse_ratio(cement_parts: Any, sand_parts: Any) -> MixRatio | None:
    """Parse raw ratio parts into a :class:`MixRatio`, or None if invalid."""
    cement = parse_decimal(cement_parts)
    sand = parse_decimal(sand_parts)
    if cement is None or sand is None:
        return None
    if cement + sand <= 0:
        return None
    return MixRatio(cement_parts=cement, sand_parts=sand)


def as_room_input(room: RoomInput | Mapping[str, Any]) -> RoomInput:
    """Accept either a :class:`RoomInput` or a plain mapping of its fields."""
    if isinstance(room, RoomInput):
        return room
    data = dict(room)
    name = data.get("name")
    fields: dict[str, Any] = {"name": "" if name is None else str(name)}
    for f in DIMENSION_FIELDS:
        value = data.get(f, "")
        if isinstance(value, bool) or (
            value is not None and not isinstance(value, (str, int, float))
        ):
            value = str(value)
        fields[f] = value
    return RoomInput(**fields)


def invalid_dimensions(room: RoomInput) -> list[str]:
    """Names of the dimension fields that do not parse to a finite number."""
    return [f for f in DIMENSION_FIELDS if parse_decimal(getattr(room, f)) is None]


def compute_room(
    room: RoomInput | Mapping[str, Any],
    cement_parts: Any,
    sand_parts: Any,
) -> RoomResult:
    """Calculate wall volume and cement/sand quantities for one room.

    The ratio must already satisfy :func:`validate_ratio`; a ratio that does
    not raises ``ValueError``.  A room with any unparseable dimension gets
    the zero result (``"0"`` for every quantity) with its input echoed, as
    does a room whose quantities overflow a float.
    """
    mix = parse_ratio(cement_parts, sand_parts)
    if mix is None:
        raise ValueError(
            f"Invalid mix ratio {cement_parts!r}:{sand_parts!r}; "
            "both parts must be finite and sum to more than zero"
        )
    return _compute(as_room_input(room), mix)


def _zero_result(fields: dict[str, Any]) -> RoomResult:
    return RoomResult(
        **fields,
        wall_volume=ZERO_QUANTITY,
        cement_quantity=ZERO_QUANTITY,
        sand_quantity=ZERO_QUANTITY,
    )


def _compute(room: RoomInput, mix: MixRatio) -> RoomResult:
    fields = room.model_dump(include=set(RoomInput.model_fields))

    length = parse_decimal(room.length)
    width = parse_decimal(room.width)
    height = parse_decimal(room.height)
    thickness = parse_decimal(room.thickness)
    if length is None or width is None or height is None or thickness is None:
        logger.debug(
            "Room %r has unparseable dimensions %s; using zero result",
            room.name,
            invalid_dimensions(room),
        )
        return _zero_result(fields)

    volume = 2 * (length + width) * height * thickness
    share = (volume * WASTE_MARGIN) / mix.total
    cement = share * (mix.cement_parts / CEMENT_BAG_VOLUME)
    sand = share * mix.sand_parts
    if not all(math.isfinite(q) for q in (volume, cement, sand)):
        logger.debug("Room %r quantities out of range; using zero result", room.name)
        return _zero_result(fields)

    return RoomResult(
        **fields,
        wall_volume=format_quantity(volume),
        cement_quantity=format_quantity(cement),
        sand_quantity=format_quantity(sand),
    )


def compute_batch(
    rooms: Iterable[RoomInput | Mapping[str, Any]],
    cement_parts: Any,
    sand_parts: Any,
    max_workers: int = 1,
) -> list[RoomResult]:
    """Compute every room independently, preserving input order.

    With *max_workers* above 1 the rooms are mapped through a thread pool;
    the output is identical to the sequential map.
    """
    mix = parse_ratio(cement_parts, sand_parts)
    if mix is None:
        raise ValueError(f"Invalid mix ratio {cement_parts!r}:{sand_parts!r}")

    inputs = [as_room_input(r) for r in rooms]
    if max_workers > 1 and len(inputs) > 1:
        with ThreadPoolExecutor(max_workers=max_workers) as pool:
            return list(pool.map(lambda r: _compute(r, mix), inputs))
    return [_compute(r, mix) for r in inputs]


def compute_totals(results: Iterable[RoomResult]) -> Totals:
    """Sum the displayed quantities of each result.

    Sums are taken over the already-rounded per-room strings so the totals
    row agrees with the rows above it.
    """
    wall_volume = 0.0
    cement = 0.0
    sand = 0.0
    for result in results:
        wall_volume += quantity_value(result.wall_volume)
        cement += quantity_value(result.cement_quantity)
        sand += quantity_value(result.sand_quantity)

    return Totals(
        wall_volume=format_quantity(wall_volume),
        cement_quantity=format_quantity(cement),
        sand_quantity=format_quantity(sand),
    )
