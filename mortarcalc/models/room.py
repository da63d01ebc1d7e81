"""Room records: the raw form entry, its computed result, and run totals.

Dimension fields keep whatever the caller typed (string or number) so a
result can echo its input unchanged.  Parsing happens in
:mod:`mortarcalc.estimation.parsing`, never on the model.
"""

from __future__ import annotations

from typing import Union

from pydantic import BaseModel, ConfigDict

from mortarcalc.config import ZERO_QUANTITY

RawValue = Union[str, int, float, None]


class RoomInput(BaseModel):
    """One room as entered on the form.  Lengths are in metres."""

    model_config = ConfigDict(frozen=True)

    name: str = ""
    length: RawValue = ""
    width: RawValue = ""
    height: RawValue = ""
    thickness: RawValue = ""
    """Plaster thickness, usually a fraction of a metre (e.g. 0.012)."""


class RoomResult(RoomInput):
    """A :class:`RoomInput` plus its derived material quantities.

    Quantities are presentation strings with two decimals, or ``"0"`` when
    the room's geometry could not be parsed.
    """

    wall_volume: str = ZERO_QUANTITY
    """Shell volume of the four walls, m3."""

    cement_quantity: str = ZERO_QUANTITY
    """Cement, in bags."""

    sand_quantity: str = ZERO_QUANTITY
    """Sand, m3."""

    @property
    def is_zero(self) -> bool:
        return (
            self.wall_volume == ZERO_QUANTITY
            and self.cement_quantity == ZERO_QUANTITY
            and self.sand_quantity == ZERO_QUANTITY
        )

    def room_input(self) -> RoomInput:
        """Return the input fields alone."""
        return RoomInput(**self.model_dump(include=set(RoomInput.model_fields)))


class MixRatio(BaseModel):
    """Cement:sand proportion by volume parts, shared by every room in a run."""

    model_config = ConfigDict(frozen=True)

    cement_parts: float
    sand_parts: float

    @property
    def total(self) -> float:
        return self.cement_parts + self.sand_parts

    def label(self) -> str:
        return f"{self.cement_parts:g}:{self.sand_parts:g}"


class Totals(BaseModel):
    """Aggregate quantities over all rooms of one run."""

    model_config = ConfigDict(frozen=True)

    wall_volume: str = "0.00"
    cement_quantity: str = "0.00"
    sand_quantity: str = "0.00"
