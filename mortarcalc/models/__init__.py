"""Plain records exchanged between the form layer and the estimator."""

from mortarcalc.models.room import MixRatio, RoomInput, RoomResult, Totals

__all__ = ["MixRatio", "RoomInput", "RoomResult", "Totals"]
