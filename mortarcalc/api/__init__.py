"""The :class:`MortarCalc` facade is the single entry point used by a form."""

from mortarcalc.api.facade import MortarCalc

__all__ = ["MortarCalc"]
