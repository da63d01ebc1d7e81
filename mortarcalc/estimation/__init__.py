"""Cement & sand estimation for wall plastering.

Turns per-room dimensions and a cement:sand mix ratio into wall volume,
cement bags and sand volume, plus totals across rooms.
"""

from mortarcalc.estimation.engine import MortarEstimator, calculate
from mortarcalc.estimation.estimator import (
    compute_batch,
    compute_room,
    compute_totals,
    validate_ratio,
)
from mortarcalc.estimation.report import EstimateReport

__all__ = [
    "EstimateReport",
    "MortarEstimator",
    "calculate",
    "compute_batch",
    "compute_room",
    "compute_totals",
    "validate_ratio",
]
