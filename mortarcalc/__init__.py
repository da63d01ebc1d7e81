"""mortarcalc: cement and sand estimates for plastering room walls."""

__version__ = "1.0.0"

from mortarcalc.api.facade import MortarCalc
from mortarcalc.estimation.engine import MortarEstimator, calculate
from mortarcalc.estimation.estimator import (
    compute_batch,
    compute_room,
    compute_totals,
    validate_ratio,
)
from mortarcalc.estimation.report import EstimateReport
from mortarcalc.forms.sheet import RoomSheet
from mortarcalc.models.room import MixRatio, RoomInput, RoomResult, Totals
from mortarcalc.settings.config_manager import ConfigManager

__all__ = [
    "__version__",
    # Facade
    "MortarCalc",
    # Estimation
    "EstimateReport",
    "MortarEstimator",
    "calculate",
    "compute_batch",
    "compute_room",
    "compute_totals",
    "validate_ratio",
    # Records
    "MixRatio",
    "RoomInput",
    "RoomResult",
    "Totals",
    # Form & config
    "ConfigManager",
    "RoomSheet",
]
