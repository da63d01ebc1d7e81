"""MortarCalc — the single unified entry point for a form session.

Usage::

    from mortarcalc import MortarCalc

    calc = MortarCalc()
    calc.set_ratio("1", "4")
    calc.set_room_count("2")
    calc.update_room(0, "length", "5")
    ...
    report = calc.calculate()
    print(calc.render())
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Iterable, Mapping

from mortarcalc.estimation.engine import MortarEstimator
from mortarcalc.estimation.report import EstimateReport
from mortarcalc.forms.sheet import RoomSheet
from mortarcalc.models.room import RoomInput
from mortarcalc.settings.config_manager import ConfigManager

logger = logging.getLogger(__name__)

_PACKAGE_LOGGER = "mortarcalc"


class MortarCalc:
    """Form-side wrapper around :class:`MortarEstimator`.

    Owns the room sheet being edited and the report currently on display.
    A calculation that is declined (bad mix ratio) leaves the displayed
    report as it was.

    Parameters
    ----------
    project_root:
        Directory searched for ``.mortarcalc/config.json`` and ``.env``.
        ``None`` uses defaults and environment variables only.
    """

    def __init__(self, project_root: str | Path | None = None) -> None:
        self.config_manager = ConfigManager()
        self.config = self.config_manager.load_config(project_root)
        logging.getLogger(_PACKAGE_LOGGER).setLevel(self.config_manager.log_level(self.config))

        self.estimator = MortarEstimator(max_workers=self.config_manager.max_workers(self.config))
        self.sheet = RoomSheet()
        self.last_report: EstimateReport | None = None

    # -- Form edits -----------------------------------------------------------

    def set_ratio(self, cement_ratio: Any = None, sand_ratio: Any = None) -> RoomSheet:
        self.sheet = self.sheet.with_ratio(cement_ratio, sand_ratio)
        return self.sheet

    def set_room_count(self, raw_count: Any) -> RoomSheet:
        self.sheet = self.sheet.with_room_count(raw_count)
        return self.sheet

    def update_room(self, index: int, field: str, value: Any) -> RoomSheet:
        self.sheet = self.sheet.update_room(index, field, value)
        return self.sheet

    def select_room(self, index: int) -> RoomSheet:
        self.sheet = self.sheet.select(index)
        return self.sheet

    def previous_room(self) -> RoomSheet:
        self.sheet = self.sheet.back()
        return self.sheet

    def next_room(self) -> RoomSheet:
        self.sheet = self.sheet.next()
        return self.sheet

    # -- Calculation ----------------------------------------------------------

    def calculate(
        self,
        cement_ratio: Any = None,
        sand_ratio: Any = None,
        rooms: Iterable[RoomInput | Mapping[str, Any]] | None = None,
    ) -> EstimateReport | None:
        """Run the estimator over the full room list.

        Arguments left as ``None`` are taken from the current sheet.  Returns
        the new report, or ``None`` if the ratio was rejected, in which case
        :attr:`last_report` is unchanged.
        """
        cement = self.sheet.cement_ratio if cement_ratio is None else cement_ratio
        sand = self.sheet.sand_ratio if sand_ratio is None else sand_ratio
        room_list = list(self.sheet.rooms if rooms is None else rooms)

        report = self.estimator.calculate(cement, sand, room_list)
        if report is None:
            logger.debug("Keeping previous report after declined calculation")
            return None
        self.last_report = report
        return report

    def render(self) -> str:
        """Markdown for the report on display, or an empty string."""
        if self.last_report is None:
            return ""
        return self.last_report.to_markdown()
