"""MortarEstimator — main entry point for a calculation run.

Usage::

    from mortarcalc.estimation import calculate

    report = calculate("1", "4", [{"name": "Bedroom", "length": "5",
                                   "width": "4", "height": "3",
                                   "thickness": "0.15"}])
    if report is not None:
        print(report.to_markdown())
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping

from mortarcalc.estimation.estimator import (
    as_room_input,
    compute_batch,
    compute_totals,
    invalid_dimensions,
    parse_ratio,
)
from mortarcalc.estimation.report import EstimateReport
from mortarcalc.models.room import RoomInput

logger = logging.getLogger(__name__)


class MortarEstimator:
    """Stateless cement and sand estimator.

    Parameters
    ----------
    max_workers:
        Thread-pool size for computing rooms.  ``1`` (default) computes
        them sequentially.
    """

    def __init__(self, max_workers: int = 1) -> None:
        self.max_workers = max(1, int(max_workers))

    def calculate(
        self,
        cement_ratio: Any,
        sand_ratio: Any,
        rooms: Iterable[RoomInput | Mapping[str, Any]],
    ) -> EstimateReport | None:
        """Estimate every room and the totals.

        Returns *None* when the mix ratio is unparseable or sums to zero;
        the caller keeps whatever it was displaying.  Rooms with bad
        dimensions get zero quantities and a warning, never an exception.
        """
        mix = parse_ratio(cement_ratio, sand_ratio)
        if mix is None:
            logger.info(
                "Mix ratio %r:%r rejected; calculation skipped", cement_ratio, sand_ratio
            )
            return None

        inputs = [as_room_input(r) for r in rooms]
        results = compute_batch(
            inputs, mix.cement_parts, mix.sand_parts, max_workers=self.max_workers
        )

        warnings: list[str] = []
        for index, (room, result) in enumerate(zip(inputs, results)):
            if not result.is_zero:
                continue
            label = f"Room {index + 1}" + (f" ({room.name})" if room.name else "")
            bad = invalid_dimensions(room)
            if bad:
                warnings.append(
                    f"{label}: could not read {', '.join(bad)}; quantities set to 0"
                )
            else:
                warnings.append(f"{label}: quantities out of range; set to 0")

        report = EstimateReport(
            mix=mix,
            results=results,
            totals=compute_totals(results),
            warnings=warnings,
        )
        logger.info(
            "Estimated %d room(s) at %s: cement %s bags, sand %s m3",
            report.room_count,
            mix.label(),
            report.totals.cement_quantity,
            report.totals.sand_quantity,
        )
        return report


_default_estimator = MortarEstimator()


def calculate(
    cement_ratio: Any,
    sand_ratio: Any,
    rooms: Iterable[RoomInput | Mapping[str, Any]],
) -> EstimateReport | None:
    """Run :meth:`MortarEstimator.calculate` with a sequential estimator."""
    return _default_estimator.calculate(cement_ratio, sand_ratio, rooms)
