"""EstimateReport model and Markdown generation for the results table."""

from __future__ import annotations

import json
from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, Field

from mortarcalc.models.room import MixRatio, RoomResult, Totals


class EstimateReport(BaseModel):
    """Results of one calculation run: every room plus the totals row."""

    mix: MixRatio
    """Cement:sand ratio used for every room."""

    results: list[RoomResult] = Field(default_factory=list)
    """Per-room results, in input order."""

    totals: Totals = Field(default_factory=Totals)

    warnings: list[str] = Field(default_factory=list)
    """One entry per room that fell back to the zero result."""

    calculated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def room_count(self) -> int:
        return len(self.results)

    def to_markdown(self) -> str:
        """Render the results table with a totals row."""
        lines: list[str] = []

        lines.append("# Cement & Sand Estimate")
        lines.append("")
        lines.append(f"**Mix Ratio:** {self.mix.label()} (cement:sand)")
        lines.append(f"**Rooms:** {self.room_count}")
        lines.append(f"**Calculated:** {self.calculated_at.strftime('%Y-%m-%d %H:%M UTC')}")
        lines.append("")

        lines.append("## Results")
        lines.append("")
        lines.append("| Room Name | Wall Volume (m³) | Cement Quantity (bags) | Sand Quantity (m³) |")
        lines.append("|-----------|------------------|------------------------|--------------------|")
        for r in self.results:
            name = _table_cell(r.name)
            lines.append(
                f"| {name} | {r.wall_volume} | {r.cement_quantity} | {r.sand_quantity} |"
            )
        t = self.totals
        lines.append(
            f"| **Total** | **{t.wall_volume}** | **{t.cement_quantity}** | **{t.sand_quantity}** |"
        )
        lines.append("")

        if self.warnings:
            lines.append("## Warnings")
            lines.append("")
            for w in self.warnings:
                lines.append(f"- {w}")
            lines.append("")

        return "\n".join(lines)

    def to_dict(self) -> dict[str, Any]:
        """Return dict representation."""
        return self.model_dump(mode="json")

    def to_json(self) -> str:
        """Return structured JSON for audit trail."""
        return json.dumps(self.to_dict(), indent=2, default=str)


def _table_cell(text: str) -> str:
    """Keep free text on one Markdown table row."""
    return " ".join(text.splitlines()).replace("|", "\\|")
