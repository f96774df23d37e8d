from __future__ import annotations

from typing import Protocol, Sequence

from ..models import RiskResult
from .interpretation import Interpretation
from .tables import HeatmapRow


class WizardView(Protocol):
    """Display surface driven by the wizard controller."""

    def render_step(self, step_number: int, progress_percent: float) -> None: ...

    def render_results(
        self,
        result: RiskResult,
        interpretation: Interpretation,
        heatmap_rows: Sequence[HeatmapRow],
    ) -> None: ...


def indicator_band(value: float) -> str:
    if value < 40:
        return "low"
    if value < 70:
        return "moderate"
    return "high"


def indicator_percent(value: float) -> int:
    return int(round(value))
