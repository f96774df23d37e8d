from .assessment import Assessment, assess
from .interpretation import Interpretation, interpret
from .scoring import clamp, compute_indicators, raw_score, score, tier_for_score
from .tables import HEATMAP_ROWS, HeatmapRow
from .view import WizardView, indicator_band, indicator_percent
from .wizard import (
    STEP_FIELDS,
    TOTAL_STEPS,
    WizardController,
    WizardState,
    advance,
    answer_step,
    is_complete,
    progress_percent,
    reset,
    retreat,
    select_answer,
)

__all__ = [
    "Assessment",
    "HEATMAP_ROWS",
    "HeatmapRow",
    "Interpretation",
    "STEP_FIELDS",
    "TOTAL_STEPS",
    "WizardController",
    "WizardState",
    "WizardView",
    "advance",
    "answer_step",
    "assess",
    "clamp",
    "compute_indicators",
    "indicator_band",
    "indicator_percent",
    "interpret",
    "is_complete",
    "progress_percent",
    "raw_score",
    "reset",
    "retreat",
    "score",
    "select_answer",
    "tier_for_score",
]
