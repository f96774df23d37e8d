from __future__ import annotations

from typing import Any, Sequence

from config.indicator_display_map import INDICATOR_ORDER, get_indicator_display_entry
from talent_risk.core import (
    STEP_FIELDS,
    TOTAL_STEPS,
    HeatmapRow,
    Interpretation,
    WizardState,
    indicator_band,
    indicator_percent,
)
from talent_risk.core.tables import ANSWER_LABELS, STEP_QUESTIONS, answer_label
from talent_risk.models import ANSWER_CHOICES, FIELD_ALIASES, AnswerSet, RiskResult

_CAMEL_NAMES = {snake: camel for camel, snake in FIELD_ALIASES.items()}


def indicator_rows(result: RiskResult) -> list[dict[str, Any]]:
    values = result.indicators.as_dict()
    rows: list[dict[str, Any]] = []
    for key in INDICATOR_ORDER:
        value = float(values[key])
        entry = get_indicator_display_entry(key)
        rows.append(
            {
                "key": key,
                "element_key": entry["element_key"],
                "display_name": entry["display_name"],
                "hint": entry["hint"],
                "value": value,
                "percent": indicator_percent(value),
                "band": indicator_band(value),
            }
        )
    return rows


def step_options(step_number: int, answers: AnswerSet) -> list[dict[str, Any]]:
    field = STEP_FIELDS.get(step_number)
    if field is None:
        return []
    selected = getattr(answers, field)
    labels = ANSWER_LABELS.get(field, {})
    return [
        {"value": value, "label": labels.get(value, value), "selected": value == selected}
        for value in ANSWER_CHOICES[field]
    ]


def step_context(step_number: int, progress: float, answers: AnswerSet) -> dict[str, Any]:
    state = WizardState(current_step=step_number, answers=answers)
    field = state.required_field
    return {
        "step": step_number,
        "total_steps": TOTAL_STEPS,
        "progress": float(progress),
        "field": field,
        "field_name": _CAMEL_NAMES.get(field or "", field),
        "question": STEP_QUESTIONS.get(field or "", ""),
        "options": step_options(step_number, answers),
        "can_advance": state.can_advance,
        "can_retreat": state.can_retreat,
    }


class WebView:
    """Collects template context for the wizard pages.

    The controller calls ``render_step`` and ``render_results``; the router
    then hands ``step`` and ``results`` to Jinja2. ``answers`` marks the
    selected options and labels the answers on the results page.
    """

    def __init__(self, answers: AnswerSet) -> None:
        self.answers = answers
        self.step: dict[str, Any] = {}
        self.results: dict[str, Any] = {}

    def render_step(self, step_number: int, progress_percent: float) -> None:
        self.step = step_context(int(step_number), progress_percent, self.answers)

    def render_results(
        self,
        result: RiskResult,
        interpretation: Interpretation,
        heatmap_rows: Sequence[HeatmapRow],
    ) -> None:
        self.results = {
            "result": result,
            "score": round(result.score, 1),
            "tier_label": result.tier.label,
            "tier_class": result.tier.css_class,
            "description": result.description,
            "answer_labels": {name: answer_label(name, value) for name, value in self.answers.to_payload().items()},
            "indicators": indicator_rows(result),
            "interpretation": interpretation,
            "heatmap": [row.as_dict() for row in heatmap_rows],
        }
