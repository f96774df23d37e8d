from __future__ import annotations

import sys
from typing import Callable, Sequence, TextIO

from ..core import HeatmapRow, Interpretation, WizardController, indicator_band, indicator_percent
from ..core.tables import ANSWER_LABELS, INDICATOR_NAMES, INDICATOR_ORDER, STEP_QUESTIONS
from ..core.wizard import RESULTS_STEP, STEP_FIELDS, TOTAL_STEPS
from ..errors import InvalidAnswerError
from ..models import ANSWER_CHOICES, RiskResult


BAR_WIDTH = 20


def _bar(value: float) -> str:
    filled = int(round(max(0.0, min(100.0, value)) / 100 * BAR_WIDTH))
    return "#" * filled + "." * (BAR_WIDTH - filled)


class TerminalView:
    def __init__(self, out: TextIO | None = None) -> None:
        self.out = out or sys.stdout

    def write(self, text: str = "") -> None:
        print(text, file=self.out)

    def render_step(self, step_number: int, progress_percent: float) -> None:
        self.write()
        self.write(f"[{_bar(progress_percent)}] step {step_number}/{TOTAL_STEPS}")
        field = STEP_FIELDS.get(step_number)
        if field is None:
            return
        self.write(STEP_QUESTIONS[field])
        labels = ANSWER_LABELS.get(field, {})
        for index, value in enumerate(ANSWER_CHOICES[field], start=1):
            self.write(f"  {index}) {labels.get(value, value)} [{value}]")

    def render_results(
        self,
        result: RiskResult,
        interpretation: Interpretation,
        heatmap_rows: Sequence[HeatmapRow],
    ) -> None:
        self.write()
        self.write(f"Risk level: {result.tier.label} ({result.score:.1f}/100)")
        self.write(result.description)
        self.write()
        values = result.indicators.as_dict()
        for key in INDICATOR_ORDER:
            value = values[key]
            self.write(f"  {INDICATOR_NAMES[key]:<22} [{_bar(value)}] {indicator_percent(value):>3}% {indicator_band(value)}")
        self.write()
        self.write(interpretation.to_text())
        self.write()
        self.write("Market heatmap:")
        for row in heatmap_rows:
            self.write(f"  {row.region_label:<24} {row.label:<18} {row.description}")


def _resolve_choice(field: str, raw: str) -> str:
    text = raw.strip().lower()
    choices = ANSWER_CHOICES[field]
    if text.isdigit() and 1 <= int(text) <= len(choices):
        return choices[int(text) - 1]
    return text


def run_interactive(
    view: TerminalView,
    read: Callable[[str], str] = input,
) -> WizardController:
    """Drive the wizard from terminal input until the results step.

    Enter an option number or value to answer, ``b`` to go back.
    """
    controller = WizardController(view)
    controller.start()
    while controller.state.current_step < RESULTS_STEP:
        step = controller.state.current_step
        field = STEP_FIELDS[step]
        raw = read("> ").strip()
        if raw.lower() in {"b", "back"}:
            if not controller.on_retreat():
                view.write("Already on the first question.")
            continue
        try:
            enabled = controller.on_answer_selected(step, field, _resolve_choice(field, raw))
        except InvalidAnswerError as exc:
            view.write(f"error: {exc}")
            continue
        if enabled:
            controller.on_advance()
    return controller
