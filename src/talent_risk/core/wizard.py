"""Five-step questionnaire state machine.

Steps 1-4 each collect one answer; step 5 shows the results. ``WizardState``
is immutable and every transition returns a new state, so the transitions can
be tested without any display surface. ``WizardController`` binds a state to a
``WizardView`` and turns input events into render calls.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Mapping

from ..errors import InvalidAnswerError, TalentRiskError
from ..models import AnswerSet, RiskResult, normalize_field, to_answer_set
from .interpretation import Interpretation, interpret
from .scoring import score
from .tables import HEATMAP_ROWS
from .view import WizardView

logger = logging.getLogger(__name__)

TOTAL_STEPS = 5
RESULTS_STEP = TOTAL_STEPS

STEP_FIELDS: Mapping[int, str] = MappingProxyType(
    {
        1: "firm_size",
        2: "bilingual_exposure",
        3: "region",
        4: "hiring_pressure",
    }
)


@dataclass(slots=True, frozen=True)
class WizardState:
    current_step: int = 1
    answers: AnswerSet = field(default_factory=AnswerSet)
    total_steps: int = TOTAL_STEPS

    @property
    def required_field(self) -> str | None:
        return STEP_FIELDS.get(self.current_step)

    @property
    def step_complete(self) -> bool:
        required = self.required_field
        if required is None:
            return True
        return getattr(self.answers, required) is not None

    @property
    def can_advance(self) -> bool:
        return self.current_step < self.total_steps and self.step_complete

    @property
    def can_retreat(self) -> bool:
        return self.current_step > 1

    def to_payload(self) -> dict[str, Any]:
        return {"step": self.current_step, "answers": dict(self.answers.to_payload())}

    @classmethod
    def from_payload(cls, payload: Any) -> "WizardState":
        if not isinstance(payload, dict):
            return cls()
        try:
            step = int(payload.get("step", 1))
            answers = to_answer_set(dict(payload.get("answers") or {}))
        except (TypeError, ValueError):
            logger.warning("Discarding malformed wizard payload: %r", payload)
            return cls()
        step = max(1, min(TOTAL_STEPS, step))
        # A stored step past an unanswered question is not reachable through navigation.
        for gated_step, name in STEP_FIELDS.items():
            if gated_step < step and getattr(answers, name) is None:
                step = gated_step
                break
        return cls(current_step=step, answers=answers)


def reset() -> WizardState:
    return WizardState()


def select_answer(state: WizardState, field_name: str, value: object) -> WizardState:
    key = normalize_field(field_name)
    return replace(state, answers=state.answers.with_answer(key, value))


def answer_step(state: WizardState, step: int, field_name: str, value: object) -> WizardState:
    """Record an answer given on ``step``; the field must be the one that step asks."""
    expected = STEP_FIELDS.get(int(step))
    key = normalize_field(field_name)
    if expected != key:
        raise InvalidAnswerError(key, value, reason=f"Field {key!r} is not asked on step {step}.")
    return select_answer(state, key, value)


def advance(state: WizardState) -> WizardState:
    if not state.can_advance:
        return state
    return replace(state, current_step=state.current_step + 1)


def retreat(state: WizardState) -> WizardState:
    if not state.can_retreat:
        return state
    return replace(state, current_step=state.current_step - 1)


def is_complete(state: WizardState) -> bool:
    return state.answers.is_complete()


def progress_percent(state: WizardState) -> float:
    return state.current_step / state.total_steps * 100


class WizardController:
    def __init__(self, view: WizardView, state: WizardState | None = None) -> None:
        self.view = view
        self.state = state or WizardState()
        self.result: RiskResult | None = None
        self.interpretation: Interpretation | None = None

    def start(self) -> None:
        # A state restored on the results step shows its results again.
        if self.state.current_step == RESULTS_STEP:
            self._show_results(self.state)
        self.view.render_step(self.state.current_step, progress_percent(self.state))

    def on_answer_selected(self, step: int, field_name: str, value: object) -> bool:
        """Record an answer and report whether "next" is now enabled."""
        self.state = answer_step(self.state, step, field_name, value)
        return self.state.can_advance

    def on_advance(self) -> bool:
        previous = self.state
        following = advance(previous)
        if following is previous:
            return False
        if following.current_step == RESULTS_STEP:
            self._show_results(following)
        self.state = following
        self.view.render_step(following.current_step, progress_percent(following))
        return True

    def on_retreat(self) -> bool:
        previous = self.state
        following = retreat(previous)
        if following is previous:
            return False
        self.state = following
        self.view.render_step(following.current_step, progress_percent(following))
        return True

    def _show_results(self, state: WizardState) -> None:
        if not is_complete(state):
            raise TalentRiskError("Results step reached with incomplete answers.")
        self.result = score(state.answers)
        self.interpretation = interpret(state.answers, self.result)
        logger.info("Assessment completed: tier=%s score=%.1f", self.result.tier.label, self.result.score)
        self.view.render_results(self.result, self.interpretation, HEATMAP_ROWS)
