from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..models import AnswerSet, RiskResult
from .interpretation import Interpretation, interpret
from .scoring import score
from .tables import HEATMAP_ROWS, HeatmapRow, answer_label


@dataclass(slots=True, frozen=True)
class Assessment:
    answers: AnswerSet
    result: RiskResult
    interpretation: Interpretation
    heatmap_rows: tuple[HeatmapRow, ...] = HEATMAP_ROWS

    def answer_labels(self) -> dict[str, str]:
        return {name: answer_label(name, value) for name, value in self.answers.to_payload().items()}

    def to_payload(self) -> dict[str, Any]:
        return {
            "answers": dict(self.answers.to_payload()),
            "answer_labels": self.answer_labels(),
            "result": self.result.to_payload(),
            "interpretation": {
                "opening": self.interpretation.opening,
                "recommendations": list(self.interpretation.recommendations),
                "market_context": self.interpretation.market_context,
                "text": self.interpretation.to_text(),
                "html": self.interpretation.to_html(),
            },
            "heatmap": [row.as_dict() for row in self.heatmap_rows],
        }


def assess(answers: AnswerSet) -> Assessment:
    result = score(answers)
    return Assessment(answers=answers, result=result, interpretation=interpret(answers, result))
