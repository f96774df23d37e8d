from __future__ import annotations

from dataclasses import dataclass
from html import escape

from ..models import AnswerSet, RiskResult
from .tables import MARKET_CONTEXT, TIER_LEADS, TIER_RECOMMENDATIONS, answer_label


@dataclass(slots=True, frozen=True)
class Interpretation:
    opening: str
    recommendations: tuple[str, ...]
    market_context: str

    def to_text(self) -> str:
        lines = [
            f"Capability resilience assessment: {self.opening}",
            "",
            "Strategic recommendations:",
        ]
        lines.extend(f"- {item}" for item in self.recommendations)
        lines.append("")
        lines.append(f"Market intelligence: {self.market_context}")
        return "\n".join(lines)

    def to_html(self) -> str:
        items = "".join(f"<li>{escape(item)}</li>" for item in self.recommendations)
        return (
            f"<p><strong>Capability resilience assessment:</strong> {escape(self.opening)}</p>"
            f"<p><strong>Strategic recommendations:</strong></p><ul>{items}</ul>"
            f"<p><strong>Market intelligence:</strong> {escape(self.market_context)}</p>"
        )


def opening_sentence(answers: AnswerSet, result: RiskResult) -> str:
    return (
        f"Your organization of {answer_label('firm_size', answers.firm_size)} "
        f"with {answer_label('bilingual_exposure', answers.bilingual_exposure)} bilingual client exposure "
        f"operating in {answer_label('region', answers.region)} "
        f"demonstrates a {result.tier.profile_name} risk profile. "
        f"{TIER_LEADS[result.tier]}"
    )


def interpret(answers: AnswerSet, result: RiskResult) -> Interpretation:
    return Interpretation(
        opening=opening_sentence(answers, result),
        recommendations=TIER_RECOMMENDATIONS[result.tier],
        market_context=MARKET_CONTEXT,
    )
