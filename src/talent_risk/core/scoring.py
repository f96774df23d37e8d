from __future__ import annotations

import logging

from ..errors import IncompleteAnswersError, InvalidAnswerError
from ..models import AnswerSet, Indicators, RiskResult, RiskTier
from .tables import BASELINE_SCORE, COEFFICIENT_TABLES, TIER_DESCRIPTIONS, TIER_THRESHOLDS

logger = logging.getLogger(__name__)


def clamp(value: float, low: float = 0.0, high: float = 100.0) -> float:
    return max(low, min(high, value))


def coefficient(field: str, value: str) -> float:
    table = COEFFICIENT_TABLES[field]
    if value not in table:
        raise InvalidAnswerError(field, value)
    return table[value]


def raw_score(answers: AnswerSet) -> float:
    missing = answers.missing_fields()
    if missing:
        raise IncompleteAnswersError(missing)

    value = BASELINE_SCORE
    value *= coefficient("firm_size", answers.firm_size)
    value *= coefficient("bilingual_exposure", answers.bilingual_exposure)
    value *= coefficient("region", answers.region)
    value *= coefficient("hiring_pressure", answers.hiring_pressure)
    return value


def tier_for_score(score_value: float) -> RiskTier:
    for lower_bound, tier in TIER_THRESHOLDS:
        if score_value >= lower_bound:
            return tier
    return RiskTier.LOW


def compute_indicators(answers: AnswerSet, score_value: float) -> Indicators:
    bilingual_pressure = score_value * 1.1 + (15 if answers.region == "brussels" else 0)
    scarcity_exposure = score_value * 1.2
    ai_leverage = 100 - score_value * 0.3 + (20 if answers.firm_size == "large" else 0)
    eor_feasibility = (85 if answers.bilingual_exposure == "high" else 60) + (
        15 if answers.hiring_pressure == "aggressive" else 0
    )
    return Indicators(
        bilingual_pressure=clamp(bilingual_pressure),
        scarcity_exposure=clamp(scarcity_exposure),
        ai_leverage=clamp(ai_leverage),
        eor_feasibility=clamp(eor_feasibility),
    )


def score(answers: AnswerSet) -> RiskResult:
    """Score a complete answer set.

    Raises ``IncompleteAnswersError`` when a field is unset and
    ``InvalidAnswerError`` when a value has no coefficient. Both are contract
    violations: the wizard never reaches scoring with such input.
    """
    raw = raw_score(answers)
    value = clamp(raw)
    tier = tier_for_score(value)
    logger.debug("Scored answers %s: raw=%.2f score=%.2f tier=%s", answers.to_payload(), raw, value, tier.label)
    return RiskResult(
        score=value,
        tier=tier,
        description=TIER_DESCRIPTIONS[tier],
        indicators=compute_indicators(answers, value),
    )
