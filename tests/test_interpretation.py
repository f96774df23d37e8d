from __future__ import annotations

import itertools

import pytest

from talent_risk.core import assess, interpret, score
from talent_risk.core.tables import (
    BILINGUAL_LABELS,
    FIRM_SIZE_LABELS,
    MARKET_CONTEXT,
    REGION_LABELS,
    TIER_RECOMMENDATIONS,
)
from talent_risk.models import ANSWER_CHOICES, AnswerSet, RiskTier


@pytest.mark.parametrize(
    "combo",
    list(
        itertools.product(
            ANSWER_CHOICES["firm_size"],
            ANSWER_CHOICES["bilingual_exposure"],
            ANSWER_CHOICES["region"],
            ANSWER_CHOICES["hiring_pressure"],
        )
    ),
)
def test_interpretation_embeds_labels_and_tier_list(combo: tuple[str, str, str, str]) -> None:
    firm_size, exposure, region, pressure = combo
    answers = AnswerSet(firm_size=firm_size, bilingual_exposure=exposure, region=region, hiring_pressure=pressure)
    result = score(answers)
    interpretation = interpret(answers, result)

    assert f"Your organization of {FIRM_SIZE_LABELS[firm_size]} " in interpretation.opening
    assert f"with {BILINGUAL_LABELS[exposure]} bilingual client exposure" in interpretation.opening
    assert f"operating in {REGION_LABELS[region]} " in interpretation.opening
    assert interpretation.recommendations == TIER_RECOMMENDATIONS[result.tier]

    text = interpretation.to_text()
    for item in TIER_RECOMMENDATIONS[result.tier]:
        assert f"- {item}" in text
    assert text.endswith(MARKET_CONTEXT)


def test_recommendation_lists_have_three_or_four_items() -> None:
    for tier in RiskTier:
        assert 3 <= len(TIER_RECOMMENDATIONS[tier]) <= 4


def test_low_tier_opening() -> None:
    answers = AnswerSet(firm_size="small", bilingual_exposure="low", region="liege", hiring_pressure="stable")
    interpretation = interpret(answers, score(answers))

    assert interpretation.opening == (
        "Your organization of 50–100 professionals with less than 25% bilingual client exposure "
        "operating in Liège/Wallonia demonstrates a low risk profile. "
        "This favorable position indicates effective capability retention and competitive positioning."
    )


def test_structural_tier_reads_naturally() -> None:
    answers = AnswerSet(firm_size="large", bilingual_exposure="high", region="brussels", hiring_pressure="aggressive")
    interpretation = interpret(answers, score(answers))

    assert "demonstrates a structural risk profile." in interpretation.opening
    assert "Your talent access model is under structural pressure." in interpretation.opening


def test_market_context_keeps_literal_figures() -> None:
    for figure in ("+23%", "20-35%", "15-25%"):
        assert figure in MARKET_CONTEXT


def test_html_rendering_escapes_and_lists() -> None:
    answers = AnswerSet(firm_size="medium", bilingual_exposure="medium", region="other", hiring_pressure="moderate")
    html = interpret(answers, score(answers)).to_html()

    assert html.startswith("<p><strong>Capability resilience assessment:</strong>")
    assert html.count("<li>") == len(TIER_RECOMMENDATIONS[RiskTier.MODERATE])
    assert "<p><strong>Market intelligence:</strong>" in html


def test_assessment_payload_bundles_everything() -> None:
    answers = AnswerSet(firm_size="medium", bilingual_exposure="medium", region="other", hiring_pressure="moderate")
    payload = assess(answers).to_payload()

    assert payload["result"]["tier"] == "Moderate"
    assert payload["answer_labels"]["region"] == "other Belgian regions"
    assert payload["interpretation"]["recommendations"] == list(TIER_RECOMMENDATIONS[RiskTier.MODERATE])
    assert [row["region"] for row in payload["heatmap"]] == ["brussels", "antwerp", "liege", "other"]
