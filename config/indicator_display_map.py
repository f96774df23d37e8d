from __future__ import annotations

from talent_risk.core.tables import INDICATOR_NAMES, INDICATOR_ORDER


INDICATOR_DISPLAY_MAP: dict[str, dict[str, str]] = {
    "bilingual_pressure": {
        "display_name": INDICATOR_NAMES["bilingual_pressure"],
        "element_key": "bilingualPressure",
        "hint": "Competition for FR-NL profiles in your market",
    },
    "scarcity_exposure": {
        "display_name": INDICATOR_NAMES["scarcity_exposure"],
        "element_key": "scarcity",
        "hint": "Difficulty replacing a departing bilingual professional",
    },
    "ai_leverage": {
        "display_name": INDICATOR_NAMES["ai_leverage"],
        "element_key": "aiLeverage",
        "hint": "Room to offload document-intensive work to automation",
    },
    "eor_feasibility": {
        "display_name": INDICATOR_NAMES["eor_feasibility"],
        "element_key": "eorFeasibility",
        "hint": "Fit of Employer of Record channels for cross-border hiring",
    },
}


def get_indicator_display_entry(internal_name: str) -> dict[str, str]:
    return dict(INDICATOR_DISPLAY_MAP[internal_name])


__all__ = ["INDICATOR_DISPLAY_MAP", "INDICATOR_ORDER", "get_indicator_display_entry"]
