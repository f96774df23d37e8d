from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class RiskTier(Enum):
    LOW = ("Low", "low")
    MODERATE = ("Moderate", "moderate")
    ELEVATED = ("Elevated", "elevated")
    STRUCTURAL = ("Structural Risk", "structural")

    def __init__(self, label: str, css_class: str) -> None:
        self.label = label
        self.css_class = css_class

    @property
    def profile_name(self) -> str:
        # Lower-case name used in "a <name> risk profile".
        return self.css_class


@dataclass(slots=True, frozen=True)
class Indicators:
    bilingual_pressure: float
    scarcity_exposure: float
    ai_leverage: float
    eor_feasibility: float

    def as_dict(self) -> dict[str, float]:
        return {
            "bilingual_pressure": self.bilingual_pressure,
            "scarcity_exposure": self.scarcity_exposure,
            "ai_leverage": self.ai_leverage,
            "eor_feasibility": self.eor_feasibility,
        }


@dataclass(slots=True, frozen=True)
class RiskResult:
    score: float
    tier: RiskTier
    description: str
    indicators: Indicators

    def to_payload(self) -> dict[str, Any]:
        return {
            "score": self.score,
            "tier": self.tier.label,
            "tier_class": self.tier.css_class,
            "description": self.description,
            "indicators": self.indicators.as_dict(),
        }
