"""Fixed configuration tables for the bilingual talent risk model.

Coefficients are modelled on public labour market signals for Belgium
(2024-2025): job posting density, published salary surveys and EOR provider
market data. No internal HR data is involved.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from ..models import RiskTier


BASELINE_SCORE = 50.0

FIRM_SIZE_COEFFICIENTS: Mapping[str, float] = MappingProxyType(
    {
        "small": 0.8,  # 50-100 professionals, key-person dependent
        "medium": 1.0,
        "large": 1.2,  # 150-250 professionals, complex retention
    }
)

BILINGUAL_COEFFICIENTS: Mapping[str, float] = MappingProxyType(
    {
        "low": 0.7,  # <25% of clients
        "medium": 1.0,
        "high": 1.4,  # >50% of clients, critical dependency
    }
)

REGION_COEFFICIENTS: Mapping[str, float] = MappingProxyType(
    {
        "brussels": 1.3,
        "antwerp": 1.2,
        "liege": 0.9,
        "other": 1.0,
    }
)

HIRING_PRESSURE_COEFFICIENTS: Mapping[str, float] = MappingProxyType(
    {
        "stable": 0.8,
        "moderate": 1.0,
        "aggressive": 1.3,  # poaching risk
    }
)

COEFFICIENT_TABLES: Mapping[str, Mapping[str, float]] = MappingProxyType(
    {
        "firm_size": FIRM_SIZE_COEFFICIENTS,
        "bilingual_exposure": BILINGUAL_COEFFICIENTS,
        "region": REGION_COEFFICIENTS,
        "hiring_pressure": HIRING_PRESSURE_COEFFICIENTS,
    }
)

# Lower bounds, checked from the top tier down.
TIER_THRESHOLDS: tuple[tuple[float, RiskTier], ...] = (
    (80.0, RiskTier.STRUCTURAL),
    (60.0, RiskTier.ELEVATED),
    (40.0, RiskTier.MODERATE),
    (0.0, RiskTier.LOW),
)

TIER_DESCRIPTIONS: Mapping[RiskTier, str] = MappingProxyType(
    {
        RiskTier.LOW: (
            "Your exposure to bilingual talent attrition is well-managed. "
            "Maintain current capability building while monitoring market developments."
        ),
        RiskTier.MODERATE: (
            "Identifiable attrition risk on critical profiles. "
            "Proactive retention strategy recommended for capability resilience."
        ),
        RiskTier.ELEVATED: (
            "Significant vulnerability to talent loss. "
            "Strategic intervention required to secure bilingual capabilities."
        ),
        RiskTier.STRUCTURAL: (
            "Critical exposure to bilingual talent scarcity. "
            "Reconfiguration of your talent access model required."
        ),
    }
)

TIER_LEADS: Mapping[RiskTier, str] = MappingProxyType(
    {
        RiskTier.LOW: "This favorable position indicates effective capability retention and competitive positioning.",
        RiskTier.MODERATE: (
            "Market signals indicate emerging tension in Belgian bilingual talent markets affecting your region."
        ),
        RiskTier.ELEVATED: (
            "The combination of scale, bilingual dependency, and location creates operational capability risk."
        ),
        RiskTier.STRUCTURAL: (
            "Your talent access model is under structural pressure. "
            "Bilingual capability scarcity threatens service delivery capacity."
        ),
    }
)

TIER_RECOMMENDATIONS: Mapping[RiskTier, tuple[str, ...]] = MappingProxyType(
    {
        RiskTier.LOW: (
            "Maintain competitive intelligence on compensation trends in your labor market",
            "Develop succession pathways for critical bilingual roles",
            "Evaluate AI augmentation for junior capability optimization",
        ),
        RiskTier.MODERATE: (
            "Conduct immediate compensation benchmarking against public market data (LinkedIn, Glassdoor)",
            "Identify flight-risk profiles based on tenure and client exposure",
            "Assess EOR viability for non-critical support functions",
        ),
        RiskTier.ELEVATED: (
            "Implement urgent retention plan (compensation adjustment, career pathway clarity)",
            "Activate EOR channels to decompress local hiring pressure",
            "Deploy AI automation on document-intensive workflows",
            "Evaluate internal mobility to preserve bilingual capability",
        ),
        RiskTier.STRUCTURAL: (
            "Reconfigure compensation structure immediately (significant bilingual premium)",
            "Implement multicountry EOR model for European talent access",
            "Accelerate AI transformation to reduce headcount dependency",
            "Restructure organization to isolate critical bilingual functions",
        ),
    }
)

MARKET_CONTEXT = (
    "Public recruitment data indicates hiring velocity of +23% for FR-NL bilingual legal profiles "
    "in Brussels (LinkedIn, 2024). Bilingual premiums reach 20-35% in law and audit firms (public sources). "
    "Without intervention, selective turnover risk on your bilingual talent increases 15-25% annually."
)

FIRM_SIZE_LABELS: Mapping[str, str] = MappingProxyType(
    {
        "small": "50–100 professionals",
        "medium": "100–150 professionals",
        "large": "150–250 professionals",
    }
)

BILINGUAL_LABELS: Mapping[str, str] = MappingProxyType(
    {
        "low": "less than 25%",
        "medium": "25% to 50%",
        "high": "more than 50%",
    }
)

REGION_LABELS: Mapping[str, str] = MappingProxyType(
    {
        "brussels": "Brussels",
        "antwerp": "Antwerp/Flanders",
        "liege": "Liège/Wallonia",
        "other": "other Belgian regions",
    }
)

HIRING_PRESSURE_LABELS: Mapping[str, str] = MappingProxyType(
    {
        "stable": "stable hiring",
        "moderate": "moderate hiring pressure",
        "aggressive": "aggressive hiring competition",
    }
)

ANSWER_LABELS: Mapping[str, Mapping[str, str]] = MappingProxyType(
    {
        "firm_size": FIRM_SIZE_LABELS,
        "bilingual_exposure": BILINGUAL_LABELS,
        "region": REGION_LABELS,
        "hiring_pressure": HIRING_PRESSURE_LABELS,
    }
)


STEP_QUESTIONS: Mapping[str, str] = MappingProxyType(
    {
        "firm_size": "How many professionals does your firm employ?",
        "bilingual_exposure": "What share of your clients requires bilingual FR-NL service?",
        "region": "Where is your main office located?",
        "hiring_pressure": "How would you describe current hiring pressure in your market?",
    }
)

INDICATOR_ORDER: tuple[str, ...] = (
    "bilingual_pressure",
    "scarcity_exposure",
    "ai_leverage",
    "eor_feasibility",
)

INDICATOR_NAMES: Mapping[str, str] = MappingProxyType(
    {
        "bilingual_pressure": "Bilingual pressure",
        "scarcity_exposure": "Scarcity exposure",
        "ai_leverage": "AI leverage potential",
        "eor_feasibility": "EOR feasibility",
    }
)


@dataclass(slots=True, frozen=True)
class HeatmapRow:
    region: str
    level: str
    label: str
    description: str

    @property
    def region_label(self) -> str:
        return REGION_LABELS.get(self.region, self.region)

    def as_dict(self) -> dict[str, str]:
        return {
            "region": self.region,
            "region_label": self.region_label,
            "level": self.level,
            "label": self.label,
            "description": self.description,
        }


HEATMAP_ROWS: tuple[HeatmapRow, ...] = (
    HeatmapRow("brussels", "high", "Critical tension", "Bilingual premium +25-35%"),
    HeatmapRow("antwerp", "high", "High tension", "Bilingual premium +20-30%"),
    HeatmapRow("liege", "moderate", "Moderate tension", "Bilingual premium +15-25%"),
    HeatmapRow("other", "moderate", "Variable tension", "Bilingual premium +10-20%"),
)


def answer_label(field: str, value: str | None) -> str:
    if value is None:
        return ""
    return ANSWER_LABELS.get(field, {}).get(value, value)


__all__ = [
    "ANSWER_LABELS",
    "BASELINE_SCORE",
    "BILINGUAL_COEFFICIENTS",
    "BILINGUAL_LABELS",
    "COEFFICIENT_TABLES",
    "FIRM_SIZE_COEFFICIENTS",
    "FIRM_SIZE_LABELS",
    "HEATMAP_ROWS",
    "HIRING_PRESSURE_COEFFICIENTS",
    "HIRING_PRESSURE_LABELS",
    "HeatmapRow",
    "INDICATOR_NAMES",
    "INDICATOR_ORDER",
    "MARKET_CONTEXT",
    "REGION_COEFFICIENTS",
    "REGION_LABELS",
    "STEP_QUESTIONS",
    "TIER_DESCRIPTIONS",
    "TIER_LEADS",
    "TIER_RECOMMENDATIONS",
    "TIER_THRESHOLDS",
    "answer_label",
]
