from .answers import ANSWER_CHOICES, FIELD_ALIASES, AnswerSet, RawAnswers, normalize_field, to_answer_set
from .result import Indicators, RiskResult, RiskTier

__all__ = [
    "ANSWER_CHOICES",
    "FIELD_ALIASES",
    "AnswerSet",
    "Indicators",
    "RawAnswers",
    "RiskResult",
    "RiskTier",
    "normalize_field",
    "to_answer_set",
]
