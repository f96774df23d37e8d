from __future__ import annotations

from dataclasses import dataclass, fields, replace
from types import MappingProxyType
from typing import Mapping, TypedDict

from ..errors import InvalidAnswerError


ANSWER_CHOICES: Mapping[str, tuple[str, ...]] = MappingProxyType(
    {
        "firm_size": ("small", "medium", "large"),
        "bilingual_exposure": ("low", "medium", "high"),
        "region": ("brussels", "antwerp", "liege", "other"),
        "hiring_pressure": ("stable", "moderate", "aggressive"),
    }
)

# Form and JSON payloads coming from the browser widget use camelCase names.
FIELD_ALIASES: Mapping[str, str] = MappingProxyType(
    {
        "firmSize": "firm_size",
        "bilingualExposure": "bilingual_exposure",
        "region": "region",
        "hiringPressure": "hiring_pressure",
    }
)


class RawAnswers(TypedDict, total=False):
    firm_size: str | None
    bilingual_exposure: str | None
    region: str | None
    hiring_pressure: str | None


def normalize_field(name: str) -> str:
    key = str(name or "").strip()
    key = FIELD_ALIASES.get(key, key)
    if key not in ANSWER_CHOICES:
        raise InvalidAnswerError(key, reason=f"Unknown answer field {name!r}.")
    return key


def normalize_value(field: str, value: object) -> str:
    text = str(value or "").strip().lower()
    if text not in ANSWER_CHOICES[field]:
        allowed = ", ".join(ANSWER_CHOICES[field])
        raise InvalidAnswerError(
            field,
            value,
            reason=f"Unsupported value {value!r} for {field!r} (expected one of: {allowed}).",
        )
    return text


@dataclass(slots=True, frozen=True)
class AnswerSet:
    firm_size: str | None = None
    bilingual_exposure: str | None = None
    region: str | None = None
    hiring_pressure: str | None = None

    def with_answer(self, field: str, value: object) -> "AnswerSet":
        key = normalize_field(field)
        return replace(self, **{key: normalize_value(key, value)})

    def missing_fields(self) -> list[str]:
        return [f.name for f in fields(self) if getattr(self, f.name) is None]

    def is_complete(self) -> bool:
        return not self.missing_fields()

    def to_payload(self) -> RawAnswers:
        return {
            "firm_size": self.firm_size,
            "bilingual_exposure": self.bilingual_exposure,
            "region": self.region,
            "hiring_pressure": self.hiring_pressure,
        }


def to_answer_set(payload: Mapping[str, object]) -> AnswerSet:
    """Build an answer set from a raw mapping.

    Keys may use either snake_case or the widget's camelCase names. Missing or
    empty values stay unset; anything else must belong to its choice table.
    """
    answers = AnswerSet()
    for raw_key, raw_value in payload.items():
        key = normalize_field(str(raw_key))
        if raw_value is None or str(raw_value).strip() == "":
            continue
        answers = answers.with_answer(key, raw_value)
    return answers
