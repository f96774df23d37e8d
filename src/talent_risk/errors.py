from __future__ import annotations


class TalentRiskError(Exception):
    """Base class for errors raised by the talent risk model."""


class InvalidAnswerError(TalentRiskError, ValueError):
    def __init__(self, field: str, value: object = None, *, reason: str = "") -> None:
        self.field = field
        self.value = value
        message = reason or f"Unsupported value {value!r} for {field!r}."
        super().__init__(message)


class IncompleteAnswersError(TalentRiskError, ValueError):
    def __init__(self, missing: list[str]) -> None:
        self.missing = list(missing)
        super().__init__(f"Answers incomplete; missing: {', '.join(self.missing)}.")


__all__ = ["IncompleteAnswersError", "InvalidAnswerError", "TalentRiskError"]
