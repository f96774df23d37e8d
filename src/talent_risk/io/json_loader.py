from __future__ import annotations

import json
from pathlib import Path

from ..models import AnswerSet, to_answer_set


def load_answers_file(path: Path) -> AnswerSet:
    raw = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(raw, dict):
        raise ValueError("Input JSON must be an object mapping answer fields to values.")
    return to_answer_set(raw)


def dump_result_file(path: Path, payload: dict[str, object]) -> None:
    path.write_text(json.dumps(payload, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
