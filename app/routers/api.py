from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Body
from fastapi.responses import JSONResponse

from talent_risk.core import assess
from talent_risk.core.tables import ANSWER_LABELS, COEFFICIENT_TABLES, HEATMAP_ROWS
from talent_risk.errors import IncompleteAnswersError, InvalidAnswerError
from talent_risk.models import to_answer_set

router = APIRouter(prefix="/api", tags=["api"])
logger = logging.getLogger(__name__)


@router.post("/score")
def api_score(payload: dict[str, Any] = Body(...)):
    try:
        answers = to_answer_set(payload)
        assessment = assess(answers)
    except IncompleteAnswersError as exc:
        logger.warning("Rejected score request: %s", exc)
        return JSONResponse(
            status_code=422,
            content={"error": "incomplete_answers", "detail": str(exc), "missing": exc.missing},
        )
    except InvalidAnswerError as exc:
        logger.warning("Rejected score request: %s", exc)
        return JSONResponse(
            status_code=422,
            content={"error": "invalid_answer", "detail": str(exc), "field": exc.field},
        )
    return assessment.to_payload()


@router.get("/tables")
def api_tables():
    return {
        "coefficients": {name: dict(table) for name, table in COEFFICIENT_TABLES.items()},
        "labels": {name: dict(labels) for name, labels in ANSWER_LABELS.items()},
        "heatmap": [row.as_dict() for row in HEATMAP_ROWS],
    }
