from __future__ import annotations

import io
import os
from pathlib import Path
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from talent_risk.cli.terminal import TerminalView
from talent_risk.core import HEATMAP_ROWS, WizardController, WizardState, interpret, score
from talent_risk.core.tables import INDICATOR_NAMES, INDICATOR_ORDER
from talent_risk.models import AnswerSet


LOCAL_TMP_ROOT = Path(__file__).resolve().parent / ".tmp_local"


@pytest.fixture()
def client() -> TestClient:
    runtime_dir = LOCAL_TMP_ROOT / f"web_{uuid4().hex[:8]}"
    runtime_dir.mkdir(parents=True, exist_ok=True)
    os.environ["RUNTIME_DIR"] = str(runtime_dir)
    os.environ["SECRET_KEY"] = "test-secret-key"

    from app.main import create_app

    return TestClient(create_app())


def _answer(client: TestClient, field: str, value: str):
    return client.post("/wizard/answer", data={"field": field, "value": value, "advance": "true"})


def test_app_health_smoke(client: TestClient) -> None:
    response = client.get("/healthz")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}

    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json()["version"]


def test_wizard_walkthrough_renders_results(client: TestClient) -> None:
    page = client.get("/")
    assert page.status_code == 200
    assert "Step 1 of 5" in page.text

    assert "Step 2 of 5" in _answer(client, "firmSize", "large").text
    assert "Step 3 of 5" in _answer(client, "bilingualExposure", "high").text
    assert "Step 4 of 5" in _answer(client, "region", "brussels").text

    results = _answer(client, "hiringPressure", "aggressive")
    assert results.status_code == 200
    assert str(results.url).endswith("/wizard/results")
    assert "Structural Risk" in results.text
    assert "Implement multicountry EOR model for European talent access" in results.text
    assert "Critical tension" in results.text
    assert 'class="indicator-fill high"' in results.text


def test_results_require_completed_wizard(client: TestClient) -> None:
    response = client.get("/wizard/results")
    assert str(response.url).endswith("/wizard")
    assert "Step 1 of 5" in response.text

    response = client.post("/wizard/next")
    assert "Step 1 of 5" in response.text


def test_previous_and_reset(client: TestClient) -> None:
    _answer(client, "firmSize", "small")
    back = client.post("/wizard/prev")
    assert "Step 1 of 5" in back.text
    assert "checked" in back.text

    forward = client.post("/wizard/next")
    assert "Step 2 of 5" in forward.text

    reset = client.post("/wizard/reset")
    assert "Step 1 of 5" in reset.text
    assert "checked" not in reset.text


def test_invalid_answer_is_rejected(client: TestClient) -> None:
    response = _answer(client, "firmSize", "huge")
    assert response.status_code == 400
    assert "Unsupported value" in response.text


def test_results_pdf_download(client: TestClient) -> None:
    _answer(client, "firmSize", "medium")
    _answer(client, "bilingualExposure", "medium")
    _answer(client, "region", "other")
    _answer(client, "hiringPressure", "moderate")

    response = client.get("/wizard/results.pdf")
    assert response.status_code == 200
    assert response.headers["content-type"] == "application/pdf"
    assert response.content.startswith(b"%PDF")


def test_api_score(client: TestClient) -> None:
    response = client.post(
        "/api/score",
        json={"firmSize": "small", "bilingualExposure": "low", "region": "liege", "hiringPressure": "stable"},
    )
    assert response.status_code == 200
    body = response.json()
    assert body["result"]["tier"] == "Low"
    assert body["result"]["score"] == pytest.approx(20.16)
    assert body["interpretation"]["html"].startswith("<p><strong>")


def test_api_score_rejects_bad_payloads(client: TestClient) -> None:
    incomplete = client.post("/api/score", json={"firm_size": "small"})
    assert incomplete.status_code == 422
    assert incomplete.json()["error"] == "incomplete_answers"
    assert "region" in incomplete.json()["missing"]

    invalid = client.post("/api/score", json={"firm_size": "small", "planet": "mars"})
    assert invalid.status_code == 422
    assert invalid.json()["error"] == "invalid_answer"


def test_api_tables(client: TestClient) -> None:
    body = client.get("/api/tables").json()
    assert body["coefficients"]["region"]["brussels"] == 1.3
    assert len(body["heatmap"]) == 4


def test_answer_posted_after_completion_shows_results(client: TestClient) -> None:
    _answer(client, "firmSize", "large")
    _answer(client, "bilingualExposure", "high")
    _answer(client, "region", "brussels")
    _answer(client, "hiringPressure", "aggressive")

    response = _answer(client, "hiringPressure", "stable")
    assert response.status_code == 200
    assert str(response.url).endswith("/wizard/results")
    assert "Structural Risk" in response.text


def test_web_view_collects_context_pushed_by_controller() -> None:
    from app.services.presentation import WebView

    answers = AnswerSet(firm_size="medium", bilingual_exposure="medium", region="other", hiring_pressure="moderate")
    view = WebView(answers)
    WizardController(view, WizardState(current_step=5, answers=answers)).start()

    assert view.step["step"] == 5
    assert view.step["progress"] == pytest.approx(100)
    assert view.step["options"] == []
    assert view.results["tier_label"] == "Moderate"
    assert view.results["score"] == pytest.approx(50)
    assert view.results["answer_labels"]["region"] == "other Belgian regions"

    view = WebView(answers)
    WizardController(view, WizardState(current_step=2, answers=answers)).start()
    assert view.results == {}
    assert view.step["field_name"] == "bilingualExposure"
    assert [option["value"] for option in view.step["options"] if option["selected"]] == ["medium"]


def test_indicator_names_match_terminal_output() -> None:
    from app.services.presentation import indicator_rows

    answers = AnswerSet(firm_size="small", bilingual_exposure="low", region="liege", hiring_pressure="stable")
    result = score(answers)
    rows = indicator_rows(result)
    assert [row["display_name"] for row in rows] == [INDICATOR_NAMES[key] for key in INDICATOR_ORDER]

    out = io.StringIO()
    TerminalView(out).render_results(result, interpret(answers, result), HEATMAP_ROWS)
    for row in rows:
        assert row["display_name"] in out.getvalue()
