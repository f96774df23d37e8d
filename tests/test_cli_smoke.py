from __future__ import annotations

import importlib
import json
from pathlib import Path
from uuid import uuid4

from talent_risk.cli.main import main
from talent_risk.core.tables import INDICATOR_NAMES


LOCAL_TMP_ROOT = Path(__file__).resolve().parent / ".tmp_local"


def _make_local_tmp(prefix: str) -> Path:
    LOCAL_TMP_ROOT.mkdir(parents=True, exist_ok=True)
    path = LOCAL_TMP_ROOT / f"{prefix}_{uuid4().hex[:8]}"
    path.mkdir(parents=True, exist_ok=True)
    return path


def test_talent_risk_score_cli_smoke() -> None:
    tmp = _make_local_tmp("talent_risk")
    input_path = tmp / "input.json"
    output_path = tmp / "result.json"

    input_path.write_text(
        json.dumps(
            {
                "firmSize": "small",
                "bilingualExposure": "low",
                "region": "liege",
                "hiringPressure": "stable",
            }
        ),
        encoding="utf-8",
    )

    code = main([str(input_path), "--out", str(output_path), "--format", "json"])

    assert code == 0
    result = json.loads(output_path.read_text(encoding="utf-8"))
    assert result["result"]["tier"] == "Low"
    assert isinstance(result["result"]["score"], float)
    assert len(result["heatmap"]) == 4


def test_cli_flags_override_input(capsys) -> None:
    tmp = _make_local_tmp("talent_risk_flags")
    input_path = tmp / "input.json"
    input_path.write_text(json.dumps({"firm_size": "small", "bilingual_exposure": "low"}), encoding="utf-8")

    code = main([str(input_path), "--firm-size", "large", "--region", "brussels", "--hiring-pressure", "aggressive"])

    assert code == 0
    out = capsys.readouterr().out
    assert "Risk level:" in out
    assert "150–250 professionals" in out


def test_cli_rejects_incomplete_answers(capsys) -> None:
    code = main(["--firm-size", "small"])

    assert code == 2
    assert "missing" in capsys.readouterr().err


def test_cli_rejects_invalid_input_file(capsys) -> None:
    tmp = _make_local_tmp("talent_risk_invalid")
    input_path = tmp / "input.json"
    input_path.write_text(json.dumps({"firm_size": "huge"}), encoding="utf-8")

    assert main([str(input_path)]) == 2
    assert "invalid input" in capsys.readouterr().err

    assert main([str(tmp / "missing.json")]) == 2


def test_cli_reports_unreadable_input_file(monkeypatch, capsys) -> None:
    tmp = _make_local_tmp("talent_risk_unreadable")
    input_path = tmp / "input.json"
    input_path.write_text("{}", encoding="utf-8")

    def _denied(path):
        raise PermissionError(13, "Permission denied", str(path))

    monkeypatch.setattr(importlib.import_module("talent_risk.cli.main"), "load_answers_file", _denied)

    assert main([str(input_path)]) == 2
    assert "Permission denied" in capsys.readouterr().err


def test_cli_text_output_uses_indicator_names(capsys) -> None:
    code = main(["--firm-size", "large", "--bilingual-exposure", "high", "--region", "brussels", "--hiring-pressure", "aggressive"])

    assert code == 0
    out = capsys.readouterr().out
    for name in INDICATOR_NAMES.values():
        assert name in out
