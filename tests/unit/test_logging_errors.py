from __future__ import annotations

import json

from reposcan.constants import ExitCode
from reposcan.errors import ConfigError, RepoScanError, TargetNotFoundError
from reposcan.logging import ScanLogger


def _records(err: str) -> list[dict]:
    return [json.loads(line) for line in err.strip().splitlines() if line.startswith("{")]


def test_logger_emits_json(capsys) -> None:
    logger = ScanLogger("scan-1", min_level="info")
    logger.info("hello", detail="world")
    payload = _records(capsys.readouterr().err)[0]

    assert payload["scan_id"] == "scan-1"
    assert payload["level"] == "info"
    assert payload["message"] == "hello"
    assert payload["detail"] == "world"


def test_logger_filters_below_min_level(capsys) -> None:
    logger = ScanLogger("scan-2")
    logger.debug("quiet")
    logger.info("quiet")
    logger.warning("loud")
    assert [r["message"] for r in _records(capsys.readouterr().err)] == ["loud"]


def test_annotations_only_when_enabled(capsys) -> None:
    ScanLogger("scan-3").error("fail")
    assert "::error::" not in capsys.readouterr().err

    ScanLogger("scan-4", annotations=True).error("fail")
    assert "::error::fail" in capsys.readouterr().err


def test_logger_redacts_sensitive_keys(capsys) -> None:
    logger = ScanLogger("scan-5", min_level="info")
    logger.info("secret", api_key="sk-test", github_token="t", path="a.py")
    payload = _records(capsys.readouterr().err)[0]

    assert payload["api_key"] == "***"
    assert payload["github_token"] == "***"
    assert payload["path"] == "a.py"


def test_stage_reports_duration(capsys) -> None:
    logger = ScanLogger("scan-6", min_level="info")
    with logger.stage("scan"):
        pass
    records = _records(capsys.readouterr().err)
    assert [r["message"] for r in records] == ["stage_start", "stage_end"]
    assert records[1]["status"] == "ok"
    assert records[1]["duration_ms"] >= 0


def test_error_exit_codes() -> None:
    assert RepoScanError().exit_code == ExitCode.ERROR
    assert ConfigError().exit_code == ExitCode.ERROR
    err = TargetNotFoundError("/nope")
    assert err.exit_code == ExitCode.NOT_FOUND
    assert str(err) == "Path not found: /nope"
