from __future__ import annotations

import json
import os
import sys
from subprocess import run as subprocess_run  # noqa: S404
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


def _run_validate(tmp_path: Path, payload: dict[str, object]) -> tuple[int, dict[str, object]]:
    page = tmp_path / "dates.page.json"
    page.write_text(
        json.dumps(
            {
                "title": "Your tenancy",
                "fields": {
                    "startDate": {"type": "date", "name": "the start date", "min": "2010-11-16"},
                    "endDate": {"type": "date", "name": "the end date", "min": "startDate", "afterField": "the start date"},
                    "rent": {"type": "currency", "name": "your rent", "max": 2000},
                },
            },
        ),
        encoding="utf-8",
    )
    payload_path = tmp_path / "payload.json"
    payload_path.write_text(json.dumps(payload), encoding="utf-8")
    output = tmp_path / "report.json"

    result = subprocess_run(  # noqa: S603
        [
            sys.executable,
            "-m",
            "formcheck.cli",
            "validate",
            "--page",
            str(page),
            "--payload",
            str(payload_path),
            "--output",
            str(output),
        ],
        capture_output=True,
        text=True,
        check=False,
        cwd=tmp_path,
        env={**os.environ, "LOG_JSON": "false"},
    )
    return result.returncode, json.loads(output.read_text(encoding="utf-8"))


def test_validate_flow_reports_date_and_currency_errors(tmp_path: Path) -> None:
    code, report = _run_validate(
        tmp_path,
        {
            "startDate-day": "1",
            "startDate-month": "2",
            "startDate-year": "2020",
            "endDate-day": "1",
            "endDate-month": "1",
            "endDate-year": "2020",
            "rent": "£2,500",
        },
    )

    assert code == 1
    assert report["hasErrors"] is True
    assert [entry["id"] for entry in report["summary"]] == ["endDate", "rent"]
    assert report["text"] == {
        "endDate": "The end date must be after the start date, 1 February 2020",
        "rent": "Your rent must be £2,000 or less",
    }
    assert report["inline"]["endDate"]["href"] == "#endDate-day"
    assert report["inline"]["endDate"]["inputs"] == ["day", "month", "year"]


def test_validate_flow_accepts_valid_payload(tmp_path: Path) -> None:
    code, report = _run_validate(
        tmp_path,
        {"startDate": "2020-02-01", "endDate": "2021-02-01", "rent": "1,200.50"},
    )

    assert code == 0
    assert report == {"summary": [], "inline": {}, "text": {}, "hasErrors": False}
