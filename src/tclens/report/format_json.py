from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from .models import SCHEMA_VERSION, AnalysisReport


def to_json(report: AnalysisReport) -> str:
    return json.dumps(report.to_dict(), indent=2)


def write_json(report: AnalysisReport, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(to_json(report), encoding="utf-8")


def report_from_dict(raw: dict[str, Any]) -> AnalysisReport:
    observations = raw.get("observations", [])
    signals = raw.get("signals", {})
    schema_version = raw.get("schema_version")
    if not isinstance(schema_version, int) or isinstance(schema_version, bool):
        schema_version = SCHEMA_VERSION
    return AnalysisReport(
        language=str(raw.get("language", "")),
        detected_language=bool(raw.get("detected_language", False)),
        function_name=str(raw.get("function_name", "")),
        time_complexity=str(raw.get("time_complexity", "")),
        explanation=str(raw.get("explanation", "")),
        space_complexity=str(raw.get("space_complexity", "")),
        space_explanation=str(raw.get("space_explanation", "")),
        rating=str(raw.get("rating", "")),
        signals=dict(signals) if isinstance(signals, dict) else {},
        observations=[str(o) for o in observations] if isinstance(observations, list) else [],
        generated_at=str(raw.get("generated_at", "")),
        schema_version=schema_version,
    )


def read_json(path: Path) -> AnalysisReport:
    return report_from_dict(json.loads(path.read_text(encoding="utf-8")))
