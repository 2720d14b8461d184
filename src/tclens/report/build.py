from __future__ import annotations

from datetime import datetime, timezone

from tclens.analyze.dispatch import SnippetAnalysis
from tclens.analyze.scoring import explain, observations, rating, space_hint

from .models import SCHEMA_VERSION, AnalysisReport


def _utc_now() -> str:
    return datetime.now(timezone.utc).replace(microsecond=0).isoformat().replace("+00:00", "Z")


def build_report(analysis: SnippetAnalysis, generated_at: str | None = None) -> AnalysisReport:
    result = analysis.result
    signals = result.signals
    label = result.inferred_time_complexity
    space_label, space_why = space_hint(signals)
    return AnalysisReport(
        language=analysis.language,
        detected_language=analysis.detected,
        function_name=analysis.function_name,
        time_complexity=label,
        explanation=explain(label, signals),
        space_complexity=space_label,
        space_explanation=space_why,
        rating=rating(label),
        signals=signals.to_dict(),
        observations=observations(signals),
        generated_at=generated_at or _utc_now(),
        schema_version=SCHEMA_VERSION,
    )
