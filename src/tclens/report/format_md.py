from __future__ import annotations

from .models import AnalysisReport

_BREAKDOWN = (
    ("Loops detected", "loopCount"),
    ("Max nesting depth", "maxNesting"),
    ("Sort calls", "sortCalls"),
    ("Recursive calls", "recursionCalls"),
    ("Hash-based structures", "hashUsage"),
)


def _cell(value: object) -> str:
    if isinstance(value, bool):
        return "yes" if value else "no"
    return str(value)


def to_markdown(report: AnalysisReport, show_observations: bool = True) -> str:
    lines: list[str] = []
    lines.append("# Time complexity report")
    lines.append("")
    language = report.language
    if report.detected_language:
        language = f"{language} (auto-detected)"
    lines.append(f"- Language: `{language}`")
    if report.function_name:
        lines.append(f"- Function: `{report.function_name}`")
    lines.append(f"- Time complexity: `{report.time_complexity}` ({report.rating})")
    lines.append(f"- Space complexity: `{report.space_complexity}`: {report.space_explanation}")
    if report.generated_at:
        lines.append(f"- Generated: `{report.generated_at}`")
    lines.append("")

    if show_observations and report.observations:
        lines.append("## Key observations")
        lines.append("")
        for obs in report.observations:
            lines.append(f"- {obs}")
        lines.append("")

    lines.append("## Why this complexity?")
    lines.append("")
    lines.append(report.explanation)
    lines.append("")

    lines.append("## Signal breakdown")
    lines.append("")
    lines.append("| Signal | Value |")
    lines.append("|---|---:|")
    for label, key in _BREAKDOWN:
        lines.append(f"| {label} | {_cell(report.signals.get(key, ''))} |")
    lines.append("")
    return "\n".join(lines)
