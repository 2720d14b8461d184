from __future__ import annotations

import logging
from dataclasses import dataclass

from tclens.analyze.base import StructuralAnalyzer, check_snippet, run_analyzer
from tclens.analyze.detect import detect_language
from tclens.analyze.java import JavaAnalyzer
from tclens.analyze.javascript import JavaScriptAnalyzer
from tclens.analyze.python_lines import PythonAnalyzer
from tclens.analyze.signals import ComplexityResult
from tclens.errors import UnsupportedLanguageError
from tclens.util.languages import AUTO, normalize_language

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class SnippetAnalysis:
    language: str
    detected: bool
    function_name: str
    result: ComplexityResult


def default_analyzers() -> dict[str, StructuralAnalyzer]:
    analyzers: list[StructuralAnalyzer] = [
        JavaScriptAnalyzer(),
        PythonAnalyzer(),
        JavaAnalyzer(),
    ]
    return {a.language: a for a in analyzers}


def resolve_language(requested: str | None, src: str) -> tuple[str, bool]:
    language = normalize_language(requested)
    if language == AUTO:
        detected = detect_language(src)
        log.debug("Auto-detected language: %s", detected)
        return detected, True
    return language, False


def analyze_snippet(
    src: str,
    language: str | None = AUTO,
    function_name: str = "",
    analyzers: dict[str, StructuralAnalyzer] | None = None,
) -> SnippetAnalysis:
    if analyzers is None:
        analyzers = default_analyzers()
    lines = check_snippet(src)
    resolved, detected = resolve_language(language, src)
    analyzer = analyzers.get(resolved)
    if analyzer is None:
        raise UnsupportedLanguageError(str(language))
    name = (function_name or "").strip()
    log.debug("Analyzing %d-line %s snippet (function=%r)", len(lines), resolved, name)
    result = run_analyzer(analyzer, src, name)
    return SnippetAnalysis(language=resolved, detected=detected, function_name=name, result=result)
