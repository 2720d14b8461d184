from __future__ import annotations

import logging
import re

from tclens.analyze.base import (
    blank_string_literals,
    call_pattern,
    check_snippet,
    run_analyzer,
)
from tclens.analyze.scope import IndentScopeTracker, indent_width
from tclens.analyze.signals import ComplexityResult, ComplexitySignals, SignalAccumulator

log = logging.getLogger(__name__)

_DEF = re.compile(r"^(?:async\s+)?def\s+([A-Za-z_]\w*)\s*\(")
_LOOP = re.compile(r"^(?:async\s+)?(?:for|while)\b")
_SORT = re.compile(r"\.sort\s*\(|\bsorted\s*\(")

_HASH_PATTERNS = (
    re.compile(r"\{[^}]*:"),
    re.compile(r"\{\s*\}"),
    re.compile(r"\{.*\bfor\b.*\bin\b"),
    re.compile(r"(?:^|[=(,\[]|\breturn)\s*\{[^{}:]+\}"),
    re.compile(r"(?:^|[=(,\[]|\breturn)\s*\{\s*$"),
    re.compile(r"\b(?:dict|set|frozenset|defaultdict|Counter|OrderedDict)\s*\("),
)


def _code_portion(line: str) -> str:
    return blank_string_literals(line).split("#", 1)[0].rstrip()


class PythonAnalyzer:
    """Line scanner that reads scopes off indentation."""

    language = "python"

    def collect_signals(self, src: str, function_name: str = "") -> ComplexitySignals:
        lines = check_snippet(src)
        target = function_name.strip()
        self_call = call_pattern(target)
        acc = SignalAccumulator()
        scopes = IndentScopeTracker()

        for raw_line in lines:
            line = raw_line.strip()
            if not line or line.startswith("#"):
                continue
            code = _code_portion(line)
            indent = indent_width(raw_line)
            scopes.advance(indent)

            declared_here = False
            def_match = _DEF.match(code)
            if def_match:
                scopes.enter_function(def_match.group(1), indent)
                declared_here = True

            if _LOOP.match(code):
                acc.record_loop(scopes.enter_loop(indent))

            if _SORT.search(code):
                acc.sort_calls += 1

            if not acc.hash_usage and any(p.search(code) for p in _HASH_PATTERNS):
                acc.mark_hash()

            if self_call is not None and not declared_here and scopes.function == target:
                if self_call.search(code):
                    acc.recursion_calls += 1

        signals = acc.freeze()
        log.debug("Python signals for %d lines: %s", len(lines), signals)
        return signals


def analyze_source(src: str, function_name: str = "") -> ComplexityResult:
    return run_analyzer(PythonAnalyzer(), src, function_name)
