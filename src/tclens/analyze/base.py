from __future__ import annotations

import re
from typing import Protocol

from tclens.analyze.scoring import classify
from tclens.analyze.signals import ComplexityResult, ComplexitySignals
from tclens.errors import EmptyInputError, SnippetTooLargeError

MAX_SNIPPET_CHARS = 30_000
MAX_SNIPPET_LINES = 1_500

_LINE_BREAK = re.compile(r"\r?\n")
_STRING_LITERAL = re.compile(r""""(?:\\.|[^"\\])*"|'(?:\\.|[^'\\])*'""")


class StructuralAnalyzer(Protocol):
    language: str

    def collect_signals(self, src: str, function_name: str = "") -> ComplexitySignals:
        ...


def split_lines(src: str) -> list[str]:
    return _LINE_BREAK.split(src)


def check_snippet(src: str) -> list[str]:
    """Apply the hard emptiness and size guards, returning the snippet's lines."""
    if not src or not src.strip():
        raise EmptyInputError()
    if len(src) > MAX_SNIPPET_CHARS:
        raise SnippetTooLargeError("characters", MAX_SNIPPET_CHARS, len(src))
    lines = split_lines(src)
    if len(lines) > MAX_SNIPPET_LINES:
        raise SnippetTooLargeError("lines", MAX_SNIPPET_LINES, len(lines))
    return lines


def blank_string_literals(line: str) -> str:
    # Keeps the quotes so `{"a": 1}` still reads as a keyed literal.
    return _STRING_LITERAL.sub(lambda m: m.group(0)[0] * 2, line)


def call_pattern(function_name: str) -> re.Pattern[str] | None:
    name = function_name.strip()
    if not name:
        return None
    return re.compile(rf"(?<![\w$]){re.escape(name)}\s*\(")


def run_analyzer(analyzer: StructuralAnalyzer, src: str, function_name: str = "") -> ComplexityResult:
    signals = analyzer.collect_signals(src, function_name)
    return ComplexityResult(signals=signals, inferred_time_complexity=classify(signals))
