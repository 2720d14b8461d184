from __future__ import annotations

import logging
import re

from tclens.analyze.base import (
    blank_string_literals,
    call_pattern,
    check_snippet,
    run_analyzer,
)
from tclens.analyze.scope import BraceScopeTracker
from tclens.analyze.signals import ComplexityResult, ComplexitySignals, SignalAccumulator

log = logging.getLogger(__name__)

_COMMENT_PREFIXES = ("//", "/*", "*")

# <modifier-or-type> <type> <name>(
_METHOD_DECL = re.compile(r"(?:^|\s)([\w<>\[\],]+)\s+([\w<>\[\]]+)\s+([A-Za-z_]\w*)\s*\(")
# <type> <name>( at line start, not a statement
_BARE_METHOD_DECL = re.compile(r"^([\w<>\[\]]+)\s+([A-Za-z_]\w*)\s*\([^;]*$")
_STATEMENT_WORDS = frozenset(
    {"return", "new", "else", "throw", "case", "yield", "assert", "if", "while", "for", "do"}
)

_LOOP = re.compile(r"\b(?:for|while)\s*\(")
_DO_WHILE_TAIL = re.compile(r"^\}\s*while\s*\(")
_DO = re.compile(r"\bdo\s*\{")
_SORT = re.compile(r"\.sort\s*\(|\.sorted\s*\(")

_HASH_PATTERNS = (
    re.compile(
        r"\bnew\s+(?:HashMap|HashSet|Hashtable|LinkedHashMap|LinkedHashSet|TreeMap|TreeSet"
        r"|ConcurrentHashMap|IdentityHashMap|WeakHashMap|EnumMap)\s*[<(]"
    ),
    re.compile(r"\b(?:Map|Set)\.(?:of|ofEntries|copyOf)\s*\("),
)


def _code_portion(line: str) -> str:
    return blank_string_literals(line).split("//", 1)[0].rstrip()


def _method_name(code: str) -> str | None:
    match = _METHOD_DECL.search(code) or _BARE_METHOD_DECL.match(code)
    if match is None:
        return None
    words = match.groups()
    if any(word in _STATEMENT_WORDS for word in words):
        return None
    return words[-1]


class JavaAnalyzer:
    """Line scanner that reads scopes off brace depth."""

    language = "java"

    def collect_signals(self, src: str, function_name: str = "") -> ComplexitySignals:
        lines = check_snippet(src)
        target = function_name.strip()
        self_call = call_pattern(target)
        acc = SignalAccumulator()
        scopes = BraceScopeTracker()

        for raw_line in lines:
            line = raw_line.strip()
            if not line or line.startswith(_COMMENT_PREFIXES):
                continue
            code = _code_portion(line)
            scopes.advance(code)

            declared_here = False
            name = _method_name(code)
            if name is not None:
                scopes.enter_function(name, scopes.opens_block(code))
                declared_here = True

            if _LOOP.search(code) and not _DO_WHILE_TAIL.match(code):
                acc.record_loop(scopes.enter_loop(scopes.opens_block(code)))
            if _DO.search(code):
                acc.record_loop(scopes.enter_loop(scopes.opens_block(code)))

            if _SORT.search(code):
                acc.sort_calls += 1

            if not acc.hash_usage and any(p.search(code) for p in _HASH_PATTERNS):
                acc.mark_hash()

            if self_call is not None and not declared_here and scopes.function == target:
                if self_call.search(code):
                    acc.recursion_calls += 1

            scopes.end_statement(code)

        signals = acc.freeze()
        log.debug("Java signals for %d lines: %s", len(lines), signals)
        return signals


def analyze_source(src: str, function_name: str = "") -> ComplexityResult:
    return run_analyzer(JavaAnalyzer(), src, function_name)
