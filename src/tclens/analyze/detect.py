"""Score-based guess of a snippet's language."""

from __future__ import annotations

import re

from tclens.analyze.base import split_lines

DEFAULT_LANGUAGE = "javascript"

_COMMENT_PREFIXES = ("//", "#", "/*", "*")

_JAVA_RULES = (
    (re.compile(r"\b(?:public|private|protected)\s+(?:static\s+)?(?:void|int|boolean|String|double|float|long)\s+\w+\s*\("), 3.0),
    (re.compile(r"\bnew\s+(?:HashMap|HashSet|ArrayList|LinkedList)\s*[<(]"), 2.0),
    (re.compile(r"\b(?:class|interface|extends|implements)\s+\w+"), 2.0),
    (re.compile(r"\bint\[\]|\bString\[\]"), 1.0),
)

_PYTHON_RULES = (
    (re.compile(r"^def\s+\w+\s*\("), 3.0),
    (re.compile(r"\b(?:self|True|False|None|elif|pass)\b"), 2.0),
    (re.compile(r"\brange\s*\(|\benumerate\s*\(|\blen\s*\("), 1.0),
)
_PYTHON_HEADER = re.compile(r"\b(?:if|for|while|def|class)\b")

_JS_RULES = (
    (re.compile(r"\b(?:function|const|let|var)\s+\w+"), 2.0),
    (re.compile(r"=>\s*\{|=>\s*\w"), 2.0),
    (re.compile(r"\bnew\s+(?:Map|Set|Array)\s*[(<]"), 2.0),
    (re.compile(r"===|!=="), 1.0),
)


def _score(line: str, rules: tuple[tuple[re.Pattern[str], float], ...]) -> float:
    return sum(weight for pattern, weight in rules if pattern.search(line))


def language_scores(src: str) -> dict[str, float]:
    scores = {"java": 0.0, "python": 0.0, "javascript": 0.0}
    for raw in split_lines(src or ""):
        line = raw.strip()
        if not line or line.startswith(_COMMENT_PREFIXES):
            continue
        scores["java"] += _score(line, _JAVA_RULES)
        if line.endswith(";") and "for" not in line and "while" not in line:
            scores["java"] += 0.5
        scores["python"] += _score(line, _PYTHON_RULES)
        if ":" in line and _PYTHON_HEADER.search(line):
            scores["python"] += 1.0
        scores["javascript"] += _score(line, _JS_RULES)
    return scores


def detect_language(src: str) -> str:
    if not src or not src.strip():
        return DEFAULT_LANGUAGE
    scores = language_scores(src)
    best = max(scores.values())
    if best == 0:
        return DEFAULT_LANGUAGE
    # Ties go to Java, then Python.
    for lang in ("java", "python", "javascript"):
        if scores[lang] == best:
            return lang
    return DEFAULT_LANGUAGE
