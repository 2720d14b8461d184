from __future__ import annotations

import logging

import tree_sitter_javascript
from tree_sitter import Language, Node, Parser

from tclens.analyze.base import check_snippet, run_analyzer
from tclens.analyze.signals import ComplexityResult, ComplexitySignals, SignalAccumulator
from tclens.errors import ParseError

log = logging.getLogger(__name__)

JS_LANGUAGE = Language(tree_sitter_javascript.language())

_LOOP_NODES = {
    "for_statement",
    "for_in_statement",
    "while_statement",
    "do_statement",
}

_SORT_MEMBERS = {"sort", "toSorted"}

_HASH_CONSTRUCTORS = {"Set", "Map", "WeakSet", "WeakMap"}


def get_parser() -> Parser:
    return Parser(JS_LANGUAGE)


def _node_text(src: bytes, node: Node) -> str:
    return src[node.start_byte : node.end_byte].decode("utf-8", errors="replace")


def _first_error(root: Node) -> Node | None:
    stack = [root]
    while stack:
        node = stack.pop()
        if node.type == "ERROR" or node.is_missing:
            return node
        if node.has_error:
            stack.extend(reversed(node.children))
    return None


def _parse_error_message(src: bytes, node: Node) -> str:
    row, column = node.start_point[0] + 1, node.start_point[1] + 1
    if node.is_missing:
        return f"Invalid JavaScript: missing {node.type!r} at line {row}, column {column}"
    snippet = _node_text(src, node).strip().splitlines()
    near = f" near {snippet[0][:40]!r}" if snippet else ""
    return f"Invalid JavaScript: unexpected token{near} at line {row}, column {column}"


def parse(src: str) -> tuple[Node, bytes]:
    src_bytes = src.encode("utf-8", errors="replace")
    tree = get_parser().parse(src_bytes)
    root = tree.root_node
    if root.has_error:
        bad = _first_error(root) or root
        raise ParseError(_parse_error_message(src_bytes, bad))
    return root, src_bytes


def _inspect_call(node: Node, src: bytes, function_name: str, acc: SignalAccumulator) -> None:
    callee = node.child_by_field_name("function")
    if callee is None:
        return
    if callee.type == "member_expression":
        prop = callee.child_by_field_name("property")
        if prop is not None and _node_text(src, prop) in _SORT_MEMBERS:
            acc.sort_calls += 1
    elif callee.type == "identifier" and function_name:
        if _node_text(src, callee) == function_name:
            acc.recursion_calls += 1


def _inspect_new(node: Node, src: bytes, acc: SignalAccumulator) -> None:
    ctor = node.child_by_field_name("constructor")
    if ctor is not None and ctor.type == "identifier" and _node_text(src, ctor) in _HASH_CONSTRUCTORS:
        acc.mark_hash()


def _collect_signals(root: Node, src: bytes, function_name: str) -> ComplexitySignals:
    acc = SignalAccumulator()
    # Self-calls count wherever they appear; the walk does not track the
    # enclosing function.
    stack: list[tuple[Node, int]] = [(root, 0)]
    while stack:
        node, depth = stack.pop()
        if node.type in _LOOP_NODES:
            depth += 1
            acc.record_loop(depth)
        elif node.type == "call_expression":
            _inspect_call(node, src, function_name, acc)
        elif node.type == "new_expression":
            _inspect_new(node, src, acc)
        elif node.type == "object":
            acc.mark_hash()
        stack.extend((child, depth) for child in node.children)
    return acc.freeze()


class JavaScriptAnalyzer:
    """Syntax-tree walker; the only analyzer that rejects invalid syntax."""

    language = "javascript"

    def collect_signals(self, src: str, function_name: str = "") -> ComplexitySignals:
        check_snippet(src)
        root, src_bytes = parse(src)
        signals = _collect_signals(root, src_bytes, function_name.strip())
        log.debug("JavaScript signals: %s", signals)
        return signals


def analyze_source(src: str, function_name: str = "") -> ComplexityResult:
    return run_analyzer(JavaScriptAnalyzer(), src, function_name)


__all__ = [
    "JS_LANGUAGE",
    "JavaScriptAnalyzer",
    "analyze_source",
    "get_parser",
    "parse",
]
