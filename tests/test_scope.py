from __future__ import annotations

from tclens.analyze.scope import BraceScopeTracker, IndentScopeTracker, indent_width


def test_indent_width_expands_tabs() -> None:
    assert indent_width("    x") == 4
    assert indent_width("\t\tx") == 4
    assert indent_width("x") == 0


def test_indent_tracker_pops_sibling_and_shallower_loops() -> None:
    scopes = IndentScopeTracker()
    scopes.advance(4)
    assert scopes.enter_loop(4) == 1
    scopes.advance(8)
    assert scopes.enter_loop(8) == 2
    scopes.advance(8)
    assert scopes.loop_depth == 1
    scopes.advance(0)
    assert scopes.loop_depth == 0


def test_indent_tracker_function_ends_strictly_left_of_header() -> None:
    scopes = IndentScopeTracker()
    scopes.advance(4)
    scopes.enter_function("f", 4)
    scopes.advance(4)
    assert scopes.function == "f"
    scopes.advance(0)
    assert scopes.function is None


def test_brace_tracker_counts_every_brace() -> None:
    scopes = BraceScopeTracker()
    scopes.advance("void f() {")
    scopes.enter_function("f")
    scopes.advance("for (;;) {")
    assert scopes.enter_loop() == 1
    scopes.advance("} } {")
    assert scopes.depth == 1
    assert scopes.loop_depth == 0
    assert scopes.function == "f"
    scopes.advance("}}")
    assert scopes.function is None


def test_brace_tracker_tolerates_unbalanced_input() -> None:
    scopes = BraceScopeTracker()
    scopes.advance("}}}")
    assert scopes.depth == -3
    assert scopes.enter_loop() == 1


def test_brace_tracker_pending_loop_adopts_next_block() -> None:
    scopes = BraceScopeTracker()
    assert scopes.enter_loop(opens_block=False) == 1
    scopes.advance("{")
    scopes.end_statement("s += x;")
    assert scopes.loop_depth == 1
    scopes.advance("}")
    assert scopes.loop_depth == 0


def test_brace_tracker_pending_loop_ends_with_statement() -> None:
    scopes = BraceScopeTracker()
    scopes.enter_loop(opens_block=False)
    scopes.enter_loop(opens_block=False)
    scopes.advance("s += x;")
    scopes.end_statement("s += x;")
    assert scopes.loop_depth == 0
