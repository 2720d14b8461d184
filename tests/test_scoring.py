from __future__ import annotations

from tclens.analyze.scoring import (
    RECURSIVE_LABEL,
    classify,
    explain,
    hint_from_signals,
    observations,
    rating,
    space_hint,
)
from tclens.analyze.signals import ComplexitySignals


def test_recursion_dominates_every_other_signal() -> None:
    signals = ComplexitySignals(loop_count=3, max_nesting=3, sort_calls=2, recursion_calls=1, hash_usage=True)
    assert classify(signals) == RECURSIVE_LABEL


def test_sort_labels_depend_on_nesting() -> None:
    assert classify(ComplexitySignals(sort_calls=1)) == "O(n log n)"
    assert classify(ComplexitySignals(loop_count=1, max_nesting=1, sort_calls=1)) == "O(n log n)"
    assert classify(ComplexitySignals(loop_count=2, max_nesting=2, sort_calls=1)) == "O(n^k log n)"


def test_nesting_labels() -> None:
    assert classify(ComplexitySignals()) == "O(1)"
    assert classify(ComplexitySignals(loop_count=4, max_nesting=1)) == "O(n)"
    assert classify(ComplexitySignals(loop_count=2, max_nesting=2)) == "O(n^2)"
    assert classify(ComplexitySignals(loop_count=3, max_nesting=3)) == "O(n^3)"


def test_hint_pairs_label_with_rationale() -> None:
    label, why = hint_from_signals(ComplexitySignals(loop_count=1, max_nesting=1, hash_usage=True))
    assert label == "O(n)"
    assert "hash lookups" in why


def test_explanations_cover_labels() -> None:
    quad = ComplexitySignals(loop_count=2, max_nesting=2)
    assert "quadratic" in explain("O(n^2)", quad)
    cubic = ComplexitySignals(loop_count=3, max_nesting=3)
    assert "3 levels" in explain("O(n^3)", cubic)
    assert "constant time" in explain("O(1)", ComplexitySignals())
    assert "recursion" in explain(RECURSIVE_LABEL, ComplexitySignals(recursion_calls=2))


def test_observations() -> None:
    obs = observations(ComplexitySignals(loop_count=2, max_nesting=2, sort_calls=2, hash_usage=True))
    assert "2 loop structures detected" in obs
    assert "2 levels of nested iteration" in obs
    assert "Sorting operation detected (2 calls)" in obs
    assert "Uses hash-based data structure for O(1) lookups" in obs
    assert observations(ComplexitySignals()) == ["No loops or recursion detected"]


def test_space_and_rating() -> None:
    assert space_hint(ComplexitySignals(hash_usage=True))[0] == "O(n)"
    assert space_hint(ComplexitySignals())[0] == "O(1)"
    assert rating("O(1)") == "excellent"
    assert rating("O(n)") == "good"
    assert rating("O(n log n)") == "moderate"
    assert rating("O(n^k log n)") == "moderate"
    assert rating("O(n^2)") == "poor"
    assert rating(RECURSIVE_LABEL) == "poor"


def test_signals_wire_format() -> None:
    signals = ComplexitySignals(loop_count=2, max_nesting=1, sort_calls=0, recursion_calls=0, hash_usage=True)
    data = signals.to_dict()
    assert data == {
        "loopCount": 2,
        "maxNesting": 1,
        "sortCalls": 0,
        "recursionCalls": 0,
        "hashUsage": True,
    }
    assert ComplexitySignals.from_dict(data) == signals
