from __future__ import annotations

from tclens.analyze.signals import ComplexitySignals

RECURSIVE_LABEL = "Recursive (depends on recurrence)"
NESTED_SORT_LABEL = "O(n^k log n)"


def classify(signals: ComplexitySignals) -> str:
    # Recursion dominates: recurrence cost cannot be read off loop counts.
    if signals.recursion_calls > 0:
        return RECURSIVE_LABEL
    if signals.sort_calls > 0:
        return NESTED_SORT_LABEL if signals.max_nesting >= 2 else "O(n log n)"
    if signals.max_nesting >= 2:
        return f"O(n^{signals.max_nesting})"
    if signals.max_nesting == 1:
        return "O(n)"
    return "O(1)"


def explain(label: str, signals: ComplexitySignals) -> str:
    if signals.recursion_calls > 0:
        return (
            "This solution uses recursion. The actual complexity depends on the "
            "recurrence relation and tree depth."
        )
    if label == "O(n log n)":
        return (
            "This solution runs in linearithmic time because it sorts the input, "
            "which is the dominant operation."
        )
    if label == NESTED_SORT_LABEL:
        return (
            f"This solution sorts inside {signals.max_nesting} levels of nested "
            "iteration, so the sort cost multiplies with the loop bounds."
        )
    if signals.max_nesting == 2:
        return (
            "This solution runs in quadratic time because the outer loop iterates n "
            "times, and for each iteration, the inner loop also runs n times."
        )
    if signals.max_nesting > 2:
        return (
            "This solution has polynomial time complexity due to "
            f"{signals.max_nesting} levels of nested iteration."
        )
    if label == "O(n)":
        if signals.hash_usage:
            return (
                "This solution runs in linear time because it iterates through the "
                "input once and uses constant-time hash lookups."
            )
        return "This solution runs in linear time because it makes a single pass through the input."
    if label == "O(1)":
        return (
            "This solution runs in constant time. The operations performed don't "
            "depend on the input size."
        )
    return "The complexity is determined by the most expensive operation in the code."


def hint_from_signals(signals: ComplexitySignals) -> tuple[str, str]:
    # Heuristic label + rationale, not a proof.
    label = classify(signals)
    return label, explain(label, signals)


def space_hint(signals: ComplexitySignals) -> tuple[str, str]:
    if signals.hash_usage:
        return "O(n)", "Additional data structure allocation"
    return "O(1)", "Uses constant extra space"


def observations(signals: ComplexitySignals) -> list[str]:
    out: list[str] = []
    if signals.loop_count == 1:
        out.append("Single pass through input")
    elif signals.loop_count > 1:
        out.append(f"{signals.loop_count} loop structures detected")
    if signals.hash_usage:
        out.append("Uses hash-based data structure for O(1) lookups")
    if signals.max_nesting > 1:
        out.append(f"{signals.max_nesting} levels of nested iteration")
    if signals.sort_calls > 0:
        plural = "s" if signals.sort_calls > 1 else ""
        out.append(f"Sorting operation detected ({signals.sort_calls} call{plural})")
    if signals.recursion_calls > 0:
        out.append("Recursive function calls present")
    if signals.loop_count == 0 and signals.recursion_calls == 0:
        out.append("No loops or recursion detected")
    return out


def rating(label: str) -> str:
    if label in {"O(1)", "O(log n)"}:
        return "excellent"
    if label == "O(n)":
        return "good"
    if "log n" in label:
        return "moderate"
    if label.startswith("O(n^") or label == RECURSIVE_LABEL:
        return "poor"
    return "moderate"
