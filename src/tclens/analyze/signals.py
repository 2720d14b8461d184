from __future__ import annotations

from dataclasses import dataclass
from typing import Any

_WIRE_NAMES = {
    "loop_count": "loopCount",
    "max_nesting": "maxNesting",
    "sort_calls": "sortCalls",
    "recursion_calls": "recursionCalls",
    "hash_usage": "hashUsage",
}


@dataclass(frozen=True)
class ComplexitySignals:
    loop_count: int = 0
    max_nesting: int = 0
    sort_calls: int = 0
    recursion_calls: int = 0
    hash_usage: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {wire: getattr(self, attr) for attr, wire in _WIRE_NAMES.items()}

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> ComplexitySignals:
        def pick(attr: str) -> Any:
            wire = _WIRE_NAMES[attr]
            return raw.get(wire, raw.get(attr))

        return cls(
            loop_count=int(pick("loop_count") or 0),
            max_nesting=int(pick("max_nesting") or 0),
            sort_calls=int(pick("sort_calls") or 0),
            recursion_calls=int(pick("recursion_calls") or 0),
            hash_usage=bool(pick("hash_usage") or False),
        )


@dataclass
class SignalAccumulator:
    """Mutable per-call state threaded through a scan, frozen on return."""

    loop_count: int = 0
    max_nesting: int = 0
    sort_calls: int = 0
    recursion_calls: int = 0
    hash_usage: bool = False

    def record_loop(self, depth: int) -> None:
        self.loop_count += 1
        self.max_nesting = max(self.max_nesting, depth)

    def mark_hash(self) -> None:
        self.hash_usage = True

    def freeze(self) -> ComplexitySignals:
        return ComplexitySignals(
            loop_count=self.loop_count,
            max_nesting=self.max_nesting,
            sort_calls=self.sort_calls,
            recursion_calls=self.recursion_calls,
            hash_usage=self.hash_usage,
        )


@dataclass(frozen=True)
class ComplexityResult:
    signals: ComplexitySignals
    inferred_time_complexity: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "signals": self.signals.to_dict(),
            "inferredTimeComplexity": self.inferred_time_complexity,
        }
