from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any

SCHEMA_VERSION = 1


@dataclass(frozen=True)
class AnalysisReport:
    language: str
    detected_language: bool
    function_name: str
    time_complexity: str
    explanation: str
    space_complexity: str
    space_explanation: str
    rating: str
    signals: dict[str, Any]
    observations: list[str] = field(default_factory=list)
    generated_at: str = ""
    schema_version: int = SCHEMA_VERSION

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
