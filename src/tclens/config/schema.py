from __future__ import annotations

from dataclasses import dataclass

from tclens.report.last_session import DEFAULT_STATE_PATH

OUTPUT_FORMATS = {"md", "json"}


@dataclass(frozen=True)
class TclensConfig:
    language: str = "auto"
    function_name: str = ""
    format: str = "md"
    save_last: bool = True
    state_path: str = DEFAULT_STATE_PATH
    show_observations: bool = True
