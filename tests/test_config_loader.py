from __future__ import annotations

from pathlib import Path

from tclens.config.loader import CONFIG_FILENAME, load_config
from tclens.config.schema import TclensConfig


def test_missing_default_config_gives_defaults(tmp_path: Path) -> None:
    assert load_config(tmp_path) == TclensConfig()


def test_load_default_config_file(tmp_path: Path) -> None:
    (tmp_path / CONFIG_FILENAME).write_text(
        "language: py\nfunction_name: ' fib '\nformat: JSON\nsave_last: 'no'\n",
        encoding="utf-8",
    )
    cfg = load_config(tmp_path)
    assert cfg.language == "python"
    assert cfg.function_name == "fib"
    assert cfg.format == "json"
    assert cfg.save_last is False
    assert cfg.show_observations is True


def test_later_configs_override_earlier(tmp_path: Path) -> None:
    cfg1 = tmp_path / "a.yml"
    cfg2 = tmp_path / "b.yml"
    cfg1.write_text("language: java\nformat: json\n", encoding="utf-8")
    cfg2.write_text("format: md\nstate_path: state.json\n", encoding="utf-8")

    cfg = load_config(tmp_path, [cfg1, cfg2])

    assert cfg.language == "java"
    assert cfg.format == "md"
    assert cfg.state_path == "state.json"


def test_invalid_values_keep_previous(tmp_path: Path) -> None:
    cfg1 = tmp_path / "a.yml"
    cfg1.write_text("language: cobol\nformat: html\n", encoding="utf-8")
    cfg = load_config(tmp_path, [cfg1])
    assert cfg.language == "auto"
    assert cfg.format == "md"


def test_unreadable_or_missing_configs_are_skipped(tmp_path: Path) -> None:
    bad = tmp_path / "bad.yml"
    bad.write_text("language: [unclosed\n", encoding="utf-8")
    cfg = load_config(tmp_path, [bad, Path("missing.yml")])
    assert cfg == TclensConfig()
