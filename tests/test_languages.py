from __future__ import annotations

from pathlib import Path

import pytest

from tclens.samples import sample_for
from tclens.util.languages import AUTO, is_supported, language_for_path, normalize_language


def test_normalize_language() -> None:
    assert normalize_language(None) == AUTO
    assert normalize_language("  ") == AUTO
    assert normalize_language("Node") == "javascript"
    assert normalize_language("python3") == "python"
    assert normalize_language("rust") == "rust"


def test_is_supported() -> None:
    assert is_supported("auto")
    assert is_supported("JAVA")
    assert not is_supported("rust")


def test_language_for_path() -> None:
    assert language_for_path(Path("a/b.mjs")) == "javascript"
    assert language_for_path(Path("Main.JAVA")) == "java"
    assert language_for_path(Path("notes.txt")) is None


def test_sample_for() -> None:
    assert sample_for("auto") == sample_for("javascript")
    assert "def twoSum" in sample_for("py")
    with pytest.raises(KeyError):
        sample_for("rust")
