from __future__ import annotations

import subprocess
import sys
from pathlib import Path


def test_cli_runs(tmp_path: Path) -> None:
    f = tmp_path / "nested.py"
    f.write_text("def f(xs):\n    for a in xs:\n        for b in xs:\n            pass\n", encoding="utf-8")

    p = subprocess.run(
        [sys.executable, "-m", "tclens", "analyze", str(f), "--no-save"],
        capture_output=True,
        text=True,
        check=False,
        cwd=tmp_path,
    )
    assert p.returncode == 0
    assert "Time complexity report" in p.stdout
    assert "O(n^2)" in p.stdout
