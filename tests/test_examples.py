"""Smoke tests for example scripts.

These tests ensure that the example scripts run their main execution paths
without raising exceptions.
"""

from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

# Determine the repo root
ROOT = Path(__file__).resolve().parents[1]


def test_minimization_demo_runs() -> None:
    """Test that examples/minimization_demo.py runs successfully."""
    script = ROOT / "examples" / "minimization_demo.py"
    assert script.exists(), f"Example script not found: {script}"

    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(
        p for p in (str(ROOT), env.get("PYTHONPATH", "")) if p
    )
    result = subprocess.run(
        [sys.executable, str(script)],
        capture_output=True,
        text=True,
        check=False,
        timeout=30,
        env=env,
    )

    assert result.returncode == 0, (
        f"Example script failed with return code {result.returncode}.\n"
        f"STDOUT:\n{result.stdout}\n"
        f"STDERR:\n{result.stderr}"
    )
    assert "Nelder-Mead minimum" in result.stdout
    assert "brent-df" in result.stdout
