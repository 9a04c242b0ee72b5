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


def test_forest_demo_example_runs() -> None:
    """Test that examples/forest_demo.py runs successfully."""
    script = ROOT / "examples" / "forest_demo.py"
    assert script.exists(), f"Example script not found: {script}"

    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(ROOT), env.get("PYTHONPATH")]))

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

    assert "Rejected: Self-loops are not allowed" in result.stdout
    assert "Duplicate edge added: False" in result.stdout
    assert "Graph has 6 vertices" in result.stdout
    assert "Shortest route to harbor: depot -> east -> north -> harbor" in result.stdout
