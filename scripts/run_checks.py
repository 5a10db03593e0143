"""Developer utility to run the unit test suite with tracking disabled."""

from __future__ import annotations
from tracking import t

import os
import subprocess
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]


def _run(cmd: list[str]) -> int:
    """Run a subprocess relative to the project root."""

    t("scripts.run_checks._run")
    env = dict(os.environ, TRACKING_DISABLED="true")
    result = subprocess.run(cmd, cwd=PROJECT_ROOT, env=env)
    return result.returncode


def run_tests() -> int:
    """Execute the unit test suite."""

    t("scripts.run_checks.run_tests")
    return _run([sys.executable, "-m", "pytest", "tests/unit"])


def main() -> None:
    """Run the unit tests and report the result."""

    t("scripts.run_checks.main")
    print("→ Running unit tests...")
    if run_tests() != 0:
        print("✗ unit tests failed")
        sys.exit(1)
    print("✓ unit tests complete")
    print("All checks passed.")


if __name__ == "__main__":
    main()
