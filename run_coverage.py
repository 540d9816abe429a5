"""Run the unit tests under coverage and print a report.

Usage:
    python run_coverage.py                 # All unit tests
    python run_coverage.py -k launcher     # Extra arguments go to pytest

Scenarios against the live site (tests/execution) are never included.
"""

import sys
from pathlib import Path

import coverage
import pytest

PROJECT_ROOT = Path(__file__).parent
sys.path.insert(0, str(PROJECT_ROOT))


def main(argv: list[str]) -> int:
    # Library code plus the step definitions it backs
    cov = coverage.Coverage(source=["wdu_bdd", "tests.step_defs"])
    cov.start()
    exit_code = pytest.main([str(PROJECT_ROOT / "tests" / "unit"), *argv])
    cov.stop()
    cov.save()

    cov.report(show_missing=True)
    return int(exit_code)


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
