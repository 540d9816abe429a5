"""Run the BDD scenarios for a named profile.

Usage:
    wdu-bdd smoke                      # Scenarios tagged @smoke
    wdu-bdd regression                 # Scenarios tagged @regression
    wdu-bdd login --dry-run            # Print the pytest command only
    wdu-bdd contact-us -- -x -v        # Extra arguments go to pytest
    wdu-bdd smoke --project-dir ~/wdu  # Suite checkout other than the current directory

The scenarios (tests/execution) and settings (env/.env) are looked up in the
project directory, which defaults to the current working directory.

Scenarios tagged @ignore never run. RETRY in env/.env (or the environment)
re-runs failed scenarios through pytest-rerunfailures.
"""

from __future__ import annotations

import argparse
import logging
import shlex
import subprocess
import sys
from pathlib import Path
from typing import Optional, Sequence

from .config import DEFAULT_ENV_FILE, Settings, load_settings
from .exceptions import ConfigError, TestRunFailedError, UnknownProfileError

logger = logging.getLogger(__name__)

# Relative to the project directory
SCENARIOS_DIR = Path("tests") / "execution"

EXCLUDED_TAG = "ignore"

PROFILES: dict[str, str] = {
    "smoke": "smoke",
    "regression": "regression",
    "login": "login",
    "contact-us": "contact_us",
}


def marker_expression(profile: str) -> str:
    """Return the pytest ``-m`` expression selecting ``profile``'s scenarios."""
    try:
        marker = PROFILES[profile]
    except KeyError:
        raise UnknownProfileError(
            f"Unknown profile '{profile}'. Valid profiles: {', '.join(PROFILES)}"
        ) from None
    return f"{marker} and not {EXCLUDED_TAG}"


def build_command(
    profile: str,
    settings: Settings,
    extra_args: Sequence[str] = (),
    project_dir: Optional[Path] = None,
) -> list[str]:
    """Build the pytest command line for ``profile``.

    ``project_dir`` defaults to the current working directory; the scenarios
    are collected from its tests/execution directory.
    """
    project_dir = Path.cwd() if project_dir is None else project_dir
    cmd = [
        sys.executable, "-m", "pytest",
        str(project_dir / SCENARIOS_DIR),
        "-m", marker_expression(profile),
    ]
    if settings.retry > 0:
        cmd.extend(["--reruns", str(settings.retry)])
    cmd.extend(extra_args)
    return cmd


def run_profile(
    profile: str,
    settings: Settings,
    extra_args: Sequence[str] = (),
    project_dir: Optional[Path] = None,
) -> int:
    """Run pytest for ``profile`` from ``project_dir`` and return its exit code.

    Raises:
        TestRunFailedError: If pytest exits with a non-zero status
    """
    project_dir = Path.cwd() if project_dir is None else project_dir
    cmd = build_command(profile, settings, extra_args, project_dir)
    logger.info("Running profile '%s' in %s: %s", profile, project_dir, shlex.join(cmd))

    result = subprocess.run(cmd, cwd=project_dir, check=False)
    if result.returncode != 0:
        raise TestRunFailedError(profile, result.returncode)

    logger.info("Profile '%s' passed", profile)
    return result.returncode


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="wdu-bdd",
        description="Run the webdriveruniversity.com BDD scenarios for a profile.",
    )
    parser.add_argument(
        "profile",
        choices=sorted(PROFILES),
        help="Tag profile to run",
    )
    parser.add_argument(
        "--project-dir",
        type=Path,
        default=None,
        help="Suite checkout holding tests/ and env/ (default: current directory)",
    )
    parser.add_argument(
        "--env-file",
        type=Path,
        default=None,
        help=f"Settings file (default: <project-dir>/{DEFAULT_ENV_FILE})",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the pytest command instead of running it",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Launcher log level (default: INFO)",
    )
    argv = list(sys.argv[1:] if argv is None else argv)
    pytest_args: list[str] = []
    if "--" in argv:
        split = argv.index("--")
        argv, pytest_args = argv[:split], argv[split + 1:]

    args = parser.parse_args(argv)
    args.pytest_args = pytest_args
    if args.project_dir is None:
        args.project_dir = Path.cwd()
    if args.env_file is None:
        args.env_file = args.project_dir / DEFAULT_ENV_FILE
    return args


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    scenarios_dir = args.project_dir / SCENARIOS_DIR
    if not scenarios_dir.is_dir():
        logger.error(
            "No scenarios at %s; run from the suite checkout or pass --project-dir",
            scenarios_dir,
        )
        return 2

    try:
        settings = load_settings(args.env_file)
    except ConfigError as e:
        logger.error("Invalid configuration: %s", e)
        return 2

    if args.dry_run:
        print(shlex.join(build_command(args.profile, settings, args.pytest_args, args.project_dir)))
        return 0

    try:
        return run_profile(args.profile, settings, args.pytest_args, args.project_dir)
    except TestRunFailedError as e:
        logger.error("%s", e)
        return e.returncode


if __name__ == "__main__":
    sys.exit(main())
