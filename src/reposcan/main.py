from __future__ import annotations

import argparse
import sys
import uuid
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from . import __version__
from .config import ScannerConfig
from .constants import ExitCode
from .errors import ConfigError, RepoScanError, TargetNotFoundError
from .formatting import render_json, render_text
from .logging import ScanLogger
from .scanner import scan

EPILOG = """\
Examples:
  repo-scan                  # Scan current directory
  repo-scan /path/to/repo    # Scan specific repo
  repo-scan . --json         # Output as JSON
"""


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="repo-scan",
        description="Lightweight scanner for hardcoded secrets and security misconfigurations",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("path", nargs="?", default=".", help="Directory to scan (default: .)")
    parser.add_argument("--json", action="store_true", help="Output results as JSON")
    parser.add_argument("--verbose", action="store_true", help="Write debug logs to stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _load_config() -> ScannerConfig:
    try:
        return ScannerConfig()
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc


def _resolve_target(raw: str) -> Path:
    target = Path(raw).resolve()
    if not target.exists():
        raise TargetNotFoundError(str(target))
    return target


def run(argv: Optional[list[str]] = None) -> int:
    args = _build_parser().parse_args(argv)

    config = _load_config()
    logger = ScanLogger(
        uuid.uuid4().hex[:12],
        min_level="debug" if args.verbose else config.log_level,
        annotations=config.annotations,
    )
    target = _resolve_target(args.path)

    if not args.json:
        print("\n🔍 Scanning for security issues...\n")

    with logger.stage("scan"):
        result = scan(target, config=config, logger=logger)

    if args.json:
        print(render_json(result))
    else:
        print(render_text(result))
    return ExitCode.SUCCESS


def main(argv: Optional[list[str]] = None) -> int:
    """Console entry point."""
    try:
        return int(run(argv))
    except RepoScanError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return int(exc.exit_code)


if __name__ == "__main__":
    sys.exit(main())
