from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Set, Tuple, Union

from .config import ScannerConfig
from .constants import Limits
from .logging import ScanLogger
from .models import RiskyFileFinding, ScanResult, SecretFinding
from .patterns import EXCLUDED_DIRS, is_scannable_extension, match_rules, risky_name_match
from .utils import safe_read_text

RISKY_FILE_REASON = "Potentially sensitive file"


def build_preview(line: str, max_chars: int = Limits.PREVIEW_LENGTH) -> str:
    return line.strip()[:max_chars]


def split_lines(content: str) -> List[str]:
    """Split on line feeds and drop one trailing carriage return per line."""
    lines = content.split("\n")
    return [line[:-1] if line.endswith("\r") else line for line in lines]


@dataclass
class ScanAccumulator:
    """Mutable state owned by a single scan() call."""

    scanned: int = 0
    secrets: List[SecretFinding] = field(default_factory=list)
    risky_files: List[RiskyFileFinding] = field(default_factory=list)
    _seen: Set[Tuple[str, int, str]] = field(default_factory=set, repr=False)

    def add_secret(self, finding: SecretFinding) -> bool:
        if finding.key in self._seen:
            return False
        self._seen.add(finding.key)
        self.secrets.append(finding)
        return True

    def freeze(self) -> ScanResult:
        return ScanResult(
            scanned=self.scanned,
            secrets=tuple(self.secrets),
            risky_files=tuple(self.risky_files),
        )


def scan(
    root_path: Union[str, Path],
    *,
    config: Optional[ScannerConfig] = None,
    logger: Optional[ScanLogger] = None,
) -> ScanResult:
    """
    Scan a directory tree for secret-shaped lines and sensitive file names.

    The caller is responsible for checking that root_path exists. Every call
    builds its own accumulator, so results never leak between scans.
    """
    config = config or ScannerConfig()
    root = Path(root_path)
    acc = ScanAccumulator()

    if root.is_dir():
        _walk_directory(root, root, 0, acc, config, logger)
    else:
        scan_file(root, root.name, acc, config=config, logger=logger)

    if logger:
        logger.info(
            "scan_complete",
            scanned=acc.scanned,
            secret_findings=len(acc.secrets),
            risky_files=len(acc.risky_files),
        )
    return acc.freeze()


def _walk_directory(
    directory: Path,
    root: Path,
    depth: int,
    acc: ScanAccumulator,
    config: ScannerConfig,
    logger: Optional[ScanLogger],
) -> None:
    try:
        with os.scandir(directory) as it:
            entries = sorted(it, key=lambda e: e.name)
    except OSError as exc:
        if logger:
            logger.warning("directory_read_failed", path=str(directory), error=str(exc))
        return

    for entry in entries:
        if entry.name in EXCLUDED_DIRS:
            continue

        full_path = Path(entry.path)
        # Symlinks are never followed into, which rules out traversal cycles.
        if entry.is_dir(follow_symlinks=False):
            if depth + 1 > config.max_depth:
                if logger:
                    logger.warning(
                        "max_depth_reached",
                        path=os.path.relpath(full_path, root),
                        max_depth=config.max_depth,
                    )
                continue
            _walk_directory(full_path, root, depth + 1, acc, config, logger)
        else:
            scan_file(full_path, os.path.relpath(full_path, root), acc, config=config, logger=logger)


def scan_file(
    full_path: Path,
    relative_path: str,
    acc: ScanAccumulator,
    *,
    config: Optional[ScannerConfig] = None,
    logger: Optional[ScanLogger] = None,
) -> None:
    config = config or ScannerConfig()
    acc.scanned += 1

    is_risky = risky_name_match(relative_path) is not None
    if is_risky:
        acc.risky_files.append(RiskyFileFinding(file_path=relative_path, reason=RISKY_FILE_REASON))

    if not is_scannable_extension(relative_path) and not is_risky:
        return

    try:
        # Devices, sockets and FIFOs are counted but never opened.
        if not full_path.is_file():
            raise ValueError(f"Not a regular file: {full_path}")
        content = safe_read_text(full_path, max_bytes=config.max_file_bytes)
    except (OSError, ValueError) as exc:
        if logger:
            logger.debug("file_read_skipped", path=relative_path, error=str(exc))
        return

    for line_number, line in enumerate(split_lines(content), start=1):
        for rule in match_rules(line):
            acc.add_secret(
                SecretFinding(
                    rule_name=rule.name,
                    file_path=relative_path,
                    line_number=line_number,
                    preview=build_preview(line),
                )
            )
