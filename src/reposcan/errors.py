from __future__ import annotations

from .constants import ExitCode


class RepoScanError(Exception):
    """Base exception for all scanner errors."""

    exit_code: ExitCode = ExitCode.ERROR


class ConfigError(RepoScanError):
    """Configuration validation failed."""

    exit_code = ExitCode.ERROR


class TargetNotFoundError(RepoScanError):
    """Scan target does not exist."""

    exit_code = ExitCode.NOT_FOUND

    def __init__(self, path: str):
        super().__init__(f"Path not found: {path}")
        self.path = path
