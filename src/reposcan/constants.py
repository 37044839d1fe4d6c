from __future__ import annotations

from enum import Enum


class ExitCode(int, Enum):
    """Process exit codes."""

    SUCCESS = 0
    NOT_FOUND = 1
    ERROR = 2


class Limits:
    """Shared hard limits."""

    MAX_FILE_SIZE = 5_000_000  # 5MB
    MAX_DEPTH = 64
    # Traversal recurses once per level; stay well under the interpreter limit.
    MAX_DEPTH_CEILING = 512
    PREVIEW_LENGTH = 50
