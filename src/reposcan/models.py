from __future__ import annotations

from dataclasses import dataclass
import re
from typing import Any, Dict, Tuple


@dataclass(frozen=True)
class Rule:
    name: str
    pattern: re.Pattern[str]
    case_sensitive: bool = True

    def matches(self, line: str) -> bool:
        return self.pattern.search(line) is not None


@dataclass(frozen=True)
class SecretFinding:
    rule_name: str
    file_path: str
    line_number: int
    preview: str

    @property
    def key(self) -> Tuple[str, int, str]:
        return (self.file_path, self.line_number, self.rule_name)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.rule_name,
            "file": self.file_path,
            "line": self.line_number,
            "preview": self.preview,
        }


@dataclass(frozen=True)
class RiskyFileFinding:
    file_path: str
    reason: str

    def to_dict(self) -> Dict[str, Any]:
        return {"file": self.file_path, "reason": self.reason}


@dataclass(frozen=True)
class ScanResult:
    scanned: int = 0
    secrets: Tuple[SecretFinding, ...] = ()
    risky_files: Tuple[RiskyFileFinding, ...] = ()

    @property
    def total_issues(self) -> int:
        return len(self.secrets) + len(self.risky_files)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "scanned": self.scanned,
            "secrets": [finding.to_dict() for finding in self.secrets],
            "riskyFiles": [finding.to_dict() for finding in self.risky_files],
        }
