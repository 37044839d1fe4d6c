from __future__ import annotations

import re
from pathlib import PurePath
from typing import List, Optional, Tuple

from .models import Rule


def _rule(name: str, regex: str, *, case_sensitive: bool = True) -> Rule:
    flags = 0 if case_sensitive else re.IGNORECASE
    return Rule(name=name, pattern=re.compile(regex, flags), case_sensitive=case_sensitive)


# Declaration order is the order findings are reported within a line.
# "AWS Secret Key" and "GitHub Classic Token" are deliberately broad and will
# also flag hashes, dashless UUIDs and minified identifiers.
RULES: Tuple[Rule, ...] = (
    _rule("AWS Access Key", r"AKIA[0-9A-Z]{16}"),
    _rule("AWS Secret Key", r"[0-9a-zA-Z/+]{40}"),
    _rule("GitHub Token", r"gh[pousr]_[A-Za-z0-9_]{36,}"),
    _rule("GitHub Classic Token", r"[0-9a-zA-Z]{35,40}"),
    _rule("Slack Token", r"xox[baprs]-[0-9a-zA-Z]{10,48}"),
    _rule("Private Key", r"-----BEGIN (RSA |EC |OPENSSH |DSA )?PRIVATE KEY-----"),
    _rule(
        "API Key",
        r"['\"][0-9a-zA-Z_-]{32,}['\"].{0,10}(api|key|token|secret)",
        case_sensitive=False,
    ),
    _rule("Bearer Token", r"bearer\s+[0-9a-zA-Z_.-]+", case_sensitive=False),
    _rule("Password", r"password\s*[=:]\s*['\"][^'\"]{4,}['\"]", case_sensitive=False),
    _rule(
        "Connection String",
        r"(mongodb|mysql|postgres|redis)://[^:]+:[^@]+@",
        case_sensitive=False,
    ),
)

RISKY_FILES: Tuple[str, ...] = (
    ".env",
    ".env.local",
    ".env.production",
    "id_rsa",
    "id_dsa",
    ".aws/credentials",
    "credentials.json",
    "secrets.json",
)

SCAN_EXTENSIONS = frozenset(
    {
        ".js",
        ".ts",
        ".py",
        ".go",
        ".java",
        ".rb",
        ".php",
        ".json",
        ".yaml",
        ".yml",
        ".env",
        ".txt",
        ".md",
    }
)

# Version control metadata, dependency cache, and the scanner's own checkout.
EXCLUDED_DIRS = frozenset({".git", "node_modules", "repo-security-scanner"})


def match_rules(line: str) -> List[Rule]:
    return [rule for rule in RULES if rule.matches(line)]


def risky_name_match(relative_path: str) -> Optional[str]:
    """Return the first risky substring contained in the path, if any."""
    normalized = relative_path.replace("\\", "/")
    for risky in RISKY_FILES:
        if risky in normalized:
            return risky
    return None


def is_scannable_extension(path: str) -> bool:
    return PurePath(path).suffix.lower() in SCAN_EXTENSIONS
