from __future__ import annotations

from typing import List

from .models import ScanResult
from .utils import json_dumps

RULE_LINE = "━" * 27


def format_int(value: int) -> str:
    try:
        return f"{int(value):,}"
    except (TypeError, ValueError):
        return "0"


def render_json(result: ScanResult) -> str:
    return json_dumps(result.to_dict())


def render_text(result: ScanResult) -> str:
    """Render a scan result for a terminal. A clean result gets its own message."""
    lines: List[str] = []
    lines.append(f"📁 Scanned {format_int(result.scanned)} files")
    lines.append("")

    if result.secrets:
        lines.append("⚠️  POTENTIAL SECRETS FOUND:")
        lines.append(RULE_LINE)
        for secret in result.secrets:
            lines.append("")
            lines.append(secret.rule_name)
            lines.append(f"  📄 {secret.file_path}:{secret.line_number}")
            lines.append(f"  👁️  {secret.preview}")
        lines.append("")
        lines.append("")

    if result.risky_files:
        lines.append("📋 RISKY FILES:")
        lines.append(RULE_LINE)
        for risky in result.risky_files:
            lines.append(f"  ⚠️  {risky.file_path} - {risky.reason}")
        lines.append("")
        lines.append("")

    if result.total_issues == 0:
        lines.append("✅ No obvious security issues found.")
        lines.append("   (This does not guarantee security - manual review recommended)")
    else:
        lines.append(RULE_LINE)
        lines.append(f"Total issues found: {format_int(result.total_issues)}")
        lines.append(f"  - Secrets: {format_int(len(result.secrets))}")
        lines.append(f"  - Risky files: {format_int(len(result.risky_files))}")
        lines.append("")
        lines.append("⚡ Review and fix before committing")
    lines.append("")

    return "\n".join(lines)
