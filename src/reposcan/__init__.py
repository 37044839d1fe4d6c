"""Lightweight scanner for hardcoded secrets and sensitive files."""

from .models import RiskyFileFinding, Rule, ScanResult, SecretFinding
from .scanner import scan

__version__ = "1.0.0"

__all__ = [
    "RiskyFileFinding",
    "Rule",
    "ScanResult",
    "SecretFinding",
    "scan",
    "__version__",
]
