"""Core module - Finding models, scanner boundary and result policy."""
from .scanner import BaseScanner, CommandScanner, ScanConfig, ScanError
from .result import DeveloperGuidance, Finding, Severity
from .engine import ScanEngine, create_scanner, load_scanner
from .policy import select_display_findings, should_fail

__all__ = [
    "BaseScanner",
    "CommandScanner",
    "ScanConfig",
    "ScanError",
    "DeveloperGuidance",
    "Finding",
    "Severity",
    "ScanEngine",
    "create_scanner",
    "load_scanner",
    "select_display_findings",
    "should_fail",
]
