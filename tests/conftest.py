"""Shared fixtures for the developer CLI tests."""

from __future__ import annotations

import io
from pathlib import Path
from typing import List, Optional

import pytest

from mlvscan_devcli.cli.ui.console import create_console
from mlvscan_devcli.core.engine import ScanEngine
from mlvscan_devcli.core.result import DeveloperGuidance, Finding, Severity
from mlvscan_devcli.core.scanner import BaseScanner, ScanConfig


def make_finding(
    rule_id: Optional[str] = "ReflectionRule",
    severity: Severity = Severity.HIGH,
    location: str = "MyMod.Core.Loader:12",
    description: str = "Uses reflection to invoke methods",
    guidance: Optional[DeveloperGuidance] = None,
    code_snippet: Optional[str] = None,
) -> Finding:
    return Finding(
        rule_id=rule_id,
        description=description,
        severity=severity,
        location=location,
        code_snippet=code_snippet,
        developer_guidance=guidance,
    )


def make_guidance(**overrides) -> DeveloperGuidance:
    values = {
        "remediation": "Call the API directly instead of through reflection.",
        "documentation_url": "https://example.org/docs/reflection",
        "alternative_apis": ("MelonLoader.MelonMod.OnUpdate",),
        "is_remediable": True,
    }
    values.update(overrides)
    return DeveloperGuidance(**values)


class StubScanner(BaseScanner):
    """Returns canned findings and records what it was asked to scan."""

    name = "Stub"

    def __init__(self, findings: Optional[List[Finding]] = None, error: Optional[Exception] = None):
        self.findings = list(findings or [])
        self.error = error
        self.calls: list[tuple[Path, ScanConfig]] = []

    def scan(self, assembly_path: Path, config: ScanConfig) -> List[Finding]:
        self.calls.append((assembly_path, config))
        if self.error is not None:
            raise self.error
        return list(self.findings)


class CapturedConsole:
    """A rich console writing into a string buffer."""

    def __init__(self) -> None:
        self.buffer = io.StringIO()
        self.console = create_console(file=self.buffer)

    @property
    def text(self) -> str:
        return self.buffer.getvalue()


@pytest.fixture
def out() -> CapturedConsole:
    return CapturedConsole()


@pytest.fixture
def err() -> CapturedConsole:
    return CapturedConsole()


@pytest.fixture
def assembly(tmp_path: Path) -> Path:
    path = tmp_path / "MyMod.dll"
    path.write_bytes(b"MZ\x90\x00")
    return path


@pytest.fixture
def engine_for():
    def _factory(findings=None, error=None):
        scanner = StubScanner(findings, error)
        engine = ScanEngine(scanner)
        return engine, scanner

    return _factory
