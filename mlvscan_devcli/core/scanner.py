"""Scanner interface - the boundary to the external scan engine."""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence
import json
import shutil
import subprocess

from .result import Finding


class ScanError(Exception):
    """Raised when the scan engine cannot produce findings."""


@dataclass(frozen=True)
class ScanConfig:
    """Options passed through to the scan engine."""
    developer_mode: bool = True
    options: Dict[str, Any] = field(default_factory=dict)


class BaseScanner(ABC):
    """Abstract base class for scan engine adapters."""

    # Scanner metadata - override in subclasses
    name: str = "BaseScanner"
    description: str = "Base scanner"

    @abstractmethod
    def scan(self, assembly_path: Path, config: ScanConfig) -> List[Finding]:
        """
        Scan an assembly and return its findings in engine order.

        Must be implemented by all scanner subclasses.
        """
        pass

    def is_available(self) -> bool:
        """
        Check if this scanner can run in the current environment.

        Override to add custom availability checks.
        """
        return True


class CommandScanner(BaseScanner):
    """Runs an external engine executable that prints findings as JSON."""

    name = "Command"
    description = "External scan engine process"

    def __init__(self, command: Sequence[str], developer_flag: Optional[str] = None):
        if not command:
            raise ScanError("Scan engine command is empty")
        self.command = list(command)
        self.name = self.command[0]
        self.developer_flag = developer_flag

    def is_available(self) -> bool:
        return shutil.which(self.command[0]) is not None

    def build_command(self, assembly_path: Path, config: ScanConfig) -> List[str]:
        """Build the engine command line for one assembly."""
        cmd = list(self.command)
        if config.developer_mode and self.developer_flag:
            cmd.append(self.developer_flag)
        cmd.append(str(assembly_path))
        return cmd

    def scan(self, assembly_path: Path, config: ScanConfig) -> List[Finding]:
        cmd = self.build_command(assembly_path, config)

        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                encoding="utf-8"
            )
        except FileNotFoundError:
            raise ScanError(f"Scan engine command not found: {self.command[0]}")

        if result.returncode != 0:
            detail = result.stderr.strip().splitlines()
            message = detail[-1] if detail else "no error output"
            raise ScanError(f"Scan engine exited with code {result.returncode}: {message}")

        return parse_findings(result.stdout)


def parse_findings(payload: str) -> List[Finding]:
    """
    Decode engine JSON output into findings.

    The payload is either a list of finding objects or an object with a
    "findings" list.
    """
    try:
        data = json.loads(payload)
    except json.JSONDecodeError as e:
        raise ScanError(f"Scan engine returned malformed output: {e}")

    if isinstance(data, dict):
        data = data.get("findings", [])
    if not isinstance(data, list):
        raise ScanError("Scan engine output must be a list of findings")

    findings = []
    for index, item in enumerate(data):
        if not isinstance(item, dict):
            raise ScanError(f"Finding #{index} is not an object")
        try:
            findings.append(Finding.from_dict(item))
        except ValueError as e:
            raise ScanError(f"Finding #{index}: {e}")
    return findings
