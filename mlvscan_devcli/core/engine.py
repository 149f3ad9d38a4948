"""Scan engine - Resolves the configured scanner and runs a single scan."""
from typing import Any, Dict, List, Optional
from pathlib import Path
import importlib
import shlex

from .scanner import BaseScanner, CommandScanner, ScanConfig, ScanError
from .result import Finding


def load_scanner(spec: str) -> BaseScanner:
    """
    Load a Python scan engine from a "package.module:attribute" spec.

    The attribute may be a BaseScanner subclass, a factory returning a
    scanner, or an object that already has a scan() method.
    """
    module_name, _, attr = spec.partition(":")
    if not module_name or not attr:
        raise ScanError(f"Invalid engine module '{spec}' (expected 'module:attribute')")

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise ScanError(f"Could not import engine module '{module_name}': {e}")

    target = getattr(module, attr, None)
    if target is None:
        raise ScanError(f"Engine module '{module_name}' has no attribute '{attr}'")

    if hasattr(target, "scan") and not isinstance(target, type):
        scanner = target
    elif callable(target):
        scanner = target()
    else:
        scanner = None

    if not callable(getattr(scanner, "scan", None)):
        raise ScanError(f"Engine '{spec}' does not provide a scan() method")
    return scanner


def create_scanner(config) -> BaseScanner:
    """Create the scanner described by the engine section of the config."""
    module_spec = config.engine_module
    if module_spec:
        return load_scanner(module_spec)

    command = config.engine_command
    if command:
        if isinstance(command, str):
            command = shlex.split(command)
        return CommandScanner(command, developer_flag=config.engine_developer_flag)

    raise ScanError(
        "No scan engine configured (set engine.command or engine.module in mlvscan.yaml)"
    )


class ScanEngine:
    """Runs the scan engine with developer guidance enabled."""

    def __init__(self, scanner: BaseScanner, options: Optional[Dict[str, Any]] = None):
        self.scanner = scanner
        self.options = dict(options or {})

    @classmethod
    def from_config(cls, config) -> "ScanEngine":
        """Build an engine from the loaded configuration."""
        return cls(create_scanner(config), options=config.get("scan.options") or {})

    @property
    def scan_config(self) -> ScanConfig:
        return ScanConfig(developer_mode=True, options=dict(self.options))

    def scan(self, assembly_path: Path) -> List[Finding]:
        """Scan an assembly and return the findings in engine order."""
        is_available = getattr(self.scanner, "is_available", None)
        if is_available is not None and not is_available():
            name = getattr(self.scanner, "name", type(self.scanner).__name__)
            raise ScanError(f"Scan engine '{name}' is not available")
        return list(self.scanner.scan(assembly_path, self.scan_config))
