"""MLVScan Developer CLI - Scan MelonLoader mods during development."""

__version__ = "1.0.0"
