#!/usr/bin/env python3
"""
MLVScan Developer CLI

Scans a compiled MelonLoader mod with the MLVScan engine and shows findings
together with developer guidance.

Usage:
    python mlvscan_dev.py MyMod.dll
    python mlvscan_dev.py MyMod.dll --verbose
    python mlvscan_dev.py MyMod.dll --json --fail-on High
"""

import sys
import os

# Ensure we can import the package when run from a checkout
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))


if __name__ == "__main__":
    from mlvscan_devcli.cli.app import main
    main()
