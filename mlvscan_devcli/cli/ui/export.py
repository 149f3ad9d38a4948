"""JSON export of developer scan reports."""
import json
from pathlib import Path
from typing import Any, Dict, Sequence

from ...core.result import Finding


def build_document(assembly_name: str, findings: Sequence[Finding]) -> Dict[str, Any]:
    """Build the structured report for the displayed findings."""
    return {
        "assemblyName": assembly_name,
        "totalFindings": len(findings),
        "findings": [f.to_dict() for f in findings]
    }


def render_json(assembly_name: str, findings: Sequence[Finding], indent: int = 2) -> str:
    """Render the structured report as pretty-printed JSON."""
    return json.dumps(build_document(assembly_name, findings), indent=indent, ensure_ascii=False)


def save_json(filepath: Path, assembly_name: str, findings: Sequence[Finding]):
    """
    Save the structured report to a JSON file.

    Args:
        filepath: Destination path, parent directories are created
        assembly_name: Display name of the scanned assembly
        findings: The displayed findings
    """
    path = Path(filepath)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'w', encoding='utf-8') as f:
        f.write(render_json(assembly_name, findings))
        f.write("\n")
