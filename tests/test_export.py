"""Structured JSON report."""

from __future__ import annotations

import json
from pathlib import Path

from mlvscan_devcli.cli.ui.export import build_document, render_json, save_json
from mlvscan_devcli.core.result import Severity

from conftest import make_finding, make_guidance


def test_document_mirrors_finding_and_guidance_fields() -> None:
    finding = make_finding(
        rule_id="PersistenceRule",
        severity=Severity.HIGH,
        code_snippet="Registry.SetValue(...)",
        guidance=make_guidance(is_remediable=False, alternative_apis=("MelonPreferences",)),
    )

    document = json.loads(render_json("MyMod.dll", [finding]))

    assert document["assemblyName"] == "MyMod.dll"
    assert document["totalFindings"] == 1
    assert document["findings"] == [
        {
            "ruleId": "PersistenceRule",
            "description": "Uses reflection to invoke methods",
            "severity": "High",
            "location": "MyMod.Core.Loader:12",
            "codeSnippet": "Registry.SetValue(...)",
            "guidance": {
                "remediation": "Call the API directly instead of through reflection.",
                "documentationUrl": "https://example.org/docs/reflection",
                "alternativeApis": ["MelonPreferences"],
                "isRemediable": False,
            },
        }
    ]


def test_missing_optional_fields_are_explicit_nulls() -> None:
    findings = [
        make_finding(rule_id=None),
        make_finding(guidance=make_guidance(documentation_url=None, alternative_apis=None)),
    ]

    document = build_document("MyMod.dll", findings)

    assert document["findings"][0]["ruleId"] is None
    assert document["findings"][0]["guidance"] is None
    assert document["findings"][0]["codeSnippet"] is None
    assert document["findings"][1]["guidance"]["documentationUrl"] is None
    assert document["findings"][1]["guidance"]["alternativeApis"] is None


def test_rendering_is_deterministic_and_indented() -> None:
    findings = [make_finding(guidance=make_guidance()), make_finding(severity=Severity.LOW)]

    first = render_json("MyMod.dll", findings)
    second = render_json("MyMod.dll", findings)

    assert first == second
    assert first.startswith('{\n  "assemblyName": "MyMod.dll",\n  "totalFindings": 2,')


def test_empty_report() -> None:
    assert json.loads(render_json("MyMod.dll", [])) == {
        "assemblyName": "MyMod.dll",
        "totalFindings": 0,
        "findings": [],
    }


def test_save_json_writes_same_document(tmp_path: Path) -> None:
    findings = [make_finding(guidance=make_guidance())]
    target = tmp_path / "reports" / "scan.json"

    save_json(target, "MyMod.dll", findings)

    assert target.read_text(encoding="utf-8") == render_json("MyMod.dll", findings) + "\n"
