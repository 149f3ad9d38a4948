"""Result models for scan findings."""
from enum import IntEnum
from dataclasses import dataclass
from typing import Optional, Dict, Any, Tuple


class Severity(IntEnum):
    """Severity levels for findings, ordered from least to most severe."""
    LOW = 0
    MEDIUM = 1
    HIGH = 2
    CRITICAL = 3

    @property
    def label(self) -> str:
        """Display name (Low, Medium, High, Critical)."""
        return self.name.capitalize()

    @classmethod
    def parse(cls, text: Optional[str]) -> Optional["Severity"]:
        """Parse a case-insensitive severity name, None if not recognized."""
        if not text or not isinstance(text, str):
            return None
        return cls.__members__.get(text.strip().upper())

    @classmethod
    def coerce(cls, value: Any) -> "Severity":
        """Convert engine output (name or numeric rank) to a Severity."""
        if isinstance(value, Severity):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            return cls(value)
        if isinstance(value, str):
            severity = cls.parse(value)
            if severity is not None:
                return severity
        raise ValueError(f"Unknown severity: {value!r}")


@dataclass(frozen=True)
class DeveloperGuidance:
    """Remediation metadata attached to a finding in developer mode."""
    remediation: str
    documentation_url: Optional[str] = None
    alternative_apis: Optional[Tuple[str, ...]] = None
    is_remediable: bool = True

    def to_dict(self) -> Dict[str, Any]:
        """Convert guidance to dictionary."""
        return {
            "remediation": self.remediation,
            "documentationUrl": self.documentation_url,
            "alternativeApis": list(self.alternative_apis) if self.alternative_apis is not None else None,
            "isRemediable": self.is_remediable
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DeveloperGuidance":
        """Build guidance from a camelCase dictionary."""
        apis = data.get("alternativeApis")
        return cls(
            remediation=data.get("remediation") or "",
            documentation_url=data.get("documentationUrl"),
            alternative_apis=tuple(apis) if apis is not None else None,
            is_remediable=bool(data.get("isRemediable", True))
        )


@dataclass(frozen=True)
class Finding:
    """A single rule match reported by the scan engine."""
    rule_id: Optional[str]
    description: str
    severity: Severity
    location: str
    code_snippet: Optional[str] = None
    developer_guidance: Optional[DeveloperGuidance] = None

    @property
    def has_guidance(self) -> bool:
        return self.developer_guidance is not None

    def to_dict(self) -> Dict[str, Any]:
        """Convert finding to dictionary."""
        return {
            "ruleId": self.rule_id,
            "description": self.description,
            "severity": self.severity.label,
            "location": self.location,
            "codeSnippet": self.code_snippet,
            "guidance": self.developer_guidance.to_dict() if self.developer_guidance else None
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Finding":
        """
        Build a finding from engine output.

        Accepts the same camelCase keys produced by to_dict(). Guidance may
        appear under "guidance" or "developerGuidance".
        """
        guidance = data.get("guidance", data.get("developerGuidance"))
        if guidance is not None and not isinstance(guidance, dict):
            raise ValueError("guidance must be an object")
        return cls(
            rule_id=data.get("ruleId"),
            description=data.get("description") or "",
            severity=Severity.coerce(data.get("severity")),
            location=data.get("location") or "",
            code_snippet=data.get("codeSnippet"),
            developer_guidance=DeveloperGuidance.from_dict(guidance) if guidance else None
        )
