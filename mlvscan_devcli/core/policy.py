"""Display filtering and the fail-on severity gate."""
from typing import List, Optional, Sequence, Tuple

from .result import Finding, Severity


def select_display_findings(findings: Sequence[Finding], verbose: bool) -> List[Finding]:
    """Findings to show: all of them when verbose, else only those with guidance."""
    if verbose:
        return list(findings)
    return [f for f in findings if f.has_guidance]


def count_at_or_above(findings: Sequence[Finding], threshold: Severity) -> int:
    """Count findings with severity >= threshold."""
    return sum(1 for f in findings if f.severity >= threshold)


def should_fail(findings: Sequence[Finding], threshold_text: Optional[str]) -> Tuple[bool, int]:
    """
    Decide whether the run fails the fail-on threshold.

    Always pass the unfiltered findings, display filtering must not hide a
    failure. An absent or unrecognized threshold never fails.

    Returns:
        (fail, matched_count)
    """
    threshold = Severity.parse(threshold_text)
    if threshold is None:
        return False, 0

    matched = count_at_or_above(findings, threshold)
    return matched > 0, matched
