"""Rich console wrapper and text report rendering."""
from rich.console import Console
from rich.markup import escape
from typing import Dict, List, Optional, Sequence

from ...core.result import Finding, Severity


def create_console(stderr: bool = False, file=None) -> Console:
    """Create a console that never wraps or rewrites report text."""
    return Console(stderr=stderr, file=file, soft_wrap=True, highlight=False, emoji=False)


# Global console instances
console = create_console()
err_console = create_console(stderr=True)

MAX_LOCATIONS = 3
SEPARATOR = "-" * 41

SEVERITY_STYLES = {
    Severity.LOW: "blue",
    Severity.MEDIUM: "yellow",
    Severity.HIGH: "red",
    Severity.CRITICAL: "bold red",
}


def print_banner(out: Optional[Console] = None):
    """Print the report banner."""
    out = out or console
    out.print("[bold cyan]MLVScan Developer Report[/bold cyan]")
    out.print("[bold cyan]========================[/bold cyan]")


def group_by_rule(findings: Sequence[Finding]) -> List[List[Finding]]:
    """
    Group findings by rule id, most severe group first.

    Findings without a rule id are left out. Groups with the same maximum
    severity keep the order in which their rule was first seen.
    """
    groups: Dict[str, List[Finding]] = {}
    for finding in findings:
        if finding.rule_id is None:
            continue
        groups.setdefault(finding.rule_id, []).append(finding)

    return sorted(
        groups.values(),
        key=lambda group: max(f.severity for f in group),
        reverse=True
    )


def print_guidance(finding: Finding, verbose: bool, out: Console):
    """Print the developer guidance section for a rule group."""
    guidance = finding.developer_guidance
    if guidance is None:
        if verbose:
            out.print("  [dim](No developer guidance available)[/dim]")
        return

    out.print()
    out.print("  [cyan]Developer Guidance:[/cyan]")
    out.print(f"  {escape(guidance.remediation)}")

    if guidance.documentation_url:
        out.print(f"  [blue]Docs: {escape(guidance.documentation_url)}[/blue]")

    if guidance.alternative_apis:
        out.print(f"  Suggested APIs: {escape(', '.join(guidance.alternative_apis))}")

    if not guidance.is_remediable:
        out.print("  [yellow][!] No safe alternative - this pattern should not be used[/yellow]")


def print_rule_group(group: Sequence[Finding], verbose: bool, out: Console):
    """Print one rule group: header, guidance, locations."""
    first = group[0]
    count = len(group)
    style = SEVERITY_STYLES.get(first.severity, "white")

    out.print(f"[{style}]\\[{first.severity.label}][/{style}] {escape(first.description)}")
    out.print(f"  Rule: {escape(first.rule_id)}")
    out.print(f"  Occurrences: {count}")

    print_guidance(first, verbose, out)

    out.print()
    out.print("  Locations:")
    for finding in group[:MAX_LOCATIONS]:
        out.print(f"    - {escape(finding.location)}")
    if count > MAX_LOCATIONS:
        out.print(f"    ... and {count - MAX_LOCATIONS} more")

    out.print()
    out.print(SEPARATOR)
    out.print()


def print_report(assembly_name: str, findings: Sequence[Finding], verbose: bool = False,
                 out: Optional[Console] = None):
    """Print the human-readable report for the displayed findings."""
    out = out or console

    print_banner(out)
    out.print(f"Assembly: {escape(assembly_name)}")
    out.print(f"Findings: {len(findings)}")
    out.print()

    if not findings:
        print_success("No issues found!", out)
        return

    for group in group_by_rule(findings):
        print_rule_group(group, verbose, out)


def print_error(message: str, out: Optional[Console] = None):
    """Print an error message."""
    (out or err_console).print(f"[red bold]Error:[/red bold] {escape(message)}")


def print_success(message: str, out: Optional[Console] = None):
    """Print a success message."""
    (out or console).print(f"[green][OK][/green] {escape(message)}")


def print_warning(message: str, out: Optional[Console] = None):
    """Print a warning message."""
    (out or err_console).print(f"[yellow][!][/yellow] {escape(message)}")
