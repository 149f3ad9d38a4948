"""Main CLI application."""
import typer
from typing import Callable, Optional
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from ..core.engine import ScanEngine
from ..core.policy import select_display_findings, should_fail
from ..core.result import Severity
from ..utils.config import ConfigError, load_config
from .ui.console import (
    console, err_console, print_report, print_error, print_warning, print_success
)
from .ui.export import render_json, save_json


app = typer.Typer(
    name="mlvscan-dev",
    help="MLVScan Developer CLI - Scan MelonLoader mods during development",
    add_completion=False
)


def version_callback(value: bool):
    if value:
        from .. import __version__
        console.print(f"MLVScan Developer CLI v{__version__}")
        raise typer.Exit()


def check_assembly_path(assembly_path: Path, err: Optional[Console] = None) -> bool:
    """Report a missing assembly, True if the path is an existing file."""
    if assembly_path.is_file():
        return True
    print_error(f"File not found: {assembly_path.resolve()}", err)
    return False


def scan_assembly(
    assembly_path: Path,
    engine_factory: Callable[[], ScanEngine],
    json_output: bool = False,
    fail_on: Optional[str] = None,
    verbose: bool = False,
    output: Optional[Path] = None,
    out: Optional[Console] = None,
    err: Optional[Console] = None
) -> int:
    """
    Scan one assembly, print the report and return the process exit code.

    The engine is only created once the assembly path is known to exist.
    """
    out = out or console
    err = err or err_console

    if not check_assembly_path(assembly_path, err):
        return 1

    try:
        engine = engine_factory()
        findings = engine.scan(assembly_path.resolve())
    except Exception as e:
        err.print(f"[red bold]Error scanning assembly:[/red bold] {escape(str(e))}")
        if verbose:
            err.print_exception()
        return 1

    # Only findings with guidance are shown unless verbose
    display_findings = select_display_findings(findings, verbose)

    if json_output:
        out.out(render_json(assembly_path.name, display_findings), highlight=False)
    else:
        print_report(assembly_path.name, display_findings, verbose, out)

    if output:
        try:
            save_json(output, assembly_path.name, display_findings)
        except OSError as e:
            print_error(f"Could not save report to {output}: {e}", err)
            return 1
        if not json_output:
            print_success(f"Report saved to {output}", out)

    if fail_on and Severity.parse(fail_on) is None and not json_output:
        print_warning(
            f"Unknown severity '{fail_on}' for --fail-on (expected Low, Medium, High or Critical)",
            err
        )

    # The gate always sees every finding, display filtering must not hide failures
    failed, matched = should_fail(findings, fail_on)
    if failed:
        if not json_output:
            err.print()
            err.print(f"Build failed: Found {matched} finding(s) >= {Severity.parse(fail_on).label}")
        return 1

    return 0


@app.command()
def scan(
    assembly_path: Path = typer.Argument(
        ...,
        help="Path to the .dll file to scan",
        show_default=False
    ),
    json_output: bool = typer.Option(
        False,
        "--json", "-j",
        help="Output results as JSON (useful for CI/CD pipelines)"
    ),
    fail_on: Optional[str] = typer.Option(
        None,
        "--fail-on", "-f",
        help="Exit with error code 1 if findings >= specified severity (Low/Medium/High/Critical)"
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose", "-v",
        help="Show all findings, not just those with developer guidance"
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output", "-o",
        help="Also save the JSON report to this file"
    ),
    config_path: Optional[Path] = typer.Option(
        None,
        "--config", "-c",
        help="Config file (default: $MLVSCAN_CONFIG or ./mlvscan.yaml)"
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version information and exit"
    )
):
    """Scan a compiled mod assembly and report findings with developer guidance."""
    if not check_assembly_path(assembly_path, err_console):
        raise typer.Exit(code=1)

    try:
        config = load_config(config_path, warn=print_warning)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    if fail_on is None:
        fail_on = config.fail_on

    exit_code = scan_assembly(
        assembly_path,
        lambda: ScanEngine.from_config(config),
        json_output=json_output,
        fail_on=fail_on,
        verbose=verbose,
        output=output
    )
    raise typer.Exit(code=exit_code)


def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
