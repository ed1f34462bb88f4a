"""CLI entry point: depcollect.

Usage:
    depcollect                          # scan $DEPCOLLECT_ROOT (or cwd)
    depcollect --root ~/work/monorepo   # scan a specific folder
    depcollect --root . -o deps.json    # write the report elsewhere
"""

from __future__ import annotations

import sys

import click
import structlog

from depcollect.core.config import ScanConfig
from depcollect.core.logging import setup_logging
from depcollect.scanner import run_scan

log = structlog.get_logger("depcollect.cli")


@click.command()
@click.option("--root", default=None, help="Folder to scan (default: $DEPCOLLECT_ROOT or cwd)")
@click.option(
    "-o", "--output", default=None, help="Report path (default: $DEPCOLLECT_OUTPUT or list.json)"
)
@click.option("--manifest", default=None, help="Manifest filename (default: package.json)")
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging")
@click.option("--json-logs", is_flag=True, help="Emit logs as JSON")
def main(
    root: str | None,
    output: str | None,
    manifest: str | None,
    verbose: bool,
    json_logs: bool,
) -> None:
    """Collect the highest declared version of every dependency under a folder."""
    setup_logging(
        level="DEBUG" if verbose else None,
        log_format="json" if json_logs else None,
    )
    config = ScanConfig.from_env(root=root, output_path=output, manifest_name=manifest)

    try:
        outcome = run_scan(config)
    except Exception as e:
        log.error("scan.failed", error=str(e), exc_info=verbose)
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    report = outcome.report
    click.echo(f"Results saved to: {outcome.output_path}")
    click.echo(
        f"Found {report.total_dependencies} dependencies and "
        f"{report.total_dev_dependencies} devDependencies "
        f"across {report.total_projects} projects"
    )
    if outcome.skipped:
        click.echo(f"\nSkipped {len(outcome.skipped)}:")
        for skip in outcome.skipped:
            click.echo(f"  [!] {skip.path}: {skip.reason}")


if __name__ == "__main__":
    main()
