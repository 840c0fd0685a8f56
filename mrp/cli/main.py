"""
MRP Command-Line Interface.

Runs material requirements planning on snapshot files and renders the
requirements plan in the terminal.
"""

import logging
import sys
from decimal import Decimal
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from mrp import __version__
from mrp.config.schema import MrpConfig, get_default_config
from mrp.engine.planning import MrpEngine
from mrp.engine.validation import (
    DataIntegrityError,
    IncompleteSnapshotError,
    parse_snapshot,
)
from mrp.i18n import load_locale, t
from mrp.io import (
    ResultSaveError,
    SnapshotDocument,
    SnapshotLoadError,
    load_snapshot,
    save_result,
)
from mrp.models.requirements import MrpResult

console = Console()


# =============================================================================
# Main CLI Group
# =============================================================================


@click.group()
@click.version_option(version=__version__, prog_name="MRP")
@click.option(
    "--lang",
    "-l",
    default="en",
    help="Language code (e.g., 'en', 'sr')",
)
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
def cli(lang: str, verbose: bool) -> None:
    """
    MRP - Material Requirements Planning

    Computes material shortages for open production orders.
    """
    load_locale(lang)
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# =============================================================================
# Commands
# =============================================================================


@cli.command()
@click.argument("snapshot", type=click.Path(exists=True, dir_okay=False))
@click.option("--config", "-c", "config_path", type=click.Path(exists=True), help="Config file (JSON/YAML)")
@click.option("--output", "-o", type=click.Path(), help="Write the JSON result to this file")
@click.option("--shortages-only", is_flag=True, help="Only list materials that are short")
@click.option("--strict", is_flag=True, help="Fail on any malformed input record")
@click.option("--fail-on-shortage", is_flag=True, help="Exit with status 2 if any material is short")
def run(
    snapshot: str,
    config_path: Optional[str],
    output: Optional[str],
    shortages_only: bool,
    strict: bool,
    fail_on_shortage: bool,
) -> None:
    """Run MRP on a snapshot file.

    SNAPSHOT is a JSON or YAML file with orders, bom_lines, stock and
    pending_supply.
    """
    config = _load_config(config_path)
    document = _load_document(snapshot)

    engine = MrpEngine(config)
    try:
        result = engine.run(
            document.orders,
            document.bom_lines,
            document.stock,
            document.pending_supply,
            strict=strict,
        )
    except IncompleteSnapshotError as e:
        console.print(f"[red]{t('messages.incomplete', error=e)}[/red]")
        sys.exit(1)
    except DataIntegrityError as e:
        console.print(f"[red]{t('messages.strict_failed')}[/red]")
        _show_issues(e.issues)
        sys.exit(1)

    _show_summary(result)
    _show_shortage_badges(result)
    _show_requirements(result, shortages_only)
    _show_issues(result.warnings)

    if output:
        try:
            path = save_result(result, output)
        except ResultSaveError as e:
            console.print(f"[red]{e}[/red]")
            sys.exit(1)
        console.print(f"[green]{t('messages.saved', path=path)}[/green]")

    if fail_on_shortage and result.shortages:
        sys.exit(2)


@cli.command()
@click.argument("snapshot", type=click.Path(exists=True, dir_okay=False))
def validate(snapshot: str) -> None:
    """Check a snapshot file for malformed records without planning."""
    document = _load_document(snapshot)
    try:
        _, validation = parse_snapshot(
            document.orders,
            document.bom_lines,
            document.stock,
            document.pending_supply,
        )
    except IncompleteSnapshotError as e:
        console.print(f"[red]{t('messages.incomplete', error=e)}[/red]")
        sys.exit(1)

    _show_issues(validation.issues, show_none=True)
    if not validation.valid:
        sys.exit(1)


@cli.command("init-config")
@click.argument("path", type=click.Path(dir_okay=False))
def init_config(path: str) -> None:
    """Write the default configuration to PATH (.json or .yaml)."""
    try:
        get_default_config().to_file(path)
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        sys.exit(1)
    console.print(f"[green]{t('messages.saved', path=path)}[/green]")


# =============================================================================
# Helpers
# =============================================================================


def _load_config(path: Optional[str]) -> MrpConfig:
    if not path:
        return get_default_config()
    try:
        return MrpConfig.from_file(path)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]Invalid configuration: {escape(str(e))}[/red]")
        sys.exit(1)


def _load_document(path: str) -> SnapshotDocument:
    try:
        return load_snapshot(path)
    except SnapshotLoadError as e:
        console.print(f"[red]{t('messages.load_failed', error=escape(str(e)))}[/red]")
        sys.exit(1)


def _fmt(value: Decimal) -> str:
    """Format a quantity with thousands separators and no trailing zeros."""
    text = f"{value:,.3f}".rstrip("0").rstrip(".")
    return text if text not in ("-0", "") else "0"


def _show_summary(result: MrpResult) -> None:
    """Display the headline counters."""
    summary = result.summary
    shortage_style = "red" if summary.shortage_count else "green"

    console.print()
    console.print(Panel.fit(
        f"[bold]{t('app.title')}[/bold]\n[dim]{t('app.description')}[/dim]\n\n"
        f"{t('stats.active_orders')}: [bold]{summary.active_orders}[/bold]   "
        f"{t('stats.materials')}: [bold]{summary.material_count}[/bold]   "
        f"{t('stats.shortages')}: [bold {shortage_style}]{summary.shortage_count}[/bold {shortage_style}]   "
        f"{t('stats.total_shortage')}: [bold red]{_fmt(summary.total_net)}[/bold red]",
        border_style="blue",
    ))
    if summary.mixes_units:
        console.print(f"[yellow]{t('stats.mixed_units', units=', '.join(summary.units))}[/yellow]")


def _show_shortage_badges(result: MrpResult) -> None:
    if not result.shortages:
        return
    badges = "  ".join(
        f"[white on red] {escape(s.material_name)}: -{_fmt(s.net_requirement)} {s.unit} [/white on red]"
        for s in result.shortages
    )
    console.print()
    console.print(Panel(badges, title=t("shortages.title"), border_style="red"))


def _show_requirements(result: MrpResult, shortages_only: bool = False) -> None:
    """Display the material requirements plan."""
    rows = result.shortages if shortages_only else result.requirements

    table = Table(title=t("table.title"), box=None)
    table.add_column(t("table.material"))
    table.add_column(t("table.required"), justify="right")
    table.add_column(t("table.on_hand"), justify="right")
    table.add_column(t("table.reserved"), justify="right")
    table.add_column(t("table.on_order"), justify="right")
    table.add_column(t("table.available"), justify="right")
    table.add_column(t("table.net"), justify="right")
    table.add_column(t("table.status"))

    if not rows:
        console.print(f"[dim]{t('table.empty')}[/dim]")
        return

    for m in rows:
        short = m.is_shortage
        table.add_row(
            escape(m.material_name),
            f"{_fmt(m.gross_required)} {m.unit}",
            _fmt(m.on_hand),
            _fmt(m.reserved),
            _fmt(m.on_order),
            _fmt(m.available),
            f"[bold red]{_fmt(m.net_requirement)}[/bold red]" if short else "[green]✓[/green]",
            f"[red]{t('status.shortage')}[/red]" if short else f"[green]{t('status.ok')}[/green]",
        )

    console.print()
    console.print(table)


def _show_issues(issues: list, show_none: bool = False) -> None:
    """Display data issues found in the inputs."""
    if not issues:
        if show_none:
            console.print(f"[green]{t('warnings.none')}[/green]")
        return

    console.print()
    console.print(f"[yellow]{t('warnings.title', count=len(issues))}[/yellow]")
    for issue in issues:
        console.print(f"  [yellow]-[/yellow] {escape(str(issue))}")


def main() -> None:
    """Console script entry point."""
    cli()


# =============================================================================
# Entry Point
# =============================================================================


if __name__ == "__main__":
    main()
