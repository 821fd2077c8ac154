"""
Main CLI application using Typer.
"""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from ..config import AppConfig, load_config
from ..domain.exceptions import TimeslotError
from ..domain.timeslot import Timeslot

app = typer.Typer(
    name="timeslot",
    help="Create, round and chain fixed-duration timeslots",
    add_completion=False
)

console = Console()

logger = logging.getLogger(__name__)

StartArgument = Annotated[Optional[str], typer.Argument(help="Start date/time, e.g. '2024-01-01 10:15'. Defaults to now.")]
HoursOption = Annotated[Optional[int], typer.Option("--hours", "-H", help="Duration hours. Defaults to the configured value.")]
MinutesOption = Annotated[Optional[int], typer.Option("--minutes", "-m", help="Duration minutes. Defaults to the configured value.")]
RoundOption = Annotated[bool, typer.Option("--round", "-r", help="Align the slot to the start of its hour.")]
TimezoneOption = Annotated[Optional[str], typer.Option("--tz", help="Timezone name. Defaults to the configured timezone.")]
ConfigOption = Annotated[Optional[Path], typer.Option("--config", "-c", help="Path to config file. Defaults to ./config.yaml")]

HANDLED_ERRORS = (TimeslotError, ValueError, FileNotFoundError)


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Show debug logging.")] = False,
):
    """
    Work with timeslots: intervals with a start, a duration and an end
    one second before the next slot begins.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )


def _build_slot(
    config: AppConfig,
    start: Optional[str],
    hours: Optional[int],
    minutes: Optional[int],
    tz: Optional[str],
    round_slot: bool = False,
) -> Timeslot:
    """Create a slot from CLI arguments, filling gaps from the configuration."""
    slot = Timeslot.create(
        start,
        hours if hours is not None else config.defaults.hours,
        minutes if minutes is not None else config.defaults.minutes,
        tz=tz or config.timezone,
    )
    logger.debug("Created slot %s", slot)

    if round_slot:
        slot = slot.round()
        logger.debug("Rounded slot to %s", slot)

    return slot


def _render_slot(slot: Timeslot, config: AppConfig, title: str) -> None:
    """Print a slot as a table followed by its display line."""
    fmt = config.display.datetime_format

    table = Table(
        title=title,
        show_header=True,
        header_style="bold cyan"
    )
    table.add_column("Start", style="bold yellow")
    table.add_column("End", style="bold yellow")
    table.add_column("Duration", style="dim")
    table.add_column("Timezone", style="dim")

    table.add_row(
        slot.start.format(fmt),
        slot.end.format(fmt),
        f"{slot.hours}h {slot.minutes:02d}m",
        slot.start.timezone_name or "",
    )

    console.print()
    console.print(table)
    console.print(f"  {escape(slot.format_display(fmt, config.display.locale))}")
    console.print()


def _fail(exc: Exception) -> None:
    console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
    raise typer.Exit(1)


@app.command()
def show(
    start: StartArgument = None,
    hours: HoursOption = None,
    minutes: MinutesOption = None,
    round_slot: RoundOption = False,
    tz: TimezoneOption = None,
    config_file: ConfigOption = None,
):
    """
    Show the timeslot starting at START.

    Examples:

        timeslot show "2024-01-01 10:15" --hours 2 --minutes 30

        timeslot show --round
    """
    try:
        config = load_config(config_file)
        slot = _build_slot(config, start, hours, minutes, tz, round_slot)
        _render_slot(slot, config, "Timeslot")
    except HANDLED_ERRORS as e:
        _fail(e)


@app.command()
def now(
    tz: TimezoneOption = None,
    config_file: ConfigOption = None,
):
    """
    Show the one-hour slot covering the current clock hour.
    """
    try:
        config = load_config(config_file)
        slot = Timeslot.now(tz=tz or config.timezone)
        _render_slot(slot, config, "Current hour")
    except HANDLED_ERRORS as e:
        _fail(e)


@app.command()
def after(
    start: StartArgument = None,
    hours: HoursOption = None,
    minutes: MinutesOption = None,
    round_slot: RoundOption = False,
    tz: TimezoneOption = None,
    config_file: ConfigOption = None,
):
    """
    Show the slot that follows the one starting at START.
    """
    try:
        config = load_config(config_file)
        slot = _build_slot(config, start, hours, minutes, tz, round_slot)
        _render_slot(Timeslot.after(slot), config, "Next slot")
    except HANDLED_ERRORS as e:
        _fail(e)


@app.command()
def before(
    start: StartArgument = None,
    hours: HoursOption = None,
    minutes: MinutesOption = None,
    round_slot: RoundOption = False,
    tz: TimezoneOption = None,
    config_file: ConfigOption = None,
):
    """
    Show the slot that precedes the one starting at START.
    """
    try:
        config = load_config(config_file)
        slot = _build_slot(config, start, hours, minutes, tz, round_slot)
        _render_slot(Timeslot.before(slot), config, "Previous slot")
    except HANDLED_ERRORS as e:
        _fail(e)


@app.command()
def has(
    instant: Annotated[str, typer.Argument(help="Date/time to look for.")],
    start: Annotated[Optional[str], typer.Option("--start", "-s", help="Start of the slot. Defaults to now.")] = None,
    hours: HoursOption = None,
    minutes: MinutesOption = None,
    round_slot: RoundOption = False,
    tz: TimezoneOption = None,
    config_file: ConfigOption = None,
):
    """
    Check whether INSTANT falls within a slot. Start and end both count.

    Example:

        timeslot has "2024-01-01 10:59:59" --start "2024-01-01 10:00"
    """
    try:
        config = load_config(config_file)
        slot = _build_slot(config, start, hours, minutes, tz, round_slot)
        inside = slot.has(instant)
    except HANDLED_ERRORS as e:
        _fail(e)
        return

    if inside:
        console.print(f"[green]✓ {escape(instant)} is within {slot}[/green]")
    else:
        console.print(f"[yellow]✗ {escape(instant)} is outside {slot}[/yellow]")


@app.command()
def version():
    """
    Show version information.
    """
    from .. import __version__
    console.print(f"\n[bold cyan]timeslot[/bold cyan] version [bold]{__version__}[/bold]\n")


if __name__ == "__main__":
    app()
