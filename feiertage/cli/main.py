"""
Command-line interface for feiertage.
Lists and checks German public holidays with Rich formatting.
"""

import logging
from datetime import date

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from feiertage import __app_name__, __version__
from feiertage.api import get_holiday_by_date, get_holidays, is_sun_or_holiday, translate
from feiertage.cli.validators import (
    date_callback,
    language_callback,
    region_callback,
    year_callback,
)
from feiertage.config import settings
from feiertage.engine.easter import compute_easter
from feiertage.engine.year_builder import build_year
from feiertage.exceptions import FeiertageException
from feiertage.models.holiday_type import HolidayType
from feiertage.models.region import Region
from feiertage.utils.date_utils import get_weekday_name, is_sunday
from feiertage.utils.logging_config import setup_logging

# Create Typer app
app = typer.Typer(
    name="feiertage",
    help="feiertage - German public holidays by year and federal state",
    add_completion=False,
)

config_app = typer.Typer(help="Inspect configuration")
app.add_typer(config_app, name="config")

console = Console()
logger = logging.getLogger(__name__)

# Holidays derived from Easter Sunday or Christmas' weekday
MOVABLE_HOLIDAYS = (
    HolidayType.KARFREITAG,
    HolidayType.OSTERSONNTAG,
    HolidayType.OSTERMONTAG,
    HolidayType.CHRISTIHIMMELFAHRT,
    HolidayType.PFINGSTSONNTAG,
    HolidayType.PFINGSTMONTAG,
    HolidayType.FRONLEICHNAM,
    HolidayType.BUBETAG,
)


# ============================================================================
# Utility Functions
# ============================================================================

def handle_error(e: Exception, message: str = "An error occurred"):
    """Handle errors with nice formatting."""
    console.print(f"\n[bold red]✗ {message}[/bold red]")
    console.print(f"[red]{type(e).__name__}: {str(e)}[/red]\n")
    if settings.debug:
        console.print_exception()
    raise typer.Exit(code=1)


def success(message: str):
    """Print success message."""
    console.print(f"[bold green]✓ {message}[/bold green]")


def info(message: str):
    """Print info message."""
    console.print(f"[blue]{message}[/blue]")


# ============================================================================
# Version Callback
# ============================================================================

def version_callback(value: bool):
    """Show version and exit."""
    if value:
        console.print(Panel(
            f"[bold blue]{__app_name__}[/bold blue] version [green]{__version__}[/green]\n"
            f"German public holidays by year and federal state",
            title="feiertage",
            border_style="blue",
        ))
        raise typer.Exit()


# ============================================================================
# Main Callback
# ============================================================================

@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", callback=version_callback, is_eager=True, help="Show version and exit"
    ),
    log_level: str = typer.Option(settings.log_level, "--log-level", help="Logging level"),
):
    """
    feiertage CLI - German public holidays.

    Use 'feiertage COMMAND --help' for command-specific help.
    """
    setup_logging(
        level=log_level,
        json_format=settings.log_json,
        log_file=settings.log_file,
    )


# ============================================================================
# LIST Command
# ============================================================================

@app.command("list")
def list_holidays(
    year: int = typer.Argument(..., help="Calendar year (e.g., 2025)", callback=year_callback),
    region: str = typer.Option(
        settings.default_region.value, "--region", "-r",
        help="Region code (e.g., BY) or ALL", callback=region_callback,
    ),
    lang: str = typer.Option(None, "--lang", "-l", help="Display language (e.g., de, en)", callback=language_callback),
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of a table"),
):
    """
    List the public holidays of a year.

    Example:
        feiertage list 2025 --region BY --lang en
    """
    try:
        holidays = get_holidays(year, region)
    except FeiertageException as e:
        handle_error(e, "Could not compute holidays")

    if as_json:
        console.print_json(data=[
            {
                "date": holiday.date_string,
                "type": holiday.type.value,
                "name": translate(holiday, lang),
            }
            for holiday in holidays
        ])
        return

    table = Table(
        title=f"Public holidays {year} ({region})",
        show_header=True,
        header_style="bold magenta",
    )
    table.add_column("Date", style="cyan", no_wrap=True)
    table.add_column("Weekday", style="white")
    table.add_column("Holiday", style="green")

    for holiday in holidays:
        table.add_row(
            holiday.date_string,
            get_weekday_name(holiday.date),
            translate(holiday, lang),
        )

    console.print(table)
    info(f"{len(holidays)} holidays")


# ============================================================================
# CHECK Command
# ============================================================================

@app.command()
def check(
    day: str = typer.Argument(..., help="Date (YYYY-MM-DD or DD.MM.YYYY)", callback=date_callback),
    region: str = typer.Option(
        settings.default_region.value, "--region", "-r",
        help="Region code (e.g., BY) or ALL", callback=region_callback,
    ),
    sunday: bool = typer.Option(False, "--sunday", help="Treat Sundays as holidays"),
    lang: str = typer.Option(None, "--lang", "-l", help="Display language (e.g., de, en)", callback=language_callback),
):
    """
    Check whether a date is a public holiday.

    Example:
        feiertage check 2025-10-31 --region SN
    """
    try:
        holiday = get_holiday_by_date(day, region)
        free = is_sun_or_holiday(day, region) if sunday else holiday is not None
    except FeiertageException as e:
        handle_error(e, "Could not check date")

    label = f"{day.isoformat()} ({get_weekday_name(day)})"

    if holiday is not None:
        success(f"{label} is a holiday in {region}: {translate(holiday, lang)}")
    elif free and is_sunday(day):
        success(f"{label} is a Sunday")
    else:
        console.print(f"[yellow]{label} is not a holiday in {region}[/yellow]")


# ============================================================================
# EASTER Command
# ============================================================================

@app.command()
def easter(
    year: int = typer.Argument(..., help="Calendar year (e.g., 2025)", callback=year_callback),
    lang: str = typer.Option(None, "--lang", "-l", help="Display language (e.g., de, en)", callback=language_callback),
):
    """
    Show Easter Sunday and the movable feasts of a year.
    """
    easter_sunday = compute_easter(year)
    console.print(Panel(
        f"[bold]Easter Sunday {year}:[/bold] [green]{easter_sunday.isoformat()}[/green]",
        border_style="blue",
    ))

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Date", style="cyan", no_wrap=True)
    table.add_column("Holiday", style="green")
    table.add_column("Days from Easter", justify="right")

    for holiday in build_year(year, Region.ALL).holidays:
        if holiday.type not in MOVABLE_HOLIDAYS:
            continue
        table.add_row(
            holiday.date_string,
            translate(holiday, lang),
            f"{(holiday.date - easter_sunday).days:+d}",
        )

    console.print(table)


# ============================================================================
# REGIONS Command
# ============================================================================

@app.command()
def regions():
    """
    List the supported region codes.
    """
    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Code", style="cyan")
    table.add_column("Holidays this year", justify="right")

    year = date.today().year
    for region in Region:
        table.add_row(region.value, str(len(build_year(year, region).holidays)))

    console.print(table)


# ============================================================================
# CONFIG Commands
# ============================================================================

@config_app.command("show")
def config_show():
    """
    Display current configuration.
    """
    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Setting", style="cyan", no_wrap=True)
    table.add_column("Value", style="green")

    table.add_row("App Name", settings.app_name)
    table.add_row("Version", __version__)
    table.add_row("Environment", settings.environment)
    table.add_row("Debug", str(settings.debug))
    table.add_row("Default Region", settings.default_region.value)
    table.add_row("Default Language", settings.default_language)
    table.add_row("Year Cache Size", str(settings.year_cache_size))
    table.add_row("Log Level", settings.log_level)
    table.add_row("JSON Logs", "✓" if settings.log_json else "✗")
    table.add_row("Log File", settings.log_file or "-")

    console.print(table)


if __name__ == "__main__":
    app()
