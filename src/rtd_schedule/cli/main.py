"""CLI main entry point for RTD schedule extraction."""

import logging
import sys
from datetime import datetime as dt_module
from pathlib import Path

import click
from rich.console import Console

from ..core import (
    ExtractionVariant,
    NetworkError,
    RtdScheduleClient,
    ScheduleExtractor,
    ScheduleSelectors,
    StructuralError,
    UnresolvedMetadataError,
    ValidationError,
    parse_day,
)
from ..core.timetable import StopQuery, next_stops_for
from .formatters import (
    format_grid_json,
    format_grid_table,
    format_next_stops,
    format_route_list_json,
    format_route_list_table,
    format_schedule_detailed,
    format_schedule_json,
    format_schedule_table,
)

console = Console()
error_console = Console(stderr=True)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _report_error(e: Exception, verbose: bool) -> None:
    """Print an error message for ``e`` and exit."""
    if isinstance(e, ValidationError):
        error_console.print(f"[red]Error:[/red] {e}")
    elif isinstance(e, UnresolvedMetadataError):
        error_console.print(f"[yellow]No schedule found:[/yellow] {e}")
    elif isinstance(e, StructuralError):
        error_console.print(f"[red]Malformed schedule:[/red] {e}")
    elif isinstance(e, NetworkError):
        error_console.print(f"[red]Network error:[/red] {e}")
    else:
        error_console.print(f"[red]Unexpected error:[/red] {e}")
        if verbose:
            error_console.print_exception()
    sys.exit(1)


def _show_result(result, output_format: str, verbose: bool) -> None:
    if output_format == "json":
        click.echo(format_schedule_json(result))
    elif output_format == "detailed":
        format_schedule_detailed(result)
    else:
        format_schedule_table(result, verbose=verbose)


format_option = click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(["table", "json", "detailed"]),
    default="table",
    help="Output format",
)
verbose_option = click.option(
    "--verbose", "-v", is_flag=True, help="Show detailed information"
)
cache_dir_option = click.option(
    "--cache-dir",
    type=click.Path(file_okay=False),
    help="Reuse schedules fetched earlier today from this directory",
)


@click.group()
@click.version_option(version="0.1.0")
def cli() -> None:
    """RTD Schedule - Extract transit schedules from RTD schedule pages."""
    pass


@cli.command()
@click.argument("html_file", type=click.Path(exists=True, dir_okay=False))
@format_option
@click.option(
    "--basic",
    is_flag=True,
    help="Extract the stop grid only, recording every cell",
)
@verbose_option
def extract(html_file: str, output_format: str, basic: bool, verbose: bool) -> None:
    """Extract a schedule from a saved schedule page.

    Examples:
        rtd-schedule extract route15.html
        rtd-schedule extract route15.html --format json
        rtd-schedule extract route15.html --basic
    """
    _configure_logging(verbose)
    try:
        html = Path(html_file).read_text(encoding="utf-8")

        if basic:
            extractor = ScheduleExtractor(variant=ExtractionVariant.BASIC)
            schedules = extractor.extract_grid(html)
            if output_format == "json":
                click.echo(format_grid_json(schedules))
            else:
                format_grid_table(schedules, verbose=verbose)
            return

        result = ScheduleExtractor().extract(html)
        _show_result(result, output_format, verbose)

    except Exception as e:
        _report_error(e, verbose)


@cli.command()
@click.argument("query")
@click.option(
    "--day",
    "-d",
    type=click.Choice(["today", "weekday", "saturday", "sunday", "holiday"]),
    default="today",
    help="Service day",
)
@click.option("--direction", help="Direction code to request, e.g. N or CW")
@format_option
@click.option("--timeout", "-t", default=30, help="Request timeout in seconds")
@click.option(
    "--save-html",
    help="Save raw HTML response to file for debugging",
    type=click.Path(),
)
@cache_dir_option
@verbose_option
def fetch(
    query: str,
    day: str,
    direction: str | None,
    output_format: str,
    timeout: int,
    save_html: str | None,
    cache_dir: str | None,
    verbose: bool,
) -> None:
    """Fetch a schedule page and extract its schedule.

    QUERY is the route query string listed by the routes command.

    Examples:
        rtd-schedule fetch "routeId=15"
        rtd-schedule fetch "routeId=B" --day saturday --direction E
    """
    _configure_logging(verbose)
    try:
        day_type = None if day == "today" else parse_day(day)

        with console.status(f"[bold green]Fetching schedule for {query}..."):
            client = RtdScheduleClient(timeout=timeout, cache_dir=cache_dir)
            result = client.get_schedule(
                query,
                day=day_type,
                direction=direction,
                save_html_path=save_html,
            )

        _show_result(result, output_format, verbose)

    except Exception as e:
        _report_error(e, verbose)


@cli.command()
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(["table", "json"]),
    default="table",
    help="Output format",
)
@click.option("--timeout", "-t", default=30, help="Request timeout in seconds")
@cache_dir_option
@verbose_option
def routes(
    output_format: str, timeout: int, cache_dir: str | None, verbose: bool
) -> None:
    """List routes and their schedule query strings."""
    _configure_logging(verbose)
    try:
        with console.status("[bold green]Fetching route list..."):
            route_list = RtdScheduleClient(
                timeout=timeout, cache_dir=cache_dir
            ).fetch_route_list()

        if output_format == "json":
            click.echo(format_route_list_json(route_list))
        else:
            format_route_list_table(route_list)

    except Exception as e:
        _report_error(e, verbose)


def _extract_file(html_file: str):
    return ScheduleExtractor().extract(Path(html_file).read_text(encoding="utf-8"))


@cli.command("next")
@click.argument("html_file", type=click.Path(exists=True, dir_okay=False))
@click.argument("station")
@click.option(
    "--at",
    "at_str",
    help="Earliest departure (YYYY-MM-DD HH:MM format), defaults to now",
    type=str,
)
@click.option("--count", "-n", default=4, help="Number of departures to show")
@click.option(
    "--route", "-r", "route_filter", multiple=True, help="Only show this route"
)
@click.option(
    "--tomorrow",
    "tomorrow_file",
    type=click.Path(exists=True, dir_okay=False),
    help="Saved schedule page for the next service day of HTML_FILE",
)
@click.option(
    "--also",
    "also",
    type=(click.Path(exists=True, dir_okay=False), str),
    multiple=True,
    help="Another schedule page and station to merge in",
)
@verbose_option
def next_departures(
    html_file: str,
    station: str,
    at_str: str | None,
    count: int,
    route_filter: tuple[str, ...],
    tomorrow_file: str | None,
    also: tuple[tuple[str, str], ...],
    verbose: bool,
) -> None:
    """Show the next departures from a station on a saved schedule page.

    Examples:
        rtd-schedule next route15.html "Colfax & Broadway"
        rtd-schedule next b.html "Boulder Transit Center" --route BX --count 2
        rtd-schedule next b.html "Union Station" --tomorrow b_saturday.html
        rtd-schedule next b.html "Union Station" --also 15.html "Union Station"
    """
    _configure_logging(verbose)
    try:
        after = dt_module.now().replace(second=0, microsecond=0)
        if at_str:
            try:
                after = dt_module.strptime(at_str, "%Y-%m-%d %H:%M")
            except ValueError as e:
                raise ValidationError(
                    "Invalid datetime format. Use YYYY-MM-DD HH:MM"
                ) from e

        wanted_routes = list(route_filter) or None
        queries = [
            StopQuery(
                _extract_file(html_file),
                station,
                routes=wanted_routes,
                tomorrow=_extract_file(tomorrow_file) if tomorrow_file else None,
            )
        ]
        for other_file, other_station in also:
            queries.append(
                StopQuery(
                    _extract_file(other_file), other_station, routes=wanted_routes
                )
            )

        stops = next_stops_for(queries, after, count=count)
        stations = list(dict.fromkeys(query.station for query in queries))
        format_next_stops(stops, ", ".join(stations))

    except Exception as e:
        _report_error(e, verbose)


@cli.group()
def config() -> None:
    """Configuration management."""
    pass


@config.command("show")
def show_config() -> None:
    """Show current configuration."""
    selectors = ScheduleSelectors()
    console.print("[bold]Current Configuration:[/bold]")
    console.print("• Default timeout: 30 seconds")
    console.print("• Default format: table")
    for name, value in selectors.model_dump().items():
        console.print(f"• {name}: {value}", markup=False)


if __name__ == "__main__":
    cli()
