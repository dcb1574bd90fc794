"""Output formatters for CLI display."""

import json

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ..core.models import Schedule, ScheduleResult, UpcomingStop

console = Console()


def _format_stops(entries) -> str:
    return ", ".join(str(entry) for entry in entries) or "-"


def format_grid_table(schedules: Schedule, verbose: bool = False) -> None:
    """Display stops per station as a rich table."""
    if not schedules:
        console.print("No stations found.")
        return

    table = Table(title="Stops", show_header=True, header_style="bold blue")
    table.add_column("Station", style="cyan", no_wrap=True)
    table.add_column("Stops", style="green", justify="right")
    table.add_column("First", style="magenta")
    table.add_column("Last", style="magenta")
    if verbose:
        table.add_column("Times", style="yellow")

    for station, entries in schedules.items():
        row_data = [
            station,
            str(len(entries)),
            str(entries[0]) if entries else "-",
            str(entries[-1]) if entries else "-",
        ]
        if verbose:
            row_data.append(_format_stops(entries))
        table.add_row(*row_data)

    console.print(table)


def format_schedule_table(result: ScheduleResult, verbose: bool = False) -> None:
    """Display a schedule summary and its stops as rich tables."""
    table = Table(
        title=f"Schedule: {result.direction}",
        show_header=True,
        header_style="bold magenta",
    )
    table.add_column("Property", style="cyan", no_wrap=True)
    table.add_column("Value", style="green")

    table.add_row("Valid as of", result.valid_as_of)
    table.add_row("Direction", result.direction)
    table.add_row("Available directions", result.available_directions)
    table.add_row("Subroutes", ", ".join(result.subroutes) or "-")
    table.add_row("Stations", str(len(result.schedules)))
    if result.ambiguous_directions:
        table.add_row(
            "Unrecognized directions", ", ".join(result.ambiguous_directions)
        )

    console.print(table)
    console.print()
    format_grid_table(result.schedules, verbose=verbose)


def format_schedule_detailed(result: ScheduleResult) -> None:
    """Display a schedule with every stop per station."""
    summary_text = f"""[bold]Valid as of:[/bold] {result.valid_as_of}
[bold]Direction:[/bold] {result.direction}
[bold]Available directions:[/bold] {result.available_directions}
[bold]Subroutes:[/bold] {", ".join(result.subroutes) or "-"}"""

    console.print(Panel(summary_text, title="Schedule Summary", border_style="blue"))

    if not result.schedules:
        return

    console.print()
    console.print("[bold]Stations:[/bold]")
    for i, (station, entries) in enumerate(result.schedules.items(), 1):
        console.print(
            Panel(_format_stops(entries), title=f"{i}. {station}", border_style="green")
        )


def format_schedule_json(result: ScheduleResult) -> str:
    """Format a schedule as JSON."""
    return json.dumps(result.to_dict(), ensure_ascii=False, indent=2)


def format_grid_json(schedules: Schedule) -> str:
    """Format stops per station as JSON."""
    schedules_data = {
        station: [entry.model_dump(exclude_none=True) for entry in entries]
        for station, entries in schedules.items()
    }
    return json.dumps(schedules_data, ensure_ascii=False, indent=2)


def format_route_list_table(routes: dict[str, str]) -> None:
    """Display available routes as a table."""
    if not routes:
        console.print("No routes found.")
        return

    table = Table(title="Routes", show_header=True, header_style="bold magenta")
    table.add_column("Route", style="cyan", no_wrap=True)
    table.add_column("Query", style="green")

    for name, query in sorted(routes.items()):
        table.add_row(name, query)

    console.print(table)


def format_route_list_json(routes: dict[str, str]) -> str:
    """Format available routes as JSON."""
    return json.dumps(routes, ensure_ascii=False, indent=2, sort_keys=True)


def format_next_stops(stops: list[UpcomingStop], station: str) -> None:
    """Display upcoming departures from a station."""
    if not stops:
        console.print(f"No more departures from {station}.")
        return

    table = Table(
        title=f"Next departures: {station}",
        show_header=True,
        header_style="bold magenta",
    )
    show_station = len({stop.station for stop in stops}) > 1
    if show_station:
        table.add_column("Station", style="yellow")
    table.add_column("Route", style="cyan")
    table.add_column("Departs", style="green")

    for stop in stops:
        row = [stop.route or "-", stop.departure.strftime("%a %H:%M")]
        if show_station:
            row.insert(0, stop.station)
        table.add_row(*row)

    console.print(table)
