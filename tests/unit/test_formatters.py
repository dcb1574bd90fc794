"""Unit tests for CLI formatters."""

import json
from datetime import datetime
from io import StringIO
from unittest.mock import patch

from rich.console import Console

from rtd_schedule.cli.formatters import (
    format_grid_json,
    format_grid_table,
    format_next_stops,
    format_route_list_json,
    format_route_list_table,
    format_schedule_detailed,
    format_schedule_json,
    format_schedule_table,
)
from rtd_schedule.core.models import ScheduleResult, StopEntry, UpcomingStop


class TestFormatters:
    """Test CLI formatters."""

    def setup_method(self):
        """Set up test fixtures."""
        self.sample_result = ScheduleResult(
            valid_as_of="January 5, 2024",
            direction="S",
            available_directions="N-S",
            subroutes=["B", "BX"],
            schedules={
                "Main St": [
                    StopEntry(time="8:00", route="B"),
                    StopEntry(time="8:30", route="BX"),
                ],
                "Oak Ave": [],
            },
        )

    def test_format_schedule_table(self):
        console = Console(file=StringIO(), width=120)
        with patch("rtd_schedule.cli.formatters.console", console):
            format_schedule_table(self.sample_result)
            output = console.file.getvalue()

        assert "Schedule: S" in output
        assert "January 5, 2024" in output
        assert "N-S" in output
        assert "B, BX" in output
        assert "8:00 (B)" in output
        assert "8:30 (BX)" in output
        assert "Unrecognized directions" not in output

    def test_format_schedule_table_verbose(self):
        console = Console(file=StringIO(), width=120)
        with patch("rtd_schedule.cli.formatters.console", console):
            format_schedule_table(self.sample_result, verbose=True)
            output = console.file.getvalue()

        assert "Times" in output
        assert "8:00 (B), 8:30 (BX)" in output

    def test_format_schedule_table_ambiguous_directions(self):
        result = self.sample_result.model_copy(
            update={"ambiguous_directions": ["Inner"]}
        )
        console = Console(file=StringIO(), width=120)
        with patch("rtd_schedule.cli.formatters.console", console):
            format_schedule_table(result)
            output = console.file.getvalue()

        assert "Unrecognized directions" in output
        assert "Inner" in output

    def test_format_grid_table_empty(self):
        console = Console(file=StringIO())
        with patch("rtd_schedule.cli.formatters.console", console):
            format_grid_table({})
            output = console.file.getvalue()

        assert "No stations found." in output

    def test_format_schedule_detailed(self):
        console = Console(file=StringIO(), width=120)
        with patch("rtd_schedule.cli.formatters.console", console):
            format_schedule_detailed(self.sample_result)
            output = console.file.getvalue()

        assert "Schedule Summary" in output
        assert "Valid as of: January 5, 2024" in output
        assert "Direction: S" in output
        assert "1. Main St" in output
        assert "2. Oak Ave" in output

    def test_format_schedule_json(self):
        data = json.loads(format_schedule_json(self.sample_result))
        assert data["validAsOf"] == "January 5, 2024"
        assert data["schedules"]["Main St"][1] == {"time": "8:30", "route": "BX"}
        assert data["schedules"]["Oak Ave"] == []

    def test_format_grid_json(self):
        data = json.loads(
            format_grid_json({"Main St": [StopEntry(time="8:00")], "Oak Ave": []})
        )
        assert data == {"Main St": [{"time": "8:00"}], "Oak Ave": []}

    def test_format_route_list(self):
        routes = {"15L": "routeId=15L", "0": "routeId=0"}
        console = Console(file=StringIO())
        with patch("rtd_schedule.cli.formatters.console", console):
            format_route_list_table(routes)
            output = console.file.getvalue()

        assert output.index("routeId=0") < output.index("routeId=15L")
        assert json.loads(format_route_list_json(routes)) == routes

    def test_format_route_list_empty(self):
        console = Console(file=StringIO())
        with patch("rtd_schedule.cli.formatters.console", console):
            format_route_list_table({})
            output = console.file.getvalue()

        assert "No routes found." in output

    def test_format_next_stops(self):
        stops = [
            UpcomingStop(
                station="Main St", departure=datetime(2024, 1, 10, 8, 0), route="B"
            ),
            UpcomingStop(station="Main St", departure=datetime(2024, 1, 11, 0, 20)),
        ]
        console = Console(file=StringIO(), width=120)
        with patch("rtd_schedule.cli.formatters.console", console):
            format_next_stops(stops, "Main St")
            output = console.file.getvalue()

        assert "Next departures: Main St" in output
        assert "Wed 08:00" in output
        assert "Thu 00:20" in output

    def test_format_next_stops_several_stations(self):
        stops = [
            UpcomingStop(
                station="Main St", departure=datetime(2024, 1, 10, 8, 0), route="B"
            ),
            UpcomingStop(
                station="Oak Ave", departure=datetime(2024, 1, 10, 8, 5), route="15"
            ),
        ]
        console = Console(file=StringIO(), width=120)
        with patch("rtd_schedule.cli.formatters.console", console):
            format_next_stops(stops, "Main St, Oak Ave")
            output = console.file.getvalue()

        assert "Station" in output
        assert "Oak Ave" in output
        assert "Wed 08:05" in output

    def test_format_next_stops_none(self):
        console = Console(file=StringIO())
        with patch("rtd_schedule.cli.formatters.console", console):
            format_next_stops([], "Main St")
            output = console.file.getvalue()

        assert "No more departures from Main St." in output
