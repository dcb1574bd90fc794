"""Upcoming departures from extracted schedules."""

import re
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta

from .exceptions import ValidationError
from .models import ScheduleResult, StopEntry, UpcomingStop

# Times like "8:05", "14:30", "8:05A", "12:15 PM"
TIME_PATTERN = re.compile(r"^(\d{1,2}):(\d{2})\s*(?:([AaPp])\.?[Mm]?\.?)?$")


def parse_stop_time(text: str) -> time | None:
    """Parse displayed stop time text, returning None for non-time tokens.

    Without an A/P suffix the text is read as a 24-hour time.
    """
    match = TIME_PATTERN.match(text.strip())
    if not match:
        return None

    hour, minute = int(match.group(1)), int(match.group(2))
    meridiem = match.group(3)
    if minute > 59:
        return None

    if meridiem:
        if not 1 <= hour <= 12:
            return None
        hour = hour % 12 + (12 if meridiem.lower() == "p" else 0)
    elif hour > 23:
        return None

    return time(hour, minute)


def _has_meridiem(text: str) -> bool:
    match = TIME_PATTERN.match(text.strip())
    return bool(match and match.group(3))


def _twelve_hour_reading(stop_time: time, previous: time) -> time:
    """Pick the reading of a bare 12-hour time that follows ``previous``."""
    if stop_time.hour == 12:
        hours = [0, 12]
    elif 1 <= stop_time.hour <= 11:
        hours = [stop_time.hour, stop_time.hour + 12]
    else:
        return stop_time

    candidates = [stop_time.replace(hour=hour) for hour in hours]
    for candidate in candidates:
        if candidate >= previous:
            return candidate
    return candidates[0]


def resolve_column(entries: list[StopEntry]) -> list[tuple[StopEntry, int, time]]:
    """Place a station's stops on the clock.

    Returns ``(entry, day_offset, time)`` for every entry that holds a time.
    A time earlier than the one before it starts the next day.

    Bare times such as "1:00" are 24-hour times, unless some entry in the
    same column carries an A/P suffix. The column is then a 12-hour one and
    a bare time takes the AM or PM reading that comes next after the
    previous stop.
    """
    twelve_hour = any(_has_meridiem(entry.time) for entry in entries)
    previous: time | None = None
    day_offset = 0
    resolved = []

    for entry in entries:
        stop_time = parse_stop_time(entry.time)
        if stop_time is None:
            continue
        if twelve_hour and previous is not None and not _has_meridiem(entry.time):
            stop_time = _twelve_hour_reading(stop_time, previous)
        if previous is not None and stop_time < previous:
            day_offset += 1
        previous = stop_time
        resolved.append((entry, day_offset, stop_time))

    return resolved


@dataclass
class StopQuery:
    """A station on one schedule whose departures are wanted.

    ``tomorrow`` is the schedule running the following day, for example the
    Saturday schedule of the same route when asking on a Friday.
    """

    result: ScheduleResult
    station: str
    routes: list[str] | None = None
    tomorrow: ScheduleResult | None = None


def _departures(
    result: ScheduleResult,
    station: str,
    service_date: date,
    routes: list[str] | None,
) -> list[UpcomingStop]:
    if station not in result.schedules:
        raise ValidationError(f"Unknown station: {station}")

    departures = []
    for entry, day_offset, stop_time in resolve_column(result.schedules[station]):
        if routes and entry.route not in routes:
            continue
        departures.append(
            UpcomingStop(
                station=station,
                departure=datetime.combine(
                    service_date + timedelta(days=day_offset), stop_time
                ),
                route=entry.route,
            )
        )
    return departures


def next_stops_for(
    queries: list[StopQuery], after: datetime, count: int = 4
) -> list[UpcomingStop]:
    """Merge the next departures of several stations and routes.

    Each query's schedule runs on the date of ``after``. When a query has a
    ``tomorrow`` schedule, its stops are added on the following date, so the
    search continues past the end of today's service.

    Raises:
        ValidationError: If a station is not in its schedule
    """
    service_date = after.date()
    upcoming: list[UpcomingStop] = []

    for query in queries:
        upcoming.extend(
            _departures(query.result, query.station, service_date, query.routes)
        )
        if query.tomorrow is not None:
            upcoming.extend(
                _departures(
                    query.tomorrow,
                    query.station,
                    service_date + timedelta(days=1),
                    query.routes,
                )
            )

    upcoming = [stop for stop in upcoming if stop.departure >= after]
    upcoming.sort(key=lambda stop: (stop.departure, stop.station, stop.route or ""))
    return upcoming[:count]


def next_stops(
    result: ScheduleResult,
    station: str,
    after: datetime,
    count: int = 4,
    routes: list[str] | None = None,
    tomorrow: ScheduleResult | None = None,
) -> list[UpcomingStop]:
    """Find the next departures from a station.

    Stops are assigned to the service day of ``after``; a time earlier than
    the one before it belongs to the following day.

    Args:
        result: Extracted schedule
        station: Station label as it appears in the schedule
        after: Earliest departure to include
        count: Maximum number of departures to return
        routes: Only include these route variants
        tomorrow: Schedule for the next service day, if known

    Returns:
        Up to ``count`` departures in time order

    Raises:
        ValidationError: If the station is not in the schedule
    """
    return next_stops_for(
        [StopQuery(result, station, routes=routes, tomorrow=tomorrow)],
        after,
        count=count,
    )
