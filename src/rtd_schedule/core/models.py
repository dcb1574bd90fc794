"""Data models for RTD schedule extraction."""

from datetime import date, datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class Direction(str, Enum):
    """Direction of travel codes."""

    NORTH = "N"
    SOUTH = "S"
    EAST = "E"
    WEST = "W"
    LOOP = "Loop"
    CLOCKWISE = "CW"
    COUNTERCLOCKWISE = "CCW"
    UNRECOGNIZED = "?"


DIRECTION_WORDS = {
    "North": Direction.NORTH,
    "South": Direction.SOUTH,
    "East": Direction.EAST,
    "West": Direction.WEST,
    "Loop": Direction.LOOP,
    "Clockwise": Direction.CLOCKWISE,
    "Counterclockwise": Direction.COUNTERCLOCKWISE,
}


def classify_direction(word: str) -> Direction:
    """Map a direction word from the page to its code."""
    return DIRECTION_WORDS.get(word.strip(), Direction.UNRECOGNIZED)


class StopEntry(BaseModel):
    """A single scheduled stop at a station."""

    time: str = Field(..., description="Time as displayed on the page")
    route: str | None = Field(None, description="Route variant serving this stop")

    def __str__(self) -> str:
        return f"{self.time} ({self.route})" if self.route else self.time


Schedule = dict[str, list[StopEntry]]


class ScheduleMetadata(BaseModel):
    """Page-level information about a schedule."""

    valid_as_of: str = Field(..., description="Date the schedule took effect")
    direction: str = Field(..., description="Direction code shown on the page")
    available_directions: str = Field(
        ..., description="Hyphen-joined direction codes offered by the page"
    )
    subroutes: list[str] = Field(
        default_factory=list, description="Route variants seen in the grid"
    )
    ambiguous_directions: list[str] = Field(
        default_factory=list, description="Direction words that could not be mapped"
    )


class ScheduleResult(ScheduleMetadata):
    """A complete schedule extracted from one page."""

    schedules: Schedule = Field(
        default_factory=dict, description="Stops per station, in departure order"
    )

    def __str__(self) -> str:
        return (
            f"{self.direction} schedule, {len(self.schedules)} stations "
            f"(effective {self.valid_as_of})"
        )

    @property
    def station_names(self) -> list[str]:
        """Station labels in header order."""
        return list(self.schedules)

    @property
    def direction_codes(self) -> list[str]:
        """Available direction codes as a list."""
        return [code for code in self.available_directions.split("-") if code]

    @property
    def valid_as_of_date(self) -> date | None:
        """Validity date parsed from text like 'January 5, 2024'."""
        try:
            return datetime.strptime(self.valid_as_of, "%B %d, %Y").date()
        except ValueError:
            return None

    def to_dict(self) -> dict[str, Any]:
        """Convert to the camelCase structure the schedule engine exposes."""
        return {
            "validAsOf": self.valid_as_of,
            "schedules": {
                station: [entry.model_dump(exclude_none=True) for entry in entries]
                for station, entries in self.schedules.items()
            },
            "subroutes": list(self.subroutes),
            "direction": self.direction,
            "availableDirections": self.available_directions,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ScheduleResult":
        """Build a result from the structure produced by to_dict."""
        return cls(
            valid_as_of=data["validAsOf"],
            direction=data["direction"],
            available_directions=data["availableDirections"],
            subroutes=data.get("subroutes", []),
            schedules={
                station: [StopEntry(**entry) for entry in entries]
                for station, entries in data["schedules"].items()
            },
        )


class UpcomingStop(BaseModel):
    """A departure from a station at a concrete date and time."""

    station: str = Field(..., description="Station label")
    departure: datetime = Field(..., description="Departure date and time")
    route: str | None = Field(None, description="Route variant, if any")

    def __str__(self) -> str:
        when = self.departure.strftime("%H:%M")
        return f"{when} {self.route}" if self.route else when
