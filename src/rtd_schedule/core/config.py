"""Structural patterns used to locate schedule data on a page."""

from pydantic import BaseModel, Field

DEFAULT_VALID_AS_OF_PATTERN = r"Schedule effective as of ([A-Z][a-z]+ \d{1,2}, \d{4})"
DEFAULT_DIRECTION_PATTERNS = [
    r"(North|South|East|West) Bound",
    r"(Loop|Clockwise|Counterclockwise)",
]


class ScheduleSelectors(BaseModel):
    """CSS selectors and text patterns for one schedule page layout."""

    station: str = Field(
        "div.scheduleStations", description="Header cell holding a station label"
    )
    header_row: str = Field("tr.headrow", description="Row holding station labels")
    data_row: str = Field("tr.row", description="Row holding one trip")
    time_cell: str = Field(
        "div.scheduleTimesGrey",
        description="Cell holding a time or a route label, in data and header rows",
    )
    headline: str = Field(".headline", description="Free text block with the date")
    direction_cell: str = Field(
        ".headerHighlight", description="Cell naming a direction of travel"
    )
    no_stop: str = Field("--", description="Cell text for a run that skips a stop")
    valid_as_of_pattern: str = Field(
        DEFAULT_VALID_AS_OF_PATTERN,
        description="Regex whose first group is the validity date",
    )
    direction_patterns: list[str] = Field(
        default_factory=lambda: list(DEFAULT_DIRECTION_PATTERNS),
        description="Regexes tried in order; first group is the direction word",
    )
