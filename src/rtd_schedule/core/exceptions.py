"""Custom exceptions for RTD schedule extraction."""


class ScheduleError(Exception):
    """Base exception for schedule extraction errors."""

    pass


class StructuralError(ScheduleError):
    """Raised when the schedule grid does not have the expected shape."""

    pass


class RowAlignmentError(StructuralError):
    """Raised when a data row has more time cells than there are stations."""

    def __init__(self, row_number: int, column: int, station_count: int):
        self.row_number = row_number
        self.column = column
        self.station_count = station_count
        super().__init__(
            f"Row {row_number} has a time in column {column + 1} "
            f"but only {station_count} stations are listed"
        )


class UnresolvedMetadataError(ScheduleError):
    """Raised when required schedule fields could not be found on the page."""

    def __init__(self, missing: list[str]):
        self.missing = missing
        super().__init__(f"Could not resolve: {', '.join(missing)}")


class NetworkError(ScheduleError):
    """Raised when there's a network-related error."""

    pass


class ValidationError(ScheduleError):
    """Raised when input validation fails."""

    pass
