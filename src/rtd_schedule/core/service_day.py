"""Service day types and the RTD holiday calendar."""

from datetime import date
from enum import IntEnum


class DayType(IntEnum):
    """Service types, valued by the code the schedule pages expect."""

    SATURDAY = 1
    SUNDAY_HOLIDAY = 2
    WEEKDAY = 3

    @property
    def label(self) -> str:
        return {
            DayType.SATURDAY: "Saturday",
            DayType.SUNDAY_HOLIDAY: "Sunday/Holiday",
            DayType.WEEKDAY: "Weekday",
        }[self]


DAY_NAMES = {
    "weekday": DayType.WEEKDAY,
    "saturday": DayType.SATURDAY,
    "sunday": DayType.SUNDAY_HOLIDAY,
    "holiday": DayType.SUNDAY_HOLIDAY,
}


def parse_day(name: str) -> DayType:
    """Map a day name to its service type; unknown names mean weekday."""
    return DAY_NAMES.get(name.strip().lower(), DayType.WEEKDAY)


def is_rtd_holiday(day: date) -> bool:
    """Check whether RTD runs its Sunday/Holiday service on ``day``."""
    month, dom, weekday = day.month, day.day, day.weekday()

    if (month, dom) in ((1, 1), (7, 4), (12, 25)):
        return True

    # Memorial Day: last Monday in May
    if month == 5 and weekday == 0 and dom > 24:
        return True

    # Labor Day: first Monday in September
    if month == 9 and weekday == 0 and dom < 8:
        return True

    # Thanksgiving: fourth Thursday in November
    if month == 11 and weekday == 3 and 21 < dom <= 28:
        return True

    return False


def day_type_for(day: date) -> DayType:
    """Return the service type running on ``day``."""
    if day.weekday() == 5:
        return DayType.SATURDAY
    if day.weekday() == 6 or is_rtd_holiday(day):
        return DayType.SUNDAY_HOLIDAY
    return DayType.WEEKDAY
