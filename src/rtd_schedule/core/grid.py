"""Station registry and schedule grid walking."""

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field

from .config import ScheduleSelectors
from .exceptions import RowAlignmentError, StructuralError
from .models import Schedule, StopEntry
from .tree import ScheduleTree

logger = logging.getLogger(__name__)

RETURN_SUFFIX = "return"


class StationRegistry:
    """Ordered, duplicate-free list of station labels.

    The position of a label is the column it occupies in every data row. A
    label seen again is a return stop on the same line and is registered as
    "<label> (return)", then "<label> (return 2)" and so on.
    """

    def __init__(self) -> None:
        self._labels: list[str] = []

    def register(self, label: str) -> str:
        """Register ``label`` and return the key it was stored under."""
        key = label
        visit = 1
        while key in self._labels:
            suffix = RETURN_SUFFIX if visit == 1 else f"{RETURN_SUFFIX} {visit}"
            key = f"{label} ({suffix})"
            visit += 1
        self._labels.append(key)
        return key

    @property
    def labels(self) -> list[str]:
        return list(self._labels)

    def station_at(self, index: int, row_number: int = 0) -> str:
        """Return the station for column ``index`` of a data row."""
        if not 0 <= index < len(self._labels):
            raise RowAlignmentError(row_number, index, len(self._labels))
        return self._labels[index]

    def empty_schedule(self) -> Schedule:
        return {label: [] for label in self._labels}

    def __len__(self) -> int:
        return len(self._labels)

    def __iter__(self) -> Iterator[str]:
        return iter(self._labels)

    def __contains__(self, label: object) -> bool:
        return label in self._labels


def build_station_registry(
    tree: ScheduleTree, selectors: ScheduleSelectors
) -> StationRegistry:
    """Collect station labels from the header in document order."""
    registry = StationRegistry()
    for node in tree.select(selectors.station):
        label = tree.text(node)
        key = registry.register(label)
        if key != label:
            logger.debug(f"Station {label!r} repeats, registered as {key!r}")
    return registry


def detect_subroutes(
    tree: ScheduleTree, selectors: ScheduleSelectors, strict: bool = True
) -> bool:
    """Check whether data rows start with a route variant label.

    Args:
        tree: Parsed schedule page
        selectors: Patterns locating the header row and its cells
        strict: Require the header's first label cell to have text. When
            False, any label cell in the header row counts.

    Returns:
        True if each data row's first cell is a route label
    """
    pattern = f"{selectors.header_row} {selectors.time_cell}"
    if not strict:
        return tree.count(pattern) != 0

    first_cell = tree.first(pattern)
    return first_cell is not None and tree.text(first_cell) != ""


@dataclass
class GridScan:
    """Stops per station plus the route variants seen while walking rows."""

    schedules: Schedule
    subroutes: list[str] = field(default_factory=list)


class GridWalker:
    """Map the time cells of each data row onto the station registry."""

    def __init__(
        self,
        registry: StationRegistry,
        has_subroutes: bool,
        no_stop: str | None = "--",
    ):
        """Initialize the walker.

        Args:
            registry: Stations in column order
            has_subroutes: Whether each row starts with a route label cell
            no_stop: Cell text meaning the run skips the station, or None to
                record every cell
        """
        self.registry = registry
        self.has_subroutes = has_subroutes
        self.no_stop = no_stop

    def walk(self, tree: ScheduleTree, selectors: ScheduleSelectors) -> GridScan:
        """Walk all data rows.

        Raises:
            StructuralError: If a data row has no time cells
            RowAlignmentError: If a data row has more times than stations
        """
        scan = GridScan(schedules=self.registry.empty_schedule())

        rows = tree.select(selectors.data_row)
        for row_number, row in enumerate(rows, 1):
            cells = tree.select(selectors.time_cell, row)
            if not cells:
                raise StructuralError(f"no columns in row {row_number}")
            self._walk_row(tree, cells, row_number, scan)

        logger.info(
            f"Walked {len(rows)} rows across {len(self.registry)} stations"
            + (f", subroutes {scan.subroutes}" if scan.subroutes else "")
        )
        return scan

    def _walk_row(self, tree, cells, row_number: int, scan: GridScan) -> None:
        column = 0
        route: str | None = None
        label_consumed = not self.has_subroutes

        for cell in cells:
            text = tree.text(cell)

            if not label_consumed:
                label_consumed = True
                route = text or None
                if route and route not in scan.subroutes:
                    scan.subroutes.append(route)
                continue

            station = self.registry.station_at(column, row_number)
            column += 1
            if self.no_stop is not None and text == self.no_stop:
                continue
            scan.schedules[station].append(StopEntry(time=text, route=route))

        logger.debug(f"Row {row_number}: {column} columns, route {route}")
