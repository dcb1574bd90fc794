"""Schedule extraction from RTD schedule pages."""

import logging
from enum import Enum

from .config import ScheduleSelectors
from .exceptions import UnresolvedMetadataError
from .grid import GridScan, GridWalker, build_station_registry, detect_subroutes
from .metadata import extract_metadata
from .models import Schedule, ScheduleResult
from .tree import ScheduleTree

logger = logging.getLogger(__name__)


class ExtractionVariant(str, Enum):
    """Extraction rule sets.

    BASIC reads the grid only, treats any header label cell as a sign of
    route variants and records every cell. FULL also reads page metadata,
    requires the header label cell to have text and skips "no stop" cells.
    """

    BASIC = "basic"
    FULL = "full"


class ScheduleExtractor:
    """Extract a schedule grid and its metadata from a parsed page."""

    def __init__(
        self,
        selectors: ScheduleSelectors | None = None,
        variant: ExtractionVariant = ExtractionVariant.FULL,
    ):
        """Initialize the extractor.

        Args:
            selectors: Page layout patterns, defaults to the RTD layout
            variant: Which extraction rules to apply
        """
        self.selectors = selectors or ScheduleSelectors()
        self.variant = variant

    def _tree(self, source: str | ScheduleTree) -> ScheduleTree:
        if isinstance(source, ScheduleTree):
            return source
        return ScheduleTree.from_html(source)

    def _scan_grid(self, tree: ScheduleTree) -> GridScan:
        full = self.variant is ExtractionVariant.FULL
        registry = build_station_registry(tree, self.selectors)
        has_subroutes = detect_subroutes(tree, self.selectors, strict=full)
        walker = GridWalker(
            registry,
            has_subroutes=has_subroutes,
            no_stop=self.selectors.no_stop if full else None,
        )
        return walker.walk(tree, self.selectors)

    def extract_grid(self, source: str | ScheduleTree) -> Schedule:
        """Extract stops per station without page metadata.

        Raises:
            StructuralError: If the grid is malformed
        """
        return self._scan_grid(self._tree(source)).schedules

    def extract(self, source: str | ScheduleTree) -> ScheduleResult:
        """Extract the complete schedule.

        Args:
            source: HTML text or an already parsed page

        Returns:
            ScheduleResult with stops and metadata

        Raises:
            StructuralError: If the grid is malformed
            UnresolvedMetadataError: If required fields are missing or no
                station has any stops
        """
        tree = self._tree(source)
        metadata = extract_metadata(tree, self.selectors)
        grid = self._scan_grid(tree)

        missing = []
        if metadata.valid_as_of is None:
            missing.append("valid as of date")
        if metadata.direction is None:
            missing.append("direction")
        if metadata.available_directions is None:
            missing.append("available directions")
        if not any(grid.schedules.values()):
            missing.append("schedule entries")
        if missing:
            raise UnresolvedMetadataError(missing)

        return ScheduleResult(
            valid_as_of=metadata.valid_as_of,
            direction=metadata.direction,
            available_directions=metadata.available_directions,
            subroutes=grid.subroutes,
            ambiguous_directions=metadata.ambiguous_directions,
            schedules=grid.schedules,
        )


def parse_schedule(
    html: str, selectors: ScheduleSelectors | None = None
) -> ScheduleResult | None:
    """Extract a schedule, returning None when the page lacks required data.

    Structural errors in the grid still propagate.
    """
    try:
        return ScheduleExtractor(selectors).extract(html)
    except UnresolvedMetadataError as e:
        logger.info(f"No schedule extracted: {e}")
        return None
