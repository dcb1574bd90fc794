"""Schedule metadata recovered from free text on the page."""

import logging
import re
from dataclasses import dataclass, field

from .config import ScheduleSelectors
from .models import Direction, classify_direction
from .tree import ScheduleTree

logger = logging.getLogger(__name__)


@dataclass
class MetadataScan:
    """Outcome of scanning a page for metadata; unmatched fields stay None."""

    valid_as_of: str | None = None
    direction: str | None = None
    available_directions: str | None = None
    ambiguous_directions: list[str] = field(default_factory=list)

    def add_direction(self, code: Direction, linked: bool) -> None:
        """Record a recognized direction.

        Every code is offered as available. Only a direction shown without a
        link is the one the page currently displays; a later one replaces an
        earlier one.
        """
        if self.available_directions:
            self.available_directions += f"-{code.value}"
        else:
            self.available_directions = code.value

        if not linked:
            self.direction = code.value


def find_valid_as_of(tree: ScheduleTree, selectors: ScheduleSelectors) -> str | None:
    """Return the validity date from the first headline that states one."""
    pattern = re.compile(selectors.valid_as_of_pattern)
    for node in tree.select(selectors.headline):
        match = pattern.search(tree.text(node))
        if match:
            return match.group(1)
    return None


def match_direction_word(text: str, patterns: list[str]) -> str | None:
    """Return the direction word captured by the first matching pattern."""
    for pattern in patterns:
        match = re.search(pattern, text)
        if match:
            return match.group(1)
    return None


def extract_metadata(tree: ScheduleTree, selectors: ScheduleSelectors) -> MetadataScan:
    """Scan headline and direction cells for schedule metadata.

    Args:
        tree: Parsed schedule page
        selectors: Patterns locating the headline and direction cells

    Returns:
        MetadataScan with whatever could be matched
    """
    scan = MetadataScan(valid_as_of=find_valid_as_of(tree, selectors))

    for node in tree.select(selectors.direction_cell):
        word = match_direction_word(tree.text(node), selectors.direction_patterns)
        if word is None:
            continue

        code = classify_direction(word)
        if code is Direction.UNRECOGNIZED:
            logger.warning(f"Unrecognized direction word: {word!r}")
            scan.ambiguous_directions.append(word)
            continue

        scan.add_direction(code, linked=tree.has_links(node))

    logger.info(
        f"Metadata: valid as of {scan.valid_as_of}, direction {scan.direction}, "
        f"available {scan.available_directions}"
    )
    return scan
