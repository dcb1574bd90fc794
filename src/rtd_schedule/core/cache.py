"""On-disk cache of extracted schedules and the route list."""

import json
import logging
import re
from datetime import date
from pathlib import Path
from typing import Any

from .models import ScheduleResult
from .service_day import DayType

logger = logging.getLogger(__name__)

ROUTE_LIST_FILE = "routes.json"


class ScheduleCache:
    """Store schedules as JSON files, one per route, service day and direction.

    An entry is served only on the day it was fetched. Schedules change
    when a new one takes effect, so each day the first request goes back to
    the site and refreshes the entry.
    """

    def __init__(self, cache_dir: str | Path):
        self.cache_dir = Path(cache_dir)

    def schedule_path(self, query: str, day: DayType, direction: str | None) -> Path:
        """Return the file holding one schedule."""
        route_key = re.sub(r"[^A-Za-z0-9]+", "_", query).strip("_")
        return self.cache_dir / f"{route_key}-{int(day)}-{direction or 'default'}.json"

    def _read(self, path: Path) -> dict[str, Any] | None:
        if not path.exists():
            return None

        try:
            with open(path, encoding="utf-8") as f:
                entry = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning(f"Failed to load cache entry {path}: {e}")
            return None

        if entry.get("checked_on") != date.today().isoformat():
            logger.info(f"Cache entry {path} is from {entry.get('checked_on')}")
            return None
        return entry

    def _write(self, path: Path, entry: dict[str, Any]) -> None:
        entry["checked_on"] = date.today().isoformat()
        try:
            self.cache_dir.mkdir(parents=True, exist_ok=True)
            with open(path, "w", encoding="utf-8") as f:
                json.dump(entry, f, indent=2, ensure_ascii=False)
        except OSError as e:
            logger.warning(f"Failed to save cache entry {path}: {e}")

    def load_schedule(
        self, query: str, day: DayType, direction: str | None
    ) -> ScheduleResult | None:
        """Return today's cached schedule, if any."""
        entry = self._read(self.schedule_path(query, day, direction))
        if entry is None:
            return None

        result = ScheduleResult.from_dict(entry["schedule"])
        result.ambiguous_directions = entry.get("ambiguous_directions", [])
        logger.info(f"Using cached schedule for {query} (valid as of {result.valid_as_of})")
        return result

    def save_schedule(
        self, query: str, day: DayType, direction: str | None, result: ScheduleResult
    ) -> None:
        previous = self._read_any(self.schedule_path(query, day, direction))
        if previous and previous["schedule"].get("validAsOf") != result.valid_as_of:
            logger.info(
                f"Schedule for {query} changed: valid as of {result.valid_as_of}"
            )

        self._write(
            self.schedule_path(query, day, direction),
            {
                "schedule": result.to_dict(),
                "ambiguous_directions": list(result.ambiguous_directions),
            },
        )

    def _read_any(self, path: Path) -> dict[str, Any] | None:
        try:
            with open(path, encoding="utf-8") as f:
                return json.load(f)
        except (OSError, ValueError):
            return None

    def load_route_list(self) -> dict[str, str] | None:
        entry = self._read(self.cache_dir / ROUTE_LIST_FILE)
        return None if entry is None else entry["routes"]

    def save_route_list(self, routes: dict[str, str]) -> None:
        self._write(self.cache_dir / ROUTE_LIST_FILE, {"routes": routes})
