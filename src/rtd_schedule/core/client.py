"""HTTP client for RTD schedule pages."""

import logging
from datetime import date

import requests
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential

from .cache import ScheduleCache
from .config import ScheduleSelectors
from .exceptions import NetworkError, ValidationError
from .extractor import ScheduleExtractor
from .models import ScheduleResult
from .routes import parse_route_list
from .service_day import DayType, day_type_for

logger = logging.getLogger(__name__)

BASE_URL = "http://www3.rtd-denver.com/schedules"


class RtdScheduleClient:
    """Fetch RTD schedule pages and extract their schedules."""

    def __init__(
        self,
        timeout: int = 30,
        base_url: str = BASE_URL,
        selectors: ScheduleSelectors | None = None,
        cache_dir: str | None = None,
    ):
        """Initialize the client.

        Args:
            timeout: Request timeout in seconds
            base_url: Root of the schedule site
            selectors: Page layout patterns passed to the extractor
            cache_dir: Directory for cached schedules and the route list
        """
        self.timeout = timeout
        self.base_url = base_url.rstrip("/")
        self.extractor = ScheduleExtractor(selectors)
        self.cache = ScheduleCache(cache_dir) if cache_dir else None
        self.session = requests.Session()
        self.session.headers.update(
            {
                "User-Agent": "Mozilla/5.0 (X11; Linux x86_64) rtd-schedule/0.1.0",
                "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
                "Accept-Language": "en-US,en;q=0.9",
            }
        )

    def schedule_url(
        self, query: str, day: DayType, direction: str | None = None
    ) -> str:
        """Build the schedule page URL for a route query."""
        url = f"{self.base_url}/getSchedule.action?{query}&serviceType={int(day)}"
        if direction:
            url += f"&direction={direction}"
        return url

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=4, max=10),
        retry=retry_if_exception_type(NetworkError),
        reraise=True,
    )
    def _get(self, url: str) -> str:
        try:
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
            return response.text
        except requests.exceptions.RequestException as e:
            raise NetworkError(f"Failed to fetch {url}: {str(e)}") from e

    def fetch_schedule_page(
        self, query: str, day: DayType, direction: str | None = None
    ) -> str:
        """Fetch the HTML of one schedule page.

        Raises:
            ValidationError: If the route query is empty
            NetworkError: If the request fails
        """
        if not query or not query.strip():
            raise ValidationError("Route query cannot be empty")

        url = self.schedule_url(query.strip(), day, direction)
        logger.info(f"Fetching schedule page: {url}")
        return self._get(url)

    def fetch_route_list(self) -> dict[str, str]:
        """Fetch the route menu and return route name -> schedule query."""
        if self.cache:
            cached = self.cache.load_route_list()
            if cached is not None:
                return cached

        url = f"{self.base_url}/ajax/getAjaxRouteMenu.action"
        logger.info(f"Fetching route list: {url}")
        routes = parse_route_list(self._get(url))
        logger.info(f"Found {len(routes)} routes")

        if self.cache:
            self.cache.save_route_list(routes)
        return routes

    def get_schedule(
        self,
        query: str,
        day: DayType | None = None,
        direction: str | None = None,
        save_html_path: str | None = None,
    ) -> ScheduleResult:
        """Fetch a schedule page and extract its schedule.

        Args:
            query: Route query string, as returned by fetch_route_list
            day: Service type, defaults to the one running today
            direction: Direction code to request
            save_html_path: Optional path to save raw HTML for debugging

        Returns:
            Extracted schedule

        Raises:
            ValidationError: If the route query is empty
            NetworkError: If the request fails
            StructuralError: If the schedule grid is malformed
            UnresolvedMetadataError: If the page lacks required data
        """
        if day is None:
            day = day_type_for(date.today())

        if self.cache and not save_html_path:
            cached = self.cache.load_schedule(query, day, direction)
            if cached is not None:
                return cached

        html_content = self.fetch_schedule_page(query, day, direction)

        if save_html_path:
            with open(save_html_path, "w", encoding="utf-8") as f:
                f.write(html_content)

        result = self.extractor.extract(html_content)
        if self.cache:
            self.cache.save_schedule(query, day, direction, result)
        return result
