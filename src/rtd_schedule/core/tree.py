"""Read-only query access to a parsed schedule page."""

from bs4 import BeautifulSoup, Tag

# Elements that only pull in external resources.
RESOURCE_SELECTORS = ["link", "script[src]", "object", "img", "embed"]


class ScheduleTree:
    """Query a parsed schedule page by CSS selector."""

    def __init__(self, soup: BeautifulSoup):
        self.soup = soup

    @classmethod
    def from_html(cls, html: str) -> "ScheduleTree":
        """Parse HTML text, dropping elements that reference external resources."""
        soup = BeautifulSoup(html, "html.parser")
        for selector in RESOURCE_SELECTORS:
            for element in soup.select(selector):
                element.decompose()
        return cls(soup)

    def select(self, pattern: str, context: Tag | None = None) -> list[Tag]:
        """Return nodes matching ``pattern`` in document order."""
        scope = self.soup if context is None else context
        return scope.select(pattern)

    def first(self, pattern: str, context: Tag | None = None) -> Tag | None:
        """Return the first node matching ``pattern``, if any."""
        scope = self.soup if context is None else context
        return scope.select_one(pattern)

    def count(self, pattern: str, context: Tag | None = None) -> int:
        return len(self.select(pattern, context))

    @staticmethod
    def text(node: Tag) -> str:
        """Text content of ``node`` with whitespace runs collapsed."""
        return " ".join(node.get_text().split())

    @staticmethod
    def has_links(node: Tag) -> bool:
        return node.find("a") is not None
