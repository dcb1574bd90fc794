"""Parser for the route menu served alongside the schedule pages."""

import re

# Each menu item is a JavaScript object literal: { text: "15L", url: "...?routeId=15L" }
TEXT_PATTERN = re.compile(r'text:\s*"([^"]*)"')
URL_PATTERN = re.compile(r'url:\s*"([^"]*)"')


def parse_route_list(menu: str) -> dict[str, str]:
    """Parse the route menu data into route name -> schedule query string.

    Args:
        menu: JavaScript source backing the schedule menu

    Returns:
        Mapping of route name to the query string following "?" in its URL.
        Items whose URL has no query are skipped; scanning stops at the first
        item without a URL.
    """
    routes: dict[str, str] = {}
    position = 0

    while True:
        text_match = TEXT_PATTERN.search(menu, position)
        if not text_match:
            break

        url_match = URL_PATTERN.search(menu, text_match.end())
        if not url_match:
            break

        _, sep, query = url_match.group(1).partition("?")
        if sep and query:
            routes[text_match.group(1)] = query

        position = url_match.end()

    return routes
