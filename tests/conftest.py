"""Test configuration and fixtures."""

import pytest


@pytest.fixture
def sample_schedule_html():
    """Sample RTD schedule page with route variants and a return stop."""
    return """
    <html>
    <head>
        <link rel="stylesheet" href="/schedules/css/rtd.css">
        <script src="/schedules/js/menu.js"></script>
    </head>
    <body>
        <img src="/images/logo.gif">
        <p class="headline">Route B/BX/BF Boulder/Denver</p>
        <p class="headline">Schedule effective as of January 5, 2024</p>
        <table>
            <tr>
                <td class="headerHighlight"><a href="getSchedule.action?routeId=B&amp;direction=W">West Bound</a></td>
                <td class="headerHighlight">East Bound</td>
            </tr>
        </table>
        <table>
            <tr class="headrow">
                <td><div class="scheduleTimesGrey">Route</div></td>
                <td><div class="scheduleStations">Boulder Transit Center</div></td>
                <td><div class="scheduleStations">Table Mesa</div></td>
                <td><div class="scheduleStations">Union Station</div></td>
                <td><div class="scheduleStations">Table Mesa</div></td>
            </tr>
            <tr class="row">
                <td><div class="scheduleTimesGrey">B</div></td>
                <td><div class="scheduleTimesGrey">5:10A</div></td>
                <td><div class="scheduleTimesGrey">5:25A</div></td>
                <td><div class="scheduleTimesGrey">6:05A</div></td>
                <td><div class="scheduleTimesGrey">6:40A</div></td>
            </tr>
            <tr class="row">
                <td><div class="scheduleTimesGrey">BX</div></td>
                <td><div class="scheduleTimesGrey">5:40A</div></td>
                <td><div class="scheduleTimesGrey">--</div></td>
                <td><div class="scheduleTimesGrey">6:20A</div></td>
                <td><div class="scheduleTimesGrey">6:55A</div></td>
            </tr>
            <tr class="row">
                <td><div class="scheduleTimesGrey">B</div></td>
                <td><div class="scheduleTimesGrey">6:10A</div></td>
                <td><div class="scheduleTimesGrey">6:25A</div></td>
                <td><div class="scheduleTimesGrey">7:05A</div></td>
                <td><div class="scheduleTimesGrey">--</div></td>
            </tr>
        </table>
    </body>
    </html>
    """


@pytest.fixture
def schedule_page():
    """Build a schedule page from station labels and rows of cell text.

    ``route_header`` adds a route label cell to the header row; pass "" for an
    empty placeholder cell. ``directions`` is a list of (text, linked) pairs.
    """

    def build(
        stations,
        rows,
        route_header=None,
        headlines=("Schedule effective as of January 5, 2024",),
        directions=(("North Bound", False),),
    ):
        parts = ["<html><body>"]
        for headline in headlines:
            parts.append(f'<p class="headline">{headline}</p>')

        parts.append("<table><tr>")
        for text, linked in directions:
            content = f'<a href="#">{text}</a>' if linked else text
            parts.append(f'<td class="headerHighlight">{content}</td>')
        parts.append("</tr></table>")

        parts.append('<table><tr class="headrow">')
        if route_header is not None:
            parts.append(f'<td><div class="scheduleTimesGrey">{route_header}</div></td>')
        for station in stations:
            parts.append(f'<td><div class="scheduleStations">{station}</div></td>')
        parts.append("</tr>")

        for row in rows:
            parts.append('<tr class="row">')
            for cell in row:
                parts.append(f'<td><div class="scheduleTimesGrey">{cell}</div></td>')
            parts.append("</tr>")

        parts.append("</table></body></html>")
        return "\n".join(parts)

    return build


@pytest.fixture
def sample_route_menu():
    """Sample route menu data backing the schedule site's navigation."""
    return """
    var routeMenu = [
        { text: "0", url: "/schedules/getSchedule.action?routeId=0" },
        { text: "15L", url: "/schedules/getSchedule.action?routeId=15L&runboardId=152" },
        { text: "Schedules Home", url: "/schedules/index.html" },
        { text: "B/BF/BX", url: "/schedules/getSchedule.action?routeId=B" },
    ];
    """
