"""Per-socket context for the route browser LiveView."""

from dataclasses import dataclass

from kmb_route_browser.domain.ports.route_browser import RouteBrowserSession


@dataclass
class RouteBrowserContext:
    """Socket context: the session's browser and its update topic."""

    browser: RouteBrowserSession
    topic: str
