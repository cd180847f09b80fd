"""Application services (use cases) for browsing routes."""

from kmb_route_browser.application.services.route_browser import RouteBrowser
from kmb_route_browser.application.services.route_store import RouteStore
from kmb_route_browser.application.services.stop_resolver import StopResolver

__all__ = ["RouteBrowser", "RouteStore", "StopResolver"]
