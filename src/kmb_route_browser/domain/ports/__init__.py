"""Ports (interfaces) for the ports-and-adapters architecture."""

from kmb_route_browser.domain.ports.display_adapter import DisplayAdapter
from kmb_route_browser.domain.ports.route_browser import (
    ChangeCallback,
    RouteBrowserFactory,
    RouteBrowserSession,
)
from kmb_route_browser.domain.ports.route_catalog import RouteCatalogService
from kmb_route_browser.domain.ports.route_repository import RouteRepository
from kmb_route_browser.domain.ports.stop_repository import StopRepository

__all__ = [
    "ChangeCallback",
    "DisplayAdapter",
    "RouteBrowserFactory",
    "RouteBrowserSession",
    "RouteCatalogService",
    "RouteRepository",
    "StopRepository",
]
