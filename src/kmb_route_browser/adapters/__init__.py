"""Adapters layer - external system integrations."""

from kmb_route_browser.adapters.config import AppConfig
from kmb_route_browser.adapters.kmb_api import (
    KmbRouteRepository,
    KmbStopRepository,
)

__all__ = [
    "AppConfig",
    "KmbRouteRepository",
    "KmbStopRepository",
]
