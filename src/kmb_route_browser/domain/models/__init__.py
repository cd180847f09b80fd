"""Domain models for the KMB route browser."""

from kmb_route_browser.domain.models.error_details import ErrorDetails
from kmb_route_browser.domain.models.language import Language
from kmb_route_browser.domain.models.match_policy import RouteMatchPolicy
from kmb_route_browser.domain.models.route import Bound, Route
from kmb_route_browser.domain.models.stop import (
    UNKNOWN_STOP_NAME,
    ResolvedStop,
    Stop,
    StopRef,
)
from kmb_route_browser.domain.models.view_state import Screen, ViewState

__all__ = [
    "UNKNOWN_STOP_NAME",
    "Bound",
    "ErrorDetails",
    "Language",
    "ResolvedStop",
    "Route",
    "RouteMatchPolicy",
    "Screen",
    "Stop",
    "StopRef",
    "ViewState",
]
