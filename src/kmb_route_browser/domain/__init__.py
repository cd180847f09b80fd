"""Domain layer - core models, errors and ports."""

from kmb_route_browser.domain.errors import (
    KmbApiError,
    NetworkFailure,
    ParseFailure,
    PartialResolutionFailure,
)
from kmb_route_browser.domain.models import (
    Bound,
    Language,
    ResolvedStop,
    Route,
    RouteMatchPolicy,
    Stop,
    StopRef,
    ViewState,
)
from kmb_route_browser.domain.ports import (
    RouteRepository,
    StopRepository,
)

__all__ = [
    "Bound",
    "KmbApiError",
    "Language",
    "NetworkFailure",
    "ParseFailure",
    "PartialResolutionFailure",
    "ResolvedStop",
    "Route",
    "RouteMatchPolicy",
    "RouteRepository",
    "Stop",
    "StopRef",
    "StopRepository",
    "ViewState",
]
