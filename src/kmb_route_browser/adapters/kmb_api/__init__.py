"""KMB open-data API adapters."""

from kmb_route_browser.adapters.kmb_api.http_client import KmbHttpClient
from kmb_route_browser.adapters.kmb_api.kmb_route_repository import KmbRouteRepository
from kmb_route_browser.adapters.kmb_api.kmb_stop_repository import KmbStopRepository

__all__ = ["KmbHttpClient", "KmbRouteRepository", "KmbStopRepository"]
