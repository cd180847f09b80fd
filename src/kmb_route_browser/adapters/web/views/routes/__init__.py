"""Route browser LiveView."""

from kmb_route_browser.adapters.web.views.routes.routes import (
    RouteBrowserLiveView,
    create_route_browser_live_view,
)

__all__ = ["RouteBrowserLiveView", "create_route_browser_live_view"]
