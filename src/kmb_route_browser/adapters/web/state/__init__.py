"""State held by the route browser LiveView."""

from kmb_route_browser.adapters.web.state.browser_context import RouteBrowserContext

__all__ = ["RouteBrowserContext"]
