"""Web adapters for browsing routes."""

from kmb_route_browser.adapters.web.pyview_app import PyViewWebAdapter

__all__ = ["PyViewWebAdapter"]
