"""Formatters for the web adapter."""

from kmb_route_browser.adapters.web.formatters.route_formatter import LABELS, RouteFormatter

__all__ = ["LABELS", "RouteFormatter"]
