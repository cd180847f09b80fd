"""Configuration adapters."""

from kmb_route_browser.adapters.config.app_config import AppConfig

__all__ = ["AppConfig"]
