"""Broadcasters for web adapter."""

from kmb_route_browser.adapters.web.broadcasters.state_broadcaster import (
    CATALOG_TOPIC,
    UPDATE_MESSAGE,
    StateBroadcaster,
    session_topic,
)

__all__ = ["CATALOG_TOPIC", "UPDATE_MESSAGE", "StateBroadcaster", "session_topic"]
