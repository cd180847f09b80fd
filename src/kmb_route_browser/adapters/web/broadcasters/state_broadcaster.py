"""Broadcaster for route browser state updates."""

from __future__ import annotations

import logging

from pyview.live_socket import pub_sub_hub
from pyview.vendor.flet.pubsub import PubSub

logger = logging.getLogger(__name__)

# Shared topic announcing that the route catalog finished loading
CATALOG_TOPIC = "routes:catalog"
UPDATE_MESSAGE = "update"


def session_topic(session_id: str) -> str:
    """Topic on which one browser session is told to re-render."""
    return f"routes:session:{session_id}"


class StateBroadcaster:
    """Broadcasts state updates via PubSub."""

    async def broadcast_update(self, topic: str) -> None:
        """Broadcast an update signal to all subscribers on the topic.

        Failures are logged; the state change itself has already been applied.

        Args:
            topic: The pub/sub topic to broadcast to.
        """
        try:
            pubsub = PubSub(pub_sub_hub, topic)
            await pubsub.send_all_on_topic_async(topic, UPDATE_MESSAGE)
            logger.debug(f"Broadcasted update via pubsub to topic: {topic}")
        except Exception as e:
            logger.error(f"Failed to broadcast via pubsub to {topic}: {e}", exc_info=True)
