"""Behavior-focused tests for StateBroadcaster."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from kmb_route_browser.adapters.web.broadcasters.state_broadcaster import (
    CATALOG_TOPIC,
    StateBroadcaster,
    session_topic,
)


class TestStateBroadcaster:
    """Tests for state broadcast behavior."""

    @pytest.mark.asyncio
    async def test_when_broadcast_succeeds_then_sends_update_to_topic(self) -> None:
        """Given a topic, when broadcasting, then sends update message to that topic."""
        broadcaster = StateBroadcaster()

        with patch(
            "kmb_route_browser.adapters.web.broadcasters.state_broadcaster.PubSub"
        ) as mock_pubsub_class:
            mock_pubsub = MagicMock()
            mock_pubsub.send_all_on_topic_async = AsyncMock()
            mock_pubsub_class.return_value = mock_pubsub

            await broadcaster.broadcast_update(CATALOG_TOPIC)

            mock_pubsub.send_all_on_topic_async.assert_called_once_with(CATALOG_TOPIC, "update")

    @pytest.mark.asyncio
    async def test_when_broadcast_fails_then_logs_error_and_continues(self) -> None:
        """Given PubSub error, when broadcasting, then logs error without raising."""
        broadcaster = StateBroadcaster()

        with patch(
            "kmb_route_browser.adapters.web.broadcasters.state_broadcaster.PubSub"
        ) as mock_pubsub_class:
            mock_pubsub = MagicMock()
            mock_pubsub.send_all_on_topic_async = AsyncMock(
                side_effect=Exception("Connection failed")
            )
            mock_pubsub_class.return_value = mock_pubsub

            await broadcaster.broadcast_update(session_topic("abc"))

            mock_pubsub.send_all_on_topic_async.assert_called_once()


def test_session_topics_are_distinct_from_catalog_topic() -> None:
    """Given two sessions, when building topics, then each has its own topic."""
    assert session_topic("a") != session_topic("b")
    assert session_topic("a") != CATALOG_TOPIC
