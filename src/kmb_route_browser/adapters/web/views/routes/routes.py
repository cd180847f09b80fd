"""Route browser LiveView: searchable route list with a stop detail screen."""

from __future__ import annotations

import logging
import uuid
from pathlib import Path
from typing import Any

from pyview import LiveView, LiveViewSocket, is_connected
from pyview.events import InfoEvent
from pyview.template.live_template import LiveRender, LiveTemplate
from pyview.vendor import ibis

from kmb_route_browser.adapters.web.broadcasters import (
    CATALOG_TOPIC,
    UPDATE_MESSAGE,
    StateBroadcaster,
    session_topic,
)
from kmb_route_browser.adapters.web.formatters import RouteFormatter
from kmb_route_browser.adapters.web.state import RouteBrowserContext
from kmb_route_browser.domain.models.route import Route
from kmb_route_browser.domain.models.view_state import Screen
from kmb_route_browser.domain.ports import (
    RouteBrowserFactory,  # noqa: TC001 - Runtime dependency: called in mount
)

logger = logging.getLogger(__name__)

TEMPLATE_PATH = Path(__file__).with_name("routes.html")


def _payload_value(payload: dict[str, Any], key: str) -> str:
    """Read one value from an event payload.

    Click events carry plain strings; form events carry lists of strings.
    """
    value = payload.get(key, "")
    if isinstance(value, list):
        value = value[0] if value else ""
    return str(value)


class RouteBrowserLiveView(LiveView[RouteBrowserContext]):
    """LiveView presenting one RouteBrowser session per socket."""

    _template: LiveTemplate | None = None

    def __init__(
        self,
        browser_factory: RouteBrowserFactory,
        broadcaster: StateBroadcaster | None = None,
    ) -> None:
        """Initialize the LiveView.

        Args:
            browser_factory: Creates the browser session for each mounted socket.
            broadcaster: Broadcaster used to signal background state changes.
        """
        super().__init__()
        self.browser_factory = browser_factory
        self.broadcaster = broadcaster or StateBroadcaster()

    def _create_context(self) -> RouteBrowserContext:
        topic = session_topic(str(uuid.uuid4()))
        browser = self.browser_factory()

        async def notify() -> None:
            await self.broadcaster.broadcast_update(topic)

        browser.on_change = notify
        return RouteBrowserContext(browser=browser, topic=topic)

    async def mount(self, socket: LiveViewSocket[RouteBrowserContext], _session: dict) -> None:
        """Mount the LiveView with a fresh browser session."""
        socket.context = self._create_context()

        if is_connected(socket):
            try:
                await socket.subscribe(CATALOG_TOPIC)
                await socket.subscribe(socket.context.topic)
            except Exception as e:
                logger.error(f"Failed to subscribe to browser topics: {e}", exc_info=True)

    async def disconnect(self, socket: LiveViewSocket[RouteBrowserContext]) -> None:
        """Stop in-flight resolutions from signalling a closed socket."""
        socket.context.browser.on_change = None

    def _find_route(self, context: RouteBrowserContext, payload: dict[str, Any]) -> Route | None:
        key = (
            _payload_value(payload, "route"),
            _payload_value(payload, "bound"),
            _payload_value(payload, "service_type"),
        )
        for route in context.browser.visible_routes():
            if (route.route, route.bound.value, route.service_type) == key:
                return route
        return None

    async def handle_event(
        self, event: str, payload: dict[str, Any], socket: LiveViewSocket[RouteBrowserContext]
    ) -> None:
        """Handle user interaction events."""
        context = socket.context
        browser = context.browser

        if event == "search":
            browser.set_query(_payload_value(payload, "query"))
        elif event == "select":
            route = self._find_route(context, payload)
            if route is None:
                logger.warning(f"Ignoring selection of unknown route: {payload}")
                return
            browser.select(route)
        elif event == "back":
            browser.back()
        elif event == "toggle_language":
            browser.toggle_language()
        else:
            logger.debug(f"Ignoring unknown event '{event}'")

    async def handle_info(
        self, event: str | InfoEvent, socket: LiveViewSocket[RouteBrowserContext]
    ) -> None:
        """Handle update signals; the context already holds the new state."""
        payload = event.payload if isinstance(event, InfoEvent) else event
        if payload != UPDATE_MESSAGE:
            logger.debug(f"Received unexpected info payload: {payload}")

    def build_assigns(self, context: RouteBrowserContext) -> dict[str, Any]:
        """Build template variables from the session's browser state."""
        browser = context.browser
        state = browser.state
        formatter = RouteFormatter(state.language)
        is_detail = state.screen is Screen.DETAIL

        return {
            "html_lang": formatter.label("html_lang"),
            "heading": formatter.heading(state.selected_route),
            "heading_class": "detail-title" if is_detail else "app-title",
            "switch_caption": formatter.label("switch_caption"),
            "switch_button": formatter.label("switch_button"),
            "is_detail": is_detail,
            "back_label": formatter.label("back"),
            "stops_loading": state.stops_loading,
            "loading_stops_label": formatter.label("loading_stops"),
            "stops": [formatter.format_stop(stop) for stop in state.stops] if is_detail else [],
            "query": state.query,
            "placeholder": formatter.label("placeholder"),
            "catalog_loading": browser.is_catalog_loading,
            "loading_label": formatter.label("loading"),
            "routes": (
                []
                if is_detail or browser.is_catalog_loading
                else [formatter.format_route(route) for route in browser.visible_routes()]
            ),
            "to_label": formatter.label("to"),
            "from_label": formatter.label("from"),
        }

    @classmethod
    def _get_template(cls) -> LiveTemplate:
        if cls._template is None:
            cls._template = LiveTemplate(ibis.Template(TEMPLATE_PATH.read_text(encoding="utf-8")))
        return cls._template

    async def render(self, assigns: RouteBrowserContext, meta: Any) -> LiveRender:
        """Render the HTML template."""
        return LiveRender(self._get_template(), self.build_assigns(assigns), meta)


def create_route_browser_live_view(
    browser_factory: RouteBrowserFactory,
) -> type[RouteBrowserLiveView]:
    """Create a configured RouteBrowserLiveView class.

    PyView's add_live_view expects a class, not an instance, so the factory
    is captured in a subclass.

    Args:
        browser_factory: Creates the browser session for each mounted socket.

    Returns:
        A configured RouteBrowserLiveView class that can be registered with PyView.
    """
    captured_factory = browser_factory

    class ConfiguredRouteBrowserLiveView(RouteBrowserLiveView):
        """Configured route browser LiveView."""

        def __init__(self) -> None:
            super().__init__(captured_factory)

    return ConfiguredRouteBrowserLiveView
