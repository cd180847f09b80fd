"""Route browser session: the list/detail state machine."""

import asyncio
import logging

from kmb_route_browser.application.services.stop_resolver import StopResolver
from kmb_route_browser.domain.errors import KmbApiError
from kmb_route_browser.domain.models.language import Language
from kmb_route_browser.domain.models.route import Route
from kmb_route_browser.domain.models.view_state import Screen, ViewState
from kmb_route_browser.domain.ports.route_browser import ChangeCallback
from kmb_route_browser.domain.ports.route_catalog import RouteCatalogService

logger = logging.getLogger(__name__)


class RouteBrowser:
    """Drives one user's view of the route catalog.

    The browser starts on the list screen. Selecting a route moves it to the
    detail screen and resolves the route's stops in a background task; going
    back or changing the language supersedes any resolution still in flight.

    Every resolution is tagged with the generation current when it started.
    Results for an older generation are dropped instead of being applied, so
    a slow response for a previously selected route never replaces the stops
    of the route that is selected now.
    """

    def __init__(
        self,
        route_store: RouteCatalogService,
        stop_resolver: StopResolver,
        language: Language = Language.EN,
        on_change: ChangeCallback | None = None,
    ) -> None:
        """Initialize a browser session.

        Args:
            route_store: Shared route catalog.
            stop_resolver: Resolver for the stops of a selected route.
            language: Initial UI language.
            on_change: Awaited after each state change made by a background
                resolution, so the presentation layer can re-render.
        """
        self._route_store = route_store
        self._stop_resolver = stop_resolver
        self.state = ViewState(language=language)
        self.on_change = on_change
        self._tasks: set[asyncio.Task[None]] = set()

    @property
    def is_catalog_loading(self) -> bool:
        return self._route_store.is_loading

    def visible_routes(self) -> list[Route]:
        """Catalog entries matching the current search text."""
        return self._route_store.filter(self._route_store.routes, self.state.query)

    def set_query(self, text: str) -> None:
        self.state.query = text

    def select(self, route: Route) -> asyncio.Task[None]:
        """Show the detail screen for ``route`` and start resolving its stops.

        Returns:
            The background resolution task.
        """
        logger.debug(f"Selected route {route.route} ({route.bound.wire_token})")
        self.state.selected_route = route
        return self._start_resolution(route)

    def back(self) -> None:
        """Return to the list screen, discarding the detail state."""
        self.state.generation += 1
        self.state.selected_route = None
        self.state.stops = []
        self.state.stops_loading = False

    def set_language(self, language: Language) -> asyncio.Task[None] | None:
        """Switch the UI language.

        On the detail screen the stops are resolved again in the new language.

        Returns:
            The background resolution task, or None when nothing is resolved.
        """
        if language is self.state.language:
            return None
        self.state.language = language
        route = self.state.selected_route
        if self.state.screen is Screen.LIST or route is None:
            return None
        return self._start_resolution(route)

    def toggle_language(self) -> asyncio.Task[None] | None:
        return self.set_language(self.state.language.toggled())

    def _start_resolution(self, route: Route) -> asyncio.Task[None]:
        self.state.generation += 1
        self.state.stops = []
        self.state.stops_loading = True

        task = asyncio.create_task(
            self._resolve(self.state.generation, route, self.state.language)
        )
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    def _is_current(self, generation: int) -> bool:
        return generation == self.state.generation

    async def _resolve(self, generation: int, route: Route, language: Language) -> None:
        try:
            stop_refs = await self._stop_resolver.fetch_stop_sequence(route)
        except KmbApiError as e:
            logger.error(f"Error fetching route stops for route {route.route}: {e}")
            if self._is_current(generation):
                self.state.stops = []
                self.state.stops_loading = False
                await self._notify()
            return

        if not self._is_current(generation):
            logger.debug(f"Discarding stale stop sequence for route {route.route}")
            return

        # Ordered list first, names fill in once every lookup has finished
        self.state.stops = self._stop_resolver.placeholders(stop_refs)
        self.state.stops_loading = False
        await self._notify()

        resolved = await self._stop_resolver.resolve_names(stop_refs, language)
        if not self._is_current(generation):
            logger.debug(f"Discarding stale stop names for route {route.route}")
            return

        self.state.stops = resolved
        await self._notify()

    async def _notify(self) -> None:
        if self.on_change is not None:
            await self.on_change()
