"""Route browser session port."""

from collections.abc import Awaitable, Callable
from typing import Protocol

from kmb_route_browser.domain.models.language import Language
from kmb_route_browser.domain.models.route import Route
from kmb_route_browser.domain.models.view_state import ViewState

ChangeCallback = Callable[[], Awaitable[None]]


class RouteBrowserSession(Protocol):
    """Port for one user's browsing session (list/detail state machine)."""

    state: ViewState
    on_change: ChangeCallback | None

    @property
    def is_catalog_loading(self) -> bool:
        ...

    def visible_routes(self) -> list[Route]:
        ...

    def set_query(self, text: str) -> None:
        ...

    def select(self, route: Route) -> Awaitable[None]:
        ...

    def back(self) -> None:
        ...

    def set_language(self, language: Language) -> Awaitable[None] | None:
        ...

    def toggle_language(self) -> Awaitable[None] | None:
        ...


RouteBrowserFactory = Callable[[], RouteBrowserSession]
