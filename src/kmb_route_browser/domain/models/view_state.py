"""View state domain model."""

from dataclasses import dataclass, field
from enum import Enum

from kmb_route_browser.domain.models.language import Language
from kmb_route_browser.domain.models.route import Route
from kmb_route_browser.domain.models.stop import ResolvedStop


class Screen(str, Enum):
    """Which screen of the browser is shown."""

    LIST = "list"
    DETAIL = "detail"


@dataclass
class ViewState:
    """Presentation state of one route browser session.

    ``generation`` increases on every selection, back navigation and language
    change; stop resolution results tagged with an older generation are stale.
    """

    language: Language = Language.EN
    query: str = ""
    selected_route: Route | None = None
    stops: list[ResolvedStop] = field(default_factory=list)
    stops_loading: bool = False
    generation: int = 0

    @property
    def screen(self) -> Screen:
        return Screen.LIST if self.selected_route is None else Screen.DETAIL
