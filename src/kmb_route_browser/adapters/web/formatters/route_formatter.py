"""Formatter for bilingual route browser labels and rows."""

from typing import Any

from kmb_route_browser.domain.models.language import Language
from kmb_route_browser.domain.models.route import Route
from kmb_route_browser.domain.models.stop import ResolvedStop

LABELS: dict[Language, dict[str, str]] = {
    Language.EN: {
        "app_title": "KMB Route Searcher",
        "placeholder": "Enter Bus number",
        "loading": "Loading...",
        "loading_stops": "Loading stops...",
        "stop_pending": "Loading...",
        "to": "To:",
        "from": "From:",
        "back": "Back",
        "detail_title": "Route {route} Stops",
        # The switcher offers the other language, captioned in that language
        "switch_caption": "切換語言",
        "switch_button": "繁體中文",
        "html_lang": "en",
    },
    Language.TC: {
        "app_title": "九巴路線搜尋器",
        "placeholder": "輸入巴士號碼",
        "loading": "載入中...",
        "loading_stops": "載入站點中...",
        "stop_pending": "載入中...",
        "to": "往:",
        "from": "由:",
        "back": "返回",
        "detail_title": "路線 {route} 站點",
        "switch_caption": "Change Language",
        "switch_button": "English",
        "html_lang": "zh-Hant-HK",
    },
}


class RouteFormatter:
    """Formats routes, stops and UI labels for one language."""

    def __init__(self, language: Language) -> None:
        self.language = language
        self._labels = LABELS[language]

    def label(self, key: str) -> str:
        return self._labels[key]

    def heading(self, selected_route: Route | None) -> str:
        """Screen heading: app title on the list, route title on the detail screen."""
        if selected_route is None:
            return self._labels["app_title"]
        return self._labels["detail_title"].format(route=selected_route.route)

    def format_route(self, route: Route) -> dict[str, Any]:
        """Build the template row for a route list entry."""
        return {
            "route": route.route,
            "bound": route.bound.value,
            "service_type": route.service_type,
            "origin": route.origin(self.language),
            "destination": route.destination(self.language),
        }

    def format_stop(self, stop: ResolvedStop) -> dict[str, Any]:
        """Build the template row for a stop on the detail screen."""
        return {
            "seq": stop.ref.seq,
            "stop_id": stop.ref.stop_id,
            "name": self._labels["stop_pending"] if stop.name is None else stop.name,
            "pending": stop.is_pending,
        }
