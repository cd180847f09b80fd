"""Parser for KMB API response payloads."""

import logging
from typing import Any

from kmb_route_browser.domain.errors import ParseFailure
from kmb_route_browser.domain.models.error_details import ErrorDetails
from kmb_route_browser.domain.models.route import Bound, Route
from kmb_route_browser.domain.models.stop import Stop, StopRef

logger = logging.getLogger(__name__)


class KmbResponseParser:
    """Parses the ``data`` members of KMB API responses into domain objects.

    A payload of the wrong overall shape raises ParseFailure. Individual list
    entries that cannot be parsed are skipped with a warning.
    """

    @staticmethod
    def parse_routes(data: Any, url: str | None = None) -> list[Route]:
        """Parse the route catalog, preserving response order."""
        entries = KmbResponseParser._require_list(data, url)
        routes = []
        for entry in entries:
            route = KmbResponseParser._parse_route(entry)
            if route is not None:
                routes.append(route)
        return routes

    @staticmethod
    def _parse_route(entry: Any) -> Route | None:
        if not isinstance(entry, dict) or not entry.get("route"):
            logger.warning(f"Skipping malformed route entry: {entry!r}")
            return None

        return Route(
            route=str(entry["route"]),
            bound=Bound.from_code(entry.get("bound")),
            service_type=str(entry.get("service_type", "")),
            orig_en=entry.get("orig_en", "") or "",
            orig_tc=entry.get("orig_tc", "") or "",
            dest_en=entry.get("dest_en", "") or "",
            dest_tc=entry.get("dest_tc", "") or "",
        )

    @staticmethod
    def parse_route_stops(data: Any, url: str | None = None) -> list[StopRef]:
        """Parse a route's stop sequence in response order."""
        entries = KmbResponseParser._require_list(data, url)
        stop_refs = []
        for entry in entries:
            try:
                stop_refs.append(StopRef(seq=int(entry["seq"]), stop_id=str(entry["stop"])))
            except (KeyError, TypeError, ValueError) as e:
                logger.warning(f"Skipping malformed route-stop entry {entry!r}: {e}")
        return stop_refs

    @staticmethod
    def parse_stop(data: Any, stop_id: str, url: str | None = None) -> Stop:
        """Parse a single stop's details."""
        if not isinstance(data, dict):
            reason = f"Expected stop object for {stop_id}, got {type(data).__name__}"
            raise ParseFailure(ErrorDetails(url=url, reason=reason))

        name_en = data.get("name_en") or ""
        name_tc = data.get("name_tc") or ""
        if not name_en and not name_tc:
            raise ParseFailure(ErrorDetails(url=url, reason=f"Stop {stop_id} has no name"))

        return Stop(
            stop_id=str(data.get("stop", stop_id)),
            name_en=name_en,
            name_tc=name_tc,
        )

    @staticmethod
    def _require_list(data: Any, url: str | None) -> list[Any]:
        if not isinstance(data, list):
            raise ParseFailure(
                ErrorDetails(url=url, reason=f"Expected a list, got {type(data).__name__}")
            )
        return data
