"""Stop resolver service."""

import asyncio
import logging

from kmb_route_browser.domain.errors import KmbApiError, PartialResolutionFailure
from kmb_route_browser.domain.models.language import Language
from kmb_route_browser.domain.models.route import Route
from kmb_route_browser.domain.models.stop import UNKNOWN_STOP_NAME, ResolvedStop, StopRef
from kmb_route_browser.domain.ports.stop_repository import StopRepository

logger = logging.getLogger(__name__)


class StopResolver:
    """Resolves the ordered, named stop list of a route."""

    def __init__(self, stop_repository: StopRepository) -> None:
        """Initialize with a stop repository."""
        self._stop_repository = stop_repository

    async def resolve_stops(self, route: Route, language: Language) -> list[ResolvedStop]:
        """Fetch a route's stop sequence and resolve every stop name.

        Args:
            route: The route whose stops are resolved.
            language: Language of the resolved names.

        Returns:
            One ResolvedStop per stop reference, ordered by sequence number.

        Raises:
            NetworkFailure: If the stop sequence could not be fetched.
            ParseFailure: If the stop sequence could not be parsed.
        """
        stop_refs = await self.fetch_stop_sequence(route)
        return await self.resolve_names(stop_refs, language)

    async def fetch_stop_sequence(self, route: Route) -> list[StopRef]:
        """Fetch the stop references of a route, sorted by sequence number."""
        stop_refs = await self._stop_repository.get_route_stops(route)
        logger.debug(
            f"Fetched {len(stop_refs)} stop(s) for route {route.route} "
            f"{route.bound.wire_token} service type {route.service_type}"
        )
        return sorted(stop_refs, key=lambda ref: ref.seq)

    @staticmethod
    def placeholders(stop_refs: list[StopRef]) -> list[ResolvedStop]:
        """Ordered entries whose names are still outstanding."""
        return [ResolvedStop(ref=ref) for ref in stop_refs]

    async def resolve_names(
        self, stop_refs: list[StopRef], language: Language
    ) -> list[ResolvedStop]:
        """Resolve the names of ``stop_refs`` concurrently.

        Each distinct stop id is fetched once per call. A failed lookup yields
        the "Unknown Stop" sentinel for that stop only.
        """
        stop_ids = list(dict.fromkeys(ref.stop_id for ref in stop_refs))
        results = await asyncio.gather(
            *(self._resolve_name(stop_id, language) for stop_id in stop_ids)
        )
        stop_names = dict(zip(stop_ids, results, strict=True))

        resolved = []
        for ref in stop_refs:
            name, failure = stop_names[ref.stop_id]
            resolved.append(ResolvedStop(ref=ref, name=name, failure=failure))
        return resolved

    async def _resolve_name(
        self, stop_id: str, language: Language
    ) -> tuple[str, PartialResolutionFailure | None]:
        try:
            stop = await self._stop_repository.get_stop(stop_id)
        except KmbApiError as e:
            failure = PartialResolutionFailure(stop_id, e)
            logger.warning(str(failure))
            return UNKNOWN_STOP_NAME, failure

        name = stop.name(language)
        if not name:
            logger.warning(f"Stop {stop_id} has no {language.value} name")
            return UNKNOWN_STOP_NAME, None
        return name, None
