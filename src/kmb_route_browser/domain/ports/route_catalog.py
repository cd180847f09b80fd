"""Route catalog service port."""

from typing import Protocol

from kmb_route_browser.domain.models.route import Route


class RouteCatalogService(Protocol):
    """Port for the shared route catalog loaded once at startup."""

    @property
    def routes(self) -> list[Route]:
        """The loaded catalog (empty until loaded or after a failed load)."""
        ...

    @property
    def is_loading(self) -> bool:
        """True until the first load has completed."""
        ...

    async def load(self) -> list[Route]:
        """Fetch the catalog, keeping it for later filtering."""
        ...

    def filter(self, catalog: list[Route], query: str) -> list[Route]:
        """Return the routes of ``catalog`` matching ``query``."""
        ...
