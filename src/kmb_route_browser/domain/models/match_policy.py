"""Route search matching policy."""

from enum import Enum


class RouteMatchPolicy(str, Enum):
    """How a search query is compared against route codes."""

    SUBSTRING = "substring"  # Case-insensitive containment
    EXACT = "exact"  # Case-sensitive equality

    def matches(self, route_code: str, query: str) -> bool:
        """Return True if ``route_code`` matches a non-empty ``query``."""
        if self is RouteMatchPolicy.EXACT:
            return route_code == query
        return query.upper() in route_code.upper()
