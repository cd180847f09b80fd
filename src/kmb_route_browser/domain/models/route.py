"""Route domain model."""

from dataclasses import dataclass
from enum import Enum

from kmb_route_browser.domain.models.language import Language


class Bound(str, Enum):
    """Direction of travel as reported by the route catalog."""

    OUTBOUND = "O"
    INBOUND = "I"
    UNKNOWN = ""

    @classmethod
    def from_code(cls, code: str | None) -> "Bound":
        """Map the catalog's bound code ("O"/"I") to a Bound."""
        if code == "O":
            return cls.OUTBOUND
        if code == "I":
            return cls.INBOUND
        return cls.UNKNOWN

    @property
    def wire_token(self) -> str:
        """Path token expected by the route-stop endpoint."""
        if self is Bound.OUTBOUND:
            return "outbound"
        if self is Bound.INBOUND:
            return "inbound"
        return "unknown"


@dataclass(frozen=True)
class Route:
    """A bus route in one direction for one service type.

    Route codes are not unique across the catalog: the same code appears once
    per bound and service type, so identity is the full ``key`` tuple.
    """

    route: str
    bound: Bound
    service_type: str
    orig_en: str
    orig_tc: str
    dest_en: str
    dest_tc: str

    @property
    def key(self) -> tuple[str, Bound, str]:
        """Identity of the route within the catalog."""
        return (self.route, self.bound, self.service_type)

    def origin(self, language: Language) -> str:
        """Origin name in the given language."""
        return self.orig_en if language is Language.EN else self.orig_tc

    def destination(self, language: Language) -> str:
        """Destination name in the given language."""
        return self.dest_en if language is Language.EN else self.dest_tc
