"""Stop domain models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from kmb_route_browser.domain.models.language import Language

if TYPE_CHECKING:
    from kmb_route_browser.domain.errors import PartialResolutionFailure

UNKNOWN_STOP_NAME = "Unknown Stop"


@dataclass(frozen=True)
class StopRef:
    """Position of a stop within a route's path."""

    seq: int  # Ascending along the route, not necessarily contiguous
    stop_id: str


@dataclass(frozen=True)
class Stop:
    """A bus stop with its localized names."""

    stop_id: str
    name_en: str
    name_tc: str

    def name(self, language: Language) -> str:
        """Stop name in the given language."""
        return self.name_en if language is Language.EN else self.name_tc


@dataclass(frozen=True)
class ResolvedStop:
    """A stop reference joined with its display name.

    ``name`` is None while the name lookup is still outstanding.
    """

    ref: StopRef
    name: str | None = None
    failure: PartialResolutionFailure | None = None

    @property
    def is_pending(self) -> bool:
        return self.name is None
