"""Tests for domain models."""

import pytest

from kmb_route_browser.domain.errors import NetworkFailure, PartialResolutionFailure
from kmb_route_browser.domain.models import (
    Bound,
    ErrorDetails,
    Language,
    ResolvedStop,
    RouteMatchPolicy,
    Screen,
    StopRef,
    ViewState,
)
from tests.fakes import make_route, make_stop


@pytest.mark.parametrize(
    ("code", "expected", "token"),
    [
        ("O", Bound.OUTBOUND, "outbound"),
        ("I", Bound.INBOUND, "inbound"),
        ("X", Bound.UNKNOWN, "unknown"),
        (None, Bound.UNKNOWN, "unknown"),
    ],
)
def test_bound_from_code_maps_to_wire_token(code: str | None, expected: Bound, token: str) -> None:
    """Given a catalog bound code, when mapping, then the route-stop token follows."""
    bound = Bound.from_code(code)

    assert bound is expected
    assert bound.wire_token == token


def test_route_identity_uses_full_tuple() -> None:
    """Given two routes sharing a code, when comparing keys, then bound distinguishes them."""
    outbound = make_route("1A", Bound.OUTBOUND)
    inbound = make_route("1A", Bound.INBOUND)

    assert outbound.key == ("1A", Bound.OUTBOUND, "1")
    assert outbound.key != inbound.key


def test_route_is_immutable() -> None:
    """Given a route, when assigning a field, then it is rejected."""
    route = make_route()

    with pytest.raises(AttributeError):
        route.route = "2B"  # type: ignore[misc]


def test_route_localized_names() -> None:
    """Given a route, when asking per language, then the matching names are returned."""
    route = make_route(orig="STAR FERRY", dest="SAU MAU PING")

    assert route.origin(Language.EN) == "STAR FERRY"
    assert route.destination(Language.EN) == "SAU MAU PING"
    assert route.origin(Language.TC) == "STAR FERRY (TC)"
    assert route.destination(Language.TC) == "SAU MAU PING (TC)"


def test_stop_name_by_language() -> None:
    """Given a stop, when asking per language, then the matching name is returned."""
    stop = make_stop("S1", "Tsim Sha Tsui")

    assert stop.name(Language.EN) == "Tsim Sha Tsui"
    assert stop.name(Language.TC) == "Tsim Sha Tsui 站"


def test_language_toggle_and_parse() -> None:
    """Given a language, when toggling or parsing, then the other language is returned."""
    assert Language.EN.toggled() is Language.TC
    assert Language.TC.toggled() is Language.EN
    assert Language.from_code(" TC ") is Language.TC


def test_match_policies() -> None:
    """Given both policies, when matching, then substring ignores case and exact does not."""
    assert RouteMatchPolicy.SUBSTRING.matches("N1A", "1a")
    assert not RouteMatchPolicy.SUBSTRING.matches("2B", "1A")
    assert RouteMatchPolicy.EXACT.matches("1A", "1A")
    assert not RouteMatchPolicy.EXACT.matches("1A", "1a")
    assert not RouteMatchPolicy.EXACT.matches("N1A", "1A")


def test_view_state_screen_follows_selection() -> None:
    """Given a view state, when a route is selected, then the detail screen is active."""
    state = ViewState()
    assert state.screen is Screen.LIST

    state.selected_route = make_route()

    assert state.screen is Screen.DETAIL


def test_resolved_stop_pending_until_named() -> None:
    """Given a stop without a name, when checking, then it is pending."""
    ref = StopRef(seq=1, stop_id="S1")

    assert ResolvedStop(ref=ref).is_pending
    assert not ResolvedStop(ref=ref, name="Mong Kok").is_pending


def test_partial_resolution_failure_wraps_cause() -> None:
    """Given a network failure, when wrapping it for a stop, then details carry over."""
    cause = NetworkFailure(ErrorDetails(status_code=503, url="http://x/stop/S1", reason="busy"))

    failure = PartialResolutionFailure("S1", cause)

    assert failure.stop_id == "S1"
    assert failure.cause is cause
    assert failure.details.status_code == 503
    assert "S1" in str(failure)
