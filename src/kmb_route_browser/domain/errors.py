"""Error taxonomy for calls against the KMB open-data API."""

from kmb_route_browser.domain.models.error_details import ErrorDetails


class KmbApiError(Exception):
    """Base for all failures talking to the KMB API."""

    def __init__(self, details: ErrorDetails) -> None:
        super().__init__(details.reason)
        self.details = details


class NetworkFailure(KmbApiError):
    """Transport, DNS, timeout or non-200 response."""


class ParseFailure(KmbApiError):
    """Malformed JSON or a response whose shape does not match the endpoint."""


class PartialResolutionFailure(KmbApiError):
    """The name of a single stop could not be resolved."""

    def __init__(self, stop_id: str, cause: KmbApiError) -> None:
        super().__init__(
            ErrorDetails(
                status_code=cause.details.status_code,
                url=cause.details.url,
                reason=f"Could not resolve stop {stop_id}: {cause.details.reason}",
            )
        )
        self.stop_id = stop_id
        self.cause = cause
