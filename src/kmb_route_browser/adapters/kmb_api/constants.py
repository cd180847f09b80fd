"""Constants for the KMB open-data API adapter.

API documentation: https://data.etabus.gov.hk/
No authentication required.
"""

# Endpoint paths, relative to the configured base URL
ROUTE_LIST_PATH = "route/"  # GET route/
ROUTE_STOP_PATH = "route-stop/{route}/{bound}/{service_type}"  # GET route-stop/1A/outbound/1
STOP_PATH = "stop/{stop_id}"  # GET stop/18492910339410B1

# HTTP headers
DEFAULT_HEADERS = {
    "Accept": "application/json",
}
