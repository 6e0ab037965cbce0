"""Constants for the TfL Unified API adapter.

API Documentation: https://api.tfl.gov.uk/swagger/ui/index.html
"""

SERVICE_NAME = "TfL"

TFL_BASE_URL = "https://api.tfl.gov.uk"

# HTTP headers
DEFAULT_HEADERS = {
    "Accept": "application/json",
}

UNKNOWN_STATION_NAME = "Unknown Station"
ALL_STOPS_ID = "ALL"
