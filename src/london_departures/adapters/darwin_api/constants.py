"""Constants for the Darwin (National Rail OpenLDBWS) adapter.

API Documentation: https://lite.realtime.nationalrail.co.uk/OpenLDBWS/
"""

SERVICE_NAME = "Darwin"

DARWIN_URL = "https://lite.realtime.nationalrail.co.uk/OpenLDBWS/ldb12.asmx"

LDB_NAMESPACE = "http://thalesgroup.com/RTTI/2017-10-01/ldb/"
SOAP_NAMESPACE = "http://schemas.xmlsoap.org/soap/envelope/"
SOAP_ACTION = f"{LDB_NAMESPACE}GetDepartureBoard"

DEFAULT_HEADERS = {
    "Content-Type": "text/xml; charset=utf-8",
    "SOAPAction": SOAP_ACTION,
}

# Fallbacks used when the response lacks station identity
UNKNOWN_LOCATION_NAME = "Unknown"
UNKNOWN_CRS = "UNK"
