"""SOAP request envelope for the Darwin GetDepartureBoard operation."""

from xml.sax.saxutils import escape

from london_departures.adapters.darwin_api.constants import LDB_NAMESPACE, SOAP_NAMESPACE

_ENVELOPE_TEMPLATE = """<?xml version="1.0" encoding="utf-8"?>
<soap:Envelope xmlns:soap="{soap_ns}" xmlns:ldb="{ldb_ns}">
  <soap:Header>
    <ldb:AccessToken>
      <ldb:TokenValue>{token}</ldb:TokenValue>
    </ldb:AccessToken>
  </soap:Header>
  <soap:Body>
    <ldb:GetDepartureBoardRequest>
      <ldb:numRows>{num_rows}</ldb:numRows>
      <ldb:crs>{crs}</ldb:crs>
    </ldb:GetDepartureBoardRequest>
  </soap:Body>
</soap:Envelope>"""


def build_departure_board_request(token: str, crs: str, num_rows: int) -> str:
    """Build the GetDepartureBoard envelope.

    The CRS code is upper-cased; Darwin rejects lower-case codes.
    """
    return _ENVELOPE_TEMPLATE.format(
        soap_ns=SOAP_NAMESPACE,
        ldb_ns=LDB_NAMESPACE,
        token=escape(token),
        num_rows=int(num_rows),
        crs=escape(crs.strip().upper()),
    )
