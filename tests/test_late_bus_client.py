from __future__ import annotations

from datetime import date
from unittest.mock import Mock, patch

import pytest
import requests

from schoolboard.data.late_bus_client import (
    LateBusClient,
    LateBusError,
    LateBusRecord,
    find_late_bus,
    parse_table_rows,
)

TODAY = date(2026, 10, 19)

SHEET_HTML = """
<html><body><table>
  <tr><th>Date</th><th>Bus</th><th>Route</th><th>School</th><th>Minutes</th><th>Reason</th><th>Details</th></tr>
  <tr><td>2026-10-18</td><td>12</td><td>A</td><td>Eisenhower</td><td>20</td><td>Traffic</td><td></td></tr>
  <tr><td>not a date</td><td>12</td><td>A</td><td>Eisenhower</td><td>30</td><td>Oops</td><td></td></tr>
  <tr><td>2026-10-19</td><td>Bus 7, Bus 14</td><td>B</td><td>Eisenhower</td><td>10</td><td>Weather</td><td></td></tr>
  <tr><td>2026-10-19</td><td>Bus 12</td><td>A</td><td>Eisenhower</td><td>soon</td><td>Unknown</td><td></td></tr>
  <tr><td>10/19/2026</td><td>BUS 12 / 15</td><td>A</td><td>Eisenhower</td><td>15</td><td>Driver shortage</td><td>Sub driver</td></tr>
  <tr><td>2026-10-19</td><td>12</td><td>A</td><td>Eisenhower</td><td>40</td><td>Second row</td><td></td></tr>
</table></body></html>
"""


def _mock_response(status_code: int, text: str = "") -> Mock:
    response = Mock()
    response.status_code = status_code
    response.text = text
    return response


def test_parse_table_rows_skips_header_rows() -> None:
    rows = parse_table_rows(SHEET_HTML)

    assert len(rows) == 6
    assert rows[0][:2] == ["2026-10-18", "12"]


def test_find_late_bus_first_match_for_today() -> None:
    record = find_late_bus(parse_table_rows(SHEET_HTML), "12", TODAY)

    assert record == LateBusRecord(late_minutes=15, reason="Driver shortage", details="Sub driver")


def test_find_late_bus_case_insensitive() -> None:
    rows = [["2026-10-19", "Route 4b", "", "", "5", "Ice", ""]]

    assert find_late_bus(rows, "4B", TODAY) == LateBusRecord(5, "Ice", "")


def test_find_late_bus_no_match() -> None:
    assert find_late_bus(parse_table_rows(SHEET_HTML), "99", TODAY) is None


def test_find_late_bus_other_day() -> None:
    assert find_late_bus(parse_table_rows(SHEET_HTML), "12", date(2026, 10, 20)) is None


def test_find_late_bus_short_rows_skipped() -> None:
    rows = [["2026-10-19", "12"], ["2026-10-19", "12", "", "", "8"]]

    assert find_late_bus(rows, "12", TODAY) == LateBusRecord(8, "", "")


def test_lookup_fetches_sheet() -> None:
    client = LateBusClient("https://example.com/late", "12")
    with patch("requests.get", return_value=_mock_response(200, SHEET_HTML)) as mock_get:
        record = client.lookup(TODAY)

    assert record is not None
    assert record.late_minutes == 15
    mock_get.assert_called_once()


def test_lookup_without_url_is_on_time() -> None:
    client = LateBusClient("", "12")
    with patch("requests.get") as mock_get:
        assert client.lookup(TODAY) is None

    mock_get.assert_not_called()


def test_lookup_non_200_raises() -> None:
    client = LateBusClient("https://example.com/late", "12")
    with patch("requests.get", return_value=_mock_response(500, "down")):
        with pytest.raises(LateBusError) as exc_info:
            client.lookup(TODAY)

    assert "500" in str(exc_info.value)


def test_lookup_network_error_raises() -> None:
    client = LateBusClient("https://example.com/late", "12")
    with patch("requests.get", side_effect=requests.exceptions.ConnectionError("boom")):
        with pytest.raises(LateBusError):
            client.lookup(TODAY)
