"""Tests for the MCP tool functions."""

import importlib

import pytest

from vacation_calculator import mcp_server
from vacation_calculator.mcp_server import (
    calculate_vacation,
    create_mcp_server,
    parse_holiday_list,
)


@pytest.fixture
def configured_server(tmp_path, monkeypatch):
    """Reload the server module with a holiday file in the configuration."""
    holiday_file = tmp_path / "holidays.txt"
    holiday_file.write_text("2024-01-03\n", encoding="utf-8")
    monkeypatch.setenv("VACATION_CALC_HOLIDAYS_FILE", str(holiday_file))

    yield importlib.reload(mcp_server)

    monkeypatch.delenv("VACATION_CALC_HOLIDAYS_FILE")
    importlib.reload(mcp_server)


class TestCalculateVacationTool:
    """Tests for the calculate_vacation tool."""

    def test_end_date(self):
        result = calculate_vacation(start_date="2024-01-01", duration=6, holidays="2024-01-01,2024-01-07")

        assert result["mode"] == "end"
        assert result["period"]["end_date"] == "2024-01-08"
        assert result["holidays_in_range"] == ["2024-01-01", "2024-01-07"]

    def test_holiday_list_input(self):
        result = calculate_vacation(
            start_date="2024-01-01", end_date="2024-01-07", holidays=["2024-01-03"]
        )

        assert result["period"]["duration"] == 6

    def test_error(self):
        result = calculate_vacation(start_date="2024-01-01")

        assert result["kind"] == "wrong_parameter_count"
        assert "error" in result

    def test_configured_holiday_file(self, configured_server):
        result = configured_server.calculate_vacation(start_date="2024-01-01", end_date="2024-01-07")

        assert result["period"]["duration"] == 6
        assert result["holidays_in_range"] == ["2024-01-03"]

    def test_configured_and_request_holidays_merge(self, configured_server):
        result = configured_server.calculate_vacation(
            start_date="2024-01-01", end_date="2024-01-07", holidays="2024-01-05"
        )

        assert result["period"]["duration"] == 5


class TestParseHolidayListTool:
    def test_parse(self):
        assert parse_holiday_list("2024-01-07\n2024-13-01") == {
            "count": 1,
            "holidays": ["2024-01-07"],
        }


def test_server_registers_tools():
    server = create_mcp_server()
    assert server.name == "Vacation Calculator"
