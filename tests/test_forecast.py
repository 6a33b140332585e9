"""Contract tests for the forecast client and report formatting."""

import httpx
import pytest

from conftest import THREE_DAY_FORECAST, make_response, mock_client
from config import Config
from utils.errors import ProviderError
from utils.forecast import fetch_forecast, format_forecast, parse_daily_forecast


class TestFetchForecast:
    @pytest.mark.asyncio
    async def test_returns_one_entry_per_day(self):
        """fetch_forecast turns the daily columns into chronological rows.

        Implementation: Mocks a three-day forecast, including an unknown weather code.
        Passing implies: Each day keeps its values and gets a description, "Unknown" included.
        """
        client = mock_client(make_response(THREE_DAY_FORECAST))

        days = await fetch_forecast(35.6895, 139.69171, client=client)

        assert [d.date for d in days] == ["2025-04-01", "2025-04-02", "2025-04-03"]
        assert [d.weather_description for d in days] == ["Clear sky", "Slight rain", "Unknown"]
        assert days[1].temperature_max == 15.0
        assert days[1].temperature_min == 10.3
        assert days[1].precipitation_sum == 7.4
        assert days[1].wind_speed_max == 22.3

    @pytest.mark.asyncio
    async def test_sends_expected_params(self):
        client = mock_client(make_response({"daily": {}}))

        await fetch_forecast(-33.87, 151.21, client=client)

        args, kwargs = client.get.call_args
        assert args[0] == Config.FORECAST_URL
        assert kwargs["params"] == {
            "latitude": -33.87,
            "longitude": 151.21,
            "daily": "weather_code,temperature_2m_max,temperature_2m_min,precipitation_sum,wind_speed_10m_max",
            "timezone": "auto",
            "forecast_days": 7,
        }

    @pytest.mark.asyncio
    async def test_http_error_status(self):
        client = mock_client(make_response({"error": True, "reason": "bad"}, status_code=400))

        with pytest.raises(ProviderError, match="Failed to fetch weather data: 400") as exc_info:
            await fetch_forecast(1, 2, client=client)
        assert exc_info.value.status == 400

    @pytest.mark.asyncio
    async def test_error_message_has_no_coordinates(self):
        client = mock_client(httpx.ReadTimeout("timed out"))

        with pytest.raises(ProviderError) as exc_info:
            await fetch_forecast(35.6895, 139.69171, client=client)
        assert "35.6895" not in str(exc_info.value)
        assert "139.69171" not in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_non_json_body(self):
        response = httpx.Response(200, text="<html>", request=httpx.Request("GET", "https://test"))
        client = mock_client(response)

        with pytest.raises(ProviderError, match="invalid JSON"):
            await fetch_forecast(1, 2, client=client)


class TestParseDailyForecast:
    def test_drops_days_with_missing_values(self):
        """Days with a missing or null value are skipped, the rest are kept.

        Implementation: Shortens one column and nulls a value in another.
        Passing implies: A malformed payload degrades to fewer days instead of failing.
        """
        raw = {
            "time": ["2025-04-01", "2025-04-02", "2025-04-03"],
            "weather_code": [1, 2, 3],
            "temperature_2m_max": [10.0, None, 12.0],
            "temperature_2m_min": [1.0, 2.0, 3.0],
            "precipitation_sum": [0.0, 0.0, 0.0],
            "wind_speed_10m_max": [5.0, 5.0],
        }

        days = parse_daily_forecast(raw)

        assert [d.date for d in days] == ["2025-04-01"]

    def test_empty_payload(self):
        assert parse_daily_forecast({}) == []
        assert parse_daily_forecast({"time": []}) == []


class TestFormatForecast:
    def test_report_layout(self):
        days = parse_daily_forecast(THREE_DAY_FORECAST["daily"])

        text = format_forecast("Home", days)

        assert text.startswith('7-Day Weather Forecast for "Home":\n\n')
        assert "2025-04-02: Slight rain\n" in text
        assert "  Temperature: 10.3°C ~ 15.0°C\n" in text
        assert "  Precipitation: 7.4mm\n" in text
        assert "  Max Wind Speed: 22.3km/h" in text
        assert text.count("Temperature:") == 3


class TestMalformedForecast:
    def test_malformed_day_is_dropped(self):
        """A day with a present but unusable value is skipped, the rest are kept.

        Implementation: Gives one day a fractional weather code and another a text temperature.
        Passing implies: One bad value costs one day instead of the whole report.
        """
        raw = {
            "time": ["2025-04-01", "2025-04-02", "2025-04-03"],
            "weather_code": [0, 3.5, 2],
            "temperature_2m_max": [10.0, 11.0, "warm"],
            "temperature_2m_min": [1.0, 2.0, 3.0],
            "precipitation_sum": [0.0, 0.0, 0.0],
            "wind_speed_10m_max": [5.0, 5.0, 5.0],
        }

        days = parse_daily_forecast(raw)

        assert [d.date for d in days] == ["2025-04-01"]

    def test_integral_float_code_is_described(self):
        """A weather code sent as 3.0 is stored and described as code 3.

        Implementation: Parses a day whose code arrives as a float.
        Passing implies: The description always matches the stored code.
        """
        raw = {
            "time": ["2025-04-01"],
            "weather_code": [3.0],
            "temperature_2m_max": [10.0],
            "temperature_2m_min": [1.0],
            "precipitation_sum": [0.0],
            "wind_speed_10m_max": [5.0],
        }

        (day,) = parse_daily_forecast(raw)

        assert day.weather_code == 3
        assert day.weather_description == "Overcast"

    def test_non_list_columns_give_no_days(self):
        assert parse_daily_forecast({"time": "2025-04-01"}) == []
        assert parse_daily_forecast({"time": ["2025-04-01"], "weather_code": 3}) == []

    @pytest.mark.asyncio
    async def test_daily_not_an_object(self):
        client = mock_client(make_response({"daily": [1]}))

        with pytest.raises(ProviderError, match="unexpected response shape") as exc_info:
            await fetch_forecast(1, 2, client=client)
        assert exc_info.value.status == 200


class TestEmptyReport:
    def test_no_usable_days(self):
        text = format_forecast("Home", [])

        assert text == '7-Day Weather Forecast for "Home":\n\nNo forecast data available.'
