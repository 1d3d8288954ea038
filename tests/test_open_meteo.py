from __future__ import annotations

import json
import unittest

import aiohttp

from wxbot import Coordinates, FriendlyError, UpstreamError
from wxbot.open_meteo import FORECAST_URL, GEOCODING_URL, OpenMeteoClient, read_series, read_times, utc_offset


class FakeResponse:
    def __init__(self, status: int, body: str) -> None:
        self.status = status
        self._body = body

    async def text(self) -> str:
        return self._body

    async def __aenter__(self) -> "FakeResponse":
        return self

    async def __aexit__(self, *exc: object) -> None:
        return None


class FakeSession:
    def __init__(self, *responses: object) -> None:
        self.responses = list(responses)
        self.calls: list[tuple[str, list[tuple[str, str]]]] = []

    def get(self, url, params=None, timeout=None):
        self.calls.append((url, list(params or [])))
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


def ok(payload: object) -> FakeResponse:
    return FakeResponse(200, json.dumps(payload))


class OpenMeteoClientTests(unittest.IsolatedAsyncioTestCase):
    async def test_forecast_adds_location_and_time_format(self) -> None:
        session = FakeSession(ok({"hourly": {}}))
        client = OpenMeteoClient(session, timeout_s=5)  # type: ignore[arg-type]
        payload = await client.forecast(Coordinates(59.9, 10.7), [("hourly", "uv_index")])
        self.assertEqual(payload, {"hourly": {}})
        url, params = session.calls[0]
        self.assertEqual(url, FORECAST_URL)
        self.assertIn(("hourly", "uv_index"), params)
        self.assertIn(("timeformat", "unixtime"), params)
        self.assertIn(("timezone", "auto"), params)
        self.assertIn(("latitude", "59.9"), params)
        self.assertIn(("longitude", "10.7"), params)

    async def test_geocode_returns_first_result(self) -> None:
        session = FakeSession(
            ok(
                {
                    "results": [
                        {
                            "id": 1,
                            "name": "Bergen",
                            "latitude": 60.39,
                            "longitude": 5.32,
                            "feature_code": "PPLA",
                            "country": "Norway",
                            "population": 285000,
                        }
                    ]
                }
            )
        )
        client = OpenMeteoClient(session)  # type: ignore[arg-type]
        result = await client.geocode("Bergen")
        self.assertEqual(result.name, "Bergen")
        self.assertEqual(result.population, 285000)
        self.assertEqual(session.calls[0][0], GEOCODING_URL)
        self.assertIn(("name", "Bergen"), session.calls[0][1])

    async def test_geocode_without_results_is_friendly(self) -> None:
        client = OpenMeteoClient(FakeSession(ok({"generationtime_ms": 0.1})))  # type: ignore[arg-type]
        with self.assertRaises(FriendlyError) as ctx:
            await client.geocode("Nowhere at all")
        self.assertEqual(str(ctx.exception), "No geocoding results")

    async def test_error_payload_raises_upstream_error(self) -> None:
        client = OpenMeteoClient(FakeSession(FakeResponse(400, '{"error": true, "reason": "bad hourly"}')))  # type: ignore[arg-type]
        with self.assertRaises(UpstreamError) as ctx:
            await client.forecast(Coordinates(0, 0), [])
        self.assertIn("bad hourly", str(ctx.exception))

    async def test_non_json_body_is_quoted_in_error(self) -> None:
        client = OpenMeteoClient(FakeSession(FakeResponse(502, "<html>Bad gateway</html>")))  # type: ignore[arg-type]
        with self.assertRaises(UpstreamError) as ctx:
            await client.forecast(Coordinates(0, 0), [])
        self.assertIn("<html>Bad gateway</html>", str(ctx.exception))

    async def test_connection_errors_raise_upstream_error(self) -> None:
        client = OpenMeteoClient(FakeSession(aiohttp.ClientConnectionError("refused")))  # type: ignore[arg-type]
        with self.assertRaises(UpstreamError):
            await client.forecast(Coordinates(0, 0), [])


class ReadSeriesTests(unittest.TestCase):
    def test_reads_values_times_and_offset(self) -> None:
        payload = {"utc_offset_seconds": 3600, "hourly": {"time": [0, 3600], "uv_index": [0, 1.5]}}
        self.assertEqual(read_series(payload, "hourly", "uv_index"), [0.0, 1.5])
        self.assertEqual(read_times(payload, "hourly"), [0, 3600])
        self.assertEqual(utc_offset(payload), 3600)

    def test_gaps_and_missing_keys_raise(self) -> None:
        with self.assertRaises(UpstreamError):
            read_series({"hourly": {"uv_index": [1, None]}}, "hourly", "uv_index")
        with self.assertRaises(UpstreamError):
            read_series({"hourly": {}}, "hourly", "uv_index")
        with self.assertRaises(UpstreamError):
            utc_offset({})

    def test_non_numeric_values_raise_upstream_error(self) -> None:
        with self.assertRaises(UpstreamError) as ctx:
            read_series({"hourly": {"uv_index": [1.0, "n/a"]}}, "hourly", "uv_index")
        self.assertIn("'n/a'", str(ctx.exception))
        with self.assertRaises(UpstreamError):
            read_series({"hourly": {"uv_index": [{"value": 1}]}}, "hourly", "uv_index")


if __name__ == "__main__":
    unittest.main()
