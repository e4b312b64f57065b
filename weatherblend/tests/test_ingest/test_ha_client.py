"""Tests for the Home Assistant client with mocked httpx."""

import asyncio

import httpx
import pytest

from weatherblend.ingest.ha_client import HomeAssistantClient, HomeAssistantError
from weatherblend.tests.conftest import HA_TOKEN, HA_URL


def _get_state(entity_id: str, base_url: str = HA_URL) -> dict:
    async def go():
        async with HomeAssistantClient(base_url, HA_TOKEN) as client:
            return await client.get_state(entity_id)

    return asyncio.run(go())


class TestGetState:
    def test_success(self, mock_states):
        mock_states({"sensor.nws_temperature": "71.6"})
        data = _get_state("sensor.nws_temperature")
        assert data["state"] == "71.6"

    def test_auth_headers(self, mock_states):
        routes = mock_states({"sensor.nws_temperature": "71"})
        _get_state("sensor.nws_temperature")
        request = routes["sensor.nws_temperature"].calls[0].request
        assert request.headers["authorization"] == f"Bearer {HA_TOKEN}"
        assert request.headers["content-type"] == "application/json"

    def test_trailing_slash_in_base_url(self, mock_states):
        routes = mock_states({"sensor.nws_temperature": "71"})
        _get_state("sensor.nws_temperature", base_url=HA_URL + "/")
        assert routes["sensor.nws_temperature"].called

    def test_http_error(self, mock_states):
        mock_states({"sensor.gone": httpx.Response(404, json={"message": "Entity not found."})})
        with pytest.raises(HomeAssistantError, match="404") as exc_info:
            _get_state("sensor.gone")
        assert exc_info.value.status_code == 404

    def test_invalid_json(self, mock_states):
        mock_states({"sensor.garbled": httpx.Response(200, text="<html>oops</html>")})
        with pytest.raises(HomeAssistantError, match="Invalid JSON"):
            _get_state("sensor.garbled")

    def test_non_object_body(self, mock_states):
        mock_states({"sensor.list": httpx.Response(200, json=[1, 2])})
        with pytest.raises(HomeAssistantError, match="list"):
            _get_state("sensor.list")

    def test_transport_error_propagates(self, mock_states):
        mock_states({"sensor.down": httpx.ConnectError("connection refused")})
        with pytest.raises(httpx.ConnectError):
            _get_state("sensor.down")

    def test_outside_context_manager(self):
        client = HomeAssistantClient(HA_URL, HA_TOKEN)
        with pytest.raises(RuntimeError):
            asyncio.run(client.get_state("sensor.nws_temperature"))
