"""Shared test fixtures."""

from collections.abc import Callable
from pathlib import Path

import httpx
import pytest
import respx
import yaml

from weatherblend.config.defaults import DEFAULT_SOURCES
from weatherblend.config.schema import BlendConfig, HomeAssistantConfig

HA_URL = "http://ha.test:8123"
HA_TOKEN = "test-token"


@pytest.fixture
def blend_config() -> BlendConfig:
    """Config pointing at a fake Home Assistant with the default sources."""
    return BlendConfig(
        home_assistant=HomeAssistantConfig(base_url=HA_URL, token=HA_TOKEN),
        sources=DEFAULT_SOURCES,
    )


@pytest.fixture
def ha_router():
    """respx router rooted at the fake Home Assistant URL."""
    with respx.mock(base_url=HA_URL, assert_all_called=False) as router:
        yield router


@pytest.fixture
def mock_states(ha_router) -> Callable[[dict], dict]:
    """Register entity responses on ha_router.

    Values may be a state (wrapped in a 200 JSON body), an httpx.Response,
    or an exception to raise from the transport. Returns the routes by entity.
    """

    def _mock(states: dict) -> dict:
        routes = {}
        for entity_id, value in states.items():
            route = ha_router.get(f"/api/states/{entity_id}")
            if isinstance(value, httpx.Response):
                route.mock(return_value=value)
            elif isinstance(value, Exception):
                route.mock(side_effect=value)
            else:
                route.mock(
                    return_value=httpx.Response(
                        200, json={"entity_id": entity_id, "state": value}
                    )
                )
            routes[entity_id] = route
        return routes

    return _mock


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "home_assistant": {"base_url": "http://pi.local:8123/", "token": "file-token"},
        "server": {"cache_max_age_seconds": 120},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"
