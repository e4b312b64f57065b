"""Blended weather endpoint: FastAPI app serving one averaged payload."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from weatherblend.blend.blender import Blender
from weatherblend.config.loader import ConfigurationError, load_runtime_config
from weatherblend.config.schema import BlendConfig, ServerConfig

logger = logging.getLogger(__name__)

CONFIG_MISSING_MESSAGE = "Server configuration missing."


def cache_control(server: ServerConfig) -> str:
    """Shared-cache directive, e.g. "s-maxage=300, stale-while-revalidate"."""
    value = f"s-maxage={server.cache_max_age_seconds}"
    if server.stale_while_revalidate:
        value += ", stale-while-revalidate"
    return value


async def _configuration_error_handler(
    request: Request, exc: ConfigurationError
) -> JSONResponse:
    logger.error("Refusing %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=500, content={"error": CONFIG_MISSING_MESSAGE})


def create_app(config: BlendConfig | None = None) -> FastAPI:
    """Build the app. Without an explicit config, load it from the environment."""
    if config is None:
        config = load_runtime_config()

    app = FastAPI(title="Weather Blend", version="0.1.0")
    app.state.config = config
    app.add_exception_handler(ConfigurationError, _configuration_error_handler)

    @app.get("/")
    @app.get("/api/weather")
    async def get_weather(request: Request) -> JSONResponse:
        """Blended temperature and precipitation probability across sources."""
        cfg: BlendConfig = request.app.state.config
        result = await Blender(cfg).run()
        return JSONResponse(
            content=result.to_payload(),
            headers={"Cache-Control": cache_control(cfg.server)},
        )

    return app
