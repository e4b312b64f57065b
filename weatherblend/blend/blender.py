"""Blender: concurrent fan-out over all sources, then per-metric averaging."""

import asyncio
import logging
from collections.abc import Callable

from weatherblend.blend.averaging import blend_readings
from weatherblend.config.loader import require_credentials
from weatherblend.config.schema import BlendConfig, SourceConfig
from weatherblend.ingest.ha_client import HomeAssistantClient
from weatherblend.ingest.reading_fetcher import ReadingFetcher
from weatherblend.models.blend import BlendResult, SourceReadings
from weatherblend.models.common import display_now
from weatherblend.models.reading import Absent, Metric, Reading, is_valid

logger = logging.getLogger(__name__)


def entity_for(source: SourceConfig, metric: Metric) -> str:
    if metric == Metric.TEMPERATURE:
        return source.temperature_entity
    return source.precipitation_entity


async def gather_readings(
    fetcher: ReadingFetcher, sources: tuple[SourceConfig, ...]
) -> dict[tuple[str, Metric], Reading]:
    """Fetch every (source, metric) pair concurrently and settle all of them.

    The fetcher already maps failures to Absent; anything it still raises
    is logged and treated the same way so the batch always completes.
    """
    jobs = [(s, m) for s in sources for m in Metric]
    results = await asyncio.gather(
        *(fetcher.fetch(entity_for(s, m)) for s, m in jobs),
        return_exceptions=True,
    )

    readings: dict[tuple[str, Metric], Reading] = {}
    for (source, metric), result in zip(jobs, results):
        if isinstance(result, BaseException):
            if not isinstance(result, Exception):
                raise result
            logger.error(
                "Unexpected error fetching %s for %s: %r",
                metric.value, source.slug, result,
            )
            result = Absent(f"error: {type(result).__name__}")
        readings[(source.slug, metric)] = result
    return readings


class Blender:
    def __init__(
        self,
        config: BlendConfig,
        clock: Callable[[str], str] = display_now,
    ):
        self.config = config
        self.clock = clock

    async def run(self) -> BlendResult:
        """Fetch all readings and blend them.

        Raises ConfigurationError before any request if the Home Assistant
        URL or token is missing.
        """
        require_credentials(self.config)
        ha = self.config.home_assistant
        sources = self.config.sources

        async with HomeAssistantClient(ha.base_url, ha.token, ha.timeout) as client:
            readings = await gather_readings(ReadingFetcher(client), sources)

        return self.assemble(readings)

    def assemble(self, readings: dict[tuple[str, Metric], Reading]) -> BlendResult:
        """Build the BlendResult from settled readings."""
        per_source = {
            s.slug: SourceReadings(
                temperature=readings.get((s.slug, Metric.TEMPERATURE), Absent("not fetched")),
                precipitation=readings.get((s.slug, Metric.PRECIPITATION), Absent("not fetched")),
            )
            for s in self.config.sources
        }

        blended: dict[Metric, int | None] = {}
        for metric in Metric:
            metric_readings = [r.get(metric) for r in per_source.values()]
            blended[metric] = blend_readings(metric_readings)
            logger.info(
                "Blended %s from %d/%d sources: %s",
                metric.value,
                sum(1 for r in metric_readings if is_valid(r)),
                len(metric_readings),
                blended[metric],
            )

        return BlendResult(
            temperature=blended[Metric.TEMPERATURE],
            precipitation=blended[Metric.PRECIPITATION],
            sources=per_source,
            last_updated=self.clock(self.config.server.timezone),
        )


def run_blend(config: BlendConfig) -> BlendResult:
    """Synchronous entry point for callers without a running event loop."""
    return asyncio.run(Blender(config).run())
