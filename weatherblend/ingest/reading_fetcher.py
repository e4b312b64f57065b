"""Reading fetcher: turns one entity lookup into a Reading, never raising."""

import logging

import httpx

from weatherblend.ingest.ha_client import HomeAssistantClient, HomeAssistantError
from weatherblend.models.reading import Absent, Reading, parse_state

logger = logging.getLogger(__name__)


class ReadingFetcher:
    def __init__(self, client: HomeAssistantClient):
        self.client = client

    async def fetch(self, entity_id: str) -> Reading:
        """Fetch the current numeric state of an entity.

        HTTP errors, transport faults and non-numeric states are logged
        and mapped to Absent so one bad sensor only shrinks the blend.
        """
        if not entity_id:
            raise ValueError("entity_id must be non-empty")

        try:
            data = await self.client.get_state(entity_id)
        except HomeAssistantError as e:
            logger.error("Error fetching %s: %s", entity_id, e)
            if e.status_code is not None and e.status_code >= 400:
                return Absent(f"http {e.status_code}")
            return Absent(str(e))
        except httpx.RequestError as e:
            logger.error(
                "Exception fetching %s: %s: %s", entity_id, type(e).__name__, e
            )
            return Absent(f"transport: {type(e).__name__}")

        reading = parse_state(data.get("state"))
        if isinstance(reading, Absent):
            logger.warning("Unusable state for %s: %s", entity_id, reading.reason)
        return reading
