"""Home Assistant REST API client for entity state lookups."""

import logging

import httpx

logger = logging.getLogger(__name__)


class HomeAssistantError(Exception):
    """Raised when Home Assistant returns an error or an unreadable body."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class HomeAssistantClient:
    """Async wrapper around GET /api/states/{entity_id}.

    Use as an async context manager so one connection pool is shared by
    every lookup in a batch. Without a timeout, httpx's default applies.
    """

    def __init__(
        self,
        base_url: str,
        token: str,
        timeout: float | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.timeout = timeout
        self._client: httpx.AsyncClient | None = None

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.token}",
            "Content-Type": "application/json",
        }

    async def __aenter__(self) -> "HomeAssistantClient":
        kwargs: dict = {"headers": self._headers()}
        if self.timeout is not None:
            kwargs["timeout"] = self.timeout
        self._client = httpx.AsyncClient(**kwargs)
        return self

    async def __aexit__(self, *exc_info) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    def state_url(self, entity_id: str) -> str:
        return f"{self.base_url}/api/states/{entity_id}"

    async def get_state(self, entity_id: str) -> dict:
        """Fetch the state object for one entity.

        Raises HomeAssistantError on non-2xx status or a non-object body.
        Transport failures surface as httpx.RequestError.
        """
        if self._client is None:
            raise RuntimeError("HomeAssistantClient used outside 'async with'")
        url = self.state_url(entity_id)
        logger.debug("GET %s", url)
        resp = await self._client.get(url)
        if not resp.is_success:
            raise HomeAssistantError(
                f"HTTP {resp.status_code} {resp.reason_phrase}", resp.status_code
            )
        try:
            data = resp.json()
        except ValueError as e:
            raise HomeAssistantError(f"Invalid JSON body: {e}", resp.status_code) from e
        if not isinstance(data, dict):
            raise HomeAssistantError(
                f"Expected JSON object, got {type(data).__name__}", resp.status_code
            )
        return data
