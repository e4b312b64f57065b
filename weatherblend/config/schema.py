"""Pydantic v2 configuration schema with strict validation."""

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, Field, field_validator


class SourceConfig(BaseModel):
    model_config = {"extra": "forbid", "frozen": True}

    slug: str = Field(min_length=1)
    temperature_entity: str = Field(min_length=1)
    precipitation_entity: str = Field(min_length=1)


class HomeAssistantConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = ""
    token: str = ""
    timeout: float | None = Field(default=None, gt=0.0)

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, v: str) -> str:
        return v.strip().rstrip("/")


class ServerConfig(BaseModel):
    model_config = {"extra": "forbid"}

    host: str = "0.0.0.0"
    port: int = Field(default=8000, ge=1, le=65535)
    timezone: str = "America/Chicago"
    cache_max_age_seconds: int = Field(default=300, ge=0)
    stale_while_revalidate: bool = True

    @field_validator("timezone")
    @classmethod
    def _known_timezone(cls, v: str) -> str:
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"unknown timezone: {v!r}") from e
        return v


class BlendConfig(BaseModel):
    model_config = {"extra": "forbid"}

    home_assistant: HomeAssistantConfig = HomeAssistantConfig()
    server: ServerConfig = ServerConfig()
    sources: tuple[SourceConfig, ...] = ()

    @field_validator("sources")
    @classmethod
    def _unique_slugs(cls, v: tuple[SourceConfig, ...]) -> tuple[SourceConfig, ...]:
        slugs = [s.slug for s in v]
        if len(slugs) != len(set(slugs)):
            raise ValueError(f"duplicate source slugs: {slugs}")
        return v
