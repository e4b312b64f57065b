"""Default source table: Home Assistant weather entities per provider."""

from weatherblend.config.schema import SourceConfig

DEFAULT_SOURCES: tuple[SourceConfig, ...] = (
    SourceConfig(
        slug="nws",
        temperature_entity="sensor.nws_temperature",
        precipitation_entity="sensor.nws_precipitation_probability",
    ),
    SourceConfig(
        slug="accuweather",
        temperature_entity="sensor.accuweather_temperature",
        precipitation_entity="sensor.accuweather_precipitation_probability",
    ),
    SourceConfig(
        slug="openweathermap",
        temperature_entity="sensor.openweathermap_temperature",
        precipitation_entity="sensor.openweathermap_precipitation_probability",
    ),
)
