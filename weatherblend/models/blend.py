"""Blend result models and the response payload shape."""

from dataclasses import dataclass

from weatherblend.models.reading import Metric, Reading, reading_to_json

UNAVAILABLE = "N/A"


@dataclass(frozen=True)
class SourceReadings:
    temperature: Reading
    precipitation: Reading

    def get(self, metric: Metric) -> Reading:
        if metric == Metric.TEMPERATURE:
            return self.temperature
        return self.precipitation

    def to_json(self) -> dict[str, int | float | None]:
        return {
            Metric.TEMPERATURE.value: reading_to_json(self.temperature),
            Metric.PRECIPITATION.value: reading_to_json(self.precipitation),
        }


@dataclass(frozen=True)
class BlendResult:
    temperature: int | None  # None renders as UNAVAILABLE
    precipitation: int | None
    sources: dict[str, SourceReadings]
    last_updated: str

    def to_payload(self) -> dict:
        return {
            "blended": {
                "temperature": _blended_json(self.temperature),
                "precipitation": _blended_json(self.precipitation),
            },
            "sources": {slug: r.to_json() for slug, r in self.sources.items()},
            "last_updated": self.last_updated,
        }


def _blended_json(value: int | None) -> int | str:
    return UNAVAILABLE if value is None else value
