"""Sensor reading models."""

import math
from dataclasses import dataclass
from enum import StrEnum
from typing import TypeAlias


class Metric(StrEnum):
    TEMPERATURE = "temp"
    PRECIPITATION = "precip"


@dataclass(frozen=True)
class Present:
    value: float


@dataclass(frozen=True)
class Absent:
    reason: str = ""


Reading: TypeAlias = Present | Absent


def is_valid(reading: Reading) -> bool:
    """A reading counts toward a blend only if it holds a finite number."""
    return isinstance(reading, Present) and math.isfinite(reading.value)


MAX_EXACT_INT = 2**53


def reading_to_json(reading: Reading) -> int | float | None:
    """Render a reading as a JSON number, integral values without ".0"."""
    if not is_valid(reading):
        return None
    value = reading.value
    if value.is_integer() and abs(value) < MAX_EXACT_INT:
        return int(value)
    return value


def parse_state(state: object) -> Reading:
    """Convert a Home Assistant `state` value into a Reading.

    HA reports sensor states as strings ("72.5", "unavailable", "unknown").
    Anything that is not a finite number becomes Absent.
    """
    if state is None:
        return Absent("missing state")
    if isinstance(state, bool):
        return Absent(f"non-numeric state {state!r}")
    if isinstance(state, (int, float)):
        value = float(state)
    elif isinstance(state, str):
        try:
            value = float(state.strip())
        except ValueError:
            return Absent(f"non-numeric state {state!r}")
    else:
        return Absent(f"non-numeric state {state!r}")

    if not math.isfinite(value):
        return Absent(f"non-finite state {state!r}")
    return Present(value)
