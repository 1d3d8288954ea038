from __future__ import annotations

import math
from datetime import datetime, timedelta, timezone


def _local_time(timestamp: int, offset_seconds: int) -> datetime:
    return datetime.fromtimestamp(timestamp, timezone(timedelta(seconds=offset_seconds)))


def hour_from_timestamp(timestamp: int, offset_seconds: int) -> int:
    """Hour of the day (0-23) of a Unix timestamp at the given UTC offset."""
    return _local_time(timestamp, offset_seconds).hour


def day_from_timestamp(timestamp: int, offset_seconds: int) -> int:
    """Day of the month (1-31) of a Unix timestamp at the given UTC offset."""
    return _local_time(timestamp, offset_seconds).day


def clock_time(timestamp: int, offset_seconds: int) -> str:
    return _local_time(timestamp, offset_seconds).strftime("%H:%M")


def wet_bulb_temp(temperature: float, relative_humidity: float) -> float:
    """Stull's wet bulb approximation in °C, from °C and relative humidity in percent.

    Only accurate for roughly -20..50 °C and 5..99 % relative humidity.
    """
    t, h = temperature, relative_humidity
    return (
        t * math.atan(0.15197 * math.sqrt(h + 8.313659))
        + math.atan(t + h)
        - math.atan(h - 1.676331)
        + 0.00391838 * h**1.5 * math.atan(0.023101 * h)
        - 4.686035
    )


def absolute_humidity(relative_humidity: float, temperature: float) -> float:
    """Absolute humidity in g/m³ from relative humidity (0..1) and temperature in °C."""
    return (
        math.exp(17.67 * temperature / (temperature + 243.5))
        * 6.112
        * relative_humidity
        * 100.0
        * 2.1674
        / (temperature + 273.15)
    )
