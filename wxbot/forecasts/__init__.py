from wxbot.forecasts.absolute_humidity import fetch_absolute_humidity, render_absolute_humidity
from wxbot.forecasts.daily import fetch_daily, render_daily
from wxbot.forecasts.hourly import fetch_hourly, render_hourly
from wxbot.forecasts.soil import fetch_soil_moisture, render_soil_moisture

__all__ = [
    "fetch_absolute_humidity",
    "fetch_daily",
    "fetch_hourly",
    "fetch_soil_moisture",
    "render_absolute_humidity",
    "render_daily",
    "render_hourly",
    "render_soil_moisture",
]
