from __future__ import annotations
# API Endpoints
FORECAST_ENDPOINT = "https://api.open-meteo.com/v1/forecast"
GEOCODE_ENDPOINT = "https://geocode.maps.co/search"

# Service-side limits (enforced remotely, kept for reference)
FORECAST_MAX_DAYS = 16

DEFAULT_TIMEOUT_SECONDS = 30
DEFAULT_MAX_WORKERS = 4

# Full hourly variable catalog
HOURLY_VARIABLES = (
    "temperature_2m",
    "relativehumidity_2m",
    "dewpoint_2m",
    "apparent_temperature",
    "precipitation_probability",
    "precipitation",
    "rain",
    "showers",
    "snowfall",
    "snow_depth",
    "weathercode",
    "pressure_msl",
    "surface_pressure",
    "cloudcover",
    "cloudcover_low",
    "cloudcover_mid",
    "cloudcover_high",
    "visibility",
    "evapotranspiration",
    "et0_fao_evapotranspiration",
    "vapor_pressure_deficit",
    "windspeed_10m",
    "windspeed_80m",
    "windspeed_120m",
    "windspeed_180m",
    "winddirection_10m",
    "winddirection_80m",
    "winddirection_120m",
    "winddirection_180m",
    "windgusts_10m",
    "temperature_80m",
    "temperature_120m",
    "temperature_180m",
    "soil_temperature_0cm",
    "soil_temperature_6cm",
    "soil_temperature_18cm",
    "soil_temperature_54cm",
    "soil_moisture_0_1cm",
    "soil_moisture_1_3cm",
    "soil_moisture_3_9cm",
    "soil_moisture_9_27cm",
    "soil_moisture_27_81cm",
)

# Full daily variable catalog (aggregated per day in the requested time zone)
DAILY_VARIABLES = (
    "weathercode",
    "temperature_2m_max",
    "temperature_2m_min",
    "apparent_temperature_max",
    "apparent_temperature_min",
    "sunrise",
    "sunset",
    "uv_index_max",
    "uv_index_clear_sky_max",
    "precipitation_sum",
    "rain_sum",
    "showers_sum",
    "snowfall_sum",
    "precipitation_hours",
    "precipitation_probability_max",
    "windspeed_10m_max",
    "windgusts_10m_max",
    "winddirection_10m_dominant",
    "shortwave_radiation_sum",
    "et0_fao_evapotranspiration",
)

__all__ = [
    "FORECAST_ENDPOINT",
    "GEOCODE_ENDPOINT",
    "FORECAST_MAX_DAYS",
    "DEFAULT_TIMEOUT_SECONDS",
    "DEFAULT_MAX_WORKERS",
    "HOURLY_VARIABLES",
    "DAILY_VARIABLES",
]
