# =============================================================================
# core/weather.py  —  Weather Lookups & Formatting Logic
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Implements the two weather lookups exposed as MCP tools:
#
#     get_alerts(state)                → active NWS alerts for a US state
#     get_forecast(latitude, longitude) → NWS forecast for a coordinate pair
#
#   Both return ONE human-readable text block, ready to be handed to an LLM
#   as a tool result.
#
# THE SEPARATION OF "FETCH" AND "FORMAT":
#   - core/nws.py fetches raw GeoJSON (and never raises)
#   - format_alert() / format_period() turn one record into a text block
#   - get_alerts() / get_forecast() chain the two and map every failure to
#     its own user-facing message
#   The formatters are pure, so they are tested without any HTTP at all.
#
# INPUT VALIDATION:
#   The MCP layer (tools/mcp_server.py) validates arguments against the tool
#   schemas before these functions run.  Nothing here re-validates.
# =============================================================================

import logging

from core import nws
from core.models import Alert, ForecastPeriod

logger = logging.getLogger(__name__)

SEPARATOR = "---"


def format_coordinate(value: float) -> str:
    """Render a coordinate without a trailing ".0" for whole numbers."""
    value = float(value)
    return str(int(value)) if value.is_integer() else repr(value)


# =============================================================================
# FORMATTERS
# =============================================================================
def format_alert(alert: Alert) -> str:
    """Format one alert as a fixed-field block ending with a separator."""
    return "\n".join([
        f"Event: {alert.event or 'Unknown'}",
        f"Area: {alert.area_desc or 'Unknown'}",
        f"Severity: {alert.severity or 'Unknown'}",
        f"Status: {alert.status or 'Unknown'}",
        f"Headline: {alert.headline or 'No headline'}",
        SEPARATOR,
    ])


def format_period(period: ForecastPeriod) -> str:
    """Format one forecast period as a block ending with a separator."""
    # A 0° reading is a real temperature, so only a missing value is Unknown
    temperature = "Unknown" if period.temperature is None else period.temperature
    return "\n".join([
        f"{period.name or 'Unknown'}:",
        f"Temperature: {temperature}°{period.temperature_unit or 'F'}",
        f"Wind: {period.wind_speed or 'Unknown'} {period.wind_direction or ''}",
        f"{period.short_forecast or 'No forecast available'}",
        SEPARATOR,
    ])


# =============================================================================
# PUBLIC API: get_alerts
# =============================================================================
async def get_alerts(state: str) -> str:
    """Return the active weather alerts for a two-letter US state code.

    The code is upper-cased before the lookup, so "tx" and "TX" are the same
    request.  When the NWS is unreachable the result says so instead of
    raising.
    """
    state_code = state.upper()
    alerts_data = await nws.make_nws_request(nws.alerts_url(state_code))

    if alerts_data is None:
        return "Failed to retrieve alerts data"

    features = alerts_data.get("features") or []
    if not features:
        return f"No active alerts for {state_code}"

    logger.debug("Formatting %d alerts for %s", len(features), state_code)
    formatted_alerts = [format_alert(Alert.from_feature(f)) for f in features]
    return f"Active alerts for {state_code}:\n\n" + "\n".join(formatted_alerts)


# =============================================================================
# PUBLIC API: get_forecast
# =============================================================================
async def get_forecast(latitude: float, longitude: float) -> str:
    """Return the NWS forecast for a coordinate pair.

    This is a two-stage lookup:
      1. /points/{lat},{lon} resolves the coordinates to a grid point whose
         record carries the URL of that grid's forecast.
      2. That forecast URL is fetched and each period is formatted.

    Every way the chain can break has its own message, and the chain stops
    at the first break.  Only US territory is covered by the NWS, so a
    failed points lookup is reported as an unsupported location.
    """
    points_data = await nws.make_nws_request(nws.points_url(latitude, longitude))
    location = f"{format_coordinate(latitude)}, {format_coordinate(longitude)}"

    if points_data is None:
        return (
            f"Failed to retrieve grid point data for coordinates: {location}. "
            "This location may not be supported by the NWS API (only US locations are supported)."
        )

    forecast_url = (points_data.get("properties") or {}).get("forecast")
    if not forecast_url:
        return "Failed to get forecast URL from grid point data"

    forecast_data = await nws.make_nws_request(forecast_url)
    if forecast_data is None:
        return "Failed to retrieve forecast data"

    periods = (forecast_data.get("properties") or {}).get("periods") or []
    if not periods:
        return "No forecast periods available"

    formatted_forecast = [format_period(ForecastPeriod.from_dict(p)) for p in periods]
    return f"Forecast for {location}:\n\n" + "\n".join(formatted_forecast)
