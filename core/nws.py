# =============================================================================
# core/nws.py  —  National Weather Service HTTP access
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Issues GET requests against api.weather.gov and returns the decoded
#   GeoJSON document, or None when anything goes wrong.
#
# FAILURE CONTRACT:
#   make_nws_request() never raises.  A non-2xx status, a network error or a
#   body that isn't JSON is logged and turned into None; the caller decides
#   what "no data" means for the user.  There is no retry, caching or
#   timeout: one failed call is final for that lookup.
#
# The NWS rejects requests without a User-Agent, so every call carries one.
# =============================================================================

import logging
from typing import Any, Optional

import httpx

logger = logging.getLogger(__name__)

NWS_API_BASE = "https://api.weather.gov"
USER_AGENT = "weather-app/1.0"


def alerts_url(state_code: str) -> str:
    """URL of the active-alerts collection for a two-letter state code."""
    return f"{NWS_API_BASE}/alerts?area={state_code}"


def points_url(latitude: float, longitude: float) -> str:
    """URL of the grid-point record for a coordinate pair."""
    return f"{NWS_API_BASE}/points/{latitude:.4f},{longitude:.4f}"


async def make_nws_request(
    url: str,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> Optional[dict[str, Any]]:
    """Fetch `url` from the NWS API and return its parsed JSON body.

    Args:
        url: Absolute URL; alert/points URLs come from the builders above,
             forecast URLs come from a points record.
        transport: Optional httpx transport, e.g. `httpx.MockTransport`.

    Returns:
        The decoded document, or None on any HTTP or transport failure.
    """
    headers = {
        "User-Agent": USER_AGENT,
        "Accept": "application/geo+json",
    }

    try:
        # NWS may redirect a /points/ lookup to its short-form coordinates
        async with httpx.AsyncClient(
            transport=transport, timeout=None, follow_redirects=True
        ) as client:
            response = await client.get(url, headers=headers)
            response.raise_for_status()
            return response.json()
    except httpx.HTTPStatusError as e:
        logger.error("NWS request to %s failed with HTTP status %s", url, e.response.status_code)
    except httpx.HTTPError as e:
        logger.error("NWS request to %s failed: %s", url, e)
    except ValueError as e:
        # response.json() raises a ValueError subclass on a non-JSON body
        logger.error("NWS response from %s was not valid JSON: %s", url, e)
    return None
