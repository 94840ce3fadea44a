# =============================================================================
# tools/mcp_server.py  —  FastMCP Weather Tool Server
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Exposes the two weather lookups from core/weather.py as MCP tools:
#
#     get-alerts    (state)               → active alerts for a US state
#     get-forecast  (latitude, longitude) → forecast for a coordinate pair
#
# HOW IT WORKS (the flow):
#   1. The chat client (main.py) launches this script as a subprocess
#   2. It lists our tools and hands their schemas to the LLM
#   3. When the LLM asks for a tool, the client calls it here via MCP
#   4. FastMCP validates the arguments against the schema below; invalid
#      arguments are rejected before the handler (and any HTTP call) runs
#   5. The handler delegates to core/ and returns one text block
#
# Both tools are read-only and idempotent.
#
# RUNNING THIS SERVER:
#   a) Standalone:  python tools/mcp_server.py
#   b) From the client:  python main.py tools/mcp_server.py
#   It serves over stdio until the peer disconnects.
# =============================================================================

import logging
import os
import sys
from typing import Annotated

from dotenv import load_dotenv
from fastmcp import FastMCP
from pydantic import Field

# Launched as a script, the project root is not on sys.path yet
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from core import weather  # noqa: E402

# =============================================================================
# Logging Setup
# =============================================================================
# STDOUT carries the MCP protocol, so all logging goes to STDERR.
#
# ANSI colours:
#   CYAN   → incoming tool calls with their parameters
#   GREEN  → the text returned to the client
#   YELLOW → intermediate status messages
# =============================================================================

_CYAN = "\033[36m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_RESET = "\033[0m"

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [MCP] %(message)s",
    datefmt="%H:%M:%S",
    stream=sys.stderr,
)

logger = logging.getLogger(__name__)


def _log_request(tool_name: str, **params) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logger.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    """Log an intermediate status message in YELLOW."""
    logger.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, result: str) -> str:
    """Log the first line of the tool's text in GREEN, then return the text."""
    first_line = result.splitlines()[0] if result else ""
    logger.info(f"{_GREEN}  ← {tool_name} response: {first_line}{_RESET}")
    return result


# =============================================================================
# Create the FastMCP server instance
# =============================================================================
mcp = FastMCP("weather")


# =============================================================================
# TOOL 1: get-alerts
# =============================================================================
@mcp.tool(name="get-alerts", description="Get weather alerts for a state")
async def get_alerts(
    state: Annotated[
        str,
        Field(min_length=2, max_length=2, description="Two-letter state code (e.g. CA, NY)"),
    ],
) -> str:
    """Get weather alerts for a state."""
    _log_request("get-alerts", state=state)
    result = await weather.get_alerts(state)
    return _log_response("get-alerts", result)


# =============================================================================
# TOOL 2: get-forecast
# =============================================================================
# Two NWS calls happen behind this tool (points → forecast); see
# core/weather.py for the chain and its failure messages.
# =============================================================================
@mcp.tool(name="get-forecast", description="Get weather forecast for a location")
async def get_forecast(
    latitude: Annotated[float, Field(ge=-90, le=90, description="Latitude of the location")],
    longitude: Annotated[float, Field(ge=-180, le=180, description="Longitude of the location")],
) -> str:
    """Get weather forecast for a location."""
    _log_request("get-forecast", latitude=latitude, longitude=longitude)
    _log_status("Resolving grid point")
    result = await weather.get_forecast(latitude, longitude)
    return _log_response("get-forecast", result)


# =============================================================================
# Server entry point
# =============================================================================
def main() -> None:
    """Serve the weather tools over stdio."""
    load_dotenv()
    _log_status("Weather MCP server running on stdio")
    mcp.run()


if __name__ == "__main__":
    main()
