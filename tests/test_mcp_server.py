import pytest
from fastmcp import Client

from core import nws
from tools.mcp_server import mcp


@pytest.mark.asyncio
async def test_server_lists_both_weather_tools():
    async with Client(mcp) as client:
        tools = {tool.name: tool for tool in await client.list_tools()}

    assert set(tools) == {"get-alerts", "get-forecast"}
    assert tools["get-alerts"].description == "Get weather alerts for a state"

    state = tools["get-alerts"].inputSchema["properties"]["state"]
    assert state["minLength"] == 2 and state["maxLength"] == 2

    forecast_props = tools["get-forecast"].inputSchema["properties"]
    assert forecast_props["latitude"]["minimum"] == -90
    assert forecast_props["latitude"]["maximum"] == 90
    assert forecast_props["longitude"]["minimum"] == -180
    assert forecast_props["longitude"]["maximum"] == 180


@pytest.mark.asyncio
@pytest.mark.parametrize("state", ["", "C", "CAL", "Texas"])
async def test_alerts_rejects_bad_state_codes_without_fetching(fake_nws, state):
    async with Client(mcp) as client:
        result = await client.call_tool_mcp("get-alerts", {"state": state})

    assert result.isError
    assert fake_nws.urls == []


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "latitude, longitude",
    [(90.5, 0), (-91, 0), (0, 180.1), (0, -200), (1000, 1000)],
)
async def test_forecast_rejects_out_of_range_coordinates_without_fetching(fake_nws, latitude, longitude):
    async with Client(mcp) as client:
        result = await client.call_tool_mcp(
            "get-forecast", {"latitude": latitude, "longitude": longitude}
        )

    assert result.isError
    assert fake_nws.urls == []


@pytest.mark.asyncio
async def test_alerts_tool_returns_a_single_text_block(fake_nws):
    fake_nws.responses[nws.alerts_url("CA")] = {"features": []}

    async with Client(mcp) as client:
        result = await client.call_tool_mcp("get-alerts", {"state": "ca"})

    assert not result.isError
    assert result.content[0].type == "text"
    assert result.content[0].text == "No active alerts for CA"


@pytest.mark.asyncio
async def test_forecast_tool_reports_missing_forecast_url(fake_nws):
    points_url = nws.points_url(30.2672, -97.7431)
    fake_nws.responses[points_url] = {"properties": {"gridId": "EWX"}}

    async with Client(mcp) as client:
        result = await client.call_tool_mcp(
            "get-forecast", {"latitude": 30.2672, "longitude": -97.7431}
        )

    assert result.content[0].text == "Failed to get forecast URL from grid point data"
    assert fake_nws.urls == [points_url]


@pytest.mark.asyncio
async def test_forecast_tool_renders_whole_number_coordinates_without_decimals(fake_nws):
    async with Client(mcp) as client:
        result = await client.call_tool_mcp("get-forecast", {"latitude": 40, "longitude": -74})

    assert result.content[0].text.startswith(
        "Failed to retrieve grid point data for coordinates: 40, -74. "
    )
    assert fake_nws.urls == [nws.points_url(40, -74)]
