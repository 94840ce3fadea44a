# =============================================================================
# core/models.py  —  Data Models (the "nouns" of the system)
# =============================================================================
#
# Two families of dataclasses live here:
#
#   1. CONVERSATION MODELS — the messages exchanged with the LLM and the
#      tool calls it asks for.  Each role is its own class, so a tool message
#      always carries a tool_call_id and a system message never does.
#
#   2. WEATHER MODELS — typed views over the National Weather Service (NWS)
#      GeoJSON documents.  Every field is optional because the NWS omits
#      fields freely.
#
# Nothing here talks to the network, FastMCP or LiteLLM.
# =============================================================================

import json
from dataclasses import dataclass, field
from typing import Any, Optional, Union


# -----------------------------------------------------------------------------
# ToolDescriptor — one tool advertised by the MCP server
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class ToolDescriptor:
    """A tool as listed by the MCP server, mirrored for the LLM."""

    name: str
    description: str
    input_schema: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_mcp_tool(cls, tool: Any) -> "ToolDescriptor":
        """Build from an `mcp.types.Tool` returned by `list_tools()`."""
        return cls(
            name=tool.name,
            description=tool.description or "",
            input_schema=dict(tool.inputSchema or {}),
        )

    def to_function_tool(self) -> dict[str, Any]:
        """Render in the chat-completions function-calling shape."""
        return {
            "type": "function",
            "function": {
                "name": self.name,
                "description": self.description,
                "parameters": self.input_schema,
                "strict": False,           # Qwen-style endpoints read this
            },
        }


# -----------------------------------------------------------------------------
# ToolInvocation — the single tool call we act on per turn
# -----------------------------------------------------------------------------
@dataclass
class ToolInvocation:
    """A model-issued request to run one named tool."""

    name: str
    arguments: dict[str, Any]
    call_id: str
    raw_arguments: str = "{}"          # Exactly as the model sent it

    @classmethod
    def from_tool_call(cls, tool_call: Any) -> "ToolInvocation":
        """Parse a chat-completions tool call.

        Malformed JSON arguments raise `json.JSONDecodeError`; the caller
        decides how to report it.
        """
        raw = tool_call.function.arguments or "{}"
        return cls(
            name=tool_call.function.name,
            arguments=json.loads(raw),
            call_id=tool_call.id,
            raw_arguments=raw,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.call_id,
            "type": "function",
            "function": {"name": self.name, "arguments": self.raw_arguments},
        }


# -----------------------------------------------------------------------------
# Messages — one class per conversation role
# -----------------------------------------------------------------------------
@dataclass
class SystemMessage:
    content: str

    def to_dict(self) -> dict[str, Any]:
        return {"role": "system", "content": self.content}


@dataclass
class UserMessage:
    content: str

    def to_dict(self) -> dict[str, Any]:
        return {"role": "user", "content": self.content}


@dataclass
class AssistantMessage:
    """An assistant turn; `content` is None when it only requests tools."""

    content: Optional[str] = None
    tool_calls: list[ToolInvocation] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        message: dict[str, Any] = {"role": "assistant", "content": self.content}
        if self.tool_calls:
            message["tool_calls"] = [call.to_dict() for call in self.tool_calls]
        return message


@dataclass
class ToolMessage:
    """A tool result, keyed by the id of the call that produced it."""

    tool_call_id: str
    content: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "role": "tool",
            "tool_call_id": self.tool_call_id,
            "content": self.content,
        }


Message = Union[SystemMessage, UserMessage, AssistantMessage, ToolMessage]


# -----------------------------------------------------------------------------
# Alert — one entry of the NWS /alerts feature collection
# -----------------------------------------------------------------------------
@dataclass
class Alert:
    """The fields of an NWS alert that we show to the user."""

    event: Optional[str] = None
    area_desc: Optional[str] = None
    severity: Optional[str] = None
    status: Optional[str] = None
    headline: Optional[str] = None

    @classmethod
    def from_feature(cls, feature: dict[str, Any]) -> "Alert":
        props = feature.get("properties") or {}
        return cls(
            event=props.get("event"),
            area_desc=props.get("areaDesc"),
            severity=props.get("severity"),
            status=props.get("status"),
            headline=props.get("headline"),
        )


# -----------------------------------------------------------------------------
# ForecastPeriod — one period ("Tonight", "Tuesday", ...) of an NWS forecast
# -----------------------------------------------------------------------------
@dataclass
class ForecastPeriod:
    name: Optional[str] = None
    temperature: Optional[float] = None
    temperature_unit: Optional[str] = None      # "F" or "C"
    wind_speed: Optional[str] = None            # e.g. "5 to 10 mph"
    wind_direction: Optional[str] = None        # e.g. "SW"
    short_forecast: Optional[str] = None

    @classmethod
    def from_dict(cls, period: dict[str, Any]) -> "ForecastPeriod":
        return cls(
            name=period.get("name"),
            temperature=period.get("temperature"),
            temperature_unit=period.get("temperatureUnit"),
            wind_speed=period.get("windSpeed"),
            wind_direction=period.get("windDirection"),
            short_forecast=period.get("shortForecast"),
        )
