# =============================================================================
# agent/resolver.py  —  Query Resolver (one query → one answer)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Turns one user query into one answer, calling at most one MCP tool on
#   the way.  The flow is a small state machine:
#
#     Start ──▶ ModelCalled ──┬──▶ Direct answer                (no tool call)
#                             └──▶ ToolRequested ──▶ ToolExecuted ──▶ Final answer
#
#   1. Start:         [system prompt, user query]
#   2. ModelCalled:   ask the LLM, offering every tool (tool_choice="auto")
#   3. No tool call:  return the LLM's text
#      Tool call(s):  act on the FIRST one only
#   4. ToolExecuted:  run it on the MCP server, append the assistant's
#                     tool-call turn and the tool's result turn
#   5. Final answer:  ask the LLM again (no tools this time)
#
# FIRST CALL WINS:
#   If the LLM asks for several tools at once, only the first runs.  The
#   rest are dropped with a warning in the log; they are never sent back to
#   the model, so the conversation holds exactly one resolved tool call.
#
# FAILURES:
#   Any exception (model API error, malformed tool-call JSON, MCP failure)
#   is caught once, in process_query(), and returned as a labelled error
#   string.  The chat loop carries on with the next query.
# =============================================================================

import json
import logging
from typing import Any, Awaitable, Callable, Optional, Sequence

import litellm

from agent.prompt import SYSTEM_PROMPT
from agent.settings import Settings
from core.models import (
    AssistantMessage,
    Message,
    SystemMessage,
    ToolDescriptor,
    ToolInvocation,
    ToolMessage,
    UserMessage,
)

logger = logging.getLogger(__name__)

NO_CONTENT = "[No content returned]"
NO_TOOL_RESULT = "[Tool returned no result]"
ERROR_PREFIX = "❌ Model request failed"

Completion = Callable[..., Awaitable[Any]]


def first_text(tool_result: Any) -> str:
    """Return the text of the first content segment of an MCP tool result."""
    content = getattr(tool_result, "content", None) or []
    if content:
        # An empty string is still a result; only a missing text field is not
        text = getattr(content[0], "text", None)
        if text is not None:
            return text
    return NO_TOOL_RESULT


class QueryResolver:
    """Resolves user queries against an LLM and a connected MCP server.

    Args:
        mcp_client: A connected `fastmcp.Client` (anything with an async
            `call_tool_mcp(name, arguments)` works).
        settings: Model id, credentials and sampling parameters.
        tools: Descriptors of the server's tools, listed once at startup.
        completion: Chat-completions coroutine; `litellm.acompletion` unless
            a test substitutes its own.
    """

    def __init__(
        self,
        mcp_client: Any,
        settings: Settings,
        tools: Sequence[ToolDescriptor] = (),
        completion: Optional[Completion] = None,
    ):
        self.mcp_client = mcp_client
        self.settings = settings
        self.tools = list(tools)
        self._completion = completion or litellm.acompletion

    async def _complete(self, conversation: list[Message], with_tools: bool) -> Any:
        """Send the conversation to the LLM and return the first message."""
        request: dict[str, Any] = {
            "model": self.settings.model,
            "messages": [message.to_dict() for message in conversation],
            "max_tokens": self.settings.max_tokens,
            "api_key": self.settings.api_key,
        }
        if self.settings.base_url:
            request["api_base"] = self.settings.base_url
        if with_tools:
            request["temperature"] = self.settings.temperature
            if self.tools:
                request["tools"] = [tool.to_function_tool() for tool in self.tools]
                request["tool_choice"] = "auto"

        response = await self._completion(**request)
        return response.choices[0].message

    async def _call_tool(self, invocation: ToolInvocation) -> str:
        result = await self.mcp_client.call_tool_mcp(invocation.name, invocation.arguments)
        return first_text(result)

    async def resolve(self, query: str) -> str:
        """Run the resolution flow; exceptions propagate to the caller."""
        conversation: list[Message] = [SystemMessage(SYSTEM_PROMPT), UserMessage(query)]

        message = await self._complete(conversation, with_tools=True)
        tool_calls = getattr(message, "tool_calls", None) or []

        if not tool_calls:
            return message.content or NO_CONTENT

        if len(tool_calls) > 1:
            dropped = [call.function.name for call in tool_calls[1:]]
            logger.warning("Model requested %d tool calls; ignoring all but the first: %s",
                           len(tool_calls), dropped)

        invocation = ToolInvocation.from_tool_call(tool_calls[0])
        print(f"\n🔧 Calling tool: {invocation.name}")
        print(f"📦 Arguments: {json.dumps(invocation.arguments, ensure_ascii=False)}")

        result_text = await self._call_tool(invocation)

        conversation.append(AssistantMessage(content=None, tool_calls=[invocation]))
        conversation.append(ToolMessage(tool_call_id=invocation.call_id, content=result_text))

        final = await self._complete(conversation, with_tools=False)
        return final.content or NO_CONTENT

    async def process_query(self, query: str) -> str:
        """Answer one query; failures come back as a labelled error string."""
        try:
            return await self.resolve(query)
        except Exception as e:
            logger.error("Query failed: %s", e)
            return f"{ERROR_PREFIX}: {e}"
