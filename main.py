# =============================================================================
# main.py  —  Entry Point for the Weather Chat Client
# =============================================================================
#
# HOW TO RUN:
#   python main.py tools/mcp_server.py
#   (any .py or .js MCP server script works)
#
# WHAT HAPPENS:
#   1. Loads settings from the environment / .env (agent/settings.py)
#   2. Launches the given MCP server script as a subprocess over stdio
#   3. Lists the server's tools and mirrors them for the LLM
#   4. Reads queries from the terminal, one at a time
#   5. Resolves each query (agent/resolver.py) and prints the answer
#
# THE LOOP:
#   Each query is handled completely (including every network call) before
#   the next line is read.  Typing "quit" (any case) ends the session; so
#   does EOF or Ctrl-C.  Blank lines are ordinary queries.
# =============================================================================

import argparse
import asyncio
import logging
import sys
from typing import Callable

from fastmcp import Client

from agent.resolver import QueryResolver
from agent.settings import ConfigError, Settings, load_settings
from core.models import ToolDescriptor

EXIT_KEYWORD = "quit"

logging.basicConfig(
    level=logging.WARNING,
    format="%(asctime)s [%(name)s] %(levelname)s %(message)s",
    datefmt="%H:%M:%S",
    stream=sys.stderr,
)

logger = logging.getLogger(__name__)


def check_server_script(server_script_path: str) -> None:
    """Only Python and JavaScript servers can be launched over stdio."""
    if not server_script_path.endswith((".py", ".js")):
        raise ValueError("Server script must be a .py or .js file")


async def list_tool_descriptors(mcp_client: Client) -> list[ToolDescriptor]:
    """Fetch the server's tool list once, at session start."""
    tools = await mcp_client.list_tools()
    return [ToolDescriptor.from_mcp_tool(tool) for tool in tools]


async def chat_loop(resolver: QueryResolver, read_line: Callable[[str], str] = input) -> None:
    """Read queries until the exit keyword and print each answer."""
    print("✅ MCP client started")
    print(f"💬 Type your question, or '{EXIT_KEYWORD}' to exit")

    while True:
        try:
            query = read_line("\nQuery: ")
        except (EOFError, KeyboardInterrupt):
            print("\n\n👋 Goodbye!")
            break

        if query.lower() == EXIT_KEYWORD:
            print("\n👋 Goodbye!")
            break

        answer = await resolver.process_query(query)
        print("\n🧠 Answer:\n" + answer)


async def run_client(server_script_path: str, settings: Settings) -> None:
    """Connect to the MCP server, then run the interactive loop."""
    check_server_script(server_script_path)

    # Client infers a Python or Node stdio transport from the file extension
    async with Client(server_script_path) as mcp_client:
        tools = await list_tool_descriptors(mcp_client)
        print("✅ Connected to server with tools:", [tool.name for tool in tools])

        resolver = QueryResolver(mcp_client, settings, tools)
        await chat_loop(resolver)


def main() -> None:
    parser = argparse.ArgumentParser(
        prog="main.py",
        description="Chat with an LLM that can call the tools of an MCP server.",
    )
    parser.add_argument("server_script", help="path to the MCP server script (.py or .js)")
    args = parser.parse_args()

    try:
        settings = load_settings()
    except ConfigError as e:
        print(f"❌ {e}", file=sys.stderr)
        sys.exit(1)

    asyncio.run(run_client(args.server_script, settings))


if __name__ == "__main__":
    main()
